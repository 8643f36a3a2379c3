"""Token types produced by the tokenizer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from partglob.fragments import FragmentBuffer

__all__ = [
    "ExactLengthWildcard",
    "MinLengthWildcard",
    "Literal",
    "Token",
    "is_wildcard",
    "minimum_length",
    "merge_wildcards",
]


@dataclass(frozen=True)
class ExactLengthWildcard:
    """Matches exactly ``length`` arbitrary characters (``?`` runs)."""

    length: int

    def __post_init__(self) -> None:
        if self.length < 0:
            raise ValueError(f"Wildcard length must be >= 0, got {self.length}")


@dataclass(frozen=True)
class MinLengthWildcard:
    """Matches ``min_length`` or more arbitrary characters (``*`` runs)."""

    min_length: int

    def __post_init__(self) -> None:
        if self.min_length < 0:
            raise ValueError(f"Wildcard minimum length must be >= 0, got {self.min_length}")


@dataclass(frozen=True)
class Literal:
    """Matches the concatenated content of ``fragments`` exactly.

    The buffer is frozen on construction; a literal never changes after
    it has been created.
    """

    fragments: FragmentBuffer

    def __post_init__(self) -> None:
        self.fragments.freeze()


Token = Union[ExactLengthWildcard, MinLengthWildcard, Literal]


def is_wildcard(token: Token) -> bool:
    return isinstance(token, (ExactLengthWildcard, MinLengthWildcard))


def minimum_length(token: Token) -> int:
    """Fewest characters of input the token can match."""
    if isinstance(token, ExactLengthWildcard):
        return token.length
    if isinstance(token, MinLengthWildcard):
        return token.min_length
    return token.fragments.combined_length()


def merge_wildcards(first: Token, second: Token) -> Token:
    """Combine two adjacent wildcards into one.

    Two exact-length wildcards add up to an exact-length wildcard. As soon
    as a minimum-length wildcard is involved the result is a minimum-length
    wildcard whose bound is the sum of both operands' minimum lengths.

    Raises:
        TypeError: If either token is a Literal.
    """
    if not (is_wildcard(first) and is_wildcard(second)):
        raise TypeError(f"Only wildcards can be merged, got {first!r} and {second!r}")
    if isinstance(first, ExactLengthWildcard) and isinstance(second, ExactLengthWildcard):
        return ExactLengthWildcard(first.length + second.length)
    return MinLengthWildcard(minimum_length(first) + minimum_length(second))
