"""ParsedPattern and the one-shot matching helper."""

from __future__ import annotations

from collections.abc import Sequence

from partglob.matcher import matches_unanchored
from partglob.parser import tokenize
from partglob.tokens import Token

__all__ = ["ParsedPattern", "parse", "matches_partially"]


class ParsedPattern:
    """A tokenized glob pattern, ready to be matched against many strings.

    Instances are immutable and can be shared between threads without
    synchronization. Use :func:`parse` to create one.
    """

    __slots__ = ("_pattern", "_tokens")

    def __init__(self, pattern: str, tokens: Sequence[Token]) -> None:
        self._pattern = pattern
        self._tokens: tuple[Token, ...] = tuple(tokens)

    @property
    def pattern(self) -> str:
        """The pattern string this instance was parsed from."""
        return self._pattern

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self._tokens

    def matches_partially(self, candidate: str) -> bool:
        """Check if this pattern occurs anywhere in ``candidate``.

        Example:
            >>> parse("thesis-*.pdf").matches_partially("My Documents/thesis/thesis-final-2.pdf")
            True
        """
        return matches_unanchored(self._tokens, candidate)

    def __eq__(self, other: object) -> bool:
        # Compared by tokens, so "a**" and "a*" are the same pattern.
        if isinstance(other, ParsedPattern):
            return self._tokens == other._tokens
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._tokens)

    def __repr__(self) -> str:
        return f"ParsedPattern({self._pattern!r})"


def parse(pattern: str) -> ParsedPattern:
    """Parse ``pattern`` into a :class:`ParsedPattern`.

    Raises:
        GlobParseError: If the pattern contains an unknown or unterminated
            escape sequence.
    """
    return ParsedPattern(pattern, tokenize(pattern))


def matches_partially(pattern: str, candidate: str) -> bool:
    """Check if ``pattern`` occurs anywhere in ``candidate``.

    The pattern is parsed on every call. Parse ``pattern`` once with
    :func:`parse` when matching it against many strings.

    Raises:
        GlobParseError: If the pattern is not well-formed. No matching is
            attempted in that case.
    """
    return parse(pattern).matches_partially(candidate)
