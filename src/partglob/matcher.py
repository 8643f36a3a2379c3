"""Backtracking matcher evaluating a token sequence against a string.

Matching runs in one of two modes:

* anchored: the next token must start matching exactly at the current
  position.
* unanchored: the next token may start matching anywhere at or after the
  current position.

Exact-length wildcards keep the current mode, minimum-length wildcards
switch to unanchored, and literals switch to anchored once placed. Neither
mode requires the whole string to be consumed.

The only choice points are literals met in unanchored mode: every
occurrence of the literal is a candidate placement, tried in ascending
order. Choice points live on an explicit stack instead of the call stack,
so pattern length is not limited by the interpreter's recursion limit.
There is no memoization, so adversarial inputs can take exponential time.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from partglob.tokens import ExactLengthWildcard, MinLengthWildcard, Token

__all__ = ["matches_anchored", "matches_unanchored"]


@dataclass
class _ChoicePoint:
    """Untried placements of a literal found in unanchored mode."""

    next_index: int
    length: int
    offsets: Iterator[int]


def matches_anchored(tokens: Sequence[Token], text: str, start: int = 0) -> bool:
    """Check whether ``tokens`` match ``text`` beginning exactly at ``start``."""
    return _match(tokens, text, start, anchored=True)


def matches_unanchored(tokens: Sequence[Token], text: str, start: int = 0) -> bool:
    """Check whether ``tokens`` match ``text`` anywhere at or after ``start``."""
    return _match(tokens, text, start, anchored=False)


def _match(tokens: Sequence[Token], text: str, position: int, anchored: bool) -> bool:
    choices: list[_ChoicePoint] = []
    index = 0

    while True:
        if index == len(tokens):
            return True
        token = tokens[index]

        if isinstance(token, ExactLengthWildcard):
            if len(text) - position >= token.length:
                index += 1
                position += token.length
                continue
        elif isinstance(token, MinLengthWildcard):
            if len(text) - position >= token.min_length:
                index += 1
                position += token.min_length
                anchored = False
                continue
        elif anchored:
            if token.fragments.matches_prefix_of(text, position):
                index += 1
                position += token.fragments.combined_length()
                continue
        else:
            choices.append(
                _ChoicePoint(
                    next_index=index + 1,
                    length=token.fragments.combined_length(),
                    offsets=token.fragments.find_all_occurrences_in(text, position),
                )
            )

        # Resume from the most recent literal with an untried occurrence.
        while choices:
            choice = choices[-1]
            offset = next(choice.offsets, None)
            if offset is None:
                choices.pop()
                continue
            index = choice.next_index
            position = offset + choice.length
            anchored = True
            break
        else:
            return False
