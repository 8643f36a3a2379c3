"""Tokenizer turning a raw pattern string into a merged token sequence.

Pattern syntax:
    ``*``  zero or more arbitrary characters
    ``?``  exactly one arbitrary character
    ``\\*``, ``\\?``, ``\\\\``  the literal characters ``*``, ``?`` and ``\\``

A backslash followed by any other character, or a trailing backslash, is an
error. Indices in errors are ``str`` indices into the pattern.
"""

from __future__ import annotations

import logging
from enum import Enum

from partglob.errors import UnknownEscapeSequenceError, UnterminatedEscapeSequenceError
from partglob.fragments import FragmentBuffer
from partglob.tokens import (
    ExactLengthWildcard,
    Literal,
    MinLengthWildcard,
    Token,
    merge_wildcards,
)

__all__ = ["tokenize", "ESCAPE_CHARACTER", "WILDCARD_CHARACTERS"]

logger = logging.getLogger(__name__)

ESCAPE_CHARACTER = "\\"
WILDCARD_CHARACTERS = frozenset("*?")
_ESCAPABLE = WILDCARD_CHARACTERS | {ESCAPE_CHARACTER}


class _State(Enum):
    EXPECT_NEW = "expect_new"
    LITERAL = "literal"
    EXPECT_ESCAPED = "expect_escaped"


def _wildcard_for(char: str) -> Token:
    if char == "*":
        return MinLengthWildcard(0)
    return ExactLengthWildcard(1)


def _append_wildcard(tokens: list[Token], token: Token) -> None:
    if tokens and not isinstance(tokens[-1], Literal):
        tokens[-1] = merge_wildcards(tokens[-1], token)
    else:
        tokens.append(token)


def _flush_literal(tokens: list[Token], pending: list[str]) -> None:
    if pending:
        tokens.append(Literal(FragmentBuffer(*pending)))
        pending.clear()


def tokenize(pattern: str) -> list[Token]:
    """Convert ``pattern`` into a token sequence in a single left-to-right pass.

    Adjacent wildcards are merged arithmetically and adjacent literal runs
    are collected into one frozen FragmentBuffer, so no two neighbouring
    tokens are both wildcards or both literals.

    Raises:
        UnknownEscapeSequenceError: A backslash escapes an unsupported character.
        UnterminatedEscapeSequenceError: The pattern ends with a lone backslash.
    """
    tokens: list[Token] = []
    pending: list[str] = []
    state = _State.EXPECT_NEW
    start = end = 0

    for i, char in enumerate(pattern):
        if state is _State.EXPECT_ESCAPED:
            if char not in _ESCAPABLE:
                logger.debug("Unknown escape sequence in pattern %r at index %d", pattern, i - 1)
                raise UnknownEscapeSequenceError(i - 1, pattern[i - 1 : i + 1])
            start, end = i, i + 1
            state = _State.LITERAL
        elif char in WILDCARD_CHARACTERS:
            if state is _State.LITERAL:
                pending.append(pattern[start:end])
                state = _State.EXPECT_NEW
            _flush_literal(tokens, pending)
            _append_wildcard(tokens, _wildcard_for(char))
        elif char == ESCAPE_CHARACTER:
            if state is _State.LITERAL:
                pending.append(pattern[start:end])
            state = _State.EXPECT_ESCAPED
        elif state is _State.LITERAL:
            end = i + 1
        else:
            start, end = i, i + 1
            state = _State.LITERAL

    if state is _State.EXPECT_ESCAPED:
        logger.debug("Unterminated escape sequence at end of pattern %r", pattern)
        raise UnterminatedEscapeSequenceError(len(pattern) - 1)
    if state is _State.LITERAL:
        pending.append(pattern[start:end])
    _flush_literal(tokens, pending)

    logger.debug("Tokenized pattern %r into %d token(s)", pattern, len(tokens))
    return tokens
