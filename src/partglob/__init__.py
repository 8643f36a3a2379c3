"""partglob - glob-style partial pattern matching.

Example:
    >>> from partglob import matches_partially, parse
    >>> matches_partially("path/to/*.yaml", "path/to/foo.yaml")
    True
    >>> pattern = parse("[*,*,*]")
    >>> pattern.matches_partially('{"key": [1, 2, 3]}')
    True
"""

from __future__ import annotations

# Core
from partglob.pattern import ParsedPattern, matches_partially, parse
from partglob.fragments import FragmentBuffer
from partglob.tokens import ExactLengthWildcard, Literal, MinLengthWildcard, Token

# Config
from partglob.config import Config

# Rule sets
from partglob.pattern_set import PatternRule, PatternSet

# Errors
from partglob.errors import (
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    GlobError,
    GlobParseError,
    PatternSetError,
    UnknownEscapeSequenceError,
    UnterminatedEscapeSequenceError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "parse",
    "matches_partially",
    "ParsedPattern",
    "FragmentBuffer",
    # Tokens
    "Token",
    "ExactLengthWildcard",
    "MinLengthWildcard",
    "Literal",
    # Config
    "Config",
    # Rule sets
    "PatternRule",
    "PatternSet",
    # Errors
    "ErrorCodes",
    "GlobError",
    "GlobParseError",
    "UnknownEscapeSequenceError",
    "UnterminatedEscapeSequenceError",
    "ConfigError",
    "ConfigNotFoundError",
    "PatternSetError",
]
