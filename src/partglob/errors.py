"""Error hierarchy for partglob."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "GlobError",
    "GlobParseError",
    "UnknownEscapeSequenceError",
    "UnterminatedEscapeSequenceError",
    "ConfigNotFoundError",
    "ConfigError",
    "PatternSetError",
    "ErrorCodes",
]


class GlobError(Exception):
    """Base error for all partglob errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class GlobParseError(GlobError):
    """Raised when a pattern string is not well-formed.

    Parsing stops at the first problem; no partial token sequence is kept.
    """

    @property
    def index(self) -> int:
        """Index into the pattern string at which the problem was detected."""
        return self.details["index"]


class UnknownEscapeSequenceError(GlobParseError):
    """Raised when a backslash escapes anything other than ``*``, ``?`` or ``\\``."""

    def __init__(self, index: int, text: str, **kwargs: Any) -> None:
        super().__init__(
            code="UNKNOWN_ESCAPE_SEQUENCE",
            message=f"Unknown escape sequence {text!r} at index {index}",
            details={"index": index, "text": text},
            **kwargs,
        )

    @property
    def text(self) -> str:
        """The offending two-character escape sequence."""
        return self.details["text"]


class UnterminatedEscapeSequenceError(GlobParseError):
    """Raised when the pattern ends with an unescaped backslash."""

    def __init__(self, index: int, **kwargs: Any) -> None:
        super().__init__(
            code="UNTERMINATED_ESCAPE_SEQUENCE",
            message=f"Unterminated escape sequence at index {index}",
            details={"index": index},
            **kwargs,
        )


class ConfigNotFoundError(GlobError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )

    @property
    def config_path(self) -> str:
        """The path that could not be found."""
        return self.details["config_path"]


class ConfigError(GlobError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class PatternSetError(GlobError):
    """Raised when a pattern rule set definition is invalid."""

    def __init__(
        self,
        message: str,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            code="PATTERN_SET_INVALID",
            message=message,
            details={"errors": errors or []},
            **kwargs,
        )


class ErrorCodes:
    """All partglob error codes as constants.

    Example:
        if error.code == ErrorCodes.UNKNOWN_ESCAPE_SEQUENCE:
            reject_pattern()
    """

    UNKNOWN_ESCAPE_SEQUENCE = "UNKNOWN_ESCAPE_SEQUENCE"
    UNTERMINATED_ESCAPE_SEQUENCE = "UNTERMINATED_ESCAPE_SEQUENCE"
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    PATTERN_SET_INVALID = "PATTERN_SET_INVALID"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
