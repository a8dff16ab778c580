"""Error hierarchy for the swagspec schema engine."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "SwagspecError",
    "ConfigNotFoundError",
    "ConfigError",
    "TagParseError",
    "InvalidPatternError",
    "UnsupportedTypeError",
    "ErrorCodes",
]


class SwagspecError(Exception):
    """Base error for all swagspec errors.

    ``code`` is one of ``ErrorCodes``; ``details`` holds the offending
    field, tag or path so callers can report it without parsing ``message``.
    """

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
        self.details: dict[str, Any] = dict(details) if details else {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(SwagspecError):
    """The configuration path passed to ``Config.load`` does not exist."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"No swagspec configuration at {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(SwagspecError):
    """The configuration file exists but is not a usable YAML mapping."""

    def __init__(self, message: str, config_path: str | None = None, **kwargs: Any) -> None:
        details = {"config_path": config_path} if config_path else None
        super().__init__(code="CONFIG_INVALID", message=message, details=details, **kwargs)


class TagParseError(SwagspecError):
    """Raised when a field tag value cannot be parsed into its target type.

    A malformed tag is an authoring error in the type definition, so it
    aborts schema generation instead of producing a wrong schema.
    """

    def __init__(
        self,
        field: str,
        tag: str,
        value: str,
        reason: str | None = None,
        code: str = "TAG_PARSE_ERROR",
        **kwargs: Any,
    ) -> None:
        message = f"Invalid value {value!r} for tag '{tag}' on field '{field}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            code=code,
            message=message,
            details={"field": field, "tag": tag, "value": value},
            **kwargs,
        )

    @property
    def field(self) -> str:
        """The field whose tag failed to parse."""
        return self.details["field"]

    @property
    def tag(self) -> str:
        """The tag key that failed to parse."""
        return self.details["tag"]

    @property
    def value(self) -> str:
        """The raw tag value."""
        return self.details["value"]


class InvalidPatternError(TagParseError):
    """Raised when a pattern tag is not a valid regular expression."""

    def __init__(self, field: str, value: str, reason: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            field=field,
            tag="pattern",
            value=value,
            reason=reason,
            code="TAG_INVALID_PATTERN",
            **kwargs,
        )


class UnsupportedTypeError(SwagspecError):
    """Raised when a type annotation cannot be described."""

    def __init__(self, type_repr: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="UNSUPPORTED_TYPE",
            message=f"Unsupported type {type_repr}: {reason}",
            details={"type": type_repr, "reason": reason},
            **kwargs,
        )


class ErrorCodes:
    """All swagspec error codes as constants.

    Example:
        if error.code == ErrorCodes.TAG_INVALID_PATTERN:
            report_bad_pattern(error.field)
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    TAG_PARSE_ERROR = "TAG_PARSE_ERROR"
    TAG_INVALID_PATTERN = "TAG_INVALID_PATTERN"
    UNSUPPORTED_TYPE = "UNSUPPORTED_TYPE"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
