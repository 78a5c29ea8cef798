"""Error hierarchy for seqcli."""

from __future__ import annotations

from typing import Any

__all__ = [
    "SeqCliError",
    "ConfigKeyNotFoundError",
    "ConfigValueParseError",
    "ConfigSchemaError",
    "ConfigFileError",
    "ErrorCodes",
]


class SeqCliError(Exception):
    """Base error for all seqcli errors."""

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

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigKeyNotFoundError(SeqCliError):
    """Raised when a dotted configuration path does not resolve to a field."""

    def __init__(self, key: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_KEY_NOT_FOUND",
            message=message or f"Option {key} not found.",
            details={"key": key},
            **kwargs,
        )

    @property
    def key(self) -> str:
        """The full path that could not be resolved."""
        return self.details["key"]


class ConfigValueParseError(SeqCliError):
    """Raised when a text value cannot be coerced to the field's type."""

    def __init__(self, key: str, value: str | None, reason: str, expected: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_VALUE_PARSE_ERROR",
            message=f"Unable to parse {value!r} for property {key}: {reason}",
            details={"key": key, "value": value, "expected": expected},
            **kwargs,
        )

    @property
    def key(self) -> str:
        """The full path of the field being set."""
        return self.details["key"]

    @property
    def value(self) -> str | None:
        """The rejected raw text."""
        return self.details["value"]


class ConfigSchemaError(SeqCliError):
    """Raised when a configuration node class cannot be described as a schema."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_SCHEMA_ERROR", message=message, **kwargs)


class ConfigFileError(SeqCliError):
    """Raised when the configuration file cannot be read or is invalid."""

    def __init__(self, config_path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_FILE_INVALID",
            message=f"Invalid configuration file '{config_path}': {reason}",
            details={"config_path": config_path, "reason": reason},
            **kwargs,
        )


class ErrorCodes:
    """All seqcli error codes as constants.

    Example:
        if error.code == ErrorCodes.CONFIG_KEY_NOT_FOUND:
            suggest_listing_keys()
    """

    CONFIG_KEY_NOT_FOUND = "CONFIG_KEY_NOT_FOUND"
    CONFIG_VALUE_PARSE_ERROR = "CONFIG_VALUE_PARSE_ERROR"
    CONFIG_SCHEMA_ERROR = "CONFIG_SCHEMA_ERROR"
    CONFIG_FILE_INVALID = "CONFIG_FILE_INVALID"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
