"""Text-to-value coercion and value formatting for configuration fields."""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Callable

from seqcli.config.types import ConfigField, EnumKind, ParseResult, PrimitiveKind, PrimitiveType

__all__ = ["coerce", "format_value", "parse_enum", "parse_primitive", "zero_value"]

_INTEGER_PATTERN = re.compile(r"^\s*[+-]?[0-9]+\s*$")
_FLOAT_PATTERN = re.compile(
    r"^\s*[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|nan|infinity|inf)\s*$",
    re.IGNORECASE,
)

_INTEGER_RANGES: dict[PrimitiveType, tuple[int, int]] = {
    PrimitiveType.INT32: (-(2**31), 2**31 - 1),
    PrimitiveType.UINT32: (0, 2**32 - 1),
    PrimitiveType.INT64: (-(2**63), 2**63 - 1),
    PrimitiveType.UINT64: (0, 2**64 - 1),
}

_ZERO_VALUES: dict[PrimitiveType, Any] = {
    PrimitiveType.STRING: "",
    PrimitiveType.BOOLEAN: False,
    PrimitiveType.INT32: 0,
    PrimitiveType.UINT32: 0,
    PrimitiveType.INT64: 0,
    PrimitiveType.UINT64: 0,
    PrimitiveType.FLOAT64: 0.0,
}


def _parse_string(text: str) -> ParseResult:
    return ParseResult.success(text)


def _parse_boolean(text: str) -> ParseResult:
    normalized = text.strip().lower()
    if normalized == "true":
        return ParseResult.success(True)
    if normalized == "false":
        return ParseResult.success(False)
    return ParseResult.failure("expected 'True' or 'False'")


def _integer_parser(primitive: PrimitiveType) -> Callable[[str], ParseResult]:
    low, high = _INTEGER_RANGES[primitive]
    max_digits = max(len(str(abs(low))), len(str(high)))

    def parse(text: str) -> ParseResult:
        if not _INTEGER_PATTERN.match(text):
            return ParseResult.failure(f"expected an integer ({primitive.value})")
        out_of_range = ParseResult.failure(f"value is outside the range of {primitive.value} ({low} to {high})")
        stripped = text.strip()
        digits = stripped.lstrip("+-").lstrip("0") or "0"
        # Checked before int(), which refuses digit strings past the interpreter's limit.
        if len(digits) > max_digits:
            return out_of_range
        value = -int(digits) if stripped.startswith("-") else int(digits)
        if not low <= value <= high:
            return out_of_range
        return ParseResult.success(value)

    return parse


def _parse_float(text: str) -> ParseResult:
    if not _FLOAT_PATTERN.match(text):
        return ParseResult.failure("expected a number")
    return ParseResult.success(float(text.strip()))


_PARSERS: dict[PrimitiveType, Callable[[str], ParseResult]] = {
    PrimitiveType.STRING: _parse_string,
    PrimitiveType.BOOLEAN: _parse_boolean,
    PrimitiveType.INT32: _integer_parser(PrimitiveType.INT32),
    PrimitiveType.UINT32: _integer_parser(PrimitiveType.UINT32),
    PrimitiveType.INT64: _integer_parser(PrimitiveType.INT64),
    PrimitiveType.UINT64: _integer_parser(PrimitiveType.UINT64),
    PrimitiveType.FLOAT64: _parse_float,
}


def parse_primitive(primitive: PrimitiveType, text: str) -> ParseResult:
    """Parse non-empty text as the given primitive type using invariant syntax."""
    return _PARSERS[primitive](text)


def parse_enum(enum_type: type[Enum], text: str | None) -> ParseResult:
    """Match text against an enumeration's member names and values, ignoring case."""
    if text is None or not text.strip():
        return ParseResult.failure(f"expected one of {_member_list(enum_type)}")
    wanted = text.strip().lower()
    for member in enum_type:
        if member.name.lower() == wanted or str(member.value).lower() == wanted:
            return ParseResult.success(member)
    return ParseResult.failure(f"expected one of {_member_list(enum_type)}")


def zero_value(primitive: PrimitiveType) -> Any:
    """The value a non-nullable primitive field takes when cleared."""
    return _ZERO_VALUES[primitive]


def coerce(field: ConfigField, text: str | None) -> ParseResult:
    """Convert raw text (or ``None``) into a value assignable to ``field``.

    Empty or missing text clears the field: ``None`` for nullable fields, the type's
    zero value otherwise. Enumerations must always name a member unless nullable.
    """
    kind = field.kind
    empty = text is None or text == ""

    if isinstance(kind, EnumKind):
        if empty and field.nullable:
            return ParseResult.success(None)
        return parse_enum(kind.enum_type, text)

    if isinstance(kind, PrimitiveKind):
        if empty:
            return ParseResult.success(None if field.nullable else zero_value(kind.type))
        return parse_primitive(kind.type, text)

    if empty and field.nullable:
        return ParseResult.success(None)
    return ParseResult.failure(f"'{field.external_name}' is a section and cannot be assigned a value")


def format_value(value: Any) -> str:
    """Render a leaf value for display; ``None`` renders as an empty string."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, Enum):
        return value.value if isinstance(value.value, str) else value.name
    if isinstance(value, float):
        return repr(value)
    return str(value)


def _member_list(enum_type: type[Enum]) -> str:
    return ", ".join(format_value(member) for member in enum_type)
