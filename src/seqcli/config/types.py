"""Type definitions for the configuration schema: field kinds, fields, and parse results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Annotated, Any, NamedTuple, Union

from pydantic import Field

if TYPE_CHECKING:
    from seqcli.config.schema import ConfigNode

__all__ = [
    "PrimitiveType",
    "Int32",
    "UInt32",
    "Int64",
    "UInt64",
    "PrimitiveKind",
    "EnumKind",
    "NodeKind",
    "CollectionKind",
    "FieldKind",
    "ConfigField",
    "ParseResult",
    "LeafPair",
]


class PrimitiveType(str, Enum):
    """Primitive value types a configuration field can hold."""

    STRING = "string"
    BOOLEAN = "boolean"
    INT32 = "int32"
    UINT32 = "uint32"
    INT64 = "int64"
    UINT64 = "uint64"
    FLOAT64 = "float64"


# Fixed-width integers, one per integer PrimitiveType whether or not the bundled
# model uses it. The trailing PrimitiveType marker is read by the schema builder;
# pydantic ignores it and enforces the bounds.
Int32 = Annotated[int, Field(ge=-(2**31), le=2**31 - 1), PrimitiveType.INT32]
UInt32 = Annotated[int, Field(ge=0, le=2**32 - 1), PrimitiveType.UINT32]
Int64 = Annotated[int, Field(ge=-(2**63), le=2**63 - 1), PrimitiveType.INT64]
UInt64 = Annotated[int, Field(ge=0, le=2**64 - 1), PrimitiveType.UINT64]


@dataclass(frozen=True)
class PrimitiveKind:
    """A leaf holding a string, boolean or number."""

    type: PrimitiveType


@dataclass(frozen=True)
class EnumKind:
    """A leaf holding a member of an enumeration."""

    enum_type: type[Enum]


@dataclass(frozen=True)
class NodeKind:
    """A nested configuration node."""

    node_type: type[ConfigNode]


@dataclass(frozen=True)
class CollectionKind:
    """A string-keyed dictionary of configuration nodes."""

    element_type: type[ConfigNode]


FieldKind = Union[PrimitiveKind, EnumKind, NodeKind, CollectionKind]


@dataclass(frozen=True)
class ConfigField:
    """One externally addressable field of a configuration node."""

    name: str
    external_name: str
    kind: FieldKind
    nullable: bool = False

    @property
    def type_name(self) -> str:
        """Human-readable description of the field's type, used in error messages."""
        kind = self.kind
        if isinstance(kind, PrimitiveKind):
            base = kind.type.value
        elif isinstance(kind, EnumKind):
            base = kind.enum_type.__name__
        elif isinstance(kind, NodeKind):
            base = kind.node_type.__name__
        else:
            base = f"dict[str, {kind.element_type.__name__}]"
        return f"nullable {base}" if self.nullable else base

    def get(self, node: Any) -> Any:
        return getattr(node, self.name)

    def set(self, node: Any, value: Any) -> None:
        setattr(node, self.name, value)


@dataclass(frozen=True)
class ParseResult:
    """Outcome of coercing raw text: either a value or an error message."""

    value: Any = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Any) -> ParseResult:
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> ParseResult:
        return cls(error=error)


class LeafPair(NamedTuple):
    """A fully qualified dotted path and the leaf value found there."""

    path: str
    value: Any
