"""Configuration node base class and the per-class field schema.

Every configuration node is a pydantic model deriving from :class:`ConfigNode`.
:func:`describe_node` turns a node class into an ordered mapping from external
(lowerCamelCase) field name to :class:`ConfigField`, classifying each declared
field as a primitive, enumeration, nested node or keyed collection. The mapping is
built once per class and cached, so traversal and coercion never inspect runtime
value types.
"""

from __future__ import annotations

import functools
import types
import typing
from enum import Enum
from typing import Annotated, Any, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict

from seqcli.config.types import (
    CollectionKind,
    ConfigField,
    EnumKind,
    FieldKind,
    NodeKind,
    PrimitiveKind,
    PrimitiveType,
)
from seqcli.errors import ConfigSchemaError

__all__ = ["ConfigNode", "camelize", "describe_node"]

_DEFAULT_PRIMITIVES: dict[type, PrimitiveType] = {
    str: PrimitiveType.STRING,
    bool: PrimitiveType.BOOLEAN,
    int: PrimitiveType.INT64,
    float: PrimitiveType.FLOAT64,
}


def camelize(name: str) -> str:
    """Convert an attribute name to its external lowerCamelCase form.

    ``server_url`` becomes ``serverUrl``; ``serverUrl`` is returned unchanged.
    """
    if len(name) < 2:
        raise ConfigSchemaError(message=f"No camel-case support for short names: {name!r}")
    first, *rest = name.split("_")
    return first[:1].lower() + first[1:] + "".join(part[:1].upper() + part[1:] for part in rest)


class ConfigNode(BaseModel):
    """Base class for all configuration nodes.

    Fields are persisted under their camelized names; construction by attribute
    name is also accepted.
    """

    model_config = ConfigDict(alias_generator=camelize, populate_by_name=True)


@functools.cache
def describe_node(node_type: type[ConfigNode]) -> dict[str, ConfigField]:
    """Build the field schema for a node class, ordered by internal field name."""
    if not (isinstance(node_type, type) and issubclass(node_type, ConfigNode)):
        raise ConfigSchemaError(message=f"{node_type!r} is not a configuration node type")

    members: dict[str, tuple[Any, list[Any]]] = {}
    for name, field_info in node_type.model_fields.items():
        members[name] = (field_info.annotation, list(field_info.metadata))
    for name, prop in _settable_properties(node_type).items():
        hints = typing.get_type_hints(prop.fget, include_extras=True)
        if "return" not in hints:
            raise ConfigSchemaError(
                message=f"Property '{node_type.__name__}.{name}' needs a return annotation to be configurable"
            )
        members[name] = (hints["return"], [])

    fields: dict[str, ConfigField] = {}
    for name in sorted(members):
        annotation, metadata = members[name]
        kind, nullable = _classify(annotation, metadata, f"{node_type.__name__}.{name}")
        external_name = camelize(name)
        if external_name in fields:
            raise ConfigSchemaError(
                message=(
                    f"Fields '{fields[external_name].name}' and '{name}' of {node_type.__name__} "
                    f"are both exposed as '{external_name}'"
                )
            )
        fields[external_name] = ConfigField(name=name, external_name=external_name, kind=kind, nullable=nullable)
    return fields


def _settable_properties(node_type: type[ConfigNode]) -> dict[str, property]:
    """Public properties with setters declared on the node class or its node bases."""
    found: dict[str, property] = {}
    for klass in reversed(node_type.__mro__):
        if not (isinstance(klass, type) and issubclass(klass, ConfigNode)) or klass is ConfigNode:
            continue
        for name, attr in vars(klass).items():
            if isinstance(attr, property) and attr.fset is not None and not name.startswith("_"):
                found[name] = attr
    return found


def _strip_annotated(annotation: Any) -> tuple[Any, list[Any]]:
    if get_origin(annotation) is Annotated:
        base, *metadata = get_args(annotation)
        return base, metadata
    return annotation, []


def _classify(annotation: Any, metadata: list[Any], where: str) -> tuple[FieldKind, bool]:
    """Map a declared annotation to a field kind and nullability."""
    annotation, extra = _strip_annotated(annotation)
    markers = metadata + extra
    nullable = False

    if get_origin(annotation) in (Union, types.UnionType):
        args = get_args(annotation)
        non_null = [arg for arg in args if arg is not type(None)]
        if len(non_null) != 1 or len(args) != 2:
            raise ConfigSchemaError(message=f"Unsupported union type for '{where}': {annotation!r}")
        nullable = True
        annotation, extra = _strip_annotated(non_null[0])
        markers = markers + extra

    if isinstance(annotation, type) and issubclass(annotation, Enum):
        return EnumKind(enum_type=annotation), nullable

    if isinstance(annotation, type) and issubclass(annotation, ConfigNode):
        return NodeKind(node_type=annotation), nullable

    if get_origin(annotation) is dict:
        key_type, value_type = get_args(annotation)
        if key_type is not str or not (isinstance(value_type, type) and issubclass(value_type, ConfigNode)):
            raise ConfigSchemaError(
                message=f"Collection '{where}' must map str keys to configuration nodes, got {annotation!r}"
            )
        return CollectionKind(element_type=value_type), nullable

    for marker in markers:
        if isinstance(marker, PrimitiveType):
            return PrimitiveKind(type=marker), nullable

    primitive = _DEFAULT_PRIMITIVES.get(annotation) if isinstance(annotation, type) else None
    if primitive is None:
        raise ConfigSchemaError(message=f"Unsupported type for configuration field '{where}': {annotation!r}")
    return PrimitiveKind(type=primitive), nullable
