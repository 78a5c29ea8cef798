"""Dotted-path access to a configuration tree.

Given ``config = {connection: {serverUrl: "http://localhost:5341"}, profiles: {prod: {...}}}``:

* :func:`read_pairs` yields ``("connection.serverUrl", "http://localhost:5341")`` and
  ``("profiles[prod].serverUrl", ...)``
* :func:`set_value` with ``"connection.serverUrl"`` and ``"https://seq.example.com"``
  updates the nested field in place
* :func:`clear_value` resets a field to ``None`` or its type's zero value
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass

from seqcli.config.coercion import coerce, format_value
from seqcli.config.schema import ConfigNode, describe_node
from seqcli.config.types import CollectionKind, LeafPair, NodeKind
from seqcli.errors import ConfigKeyNotFoundError, ConfigSchemaError, ConfigValueParseError

__all__ = [
    "ENCODED_PREFIX",
    "PathSegment",
    "clear_value",
    "get_value",
    "list_pairs",
    "parse_path",
    "print_value",
    "read_pairs",
    "set_value",
]

logger = logging.getLogger(__name__)

# Fields holding the stored form of a value that is exposed under another name.
ENCODED_PREFIX = "encoded_"

_SEGMENT_PATTERN = re.compile(r"(?P<name>[^.\[\]]+)(?:\[(?P<selector>[^\]]*)\])?")

_SET_NOT_FOUND = "The key ({key}) could not be found; run the command without any arguments to view all keys."


@dataclass(frozen=True)
class PathSegment:
    """One step of a dotted path: a field name and an optional collection selector."""

    name: str
    selector: str | None = None


def parse_path(key: str) -> list[PathSegment]:
    """Split a dotted path into segments, keeping dots inside ``[...]`` selectors."""
    segments: list[PathSegment] = []
    pos = 0
    while True:
        match = _SEGMENT_PATTERN.match(key, pos)
        if match is None:
            raise ConfigKeyNotFoundError(key, message=_SET_NOT_FOUND.format(key=key))
        segments.append(PathSegment(name=match["name"], selector=match["selector"]))
        pos = match.end()
        if pos == len(key):
            return segments
        if key[pos] != ".":
            raise ConfigKeyNotFoundError(key, message=_SET_NOT_FOUND.format(key=key))
        pos += 1


def read_pairs(node: ConfigNode) -> Iterator[LeafPair]:
    """Yield every leaf of the tree as a (dotted path, value) pair.

    Fields are visited in internal-name order and collection elements in the
    collection's own order. Encoded fields are skipped.
    """
    for field in describe_node(type(node)).values():
        if field.name.startswith(ENCODED_PREFIX):
            continue

        value = field.get(node)
        if isinstance(field.kind, CollectionKind) and value is not None:
            for element_key, element in value.items():
                for sub_path, sub_value in read_pairs(element):
                    yield LeafPair(f"{field.external_name}[{element_key}].{sub_path}", sub_value)
        elif isinstance(field.kind, NodeKind) and value is not None:
            for sub_path, sub_value in read_pairs(value):
                yield LeafPair(f"{field.external_name}.{sub_path}", sub_value)
        else:
            yield LeafPair(field.external_name, value)


def list_pairs(config: ConfigNode) -> Iterator[tuple[str, str]]:
    """Yield every leaf path with its formatted value."""
    for path, value in read_pairs(config):
        yield path, format_value(value)


def get_value(config: ConfigNode, key: str) -> object:
    """Return the leaf value at exactly ``key``."""
    matches = [pair for pair in read_pairs(config) if pair.path == key]
    if not matches:
        raise ConfigKeyNotFoundError(key)
    if len(matches) > 1:
        raise ConfigSchemaError(message=f"Option {key} matches {len(matches)} fields")
    return matches[0].value


def print_value(config: ConfigNode, key: str) -> str:
    """Return the formatted leaf value at exactly ``key``."""
    return format_value(get_value(config, key))


def set_value(config: ConfigNode, key: str, value: str | None) -> None:
    """Coerce ``value`` to the type of the field at ``key`` and assign it in place.

    ``None`` or an empty string clears the field.
    """
    if not key or not key.strip():
        raise ConfigKeyNotFoundError(key or "", message="A configuration key must be specified.")

    _set_path(config, parse_path(key), key, value)
    if value is None or value == "":
        logger.debug("Cleared configuration key %s", key)
    else:
        logger.debug("Updated configuration key %s", key)


def clear_value(config: ConfigNode, key: str) -> None:
    """Reset the field at ``key`` to ``None`` or its type's zero value."""
    set_value(config, key, None)


def _set_path(node: ConfigNode, segments: list[PathSegment], key: str, value: str | None) -> None:
    segment, rest = segments[0], segments[1:]
    field = describe_node(type(node)).get(segment.name)
    if field is None:
        raise ConfigKeyNotFoundError(key, message=_SET_NOT_FOUND.format(key=key))

    is_collection = isinstance(field.kind, CollectionKind)
    if segment.selector is not None and not is_collection:
        raise ConfigKeyNotFoundError(key, message=_SET_NOT_FOUND.format(key=key))

    if not rest:
        if segment.selector is not None:
            raise ConfigValueParseError(
                key, value, "a collection element cannot be assigned a value", expected=field.type_name
            )
        result = coerce(field, value)
        if not result.ok:
            raise ConfigValueParseError(key, value, result.error or "invalid value", expected=field.type_name)
        field.set(node, result.value)
        return

    child = field.get(node)
    if is_collection:
        if segment.selector is None or child is None:
            raise ConfigKeyNotFoundError(key, message=_SET_NOT_FOUND.format(key=key))
        child = child.get(segment.selector)

    if not isinstance(child, ConfigNode):
        raise ConfigKeyNotFoundError(key, message=_SET_NOT_FOUND.format(key=key))
    _set_path(child, rest, key, value)
