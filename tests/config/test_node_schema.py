"""Tests for camelize and describe_node."""

from __future__ import annotations

from enum import Enum

import pytest
from pydantic import Field

from seqcli.config.model import (
    ConnectionConfig,
    ConnectionProfile,
    ForwarderConfig,
    ForwarderDiagnosticsConfig,
    LogEventLevel,
    SeqCliConfig,
)
from seqcli.config.schema import ConfigNode, camelize, describe_node
from seqcli.config.types import (
    CollectionKind,
    EnumKind,
    Int32,
    NodeKind,
    PrimitiveKind,
    PrimitiveType,
)
from seqcli.errors import ConfigSchemaError


class Color(Enum):
    RED = 1
    GREEN = 2


class Leaf(ConfigNode):
    count: Int32 = 0


class Sample(ConfigNode):
    title: str = "t"
    enabled: bool = False
    ratio: float = 0.5
    size: int = 1
    color: Color = Color.RED
    maybe_color: Color | None = None
    leaf: Leaf = Field(default_factory=Leaf)
    leaves: dict[str, Leaf] = Field(default_factory=dict)


# === camelize ===


class TestCamelize:
    def test_snake_case_to_lower_camel(self):
        assert camelize("server_url") == "serverUrl"
        assert camelize("pooled_connection_lifetime_milliseconds") == "pooledConnectionLifetimeMilliseconds"

    def test_single_word(self):
        assert camelize("connection") == "connection"

    def test_first_character_lower_cased(self):
        assert camelize("ServerUrl") == "serverUrl"

    def test_idempotent_for_external_names(self):
        assert camelize("serverUrl") == "serverUrl"
        assert camelize(camelize("event_body_limit_bytes")) == "eventBodyLimitBytes"

    def test_two_characters_is_enough(self):
        assert camelize("ab") == "ab"

    @pytest.mark.parametrize("name", ["", "x"])
    def test_short_names_rejected(self, name):
        with pytest.raises(ConfigSchemaError, match="short names"):
            camelize(name)


# === describe_node ===


class TestDescribeNode:
    def test_keys_are_external_names_in_internal_name_order(self):
        fields = describe_node(ConnectionConfig)
        assert list(fields) == [
            "apiKey",
            "encodedApiKey",
            "eventBodyLimitBytes",
            "payloadLimitBytes",
            "pooledConnectionLifetimeMilliseconds",
            "serverUrl",
        ]
        assert [f.name for f in fields.values()] == sorted(f.name for f in fields.values())

    def test_primitive_kinds(self):
        fields = describe_node(Sample)
        assert fields["title"].kind == PrimitiveKind(PrimitiveType.STRING)
        assert fields["enabled"].kind == PrimitiveKind(PrimitiveType.BOOLEAN)
        assert fields["ratio"].kind == PrimitiveKind(PrimitiveType.FLOAT64)
        assert fields["size"].kind == PrimitiveKind(PrimitiveType.INT64)

    def test_fixed_width_integer_marker(self):
        fields = describe_node(ConnectionConfig)
        assert fields["eventBodyLimitBytes"].kind == PrimitiveKind(PrimitiveType.UINT64)
        assert fields["eventBodyLimitBytes"].nullable is False
        assert describe_node(Leaf)["count"].kind == PrimitiveKind(PrimitiveType.INT32)

    def test_nullable_fixed_width_integer(self):
        field = describe_node(ForwarderConfig)["pooledConnectionLifetimeMilliseconds"]
        assert field.kind == PrimitiveKind(PrimitiveType.UINT32)
        assert field.nullable is True
        assert field.type_name == "nullable uint32"

    def test_enum_kind(self):
        fields = describe_node(Sample)
        assert fields["color"].kind == EnumKind(Color)
        assert fields["color"].nullable is False
        assert fields["maybeColor"].kind == EnumKind(Color)
        assert fields["maybeColor"].nullable is True

    def test_str_enum_is_enum_not_string(self):
        field = describe_node(ForwarderDiagnosticsConfig)["internalLoggingLevel"]
        assert field.kind == EnumKind(LogEventLevel)
        assert field.type_name == "LogEventLevel"

    def test_node_and_collection_kinds(self):
        fields = describe_node(Sample)
        assert fields["leaf"].kind == NodeKind(Leaf)
        assert fields["leaves"].kind == CollectionKind(Leaf)
        assert describe_node(SeqCliConfig)["profiles"].kind == CollectionKind(ConnectionProfile)

    def test_settable_property_is_a_field(self):
        field = describe_node(ConnectionProfile)["apiKey"]
        assert field.name == "api_key"
        assert field.kind == PrimitiveKind(PrimitiveType.STRING)
        assert field.nullable is True

    def test_read_only_property_is_not_a_field(self):
        class WithReadOnly(ConfigNode):
            name: str = "n"

            @property
            def shouted(self) -> str:
                return self.name.upper()

        assert "shouted" not in describe_node(WithReadOnly)

    def test_schema_is_cached(self):
        assert describe_node(Sample) is describe_node(Sample)

    def test_field_accessors(self):
        sample = Sample()
        field = describe_node(Sample)["title"]
        field.set(sample, "changed")
        assert field.get(sample) == "changed"
        assert sample.title == "changed"


class TestDescribeNodeErrors:
    def test_not_a_node_type(self):
        with pytest.raises(ConfigSchemaError):
            describe_node(dict)

    def test_unsupported_field_type(self):
        class WithList(ConfigNode):
            tags: list[str] = Field(default_factory=list)

        with pytest.raises(ConfigSchemaError, match="tags"):
            describe_node(WithList)

    def test_collection_of_primitives_rejected(self):
        class WithDict(ConfigNode):
            labels: dict[str, str] = Field(default_factory=dict)

        with pytest.raises(ConfigSchemaError, match="labels"):
            describe_node(WithDict)

    def test_union_of_two_types_rejected(self):
        class WithUnion(ConfigNode):
            either: int | str = 0

        with pytest.raises(ConfigSchemaError, match="either"):
            describe_node(WithUnion)

    def test_duplicate_external_names_rejected(self):
        class Clashing(ConfigNode):
            server_url: str = ""

            @property
            def serverUrl(self) -> str:
                return self.server_url

            @serverUrl.setter
            def serverUrl(self, value: str) -> None:
                self.server_url = value

        with pytest.raises(ConfigSchemaError, match="serverUrl"):
            describe_node(Clashing)

    def test_property_without_return_annotation_rejected(self):
        class Untyped(ConfigNode):
            stored: str = ""

            @property
            def derived(self):
                return self.stored

            @derived.setter
            def derived(self, value):
                self.stored = value

        with pytest.raises(ConfigSchemaError, match="derived"):
            describe_node(Untyped)
