"""seqcli configuration -- public API.

Example usage::

    from seqcli.config import load_config, save_config, set_value

    config = load_config()
    set_value(config, "connection.serverUrl", "https://seq.example.com")
    save_config(config)
"""

from __future__ import annotations

from seqcli.config.accessor import (
    clear_value,
    get_value,
    list_pairs,
    parse_path,
    print_value,
    read_pairs,
    set_value,
)
from seqcli.config.coercion import coerce, format_value
from seqcli.config.model import (
    ConnectionConfig,
    ConnectionProfile,
    ForwarderApiConfig,
    ForwarderConfig,
    ForwarderDiagnosticsConfig,
    ForwarderStorageConfig,
    LogEventLevel,
    OutputConfig,
    SeqCliConfig,
)
from seqcli.config.schema import ConfigNode, camelize, describe_node
from seqcli.config.store import default_config_path, load_config, save_config
from seqcli.config.types import (
    CollectionKind,
    ConfigField,
    EnumKind,
    LeafPair,
    NodeKind,
    ParseResult,
    PrimitiveKind,
    PrimitiveType,
)

__all__ = [
    "ConfigNode",
    "ConfigField",
    "PrimitiveType",
    "PrimitiveKind",
    "EnumKind",
    "NodeKind",
    "CollectionKind",
    "ParseResult",
    "LeafPair",
    "camelize",
    "describe_node",
    "coerce",
    "format_value",
    "parse_path",
    "read_pairs",
    "list_pairs",
    "get_value",
    "print_value",
    "set_value",
    "clear_value",
    "SeqCliConfig",
    "ConnectionConfig",
    "ConnectionProfile",
    "OutputConfig",
    "ForwarderConfig",
    "ForwarderApiConfig",
    "ForwarderDiagnosticsConfig",
    "ForwarderStorageConfig",
    "LogEventLevel",
    "default_config_path",
    "load_config",
    "save_config",
]
