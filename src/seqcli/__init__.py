"""seqcli - command-line client for a log server."""

from __future__ import annotations

# Config
from seqcli.config import (
    ConfigNode,
    SeqCliConfig,
    clear_value,
    get_value,
    list_pairs,
    load_config,
    print_value,
    read_pairs,
    save_config,
    set_value,
)

# Errors
from seqcli.errors import (
    ConfigFileError,
    ConfigKeyNotFoundError,
    ConfigSchemaError,
    ConfigValueParseError,
    ErrorCodes,
    SeqCliError,
)

__version__ = "0.1.0"

__all__ = [
    # Config
    "ConfigNode",
    "SeqCliConfig",
    "load_config",
    "save_config",
    "read_pairs",
    "list_pairs",
    "get_value",
    "print_value",
    "set_value",
    "clear_value",
    # Errors
    "SeqCliError",
    "ConfigKeyNotFoundError",
    "ConfigValueParseError",
    "ConfigSchemaError",
    "ConfigFileError",
    "ErrorCodes",
]
