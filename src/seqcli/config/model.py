"""The seqcli configuration model, as stored in ``SeqCli.json``."""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from seqcli.config.schema import ConfigNode
from seqcli.config.types import Int64, UInt32, UInt64

__all__ = [
    "LogEventLevel",
    "ConnectionProfile",
    "ConnectionConfig",
    "OutputConfig",
    "ForwarderApiConfig",
    "ForwarderDiagnosticsConfig",
    "ForwarderStorageConfig",
    "ForwarderConfig",
    "SeqCliConfig",
]

DEFAULT_SERVER_URL = "http://localhost:5341"
DEFAULT_LISTEN_URI = "http://127.0.0.1:15341"
DEFAULT_EVENT_BODY_LIMIT_BYTES = 256 * 1024
DEFAULT_PAYLOAD_LIMIT_BYTES = 10 * 1024 * 1024
DEFAULT_BUFFER_SIZE_BYTES = 64 * 1024 * 1024


class LogEventLevel(str, Enum):
    """Minimum level for the forwarder's internal log."""

    VERBOSE = "Verbose"
    DEBUG = "Debug"
    INFORMATION = "Information"
    WARNING = "Warning"
    ERROR = "Error"
    FATAL = "Fatal"


class _ApiKeyNode(ConfigNode):
    # The key is persisted as "apiKey" in its stored form and exposed as api_key.
    encoded_api_key: str | None = Field(default=None, alias="apiKey")

    @property
    def api_key(self) -> str | None:
        if self.encoded_api_key is None or not self.encoded_api_key.strip():
            return None
        return self.encoded_api_key

    @api_key.setter
    def api_key(self, value: str | None) -> None:
        self.encoded_api_key = value if value is not None and value.strip() else None


class ConnectionProfile(_ApiKeyNode):
    """A named server connection, selectable instead of the default connection."""

    server_url: str | None = None


class ConnectionConfig(_ApiKeyNode):
    """Default server connection settings."""

    server_url: str = DEFAULT_SERVER_URL
    pooled_connection_lifetime_milliseconds: UInt32 | None = None
    event_body_limit_bytes: UInt64 = DEFAULT_EVENT_BODY_LIMIT_BYTES
    payload_limit_bytes: UInt64 = DEFAULT_PAYLOAD_LIMIT_BYTES


class OutputConfig(ConfigNode):
    disable_color: bool = False
    force_color: bool = False


class ForwarderApiConfig(ConfigNode):
    listen_uri: str = DEFAULT_LISTEN_URI


class ForwarderDiagnosticsConfig(ConfigNode):
    internal_log_path: str | None = None
    internal_logging_level: LogEventLevel = LogEventLevel.INFORMATION
    expose_ingestion_log: bool = False
    ingestion_log_show_detail: bool = False


class ForwarderStorageConfig(ConfigNode):
    buffer_size_bytes: Int64 = DEFAULT_BUFFER_SIZE_BYTES


class ForwarderConfig(ConfigNode):
    """Settings for the local event forwarder."""

    pooled_connection_lifetime_milliseconds: UInt32 | None = None
    event_body_limit_bytes: UInt64 = DEFAULT_EVENT_BODY_LIMIT_BYTES
    payload_limit_bytes: UInt64 = DEFAULT_PAYLOAD_LIMIT_BYTES
    api: ForwarderApiConfig = Field(default_factory=ForwarderApiConfig)
    diagnostics: ForwarderDiagnosticsConfig = Field(default_factory=ForwarderDiagnosticsConfig)
    storage: ForwarderStorageConfig = Field(default_factory=ForwarderStorageConfig)


class SeqCliConfig(ConfigNode):
    """Root of the configuration tree."""

    connection: ConnectionConfig = Field(default_factory=ConnectionConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    profiles: dict[str, ConnectionProfile] = Field(default_factory=dict)
    forwarder: ForwarderConfig = Field(default_factory=ForwarderConfig)
