"""Loading and saving the configuration file."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from seqcli.config.model import SeqCliConfig
from seqcli.errors import ConfigFileError

__all__ = ["DEFAULT_CONFIG_FILENAME", "default_config_path", "load_config", "save_config"]

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "SeqCli.json"

_YAML_SUFFIXES = {".yaml", ".yml"}


def default_config_path() -> Path:
    """The configuration file in the user's home directory."""
    return Path.home() / DEFAULT_CONFIG_FILENAME


def _resolve(path: str | Path | None) -> Path:
    return Path(path) if path is not None else default_config_path()


def _is_yaml(path: Path) -> bool:
    return path.suffix.lower() in _YAML_SUFFIXES


def load_config(path: str | Path | None = None) -> SeqCliConfig:
    """Read the configuration file, falling back to defaults when it does not exist."""
    config_path = _resolve(path)
    if not config_path.exists():
        logger.debug("No configuration file at %s; using defaults", config_path)
        return SeqCliConfig()

    try:
        text = config_path.read_text(encoding="utf-8-sig")
    except OSError as e:
        raise ConfigFileError(str(config_path), str(e), cause=e) from e

    data: Any
    if _is_yaml(config_path):
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigFileError(str(config_path), f"invalid YAML: {e}", cause=e) from e
    else:
        try:
            data = json.loads(text) if text.strip() else None
        except json.JSONDecodeError as e:
            raise ConfigFileError(str(config_path), f"invalid JSON: {e}", cause=e) from e

    if data is None:
        logger.debug("Configuration file %s is empty; using defaults", config_path)
        return SeqCliConfig()
    if not isinstance(data, dict):
        raise ConfigFileError(str(config_path), "the top level must be a mapping")

    try:
        config = SeqCliConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigFileError(str(config_path), str(e), cause=e) from e

    logger.debug("Loaded configuration from %s", config_path)
    return config


def save_config(config: SeqCliConfig, path: str | Path | None = None) -> Path:
    """Write the configuration using camelCase keys; returns the file written."""
    config_path = _resolve(path)
    data = config.model_dump(mode="json", by_alias=True)

    if _is_yaml(config_path):
        text = yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    else:
        text = json.dumps(data, indent=2) + "\n"

    config_path.parent.mkdir(parents=True, exist_ok=True)
    # Written beside the target, then swapped in.
    fd, temp_path = tempfile.mkstemp(suffix=".tmp", prefix=f".{config_path.name}.", dir=config_path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(temp_path, config_path)
    except BaseException:
        Path(temp_path).unlink(missing_ok=True)
        raise
    logger.debug("Saved configuration to %s", config_path)
    return config_path
