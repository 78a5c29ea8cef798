"""Shared fixtures for the seqcli test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from seqcli.config.model import ConnectionProfile, SeqCliConfig


@pytest.fixture
def config() -> SeqCliConfig:
    """A configuration with every field at its default."""
    return SeqCliConfig()


@pytest.fixture
def config_with_profiles() -> SeqCliConfig:
    """A configuration with two named connection profiles, inserted out of alphabetical order."""
    cfg = SeqCliConfig()
    cfg.profiles["staging"] = ConnectionProfile(server_url="https://staging.example.com")
    cfg.profiles["production"] = ConnectionProfile(server_url="https://seq.example.com", encoded_api_key="prod-key")
    return cfg


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Path for a configuration file that does not exist yet."""
    return tmp_path / "SeqCli.json"
