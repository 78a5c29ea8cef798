"""seqcli command-line interface."""

from __future__ import annotations

from seqcli.cli.main import cli, main

__all__ = ["cli", "main"]
