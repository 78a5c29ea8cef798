"""CLI entry point."""

from __future__ import annotations

import logging

import click

from seqcli import __version__
from seqcli.cli.commands.config import config_command


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", is_flag=True, help="Write debug logging to stderr")
def cli(verbose: bool) -> None:
    """Command-line client for a Seq log server."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


cli.add_command(config_command)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
