"""The ``config`` command: view and set fields in the configuration file."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from seqcli.config.accessor import clear_value, list_pairs, print_value, set_value
from seqcli.config.store import load_config, save_config
from seqcli.errors import SeqCliError

logger = logging.getLogger(__name__)


@click.command("config")
@click.option("-k", "--key", help="The field, for example `connection.serverUrl`")
@click.option("-v", "--value", help="The field value; if not specified, the command will print the current value")
@click.option("-c", "--clear", is_flag=True, help="Clear the field")
@click.option(
    "--config-file",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="SEQCLI_CONFIG_FILE",
    help="Configuration file to use instead of ~/SeqCli.json",
)
def config_command(key: str | None, value: str | None, clear: bool, config_file: Path | None) -> None:
    """View and set fields in the `SeqCli.json` file; run with no arguments to list all fields."""
    verb = "read"
    try:
        config = load_config(config_file)

        if key is None:
            for path, formatted in list_pairs(config):
                click.echo(f"{path}:")
                click.echo(f"  {formatted}")
        elif clear:
            verb = "clear"
            clear_value(config, key)
            save_config(config, config_file)
        elif value is not None:
            verb = "update"
            set_value(config, key, value)
            save_config(config, config_file)
        else:
            click.echo(print_value(config, key))
    except SeqCliError as e:
        logger.error("Could not %s config: %s", verb, e.message)
        sys.exit(1)
    except Exception as e:
        logger.error("Could not %s config: %s", verb, e)
        sys.exit(1)
