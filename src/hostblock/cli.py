from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import click

from .config import DEFAULT_HOSTS_PATH, HostsConfig
from .exceptions import HostBlockError, UnknownCommandError, format_error_message
from .hosts_manager import HostsManager
from .log_config import setup_logging
from .cli_helpers.display import display_error, display_warning

__all__ = ["cli", "run"]

logger = logging.getLogger("hostblock")

# command -> requested blocked state
COMMANDS = {
    "block": True,
    "unblock": False,
}


def run(manager: HostsManager, command: Optional[str], filters: Tuple[str, ...]) -> str:
    """Load, optionally toggle and save, and return the report text."""
    manager.load()

    if command:
        if command not in COMMANDS:
            raise UnknownCommandError(command)
        matched = manager.set_blocked(COMMANDS[command], filters)
        if filters and not matched:
            display_warning(f"No managed hosts match: {', '.join(filters)}")
        manager.save()

    return manager.report()


@click.command(
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
        # options end at COMMAND; everything after it is a filter
        "allow_interspersed_args": False,
    }
)
@click.option(
    "--hosts-file",
    type=click.Path(file_okay=True, dir_okay=False),
    default=str(DEFAULT_HOSTS_PATH),
    show_default=True,
    help="Path to the hosts file to read and rewrite.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose logging output.",
)
@click.argument("command", required=False)
@click.argument("filters", nargs=-1)
def cli(hosts_file: str, verbose: bool, command: Optional[str], filters: Tuple[str, ...]) -> None:
    """Block or unblock hostnames managed in the hosts file.

    Without COMMAND the managed hosts are listed. COMMAND is `block` or
    `unblock`; FILTERS limit it to entries with a hostname containing any of
    them.
    """
    setup_logging(verbose)
    logger.debug(f"hostblock started - hosts_file: {hosts_file}, command: {command}, filters: {filters}")

    try:
        manager = HostsManager(HostsConfig(hosts_path=Path(hosts_file)))
        report = run(manager, command, filters)
    except HostBlockError as exc:
        logger.debug(f"Aborting: {exc.details}")
        display_error(format_error_message(exc))
        sys.exit(1)

    click.echo(report, nl=False)
