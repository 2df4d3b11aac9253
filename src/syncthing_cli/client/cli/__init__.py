"""Command-line interface for syncthing-cli.

This module provides the main CLI entry point and assembles all commands.

Commands:
- status: Show system status
- folders: List folders with sync status
- devices: List devices with connection status
- scan: Trigger folder rescan
- need: Show files a folder still needs
- errors: Show or clear sync errors
- pending: Show pending devices and folders
- restart: Restart syncthing
- shutdown: Shutdown syncthing
- events: Show recent events
- daemon-config: Show the daemon configuration
- config: Configure API key and host
"""

from __future__ import annotations

import logging
import sys

import click

from syncthing_cli.client.cli.config import config
from syncthing_cli.client.cli.context import CliState
from syncthing_cli.client.cli.devices import devices, pending
from syncthing_cli.client.cli.folders import folders, need, scan
from syncthing_cli.client.cli.system import (
    daemon_config,
    errors,
    events,
    restart,
    shutdown,
    status,
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: bool) -> None:
    """Configure logging to stderr.

    Args:
        verbose: Log debug messages instead of warnings only.
    """
    root_logger = logging.getLogger("syncthing_cli")
    root_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Replace handlers so repeated invocations in one process don't stack them
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(stderr_handler)
    root_logger.propagate = False


@click.group()
@click.version_option(package_name="syncthing-cli")
@click.option(
    "--host",
    envvar="SYNCTHING_HOST",
    default=None,
    help="Syncthing host URL for this invocation (overrides saved config).",
)
@click.option(
    "--verify-tls",
    is_flag=True,
    help="Verify the daemon's TLS certificate (off by default for self-signed certs).",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, host: str | None, verify_tls: bool, verbose: bool) -> None:
    """Syncthing CLI for monitoring and control."""
    setup_logging(verbose)
    ctx.obj = CliState(host=host, verify_tls=verify_tls)


# System commands
cli.add_command(status)
cli.add_command(errors)
cli.add_command(restart)
cli.add_command(shutdown)
cli.add_command(events)
cli.add_command(daemon_config)

# Folder commands
cli.add_command(folders)
cli.add_command(scan)
cli.add_command(need)

# Device commands
cli.add_command(devices)
cli.add_command(pending)

# Local configuration
cli.add_command(config)


def main() -> None:
    """Entry point for the CLI."""
    cli()


__all__ = [
    "cli",
    "main",
    "setup_logging",
]
