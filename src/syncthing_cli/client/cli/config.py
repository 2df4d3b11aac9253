"""Local configuration command for the Syncthing CLI.

Commands:
- config: Show or save the API key and host preferences
"""

from __future__ import annotations

import sys

import click

from syncthing_cli.client.credentials import get_config_file, load_preferences, save_preferences
from syncthing_cli.core.config import DEFAULT_HOST, normalize_url


@click.command()
@click.option("--api-key", default=None, help="API key from the syncthing GUI settings.")
@click.option("--host", default=None, help="Host URL (e.g., http://localhost:8384).")
def config(api_key: str | None, host: str | None) -> None:
    """Configure API key and host.

    Without options, shows the current preferences. Options given are
    merged into the saved preferences; others keep their value.
    """
    if api_key is None and host is None:
        prefs = load_preferences()
        click.echo(f"API Key: {prefs.api_key or '(from syncthing config)'}")
        click.echo(f"Host: {normalize_url(prefs.host) if prefs.host else DEFAULT_HOST}")
        return

    try:
        save_preferences(api_key=api_key, host=host)
    except OSError as e:
        click.echo(f"Error: Could not save configuration to {get_config_file()}: {e}", err=True)
        sys.exit(1)
    click.echo(f"Configuration saved to {get_config_file()}", err=True)
