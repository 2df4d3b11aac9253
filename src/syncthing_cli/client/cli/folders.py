"""Folder commands for the Syncthing CLI.

Commands:
- folders: List folders with sync status, or show one folder in detail
- scan: Trigger a rescan of one or all folders
- need: Show files a folder still needs
"""

from __future__ import annotations

import json

import click

from syncthing_cli.client.cli.context import CliState, handle_errors, open_client, pass_state
from syncthing_cli.client.formatting import format_bytes, format_duration_since
from syncthing_cli.core.types import get_bool, get_int, get_list, get_str

NEED_SECTIONS = (
    ("progress", "In progress"),
    ("queued", "Queued"),
    ("rest", "Remaining"),
)


@click.command()
@click.option("--id", "-i", "folder_id", default=None, help="Show detailed info for this folder.")
@pass_state
@handle_errors
def folders(state: CliState, folder_id: str | None) -> None:
    """List folders with sync status."""
    with open_client(state) as client:
        if folder_id:
            click.echo(json.dumps(client.db_status(folder_id), indent=2))
            return
        configured = client.config_folders()
        stats = client.stats_folder()

    for folder in get_list(configured):
        fid = get_str(folder, "id", default="?")
        label = get_str(folder, "label", default=fid, allow_empty=False)
        status_str = "paused" if get_bool(folder, "paused") else "active"

        last_scan = get_str(stats, fid, "lastScan")
        last_scan_str = format_duration_since(last_scan) if last_scan else "never"
        click.echo(f"{label:<20} {status_str:<10} (last scan: {last_scan_str})")


@click.command()
@click.argument("folder", required=False)
@pass_state
@handle_errors
def scan(state: CliState, folder: str | None) -> None:
    """Trigger folder rescan (all folders if FOLDER is not given)."""
    with open_client(state) as client:
        if folder:
            client.db_scan(folder)
            click.echo(f"Scan triggered for folder: {folder}")
        else:
            client.db_scan_all()
            click.echo("Scan triggered for all folders")


@click.command()
@click.argument("folder")
@click.option("--files/--no-files", default=True, help="List file names under each section.")
@pass_state
@handle_errors
def need(state: CliState, folder: str, files: bool) -> None:
    """Show files FOLDER still needs from remote devices."""
    with open_client(state) as client:
        result = client.db_need(folder)

    total = 0
    for key, title in NEED_SECTIONS:
        entries = get_list(result, key)
        total += len(entries)
        click.echo(f"{title}: {len(entries)}")
        if not files:
            continue
        for entry in entries:
            name = get_str(entry, "name", default="?")
            click.echo(f"  {name} ({format_bytes(get_int(entry, 'size'))})")

    if total == 0:
        click.echo(f"Folder {folder} is up to date")
