"""System commands for the Syncthing CLI.

Commands:
- status: Show daemon version, uptime, memory and sync completion
- errors: Show or clear system errors, or show a folder's errors
- restart: Restart the daemon
- shutdown: Shut the daemon down
- events: Show recent events
- daemon-config: Dump the daemon configuration
"""

from __future__ import annotations

import json

import click

from syncthing_cli.client.cli.context import CliState, handle_errors, open_client, pass_state
from syncthing_cli.client.formatting import (
    format_bytes,
    format_duration_since,
    format_uptime,
    short_id,
)
from syncthing_cli.core.types import get_float, get_int, get_list, get_str


@click.command()
@pass_state
@handle_errors
def status(state: CliState) -> None:
    """Show system status."""
    with open_client(state) as client:
        sys_status = client.status()
        version = client.version()
        completion = client.db_completion()

    click.echo(f"Syncthing {get_str(version, 'version', default='unknown')}")
    device_id = get_str(sys_status, "myID")
    if device_id:
        click.echo(f"Device: {short_id(device_id)}")
    click.echo()

    click.echo(f"Uptime: {format_uptime(get_int(sys_status, 'uptime'))}")
    alloc = get_int(sys_status, "alloc")
    sys_mem = get_int(sys_status, "sys")
    click.echo(f"Memory: {format_bytes(alloc)} / {format_bytes(sys_mem)}")

    global_bytes = get_int(completion, "globalBytes")
    need_bytes = get_int(completion, "needBytes")
    pct = get_float(completion, "completion", default=100.0)

    click.echo()
    click.echo(f"Sync: {pct:.1f}% complete")
    click.echo(f"Total: {format_bytes(global_bytes)}")
    if need_bytes > 0:
        click.echo(f"Need: {format_bytes(need_bytes)}")


@click.command()
@click.option("--clear", "-c", is_flag=True, help="Clear all system errors.")
@click.option("--folder", "-f", default=None, help="Show file errors of this folder instead.")
@pass_state
@handle_errors
def errors(state: CliState, clear: bool, folder: str | None) -> None:
    """Show sync errors."""
    with open_client(state) as client:
        if clear:
            client.clear_errors()
            click.echo("Errors cleared")
            return
        if folder:
            result = client.folder_errors(folder)
        else:
            result = client.errors()

    if folder:
        file_errors = get_list(result, "errors")
        if not file_errors:
            click.echo(f"No errors in folder {folder}")
            return
        for err in file_errors:
            path = get_str(err, "path", default="?")
            message = get_str(err, "error", default="?")
            click.echo(f"{path}: {message}")
        return

    system_errors = get_list(result, "errors")
    if not system_errors:
        click.echo("No errors")
        return
    for err in system_errors:
        when = get_str(err, "when", default="?")
        message = get_str(err, "message", default="?")
        click.echo(f"[{format_duration_since(when)}] {message}")


@click.command()
@pass_state
@handle_errors
def restart(state: CliState) -> None:
    """Restart syncthing."""
    with open_client(state) as client:
        client.restart()
    click.echo("Syncthing restart initiated")


@click.command()
@pass_state
@handle_errors
def shutdown(state: CliState) -> None:
    """Shutdown syncthing."""
    with open_client(state) as client:
        client.shutdown()
    click.echo("Syncthing shutdown initiated")


@click.command()
@click.option(
    "--limit",
    "-l",
    type=click.IntRange(min=1),
    default=20,
    show_default=True,
    help="Number of events to show.",
)
@click.option(
    "--since",
    "-s",
    type=click.IntRange(min=0),
    default=None,
    help="Only show events with an ID greater than this.",
)
@pass_state
@handle_errors
def events(state: CliState, limit: int, since: int | None) -> None:
    """Show recent events, newest first."""
    with open_client(state) as client:
        result = client.events(since=since, limit=limit)

    for event in reversed(get_list(result)[-limit:]):
        event_id = get_int(event, "id")
        event_type = get_str(event, "type", default="?")
        time = get_str(event, "time", default="?")
        click.echo(f"[{event_id}] {format_duration_since(time)} - {event_type}")


@click.command("daemon-config")
@pass_state
@handle_errors
def daemon_config(state: CliState) -> None:
    """Show the daemon's full configuration as JSON."""
    with open_client(state) as client:
        result = client.config()
    click.echo(json.dumps(result, indent=2))
