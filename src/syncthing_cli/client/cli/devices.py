"""Device commands for the Syncthing CLI.

Commands:
- devices: List configured devices with connection state
- pending: Show pending devices and folders
"""

from __future__ import annotations

import click

from syncthing_cli.client.cli.context import CliState, handle_errors, open_client, pass_state
from syncthing_cli.client.formatting import format_duration_since, short_id
from syncthing_cli.core.types import get_bool, get_dict, get_list, get_str


@click.command()
@pass_state
@handle_errors
def devices(state: CliState) -> None:
    """List devices with connection status."""
    with open_client(state) as client:
        configured = client.config_devices()
        connections = client.connections()
        stats = client.stats_device()

    for device in get_list(configured):
        device_id = get_str(device, "deviceID", default="?")
        name = get_str(device, "name", default=device_id)

        connected = get_bool(connections, "connections", device_id, "connected")
        status_str = "connected" if connected else "offline"

        last_seen = get_str(stats, device_id, "lastSeen")
        last_seen_str = format_duration_since(last_seen) if last_seen else "never"
        click.echo(f"{name:<20} ({short_id(device_id)}) {status_str:<12} last: {last_seen_str}")


@click.command()
@pass_state
@handle_errors
def pending(state: CliState) -> None:
    """Show pending devices and folders."""
    with open_client(state) as client:
        pending_devs = client.pending_devices()
        pending_flds = client.pending_folders()

    click.echo("Pending Devices:")
    devs = get_dict(pending_devs)
    if not devs:
        click.echo("  (none)")
    for device_id, info in devs.items():
        name = get_str(info, "name", default="unknown")
        click.echo(f"  {name} ({short_id(device_id)})")

    click.echo("\nPending Folders:")
    flds = get_dict(pending_flds)
    if not flds:
        click.echo("  (none)")
    for folder_id, info in flds.items():
        # Daemon shape: {folderID: {"offeredBy": {deviceID: {"label": ..., "time": ...}}}}
        for device_id, offer in get_dict(info, "offeredBy").items():
            label = get_str(offer, "label", default=folder_id, allow_empty=False)
            click.echo(f"  {label} from {short_id(device_id)}")
