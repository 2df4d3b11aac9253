"""Shared state and helpers for CLI commands."""

from __future__ import annotations

import functools
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

import click

from syncthing_cli.client.api import SyncthingClient
from syncthing_cli.client.credentials import resolve_daemon_config
from syncthing_cli.core.errors import SyncthingError

F = TypeVar("F", bound=Callable[..., Any])


@dataclass
class CliState:
    """Global options given before the subcommand."""

    host: str | None = None
    verify_tls: bool = False


pass_state = click.make_pass_decorator(CliState, ensure=True)


def open_client(state: CliState) -> SyncthingClient:
    """Resolve credentials and create a client for this invocation.

    Raises:
        CredentialsNotFound: If no API key can be resolved.
    """
    config = resolve_daemon_config(host=state.host, verify_ssl=state.verify_tls)
    return SyncthingClient(config)


def handle_errors(func: F) -> F:
    """Report SyncthingError on stderr and exit with status 1."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except SyncthingError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

    return wrapper  # type: ignore[return-value]
