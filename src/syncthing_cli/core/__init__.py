"""Core module - Shared types, errors and connection settings."""

from syncthing_cli.core.config import DEFAULT_HOST, DaemonConfig, normalize_url
from syncthing_cli.core.errors import (
    ApiError,
    CredentialsNotFound,
    DecodeError,
    SyncthingError,
    TransportError,
)
from syncthing_cli.core.types import NO_CONTENT, ErrorKind, JSONValue, NoContent

__all__ = [
    # Config
    "DEFAULT_HOST",
    "DaemonConfig",
    "normalize_url",
    # Errors
    "ApiError",
    "CredentialsNotFound",
    "DecodeError",
    "SyncthingError",
    "TransportError",
    # Types
    "ErrorKind",
    "JSONValue",
    "NO_CONTENT",
    "NoContent",
]
