"""Exceptions raised by syncthing_cli.

Every failure of the credential resolver or the API client is one of
the four subclasses below. Callers can branch on the exception class or
on its ``kind`` attribute.
"""

from __future__ import annotations

from pathlib import Path

from syncthing_cli.core.types import ErrorKind


class SyncthingError(Exception):
    """Base exception for syncthing_cli errors."""

    kind: ErrorKind


class CredentialsNotFound(SyncthingError):
    """No API key could be resolved."""

    kind = ErrorKind.CREDENTIALS_NOT_FOUND

    def __init__(self, path: Path) -> None:
        super().__init__(
            "No API key found. Either configure one with "
            "'syncthing config --api-key <KEY>' or ensure syncthing is "
            f"installed with its config at {path}"
        )
        self.path = path


class TransportError(SyncthingError):
    """The request could not be sent or no response was received."""

    kind = ErrorKind.TRANSPORT


class ApiError(SyncthingError):
    """The daemon answered with a non-2xx status."""

    kind = ErrorKind.API

    def __init__(self, status_code: int, reason: str = "") -> None:
        message = f"API error: {status_code}"
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)
        self.status_code = status_code


class DecodeError(SyncthingError):
    """The response body is not valid JSON."""

    kind = ErrorKind.DECODE
