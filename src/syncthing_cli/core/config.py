"""Connection settings for talking to a Syncthing daemon."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_HOST = "http://localhost:8384"


def normalize_url(url: str) -> str:
    """Normalize a host string into a base URL.

    Adds an ``http://`` scheme when none is present and strips trailing
    slashes.

    Args:
        url: Host or URL as typed by the user or stored in preferences.

    Returns:
        Base URL suitable for path concatenation.
    """
    url = url.strip()
    if "://" not in url:
        url = f"http://{url}"
    return url.rstrip("/")


@dataclass
class DaemonConfig:
    """Configuration for connecting to a Syncthing daemon.

    Attributes:
        base_url: Base URL of the daemon GUI/REST listener.
        api_key: API key sent as the ``X-API-Key`` header.
        timeout: Connect/read timeout handed to the HTTP transport, in seconds.
        verify_ssl: Whether to verify TLS certificates. Off by default
            because the daemon serves a self-signed certificate it
            generates on first start. Enable it with ``--verify-tls`` when
            the GUI listener has a certificate from a trusted CA.
    """

    base_url: str
    api_key: str
    timeout: float = 30.0
    verify_ssl: bool = False

    def __post_init__(self) -> None:
        """Normalize base URL."""
        self.base_url = normalize_url(self.base_url)

    @property
    def is_secure(self) -> bool:
        """Check if the daemon is reached over HTTPS."""
        return self.base_url.startswith("https://")
