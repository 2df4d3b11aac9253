"""Credential and endpoint resolution for the Syncthing CLI.

This module provides:
- Preferences: the locally saved API key and host
- Loading and merging saves of the preferences file
- API key extraction from the daemon's own config.xml
- Resolution of the base URL and API key with their precedence rules
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from platformdirs import user_config_path

from syncthing_cli.core.config import DEFAULT_HOST, DaemonConfig, normalize_url
from syncthing_cli.core.errors import CredentialsNotFound

logger = logging.getLogger(__name__)

APP_NAME = "syncthing-cli"
DAEMON_APP_NAME = "syncthing"
APIKEY_OPEN_TAG = "<apikey>"
APIKEY_CLOSE_TAG = "</apikey>"


def get_config_dir() -> Path:
    """Get the configuration directory for syncthing-cli.

    Returns:
        Path to ~/.config/syncthing-cli or the platform equivalent.
    """
    return user_config_path(APP_NAME, appauthor=False, roaming=True)


def get_config_file() -> Path:
    """Get the path to the preferences file."""
    return get_config_dir() / "config.json"


def get_daemon_config_file() -> Path:
    """Get the path to the daemon's config.xml."""
    return user_config_path(DAEMON_APP_NAME, appauthor=False, roaming=True) / "config.xml"


@dataclass
class Preferences:
    """Locally saved connection preferences."""

    api_key: str | None = None
    host: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Preferences:
        """Create from the stored JSON object, ignoring non-string fields."""
        api_key = data.get("api_key")
        host = data.get("host")
        return cls(
            api_key=api_key if isinstance(api_key, str) else None,
            host=host if isinstance(host, str) else None,
        )

    def to_dict(self) -> dict[str, str]:
        """Convert to the stored JSON object, omitting unset fields."""
        data: dict[str, str] = {}
        if self.api_key is not None:
            data["api_key"] = self.api_key
        if self.host is not None:
            data["host"] = self.host
        return data


def load_preferences() -> Preferences:
    """Load preferences from the preferences file.

    A missing file gives empty preferences. So does a file that cannot be
    read or parsed, after logging a warning.
    """
    config_file = get_config_file()
    if not config_file.exists():
        return Preferences()
    try:
        data = json.loads(config_file.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning(f"Ignoring unreadable preferences file {config_file}: {e}")
        return Preferences()
    if not isinstance(data, dict):
        logger.warning(f"Ignoring malformed preferences file {config_file}")
        return Preferences()
    return Preferences.from_dict(data)


def save_preferences(api_key: str | None = None, host: str | None = None) -> Preferences:
    """Merge the given fields into the saved preferences.

    Fields left as None keep their stored value. The file is replaced
    atomically so a following read sees the new values.

    Args:
        api_key: New API key, or None to keep the current one.
        host: New host URL, or None to keep the current one.

    Returns:
        The merged preferences as written.
    """
    prefs = load_preferences()
    if api_key is not None:
        prefs.api_key = api_key
    if host is not None:
        prefs.host = host

    config_file = get_config_file()
    config_file.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=config_file.parent, prefix=".config-", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(json.dumps(prefs.to_dict(), indent=2))
        os.replace(tmp_name, config_file)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    logger.debug(f"Saved preferences to {config_file}")
    return prefs


def extract_api_key_from_xml(content: str) -> str | None:
    """Extract the API key from the daemon's config.xml content.

    Args:
        content: Text of config.xml.

    Returns:
        Text between the first <apikey> and the following </apikey>,
        unmodified, or None if the element is missing.
    """
    start = content.find(APIKEY_OPEN_TAG)
    if start == -1:
        return None
    start += len(APIKEY_OPEN_TAG)
    end = content.find(APIKEY_CLOSE_TAG, start)
    if end == -1:
        return None
    return content[start:end]


def extract_api_key_from_path(path: Path) -> str:
    """Read the API key from a daemon config file.

    Raises:
        CredentialsNotFound: If the file is missing, unreadable or has
            no apikey element.
    """
    if not path.exists():
        raise CredentialsNotFound(path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to read {path}: {e}")
        raise CredentialsNotFound(path) from e

    key = extract_api_key_from_xml(content)
    if key is None:
        logger.warning(f"No apikey element found in {path}")
        raise CredentialsNotFound(path)
    return key


def resolve_api_key(daemon_config: Path | None = None) -> str:
    """Resolve the API key.

    The saved preference wins; otherwise the key is scraped from the
    daemon's config.xml.

    Args:
        daemon_config: Path of the daemon config to fall back to
            (default: the platform's syncthing config.xml).

    Raises:
        CredentialsNotFound: If neither source has a key.
    """
    prefs = load_preferences()
    if prefs.api_key is not None:
        logger.debug("Using API key from preferences")
        return prefs.api_key

    path = daemon_config or get_daemon_config_file()
    logger.debug(f"Reading API key from {path}")
    return extract_api_key_from_path(path)


def resolve_base_url(override: str | None = None) -> str:
    """Resolve the daemon base URL.

    Precedence: ``override``, then the saved host, then DEFAULT_HOST.
    """
    if override:
        return normalize_url(override)
    prefs = load_preferences()
    if prefs.host:
        return normalize_url(prefs.host)
    return DEFAULT_HOST


def resolve_daemon_config(
    host: str | None = None,
    verify_ssl: bool = False,
    daemon_config: Path | None = None,
) -> DaemonConfig:
    """Build the connection settings for one invocation.

    Args:
        host: Per-invocation host override.
        verify_ssl: Whether to verify TLS certificates.
        daemon_config: Daemon config.xml to scrape the key from.

    Raises:
        CredentialsNotFound: If no API key can be resolved.
    """
    return DaemonConfig(
        base_url=resolve_base_url(host),
        api_key=resolve_api_key(daemon_config),
        verify_ssl=verify_ssl,
    )
