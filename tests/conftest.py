"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from syncthing_cli.client import credentials


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect the preferences directory into a temporary directory."""
    path = tmp_path / "syncthing-cli"
    monkeypatch.setattr(credentials, "get_config_dir", lambda: path)
    return path


@pytest.fixture
def daemon_config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect the daemon's config.xml into a temporary directory.

    The file itself is not created.
    """
    path = tmp_path / "syncthing" / "config.xml"
    monkeypatch.setattr(credentials, "get_daemon_config_file", lambda: path)
    return path


@pytest.fixture
def write_daemon_config(daemon_config_file: Path) -> Callable[[str], Path]:
    """Return a function writing a minimal daemon config.xml with an API key."""

    def _write(api_key: str) -> Path:
        daemon_config_file.parent.mkdir(parents=True, exist_ok=True)
        daemon_config_file.write_text(
            '<configuration version="37">\n'
            '    <gui enabled="true" tls="false" debugging="false">\n'
            "        <address>127.0.0.1:8384</address>\n"
            f"        <apikey>{api_key}</apikey>\n"
            "    </gui>\n"
            "</configuration>\n"
        )
        return daemon_config_file

    return _write
