"""Tests for credential and endpoint resolution."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from syncthing_cli.client.credentials import (
    Preferences,
    extract_api_key_from_path,
    extract_api_key_from_xml,
    get_config_file,
    load_preferences,
    resolve_api_key,
    resolve_base_url,
    resolve_daemon_config,
    save_preferences,
)
from syncthing_cli.core.config import DEFAULT_HOST
from syncthing_cli.core.errors import CredentialsNotFound


class TestExtractApiKey:
    """Tests for scraping the key from config.xml."""

    def test_extract_from_xml(self) -> None:
        """Should return the apikey element text."""
        xml = (
            '<configuration version="37">\n'
            '    <gui enabled="true" tls="false">\n'
            "        <address>127.0.0.1:8384</address>\n"
            "        <apikey>abc123def456</apikey>\n"
            "    </gui>\n"
            "</configuration>\n"
        )
        assert extract_api_key_from_xml(xml) == "abc123def456"

    def test_extract_verbatim(self) -> None:
        """Should not strip or unescape the element text."""
        xml = "<gui><apikey> key&amp;1 </apikey></gui>"
        assert extract_api_key_from_xml(xml) == " key&amp;1 "

    def test_extract_missing(self) -> None:
        """Should return None without an apikey element."""
        assert extract_api_key_from_xml("<configuration></configuration>") is None

    def test_extract_unclosed(self) -> None:
        """Should return None when the element is not closed."""
        assert extract_api_key_from_xml("<gui><apikey>abc") is None

    def test_extract_from_path(self, tmp_path: Path) -> None:
        """Should read the key from a file."""
        path = tmp_path / "config.xml"
        path.write_text("<configuration><gui><apikey>mykey123</apikey></gui></configuration>")
        assert extract_api_key_from_path(path) == "mykey123"

    def test_extract_from_missing_file(self, tmp_path: Path) -> None:
        """Should raise CredentialsNotFound naming the path."""
        path = tmp_path / "nonexistent" / "config.xml"
        with pytest.raises(CredentialsNotFound) as exc_info:
            extract_api_key_from_path(path)
        assert exc_info.value.path == path
        assert str(path) in str(exc_info.value)

    def test_extract_from_file_without_key(self, tmp_path: Path) -> None:
        """A config without apikey should also raise CredentialsNotFound."""
        path = tmp_path / "config.xml"
        path.write_text("<configuration></configuration>")
        with pytest.raises(CredentialsNotFound) as exc_info:
            extract_api_key_from_path(path)
        assert exc_info.value.path == path


class TestPreferences:
    """Tests for loading and saving preferences."""

    def test_from_dict_ignores_non_strings(self) -> None:
        """Non-string fields should be treated as unset."""
        prefs = Preferences.from_dict({"api_key": 42, "host": "http://nas:8384", "x": 1})
        assert prefs == Preferences(api_key=None, host="http://nas:8384")

    def test_to_dict_omits_unset(self) -> None:
        """Unset fields should not be written."""
        assert Preferences(api_key="k").to_dict() == {"api_key": "k"}

    def test_load_missing_file(self, config_dir: Path) -> None:
        """No file means empty preferences."""
        assert load_preferences() == Preferences()

    def test_load_malformed_file(self, config_dir: Path) -> None:
        """A malformed file is treated as empty."""
        config_dir.mkdir(parents=True)
        get_config_file().write_text("{not json")
        assert load_preferences() == Preferences()

    def test_load_non_object(self, config_dir: Path) -> None:
        """A JSON document that is not an object is treated as empty."""
        config_dir.mkdir(parents=True)
        get_config_file().write_text('["api_key"]')
        assert load_preferences() == Preferences()

    def test_save_and_load(self, config_dir: Path) -> None:
        """A save should be visible to the next load."""
        save_preferences(api_key="test-key", host="http://test:8384")

        prefs = load_preferences()
        assert prefs.api_key == "test-key"
        assert prefs.host == "http://test:8384"
        assert json.loads(get_config_file().read_text()) == {
            "api_key": "test-key",
            "host": "http://test:8384",
        }

    def test_save_merges(self, config_dir: Path) -> None:
        """Fields not given should keep their stored value."""
        save_preferences(api_key="first-key", host="http://old:8384")
        merged = save_preferences(host="http://new:8384")

        assert merged == Preferences(api_key="first-key", host="http://new:8384")
        assert load_preferences() == merged

    def test_save_leaves_no_temp_files(self, config_dir: Path) -> None:
        """Only the preferences file should remain after saving."""
        save_preferences(api_key="k")
        save_preferences(host="h")
        assert [p.name for p in config_dir.iterdir()] == ["config.json"]


class TestResolveApiKey:
    """Tests for API key precedence."""

    def test_preference_wins(
        self,
        config_dir: Path,
        write_daemon_config: Callable[[str], Path],
    ) -> None:
        """The saved key should win over the daemon config."""
        write_daemon_config("daemon-key")
        save_preferences(api_key="saved-key")
        assert resolve_api_key() == "saved-key"

    def test_falls_back_to_daemon_config(
        self,
        config_dir: Path,
        write_daemon_config: Callable[[str], Path],
    ) -> None:
        """Without a saved key, the daemon's key is used."""
        write_daemon_config("daemon-key")
        assert resolve_api_key() == "daemon-key"

    def test_saved_host_only_still_falls_back(
        self,
        config_dir: Path,
        write_daemon_config: Callable[[str], Path],
    ) -> None:
        """A saved host without a key should not stop the fallback."""
        write_daemon_config("daemon-key")
        save_preferences(host="http://nas:8384")
        assert resolve_api_key() == "daemon-key"

    def test_explicit_daemon_config_path(self, config_dir: Path, tmp_path: Path) -> None:
        """An explicit daemon config path should be used when given."""
        path = tmp_path / "other.xml"
        path.write_text("<apikey>other-key</apikey>")
        assert resolve_api_key(path) == "other-key"

    def test_not_found(self, config_dir: Path, daemon_config_file: Path) -> None:
        """Without any source, the daemon config path is reported."""
        with pytest.raises(CredentialsNotFound) as exc_info:
            resolve_api_key()
        assert exc_info.value.path == daemon_config_file
        assert str(daemon_config_file) in str(exc_info.value)


class TestResolveBaseUrl:
    """Tests for base URL precedence."""

    def test_default(self, config_dir: Path) -> None:
        """Without override or preference, the local default is used."""
        assert resolve_base_url() == DEFAULT_HOST

    def test_saved_host(self, config_dir: Path) -> None:
        """A saved host should be normalized and used."""
        save_preferences(host="nas.local:8384/")
        assert resolve_base_url() == "http://nas.local:8384"

    def test_override_wins(self, config_dir: Path) -> None:
        """An override should win over the saved host."""
        save_preferences(host="http://nas.local:8384")
        assert resolve_base_url("https://other:8384/") == "https://other:8384"

    def test_override_without_scheme(self, config_dir: Path) -> None:
        """An override without scheme should get http://."""
        assert resolve_base_url("10.0.0.5:8384") == "http://10.0.0.5:8384"


class TestResolveDaemonConfig:
    """Tests for building the connection settings."""

    def test_combines_sources(
        self,
        config_dir: Path,
        write_daemon_config: Callable[[str], Path],
    ) -> None:
        """Should combine resolved URL, key and TLS setting."""
        write_daemon_config("daemon-key")
        save_preferences(host="https://nas:8384")

        config = resolve_daemon_config(verify_ssl=True)

        assert config.base_url == "https://nas:8384"
        assert config.api_key == "daemon-key"
        assert config.verify_ssl is True

    def test_missing_key(self, config_dir: Path, daemon_config_file: Path) -> None:
        """Should propagate CredentialsNotFound."""
        with pytest.raises(CredentialsNotFound):
            resolve_daemon_config(host="http://test")
