"""Tests for daemon connection settings."""

from __future__ import annotations

from syncthing_cli.core.config import DEFAULT_HOST, DaemonConfig, normalize_url


class TestNormalizeUrl:
    """Tests for normalize_url."""

    def test_adds_http_scheme(self) -> None:
        """Should prefix http:// when no scheme is given."""
        assert normalize_url("192.168.1.100:8384") == "http://192.168.1.100:8384"

    def test_keeps_https_scheme(self) -> None:
        """Should keep an explicit https scheme."""
        assert normalize_url("https://nas.local:8384") == "https://nas.local:8384"

    def test_strips_trailing_slashes(self) -> None:
        """Should strip trailing slashes."""
        assert normalize_url("http://localhost:8384/") == "http://localhost:8384"
        assert normalize_url("localhost:8384//") == "http://localhost:8384"

    def test_strips_whitespace(self) -> None:
        """Should ignore surrounding whitespace."""
        assert normalize_url("  localhost:8384 ") == "http://localhost:8384"

    def test_default_host_is_normalized(self) -> None:
        """DEFAULT_HOST should already be in normalized form."""
        assert normalize_url(DEFAULT_HOST) == DEFAULT_HOST


class TestDaemonConfig:
    """Tests for DaemonConfig class."""

    def test_init_basic(self) -> None:
        """Should initialize with required fields and defaults."""
        config = DaemonConfig(base_url="http://localhost:8384", api_key="key")
        assert config.base_url == "http://localhost:8384"
        assert config.api_key == "key"
        assert config.timeout == 30.0
        assert config.verify_ssl is False

    def test_url_normalized(self) -> None:
        """Should normalize the base URL on creation."""
        config = DaemonConfig(base_url="nas:8384/", api_key="key")
        assert config.base_url == "http://nas:8384"

    def test_verify_ssl_enabled(self) -> None:
        """Should accept verify_ssl=True."""
        config = DaemonConfig(base_url="https://nas:8384", api_key="key", verify_ssl=True)
        assert config.verify_ssl is True

    def test_is_secure(self) -> None:
        """Should report HTTPS URLs as secure."""
        assert DaemonConfig(base_url="https://nas:8384", api_key="k").is_secure is True
        assert DaemonConfig(base_url="http://nas:8384", api_key="k").is_secure is False
