"""HTTP client for the Syncthing REST API.

This module provides:
- SyncthingClient: authenticated client for the daemon's /rest endpoints
- GET/POST primitives that normalize failures into SyncthingError subclasses
- One method per REST endpoint used by the CLI
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from syncthing_cli.core.config import DaemonConfig
from syncthing_cli.core.errors import ApiError, DecodeError, TransportError
from syncthing_cli.core.types import NO_CONTENT, JSONValue, NoContent

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-API-Key"


class SyncthingClient:
    """HTTP client for the Syncthing REST API."""

    def __init__(self, config: DaemonConfig) -> None:
        """Initialize the client.

        Args:
            config: Daemon URL, API key and transport settings.
        """
        self._config = config
        if config.is_secure and not config.verify_ssl:
            # The daemon generates a self-signed certificate on first start,
            # so verification is relaxed unless --verify-tls is given.
            logger.debug(f"TLS certificate verification disabled for {config.base_url}")
        try:
            self._client = httpx.Client(
                base_url=config.base_url,
                timeout=config.timeout,
                verify=config.verify_ssl,
                headers={API_KEY_HEADER: config.api_key},
            )
        except httpx.InvalidURL as e:
            raise TransportError(f"Invalid daemon URL {config.base_url}: {e}") from e

    @property
    def base_url(self) -> str:
        """Base URL requests are sent to."""
        return self._config.base_url

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> SyncthingClient:
        """Context manager entry."""
        return self

    def __exit__(self, *args: object) -> None:
        """Context manager exit."""
        self.close()

    def _send(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: JSONValue | None = None,
    ) -> httpx.Response:
        """Send a request and check its status.

        Raises:
            TransportError: If no response was received.
            ApiError: If the status is not 2xx.
        """
        try:
            response = self._client.request(method, path, params=params, json=body)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise TransportError(f"Failed to send request to {self.base_url}{path}: {e}") from e

        logger.debug(f"{method} {path} -> {response.status_code}")
        if not response.is_success:
            raise ApiError(response.status_code, response.reason_phrase)
        return response

    @staticmethod
    def _decode(response: httpx.Response) -> JSONValue:
        """Parse a response body as JSON.

        Raises:
            DecodeError: If the body is not valid JSON.
        """
        try:
            return response.json()  # type: ignore[no-any-return]
        except ValueError as e:
            raise DecodeError(f"Failed to parse response: {e}") from e

    def _get(self, path: str, params: dict[str, Any] | None = None) -> JSONValue:
        return self._decode(self._send("GET", path, params=params))

    def _post(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        body: JSONValue | None = None,
    ) -> JSONValue | NoContent:
        response = self._send("POST", path, params=params, body=body)
        # Several POST endpoints answer with an empty body
        if not response.content:
            return NO_CONTENT
        return self._decode(response)

    # === System endpoints ===

    def status(self) -> JSONValue:
        """Get daemon status (memory, uptime, device ID)."""
        return self._get("/rest/system/status")

    def version(self) -> JSONValue:
        """Get daemon version information."""
        return self._get("/rest/system/version")

    def connections(self) -> JSONValue:
        """Get connection state for every configured device."""
        return self._get("/rest/system/connections")

    def errors(self) -> JSONValue:
        """Get the list of recent system errors."""
        return self._get("/rest/system/error")

    def clear_errors(self) -> JSONValue | NoContent:
        """Clear the list of recent system errors."""
        return self._post("/rest/system/error/clear")

    def restart(self) -> JSONValue | NoContent:
        """Restart the daemon."""
        return self._post("/rest/system/restart")

    def shutdown(self) -> JSONValue | NoContent:
        """Shut the daemon down."""
        return self._post("/rest/system/shutdown")

    # === Config endpoints ===

    def config(self) -> JSONValue:
        """Get the full daemon configuration."""
        return self._get("/rest/config")

    def config_folders(self) -> JSONValue:
        """Get configured folders."""
        return self._get("/rest/config/folders")

    def config_devices(self) -> JSONValue:
        """Get configured devices."""
        return self._get("/rest/config/devices")

    # === Database endpoints ===

    def db_status(self, folder: str) -> JSONValue:
        """Get database status of a folder.

        Args:
            folder: Folder ID.
        """
        return self._get("/rest/db/status", params={"folder": folder})

    def db_completion(self) -> JSONValue:
        """Get aggregated completion across all folders and devices."""
        return self._get("/rest/db/completion")

    def db_need(self, folder: str) -> JSONValue:
        """Get the files a folder still needs.

        Args:
            folder: Folder ID.
        """
        return self._get("/rest/db/need", params={"folder": folder})

    def db_scan(self, folder: str) -> JSONValue | NoContent:
        """Trigger a rescan of one folder.

        Args:
            folder: Folder ID.
        """
        return self._post("/rest/db/scan", params={"folder": folder})

    def db_scan_all(self) -> JSONValue | NoContent:
        """Trigger a rescan of all folders."""
        return self._post("/rest/db/scan")

    # === Stats endpoints ===

    def stats_device(self) -> JSONValue:
        """Get per-device statistics (last seen, ...)."""
        return self._get("/rest/stats/device")

    def stats_folder(self) -> JSONValue:
        """Get per-folder statistics (last scan, last file, ...)."""
        return self._get("/rest/stats/folder")

    # === Cluster endpoints ===

    def pending_devices(self) -> JSONValue:
        """Get devices that tried to connect but are not configured."""
        return self._get("/rest/cluster/pending/devices")

    def pending_folders(self) -> JSONValue:
        """Get folders offered by remote devices but not configured."""
        return self._get("/rest/cluster/pending/folders")

    # === Folder endpoints ===

    def folder_errors(self, folder: str) -> JSONValue:
        """Get per-file errors of a folder.

        Args:
            folder: Folder ID.
        """
        return self._get("/rest/folder/errors", params={"folder": folder})

    # === Events ===

    def events(self, since: int | None = None, limit: int | None = None) -> JSONValue:
        """Get events from the daemon's event log.

        Args:
            since: Only return events with an ID greater than this.
            limit: Maximum number of events to return.

        Returns:
            List of event objects, oldest first.
        """
        params: dict[str, Any] = {}
        if since is not None:
            params["since"] = since
        if limit is not None:
            params["limit"] = limit
        return self._get("/rest/events", params=params or None)
