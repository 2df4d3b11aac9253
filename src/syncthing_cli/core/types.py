"""Shared types for syncthing_cli.

This module defines the structured value type returned by the daemon,
the accessors used to read it defensively, and the error kinds.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeAlias

JSONValue: TypeAlias = (
    "dict[str, JSONValue] | list[JSONValue] | str | int | float | bool | None"
)


class NoContent(Enum):
    """Result of a call whose response body was empty.

    Kept distinct from ``None`` so an empty body and a JSON ``null``
    body can be told apart.
    """

    NO_CONTENT = "no_content"

    def __repr__(self) -> str:
        return "NO_CONTENT"


NO_CONTENT = NoContent.NO_CONTENT


class ErrorKind(str, Enum):
    """Kind of failure raised by the client and the credential resolver."""

    CREDENTIALS_NOT_FOUND = "credentials_not_found"
    TRANSPORT = "transport"
    API = "api"
    DECODE = "decode"


def get_value(doc: Any, *keys: str) -> Any:
    """Walk nested mappings and return the value at ``keys``.

    Args:
        doc: Document to read from.
        *keys: Successive mapping keys.

    Returns:
        The value found, or None if a key is missing or a step is not a mapping.
    """
    current = doc
    for key in keys:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


def get_str(doc: Any, *keys: str, default: str = "", allow_empty: bool = True) -> str:
    """Get a string field, or ``default`` if absent or not a string."""
    value = get_value(doc, *keys)
    if not isinstance(value, str):
        return default
    if not value and not allow_empty:
        return default
    return value


def get_int(doc: Any, *keys: str, default: int = 0) -> int:
    """Get an integer field. Booleans and floats count as absent."""
    value = get_value(doc, *keys)
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return value


def get_float(doc: Any, *keys: str, default: float = 0.0) -> float:
    """Get a numeric field as float. Integers are accepted."""
    value = get_value(doc, *keys)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    return float(value)


def get_bool(doc: Any, *keys: str, default: bool = False) -> bool:
    """Get a boolean field."""
    value = get_value(doc, *keys)
    if not isinstance(value, bool):
        return default
    return value


def get_dict(doc: Any, *keys: str) -> dict[str, Any]:
    """Get a mapping field, or an empty dict."""
    value = get_value(doc, *keys) if keys else doc
    if not isinstance(value, dict):
        return {}
    return value


def get_list(doc: Any, *keys: str) -> list[Any]:
    """Get a sequence field, or an empty list."""
    value = get_value(doc, *keys) if keys else doc
    if not isinstance(value, list):
        return []
    return value
