"""Human-readable formatting of daemon values."""

from __future__ import annotations

from datetime import UTC, datetime

KB = 1024
MB = KB * 1024
GB = MB * 1024
TB = GB * 1024

SHORT_ID_LENGTH = 7


def format_bytes(size: int) -> str:
    """Format a byte count with binary units.

    Example:
        >>> format_bytes(12345678)
        '11.8 MB'
    """
    for unit, name in ((TB, "TB"), (GB, "GB"), (MB, "MB"), (KB, "KB")):
        if size >= unit:
            return f"{size / unit:.1f} {name}"
    return f"{size} B"


def format_uptime(seconds: int) -> str:
    """Format an uptime in seconds as hours and minutes."""
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    return f"{hours}h {minutes}m"


def format_duration_since(timestamp: str, now: datetime | None = None) -> str:
    """Format how long ago an RFC 3339 timestamp was.

    Args:
        timestamp: Timestamp as reported by the daemon.
        now: Reference time (default: current UTC time).

    Returns:
        "3d ago", "5h ago", "12m ago" or "just now". Timestamps that
        cannot be parsed are returned unchanged.
    """
    try:
        when = datetime.fromisoformat(timestamp)
    except ValueError:
        return timestamp
    if when.tzinfo is None:
        when = when.replace(tzinfo=UTC)

    delta = (now or datetime.now(UTC)) - when
    seconds = int(delta.total_seconds())
    if seconds >= 86400:
        return f"{seconds // 86400}d ago"
    if seconds >= 3600:
        return f"{seconds // 3600}h ago"
    if seconds >= 60:
        return f"{seconds // 60}m ago"
    return "just now"


def short_id(device_id: str) -> str:
    """Shorten a device ID to its first block."""
    return device_id[:SHORT_ID_LENGTH]
