"""Display formatting for timestamps, durations and counts.

All functions are pure and accept ``None`` where the backend may omit a value:
- Timestamps: rendered in the local timezone
- Durations: milliseconds to "ms" / "s" / "M:SS min"
- Counts: integer or the placeholder dash
"""

from datetime import datetime, timezone

from querywatch.constants.values import PLACEHOLDER_DASH

_TIME_FORMAT = "%H:%M"
_DATETIME_FORMAT = "%Y-%m-%d %H:%M"

# Smallest values that would print as "1000 ms" and "60.00 s".
_MS_ROLLOVER = 999.5
_SECONDS_ROLLOVER = 59.995


def _to_local(ts: datetime) -> datetime:
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.astimezone()


def fmt_time(ts: datetime | None) -> str:
    """Format a timestamp as local time of day, e.g. ``"14:07"``."""
    if ts is None:
        return PLACEHOLDER_DASH
    return _to_local(ts).strftime(_TIME_FORMAT)


def fmt_datetime(ts: datetime | None) -> str:
    """Format a timestamp as local date and time, e.g. ``"2024-05-01 14:07"``."""
    if ts is None:
        return PLACEHOLDER_DASH
    return _to_local(ts).strftime(_DATETIME_FORMAT)


def fmt_duration(ms: float | None) -> str:
    """Format a duration in milliseconds for humans.

    Rules:
    - None: placeholder dash
    - Under one second: rounded milliseconds ("999 ms")
    - Under one minute: seconds with two decimals ("1.50 s")
    - Otherwise: minutes and zero-padded seconds, truncated ("1:05 min")

    The unit is chosen from the rounded value, so 999.6 ms reads "1.00 s"
    and 59 996 ms reads "1:00 min" rather than "1000 ms" or "60.00 s".

    Args:
        ms: Duration in milliseconds, or None when absent

    Returns:
        Formatted duration string.
    """
    if ms is None:
        return PLACEHOLDER_DASH
    if ms < _MS_ROLLOVER:
        return f"{ms:.0f} ms"
    seconds = ms / 1000
    if seconds < _SECONDS_ROLLOVER:
        return f"{seconds:.2f} s"
    # Seconds truncate; values just under a minute still read "1:00 min".
    minutes, remainder = divmod(max(int(seconds), 60), 60)
    return f"{minutes}:{remainder:02d} min"


def fmt_optional_count(value: int | None) -> str:
    """Format an optional count; absent counts render as the placeholder dash."""
    if value is None:
        return PLACEHOLDER_DASH
    return str(value)


__all__ = [
    "fmt_datetime",
    "fmt_duration",
    "fmt_optional_count",
    "fmt_time",
]
