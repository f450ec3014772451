"""Human readable durations."""

from datetime import timedelta

_MS_UNITS = (
    ("d", 86_400_000),
    ("h", 3_600_000),
    ("m", 60_000),
    ("s", 1_000),
)


def format_duration(value: timedelta) -> str:
    """Format whole seconds like ``45s``, ``1m30s`` or ``1h2m3s``."""
    seconds = int(value.total_seconds())
    sign = "-" if seconds < 0 else ""
    seconds = abs(seconds)

    hours, rest = divmod(seconds, 3600)
    minutes, seconds = divmod(rest, 60)

    if hours:
        return f"{sign}{hours}h{minutes}m{seconds}s"
    if minutes:
        return f"{sign}{minutes}m{seconds}s"
    return f"{sign}{seconds}s"


def pretty_ms(ms: int) -> str:
    """Format milliseconds like ``750ms``, ``1m 5s`` or ``1d 4h``."""
    if ms < 1000:
        return f"{ms}ms"

    parts = []
    for suffix, size in _MS_UNITS:
        count, ms = divmod(ms, size)
        if count:
            parts.append(f"{count}{suffix}")
    return " ".join(parts)


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def fuzzy_span(value: timedelta) -> str:
    """Describe a lookback window, eg ``30 days`` or ``12 hours``."""
    seconds = int(value.total_seconds())

    if seconds and seconds % 86400 == 0:
        return _plural(seconds // 86400, "day")
    if seconds and seconds % 3600 == 0:
        return _plural(seconds // 3600, "hour")
    return _plural(seconds // 60, "minute")
