"""Lookback window parsing."""

import re

import pendulum

from ..errors import ConfigurationError

_HOURS_RE = re.compile(r"^(\d+(?:\.\d+)?)h$")
_DAYS_RE = re.compile(r"^(\d+)d$")


def parse_lookback(value: str) -> pendulum.Duration:
    """
    Parse a lookback string such as ``30d`` or ``12h``.

    Args:
        value: Number followed by ``h`` (hours) or ``d`` (whole days)

    Returns:
        The resolved duration
    """
    value = (value or "").strip()
    if not value or value[-1] not in ("h", "d"):
        raise ConfigurationError("report duration should be in hours or days (eg 1h or 30d)")

    if value.endswith("d"):
        match = _DAYS_RE.match(value)
        if not match:
            raise ConfigurationError(f"could not parse number of days: {value!r}")
        return pendulum.duration(hours=int(match.group(1)) * 24)

    match = _HOURS_RE.match(value)
    if not match:
        raise ConfigurationError(f"failed to parse duration: {value!r}")
    return pendulum.duration(seconds=round(float(match.group(1)) * 3600))
