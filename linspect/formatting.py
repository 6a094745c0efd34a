"""Human-readable renderings of byte counts and durations."""

from __future__ import annotations

import math
from bisect import bisect_right

_BYTE_UNITS = ("B", "kB", "MB", "GB", "TB", "PB", "EB")
_BYTE_BASE = 1000.0

_SECOND = 1000
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR
_WEEK = 7 * _DAY
_MONTH = 30 * _DAY
_YEAR = 12 * _MONTH
_LONG_TIME = 37 * _YEAR

# (exclusive upper bound in milliseconds, template, divisor for the count)
_DURATION_SCALE = (
    (_SECOND, "0 seconds", None),
    (2 * _SECOND, "1 second", None),
    (_MINUTE, "{} seconds", _SECOND),
    (2 * _MINUTE, "1 minute", None),
    (_HOUR, "{} minutes", _MINUTE),
    (2 * _HOUR, "1 hour", None),
    (_DAY, "{} hours", _HOUR),
    (2 * _DAY, "1 day", None),
    (_WEEK, "{} days", _DAY),
    (2 * _WEEK, "1 week", None),
    (_MONTH, "{} weeks", _WEEK),
    (2 * _MONTH, "1 month", None),
    (_YEAR, "{} months", _MONTH),
    (18 * _MONTH, "1 year", None),
    (2 * _YEAR, "2 years", None),
    (_LONG_TIME, "{} years", _YEAR),
)
_DURATION_BOUNDS = [bound for bound, _, _ in _DURATION_SCALE]


def humanize_bytes(n: int) -> str:
    """Render a byte count with SI (base 1000) units, e.g. ``"83 MB"``."""
    n = int(n)
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if n < 10:
        return f"{n} B"
    exponent = int(math.floor(math.log(n) / math.log(_BYTE_BASE)))
    suffix = _BYTE_UNITS[exponent]
    value = math.floor(n / math.pow(_BYTE_BASE, exponent) * 10 + 0.5) / 10
    if value < 10:
        return f"{value:.1f} {suffix}"
    return f"{value:.0f} {suffix}"


def humanize_duration_ms(ms: int) -> str:
    """Render a duration given in milliseconds, e.g. ``"3 minutes"``."""
    ms = int(ms)
    if ms < 0:
        raise ValueError(f"duration must not be negative, got {ms}")
    position = bisect_right(_DURATION_BOUNDS, ms)
    if position == len(_DURATION_SCALE):
        return "a long while"
    _, template, divisor = _DURATION_SCALE[position]
    if divisor is None:
        return template
    return template.format(ms // divisor)