"""
Short display strings for axis ticks, tooltips and colorbar labels.
"""

import logging
from datetime import datetime, timezone as dt_timezone
from typing import Callable, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)


def _exponential(value: float) -> str:
    # 0.00123 -> "1.2e-3", no zero padding on the exponent
    mantissa, exponent = f"{value:.1e}".split('e')
    return f"{mantissa}e{int(exponent)}"


def format_value(value: float) -> str:
    """
    Canonical short label for a number.

    Examples:
        format_value(2500000)  # '2.5M'
        format_value(1500)     # '1.5K'
        format_value(0.00123)  # '1.2e-3'
        format_value(0)        # '0.00'
    """
    magnitude = abs(value)
    if magnitude >= 1e6:
        return f"{value / 1e6:.1f}M"
    if magnitude >= 1e3:
        return f"{value / 1e3:.1f}K"
    if 0 < magnitude < 0.01:
        return _exponential(value)
    if value == 0:
        return "0.00"
    return f"{value:.2f}"


def format_tick(value: float, formatter: Optional[Callable[[float], str]] = None) -> str:
    """Format with a caller-supplied formatter, falling back to format_value()."""
    if formatter is not None:
        return formatter(value)
    return format_value(value)


def _to_datetime(timestamp: float, timezone: str) -> datetime:
    try:
        tz = ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r, falling back to UTC", timezone)
        tz = dt_timezone.utc
    return datetime.fromtimestamp(timestamp / 1000, tz=tz)


def format_time(timestamp: float, timezone: str = "UTC") -> str:
    """
    24-hour HH:MM:SS for a millisecond epoch timestamp.

    Args:
        timestamp: Milliseconds since the Unix epoch
        timezone: IANA zone name; unknown zones fall back to UTC
    """
    return _to_datetime(timestamp, timezone).strftime("%H:%M:%S")


def format_date(timestamp: float, timezone: str = "UTC") -> str:
    """Short month/day label ('Mar 05') for a millisecond epoch timestamp."""
    return _to_datetime(timestamp, timezone).strftime("%b %d")
