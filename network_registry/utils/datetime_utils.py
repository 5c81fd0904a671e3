"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the entire application.
All datetime operations use the timezone configured in network_registry.core.config.

Functions:
- now(): Returns timezone-aware datetime object
- later_than(): Returns now(), bumped past a previous timestamp if needed
- truncate(): Drop precision below TIMESTAMP_RESOLUTION
- to_iso(): Convert datetime object to ISO 8601 string
"""
import logging
import zoneinfo
from datetime import datetime, timedelta, timezone as dt_timezone, tzinfo
from typing import Optional

from network_registry.core.config import get_settings

logger = logging.getLogger(__name__)

# Smallest step between two stored timestamps (BSON dates are milliseconds)
TIMESTAMP_RESOLUTION = timedelta(milliseconds=1)


def _get_app_timezone() -> tzinfo:
    """
    Get the application timezone from config.
    Returns timezone object (defaults to UTC if invalid).
    """
    tz_str = get_settings().timezone
    
    # Handle UTC explicitly
    if tz_str.upper() == "UTC":
        return dt_timezone.utc
    
    try:
        return zoneinfo.ZoneInfo(tz_str)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        logger.warning("Invalid timezone %r, falling back to UTC", tz_str)
        return dt_timezone.utc


def truncate(dt: datetime) -> datetime:
    """Drop the sub-millisecond part of a datetime."""
    resolution_us = TIMESTAMP_RESOLUTION // timedelta(microseconds=1)
    return dt.replace(microsecond=dt.microsecond - dt.microsecond % resolution_us)


def now() -> datetime:
    """
    Get current datetime with application-configured timezone.

    The value is truncated to TIMESTAMP_RESOLUTION so it survives a round
    trip through the store unchanged.

    Returns:
        timezone-aware datetime object
    """
    return truncate(datetime.now(_get_app_timezone()))


def later_than(previous: datetime) -> datetime:
    """
    Get the current datetime, guaranteed to be strictly after `previous`.

    Two writes within the same millisecond would otherwise get the same
    stored timestamp, so the result is bumped to `previous` plus one
    TIMESTAMP_RESOLUTION in that case.

    Args:
        previous: Timestamp the result must follow

    Returns:
        timezone-aware datetime object
    """
    current = truncate(now())
    if current <= previous:
        return truncate(previous) + TIMESTAMP_RESOLUTION
    return current


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to ISO 8601 string.
    If datetime is naive, assumes application timezone.
    
    Args:
        dt: datetime object (timezone-aware or naive)
    
    Returns:
        ISO 8601 formatted string, or None if dt is None
    """
    if dt is None:
        return None
    
    # If naive, assume application timezone
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=_get_app_timezone())
    
    # Format with timezone offset, or 'Z' if UTC
    if dt.utcoffset() == timedelta(0):
        return dt.astimezone(dt_timezone.utc).isoformat().replace("+00:00", "Z")
    return dt.isoformat()
