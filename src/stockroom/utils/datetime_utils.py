"""Datetime helpers for timezone-aware timestamps.

Usage:
    from stockroom.utils.datetime_utils import utc_now, format_local

    fetched_at = utc_now()
    label = format_local(fetched_at)  # "2026-10-19 14:05"
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


def format_local(moment: datetime, fmt: str = "%Y-%m-%d %H:%M") -> str:
    """Format a timezone-aware datetime in the machine's local timezone."""
    return moment.astimezone().strftime(fmt)
