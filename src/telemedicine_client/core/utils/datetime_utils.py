"""
Date and time utility functions for the telemedicine client.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Optional, Union
from zoneinfo import ZoneInfo


def is_aware(value: datetime) -> bool:
    """Check if a datetime carries a usable UTC offset."""
    return value.tzinfo is not None and value.tzinfo.utcoffset(value) is not None


def format_date(value: Union[date, datetime], format_str: str = "%Y-%m-%d") -> str:
    """Format a date or datetime as a calendar date string."""
    return value.strftime(format_str)


def today_in(tz_name: str) -> date:
    """Current calendar date in the given timezone."""
    return datetime.now(ZoneInfo(tz_name)).date()


def next_full_hour(now: Optional[datetime] = None) -> datetime:
    """Start of the hour following ``now`` (UTC when not given)."""
    now = now or datetime.now(timezone.utc)
    return now.replace(minute=0, second=0, microsecond=0) + timedelta(hours=1)


def parse_provider_datetime(value: str, default_tz: str) -> datetime:
    """Parse an ISO-8601 date-time coming from a provider.

    A trailing ``Z`` is accepted. Values without an offset are localized to
    ``default_tz`` so the result is always timezone-aware.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid provider date-time: {value!r}")

    raw = value.strip()
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"

    parsed = datetime.fromisoformat(raw)
    if not is_aware(parsed):
        parsed = parsed.replace(tzinfo=ZoneInfo(default_tz))
    return parsed
