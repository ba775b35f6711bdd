"""
Utility functions for the telemedicine client.
"""

from .datetime_utils import (
    format_date,
    is_aware,
    next_full_hour,
    parse_provider_datetime,
    today_in,
)
from .hashing import stable_hash

__all__ = [
    # Datetime utilities
    "format_date",
    "is_aware",
    "next_full_hour",
    "parse_provider_datetime",
    "today_in",
    # Hashing utilities
    "stable_hash",
]
