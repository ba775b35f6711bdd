"""
Appointment status values shared by every provider.
"""

from enum import Enum


class AppointmentStatus(str, Enum):
    """Normalized appointment status; provider raw statuses map onto these."""
    SCHEDULED = "scheduled"
    CANCELLED = "cancelled"
    COMPLETED = "completed"
