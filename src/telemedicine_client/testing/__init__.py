"""
Test doubles for code that depends on a telemedicine provider.
"""

from .fake_provider import FakeScheduledTelemedicineProvider

__all__ = ["FakeScheduledTelemedicineProvider"]
