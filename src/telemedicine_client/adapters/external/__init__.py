"""
Real provider integrations.
"""

from .fleury_error_handler import FleuryErrorHandler
from .fleury_provider import FleuryScheduledTelemedicineProvider

__all__ = ["FleuryErrorHandler", "FleuryScheduledTelemedicineProvider"]
