"""
Value objects package for domain layer.
"""

from .full_name import FullName
from .patient_data import PatientData

__all__ = [
    "FullName",
    "PatientData",
]
