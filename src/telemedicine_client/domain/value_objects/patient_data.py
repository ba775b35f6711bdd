"""
Patient data used to authenticate against a provider and to book appointments.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict

from .full_name import FullName


@dataclass(frozen=True)
class PatientData:
    """Immutable patient identification and contact data."""

    name: FullName
    document_number: str
    gender: str
    birth_date: date
    phone: str
    email: str

    def __post_init__(self) -> None:
        """Validate patient data."""
        if isinstance(self.name, str):
            object.__setattr__(self, "name", FullName(self.name))

        if isinstance(self.birth_date, datetime):
            object.__setattr__(self, "birth_date", self.birth_date.date())

        if not self.document_number or not self.document_number.strip():
            raise ValueError("Document number cannot be empty")

        if not isinstance(self.birth_date, date):
            raise ValueError("Birth date must be a date")

    def normalized_fields(self) -> Dict[str, Any]:
        """Plain mapping of the fields with whitespace and case normalized."""
        return {
            "name": str(self.name),
            "document_number": self.document_number.strip(),
            "gender": self.gender.strip(),
            "birth_date": self.birth_date.isoformat(),
            "phone": self.phone.strip(),
            "email": self.email.strip().lower(),
        }
