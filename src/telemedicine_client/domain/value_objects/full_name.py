"""
Full name value object.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FullName:
    """Immutable person name with collapsed whitespace."""

    value: str

    def __post_init__(self) -> None:
        """Normalize and validate the name."""
        if not isinstance(self.value, str):
            raise ValueError("Full name must be a string")

        normalized = " ".join(self.value.split())
        if not normalized:
            raise ValueError("Full name cannot be empty")

        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    @property
    def first_name(self) -> str:
        return self.value.split(" ")[0]

    @property
    def last_name(self) -> str:
        """Everything after the first name; empty for single-word names."""
        parts = self.value.split(" ", 1)
        return parts[1] if len(parts) > 1 else ""

    @classmethod
    def from_full_name_string(cls, full_name: str) -> "FullName":
        return cls(full_name)
