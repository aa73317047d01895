"""Value objects used across the domain layer."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class PersonModel:
    """Immutable value object for one person record.

    Conventions:
      - `id` is 0 until the store assigns one.
      - `height_in_inches` is a float (feet already folded in).
    """

    first_name: str
    last_name: str
    height_in_inches: float
    id: int = 0

    def as_row(self) -> dict[str, Any]:
        """Return the record keyed by ``Person`` column names."""
        return {
            "Id": self.id,
            "FirstName": self.first_name,
            "LastName": self.last_name,
            "HeightInInches": self.height_in_inches,
        }

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> PersonModel:
        """Build a record from a ``Person`` row mapping."""
        return cls(
            first_name=row["FirstName"],
            last_name=row["LastName"],
            height_in_inches=float(row["HeightInInches"]),
            id=int(row["Id"]),
        )
