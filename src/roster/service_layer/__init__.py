"""Service layer for ROSTER.

Implements the person use-cases: input validation, height conversion and
delegation of persistence to the data-access port.

Dependency rule: may import `roster.domain` and `roster.interfaces`, but not
`roster.adapters` or `roster.entrypoints`.
"""

from .person_processor import HeightConversion, PersonProcessor

__all__ = ["HeightConversion", "PersonProcessor"]
