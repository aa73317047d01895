"""Person use-cases: validation, height conversion and persistence delegation."""

from __future__ import annotations

import logging
import math
import re
from typing import NamedTuple

from roster.domain.errors import InvalidArgumentError
from roster.domain.models import PersonModel
from roster.interfaces.data_access import DataAccess, DataAccessNotConfiguredError

logger = logging.getLogger(__name__)

LOAD_PEOPLE_SQL = "select * from Person"  # pragma: no mutate
SAVE_PERSON_SQL = (
    "insert into Person (FirstName, LastName, HeightInInches) "
    "values (@FirstName, @LastName, @HeightInInches)"
)
UPDATE_PERSON_SQL = (
    "update Person set FirstName = @FirstName, LastName = @LastName"
    ", HeightInInches = @HeightInInches where Id = @Id"
)

FEET_DELIMITER = "'"
INCHES_SUFFIX = '"'
INCHES_PER_FOOT = 12

# unsigned decimal: 6, 5.5, .5
_MEASURE_RE = re.compile(r"\d+(?:\.\d+)?|\.\d+", re.ASCII)


class HeightConversion(NamedTuple):
    """Result of converting height text; unpacks as ``(is_valid, height_in_inches)``."""

    is_valid: bool
    height_in_inches: float


INVALID_HEIGHT = HeightConversion(False, 0.0)


class PersonProcessor:
    """Validate and convert person input; delegate persistence to a `DataAccess` port.

    The data-access collaborator may be omitted when only the pure operations
    (`convert_height_text_to_inches`, `create_person`) are used.
    """

    def __init__(self, data_access: DataAccess | None = None) -> None:
        self._data_access = data_access

    # --------------------------------------------------------------------- #
    # Conversion & validation
    # --------------------------------------------------------------------- #

    def convert_height_text_to_inches(self, height_text: str) -> HeightConversion:
        """Convert ``<feet>'<inches>"`` text to a height in inches.

        Args:
            height_text: Height text such as ``6'8"`` or ``5.5'0"``.

        Returns:
            ``(True, feet * 12 + inches)`` when the text is well-formed, otherwise
            ``(False, 0.0)``.
        """
        parts = height_text.split(FEET_DELIMITER)
        if len(parts) != 2:  # pylint: disable=magic-value-comparison
            return INVALID_HEIGHT

        feet_text, inches_text = parts
        if not inches_text.endswith(INCHES_SUFFIX):
            return INVALID_HEIGHT

        feet = self._parse_measure(feet_text)
        inches = self._parse_measure(inches_text[: -len(INCHES_SUFFIX)])
        if feet is None or inches is None:
            return INVALID_HEIGHT

        height_in_inches = feet * INCHES_PER_FOOT + inches
        if not math.isfinite(height_in_inches):
            return INVALID_HEIGHT
        return HeightConversion(True, height_in_inches)

    def create_person(
        self, first_name: str, last_name: str, height_text: str
    ) -> PersonModel:
        """Validate input and build an unsaved `PersonModel` (``id == 0``).

        Rules are checked in order, so the first failing parameter is reported.

        Raises:
            InvalidArgumentError: Tagged ``first_name`` or ``last_name`` when the
                name is empty or contains anything but letters; tagged
                ``height_text`` when the height cannot be converted.
        """
        if not self._is_valid_name(first_name):
            raise InvalidArgumentError(
                "first_name", first_name, "must be non-empty and letters only"
            )
        if not self._is_valid_name(last_name):
            raise InvalidArgumentError(
                "last_name", last_name, "must be non-empty and letters only"
            )

        is_valid, height_in_inches = self.convert_height_text_to_inches(height_text)
        if not is_valid:
            raise InvalidArgumentError(
                "height_text", height_text, "expected <feet>'<inches>\" (e.g. 6'8\")"
            )

        return PersonModel(
            first_name=first_name,
            last_name=last_name,
            height_in_inches=height_in_inches,
        )

    # --------------------------------------------------------------------- #
    # Persistence delegation
    # --------------------------------------------------------------------- #

    def load_people(self) -> list[PersonModel]:
        """Return every person the store holds, exactly as the store returns them."""
        return self._require_data_access().load_data(LOAD_PEOPLE_SQL, PersonModel)

    def save_person(self, person: PersonModel) -> None:
        """Insert `person`; the store assigns its id."""
        logger.debug("Saving person %s %s", person.first_name, person.last_name)
        self._require_data_access().save_data(person, SAVE_PERSON_SQL)

    def update_person(self, person: PersonModel) -> None:
        """Update the stored person with ``person.id``.

        No existence check is made; an unknown id is left to the store.
        """
        logger.debug("Updating person id=%s", person.id)
        self._require_data_access().update_data(person, UPDATE_PERSON_SQL)

    # --------------------------------------------------------------------- #
    # Internals
    # --------------------------------------------------------------------- #

    def _require_data_access(self) -> DataAccess:
        if self._data_access is None:
            raise DataAccessNotConfiguredError(
                "PersonProcessor was created without a data-access collaborator."
            )
        return self._data_access

    @staticmethod
    def _is_valid_name(name: str) -> bool:
        # str.isalpha() is False for "", so empty names fail too
        return name.isalpha()

    @staticmethod
    def _parse_measure(text: str) -> float | None:
        """Parse an unsigned integer or decimal, or return None.

        Digit strings too long for a float (they overflow to inf) are rejected.
        """
        if not _MEASURE_RE.fullmatch(text):
            return None
        value = float(text)
        return value if math.isfinite(value) else None
