"""SQLAlchemy-backed DataAccess adapter for ROSTER.

This module provides a SQLAlchemy implementation of the DataAccess port. SQL
text is executed as given; ``@Name`` parameters are rewritten to SQLAlchemy
``:Name`` binds and filled from ``record.as_row()``. Each call runs on its own
connection: reads use ``engine.connect()``, writes use ``engine.begin()`` so
they commit on success and roll back on error.

Usage:
    Instantiate SqlAlchemyDataAccess with an Engine from
    ``roster.adapters.db.engine.make_engine`` pointing at a database that has
    the ``Person`` table (see adapters.db.schema).

Exceptions:
    Maps SQLAlchemy errors to ROSTER data-access exceptions.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

from sqlalchemy import TextClause, text
from sqlalchemy.exc import DataError, DBAPIError, IntegrityError

from roster.interfaces.data_access import (
    DataAccess,
    InvalidRecordError,
    MissingParameterError,
    R,
    Record,
    StoreUnavailableError,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

# @FirstName -> :FirstName
PARAMETER_RE = re.compile(r"@(\w+)")


class SqlAlchemyDataAccess(DataAccess):
    """SQLAlchemy-backed DataAccess.

    - Runs SQL text verbatim apart from parameter syntax.
    - Binds only the parameters a statement references.
    - Returns rows in the order the store produced them.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    # --------------------------------------------------------------------- #
    # Interface implementation
    # --------------------------------------------------------------------- #

    def load_data(self, sql: str, model: type[R]) -> list[R]:
        stmt = self._to_statement(sql)
        logger.debug("Loading %s: %s", model.__name__, sql)
        try:
            with self.engine.connect() as connection:
                rows = connection.execute(stmt).mappings().all()
        except DBAPIError as e:
            raise StoreUnavailableError(str(e)) from e
        return [model.from_row(row) for row in rows]

    def save_data(self, record: Record, sql: str) -> None:
        self._execute_write(record, sql)

    def update_data(self, record: Record, sql: str) -> None:
        self._execute_write(record, sql)

    # --------------------------------------------------------------------- #
    # Internals
    # --------------------------------------------------------------------- #

    def _execute_write(self, record: Record, sql: str) -> None:
        """Execute a single write statement bound to `record` and commit it."""
        stmt = self._to_statement(sql)
        params = self._bind_parameters(sql, record)
        logger.debug("Executing %s with %s", sql, sorted(params))
        try:
            with self.engine.begin() as connection:
                connection.execute(stmt, params)
        except (IntegrityError, DataError) as e:
            raise InvalidRecordError(str(e)) from e
        except DBAPIError as e:  # OperationalError, ProgrammingError, etc.
            raise StoreUnavailableError(str(e)) from e

    @staticmethod
    def _to_statement(sql: str) -> TextClause:
        """Rewrite ``@Name`` parameters to ``:Name`` and wrap in `text()`."""
        return text(PARAMETER_RE.sub(r":\1", sql))

    @staticmethod
    def _bind_parameters(sql: str, record: Record) -> dict[str, Any]:
        """Collect the values for every ``@Name`` in `sql` from `record`.

        Raises:
            MissingParameterError: If the record has no value for a parameter.
        """
        row = record.as_row()
        params: dict[str, Any] = {}
        for name in PARAMETER_RE.findall(sql):
            if name not in row:
                raise MissingParameterError(name)
            params[name] = row[name]
        return params
