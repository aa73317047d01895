"""Data-access interfaces for ROSTER.

This module defines:
- The `Record` protocol that persisted value objects implement.
- The `DataAccess` port (framework-free ABC) for running SQL text against a store.
- A small, adapter-agnostic exception hierarchy for precise error handling.

Layering & dependency rules:
- Lives under `roster.interfaces`. Do NOT import from adapters, bootstrap, or entrypoints.
- Safe to import from service layer and adapters.

Contract overview
-----------------
Statements:
- SQL text is passed through verbatim; named parameters use the ``@Name`` form.
- Parameter values are taken from ``record.as_row()`` by name. Keys of the row
  that the statement does not reference are ignored.

Reads:
- `load_data(sql, model)` returns one `model` per result row, in store order.
  Empty results yield an empty list.

Writes:
- `save_data(record, sql)` and `update_data(record, sql)` run a single statement
  and return nothing. No existence or duplicate checks are made; identity is the
  store's responsibility.

Errors:
- `StoreUnavailableError`: store unreachable, missing table, malformed statement.
- `InvalidRecordError`: the store rejected the bound values (constraints, types).
- `MissingParameterError`: the statement names a parameter the record lacks.
- `DataAccessNotConfiguredError`: no data-access collaborator was supplied.
"""

from __future__ import annotations

import abc
from collections.abc import Mapping
from typing import Any, Protocol, TypeVar

# --- Exceptions to standardize adapter behavior ---


class DataAccessError(Exception):
    """Base class for ROSTER data-access errors."""


class StoreUnavailableError(DataAccessError):
    """Operational/driver errors: unreachable store, bad schema or statement."""


class InvalidRecordError(DataAccessError):
    """The store rejected the values bound from a record."""


class MissingParameterError(DataAccessError):
    """A statement references a parameter the record does not provide."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Statement parameter @{name} has no value in the record.")
        self.name = name


class DataAccessNotConfiguredError(DataAccessError):
    """A persistence operation was requested without a data-access collaborator."""


# --- Record protocol ---

R = TypeVar("R", bound="Record")


class Record(Protocol):
    """A value object that can be bound to, and rebuilt from, a table row."""

    def as_row(self) -> dict[str, Any]:
        """Return column-name keyed values used to bind ``@Name`` parameters."""
        ...  # pylint: disable=unnecessary-ellipsis

    @classmethod
    def from_row(cls: type[R], row: Mapping[str, Any]) -> R:
        """Build a record from a result row mapping."""
        ...  # pylint: disable=unnecessary-ellipsis


# --- Port ---


class DataAccess(abc.ABC):
    """Port for executing SQL text against a persistent store."""

    @abc.abstractmethod
    def load_data(self, sql: str, model: type[R]) -> list[R]:
        """Run a query and build one `model` per result row.

        Args:
            sql: Query text, e.g. ``select * from Person``.
            model: Record class used to build each result via ``from_row``.

        Returns:
            The records in the order the store returned them.

        Raises:
            StoreUnavailableError: If the store is unreachable or the query is malformed.
        """

    @abc.abstractmethod
    def save_data(self, record: Record, sql: str) -> None:
        """Run an insert statement bound to `record`.

        Raises:
            StoreUnavailableError: If the store is unreachable or the statement is malformed.
            InvalidRecordError: If the store rejects the bound values.
            MissingParameterError: If the statement names a parameter the record lacks.
        """

    @abc.abstractmethod
    def update_data(self, record: Record, sql: str) -> None:
        """Run an update statement bound to `record`.

        Raises:
            StoreUnavailableError: If the store is unreachable or the statement is malformed.
            InvalidRecordError: If the store rejects the bound values.
            MissingParameterError: If the statement names a parameter the record lacks.
        """
