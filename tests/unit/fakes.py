"""Fake implementations of the data-access port for unit tests."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from roster.interfaces.data_access import DataAccess, R, Record


@dataclass(frozen=True, slots=True)
class Call:
    """One recorded call to the data-access port."""

    method: str
    sql: str
    record: Any = None
    model: type | None = None


@dataclass
class RecordingDataAccess(DataAccess):
    """Records every call and answers ``load_data`` with canned rows.

    Attributes:
        rows: Records returned by every ``load_data`` call, regardless of SQL.
        error: If set, raised by every method after the call is recorded.
        calls: Calls received, in order.
    """

    rows: Sequence[Any] = ()
    error: Exception | None = None
    calls: list[Call] = field(default_factory=list)

    def load_data(self, sql: str, model: type[R]) -> list[R]:
        self._record(Call("load_data", sql, model=model))
        return list(self.rows)

    def save_data(self, record: Record, sql: str) -> None:
        self._record(Call("save_data", sql, record=record))

    def update_data(self, record: Record, sql: str) -> None:
        self._record(Call("update_data", sql, record=record))

    def calls_to(self, method: str) -> list[Call]:
        """Return the recorded calls to `method`."""
        return [call for call in self.calls if call.method == method]

    def _record(self, call: Call) -> None:
        self.calls.append(call)
        if self.error is not None:
            raise self.error


class InMemoryPersonStore(RecordingDataAccess):
    """Recording fake that keeps saved/updated records so loads reflect writes.

    Saves append with the next id; updates replace the record with the same id
    and leave the store unchanged when no such id exists.
    """

    def save_data(self, record: Record, sql: str) -> None:
        super().save_data(record, sql)
        next_id = max((r.id for r in self.rows), default=0) + 1
        self.rows = [*self.rows, type(record).from_row({**record.as_row(), "Id": next_id})]

    def update_data(self, record: Record, sql: str) -> None:
        super().update_data(record, sql)
        row = record.as_row()
        self.rows = [record if r.id == row["Id"] else r for r in self.rows]
