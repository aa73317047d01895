"""Engine factory for the ROSTER store.

Every Engine used by the CLI, the data-access adapter and the migrations
comes from `make_engine` so that SQLite connections are configured the same
way everywhere. Non-SQLite URLs get a plain Engine.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url

if TYPE_CHECKING:
    from sqlite3 import Connection as SQLiteConnection

    from sqlalchemy.engine import Engine

SQLITE_NAMES = {"sqlite", "sqlite+pysqlite"}

# Applied in order on every new DBAPI connection.
SQLITE_PRAGMAS = (
    ("foreign_keys", "ON"),
    ("journal_mode", "WAL"),
    ("synchronous", "NORMAL"),
    ("temp_store", "MEMORY"),
)


def is_sqlite(url: str | URL) -> bool:
    """Return True if `url` (string or `URL`) uses the SQLite backend."""
    return make_url(str(url)).get_backend_name() in SQLITE_NAMES


def _apply_sqlite_pragmas(dbapi_conn: SQLiteConnection, _conn_record) -> None:
    cursor = dbapi_conn.cursor()
    try:
        for name, value in SQLITE_PRAGMAS:
            cursor.execute(f"PRAGMA {name}={value};")
    finally:
        cursor.close()


def make_engine(url: str | URL, *, echo: bool = False) -> Engine:
    """Create an Engine for `url`.

    SQLite engines run `SQLITE_PRAGMAS` on each new connection (foreign keys,
    WAL journal, NORMAL sync, in-memory temp store).

    Args:
        url: Database URL, e.g. ``sqlite:///roster.db``.
        echo: Log every statement through the ``sqlalchemy.engine`` logger.
    """
    engine = create_engine(url, echo=echo)
    if is_sqlite(url):
        event.listen(engine, "connect", _apply_sqlite_pragmas)
    return engine
