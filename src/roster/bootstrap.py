"""Bootstrap (composition root) for ROSTER.

Wires the SQLAlchemy data-access adapter to the person processor. Entry
points import this module rather than adapters directly.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from roster import config
from roster.adapters.data_access import SqlAlchemyDataAccess
from roster.adapters.db.engine import make_engine
from roster.service_layer import PersonProcessor


@contextmanager
def bootstrap(url: str | None = None) -> Iterator[PersonProcessor]:
    """Yield a person processor bound to the database at `url`.

    The engine behind it is disposed when the block exits, also on error.

    Args:
        url: SQLAlchemy database URL. Defaults to `ROSTER_DB_URL`.

    Raises:
        DatabaseUrlNotSetError: If no URL is given and `ROSTER_DB_URL` is unset.
    """
    engine = make_engine(url if url is not None else config.get_db_url())
    try:
        yield PersonProcessor(SqlAlchemyDataAccess(engine))
    finally:
        engine.dispose()
