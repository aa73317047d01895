"""Where ROSTER reads its settings from.

Everything ROSTER takes from the environment is named here. Variables share
the ``ROSTER_`` prefix that Click-Extra also uses for the CLI's automatic
option variables (e.g. ``ROSTER_LOGGER_LEVEL``, ``ROSTER_FORCE_FLUSH_FLIGHT_RECORDER``).

- ``ROSTER_DB_URL``: the SQLite database holding the ``Person`` table.
- ``ROSTER_LOG_PATH``: where the flight recorder writes.
- ``ROSTER_FLIGHT_RECORDER_CAPACITY``: records kept in memory between dumps.
"""

import logging
import os
import sys
from importlib.resources import files
from pathlib import Path
from typing import TextIO

from alembic.config import Config
from platformdirs import user_log_dir

APP_NAME = "roster"
ENV_PREFIX = APP_NAME.upper()


def env_var(name: str) -> str:
    """Return the environment variable name for setting `name`."""
    return f"{ENV_PREFIX}_{name}"


DB_URL_ENV_VAR = env_var("DB_URL")  # pragma: no mutate
LOG_PATH_ENV_VAR = env_var("LOG_PATH")  # pragma: no mutate
FLIGHT_RECORDER_CAPACITY_ENV_VAR = env_var("FLIGHT_RECORDER_CAPACITY")  # pragma: no mutate

DEFAULT_FLIGHT_RECORDER_CAPACITY = 2000
# Library loggers that are too chatty below WARNING
DEFAULT_LOGGER_LEVELS = {"sqlalchemy": logging.WARNING, "alembic": logging.WARNING}

MIGRATIONS_PACKAGE = "roster.adapters.db.alembic"
ALEMBIC_URL_KEY = "sqlalchemy.url"  # pragma: no mutate


class DatabaseUrlNotSetError(Exception):
    """``ROSTER_DB_URL`` is unset or empty."""

    def __init__(self) -> None:
        super().__init__(f"{DB_URL_ENV_VAR} is not set.")


def get_db_url() -> str:
    """Return the database URL from ``ROSTER_DB_URL``.

    Raises:
        DatabaseUrlNotSetError: If the variable is unset or empty.
    """
    if url := os.environ.get(DB_URL_ENV_VAR):
        return url
    raise DatabaseUrlNotSetError


def default_log_path() -> Path:
    """``latest.log`` in the per-user log directory, created on first use."""
    return Path(user_log_dir(APP_NAME, appauthor=False, ensure_exists=True)) / "latest.log"


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """Return an Alembic `Config` for the migrations packaged with ROSTER.

    No ``alembic.ini`` is involved. `db_url` may be omitted for commands that
    only read the scripts (``heads``); the migration env then falls back to
    ``ROSTER_DB_URL``. Alembic status lines go to `stdout`.
    """
    cfg = Config(stdout=stdout)
    cfg.set_main_option("script_location", str(files(MIGRATIONS_PACKAGE)))
    if db_url is not None:
        cfg.set_main_option(ALEMBIC_URL_KEY, db_url)
    return cfg
