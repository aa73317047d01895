"""Alembic environment for the ROSTER schema.

The database URL comes from, in order: ``alembic -x url=...``, the
``sqlalchemy.url`` main option (set by `roster.config.build_alembic_config`),
then ``ROSTER_DB_URL``. Online runs use `make_engine`, so SQLite connections
get the same PRAGMAs as the application, and render ALTER TABLE in batch mode.
"""

from logging.config import fileConfig

from alembic import context

from roster import config as roster_config
from roster.adapters.db.engine import is_sqlite, make_engine
from roster.adapters.db.schema import metadata

# pylint: disable=no-member

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

COMPARE_OPTIONS = {"compare_type": True, "compare_server_default": True}


def resolve_url() -> str:
    """Return the first URL set among ``-x url``, the config and the environment."""
    url = context.get_x_argument(as_dictionary=True).get("url") or config.get_main_option(
        roster_config.ALEMBIC_URL_KEY
    )
    # an un-interpolated "%(...)s" from an ini file counts as unset
    if url and "%(" not in url:  # pylint: disable=magic-value-comparison
        return url
    try:
        return roster_config.get_db_url()
    except roster_config.DatabaseUrlNotSetError as e:
        raise RuntimeError(
            f"Set {roster_config.DB_URL_ENV_VAR} to your database URL."
        ) from e


def run_migrations_offline(url: str) -> None:
    """Emit the migration SQL to the script output without connecting."""
    context.configure(
        url=url,
        target_metadata=metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **COMPARE_OPTIONS,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online(url: str) -> None:
    """Apply migrations over a live connection."""
    engine = make_engine(url)
    try:
        with engine.connect() as connection:
            context.configure(
                connection=connection,
                target_metadata=metadata,
                render_as_batch=is_sqlite(url),
                **COMPARE_OPTIONS,
            )
            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_migrations_offline(resolve_url())
else:
    run_migrations_online(resolve_url())
