"""ROSTER DB CLI: create and inspect the ``Person`` schema.

Thin, forward-only wrappers around Alembic (no downgrade or stamp). Alembic's
own output goes to stdout; prompts and status lines go to stderr.

All commands except ``heads`` need ``ROSTER_DB_URL`` to point at a reachable
database; otherwise they fail with a ``ClickException`` explaining what to fix.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from alembic import command
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import text
from sqlalchemy.exc import ArgumentError, OperationalError

from roster import config
from roster.adapters.db.engine import make_engine

from .helpers import error, sanitize_url, success, warn

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

MISSING_DB_URL_MSG = (
    "ROSTER_DB_URL is not set.\n\n"
    "Point it at the roster database, e.g.:\n"
    "  export ROSTER_DB_URL='sqlite:///roster.db'\n"
    "  or in PowerShell:\n"
    "  $env:ROSTER_DB_URL='sqlite:///roster.db'"
)

INVALID_URL_FORMAT_MSG = "The value of ROSTER_DB_URL is not a valid SQLAlchemy database URL."

CANNOT_CONNECT_MSG = (
    "ROSTER_DB_URL is set, but the database cannot be opened.\n"
    "Check that the path exists and is writable."
)

UPGRADE_SCHEMA_WARNING = (
    "This will create or upgrade the Person table to the latest schema.\n"
    "Make a backup of the database file first."
)

UPGRADE_SCHEMA_INSTRUCTIONS = "Run 'roster db upgrade' to update the schema."

verbose_option = click.option(
    "--verbose", "-v", is_flag=True, help="Show alembic's more verbose output."
)


class MigrationStatus(Enum):
    """Where the database schema stands relative to the packaged head revision."""

    UP_TO_DATE = "up to date"
    OUT_OF_DATE = "out of date"
    UNINITIALIZED = "uninitialized"


def get_url() -> str:
    """Return ``ROSTER_DB_URL`` after checking that the database answers.

    Raises:
        click.ClickException: If the variable is unset, malformed, or unreachable.
    """
    try:
        url = config.get_db_url()
    except config.DatabaseUrlNotSetError as e:
        raise click.ClickException(MISSING_DB_URL_MSG) from e

    try:
        engine = make_engine(url)
    except ArgumentError as e:
        raise click.ClickException(INVALID_URL_FORMAT_MSG) from e
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))  # pragma: no mutate
    except OperationalError as e:
        raise click.ClickException(CANNOT_CONNECT_MSG) from e
    finally:
        engine.dispose()
    return url


def schema_status(engine: Engine) -> tuple[str | None, MigrationStatus]:
    """Return the database's current revision and how it compares to head."""
    with engine.connect() as conn:
        current_rev = MigrationContext.configure(conn).get_current_revision()
    head_rev = ScriptDirectory.from_config(config.build_alembic_config()).get_current_head()

    if current_rev is None:
        return None, MigrationStatus.UNINITIALIZED
    if current_rev == head_rev:
        return current_rev, MigrationStatus.UP_TO_DATE
    return current_rev, MigrationStatus.OUT_OF_DATE  # pragma: nocover


@click.group(cls=clickx.ExtraGroup)
def db() -> None:
    """Database management commands."""


@db.command()
@verbose_option
def current(verbose: bool) -> None:
    """Show the revision the database is at."""
    command.current(
        config.build_alembic_config(db_url=get_url(), stdout=sys.stdout),
        verbose=verbose,
    )


@db.command()
@verbose_option
def heads(verbose: bool) -> None:
    """Show the packaged head revision(s). Needs no database."""
    command.heads(config.build_alembic_config(stdout=sys.stdout), verbose=verbose)


@db.command()
@click.option("--sql", is_flag=True, help="Print the SQL instead of running it.")
@click.option("--force", is_flag=True, help="Skip the confirmation prompt.")
def upgrade(sql: bool, force: bool) -> None:
    """Create or upgrade the Person table to the head revision."""
    url = get_url()
    if not (force or sql):
        warn(UPGRADE_SCHEMA_WARNING)
        click.echo(f"db: {click.style(sanitize_url(url), underline=True)}")
        click.confirm("Are you sure you want to proceed?", abort=True)
    command.upgrade(
        config.build_alembic_config(db_url=url, stdout=sys.stdout),
        revision="head",
        sql=sql,
    )
    success("Upgrade complete!")


@db.command()
def status() -> None:
    """Show whether the database is reachable and its schema is current."""
    try:
        url = get_url()
    except click.ClickException as e:
        error("Cannot connect to database")
        click.echo(e.format_message())
        return

    engine = make_engine(url)
    try:
        success("Database reachable")
        click.echo(f"Backend : {engine.dialect.name}")
        click.echo(f"URL     : {sanitize_url(url)}")
        rev, state = schema_status(engine)
    finally:
        engine.dispose()

    click.echo(f"Schema  : {f'{rev} ({state.value})' if rev else state.value}")
    if state is not MigrationStatus.UP_TO_DATE:
        warn(UPGRADE_SCHEMA_INSTRUCTIONS)
