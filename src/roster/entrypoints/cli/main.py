"""ROSTER CLI entry point.

Defines the top-level ``roster`` command (via Click-Extra) and registers
its subcommand groups.

Currently available groups
- ``roster db``: forward-only database management (upgrade/current/heads/status).
- ``roster people``: list, add and update person records; convert height text.

Notes
- The CLI version is sourced from `roster.__version__` and displayed
  automatically by Click-Extra (``--version``).

Examples
    $ roster --version
    $ roster db upgrade
    $ roster people add Tim Corey "6'8\\""
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

import click
import click_extra as clickx

from roster import __version__, config
from roster.logging import LoggingSettings, configure_logging, log_startup

from .db import db as db_group
from .people import people as people_group

logger = logging.getLogger(__name__)


HELP = """ROSTER command-line interface.

    ROSTER keeps a small table of people: names validated as letters only and
    heights entered as feet and inches (e.g. 6'8") and stored in inches.
    """

# one NAME=LEVEL item, e.g. sqlalchemy.engine=INFO
LOGGER_LEVEL_RE = re.compile(r"(?P<name>[^=\s,]+)=(?P<level>\w+)")


def collect_logger_levels(
    ctx: click.Context | None,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | tuple[str, ...],
) -> dict[str, int]:
    """Click callback for ``-L``: merge NAME=LEVEL items over the library defaults.

    Items come from repeated options or from one comma/space separated value
    (the environment variable). Level names are case-insensitive and later
    items win.
    """
    level_names = logging.getLevelNamesMapping()
    levels = dict(config.DEFAULT_LOGGER_LEVELS)
    chunks = (value,) if isinstance(value, str) else value
    for item in " ".join(chunks).replace(",", " ").split():
        if (match := LOGGER_LEVEL_RE.fullmatch(item)) is None:
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        if (level := level_names.get(match["level"].upper())) is None:
            raise click.BadParameter(f"Invalid log level: {match['level']}")
        levels[match["name"]] = level
    return levels


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    default=0,
    help="Show more on the console: -v for INFO, -vv for DEBUG.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    default=0,
    help="Show less on the console: -q for ERROR, -qq for CRITICAL only.",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Log everything to the console with timestamps, logger names and source paths.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=config.default_log_path,
    envvar=config.LOG_PATH_ENV_VAR,
    show_default=True,
    show_envvar=True,
    help="File the flight recorder writes to.",
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=config.DEFAULT_FLIGHT_RECORDER_CAPACITY,
    hidden=True,
    envvar=config.FLIGHT_RECORDER_CAPACITY_ENV_VAR,
    show_envvar=True,
    help="Number of log records the flight recorder keeps in memory.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    default=True,
    show_envvar=True,
    help=(
        "Buffer recent DEBUG-level records in memory and write them to --log-path "
        "as soon as a WARNING or ERROR is logged. Console output is not affected."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    default=False,
    show_default=True,
    show_envvar=True,
    help="Also write the flight recorder buffer to --log-path on exit.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=collect_logger_levels,
    show_envvar=True,
    help=(
        "Minimum level for one logger as NAME=LEVEL, applied to console and "
        "flight recorder alike. Repeatable, or a comma/space separated list in "
        f"{config.env_var('LOGGER_LEVEL')}. sqlalchemy and alembic default to WARNING."
    ),
)
@clickx.pass_context
def roster(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """ROSTER command-line interface."""
    settings = LoggingSettings(
        verbose=verbose_count,
        quiet=quiet_count,
        debug=debug,
        # --color/--no-color leaves ctx.color None when unset
        color=ctx.color is not False,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity,
        force_flush=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(settings)
    log_startup(logger, settings, handlers, app_version=__version__)

    # runs after the command returns
    ctx.call_on_close(logging.shutdown)


roster.add_command(db_group)
roster.add_command(people_group)
