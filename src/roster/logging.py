"""Logging setup for the ROSTER CLI.

Two handlers hang off the root logger, which itself passes everything:

- a Rich console handler on stderr whose threshold follows ``-v``/``-q``;
- an optional *flight recorder*: a `FlightRecorder` ring buffer that keeps the
  newest records at DEBUG and writes them to a log file whenever a WARNING or worse
  is logged (and, with force-flush, when the program exits).

Library modules only ever call ``logging.getLogger(__name__)``; the CLI calls
`configure_logging` once per invocation.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from dataclasses import dataclass, field
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import Literal, TypeAlias

import alembic
import sqlalchemy
from rich.console import Console
from rich.logging import RichHandler

PROJECT_PREFIX = "roster"
DEFAULT_LEVEL = logging.WARNING
FILE_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


@dataclass(frozen=True)
class LoggingSettings:
    """Everything the CLI's global options decide about logging."""

    verbose: int = 0
    quiet: int = 0
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    flight_recorder: bool = True
    flight_capacity: int = 2000
    force_flush: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)

    @property
    def console_level(self) -> int:
        """WARNING, one level lower per ``-v`` and higher per ``-q``, clamped."""
        level = DEFAULT_LEVEL - 10 * self.verbose + 10 * self.quiet
        return max(logging.DEBUG, min(logging.CRITICAL, level))

    @property
    def records_to_file(self) -> bool:
        return self.flight_recorder and self.log_path is not None


class FlightRecorder(MemoryHandler):
    """A `MemoryHandler` that only writes on severity, never because it is full.

    At most `capacity` records are held; when the buffer is full the oldest
    record is dropped to make room. The buffer goes to the target when a record
    at `flushLevel` or above arrives (and on close when `flushOnClose`).
    """

    def emit(self, record: logging.LogRecord) -> None:
        # called with the handler lock held
        if len(self.buffer) >= self.capacity:
            del self.buffer[: len(self.buffer) - self.capacity + 1]
        super().emit(record)

    def shouldFlush(self, record: logging.LogRecord) -> bool:
        return record.levelno >= self.flushLevel


class ThirdPartyPrefixFilter(logging.Filter):  # pylint: disable=too-few-public-methods
    """Set ``record.prefix`` to ``[<top-level package>]`` for non-ROSTER loggers."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.partition('.')[0]}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    In debug mode the threshold drops to DEBUG and records show time, logger
    name and source path; otherwise third-party records get a short prefix.
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> FlightRecorder:
    """Build a `FlightRecorder` holding the newest `capacity` records for `path`.

    The file is truncated per run and only created on the first flush.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(FILE_FORMAT))
    return FlightRecorder(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def configure_logging(settings: LoggingSettings) -> list[logging.Handler]:
    """Install the console (and flight-recorder) handlers on the root logger.

    Per-logger levels from ``settings.logger_levels`` are applied last so they
    filter both handlers.

    Returns:
        The handlers now attached to the root logger.
    """
    handlers: list[logging.Handler] = [
        config_console_handler(
            level=settings.console_level,
            debug_mode=settings.debug,
            color=settings.color,
        )
    ]
    if settings.records_to_file:
        handlers.append(
            config_flight_recorder(
                path=settings.log_path,
                capacity=settings.flight_capacity,
                flush_on_close=settings.force_flush,
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def log_startup(
    logger: logging.Logger,
    settings: LoggingSettings,
    handlers: list[logging.Handler],
    app_version: str,
) -> None:
    """Log a one-line INFO summary followed by DEBUG environment diagnostics."""
    logger.info(
        "ROSTER %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(settings.console_level),
        "ON" if settings.records_to_file else "OFF",
    )
    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("Alembic: %s", alembic.__version__)
    logger.debug("SQLAlchemy: %s", sqlalchemy.__version__)
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if settings.records_to_file:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            settings.log_path,
            settings.flight_capacity,
            settings.force_flush,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in settings.logger_levels.items()}
        or "<none>",
    )
