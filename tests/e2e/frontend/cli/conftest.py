"""Fixtures for end-to-end CLI logging tests.

Registers a test-only ``log-demo`` command on the top-level ``roster`` group
that logs at every level on ``roster.demo`` and on a third-party logger.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from roster.entrypoints.cli.main import roster

# pylint: disable=redefined-outer-name

DEMO_LOGGER = "roster.demo"
THIRD_PARTY_LOGGER = "some.thirdparty"


@click.command()
def log_demo():
    """Log one message per level; the trailing DEBUG line follows the last WARNING."""
    logger = logging.getLogger(DEMO_LOGGER)
    logger.debug("demo debug message")
    logger.info("demo info message")
    logger.warning("demo warning message")
    logger.error("demo error message")
    logger.critical("demo critical message")
    third_party = logging.getLogger(THIRD_PARTY_LOGGER)
    third_party.debug("third-party debug message")
    third_party.info("third-party info message")
    third_party.warning("third-party warning message")
    logger.debug("demo trailing debug message")


def _unregister(group: click.Group, name: str) -> None:
    group.commands.pop(name, None)
    # click-extra keeps its own per-section registries
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for section in getattr(group, "_sections", []):
        getattr(section, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Attach ``log-demo`` to ``roster`` for one test."""
    roster.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _unregister(roster, "log-demo")


@pytest.fixture
def runner():
    """A plain CliRunner."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated working directory."""
    with runner.isolated_filesystem():
        yield
