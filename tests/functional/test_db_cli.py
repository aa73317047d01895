"""Functional tests for the ``roster db`` subcommands.

Commands covered: ``current``, ``heads``, ``status``, and ``upgrade``, run
against temp-file SQLite databases.
"""

import pytest
from click.testing import CliRunner

from roster.entrypoints.cli.db import MISSING_DB_URL_MSG, UPGRADE_SCHEMA_WARNING
from roster.entrypoints.cli.main import roster

# pylint: disable=magic-value-comparison,redefined-outer-name

BASE_REVISION = "3f6c2a9d81b4"


@pytest.fixture
def fresh_runner(cli_env, tmp_path) -> CliRunner:
    """CliRunner pointed at an empty (unmigrated) SQLite file."""
    return CliRunner(
        env={**cli_env, "ROSTER_DB_URL": f"sqlite:///{tmp_path / 'fresh.db'}"}
    )


@pytest.mark.parametrize("cmd", [["db", "current"], ["db", "upgrade"], ["db", "status"]])
def test_db_no_url(cli_env, cmd):
    """db commands requiring a connection error when ROSTER_DB_URL is not set."""
    result = CliRunner(env={**cli_env, "ROSTER_DB_URL": ""}).invoke(roster, cmd)
    assert MISSING_DB_URL_MSG in result.output
    if cmd != ["db", "status"]:
        assert result.exit_code == 1


def test_heads_lists_base_revision(cli_env):
    """db heads works without a database and shows the packaged revision."""
    result = CliRunner(env={**cli_env, "ROSTER_DB_URL": ""}).invoke(
        roster, ["db", "heads"]
    )
    assert result.exit_code == 0, result.output
    assert BASE_REVISION in result.output


def test_new_database_onboarding(fresh_runner: CliRunner):
    """status → upgrade (confirmed) → status → current on a fresh database."""
    result = fresh_runner.invoke(roster, ["db", "status"])
    assert result.exit_code == 0, result.output
    assert "Database reachable" in result.output
    assert "Backend : sqlite" in result.output
    assert "uninitialized" in result.output

    result = fresh_runner.invoke(roster, ["db", "upgrade"], input="n\n")
    assert result.exit_code == 1
    assert UPGRADE_SCHEMA_WARNING.splitlines()[0] in result.output

    result = fresh_runner.invoke(roster, ["db", "upgrade"], input="y\n")
    assert result.exit_code == 0, result.output
    assert "Upgrade complete!" in result.output

    result = fresh_runner.invoke(roster, ["db", "status"])
    assert f"{BASE_REVISION} (up to date)" in result.output

    result = fresh_runner.invoke(roster, ["db", "current"])
    assert result.exit_code == 0, result.output
    assert BASE_REVISION in result.output


def test_upgrade_sql_dry_run(fresh_runner: CliRunner):
    """--sql prints DDL without prompting."""
    result = fresh_runner.invoke(roster, ["db", "upgrade", "--sql"])
    assert result.exit_code == 0, result.output
    assert "CREATE TABLE" in result.output
    assert "Person" in result.output


def test_people_after_forced_upgrade(fresh_runner: CliRunner):
    """A forced upgrade makes the database usable by the people commands."""
    assert fresh_runner.invoke(roster, ["db", "upgrade", "--force"]).exit_code == 0

    result = fresh_runner.invoke(roster, ["people", "add", "Tim", "Corey", "6'8\""])

    assert result.exit_code == 0, result.output
