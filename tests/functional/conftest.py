"""Default marks and CLI fixtures for tests under `tests/functional/`."""

from pathlib import Path

import pytest
from click.testing import CliRunner

# pylint: disable=unused-argument

FUNCTIONAL_ROOT = Path(__file__).parent.resolve()
MARKER_NAME = "functional"


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add default `functional` marks to items in `tests/functional/`."""
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        if FUNCTIONAL_ROOT in path.parents:
            if not any(marker.name == MARKER_NAME for marker in item.iter_markers()):
                item.add_marker(pytest.mark.functional)


@pytest.fixture
def cli_env(tmp_path: Path) -> dict[str, str]:
    """Environment shared by CLI invocations: log file under the test's temp dir."""
    return {"ROSTER_LOG_PATH": str(tmp_path / "roster.log")}


@pytest.fixture
def runner(cli_env: dict[str, str], sqlite_url_file: str) -> CliRunner:
    """CliRunner pointed at a migrated temp-file SQLite database."""
    return CliRunner(env={**cli_env, "ROSTER_DB_URL": sqlite_url_file})
