"""Fixtures and marks for end-to-end CLI tests.

Every test under this directory gets the ``e2e`` mark. The runner points the
flight recorder at a relative path so, combined with ``fs``, log files land
in a throwaway directory.
"""

from pathlib import Path

import pytest
from click.testing import CliRunner

# pylint: disable=redefined-outer-name, unused-argument

E2E_ROOT = Path(__file__).parent.resolve()
MARKER_NAME = "e2e"
LOG_PATH = "flight_recorder.log"


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add default `e2e` marks to items in this directory."""
    for item in items:
        if E2E_ROOT in item.path.resolve().parents:
            if not any(marker.name == MARKER_NAME for marker in item.iter_markers()):
                item.add_marker(pytest.mark.e2e)


@pytest.fixture
def runner():
    """Return a CliRunner whose flight recorder writes to LOG_PATH."""
    return CliRunner(
        env={
            "REFLOWKIT_LOG_PATH": LOG_PATH,
            "REFLOWKIT_WIDTH": None,
            "REFLOWKIT_SQL_URI": None,
        }
    )


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated filesystem."""
    with runner.isolated_filesystem():
        yield
