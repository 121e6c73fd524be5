"""Default `unit` mark for tests under `tests/unit/`."""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

UNIT_ROOT = Path(__file__).parent.resolve()


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark unit tests that do not already carry the mark."""
    for item in items:
        if UNIT_ROOT in item.path.resolve().parents and not item.get_closest_marker("unit"):
            item.add_marker(pytest.mark.unit)
