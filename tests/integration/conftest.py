"""Default `integration` mark for tests under `tests/integration/`."""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

INTEGRATION_ROOT = Path(__file__).parent.resolve()


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark integration tests that do not already carry the mark."""
    for item in items:
        if INTEGRATION_ROOT in item.path.resolve().parents and not item.get_closest_marker(
            "integration"
        ):
            item.add_marker(pytest.mark.integration)
