"""Pytest fixtures shared across unit and integration tests."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from core.demo import reset_demo_employees
from core.tables.collection import RecordCollection


@pytest.fixture(autouse=True)
def demo_employees() -> RecordCollection:
    """Reseed the shared demo collection so deletions never leak between tests."""

    return reset_demo_employees()


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    The suite is runnable by intent:
    - `unit`: pure, fast tests with no request cycle or database access.
    - `integration`: tests touching Django views, templates, or commands.

    Each test must have exactly one of these markers.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
