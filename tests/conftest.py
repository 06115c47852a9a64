"""Shared pytest configuration for PROCPLAN.

Tests are marked ``unit``, ``integration`` or ``e2e`` after the top-level
directory they live in, so ``pytest -m unit`` selects the fast suite
without decorating every module.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

pytest_plugins = [
    "tests.fixtures.sqlite",
    "tests.fixtures.datagen",
]

TESTS_ROOT = Path(__file__).parent.resolve()
LAYER_MARKERS = ("unit", "integration", "e2e")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Mark each item with the layer named by its first directory under tests/."""
    for item in items:
        try:
            layer = item.path.resolve().relative_to(TESTS_ROOT).parts[0]
        except ValueError:
            continue
        if layer in LAYER_MARKERS and item.get_closest_marker(layer) is None:
            item.add_marker(getattr(pytest.mark, layer))


@pytest.fixture
def engine(request: pytest.FixtureRequest) -> Engine:
    """Resolve to the engine fixture named by an indirect parameter.

    Example:
        ```py
        @pytest.mark.parametrize("engine", ["sqlite_engine_memory"], indirect=True)
        def test_something(engine): ...
        ```
    """
    return request.getfixturevalue(request.param)
