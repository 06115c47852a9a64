"""Bus factory for handler unit tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import pytest

from .fakes import bootstrap_test_bus

if TYPE_CHECKING:
    from procplan.service_layer.messagebus import MessageBus

# pylint: disable=redefined-outer-name


@pytest.fixture
def bus_params() -> dict:
    """Keyword arguments for ``bootstrap_test_bus``; override per class."""
    return {}


@pytest.fixture
def make_test_bus(bus_params) -> Callable[[], MessageBus]:
    """Return a factory producing buses over a fresh fake unit of work."""
    return lambda: bootstrap_test_bus(**bus_params)
