"""Pytest fixtures for service layer handler unit tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import pytest

from .fakes import bootstrap_test_bus

if TYPE_CHECKING:
    from inkpost.service_layer.messagebus import MessageBus

# pylint: disable=redefined-outer-name


@pytest.fixture
def make_test_bus(clock) -> Callable[..., MessageBus]:
    """Factory for a message bus over a fake UoW and the ticking test clock."""

    def _make():
        return bootstrap_test_bus(clock=clock)

    return _make
