"""Base class for handler tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from inkpost.service_layer import commands

if TYPE_CHECKING:
    from inkpost.interfaces.blog.records import Category, PostWithCategories
    from inkpost.service_layer.messagebus import MessageBus

    from .fakes import FakeUoW
    from tests.fixtures.datagen import TickingClock


class HandlerTestBase:
    """Base class for handler tests providing common setup and utilities."""

    bus: MessageBus
    clock: TickingClock

    @pytest.fixture(autouse=True)
    def _attach_bus(self, request, make_test_bus, clock):
        """Fresh bus per test, seeded by `_seed_bus`, with the commit flag reset."""
        self.bus = make_test_bus()
        self.clock = clock
        self._seed_bus(request)
        self.reset_committed()

    def _seed_bus(self, request) -> None:
        """Override to preload the bus. Use request.getfixturevalue(...) as needed."""

    @property
    def uow(self) -> FakeUoW:
        return self.bus.uow  # type: ignore[return-value]

    # --- seeding shortcuts ---

    def add_category(self, name: str, description: str | None = None) -> Category:
        return self.bus.handle(
            commands.CreateCategory(name=name, description=description)
        )

    def add_post(
        self,
        title: str,
        content: str = "Some content.",
        **kwargs,
    ) -> PostWithCategories:
        return self.bus.handle(
            commands.CreatePost(title=title, content=content, **kwargs)
        )

    # --- assertions ---

    def assert_committed(self) -> None:
        """Assert that the unit of work was committed."""
        assert self.uow.committed is True

    def assert_not_committed(self) -> None:
        """Assert that the unit of work was not committed."""
        assert self.uow.committed is False

    def reset_committed(self) -> None:
        """Reset the committed flag on the unit of work."""
        self.uow.committed = False
