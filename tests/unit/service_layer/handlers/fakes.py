"""Fake implementations for testing service layer handlers."""

from inkpost.adapters.blog.in_memory_adapters import (
    InMemoryBlogData,
    InMemoryCategoryRepository,
    InMemoryPostRepository,
)
from inkpost.bootstrap.bootstrap import build_message_bus
from inkpost.interfaces.clock import Clock
from inkpost.interfaces.unit_of_work import AbstractUnitOfWork
from inkpost.service_layer.handlers import COMMAND_HANDLERS, QUERY_HANDLERS


class FakeUoW(AbstractUnitOfWork):
    """A fake unit of work over the in-memory repositories.

    Rollback is a no-op; `committed` records whether a handler committed.
    """

    def __init__(self):
        self.data = InMemoryBlogData()
        self.categories = InMemoryCategoryRepository(self.data)
        self.posts = InMemoryPostRepository(self.data)
        self.committed = False

    def commit(self):
        self.committed = True

    def rollback(self):
        pass


def bootstrap_test_bus(clock: Clock | None = None):
    """Bootstrap a message bus for testing purposes."""
    return build_message_bus(
        uow=FakeUoW(),
        command_handlers=COMMAND_HANDLERS,
        query_handlers=QUERY_HANDLERS,
        clock=clock,
    )
