"""Unit of Work interface for INKPOST.

Defines the AbstractUnitOfWork contract: a context-managed unit of work
exposing the category and post repositories and abstract commit/rollback
methods. Everything done inside one ``with uow:`` block is a single
transaction; leaving the block without committing discards it.
"""

from __future__ import annotations

import abc

from .blog import CategoryRepository, PostRepository


class AbstractUnitOfWork(abc.ABC):
    """Contract for a transactional unit of work."""

    categories: CategoryRepository
    posts: PostRepository

    def __enter__(self) -> AbstractUnitOfWork:
        """Enter the unit of work context and return the unit.

        Implementations may acquire transactional resources here.
        """
        return self

    def __exit__(self, *args):
        """Exit the unit of work context.

        Default behavior is to roll back on exit.
        """
        self.rollback()

    def close(self) -> None:
        """Release resources held between units of work. No-op by default."""

    @abc.abstractmethod
    def commit(self):
        """Persist changes and finalize the transaction."""

    @abc.abstractmethod
    def rollback(self):
        """Revert changes and clean up transactional resources."""
