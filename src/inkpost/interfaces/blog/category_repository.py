"""Interface for the category store."""

from __future__ import annotations

import abc
from collections.abc import Iterable, Mapping
from typing import ClassVar

from .records import Category, NewCategory


class CategoryRepository(abc.ABC):
    """Table-oriented access to categories.

    Implementations must enforce slug uniqueness themselves (a unique index
    or equivalent): the service-level pre-check is only there to produce a
    clean error early.
    """

    KIND: ClassVar[str] = "category"
    UPDATABLE_FIELDS: ClassVar[frozenset[str]] = frozenset(
        {"name", "slug", "description"}
    )

    @abc.abstractmethod
    def get(self, category_id: int) -> Category | None:
        """Get a category by id, or None if absent."""

    @abc.abstractmethod
    def get_by_slug(self, slug: str) -> Category | None:
        """Get a category by slug, or None if absent."""

    @abc.abstractmethod
    def list(self) -> list[Category]:
        """Return all categories ordered by name."""

    @abc.abstractmethod
    def add(self, new: NewCategory) -> Category:
        """Insert a category and return the stored row.

        Raises:
            SlugConflictError: If the slug is already taken.
        """

    @abc.abstractmethod
    def update(self, category_id: int, values: Mapping[str, object]) -> Category:
        """Overwrite the given fields of a category and return the stored row.

        Args:
            category_id: The category to update.
            values: Field name to new value; only keys in `UPDATABLE_FIELDS`
                are allowed. Fields not present keep their stored value.

        Raises:
            CategoryNotFoundError: If no category has this id.
            SlugConflictError: If the new slug is taken by another category.
            ValueError: If `values` names a field outside `UPDATABLE_FIELDS`.
        """

    @abc.abstractmethod
    def delete(self, category_id: int) -> None:
        """Delete a category that no post references.

        Raises:
            CategoryInUseError: If association rows still reference it.
        """

    @abc.abstractmethod
    def count_posts(self, category_id: int) -> int:
        """Return the number of association rows referencing a category."""

    @abc.abstractmethod
    def existing_ids(self, category_ids: Iterable[int]) -> set[int]:
        """Return the subset of `category_ids` that exist."""
