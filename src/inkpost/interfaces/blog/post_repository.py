"""Interface for the post store, including the post↔category association.

Post listing filters are expressed as a sequence of predicate objects that
are combined with logical AND. Adapters translate the whole sequence once
(into a WHERE clause, or into a row test for the in-memory store).
"""

from __future__ import annotations

import abc
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import ClassVar, TypeAlias

from .records import CategoryRef, NewPost, Post

# --- Predicates ---


@dataclass(frozen=True, slots=True)
class PublishedIs:
    """Match posts whose `published` flag equals `published`."""

    published: bool

    def matches(self, post: Post) -> bool:
        return post.published is self.published


@dataclass(frozen=True, slots=True)
class IdIn:
    """Match posts whose id is one of `ids`."""

    ids: frozenset[int]

    def matches(self, post: Post) -> bool:
        return post.id in self.ids


PostPredicate: TypeAlias = PublishedIs | IdIn


# --- Interface ---


class PostRepository(abc.ABC):
    """Table-oriented access to posts and their category associations.

    Implementations must enforce slug uniqueness and the composite
    (post_id, category_id) uniqueness of association rows.
    """

    KIND: ClassVar[str] = "post"
    UPDATABLE_FIELDS: ClassVar[frozenset[str]] = frozenset(
        {"title", "slug", "content", "excerpt", "published", "updated_at"}
    )

    @abc.abstractmethod
    def get(self, post_id: int) -> Post | None:
        """Get a post by id, or None if absent."""

    @abc.abstractmethod
    def get_by_slug(self, slug: str) -> Post | None:
        """Get a post by slug, or None if absent."""

    @abc.abstractmethod
    def list(self, predicates: Sequence[PostPredicate] = ()) -> list[Post]:
        """Return posts matching all `predicates`, newest first.

        Ordered by `created_at` descending, then id descending.
        """

    @abc.abstractmethod
    def add(self, new: NewPost) -> Post:
        """Insert a post and return the stored row.

        Raises:
            SlugConflictError: If the slug is already taken.
        """

    @abc.abstractmethod
    def update(self, post_id: int, values: Mapping[str, object]) -> Post:
        """Overwrite the given fields of a post and return the stored row.

        Raises:
            PostNotFoundError: If no post has this id.
            SlugConflictError: If the new slug is taken by another post.
            ValueError: If `values` names a field outside `UPDATABLE_FIELDS`.
        """

    @abc.abstractmethod
    def delete(self, post_id: int) -> None:
        """Delete a post together with all of its association rows."""

    @abc.abstractmethod
    def categories_of(self, post_id: int) -> list[CategoryRef]:
        """Return the categories assigned to a post, ordered by name."""

    @abc.abstractmethod
    def post_ids_in_category(self, category_id: int) -> set[int]:
        """Return the ids of the posts assigned to a category."""

    @abc.abstractmethod
    def replace_categories(self, post_id: int, category_ids: Iterable[int]) -> None:
        """Make the post's association set exactly `category_ids`.

        Existing rows for the post are removed and the new set inserted. The
        caller's unit of work makes the two steps atomic.

        Raises:
            UnknownCategoriesError: If any id names no category. It carries
                only the missing ids, and the current set is left as it was.
        """
