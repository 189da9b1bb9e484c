"""In-memory CategoryRepository."""

from collections.abc import Iterable, Mapping
from dataclasses import replace

from inkpost.interfaces.blog import CategoryRepository
from inkpost.interfaces.blog.errors import (
    CategoryInUseError,
    CategoryNotFoundError,
    SlugConflictError,
)
from inkpost.interfaces.blog.records import Category, NewCategory

from .memory_store import InMemoryBlogData


class InMemoryCategoryRepository(CategoryRepository):
    """CategoryRepository over an `InMemoryBlogData` store."""

    def __init__(self, data: InMemoryBlogData) -> None:
        self._data = data

    def get(self, category_id: int) -> Category | None:
        return self._data.categories.get(category_id)

    def get_by_slug(self, slug: str) -> Category | None:
        return next(
            (c for c in self._data.categories.values() if c.slug == slug), None
        )

    def list(self) -> list[Category]:
        return sorted(self._data.categories.values(), key=lambda c: (c.name, c.id))

    def count_posts(self, category_id: int) -> int:
        return sum(1 for _, cid in self._data.post_categories if cid == category_id)

    def existing_ids(self, category_ids: Iterable[int]) -> set[int]:
        return {i for i in category_ids if i in self._data.categories}

    def add(self, new: NewCategory) -> Category:
        self._check_slug_free(new.slug)
        category = Category(
            id=self._data.next_category_id(),
            name=new.name,
            slug=new.slug,
            description=new.description,
            created_at=new.created_at,
        )
        self._data.categories[category.id] = category
        return category

    def update(self, category_id: int, values: Mapping[str, object]) -> Category:
        if unknown := set(values) - self.UPDATABLE_FIELDS:
            raise ValueError(f"cannot update category field(s): {sorted(unknown)}")
        if (current := self.get(category_id)) is None:
            raise CategoryNotFoundError(category_id)
        if "slug" in values:
            self._check_slug_free(str(values["slug"]), exclude_id=category_id)
        updated = replace(current, **values)
        self._data.categories[category_id] = updated
        return updated

    def delete(self, category_id: int) -> None:
        if category_id not in self._data.categories:
            raise CategoryNotFoundError(category_id)
        if count := self.count_posts(category_id):
            raise CategoryInUseError(category_id, post_count=count)
        del self._data.categories[category_id]

    def _check_slug_free(self, slug: str, exclude_id: int | None = None) -> None:
        holder = self.get_by_slug(slug)
        if holder is not None and holder.id != exclude_id:
            raise SlugConflictError(self.KIND, slug)
