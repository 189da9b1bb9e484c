"""SQLAlchemy-backed CategoryRepository.

Slug uniqueness is enforced by ``uq_categories_slug``; a violation raised
by the database is reported as `SlugConflictError` even when the service's
pre-check saw the slug as free. Deletion is guarded in a single statement
(``DELETE ... WHERE NOT EXISTS (association rows)``) and backed by the
``ON DELETE RESTRICT`` foreign key.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

from sqlalchemy import delete, exists, func, insert, select, update
from sqlalchemy.exc import IntegrityError

from inkpost.interfaces.blog import CategoryRepository
from inkpost.interfaces.blog.errors import (
    CategoryInUseError,
    CategoryNotFoundError,
    SlugConflictError,
    StoreUnavailableError,
)
from inkpost.interfaces.blog.records import Category, NewCategory

from ..schema import categories, post_categories
from .errors import (
    integrity_message,
    is_foreign_key_violation,
    is_unique_violation,
    store_errors,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection


class SqlAlchemyCategoryRepository(CategoryRepository):
    """CategoryRepository over the ``categories`` table."""

    def __init__(self, connection: Connection):
        self.connection = connection

    # --- lookups ---

    def get(self, category_id: int) -> Category | None:
        return self._fetch_one(categories.c.id == category_id)

    def get_by_slug(self, slug: str) -> Category | None:
        return self._fetch_one(categories.c.slug == slug)

    def list(self) -> list[Category]:
        stmt = select(categories).order_by(categories.c.name, categories.c.id)
        with store_errors():
            rows = self.connection.execute(stmt).mappings().all()
        return [Category(**row) for row in rows]

    def count_posts(self, category_id: int) -> int:
        stmt = (
            select(func.count())
            .select_from(post_categories)
            .where(post_categories.c.category_id == category_id)
        )
        with store_errors():
            return int(self.connection.execute(stmt).scalar_one())

    def existing_ids(self, category_ids: Iterable[int]) -> set[int]:
        wanted = set(category_ids)
        if not wanted:
            return set()
        stmt = select(categories.c.id).where(categories.c.id.in_(sorted(wanted)))
        with store_errors():
            return {int(i) for i in self.connection.execute(stmt).scalars()}

    # --- writes ---

    def add(self, new: NewCategory) -> Category:
        stmt = (
            insert(categories)
            .values(
                name=new.name,
                slug=new.slug,
                description=new.description,
                created_at=new.created_at,
            )
            .returning(categories)
        )
        with store_errors():
            try:
                row = self.connection.execute(stmt).mappings().one()
            except IntegrityError as e:
                self._raise_from_integrity_error(e, new.slug)
        return Category(**row)

    def update(self, category_id: int, values: Mapping[str, object]) -> Category:
        if unknown := set(values) - self.UPDATABLE_FIELDS:
            raise ValueError(f"cannot update category field(s): {sorted(unknown)}")
        if not values:
            if (current := self.get(category_id)) is None:
                raise CategoryNotFoundError(category_id)
            return current

        stmt = (
            update(categories)
            .where(categories.c.id == category_id)
            .values(**values)
            .returning(categories)
        )
        with store_errors():
            try:
                row = self.connection.execute(stmt).mappings().one_or_none()
            except IntegrityError as e:
                self._raise_from_integrity_error(e, str(values.get("slug", "")))
        if row is None:
            raise CategoryNotFoundError(category_id)
        return Category(**row)

    def delete(self, category_id: int) -> None:
        in_use = exists().where(post_categories.c.category_id == category_id)
        stmt = delete(categories).where(categories.c.id == category_id, ~in_use)
        with store_errors():
            try:
                deleted = self.connection.execute(stmt).rowcount
            except IntegrityError as e:
                # a concurrent assignment slipped past the NOT EXISTS guard
                if is_foreign_key_violation(integrity_message(e)):
                    raise CategoryInUseError(category_id, post_count=None) from e
                raise StoreUnavailableError(integrity_message(e)) from e

        if deleted == 1:  # pragma: no mutate
            return
        if (count := self.count_posts(category_id)) > 0:
            raise CategoryInUseError(category_id, post_count=count)
        raise CategoryNotFoundError(category_id)

    # --- internals ---

    def _fetch_one(self, *criteria) -> Category | None:
        stmt = select(categories).where(*criteria)
        with store_errors():
            row = self.connection.execute(stmt).mappings().one_or_none()
        return None if row is None else Category(**row)

    @staticmethod
    def _raise_from_integrity_error(integrity_error: IntegrityError, slug: str) -> None:
        """Map an IntegrityError raised by an insert/update to a blog error.

        Raises:
            SlugConflictError: If the slug unique constraint was violated.
            StoreUnavailableError: For any other integrity failure.
        """
        msg = integrity_message(integrity_error)
        if is_unique_violation(msg, "slug"):
            raise SlugConflictError("category", slug) from integrity_error
        raise StoreUnavailableError(msg) from integrity_error
