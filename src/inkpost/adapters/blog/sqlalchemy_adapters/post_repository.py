"""SQLAlchemy-backed PostRepository.

Posts live in ``posts``; the many-to-many link to categories lives in
``post_categories``. Listing predicates are translated into a single WHERE
clause. Association replacement is a delete followed by a bulk insert on the
caller's connection, so the enclosing unit of work makes it atomic.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError

from inkpost.interfaces.blog import IdIn, PostPredicate, PostRepository, PublishedIs
from inkpost.interfaces.blog.errors import (
    PostNotFoundError,
    SlugConflictError,
    StoreUnavailableError,
    UnknownCategoriesError,
)
from inkpost.interfaces.blog.records import CategoryRef, NewPost, Post

from ..schema import categories, post_categories, posts
from .errors import (
    integrity_message,
    is_foreign_key_violation,
    is_unique_violation,
    store_errors,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection
    from sqlalchemy.sql.elements import ColumnElement

logger = logging.getLogger(__name__)


def _to_clause(predicate: PostPredicate) -> ColumnElement[bool]:
    match predicate:
        case PublishedIs(published=published):
            return posts.c.published.is_(published)
        case IdIn(ids=ids):
            return posts.c.id.in_(sorted(ids))
        case _:
            raise TypeError(f"unsupported post predicate: {predicate!r}")


class SqlAlchemyPostRepository(PostRepository):
    """PostRepository over the ``posts`` and ``post_categories`` tables."""

    def __init__(self, connection: Connection):
        self.connection = connection

    # --- lookups ---

    def get(self, post_id: int) -> Post | None:
        return self._fetch_one(posts.c.id == post_id)

    def get_by_slug(self, slug: str) -> Post | None:
        return self._fetch_one(posts.c.slug == slug)

    def list(self, predicates: Sequence[PostPredicate] = ()) -> list[Post]:
        stmt = (
            select(posts)
            .where(*(_to_clause(p) for p in predicates))
            .order_by(posts.c.created_at.desc(), posts.c.id.desc())
        )
        with store_errors():
            rows = self.connection.execute(stmt).mappings().all()
        return [Post(**row) for row in rows]

    def categories_of(self, post_id: int) -> list[CategoryRef]:
        stmt = (
            select(
                categories.c.id,
                categories.c.name,
                categories.c.slug,
                categories.c.description,
            )
            .select_from(
                post_categories.join(
                    categories, post_categories.c.category_id == categories.c.id
                )
            )
            .where(post_categories.c.post_id == post_id)
            .order_by(categories.c.name, categories.c.id)
        )
        with store_errors():
            rows = self.connection.execute(stmt).mappings().all()
        return [CategoryRef(**row) for row in rows]

    def post_ids_in_category(self, category_id: int) -> set[int]:
        stmt = select(post_categories.c.post_id).where(
            post_categories.c.category_id == category_id
        )
        with store_errors():
            return {int(i) for i in self.connection.execute(stmt).scalars()}

    # --- writes ---

    def add(self, new: NewPost) -> Post:
        stmt = (
            insert(posts)
            .values(
                title=new.title,
                slug=new.slug,
                content=new.content,
                excerpt=new.excerpt,
                published=new.published,
                created_at=new.created_at,
                updated_at=new.updated_at,
            )
            .returning(posts)
        )
        with store_errors():
            try:
                row = self.connection.execute(stmt).mappings().one()
            except IntegrityError as e:
                self._raise_from_integrity_error(e, new.slug)
        return Post(**row)

    def update(self, post_id: int, values: Mapping[str, object]) -> Post:
        if unknown := set(values) - self.UPDATABLE_FIELDS:
            raise ValueError(f"cannot update post field(s): {sorted(unknown)}")
        if not values:
            if (current := self.get(post_id)) is None:
                raise PostNotFoundError(post_id)
            return current

        stmt = (
            update(posts)
            .where(posts.c.id == post_id)
            .values(**values)
            .returning(posts)
        )
        with store_errors():
            try:
                row = self.connection.execute(stmt).mappings().one_or_none()
            except IntegrityError as e:
                self._raise_from_integrity_error(e, str(values.get("slug", "")))
        if row is None:
            raise PostNotFoundError(post_id)
        return Post(**row)

    def delete(self, post_id: int) -> None:
        with store_errors():
            self.connection.execute(
                delete(post_categories).where(post_categories.c.post_id == post_id)
            )
            deleted = self.connection.execute(
                delete(posts).where(posts.c.id == post_id)
            ).rowcount
        if deleted != 1:
            raise PostNotFoundError(post_id)

    def replace_categories(self, post_id: int, category_ids: Iterable[int]) -> None:
        wanted = list(dict.fromkeys(category_ids))
        if missing := self._missing_categories(wanted):
            raise UnknownCategoriesError(missing)
        with store_errors():
            self.connection.execute(
                delete(post_categories).where(post_categories.c.post_id == post_id)
            )
            if not wanted:
                return
            try:
                with self.connection.begin_nested():
                    self.connection.execute(
                        insert(post_categories),
                        [{"post_id": post_id, "category_id": cid} for cid in wanted],
                    )
            except IntegrityError as e:
                # the post or a category was deleted after the checks
                msg = integrity_message(e)
                if not is_foreign_key_violation(msg):
                    raise StoreUnavailableError(msg) from e
                if missing := self._missing_categories(wanted):
                    raise UnknownCategoriesError(missing) from e
                raise PostNotFoundError(post_id) from e
        logger.debug("Post %s now in categories %s", post_id, wanted)

    # --- internals ---

    def _missing_categories(self, category_ids: list[int]) -> list[int]:
        if not category_ids:
            return []
        stmt = select(categories.c.id).where(categories.c.id.in_(category_ids))
        with store_errors():
            found = set(self.connection.execute(stmt).scalars())
        return [cid for cid in category_ids if cid not in found]

    def _fetch_one(self, *criteria) -> Post | None:
        stmt = select(posts).where(*criteria)
        with store_errors():
            row = self.connection.execute(stmt).mappings().one_or_none()
        return None if row is None else Post(**row)

    @staticmethod
    def _raise_from_integrity_error(integrity_error: IntegrityError, slug: str) -> None:
        msg = integrity_message(integrity_error)
        if is_unique_violation(msg, "slug"):
            raise SlugConflictError("post", slug) from integrity_error
        raise StoreUnavailableError(msg) from integrity_error
