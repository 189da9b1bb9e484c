"""In-memory PostRepository, including the post↔category association."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import replace

from inkpost.interfaces.blog import PostPredicate, PostRepository
from inkpost.interfaces.blog.errors import (
    PostNotFoundError,
    SlugConflictError,
    UnknownCategoriesError,
)
from inkpost.interfaces.blog.records import CategoryRef, NewPost, Post

from .memory_store import InMemoryBlogData


class InMemoryPostRepository(PostRepository):
    """PostRepository over an `InMemoryBlogData` store.

    Association rows may only reference stored posts and categories, mirroring
    the foreign keys of the SQL schema.
    """

    def __init__(self, data: InMemoryBlogData) -> None:
        self._data = data

    def get(self, post_id: int) -> Post | None:
        return self._data.posts.get(post_id)

    def get_by_slug(self, slug: str) -> Post | None:
        return next((p for p in self._data.posts.values() if p.slug == slug), None)

    def list(self, predicates: Sequence[PostPredicate] = ()) -> list[Post]:
        matching = [
            p
            for p in self._data.posts.values()
            if all(pred.matches(p) for pred in predicates)
        ]
        return sorted(matching, key=lambda p: (p.created_at, p.id), reverse=True)

    def categories_of(self, post_id: int) -> list[CategoryRef]:
        refs = [
            CategoryRef(c.id, c.name, c.slug, c.description)
            for pid, cid in self._data.post_categories
            if pid == post_id and (c := self._data.categories.get(cid)) is not None
        ]
        return sorted(refs, key=lambda r: (r.name, r.id))

    def post_ids_in_category(self, category_id: int) -> set[int]:
        return {pid for pid, cid in self._data.post_categories if cid == category_id}

    def add(self, new: NewPost) -> Post:
        self._check_slug_free(new.slug)
        post = Post(
            id=self._data.next_post_id(),
            title=new.title,
            slug=new.slug,
            content=new.content,
            excerpt=new.excerpt,
            published=new.published,
            created_at=new.created_at,
            updated_at=new.updated_at,
        )
        self._data.posts[post.id] = post
        return post

    def update(self, post_id: int, values: Mapping[str, object]) -> Post:
        if unknown := set(values) - self.UPDATABLE_FIELDS:
            raise ValueError(f"cannot update post field(s): {sorted(unknown)}")
        if (current := self.get(post_id)) is None:
            raise PostNotFoundError(post_id)
        if "slug" in values:
            self._check_slug_free(str(values["slug"]), exclude_id=post_id)
        updated = replace(current, **values)
        self._data.posts[post_id] = updated
        return updated

    def delete(self, post_id: int) -> None:
        if post_id not in self._data.posts:
            raise PostNotFoundError(post_id)
        self._drop_associations(post_id)
        del self._data.posts[post_id]

    def replace_categories(self, post_id: int, category_ids: Iterable[int]) -> None:
        wanted = list(dict.fromkeys(category_ids))
        if post_id not in self._data.posts:
            raise PostNotFoundError(post_id)
        if missing := [i for i in wanted if i not in self._data.categories]:
            raise UnknownCategoriesError(missing)
        self._drop_associations(post_id)
        self._data.post_categories.update((post_id, cid) for cid in wanted)

    def _drop_associations(self, post_id: int) -> None:
        self._data.post_categories = {
            row for row in self._data.post_categories if row[0] != post_id
        }

    def _check_slug_free(self, slug: str, exclude_id: int | None = None) -> None:
        holder = self.get_by_slug(slug)
        if holder is not None and holder.id != exclude_id:
            raise SlugConflictError(self.KIND, slug)
