"""Handlers for post commands and queries.

A post's category assignments are written in the same unit of work as the
post itself, so a failed write leaves neither half behind.
"""

import logging
from collections.abc import Callable, Sequence
from typing import Any

from inkpost.domain.text import make_excerpt, slugify
from inkpost.interfaces.blog import IdIn, PostPredicate, PublishedIs
from inkpost.interfaces.blog.errors import (
    PostNotFoundError,
    SlugConflictError,
    UnknownCategoriesError,
)
from inkpost.interfaces.blog.records import (
    Deleted,
    NewPost,
    Post,
    PostWithCategories,
)
from inkpost.interfaces.clock import Clock
from inkpost.interfaces.unit_of_work import AbstractUnitOfWork
from inkpost.interfaces.unsettable import is_set, resolve
from inkpost.service_layer import commands, queries

logger = logging.getLogger(__name__)


def _with_categories(uow: AbstractUnitOfWork, post: Post) -> PostWithCategories:
    return PostWithCategories(post, tuple(uow.posts.categories_of(post.id)))


def _check_categories_exist(
    uow: AbstractUnitOfWork, category_ids: Sequence[int]
) -> None:
    if not category_ids:
        return
    found = uow.categories.existing_ids(category_ids)
    if missing := [i for i in category_ids if i not in found]:
        raise UnknownCategoriesError(missing)


def _check_slug_free(
    uow: AbstractUnitOfWork, slug: str, post_id: int | None = None
) -> None:
    holder = uow.posts.get_by_slug(slug)
    if holder is not None and holder.id != post_id:
        raise SlugConflictError("post", slug)


# ============================================================================
#                                 Queries
# ============================================================================


def list_posts(
    query: queries.ListPosts, uow: AbstractUnitOfWork
) -> list[PostWithCategories]:
    """Return posts newest first, filtered by category and published flag."""

    predicates: list[PostPredicate] = []
    with uow:
        if query.category_id is not None:
            post_ids = uow.posts.post_ids_in_category(query.category_id)
            if not post_ids:
                return []
            predicates.append(IdIn(frozenset(post_ids)))
        if query.published is not None:
            predicates.append(PublishedIs(query.published))

        return [_with_categories(uow, p) for p in uow.posts.list(predicates)]


def get_post_by_id(
    query: queries.GetPostById, uow: AbstractUnitOfWork
) -> PostWithCategories:
    with uow:
        post = uow.posts.get(query.post_id)
        if post is None:
            raise PostNotFoundError(query.post_id)
        return _with_categories(uow, post)


def get_post_by_slug(
    query: queries.GetPostBySlug, uow: AbstractUnitOfWork
) -> PostWithCategories:
    with uow:
        post = uow.posts.get_by_slug(query.slug)
        if post is None:
            raise PostNotFoundError(query.slug)
        return _with_categories(uow, post)


# ============================================================================
#                                 Commands
# ============================================================================


def create_post(
    cmd: commands.CreatePost, uow: AbstractUnitOfWork, clock: Clock
) -> PostWithCategories:
    """Create a post and assign it to `cmd.category_ids`.

    The slug is derived from the title and the excerpt defaults to the start
    of the content.

    Raises:
        SlugConflictError: If another post already has the derived slug.
        UnknownCategoriesError: If any category id does not exist.
    """

    slug = slugify(cmd.title)
    now = clock.now()
    with uow:
        _check_slug_free(uow, slug)
        _check_categories_exist(uow, cmd.category_ids)

        post = uow.posts.add(
            NewPost(
                title=cmd.title,
                slug=slug,
                content=cmd.content,
                excerpt=make_excerpt(cmd.content, cmd.excerpt),
                published=cmd.published,
                created_at=now,
                updated_at=now,
            )
        )
        if cmd.category_ids:
            uow.posts.replace_categories(post.id, cmd.category_ids)

        result = _with_categories(uow, post)
        uow.commit()

    logger.debug("Created post %s (%s)", post.id, post.slug)
    return result


def update_post(
    cmd: commands.UpdatePost, uow: AbstractUnitOfWork, clock: Clock
) -> PostWithCategories:
    """Apply a partial update and refresh `updated_at`.

    A changed title re-derives the slug. A supplied `category_ids` replaces
    the post's whole category set, even when empty.

    Raises:
        PostNotFoundError: If the post does not exist.
        SlugConflictError: If the new slug belongs to a different post.
        UnknownCategoriesError: If any category id does not exist.
    """

    with uow:
        current = uow.posts.get(cmd.post_id)
        if current is None:
            raise PostNotFoundError(cmd.post_id)

        values: dict[str, object] = {}

        title = resolve(cmd.title, current.title, clearable=False, field="title")
        if title != current.title:
            values["title"] = title
            slug = slugify(title)
            if slug != current.slug:
                _check_slug_free(uow, slug, post_id=current.id)
                values["slug"] = slug

        if is_set(cmd.content):
            values["content"] = resolve(
                cmd.content, current.content, clearable=False, field="content"
            )
        if is_set(cmd.excerpt):
            values["excerpt"] = resolve(
                cmd.excerpt, current.excerpt, clearable=True, field="excerpt"
            )
        if is_set(cmd.published):
            values["published"] = resolve(
                cmd.published, current.published, clearable=False, field="published"
            )
        values["updated_at"] = clock.now()

        if is_set(cmd.category_ids):
            _check_categories_exist(uow, cmd.category_ids)

        post = uow.posts.update(current.id, values)
        if is_set(cmd.category_ids):
            uow.posts.replace_categories(post.id, cmd.category_ids)

        result = _with_categories(uow, post)
        uow.commit()

    logger.debug("Updated post %s: %s", post.id, sorted(values))
    return result


def delete_post(cmd: commands.DeletePost, uow: AbstractUnitOfWork) -> Deleted:
    """Delete a post together with its category assignments.

    Raises:
        PostNotFoundError: If the post does not exist.
    """

    with uow:
        if uow.posts.get(cmd.post_id) is None:
            raise PostNotFoundError(cmd.post_id)

        uow.posts.delete(cmd.post_id)
        uow.commit()

    logger.debug("Deleted post %s", cmd.post_id)
    return Deleted(id=cmd.post_id)


COMMAND_HANDLERS: dict[type, Callable[..., Any]] = {
    commands.CreatePost: create_post,
    commands.UpdatePost: update_post,
    commands.DeletePost: delete_post,
}

QUERY_HANDLERS: dict[type, Callable[..., Any]] = {
    queries.ListPosts: list_posts,
    queries.GetPostById: get_post_by_id,
    queries.GetPostBySlug: get_post_by_slug,
}
