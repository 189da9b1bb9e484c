"""Handlers for category commands and queries."""

import logging
from collections.abc import Callable
from typing import Any

from inkpost.domain.text import slugify
from inkpost.interfaces.blog.errors import (
    CategoryInUseError,
    CategoryNotFoundError,
    SlugConflictError,
)
from inkpost.interfaces.blog.records import (
    Category,
    CategoryWithCount,
    Deleted,
    NewCategory,
)
from inkpost.interfaces.clock import Clock
from inkpost.interfaces.unit_of_work import AbstractUnitOfWork
from inkpost.interfaces.unsettable import resolve
from inkpost.service_layer import commands, queries

logger = logging.getLogger(__name__)

# ============================================================================
#                                 Queries
# ============================================================================


def list_categories(  # pylint: disable=unused-argument
    query: queries.ListCategories, uow: AbstractUnitOfWork
) -> list[CategoryWithCount]:
    """Return every category, ordered by name, with its post count."""

    with uow:
        return [
            CategoryWithCount(c, uow.categories.count_posts(c.id))
            for c in uow.categories.list()
        ]


def get_category_by_id(
    query: queries.GetCategoryById, uow: AbstractUnitOfWork
) -> CategoryWithCount:
    with uow:
        category = uow.categories.get(query.category_id)
        if category is None:
            raise CategoryNotFoundError(query.category_id)
        return CategoryWithCount(category, uow.categories.count_posts(category.id))


def get_category_by_slug(
    query: queries.GetCategoryBySlug, uow: AbstractUnitOfWork
) -> CategoryWithCount:
    with uow:
        category = uow.categories.get_by_slug(query.slug)
        if category is None:
            raise CategoryNotFoundError(query.slug)
        return CategoryWithCount(category, uow.categories.count_posts(category.id))


# ============================================================================
#                                 Commands
# ============================================================================


def create_category(
    cmd: commands.CreateCategory, uow: AbstractUnitOfWork, clock: Clock
) -> Category:
    """Create a category whose slug is derived from its name.

    Raises:
        SlugConflictError: If another category already has the derived slug.
    """

    slug = slugify(cmd.name)
    with uow:
        if uow.categories.get_by_slug(slug) is not None:
            raise SlugConflictError("category", slug)

        category = uow.categories.add(
            NewCategory(
                name=cmd.name,
                slug=slug,
                description=cmd.description,
                created_at=clock.now(),
            )
        )
        uow.commit()

    logger.debug("Created category %s (%s)", category.id, category.slug)
    return category


def update_category(
    cmd: commands.UpdateCategory, uow: AbstractUnitOfWork
) -> Category:
    """Apply a partial update; a changed name re-derives the slug.

    Raises:
        CategoryNotFoundError: If the category does not exist.
        SlugConflictError: If the new slug belongs to a different category.
    """

    with uow:
        current = uow.categories.get(cmd.category_id)
        if current is None:
            raise CategoryNotFoundError(cmd.category_id)

        values: dict[str, object] = {}

        name = resolve(cmd.name, current.name, clearable=False, field="name")
        if name != current.name:
            values["name"] = name
            slug = slugify(name)
            if slug != current.slug:
                holder = uow.categories.get_by_slug(slug)
                if holder is not None and holder.id != current.id:
                    raise SlugConflictError("category", slug)
                values["slug"] = slug

        description = resolve(
            cmd.description, current.description, clearable=True, field="description"
        )
        if description != current.description:
            values["description"] = description

        if not values:
            logger.debug("UpdateCategory %s: no changes; noop", current.id)
            return current

        category = uow.categories.update(current.id, values)
        uow.commit()

    logger.debug("Updated category %s: %s", category.id, sorted(values))
    return category


def delete_category(cmd: commands.DeleteCategory, uow: AbstractUnitOfWork) -> Deleted:
    """Delete a category no post is assigned to. Never cascades.

    Raises:
        CategoryNotFoundError: If the category does not exist.
        CategoryInUseError: If posts are still assigned to it.
    """

    with uow:
        if uow.categories.get(cmd.category_id) is None:
            raise CategoryNotFoundError(cmd.category_id)

        if (count := uow.categories.count_posts(cmd.category_id)) > 0:
            raise CategoryInUseError(cmd.category_id, post_count=count)

        uow.categories.delete(cmd.category_id)
        uow.commit()

    logger.debug("Deleted category %s", cmd.category_id)
    return Deleted(id=cmd.category_id)


COMMAND_HANDLERS: dict[type, Callable[..., Any]] = {
    commands.CreateCategory: create_category,
    commands.UpdateCategory: update_category,
    commands.DeleteCategory: delete_category,
}

QUERY_HANDLERS: dict[type, Callable[..., Any]] = {
    queries.ListCategories: list_categories,
    queries.GetCategoryById: get_category_by_id,
    queries.GetCategoryBySlug: get_category_by_slug,
}
