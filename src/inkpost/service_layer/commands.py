"""Module defining Commands.

Commands are the write-side messages of the service layer. Each validates
its own fields on construction and raises `ValidationError` on bad input,
before any handler or store sees it. Optional update fields use the
``UNSET`` sentinel to mean "leave the stored value alone".
"""

from dataclasses import dataclass

from inkpost.interfaces.blog.records import CATEGORY_NAME_MAX, POST_TITLE_MAX
from inkpost.interfaces.unsettable import UNSET, Unsettable, is_set

from .validation import (
    check_bool,
    check_id,
    check_id_list,
    check_not_cleared,
    check_optional_text,
    check_sluggable,
    check_text,
)

# pylint: disable=too-many-instance-attributes


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


# ============================================================================
#                              Categories
# ============================================================================


@dataclass(frozen=True)
class CreateCategory(Command):
    """Create a category; its slug is derived from `name`."""

    name: str
    description: str | None = None

    def __post_init__(self) -> None:
        check_text("name", self.name, min_length=1, max_length=CATEGORY_NAME_MAX)
        check_sluggable("name", self.name)
        check_optional_text("description", self.description)


@dataclass(frozen=True)
class UpdateCategory(Command):
    """Partially update a category. ``description=None`` clears it."""

    category_id: int
    name: Unsettable[str] = UNSET
    description: Unsettable[str] = UNSET

    def __post_init__(self) -> None:
        check_id("id", self.category_id)
        check_not_cleared("name", self.name)
        if is_set(self.name):
            check_text("name", self.name, min_length=1, max_length=CATEGORY_NAME_MAX)
            check_sluggable("name", self.name)
        if is_set(self.description):
            check_optional_text("description", self.description)


@dataclass(frozen=True)
class DeleteCategory(Command):
    """Delete a category that no post is assigned to."""

    category_id: int

    def __post_init__(self) -> None:
        check_id("id", self.category_id)


# ============================================================================
#                                 Posts
# ============================================================================


@dataclass(frozen=True)
class CreatePost(Command):
    """Create a post, optionally assigning it to categories."""

    title: str
    content: str
    excerpt: str | None = None
    published: bool = False
    category_ids: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        check_text("title", self.title, min_length=1, max_length=POST_TITLE_MAX)
        check_sluggable("title", self.title)
        check_text("content", self.content, min_length=1)
        check_optional_text("excerpt", self.excerpt)
        check_bool("published", self.published)
        object.__setattr__(
            self, "category_ids", check_id_list("categoryIds", self.category_ids)
        )


@dataclass(frozen=True)
class UpdatePost(Command):
    """Partially update a post.

    ``excerpt=None`` clears the excerpt. `category_ids` replaces the whole
    association set when supplied (an empty tuple removes every category)
    and leaves it untouched when ``UNSET``.
    """

    post_id: int
    title: Unsettable[str] = UNSET
    content: Unsettable[str] = UNSET
    excerpt: Unsettable[str] = UNSET
    published: Unsettable[bool] = UNSET
    category_ids: tuple[int, ...] | Unsettable[tuple[int, ...]] = UNSET

    def __post_init__(self) -> None:
        check_id("id", self.post_id)
        check_not_cleared("title", self.title)
        check_not_cleared("content", self.content)
        check_not_cleared("published", self.published)
        if is_set(self.title):
            check_text("title", self.title, min_length=1, max_length=POST_TITLE_MAX)
            check_sluggable("title", self.title)
        if is_set(self.content):
            check_text("content", self.content, min_length=1)
        if is_set(self.excerpt):
            check_optional_text("excerpt", self.excerpt)
        if is_set(self.published):
            check_bool("published", self.published)
        if is_set(self.category_ids):
            object.__setattr__(
                self, "category_ids", check_id_list("categoryIds", self.category_ids)
            )


@dataclass(frozen=True)
class DeletePost(Command):
    """Delete a post and its category assignments."""

    post_id: int

    def __post_init__(self) -> None:
        check_id("id", self.post_id)
