"""Record types exchanged between the blog services and their stores.

Rows come back from repositories as frozen dataclasses. ``New*`` types are
insert payloads (no identity yet); the composite views are what the read
operations hand to callers.

Conventions:
  - Timestamps are timezone-aware UTC ``datetime`` objects.
  - Ids are store-assigned positive integers.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

# pylint: disable=too-many-instance-attributes

CATEGORY_NAME_MAX = 100
POST_TITLE_MAX = 255

# --- Categories ---


@dataclass(frozen=True, slots=True)
class Category:
    """A stored category row."""

    id: int
    name: str
    slug: str
    description: str | None
    created_at: datetime


@dataclass(frozen=True, slots=True)
class NewCategory:
    """Insert payload for a category."""

    name: str
    slug: str
    description: str | None
    created_at: datetime


@dataclass(frozen=True, slots=True)
class CategoryRef:
    """A category as embedded in a post (joined through the association table)."""

    id: int
    name: str
    slug: str
    description: str | None = None


@dataclass(frozen=True, slots=True)
class CategoryWithCount:
    """A category together with the number of posts assigned to it."""

    category: Category
    post_count: int


# --- Posts ---


@dataclass(frozen=True, slots=True)
class Post:
    """A stored post row."""

    id: int
    title: str
    slug: str
    content: str
    excerpt: str | None
    published: bool
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True, slots=True)
class NewPost:
    """Insert payload for a post."""

    title: str
    slug: str
    content: str
    excerpt: str | None
    published: bool
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True, slots=True)
class PostWithCategories:
    """A post together with the categories it is assigned to."""

    post: Post
    categories: tuple[CategoryRef, ...] = ()


@dataclass(frozen=True, slots=True)
class Deleted:
    """Acknowledgement returned by delete operations."""

    id: int
    success: bool = True
