"""Module defining Queries.

Queries are the read-side messages of the service layer. Like commands they
validate their fields on construction; their handlers never commit.
"""

from dataclasses import dataclass

from .validation import check_bool, check_id, check_text


@dataclass(frozen=True)
class Query:
    """Base class for all queries."""


@dataclass(frozen=True)
class ListCategories(Query):
    """All categories ordered by name, each with its post count."""


@dataclass(frozen=True)
class GetCategoryById(Query):
    category_id: int

    def __post_init__(self) -> None:
        check_id("id", self.category_id)


@dataclass(frozen=True)
class GetCategoryBySlug(Query):
    slug: str

    def __post_init__(self) -> None:
        check_text("slug", self.slug)


@dataclass(frozen=True)
class ListPosts(Query):
    """Posts newest first, optionally filtered by published flag and category."""

    published: bool | None = None
    category_id: int | None = None

    def __post_init__(self) -> None:
        if self.published is not None:
            check_bool("published", self.published)
        if self.category_id is not None:
            check_id("categoryId", self.category_id)


@dataclass(frozen=True)
class GetPostById(Query):
    post_id: int

    def __post_init__(self) -> None:
        check_id("id", self.post_id)


@dataclass(frozen=True)
class GetPostBySlug(Query):
    slug: str

    def __post_init__(self) -> None:
        check_text("slug", self.slug)
