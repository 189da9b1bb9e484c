"""Blog interfaces for INKPOST: record types, repositories and errors."""

from .category_repository import CategoryRepository
from .post_repository import IdIn, PostPredicate, PostRepository, PublishedIs

__all__ = [
    "CategoryRepository",
    "PostRepository",
    "PostPredicate",
    "PublishedIs",
    "IdIn",
]
