"""In-memory blog repositories.

Both repositories share one `InMemoryBlogData` instance so that the
post↔category association and its integrity rules can be checked across
them. Data is lost when the instance is discarded; use for unit tests and
prototyping.
"""

from .category_repository import InMemoryCategoryRepository
from .memory_store import InMemoryBlogData
from .post_repository import InMemoryPostRepository

__all__ = ["InMemoryBlogData", "InMemoryCategoryRepository", "InMemoryPostRepository"]
