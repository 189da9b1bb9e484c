"""SQLAlchemy Core implementations of the blog repositories.

Both repositories operate on a caller-supplied `Connection`; transaction
boundaries belong to the unit of work, never to the repositories.
"""

from .category_repository import SqlAlchemyCategoryRepository
from .post_repository import SqlAlchemyPostRepository

__all__ = ["SqlAlchemyCategoryRepository", "SqlAlchemyPostRepository"]
