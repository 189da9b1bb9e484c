"""Pytest fixtures for the blog repository contract tests."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import pytest

from inkpost.adapters.blog.in_memory_adapters import (
    InMemoryBlogData,
    InMemoryCategoryRepository,
    InMemoryPostRepository,
)
from inkpost.adapters.blog.sqlalchemy_adapters import (
    SqlAlchemyCategoryRepository,
    SqlAlchemyPostRepository,
)
from inkpost.interfaces.blog import CategoryRepository, PostRepository

# pylint: disable=redefined-outer-name


@dataclass
class BlogRepos:
    """Both repositories of one backend, sharing one store."""

    categories: CategoryRepository
    posts: PostRepository


@pytest.fixture(params=["memory", "sqlite"])
def repos(request: pytest.FixtureRequest) -> Iterator[BlogRepos]:
    """Return fresh repositories for the requested backend.

    Current params:
      - `"memory"` → the in-memory repositories over one `InMemoryBlogData`
      - `"sqlite"` → the SQLAlchemy repositories on one connection to an
        in-memory SQLite database (tables from ``metadata.create_all``)

    The SQLite transaction is never committed; the engine is discarded after
    the test.
    """
    match request.param:
        case "memory":
            data = InMemoryBlogData()
            yield BlogRepos(
                InMemoryCategoryRepository(data), InMemoryPostRepository(data)
            )
        case "sqlite":
            engine = request.getfixturevalue("sqlite_engine_memory")
            with engine.begin() as connection:
                yield BlogRepos(
                    SqlAlchemyCategoryRepository(connection),
                    SqlAlchemyPostRepository(connection),
                )
        case _:
            raise ValueError(f"unknown store type: {request.param}")
