"""SQLite fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from alembic import command
from sqlalchemy.engine import URL

from inkpost import config
from inkpost.adapters.db.engine import make_engine
from inkpost.adapters.db.metadata import metadata

# registers the blog tables on `metadata`
import inkpost.adapters.blog.schema  # noqa: F401 # pylint: disable=unused-import

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


@pytest.fixture
def sqlite_url(tmp_path: Path) -> str:
    """URL of a not-yet-created SQLite file under the test's temp dir."""
    return str(URL.create("sqlite+pysqlite", database=str(tmp_path / "blog.db")))


@pytest.fixture
def sqlite_engine_memory() -> Iterator[Engine]:
    """In-memory SQLite engine with tables from `metadata.create_all()`.

    Uses `make_engine()` so the PRAGMAs (foreign keys in particular) apply.
    No migrations are run.

    Note:
        Every pooled connection to ``:memory:`` shares one database only because
        SQLAlchemy uses a single-connection pool for it.
    """
    test_engine = make_engine("sqlite+pysqlite:///:memory:")
    metadata.create_all(test_engine)
    yield test_engine
    metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture
def sqlite_engine_file(sqlite_url: str) -> Iterator[Engine]:
    """File-backed SQLite engine migrated to Alembic head (per test).

    A temp *file* (not :memory:) is used so the schema created by Alembic's
    connection is visible to the engine's connections.
    """
    command.upgrade(config.build_alembic_config(sqlite_url), "head")
    test_engine = make_engine(sqlite_url)
    try:
        yield test_engine
    finally:
        test_engine.dispose()
