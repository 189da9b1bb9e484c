"""Unit tests for the engine factory and its SQLite PRAGMAs."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy.engine import make_url

from inkpost.adapters.db.engine import is_sqlite, make_engine

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("sqlite:///:memory:", True),
        ("sqlite+pysqlite:///blog.db", True),
        ("postgresql+psycopg://u:p@localhost/blog", False),
        (make_url("postgresql://localhost/blog"), False),
    ],
)
def test_is_sqlite(url, expected):
    assert is_sqlite(url) is expected


def test_foreign_keys_are_enforced(sqlite_engine_file: Engine):
    """Association integrity depends on SQLite enforcing foreign keys."""
    with sqlite_engine_file.connect() as cxn:
        assert cxn.exec_driver_sql("PRAGMA foreign_keys;").scalar() == 1


def test_file_engine_uses_wal(sqlite_engine_file: Engine):
    with sqlite_engine_file.connect() as cxn:
        mode = cxn.exec_driver_sql("PRAGMA journal_mode;").scalar()
        temp_store = cxn.exec_driver_sql("PRAGMA temp_store;").scalar()
    assert str(mode).lower() == "wal"
    assert temp_store == 2  # MEMORY


def test_echo_flag_is_passed_through():
    engine = make_engine("sqlite+pysqlite:///:memory:", echo=True)
    try:
        assert engine.echo is True
    finally:
        engine.dispose()
