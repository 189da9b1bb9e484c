"""End-to-end tests for the ``inkpost db`` subcommands on SQLite."""

import re

import pytest
from sqlalchemy import create_engine, inspect

from inkpost.entrypoints.cli.db import (
    MISSING_DB_URL_MSG,
    SUPPORTED_BACKENDS_MSG,
    UPGRADE_SCHEMA_INSTRUCTIONS,
    UPGRADE_SCHEMA_WARNING,
)
from inkpost.entrypoints.cli.main import inkpost

from .helpers import plain

# pylint: disable=unused-argument,magic-value-comparison

BASE_REVISION = "3f0c2a9d7b14"


def _tables(url: str) -> set[str]:
    engine = create_engine(url)
    try:
        return set(inspect(engine).get_table_names())
    finally:
        engine.dispose()


@pytest.mark.parametrize(
    "cmd",
    [["db", "current"], ["db", "history", "-i"], ["db", "upgrade"]],
)
def test_db_commands_need_url(runner, monkeypatch, cmd):
    monkeypatch.setenv("INKPOST_DB_URL", "")
    result = runner.invoke(inkpost, cmd)
    assert result.exit_code == 1
    assert MISSING_DB_URL_MSG in result.output


def test_heads_needs_no_database(runner, monkeypatch):
    monkeypatch.delenv("INKPOST_DB_URL", raising=False)
    result = runner.invoke(inkpost, ["db", "heads"])
    assert result.exit_code == 0
    assert BASE_REVISION in result.output


def test_status_of_empty_database(runner, empty_db):
    result = runner.invoke(inkpost, ["db", "status"])

    out = plain(result.output)
    assert result.exit_code == 0
    assert "Backend : sqlite" in out
    assert "Schema  : uninitialized" in out
    assert UPGRADE_SCHEMA_INSTRUCTIONS in out


def test_upgrade_asks_first(runner, empty_db):
    declined = runner.invoke(inkpost, ["db", "upgrade"], input="n\n")

    assert declined.exit_code == 1  # click.Abort
    assert UPGRADE_SCHEMA_WARNING.splitlines()[0] in plain(declined.output)
    assert "categories" not in _tables(empty_db)

    accepted = runner.invoke(inkpost, ["db", "upgrade"], input="y\n")

    assert accepted.exit_code == 0, accepted.output
    assert "Upgrade complete!" in plain(accepted.output)
    assert {"categories", "posts", "post_categories"} <= _tables(empty_db)


def test_upgrade_force_then_status(runner, empty_db):
    upgraded = runner.invoke(inkpost, ["db", "upgrade", "--force"])
    assert upgraded.exit_code == 0, upgraded.output

    status = plain(runner.invoke(inkpost, ["db", "status"]).output)
    assert f"Schema  : {BASE_REVISION} (up to date)" in status
    assert UPGRADE_SCHEMA_INSTRUCTIONS not in status


def test_upgrade_sql_only_prints_ddl(runner, empty_db):
    result = runner.invoke(inkpost, ["db", "upgrade", "--sql"])

    assert result.exit_code == 0, result.output
    assert re.search(r"CREATE TABLE categories", result.output)
    assert "categories" not in _tables(empty_db)


def test_current_and_history(runner, migrated_db):
    current = runner.invoke(inkpost, ["db", "current"])
    history = runner.invoke(inkpost, ["db", "history", "-i"])

    assert current.exit_code == history.exit_code == 0
    assert BASE_REVISION in current.output
    assert "(current)" in history.output


def test_status_when_unreachable(runner, monkeypatch, tmp_path):
    missing_dir = tmp_path / "nope" / "blog.db"
    monkeypatch.setenv("INKPOST_DB_URL", f"sqlite:///{missing_dir}")

    result = runner.invoke(inkpost, ["db", "status"])

    assert result.exit_code == 0
    assert "Cannot connect to database" in plain(result.output)


def test_unsupported_backend_is_reported(runner, monkeypatch):
    monkeypatch.setenv("INKPOST_DB_URL", "mysql+pymysql://u:p@localhost/blog")

    result = runner.invoke(inkpost, ["db", "current"])

    assert result.exit_code == 1
    assert "Unsupported database backend: 'mysql'" in result.output
    assert SUPPORTED_BACKENDS_MSG in result.output
