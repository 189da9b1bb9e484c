"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` Click command that emits log messages at
every level, a CliRunner whose flight recorder writes under the test's temp
dir, and a migrated SQLite database for the commands that need one.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
import pytest
from alembic import command
from click.testing import CliRunner

from inkpost import config
from inkpost.entrypoints.cli.main import inkpost

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit representative log messages for CLI/flight-recorder tests."""
    logger = logging.getLogger("inkpost.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any click-extra sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command on `inkpost` for the duration of a test."""
    inkpost.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(inkpost, "log-demo")


@pytest.fixture
def default_log_path(tmp_path: Path) -> Path:
    return tmp_path / "logs" / "latest.log"


@pytest.fixture
def runner(default_log_path: Path) -> CliRunner:
    """CliRunner whose default flight-recorder file lives under tmp_path."""
    return CliRunner(env={"INKPOST_LOG_PATH": str(default_log_path)})


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated working directory."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def migrated_db(sqlite_url: str, monkeypatch) -> str:
    """A SQLite database at Alembic head, exported as ``INKPOST_DB_URL``."""
    command.upgrade(config.build_alembic_config(sqlite_url), "head")
    monkeypatch.setenv(config.DB_URL_ENV_VAR, sqlite_url)
    return sqlite_url


@pytest.fixture
def empty_db(sqlite_url: str, monkeypatch) -> str:
    """A SQLite database with no schema, exported as ``INKPOST_DB_URL``."""
    monkeypatch.setenv(config.DB_URL_ENV_VAR, sqlite_url)
    return sqlite_url
