"""The database backends INKPOST runs on.

`dialect_of` resolves a URL, engine or connection to a `DialectName`, so
backend checks compare enum members instead of driver strings. Anything
other than PostgreSQL or SQLite is refused with `UnsupportedDialect`.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from sqlalchemy.engine import URL, make_url

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine


class UnsupportedDialect(ValueError):
    """Raised for a database backend the blog schema is not built for."""


class DialectName(StrEnum):
    """Supported SQLAlchemy backend names."""

    POSTGRES = "postgresql"
    SQLITE = "sqlite"


_BACKENDS = {
    "postgresql": DialectName.POSTGRES,
    "postgres": DialectName.POSTGRES,
    "sqlite": DialectName.SQLITE,
}


def dialect_of(target: str | URL | Engine | Connection) -> DialectName:
    """Return the backend behind a database URL, engine or connection.

    Args:
        target: A URL (string or `URL`), or anything with a ``.dialect``.

    Raises:
        UnsupportedDialect: If the backend is not PostgreSQL or SQLite.
    """

    if isinstance(target, (str, URL)):
        name = make_url(target).get_backend_name()
    else:
        name = target.dialect.name

    if (dialect := _BACKENDS.get(name)) is None:
        raise UnsupportedDialect(f"Unsupported database backend: {name!r}")
    return dialect
