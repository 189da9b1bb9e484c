"""Translation of SQLAlchemy exceptions into blog errors."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import DBAPIError, IntegrityError

from inkpost.interfaces.blog.errors import StoreUnavailableError

EMPTY_STRING = ""  # pragma: no mutate

# any of these marks a uniqueness violation (SQLite / Postgres wording)
UNIQUE_KEYWORDS = ("unique", "duplicate key")  # pragma: no mutate
FOREIGN_KEY_KEYWORDS = ("foreign key",)  # pragma: no mutate


def integrity_message(integrity_error: IntegrityError) -> str:
    """Return the driver message of an IntegrityError, lowercased."""
    msg = (
        str(integrity_error.orig)
        if integrity_error.orig not in (None, EMPTY_STRING)
        else str(integrity_error)
    )
    return msg.lower()


def is_unique_violation(msg: str, column: str) -> bool:
    """True if `msg` reports a uniqueness violation involving `column`."""
    return column in msg and any(kw in msg for kw in UNIQUE_KEYWORDS)


def is_foreign_key_violation(msg: str) -> bool:
    """True if `msg` reports a foreign key violation."""
    return any(kw in msg for kw in FOREIGN_KEY_KEYWORDS)


@contextmanager
def store_errors() -> Iterator[None]:
    """Re-raise driver failures as `StoreUnavailableError`.

    IntegrityErrors are left alone: callers that expect them catch them
    inside this block and translate them to domain errors themselves.
    """
    try:
        yield
    except IntegrityError:
        raise
    except DBAPIError as e:  # OperationalError, InterfaceError, DataError, ...
        raise StoreUnavailableError(str(e.orig or e)) from e
