"""SQLAlchemy-backed Unit of Work for INKPOST.

Provides a context-managed UnitOfWork using one SQLAlchemy Connection
shared by the category and post repositories.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from inkpost.adapters.blog.sqlalchemy_adapters import (
    SqlAlchemyCategoryRepository,
    SqlAlchemyPostRepository,
)
from inkpost.interfaces.unit_of_work import AbstractUnitOfWork

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy-backed Unit of Work."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.connection: Connection

    def __enter__(self):
        self.connection = self.engine.connect()
        self.categories = SqlAlchemyCategoryRepository(self.connection)
        self.posts = SqlAlchemyPostRepository(self.connection)
        return super().__enter__()

    def __exit__(self, *args):
        super().__exit__(*args)
        self.connection.close()

    def commit(self):
        self.connection.commit()

    def rollback(self):
        self.connection.rollback()

    def close(self) -> None:
        self.engine.dispose()
