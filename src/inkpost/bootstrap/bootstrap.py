"""Bootstrap the message bus with handlers, unit of work and clock."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from inkpost import config
from inkpost.adapters.clock import SystemClock
from inkpost.adapters.db.engine import make_engine
from inkpost.adapters.unit_of_work import SqlAlchemyUnitOfWork
from inkpost.interfaces.clock import Clock
from inkpost.interfaces.unit_of_work import AbstractUnitOfWork
from inkpost.service_layer.handlers import COMMAND_HANDLERS, QUERY_HANDLERS
from inkpost.service_layer.messagebus import MessageBus

if TYPE_CHECKING:
    from inkpost.service_layer.commands import Command
    from inkpost.service_layer.queries import Query


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    message_bus: MessageBus


def build_uow(url: str) -> AbstractUnitOfWork:
    """Build a new unit of work over a fresh engine for `url`."""
    engine = make_engine(url)
    return SqlAlchemyUnitOfWork(engine)


def build_message_bus(
    uow: AbstractUnitOfWork,
    command_handlers: Mapping[type[Command], Callable[..., object]],
    query_handlers: Mapping[type[Query], Callable[..., object]],
    clock: Clock | None = None,
) -> MessageBus:
    """Build a message bus with injected dependencies."""
    dependencies = {"uow": uow, "clock": clock or SystemClock()}
    return MessageBus(
        uow,
        command_handlers={
            command_type: inject_dependencies(handler, dependencies)
            for command_type, handler in command_handlers.items()
        },
        query_handlers={
            query_type: inject_dependencies(handler, dependencies)
            for query_type, handler in query_handlers.items()
        },
    )


def bootstrap(db_url: str | None = None) -> AppContainer:
    """Bootstrap the message bus against `db_url` (default: ``INKPOST_DB_URL``)."""
    uow = build_uow(db_url or config.get_db_url())
    message_bus = build_message_bus(uow, COMMAND_HANDLERS, QUERY_HANDLERS)

    return AppContainer(
        message_bus=message_bus,
    )


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Inject dependencies into a handler function based on its parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return functools.partial(handler, **deps)
