"""Message bus implementation for handling commands and queries."""

import logging
from collections.abc import Callable
from typing import Any

from inkpost.interfaces.blog.errors import (
    ConflictError,
    NotFoundError,
    PreconditionFailedError,
    ValidationError,
)
from inkpost.interfaces.unit_of_work import AbstractUnitOfWork

from .commands import Command
from .queries import Query

logger = logging.getLogger(__name__)

Message = Command | Query

# outcomes the caller is expected to handle
REJECTIONS = (NotFoundError, ConflictError, PreconditionFailedError, ValidationError)

# pylint: disable=too-few-public-methods


class NoHandlerForMessage(LookupError):
    """Exception raised when no handler is found for a message."""

    def __init__(self, message: Message) -> None:
        super().__init__(f"No handler found for message {type(message).__name__}")


class MessageBus:
    """A simple message bus for handling commands and queries.

    The main responsibility of the message bus is to route messages to their
    appropriate handlers and hand the handler's result back to the caller. It
    also manages logging and error handling during the dispatch process, and
    provides access to the unit of work for convenience.

    Args:
        uow: An instance of AbstractUnitOfWork for managing transactional operations.
            This uow should still have been injected into the handlers, it is
            just also available here for convenience.
        command_handlers: A mapping of command types to their handlers.
        query_handlers: A mapping of query types to their handlers.
            Handlers are callables that accept a single message argument.
            Additional dependencies (uow, clock) are injected via closures.

    Note:
        Dispatch is synchronous. Commands and queries share one routing path;
        only their handlers differ in whether they commit.
    """

    def __init__(
        self,
        uow: AbstractUnitOfWork,
        command_handlers: dict[type[Command], Callable[..., Any]],
        query_handlers: dict[type[Query], Callable[..., Any]] | None = None,
    ) -> None:
        self.uow = uow
        self._command_handlers = command_handlers
        self._query_handlers = query_handlers or {}

    def handle(self, message: Message) -> Any:
        """Handle a message by dispatching it to the appropriate handler.

        Rejections from the blog error taxonomy (not found, conflict,
        precondition, validation) are logged at INFO. Any other exception is
        logged with its traceback.

        Args:
            message: The command or query to handle.

        Returns:
            Whatever the handler returns.

        Raises:
            NoHandlerForMessage: If no handler is found for the message type.
            Exception: If the handler raises an exception.
        """

        if handler := self._find_handler(message):
            handler_name = self._get_handler_name(handler)
            logger.debug("Handling message %s with handler %s", message, handler_name)
            try:
                return handler(message)
            except REJECTIONS as e:
                logger.info(
                    "Message %s rejected by handler %s: %s",
                    type(message).__name__,
                    handler_name,
                    e,
                )
                raise
            except Exception:  # pylint: disable=broad-except
                logger.exception(
                    "Exception handling message %s with handler %s",
                    message,
                    handler_name,
                )
                raise
        logger.error("No handler found for message %s", type(message).__name__)
        raise NoHandlerForMessage(message)

    def _find_handler(self, message: Message) -> Callable[..., Any] | None:
        if isinstance(message, Query):
            return self._query_handlers.get(type(message))
        return self._command_handlers.get(type(message))

    @staticmethod
    def _get_handler_name(fn: Callable[..., Any]) -> str:
        if hasattr(fn, "__name__"):
            return fn.__name__
        if hasattr(fn, "func") and hasattr(fn.func, "__name__"):
            return fn.func.__name__
        return repr(fn)
