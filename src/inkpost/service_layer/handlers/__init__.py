"""Service layer handlers."""

from collections.abc import Callable
from typing import Any

from .category_handlers import COMMAND_HANDLERS as CATEGORY_COMMAND_HANDLERS
from .category_handlers import QUERY_HANDLERS as CATEGORY_QUERY_HANDLERS
from .post_handlers import COMMAND_HANDLERS as POST_COMMAND_HANDLERS
from .post_handlers import QUERY_HANDLERS as POST_QUERY_HANDLERS

__all__ = ["COMMAND_HANDLERS", "QUERY_HANDLERS"]

COMMAND_HANDLERS: dict[type, Callable[..., Any]] = {
    **CATEGORY_COMMAND_HANDLERS,
    **POST_COMMAND_HANDLERS,
}

QUERY_HANDLERS: dict[type, Callable[..., Any]] = {
    **CATEGORY_QUERY_HANDLERS,
    **POST_QUERY_HANDLERS,
}
