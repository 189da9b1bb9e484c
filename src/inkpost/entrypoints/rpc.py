"""Named-operation dispatcher.

Maps operation names such as ``categories.create`` or ``posts.list`` to
service-layer messages, runs them through the message bus and renders the
results in the wire shape (camelCase keys, ISO-8601 UTC timestamps).

Every failure leaves this module as an `RpcError` carrying one of the
`ErrorCode` values. Unexpected exceptions are reported with a generic message
so that storage details never reach the caller.

Example:
    >>> dispatch(bus, "categories.create", {"name": "Web Development"})
    {'id': 1, 'name': 'Web Development', 'slug': 'web-development', ...}
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from inkpost.interfaces.blog.errors import (
    ConflictError,
    NotFoundError,
    PreconditionFailedError,
    ValidationError,
)
from inkpost.interfaces.blog.records import (
    Category,
    CategoryRef,
    CategoryWithCount,
    Deleted,
    PostWithCategories,
)
from inkpost.interfaces.unsettable import UNSET
from inkpost.service_layer import commands, queries

if TYPE_CHECKING:
    from inkpost.service_layer.messagebus import Message, MessageBus

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"  # pragma: no mutate

_REQUIRED = object()


class ErrorCode(StrEnum):
    """Error codes reported to callers."""

    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    PRECONDITION_FAILED = "PRECONDITION_FAILED"
    BAD_REQUEST = "BAD_REQUEST"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class RpcError(Exception):
    """A failed operation, as reported to the caller.

    Attributes:
        code (ErrorCode): What kind of failure occurred.
        message (str): Human-readable description, safe to show to the caller.
    """

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message


# ============================================================================
#                              Input parsing
# ============================================================================


def _arg(payload: Mapping[str, Any], key: str, default: Any = _REQUIRED) -> Any:
    if key in payload:
        return payload[key]
    if default is _REQUIRED:
        raise ValidationError(key, "is required")
    return default


def _build_update_category(p: Mapping[str, Any]) -> commands.UpdateCategory:
    return commands.UpdateCategory(
        category_id=_arg(p, "id"),
        name=_arg(p, "name", UNSET),
        description=_arg(p, "description", UNSET),
    )


def _build_create_post(p: Mapping[str, Any]) -> commands.CreatePost:
    return commands.CreatePost(
        title=_arg(p, "title"),
        content=_arg(p, "content"),
        excerpt=_arg(p, "excerpt", None),
        published=_arg(p, "published", False),
        category_ids=_arg(p, "categoryIds", ()),
    )


def _build_update_post(p: Mapping[str, Any]) -> commands.UpdatePost:
    return commands.UpdatePost(
        post_id=_arg(p, "id"),
        title=_arg(p, "title", UNSET),
        content=_arg(p, "content", UNSET),
        excerpt=_arg(p, "excerpt", UNSET),
        published=_arg(p, "published", UNSET),
        category_ids=_arg(p, "categoryIds", UNSET),
    )


# ============================================================================
#                              Output rendering
# ============================================================================


def _timestamp(value: datetime) -> str:
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def _category(category: Category) -> dict[str, Any]:
    return {
        "id": category.id,
        "name": category.name,
        "slug": category.slug,
        "description": category.description,
        "createdAt": _timestamp(category.created_at),
    }


def _category_with_count(item: CategoryWithCount) -> dict[str, Any]:
    return {**_category(item.category), "postCount": item.post_count}


def _category_ref(ref: CategoryRef, *, with_description: bool) -> dict[str, Any]:
    rendered: dict[str, Any] = {"id": ref.id, "name": ref.name, "slug": ref.slug}
    if with_description:
        rendered["description"] = ref.description
    return rendered


def _post(item: PostWithCategories, *, with_description: bool = True) -> dict[str, Any]:
    post = item.post
    return {
        "id": post.id,
        "title": post.title,
        "slug": post.slug,
        "content": post.content,
        "excerpt": post.excerpt,
        "published": post.published,
        "createdAt": _timestamp(post.created_at),
        "updatedAt": _timestamp(post.updated_at),
        "categories": [
            _category_ref(c, with_description=with_description)
            for c in item.categories
        ],
    }


def _post_summary(item: PostWithCategories) -> dict[str, Any]:
    return _post(item, with_description=False)


def _deleted(item: Deleted) -> dict[str, Any]:
    return {"success": item.success, "id": item.id}


def _many(render: Callable[[Any], Any]) -> Callable[[list[Any]], list[Any]]:
    return lambda items: [render(i) for i in items]


# ============================================================================
#                              Operation table
# ============================================================================


@dataclass(frozen=True)
class Operation:
    """How to turn a payload into a message and a result into wire data."""

    build: Callable[[Mapping[str, Any]], Message]
    render: Callable[[Any], Any]
    summary: str


OPERATIONS: dict[str, Operation] = {
    "categories.list": Operation(
        lambda p: queries.ListCategories(),
        _many(_category_with_count),
        "List all categories with their post counts.",
    ),
    "categories.getById": Operation(
        lambda p: queries.GetCategoryById(category_id=_arg(p, "id")),
        _category_with_count,
        "Get a category by id.",
    ),
    "categories.getBySlug": Operation(
        lambda p: queries.GetCategoryBySlug(slug=_arg(p, "slug")),
        _category_with_count,
        "Get a category by slug.",
    ),
    "categories.create": Operation(
        lambda p: commands.CreateCategory(
            name=_arg(p, "name"), description=_arg(p, "description", None)
        ),
        _category,
        "Create a category.",
    ),
    "categories.update": Operation(
        _build_update_category,
        _category,
        "Update a category's name and/or description.",
    ),
    "categories.delete": Operation(
        lambda p: commands.DeleteCategory(category_id=_arg(p, "id")),
        _deleted,
        "Delete a category that no post uses.",
    ),
    "posts.list": Operation(
        lambda p: queries.ListPosts(
            published=_arg(p, "published", None),
            category_id=_arg(p, "categoryId", None),
        ),
        _many(_post_summary),
        "List posts, newest first.",
    ),
    "posts.getBySlug": Operation(
        lambda p: queries.GetPostBySlug(slug=_arg(p, "slug")),
        _post,
        "Get a post by slug.",
    ),
    "posts.getById": Operation(
        lambda p: queries.GetPostById(post_id=_arg(p, "id")),
        _post,
        "Get a post by id.",
    ),
    "posts.create": Operation(_build_create_post, _post, "Create a post."),
    "posts.update": Operation(_build_update_post, _post, "Update a post."),
    "posts.delete": Operation(
        lambda p: commands.DeletePost(post_id=_arg(p, "id")),
        _deleted,
        "Delete a post and its category assignments.",
    ),
}


# ============================================================================
#                                Dispatch
# ============================================================================


def _error_code(error: Exception) -> ErrorCode:
    match error:
        case NotFoundError():
            return ErrorCode.NOT_FOUND
        case ConflictError():
            return ErrorCode.CONFLICT
        case PreconditionFailedError():
            return ErrorCode.PRECONDITION_FAILED
        case ValidationError():
            return ErrorCode.BAD_REQUEST
        case _:
            return ErrorCode.INTERNAL_SERVER_ERROR


def dispatch(
    bus: MessageBus, operation: str, payload: Mapping[str, Any] | None = None
) -> Any:
    """Run a named operation and return its wire-shaped result.

    Args:
        bus: The message bus to run the operation's message through.
        operation: One of the names in `OPERATIONS`.
        payload: The operation's input (camelCase keys). Keys an operation
            does not know are ignored.

    Returns:
        JSON-compatible data: a dict, or a list of dicts for list operations.

    Raises:
        RpcError: If the operation is unknown, the input is invalid, or the
            service reports a failure.
    """

    if (op := OPERATIONS.get(operation)) is None:
        raise RpcError(ErrorCode.NOT_FOUND, f"Unknown operation '{operation}'")

    if payload is None:
        payload = {}
    if not isinstance(payload, Mapping):
        raise RpcError(ErrorCode.BAD_REQUEST, "Input must be an object")

    try:
        message = op.build(payload)
        result = bus.handle(message)
    except Exception as e:  # pylint: disable=broad-except
        code = _error_code(e)
        if code is ErrorCode.INTERNAL_SERVER_ERROR:
            logger.error("Operation %s failed: %s", operation, type(e).__name__)
            raise RpcError(code, INTERNAL_ERROR_MESSAGE) from e
        logger.info("Operation %s rejected (%s): %s", operation, code, e)
        raise RpcError(code, str(e)) from e

    return op.render(result)
