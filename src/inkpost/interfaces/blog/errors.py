"""Errors raised by the blog services and their stores.

The hierarchy mirrors the outcomes a caller has to tell apart:

* `NotFoundError` — a referenced id or slug does not exist.
* `ConflictError` — a derived slug collides with another entry.
* `PreconditionFailedError` — the entry exists but its state forbids the action.
* `ValidationError` — the input is malformed; raised before any store access.
* `StoreUnavailableError` — the store failed in an unexpected way.
"""

from collections.abc import Iterable


class BlogError(Exception):
    """Base class for all blog errors."""


# ============================================================================
#                                 Not found
# ============================================================================


class NotFoundError(BlogError):
    """Raised when a referenced entry cannot be found."""

    def __init__(self, kind: str, key: int | str, message: str | None = None) -> None:
        if message is None:
            message = f"{kind.capitalize()} ({key}) not found"
        super().__init__(message)
        self.kind = kind
        self.key = key


class CategoryNotFoundError(NotFoundError):
    """Raised when a category cannot be found by id or slug."""

    def __init__(self, key: int | str) -> None:
        super().__init__("category", key)


class PostNotFoundError(NotFoundError):
    """Raised when a post cannot be found by id or slug."""

    def __init__(self, key: int | str) -> None:
        super().__init__("post", key)


class UnknownCategoriesError(NotFoundError):
    """Raised when a post references category ids that do not exist.

    Attributes:
        category_ids (tuple[int, ...]): The missing ids, in input order.
    """

    def __init__(self, category_ids: Iterable[int]) -> None:
        self.category_ids = tuple(category_ids)
        listed = ", ".join(str(i) for i in self.category_ids)
        super().__init__(
            "category",
            listed,
            f"Unknown category id(s): {listed}",
        )


# ============================================================================
#                                 Conflicts
# ============================================================================


class ConflictError(BlogError):
    """Raised when a write would break a uniqueness rule."""


class SlugConflictError(ConflictError):
    """Raised when a derived slug is already taken by another entry.

    Attributes:
        kind (str): "category" or "post".
        slug (str): The colliding slug.
    """

    def __init__(self, kind: str, slug: str) -> None:
        field = "name" if kind == "category" else "title"
        super().__init__(f"A {kind} with this {field} already exists (slug '{slug}')")
        self.kind = kind
        self.slug = slug


# ============================================================================
#                           Failed preconditions
# ============================================================================


class PreconditionFailedError(BlogError):
    """Raised when an entry's current state forbids the requested action."""


class CategoryInUseError(PreconditionFailedError):
    """Raised when deleting a category that posts still reference.

    Attributes:
        category_id (int): The category that was to be deleted.
        post_count (int | None): Number of posts still assigned to it, or None
            when the store rejected the delete before the count could be read.
    """

    def __init__(self, category_id: int, post_count: int | None) -> None:
        if post_count is None:
            message = "Cannot delete category that is assigned to post(s)"
        else:
            message = f"Cannot delete category that is assigned to {post_count} post(s)"
        super().__init__(message)
        self.category_id = category_id
        self.post_count = post_count


# ============================================================================
#                           Validation & store errors
# ============================================================================


class ValidationError(BlogError):
    """Raised when input is missing, malformed or out of bounds.

    Attributes:
        field (str): Name of the offending input field.
        reason (str): Human-readable description of the problem.
    """

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"Invalid {field}: {reason}")
        self.field = field
        self.reason = reason


class StoreUnavailableError(BlogError):
    """Operational/connection errors from the underlying store."""
