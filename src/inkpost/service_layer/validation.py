"""Field checks shared by command and query messages.

Each check raises `ValidationError` naming the offending field. Messages run
them from ``__post_init__`` so a malformed message never reaches a handler.
"""

from collections.abc import Iterable

from inkpost.domain.text import slugify
from inkpost.interfaces.blog.errors import ValidationError


def check_id(field: str, value: object) -> int:
    """Require a positive integer id."""
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(field, "must be an integer")
    if value < 1:
        raise ValidationError(field, "must be a positive integer")
    return value


def check_text(
    field: str, value: object, *, min_length: int = 0, max_length: int | None = None
) -> str:
    """Require a string whose length lies within the given bounds."""
    if not isinstance(value, str):
        raise ValidationError(field, "must be a string")
    if len(value) < min_length:
        if min_length == 1:
            raise ValidationError(field, "must not be empty")
        raise ValidationError(field, f"must be at least {min_length} characters")
    if max_length is not None and len(value) > max_length:
        raise ValidationError(field, f"must be at most {max_length} characters")
    return value


def check_optional_text(field: str, value: object) -> str | None:
    """Require a string or None."""
    if value is None:
        return None
    return check_text(field, value)


def check_bool(field: str, value: object) -> bool:
    """Require a real boolean."""
    if not isinstance(value, bool):
        raise ValidationError(field, "must be a boolean")
    return value


def check_sluggable(field: str, value: str) -> str:
    """Require text that yields a non-empty slug."""
    if not slugify(value):
        raise ValidationError(field, "must contain at least one letter or digit")
    return value


def check_id_list(field: str, value: object) -> tuple[int, ...]:
    """Require a list of ids; duplicates are dropped, first occurrence wins."""
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise ValidationError(field, "must be a list of integers")
    ids = []
    for item in value:
        if isinstance(item, bool) or not isinstance(item, int):
            raise ValidationError(field, "must be a list of integers")
        if item < 1:
            raise ValidationError(field, "must contain positive integers only")
        ids.append(item)
    return tuple(dict.fromkeys(ids))


def check_not_cleared(field: str, value: object) -> None:
    """Reject an explicit None for a field that cannot be cleared."""
    if value is None:
        raise ValidationError(field, "cannot be cleared")
