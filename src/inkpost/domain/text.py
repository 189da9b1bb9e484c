"""Text derivations for blog entries.

`slugify` turns a human-readable name or title into the URL-safe key used
to address categories and posts publicly. `make_excerpt` supplies the
default teaser for a post that has none.
"""

import re

EXCERPT_LENGTH = 200

# Word characters are ASCII only so slugs stay URL-safe; whitespace is Unicode.
_DISALLOWED = re.compile(r"[^a-z0-9_\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")


def slugify(text: str) -> str:
    """Derive a slug from free text.

    Lowercases, drops everything except word characters, whitespace and
    hyphens, turns whitespace runs into a single hyphen, collapses repeated
    hyphens and trims hyphens from both ends.

    The function is total and idempotent: ``slugify(slugify(s)) == slugify(s)``.

    Examples:
        >>> slugify("Web Development")
        'web-development'
        >>> slugify("  Hello,  World!  ")
        'hello-world'
        >>> slugify("--Next.js -- 15--")
        'nextjs-15'
    """
    slug = _DISALLOWED.sub("", text.lower())
    slug = _WHITESPACE.sub("-", slug)
    slug = _HYPHENS.sub("-", slug)
    return slug.strip("-")


def make_excerpt(content: str, excerpt: str | None = None) -> str:
    """Return `excerpt` if non-empty, else the first 200 characters of `content`."""
    if excerpt:
        return excerpt
    return content[:EXCERPT_LENGTH]
