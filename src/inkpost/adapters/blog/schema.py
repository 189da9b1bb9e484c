"""Blog schema.

Defines the ``categories``, ``posts`` and ``post_categories`` tables.

Constraints (enforced here):

| Constraint                                  | Purpose                                   |
|---------------------------------------------|-------------------------------------------|
| UNIQUE(categories.slug)                     | one category per slug                     |
| UNIQUE(posts.slug)                          | one post per slug                         |
| PK(post_categories.post_id, category_id)    | an association fact is recorded once      |
| FK post_id → posts ON DELETE CASCADE        | associations die with their post          |
| FK category_id → categories ON DELETE RESTRICT | a used category cannot be deleted      |

The constraint names below are fixed by the migration. The adapters classify
IntegrityErrors by the driver message: a unique violation that mentions
``slug`` is a slug conflict. A foreign key failure means "category in use"
when deleting a category and "unknown category" when assigning one.
"""

from __future__ import annotations

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Identity,
    Index,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
    UniqueConstraint,
    false,
)

from inkpost.adapters.db.metadata import metadata
from inkpost.adapters.db.sa_types import BIGINT_PK, UTCDateTime
from inkpost.interfaces.blog.records import CATEGORY_NAME_MAX, POST_TITLE_MAX

__all__ = ["categories", "posts", "post_categories"]

categories = Table(
    "categories",
    metadata,
    Column("id", BIGINT_PK, Identity(start=1), primary_key=True),
    Column("name", String(CATEGORY_NAME_MAX), nullable=False),
    Column(
        "slug",
        String(120),
        nullable=False,
        comment="Derived from name; public lookup key.",
    ),
    Column("description", Text, nullable=True),
    Column("created_at", UTCDateTime(), nullable=False),
    UniqueConstraint("slug"),
    comment="Post categories (tags).",
)

posts = Table(
    "posts",
    metadata,
    Column("id", BIGINT_PK, Identity(start=1), primary_key=True),
    Column("title", String(POST_TITLE_MAX), nullable=False),
    Column(
        "slug",
        String(300),
        nullable=False,
        comment="Derived from title; public lookup key.",
    ),
    Column("content", Text, nullable=False),
    Column("excerpt", Text, nullable=True),
    Column("published", Boolean, nullable=False, server_default=false()),
    Column("created_at", UTCDateTime(), nullable=False),
    Column("updated_at", UTCDateTime(), nullable=False),
    UniqueConstraint("slug"),
    Index(None, "created_at"),
    comment="Blog posts; published=false is a draft.",
)

post_categories = Table(
    "post_categories",
    metadata,
    Column(
        "post_id",
        BIGINT_PK,
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "category_id",
        BIGINT_PK,
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    PrimaryKeyConstraint("post_id", "category_id"),
    Index(None, "category_id"),
    comment="Post to category association. One row per membership fact.",
)
