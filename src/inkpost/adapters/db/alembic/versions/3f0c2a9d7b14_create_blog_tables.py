"""create blog tables

Revision ID: 3f0c2a9d7b14
Revises:
Create Date: 2026-10-19 09:12:41.508314

"""

# pylint: disable=invalid-name

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

import inkpost.adapters.db.sa_types

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3f0c2a9d7b14"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

BIGINT_PK = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "categories",
        sa.Column("id", BIGINT_PK, sa.Identity(start=1), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column(
            "slug",
            sa.String(length=120),
            nullable=False,
            comment="Derived from name; public lookup key.",
        ),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            inkpost.adapters.db.sa_types.UTCDateTime(),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_categories")),
        sa.UniqueConstraint("slug", name=op.f("uq_categories_slug")),
        comment="Post categories (tags).",
    )

    op.create_table(
        "posts",
        sa.Column("id", BIGINT_PK, sa.Identity(start=1), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column(
            "slug",
            sa.String(length=300),
            nullable=False,
            comment="Derived from title; public lookup key.",
        ),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("excerpt", sa.Text(), nullable=True),
        sa.Column(
            "published", sa.Boolean(), server_default=sa.false(), nullable=False
        ),
        sa.Column(
            "created_at",
            inkpost.adapters.db.sa_types.UTCDateTime(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            inkpost.adapters.db.sa_types.UTCDateTime(),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_posts")),
        sa.UniqueConstraint("slug", name=op.f("uq_posts_slug")),
        comment="Blog posts; published=false is a draft.",
    )
    op.create_index(op.f("ix_posts_created_at"), "posts", ["created_at"])

    op.create_table(
        "post_categories",
        sa.Column("post_id", BIGINT_PK, nullable=False),
        sa.Column("category_id", BIGINT_PK, nullable=False),
        sa.ForeignKeyConstraint(
            ["post_id"],
            ["posts.id"],
            name=op.f("fk_post_categories_post_id_posts"),
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["category_id"],
            ["categories.id"],
            name=op.f("fk_post_categories_category_id_categories"),
            ondelete="RESTRICT",
        ),
        sa.PrimaryKeyConstraint(
            "post_id", "category_id", name=op.f("pk_post_categories")
        ),
        comment="Post to category association. One row per membership fact.",
    )
    op.create_index(
        op.f("ix_post_categories_category_id"), "post_categories", ["category_id"]
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index(
        op.f("ix_post_categories_category_id"), table_name="post_categories"
    )
    op.drop_table("post_categories")
    op.drop_index(op.f("ix_posts_created_at"), table_name="posts")
    op.drop_table("posts")
    op.drop_table("categories")
