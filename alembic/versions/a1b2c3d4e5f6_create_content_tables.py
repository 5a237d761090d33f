"""create_content_tables

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-19

Creates the localized content tables (blog posts, events, resources and
their per-language translations), members and admin users.
"""

from __future__ import annotations

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "a1b2c3d4e5f6"
down_revision: str | None = None
branch_labels = None
depends_on = None


def _id() -> sa.Column:
    return sa.Column("id", sa.String(36), primary_key=True)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def _translation_table(name: str, parent_key: str, parent_table: str, *columns: sa.Column) -> None:
    op.create_table(
        name,
        _id(),
        sa.Column(parent_key, sa.String(36), sa.ForeignKey(f"{parent_table}.id", ondelete="CASCADE"), nullable=False),
        sa.Column("language", sa.String(2), nullable=False),
        sa.Column("title", sa.String, nullable=False),
        *columns,
        sa.Column("category", sa.String, nullable=True),
        sa.Column("tags", sa.JSON, nullable=True),
        *_timestamps(),
        sa.UniqueConstraint(parent_key, "language", name=f"uq_{name[:-1]}_language"),
    )
    op.create_index(f"ix_{name}_{parent_key}", name, [parent_key])
    op.create_index(f"ix_{name}_created_at", name, ["created_at"])


def upgrade() -> None:
    op.create_table(
        "blog_posts",
        _id(),
        sa.Column("slug", sa.String, nullable=False, unique=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="draft"),
        sa.Column("featured_image", sa.String, nullable=True),
        sa.Column("read_time", sa.Integer, nullable=True),
        sa.Column("views", sa.Integer, nullable=False, server_default="0"),
        sa.Column("likes", sa.Integer, nullable=False, server_default="0"),
        sa.Column("comments", sa.Integer, nullable=False, server_default="0"),
        *_timestamps(),
    )
    op.create_index("idx_blog_posts_status", "blog_posts", ["status"])
    op.create_index("ix_blog_posts_created_at", "blog_posts", ["created_at"])

    _translation_table(
        "blog_post_translations",
        "blog_post_id",
        "blog_posts",
        sa.Column("excerpt", sa.Text, nullable=True),
        sa.Column("content", sa.Text, nullable=True),
        sa.Column("author", sa.String, nullable=True),
        sa.Column("seo_title", sa.String, nullable=True),
        sa.Column("seo_description", sa.Text, nullable=True),
    )
    op.create_index("idx_blog_translations_language", "blog_post_translations", ["language"])

    op.create_table(
        "events",
        _id(),
        sa.Column("slug", sa.String, nullable=False, unique=True),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("location", sa.String, nullable=True),
        sa.Column("max_attendees", sa.Integer, nullable=True),
        sa.Column("price", sa.Numeric(10, 2), nullable=True),
        sa.Column("currency", sa.String(3), nullable=True),
        sa.Column("registration_url", sa.String, nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="draft"),
        *_timestamps(),
    )
    op.create_index("idx_events_start_date", "events", ["start_date"])
    op.create_index("idx_events_status", "events", ["status"])
    op.create_index("ix_events_created_at", "events", ["created_at"])

    _translation_table(
        "event_translations",
        "event_id",
        "events",
        sa.Column("description", sa.Text, nullable=True),
    )
    op.create_index("idx_event_translations_language", "event_translations", ["language"])

    op.create_table(
        "resources",
        _id(),
        sa.Column("slug", sa.String, nullable=False, unique=True),
        sa.Column("file_url", sa.String, nullable=False),
        sa.Column("file_size", sa.Integer, nullable=True),
        sa.Column("file_type", sa.String, nullable=True),
        sa.Column("downloads", sa.Integer, nullable=False, server_default="0"),
        sa.Column("status", sa.String(20), nullable=False, server_default="draft"),
        *_timestamps(),
    )
    op.create_index("idx_resources_status", "resources", ["status"])
    op.create_index("ix_resources_created_at", "resources", ["created_at"])

    _translation_table(
        "resource_translations",
        "resource_id",
        "resources",
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("type", sa.String, nullable=True),
    )
    op.create_index("idx_resource_translations_language", "resource_translations", ["language"])

    op.create_table(
        "members",
        _id(),
        sa.Column("email", sa.String, nullable=False, unique=True),
        sa.Column("first_name", sa.String, nullable=True),
        sa.Column("last_name", sa.String, nullable=True),
        sa.Column("company", sa.String, nullable=True),
        sa.Column("position", sa.String, nullable=True),
        sa.Column("phone", sa.String, nullable=True),
        sa.Column("membership_type", sa.String, nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        *_timestamps(),
    )
    op.create_index("idx_members_status", "members", ["status"])
    op.create_index("ix_members_created_at", "members", ["created_at"])

    op.create_table(
        "admin_users",
        _id(),
        sa.Column("email", sa.String, nullable=False, unique=True),
        sa.Column("hashed_password", sa.String, nullable=False),
        sa.Column("full_name", sa.String, nullable=True),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("last_login_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_admin_users_email", "admin_users", ["email"])
    op.create_index("ix_admin_users_created_at", "admin_users", ["created_at"])


def downgrade() -> None:
    op.drop_table("admin_users")
    op.drop_table("members")
    op.drop_table("resource_translations")
    op.drop_table("resources")
    op.drop_table("event_translations")
    op.drop_table("events")
    op.drop_table("blog_post_translations")
    op.drop_table("blog_posts")
