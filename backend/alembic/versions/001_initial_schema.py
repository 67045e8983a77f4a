"""Initial schema — custom_fields, articles, custom_field_values.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "custom_fields",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("code", sa.String(200), nullable=True, unique=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("field_type", sa.String(20), nullable=False),
        sa.Column("options", sa.JSON, nullable=False, server_default="[]"),
        sa.Column("default_value", sa.Text, nullable=True),
        sa.Column("idx", sa.Integer, nullable=False, server_default="0"),
        sa.Column("language", sa.String(10), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_custom_fields_language_idx", "custom_fields", ["language", "idx"])

    op.create_table(
        "articles",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("code", sa.String(200), nullable=True),
        sa.Column("cover_id", sa.String(50), nullable=True),
        sa.Column("title", sa.String(500), nullable=True),
        sa.Column("body", sa.Text, nullable=True),
        sa.Column("author_id", sa.Integer, nullable=True),
        sa.Column("date", sa.DateTime, nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="draft"),
        sa.Column("category_ids", sa.JSON, nullable=False, server_default="[]"),
        sa.Column("related_post_ids", sa.JSON, nullable=False, server_default="[]"),
        sa.Column("tag_names", sa.JSON, nullable=False, server_default="[]"),
        sa.Column("seo_title", sa.String(500), nullable=True),
        sa.Column("seo_description", sa.Text, nullable=True),
        sa.Column("seo_keywords", sa.Text, nullable=True),
        sa.Column("language", sa.String(10), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "custom_field_values",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("article_id", sa.Integer, sa.ForeignKey("articles.id", ondelete="CASCADE"), nullable=False),
        sa.Column("custom_field_id", sa.Integer, sa.ForeignKey("custom_fields.id", ondelete="CASCADE"), nullable=False),
        sa.Column("string_value", sa.Text, nullable=True),
        sa.Column("number_value", sa.Numeric(19, 4), nullable=True),
        sa.Column("date_value", sa.Date, nullable=True),
        sa.Column("datetime_value", sa.DateTime, nullable=True),
        sa.UniqueConstraint("article_id", "custom_field_id", name="uq_article_custom_field"),
    )


def downgrade() -> None:
    op.drop_table("custom_field_values")
    op.drop_table("articles")
    op.drop_index("ix_custom_fields_language_idx", table_name="custom_fields")
    op.drop_table("custom_fields")
