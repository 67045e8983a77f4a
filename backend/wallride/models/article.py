"""Article ORM — persists the aggregate built from a ContentCreateRequest.

Invariants:
    - id is an autoincrement integer primary key
    - language is non-nullable; title/body may be null only for drafts
    - status is one of ArticleStatus values (draft, published)
    - custom field values cascade-delete with the article

Design Decisions:
    - JSON columns for category_ids, related_post_ids, tag_names: categories, posts and
      tags are owned by other parts of the CMS; here they are opaque references
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship

from wallride.db.base import Base


class Article(Base):
    """Article aggregate root — owns its custom field values."""
    __tablename__ = "articles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str | None] = mapped_column(String(200), nullable=True)
    cover_id: Mapped[str | None] = mapped_column(String(50), nullable=True)
    title: Mapped[str | None] = mapped_column(String(500), nullable=True)
    body: Mapped[str | None] = mapped_column(Text, nullable=True)
    author_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="draft",
    )
    category_ids: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    related_post_ids: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    tag_names: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    seo_title: Mapped[str | None] = mapped_column(String(500), nullable=True)
    seo_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    seo_keywords: Mapped[str | None] = mapped_column(Text, nullable=True)
    language: Mapped[str] = mapped_column(String(10), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    custom_field_values: Mapped[list["CustomFieldValue"]] = relationship(
        "CustomFieldValue", back_populates="article",
        cascade="all, delete-orphan", lazy="selectin",
    )
