"""CustomFieldValue ORM — one typed custom field value of one article.

Invariants:
    - Always belongs to an Article (article_id FK, cascade delete)
    - At most one of string_value / number_value / date_value / datetime_value is set
    - (article_id, custom_field_id) is unique

Design Decisions:
    - One column per value kind: the tagged AttributeValue maps kind -> column,
      so numeric and date values stay queryable and sortable in SQL
"""

from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import (
    Date, DateTime, ForeignKey, Integer, Numeric, Text, UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from wallride.core.domain_types import NUMBER_PRECISION, NUMBER_SCALE
from wallride.db.base import Base


class CustomFieldValue(Base):
    """Custom field value row linked to an article and a field definition."""
    __tablename__ = "custom_field_values"
    __table_args__ = (
        UniqueConstraint("article_id", "custom_field_id", name="uq_article_custom_field"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    article_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("articles.id", ondelete="CASCADE"), nullable=False,
    )
    custom_field_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("custom_fields.id", ondelete="CASCADE"), nullable=False,
    )
    string_value: Mapped[str | None] = mapped_column(Text, nullable=True)
    number_value: Mapped[Decimal | None] = mapped_column(
        Numeric(NUMBER_PRECISION, NUMBER_SCALE), nullable=True,
    )
    date_value: Mapped[date | None] = mapped_column(Date, nullable=True)
    datetime_value: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    # Relationships
    article: Mapped["Article"] = relationship(
        "Article", back_populates="custom_field_values",
    )
