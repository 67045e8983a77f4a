"""CustomField ORM — persists administrator-defined custom field definitions.

Invariants:
    - id is an autoincrement integer primary key
    - field_type holds a FieldType value; options is a JSON list (empty for non-enumerated types)
    - code is unique when present
    - idx orders fields on the article form

Design Decisions:
    - JSON column for options: ordered list read back as-is, no join table
    - Rows are converted to frozen FieldDefinition snapshots by the repository,
      so core never sees an ORM object
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from wallride.db.base import Base


class CustomField(Base):
    """Custom field definition row."""
    __tablename__ = "custom_fields"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str | None] = mapped_column(String(200), nullable=True, unique=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    field_type: Mapped[str] = mapped_column(String(20), nullable=False)
    options: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    default_value: Mapped[str | None] = mapped_column(Text, nullable=True)
    idx: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    language: Mapped[str | None] = mapped_column(String(10), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        onupdate=lambda: datetime.now(timezone.utc),
    )
