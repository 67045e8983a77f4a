"""Article Schemas — the article create form and its responses.

Invariants:
    - ArticleCreateForm.language is required and non-blank at the boundary
    - custom_field_values holds at most one entry per custom_field_id
    - date accepts the form pattern yyyy/MM/dd HH:mm as well as ISO 8601;
      an ISO offset is converted to UTC and dropped, so date is always naive
    - title/body stay optional here: required-ness depends on publish vs draft and
      is decided by the core builder, so every missing field is reported together

Design Decisions:
    - CustomFieldValueForm carries name/description/type/options as well as the value:
      the same shape serves the blank form (GET) and the submission (POST)
    - field_validator for side-effect-free transforms (date parsing) — keeps models pure
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator

from wallride.core.domain_types import DATETIME_FORMAT, FieldType
from wallride.core.field_definition import FieldDefinition


class CustomFieldValueForm(BaseModel):
    """One custom field entry on the article form."""
    custom_field_id: int
    name: str | None = None
    description: str | None = None
    field_type: FieldType | None = None
    options: list[str] = []
    value: str | None = None

    @classmethod
    def from_definition(cls, definition: FieldDefinition) -> "CustomFieldValueForm":
        """Blank entry for a known field, pre-filled with its default value."""
        return cls(
            custom_field_id=definition.id,
            name=definition.name,
            description=definition.description,
            field_type=definition.field_type,
            options=list(definition.options),
            value=definition.default_value,
        )


class ArticleCreateForm(BaseModel):
    """Article submission — scalar fields, references and custom field values."""
    code: str | None = Field(None, max_length=200)
    cover_id: str | None = Field(None, max_length=50)
    title: str | None = Field(None, max_length=500)
    body: str | None = None
    author_id: int | None = None
    date: datetime | None = None
    category_ids: set[int] = set()
    tags: str | None = Field(None, max_length=2000)
    related_post_ids: set[int] = set()
    seo_title: str | None = Field(None, max_length=500)
    seo_description: str | None = Field(None, max_length=2000)
    seo_keywords: str | None = Field(None, max_length=2000)
    custom_field_values: list[CustomFieldValueForm] = []
    language: str = Field(min_length=1, max_length=10)

    @field_validator("date", mode="before")
    @classmethod
    def parse_form_date(cls, v):
        if isinstance(v, str):
            v = v.strip()
            if not v:
                return None
            try:
                return datetime.strptime(v, DATETIME_FORMAT)
            except ValueError:
                return v  # let pydantic try ISO 8601
        return v

    @field_validator("date")
    @classmethod
    def naive_utc_date(cls, v: datetime | None) -> datetime | None:
        # articles.date is TIMESTAMP WITHOUT TIME ZONE
        if v is not None and v.tzinfo is not None:
            return v.astimezone(timezone.utc).replace(tzinfo=None)
        return v

    @field_validator("language")
    @classmethod
    def strip_language(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("language cannot be empty or whitespace")
        return v

    @field_validator("custom_field_values")
    @classmethod
    def unique_custom_fields(
        cls, v: list[CustomFieldValueForm],
    ) -> list[CustomFieldValueForm]:
        ids = [entry.custom_field_id for entry in v]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"duplicate custom_field_id: {duplicates}")
        return v

    def raw_custom_field_values(self) -> dict[int, str | None]:
        return {entry.custom_field_id: entry.value for entry in self.custom_field_values}


class ArticleCreateFormResponse(BaseModel):
    """Blank article form: one entry per custom field that applies to the language."""
    language: str
    custom_field_values: list[CustomFieldValueForm]


class ArticleCreatedResponse(BaseModel):
    id: int
    status: str
    language: str
    custom_field_count: int
