"""Content Create Request — validated, immutable aggregate describing a new article.

Invariants:
    - Only ContentCreateRequestBuilder.build() produces a request; it validates first
    - build() reports EVERY missing required field at once (ValidationFailedError)
    - Publishing requires title, body and language; a draft requires only language
    - Blank strings count as missing and are stored as None; other strings are kept verbatim
    - category_ids / related_post_ids are frozensets, tags stays the raw submitted string

Design Decisions:
    - Builder over a long constructor: the form layer sets what it has, build() decides
    - Tag parsing is a pure helper (split_tags), exposed as tag_names, so persistence
      never re-implements it
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime

from wallride.core.attribute_set import AttributeSet
from wallride.core.domain_types import ArticleStatus, AuthorId, CategoryId, PostId
from wallride.core.errors import FieldError, ValidationFailedError

_TAG_SEPARATORS = re.compile(r"[,\s]+")

PUBLISH_REQUIRED_FIELDS: tuple[str, ...] = ("title", "body", "language")
DRAFT_REQUIRED_FIELDS: tuple[str, ...] = ("language",)


def split_tags(tags: str | None) -> list[str]:
    """Split a comma/space-delimited tag string. Order-preserving, no duplicates."""
    names: list[str] = []
    for name in _TAG_SEPARATORS.split(tags or ""):
        if name and name not in names:
            names.append(name)
    return names


@dataclass(frozen=True)
class ContentCreateRequest:
    """Everything needed to persist a new article."""
    title: str | None
    body: str | None
    language: str
    status: ArticleStatus = ArticleStatus.PUBLISHED
    code: str | None = None
    cover_id: str | None = None
    author_id: AuthorId | None = None
    date: datetime | None = None
    category_ids: frozenset[CategoryId] = field(default_factory=frozenset)
    tags: str | None = None
    related_post_ids: frozenset[PostId] = field(default_factory=frozenset)
    seo_title: str | None = None
    seo_description: str | None = None
    seo_keywords: str | None = None
    custom_field_values: AttributeSet = field(default_factory=AttributeSet)

    @property
    def tag_names(self) -> list[str]:
        return split_tags(self.tags)

    @classmethod
    def builder(cls) -> "ContentCreateRequestBuilder":
        return ContentCreateRequestBuilder()


class ContentCreateRequestBuilder:
    """Fluent builder; every setter returns the builder."""

    def __init__(self):
        self._values: dict = {
            "code": None,
            "cover_id": None,
            "title": None,
            "body": None,
            "author_id": None,
            "date": None,
            "category_ids": frozenset(),
            "tags": None,
            "related_post_ids": frozenset(),
            "seo_title": None,
            "seo_description": None,
            "seo_keywords": None,
            "custom_field_values": AttributeSet(),
            "language": None,
        }

    def code(self, code: str | None) -> "ContentCreateRequestBuilder":
        return self._set("code", code)

    def cover_id(self, cover_id: str | None) -> "ContentCreateRequestBuilder":
        return self._set("cover_id", cover_id)

    def title(self, title: str | None) -> "ContentCreateRequestBuilder":
        return self._set("title", title)

    def body(self, body: str | None) -> "ContentCreateRequestBuilder":
        return self._set("body", body)

    def author_id(self, author_id: int | None) -> "ContentCreateRequestBuilder":
        return self._set("author_id", author_id)

    def date(self, date: datetime | None) -> "ContentCreateRequestBuilder":
        return self._set("date", date)

    def category_ids(self, ids: Iterable[int] | None) -> "ContentCreateRequestBuilder":
        return self._set("category_ids", frozenset(ids or ()))

    def tags(self, tags: str | None) -> "ContentCreateRequestBuilder":
        return self._set("tags", tags)

    def related_post_ids(self, ids: Iterable[int] | None) -> "ContentCreateRequestBuilder":
        return self._set("related_post_ids", frozenset(ids or ()))

    def seo_title(self, seo_title: str | None) -> "ContentCreateRequestBuilder":
        return self._set("seo_title", seo_title)

    def seo_description(self, seo_description: str | None) -> "ContentCreateRequestBuilder":
        return self._set("seo_description", seo_description)

    def seo_keywords(self, seo_keywords: str | None) -> "ContentCreateRequestBuilder":
        return self._set("seo_keywords", seo_keywords)

    def custom_field_values(
        self, values: AttributeSet | None,
    ) -> "ContentCreateRequestBuilder":
        return self._set("custom_field_values", values if values is not None else AttributeSet())

    def language(self, language: str | None) -> "ContentCreateRequestBuilder":
        return self._set("language", language)

    def build(self, publish: bool = True) -> ContentCreateRequest:
        """Validate and construct. Raises ValidationFailedError listing all missing fields."""
        values = {
            key: _blank_to_none(value) if isinstance(value, str) else value
            for key, value in self._values.items()
        }
        required = PUBLISH_REQUIRED_FIELDS if publish else DRAFT_REQUIRED_FIELDS
        errors = [
            FieldError(name, f"{name} is required", "REQUIRED")
            for name in required
            if values[name] is None
        ]
        if errors:
            raise ValidationFailedError(errors)
        status = ArticleStatus.PUBLISHED if publish else ArticleStatus.DRAFT
        return ContentCreateRequest(status=status, **values)

    def _set(self, key: str, value) -> "ContentCreateRequestBuilder":
        self._values[key] = value
        return self


def _blank_to_none(value: str) -> str | None:
    return value if value.strip() else None
