"""Search Criteria — filter + pagination parameters for field definition lookups.

Invariants:
    - Pages are zero-indexed; page p of size s covers the half-open range [p*s, (p+1)*s)
    - PageRequest.size >= 1 and page >= 0 (rejected at construction otherwise)
    - Blank keyword / language mean "no filter", never "match empty string"
    - filter_definitions, sort_definitions, paginate are PURE

Design Decisions:
    - Pagination lives in PageRequest, separate from filters, so one criteria can be
      paged many ways; criteria may still carry a default page_request of its own
    - Page is generic and frozen: repositories (SQL or in-memory) return the same shape
"""

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from wallride.core.domain_types import FieldSortKey, FieldType, SortDirection
from wallride.core.field_definition import FieldDefinition

T = TypeVar("T")


@dataclass(frozen=True)
class PageRequest:
    """Zero-indexed page number, page size and ordering."""
    page: int = 0
    size: int = 20
    sort: FieldSortKey = FieldSortKey.IDX
    direction: SortDirection = SortDirection.ASC

    def __post_init__(self):
        if self.page < 0:
            raise ValueError(f"page must be >= 0, got {self.page}")
        if self.size < 1:
            raise ValueError(f"size must be >= 1, got {self.size}")

    @property
    def offset(self) -> int:
        return self.page * self.size

    def next(self) -> "PageRequest":
        return PageRequest(self.page + 1, self.size, self.sort, self.direction)


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results plus the totals needed to render a pager."""
    content: tuple[T, ...]
    page: int
    size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size) if self.size else 0

    @property
    def has_next(self) -> bool:
        return self.page + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 0

    @property
    def is_empty(self) -> bool:
        return not self.content


@dataclass(frozen=True)
class SearchCriteria:
    """Filters for a field definition search."""
    keyword: str | None = None
    language: str | None = None
    field_types: frozenset[FieldType] = field(default_factory=frozenset)
    page_request: PageRequest | None = None

    def __post_init__(self):
        object.__setattr__(self, "keyword", _blank_to_none(self.keyword))
        object.__setattr__(self, "language", _blank_to_none(self.language))
        object.__setattr__(
            self, "field_types", frozenset(FieldType(t) for t in self.field_types),
        )

    @classmethod
    def builder(cls) -> "SearchCriteriaBuilder":
        return SearchCriteriaBuilder()

    def matches(self, definition: FieldDefinition) -> bool:
        if self.keyword and not definition.matches_keyword(self.keyword):
            return False
        if self.language and not definition.applies_to(self.language):
            return False
        if self.field_types and definition.field_type not in self.field_types:
            return False
        return True


class SearchCriteriaBuilder:
    """Fluent assembly of SearchCriteria from optional request parameters."""

    def __init__(self):
        self._keyword: str | None = None
        self._language: str | None = None
        self._field_types: set[FieldType] = set()
        self._page: int | None = None
        self._size: int | None = None
        self._sort = FieldSortKey.IDX
        self._direction = SortDirection.ASC

    def keyword(self, keyword: str | None) -> "SearchCriteriaBuilder":
        self._keyword = keyword
        return self

    def language(self, language: str | None) -> "SearchCriteriaBuilder":
        self._language = language
        return self

    def field_types(self, field_types: Iterable[FieldType] | None) -> "SearchCriteriaBuilder":
        self._field_types = set(field_types or ())
        return self

    def page(self, page: int | None, size: int | None = None) -> "SearchCriteriaBuilder":
        self._page = page
        self._size = size
        return self

    def sort(
        self, key: FieldSortKey, direction: SortDirection = SortDirection.ASC,
    ) -> "SearchCriteriaBuilder":
        self._sort = key
        self._direction = direction
        return self

    def build(self, default_size: int = 20) -> SearchCriteria:
        page_request = None
        if self._page is not None or self._size is not None:
            page_request = PageRequest(
                self._page or 0, self._size or default_size,
                self._sort, self._direction,
            )
        elif (self._sort, self._direction) != (FieldSortKey.IDX, SortDirection.ASC):
            page_request = PageRequest(0, default_size, self._sort, self._direction)
        return SearchCriteria(
            keyword=self._keyword,
            language=self._language,
            field_types=frozenset(self._field_types),
            page_request=page_request,
        )


# ─── Pure helpers (in-memory search) ────────────────────────────

def filter_definitions(
    definitions: Iterable[FieldDefinition], criteria: SearchCriteria,
) -> list[FieldDefinition]:
    return [d for d in definitions if criteria.matches(d)]


def sort_definitions(
    definitions: Iterable[FieldDefinition],
    key: FieldSortKey = FieldSortKey.IDX,
    direction: SortDirection = SortDirection.ASC,
) -> list[FieldDefinition]:
    """Stable sort; id breaks ties so equal idx/name values keep a fixed order."""
    if key is FieldSortKey.NAME:
        sort_key = lambda d: (d.name.casefold(), d.id)  # noqa: E731
    elif key is FieldSortKey.ID:
        sort_key = lambda d: (d.id,)  # noqa: E731
    else:
        sort_key = lambda d: (d.idx, d.id)  # noqa: E731
    return sorted(definitions, key=sort_key, reverse=direction is SortDirection.DESC)


def paginate(items: Sequence[T], page_request: PageRequest) -> Page[T]:
    start = page_request.offset
    end = start + page_request.size
    return Page(
        content=tuple(items[start:end]),
        page=page_request.page,
        size=page_request.size,
        total_elements=len(items),
    )


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None
