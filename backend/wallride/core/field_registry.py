"""Field Registry — read-only, snapshot-backed lookup of custom field definitions.

Invariants:
    - The snapshot (ordered tuple + id index) is built once and never mutated
    - get() raises FieldNotFoundError for unknown ids, never returns None
    - search() without a page request uses criteria.page_request, then the registry default size
    - get_all() is ordered by (idx, id): the order the article form renders fields in

Design Decisions:
    - Immutable snapshot over locks: any number of readers, no synchronization;
      a definition change means building a new registry (with_definitions)
"""

from collections.abc import Iterable

from wallride.core.domain_types import FieldId
from wallride.core.errors import FieldNotFoundError
from wallride.core.field_definition import FieldDefinition
from wallride.core.search_criteria import (
    Page, PageRequest, SearchCriteria,
    filter_definitions, paginate, sort_definitions,
)

DEFAULT_PAGE_SIZE: int = 20


class FieldRegistry:
    """Immutable registry of FieldDefinitions."""

    def __init__(
        self,
        definitions: Iterable[FieldDefinition] = (),
        default_page_size: int = DEFAULT_PAGE_SIZE,
    ):
        ordered = tuple(sort_definitions(definitions))
        by_id: dict[FieldId, FieldDefinition] = {}
        for definition in ordered:
            if definition.id in by_id:
                raise ValueError(f"Duplicate field definition {definition.id}")
            by_id[definition.id] = definition
        if default_page_size < 1:
            raise ValueError(f"default_page_size must be >= 1, got {default_page_size}")
        self._ordered = ordered
        self._by_id = by_id
        self.default_page_size = default_page_size

    def __len__(self) -> int:
        return len(self._ordered)

    def __contains__(self, field_id: object) -> bool:
        return field_id in self._by_id

    def get(self, field_id: FieldId) -> FieldDefinition:
        definition = self._by_id.get(field_id)
        if definition is None:
            raise FieldNotFoundError(field_id)
        return definition

    def find(self, field_id: FieldId) -> FieldDefinition | None:
        return self._by_id.get(field_id)

    def get_all(self, language: str | None = None) -> list[FieldDefinition]:
        if language is None:
            return list(self._ordered)
        return [d for d in self._ordered if d.applies_to(language)]

    def search(
        self, criteria: SearchCriteria, page_request: PageRequest | None = None,
    ) -> Page[FieldDefinition]:
        page_request = (
            page_request
            or criteria.page_request
            or PageRequest(size=self.default_page_size)
        )
        matched = filter_definitions(self._ordered, criteria)
        ordered = sort_definitions(matched, page_request.sort, page_request.direction)
        return paginate(ordered, page_request)

    def with_definitions(self, definitions: Iterable[FieldDefinition]) -> "FieldRegistry":
        """New registry snapshot; this one is left untouched."""
        return FieldRegistry(definitions, self.default_page_size)
