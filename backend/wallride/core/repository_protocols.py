"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO,
      but core pure functions that USE their results are never async themselves —
      the shell orchestrates the async calls around the pure logic
    - search() takes an optional page_request: omitting it means the repository's
      default page size (same contract as FieldRegistry.search)
"""

from typing import Protocol

from wallride.core.content_request import ContentCreateRequest
from wallride.core.domain_types import ArticleId, FieldId
from wallride.core.field_definition import FieldDefinition
from wallride.core.search_criteria import Page, PageRequest, SearchCriteria


class FieldDefinitionRepository(Protocol):
    """Contract for custom field definition lookups — implemented by shell."""
    async def get(self, field_id: FieldId) -> FieldDefinition: ...
    async def get_all(self, language: str | None = None) -> list[FieldDefinition]: ...
    async def search(
        self, criteria: SearchCriteria, page_request: PageRequest | None = None,
    ) -> Page[FieldDefinition]: ...


class ArticleRepository(Protocol):
    """Contract for article persistence — implemented by shell."""
    async def save(self, request: ContentCreateRequest) -> ArticleId: ...
