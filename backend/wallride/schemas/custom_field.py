"""Custom Field Schemas — API views of field definitions and search pages.

Invariants:
    - Responses are built from core FieldDefinition / Page, never from ORM rows
    - page is zero-indexed, matching core PageRequest
"""

from pydantic import BaseModel

from wallride.core.domain_types import FieldType
from wallride.core.field_definition import FieldDefinition
from wallride.core.search_criteria import Page


class CustomFieldResponse(BaseModel):
    """Public view of one custom field definition."""
    id: int
    code: str | None = None
    name: str
    description: str | None = None
    field_type: FieldType
    options: list[str] = []
    default_value: str | None = None
    idx: int = 0
    language: str | None = None

    @classmethod
    def from_definition(cls, definition: FieldDefinition) -> "CustomFieldResponse":
        return cls(
            id=definition.id,
            code=definition.code,
            name=definition.name,
            description=definition.description,
            field_type=definition.field_type,
            options=list(definition.options),
            default_value=definition.default_value,
            idx=definition.idx,
            language=definition.language,
        )


class CustomFieldPageResponse(BaseModel):
    """One page of custom field search results."""
    content: list[CustomFieldResponse]
    page: int
    size: int
    total_elements: int
    total_pages: int
    has_next: bool
    has_previous: bool

    @classmethod
    def from_page(cls, page: Page[FieldDefinition]) -> "CustomFieldPageResponse":
        return cls(
            content=[CustomFieldResponse.from_definition(d) for d in page.content],
            page=page.page,
            size=page.size,
            total_elements=page.total_elements,
            total_pages=page.total_pages,
            has_next=page.has_next,
            has_previous=page.has_previous,
        )
