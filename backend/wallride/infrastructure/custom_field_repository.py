"""Custom Field Repository — SQLAlchemy implementation of FieldDefinitionRepository.

Invariants:
    - Returns frozen FieldDefinition snapshots, never ORM rows
    - get() raises FieldNotFoundError for unknown ids
    - search() counts and pages in SQL; ordering always ends with id so pages are stable
    - Keyword matches name, code or description case-insensitively, with LIKE wildcards escaped
    - A language filter also matches language-neutral rows (NULL language)

Design Decisions:
    - One repository per session (constructed per request): no shared mutable state
"""

from sqlalchemy import Select, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from wallride.core.domain_types import FieldId, FieldSortKey, FieldType, SortDirection
from wallride.core.errors import FieldNotFoundError
from wallride.core.field_definition import FieldDefinition
from wallride.core.search_criteria import Page, PageRequest, SearchCriteria
from wallride.models.custom_field import CustomField

DEFAULT_PAGE_SIZE: int = 20

_SORT_COLUMNS = {
    FieldSortKey.IDX: CustomField.idx,
    FieldSortKey.NAME: CustomField.name,
    FieldSortKey.ID: CustomField.id,
}


def to_definition(row: CustomField) -> FieldDefinition:
    """ORM row -> core snapshot."""
    return FieldDefinition(
        id=FieldId(row.id),
        name=row.name,
        field_type=FieldType(row.field_type),
        description=row.description,
        options=tuple(row.options or ()),
        code=row.code,
        idx=row.idx,
        language=row.language,
        default_value=row.default_value,
    )


class SqlFieldDefinitionRepository:
    """Field definition lookups backed by the custom_fields table."""

    def __init__(self, db: AsyncSession, default_page_size: int = DEFAULT_PAGE_SIZE):
        self._db = db
        self.default_page_size = default_page_size

    async def get(self, field_id: FieldId) -> FieldDefinition:
        row = await self._db.get(CustomField, field_id)
        if row is None:
            raise FieldNotFoundError(field_id)
        return to_definition(row)

    async def get_all(self, language: str | None = None) -> list[FieldDefinition]:
        query = select(CustomField).order_by(CustomField.idx, CustomField.id)
        if language is not None:
            query = query.where(_applies_to(language))
        result = await self._db.execute(query)
        return [to_definition(row) for row in result.scalars().all()]

    async def search(
        self, criteria: SearchCriteria, page_request: PageRequest | None = None,
    ) -> Page[FieldDefinition]:
        page_request = (
            page_request
            or criteria.page_request
            or PageRequest(size=self.default_page_size)
        )
        filtered = _apply_filters(select(CustomField), criteria)

        total = await self._db.scalar(
            select(func.count()).select_from(filtered.subquery()),
        )
        column = _SORT_COLUMNS[page_request.sort]
        if page_request.direction is SortDirection.DESC:
            ordering = (column.desc(), CustomField.id.desc())
        else:
            ordering = (column.asc(), CustomField.id.asc())
        result = await self._db.execute(
            filtered.order_by(*ordering)
            .limit(page_request.size)
            .offset(page_request.offset),
        )
        return Page(
            content=tuple(to_definition(row) for row in result.scalars().all()),
            page=page_request.page,
            size=page_request.size,
            total_elements=total or 0,
        )


def _apply_filters(query: Select, criteria: SearchCriteria) -> Select:
    if criteria.keyword:
        query = query.where(or_(
            CustomField.name.icontains(criteria.keyword, autoescape=True),
            CustomField.code.icontains(criteria.keyword, autoescape=True),
            CustomField.description.icontains(criteria.keyword, autoescape=True),
        ))
    if criteria.language:
        query = query.where(_applies_to(criteria.language))
    if criteria.field_types:
        query = query.where(
            CustomField.field_type.in_(sorted(t.value for t in criteria.field_types)),
        )
    return query


def _applies_to(language: str):
    """Language-neutral rows (NULL language) apply to every language."""
    return or_(CustomField.language == language, CustomField.language.is_(None))
