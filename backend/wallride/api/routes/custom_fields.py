"""Custom Field Routes — paged search and single lookup of field definitions.

Invariants:
    - page is zero-indexed; size is bounded by settings.max_page_size
    - Unknown id → 404 via FieldNotFoundError (global handler)
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from wallride.config import Settings, get_settings
from wallride.core.domain_types import FieldId, FieldSortKey, FieldType, SortDirection
from wallride.infrastructure.custom_field_repository import SqlFieldDefinitionRepository
from wallride.infrastructure.database import get_db
from wallride.schemas.custom_field import CustomFieldPageResponse, CustomFieldResponse
from wallride.services.custom_field_service import CustomFieldService

router = APIRouter(prefix="/api/v1/custom-fields", tags=["custom-fields"])


def get_custom_field_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> CustomFieldService:
    repository = SqlFieldDefinitionRepository(db, settings.default_page_size)
    return CustomFieldService(repository, settings)


@router.get("", response_model=CustomFieldPageResponse)
async def search_custom_fields(
    keyword: str | None = Query(None, max_length=200),
    language: str | None = Query(None, max_length=10),
    field_type: list[FieldType] | None = Query(None, alias="type"),
    page: int | None = Query(None, ge=0),
    size: int | None = Query(None, ge=1),
    sort: FieldSortKey = Query(FieldSortKey.IDX),
    direction: SortDirection = Query(SortDirection.ASC),
    service: CustomFieldService = Depends(get_custom_field_service),
):
    """Search custom fields by keyword, language and type."""
    result = await service.search(
        keyword=keyword, language=language, field_types=field_type,
        page=page, size=size, sort=sort, direction=direction,
    )
    return CustomFieldPageResponse.from_page(result)


@router.get("/{field_id}", response_model=CustomFieldResponse)
async def get_custom_field(
    field_id: int,
    service: CustomFieldService = Depends(get_custom_field_service),
):
    """Get one custom field definition."""
    definition = await service.get(FieldId(field_id))
    return CustomFieldResponse.from_definition(definition)
