"""Custom Field Service — paged search and lookup of field definitions.

Invariants:
    - Requested page size is clamped to settings.max_page_size
    - No page/size given -> repository default page size (settings.default_page_size)
"""

import logging
from collections.abc import Iterable

from wallride.config import Settings
from wallride.core.domain_types import FieldId, FieldSortKey, FieldType, SortDirection
from wallride.core.field_definition import FieldDefinition
from wallride.core.repository_protocols import FieldDefinitionRepository
from wallride.core.search_criteria import Page, SearchCriteria

logger = logging.getLogger(__name__)


class CustomFieldService:
    def __init__(self, repository: FieldDefinitionRepository, settings: Settings):
        self._repository = repository
        self._settings = settings

    async def get(self, field_id: FieldId) -> FieldDefinition:
        return await self._repository.get(field_id)

    async def search(
        self,
        keyword: str | None = None,
        language: str | None = None,
        field_types: Iterable[FieldType] | None = None,
        page: int | None = None,
        size: int | None = None,
        sort: FieldSortKey = FieldSortKey.IDX,
        direction: SortDirection = SortDirection.ASC,
    ) -> Page[FieldDefinition]:
        if size is not None and size > self._settings.max_page_size:
            logger.info(
                f"Clamping page size {size} to {self._settings.max_page_size}",
            )
            size = self._settings.max_page_size
        criteria: SearchCriteria = (
            SearchCriteria.builder()
            .keyword(keyword)
            .language(language)
            .field_types(field_types)
            .page(page, size)
            .sort(sort, direction)
            .build(default_size=self._settings.default_page_size)
        )
        result = await self._repository.search(criteria)
        logger.debug(
            f"Custom field search returned {len(result.content)} of {result.total_elements}",
            extra={"language": language, "total": result.total_elements},
        )
        return result
