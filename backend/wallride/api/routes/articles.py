"""Article Routes — blank create form and article creation.

Invariants:
    - GET /create-form lists one entry per custom field applying to the language
    - POST validates everything before anything is written; 400 lists every failed field
    - The route commits; services and repositories only flush
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from wallride.config import Settings, get_settings
from wallride.infrastructure.article_repository import SqlArticleRepository
from wallride.infrastructure.custom_field_repository import SqlFieldDefinitionRepository
from wallride.infrastructure.database import get_db
from wallride.schemas.article import (
    ArticleCreatedResponse, ArticleCreateForm,
    ArticleCreateFormResponse, CustomFieldValueForm,
)
from wallride.services.article_service import ArticleService

router = APIRouter(prefix="/api/v1/articles", tags=["articles"])


def get_article_service(db: AsyncSession = Depends(get_db)) -> ArticleService:
    return ArticleService(
        SqlFieldDefinitionRepository(db), SqlArticleRepository(db),
    )


@router.get("/create-form", response_model=ArticleCreateFormResponse)
async def get_create_form(
    language: str | None = Query(None, min_length=1, max_length=10),
    service: ArticleService = Depends(get_article_service),
    settings: Settings = Depends(get_settings),
):
    """Blank article form with one value entry per applicable custom field."""
    language = language or settings.default_language
    definitions = await service.custom_fields_for(language)
    return ArticleCreateFormResponse(
        language=language,
        custom_field_values=[
            CustomFieldValueForm.from_definition(d) for d in definitions
        ],
    )


@router.post(
    "", response_model=ArticleCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_article(
    form: ArticleCreateForm,
    publish: bool = Query(True),
    db: AsyncSession = Depends(get_db),
    service: ArticleService = Depends(get_article_service),
):
    """Create an article; publish=false saves a draft (only language required)."""
    article_id, request = await service.create(form, publish=publish)
    await db.commit()
    return ArticleCreatedResponse(
        id=article_id,
        status=request.status.value,
        language=request.language,
        custom_field_count=len(request.custom_field_values.non_empty()),
    )
