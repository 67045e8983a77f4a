"""Article Service — turns an article form into a persisted article.

Invariants:
    - Custom field values are coerced against the definitions that apply to the
      form's language; values for any other field id are ignored (and logged)
    - Coercion failures and missing required fields are reported together in ONE
      ValidationFailedError; nothing is saved unless everything validates
    - The request is built by the core builder, so a partial request never reaches storage

Design Decisions:
    - Impureim sandwich: read definitions (IO) -> assemble + build (pure) -> save (IO)
"""

import logging

from wallride.core.attribute_set import (
    AttributeSet, build_attribute_set, unknown_field_ids,
)
from wallride.core.content_request import ContentCreateRequest
from wallride.core.domain_types import ArticleId
from wallride.core.errors import FieldError, ValidationFailedError
from wallride.core.field_definition import FieldDefinition
from wallride.core.repository_protocols import (
    ArticleRepository, FieldDefinitionRepository,
)
from wallride.schemas.article import ArticleCreateForm

logger = logging.getLogger(__name__)


class ArticleService:
    def __init__(
        self,
        fields: FieldDefinitionRepository,
        articles: ArticleRepository,
    ):
        self._fields = fields
        self._articles = articles

    async def custom_fields_for(self, language: str) -> list[FieldDefinition]:
        """Definitions rendered on the article form for this language."""
        return await self._fields.get_all(language=language)

    async def create(
        self, form: ArticleCreateForm, publish: bool = True,
    ) -> tuple[ArticleId, ContentCreateRequest]:
        definitions = await self.custom_fields_for(form.language)
        request = build_create_request(form, definitions, publish)
        article_id = await self._articles.save(request)
        logger.info(
            f"Article created ({request.status.value})",
            extra={"article_id": article_id, "language": request.language},
        )
        return article_id, request


def build_create_request(
    form: ArticleCreateForm,
    definitions: list[FieldDefinition],
    publish: bool = True,
) -> ContentCreateRequest:
    """Coerce custom fields and build the request, collecting every error."""
    raw_values = form.raw_custom_field_values()
    for field_id in unknown_field_ids(definitions, raw_values):
        logger.debug(
            "Ignoring value for unknown custom field",
            extra={"field_id": field_id, "language": form.language},
        )

    errors: list[FieldError] = []
    attributes = AttributeSet()
    try:
        attributes = build_attribute_set(definitions, raw_values)
    except ValidationFailedError as e:
        errors.extend(e.errors)

    builder = (
        ContentCreateRequest.builder()
        .code(form.code)
        .cover_id(form.cover_id)
        .title(form.title)
        .body(form.body)
        .author_id(form.author_id)
        .date(form.date)
        .category_ids(form.category_ids)
        .tags(form.tags)
        .related_post_ids(form.related_post_ids)
        .seo_title(form.seo_title)
        .seo_description(form.seo_description)
        .seo_keywords(form.seo_keywords)
        .custom_field_values(attributes)
        .language(form.language)
    )
    try:
        request = builder.build(publish=publish)
    except ValidationFailedError as e:
        errors = e.errors + errors

    if errors:
        raise ValidationFailedError(errors)
    return request
