"""Article Repository — SQLAlchemy implementation of ArticleRepository.

Invariants:
    - save() writes the article and its non-empty custom field values in one flush
    - Each AttributeValue populates exactly the column matching its kind
    - save() flushes but does not commit: the caller owns the transaction

Design Decisions:
    - Empty attribute values are not stored: absence of a row means "no value"
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from wallride.core.attribute_value import AttributeValue
from wallride.core.content_request import ContentCreateRequest
from wallride.core.domain_types import ArticleId, ValueKind
from wallride.models.article import Article
from wallride.models.custom_field_value import CustomFieldValue

logger = logging.getLogger(__name__)

_COLUMN_BY_KIND: dict[ValueKind, str] = {
    ValueKind.STRING: "string_value",
    ValueKind.NUMBER: "number_value",
    ValueKind.DATE: "date_value",
    ValueKind.DATETIME: "datetime_value",
}


def to_value_row(value: AttributeValue) -> CustomFieldValue:
    """AttributeValue -> ORM row with the single matching column set."""
    row = CustomFieldValue(custom_field_id=value.field_id)
    setattr(row, _COLUMN_BY_KIND[value.kind], value.value)
    return row


class SqlArticleRepository:
    """Article persistence backed by the articles table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def save(self, request: ContentCreateRequest) -> ArticleId:
        article = Article(
            code=request.code,
            cover_id=request.cover_id,
            title=request.title,
            body=request.body,
            author_id=request.author_id,
            date=request.date,
            status=request.status.value,
            category_ids=sorted(request.category_ids),
            related_post_ids=sorted(request.related_post_ids),
            tag_names=request.tag_names,
            seo_title=request.seo_title,
            seo_description=request.seo_description,
            seo_keywords=request.seo_keywords,
            language=request.language,
            custom_field_values=[
                to_value_row(v) for v in request.custom_field_values.non_empty()
            ],
        )
        self._db.add(article)
        await self._db.flush()
        logger.debug(
            f"Article staged with {len(article.custom_field_values)} custom field value(s)",
            extra={"article_id": article.id},
        )
        return ArticleId(article.id)
