"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - FieldId, ArticleId, CategoryId, AuthorId wrap ints — never use bare int ids in domain logic
    - All valid states encoded as Enums — no raw string matching
    - ENUMERATED_FIELD_TYPES is the single source of truth for "requires options"
    - Form date patterns live here so coercion and rendering never drift apart

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (API responses + JSON columns)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

FieldId = NewType("FieldId", int)
ArticleId = NewType("ArticleId", int)
CategoryId = NewType("CategoryId", int)
AuthorId = NewType("AuthorId", int)
PostId = NewType("PostId", int)


# ─── Form Patterns ───────────────────────────────────────────────

# yyyy/MM/dd and yyyy/MM/dd HH:mm on the form side
DATE_FORMAT: str = "%Y/%m/%d"
DATETIME_FORMAT: str = "%Y/%m/%d %H:%M"

CHECKBOX_SEPARATOR: str = ","

# NUMBER values are stored as NUMERIC(NUMBER_PRECISION, NUMBER_SCALE)
NUMBER_PRECISION: int = 19
NUMBER_SCALE: int = 4


# ─── Enums ───────────────────────────────────────────────────────

class FieldType(str, Enum):
    """Custom field types an administrator can declare."""
    TEXT = "text"
    TEXTAREA = "textarea"
    HTML = "html"
    NUMBER = "number"
    DATE = "date"
    DATETIME = "datetime"
    SELECT = "select"
    RADIO = "radio"
    CHECKBOX = "checkbox"

    @property
    def is_enumerated(self) -> bool:
        return self in ENUMERATED_FIELD_TYPES

    @property
    def value_kind(self) -> "ValueKind":
        return _VALUE_KIND_BY_TYPE[self]


class ValueKind(str, Enum):
    """Which typed slot of an AttributeValue is populated."""
    STRING = "string"
    NUMBER = "number"
    DATE = "date"
    DATETIME = "datetime"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class FieldSortKey(str, Enum):
    """Columns a field definition search may be ordered by."""
    IDX = "idx"
    NAME = "name"
    ID = "id"


class ArticleStatus(str, Enum):
    """Article lifecycle — maps to DB `status` column."""
    DRAFT = "draft"
    PUBLISHED = "published"


ENUMERATED_FIELD_TYPES: frozenset[FieldType] = frozenset({
    FieldType.SELECT, FieldType.RADIO, FieldType.CHECKBOX,
})

TEXT_FIELD_TYPES: frozenset[FieldType] = frozenset({
    FieldType.TEXT, FieldType.TEXTAREA, FieldType.HTML,
})

_VALUE_KIND_BY_TYPE: dict[FieldType, ValueKind] = {
    FieldType.TEXT: ValueKind.STRING,
    FieldType.TEXTAREA: ValueKind.STRING,
    FieldType.HTML: ValueKind.STRING,
    FieldType.NUMBER: ValueKind.NUMBER,
    FieldType.DATE: ValueKind.DATE,
    FieldType.DATETIME: ValueKind.DATETIME,
    FieldType.SELECT: ValueKind.STRING,
    FieldType.RADIO: ValueKind.STRING,
    FieldType.CHECKBOX: ValueKind.STRING,
}
