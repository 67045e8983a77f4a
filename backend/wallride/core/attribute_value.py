"""Attribute Value — one typed value bound to a field definition (tagged variant).

Invariants:
    - Exactly one kind per value; a blank STRING is the only "empty" value
    - The Python type of `value` matches `kind` (str, Decimal, date, datetime)
    - Slot accessors return None unless the kind matches — no unchecked casts for callers

Design Decisions:
    - Tag + payload over one subclass per type: readers switch on `kind`,
      persistence maps each kind to exactly one column
    - Factory classmethods are the only intended constructors; __post_init__ still
      rejects a payload that disagrees with its tag
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from wallride.core.domain_types import FieldId, ValueKind


_PAYLOAD_TYPES: dict[ValueKind, tuple[type, ...]] = {
    ValueKind.STRING: (str,),
    ValueKind.NUMBER: (Decimal,),
    ValueKind.DATE: (date,),
    ValueKind.DATETIME: (datetime,),
}


@dataclass(frozen=True)
class AttributeValue:
    """A coerced custom field value for one content item."""

    field_id: FieldId
    kind: ValueKind
    value: str | Decimal | date | datetime

    def __post_init__(self):
        expected = _PAYLOAD_TYPES[self.kind]
        if not isinstance(self.value, expected):
            raise ValueError(
                f"{self.kind.value} slot expects {expected[0].__name__}, "
                f"got {type(self.value).__name__}",
            )
        # datetime is a date subclass; keep the DATE slot date-only
        if self.kind is ValueKind.DATE and isinstance(self.value, datetime):
            raise ValueError("date slot expects date, got datetime")

    # ─── Factories ───────────────────────────────────────────────

    @classmethod
    def of_string(cls, field_id: FieldId, value: str) -> "AttributeValue":
        return cls(field_id, ValueKind.STRING, value)

    @classmethod
    def of_number(cls, field_id: FieldId, value: Decimal) -> "AttributeValue":
        return cls(field_id, ValueKind.NUMBER, value)

    @classmethod
    def of_date(cls, field_id: FieldId, value: date) -> "AttributeValue":
        return cls(field_id, ValueKind.DATE, value)

    @classmethod
    def of_datetime(cls, field_id: FieldId, value: datetime) -> "AttributeValue":
        return cls(field_id, ValueKind.DATETIME, value)

    # ─── Slot accessors ──────────────────────────────────────────

    @property
    def is_empty(self) -> bool:
        """Blank text value; nothing worth persisting."""
        return self.kind is ValueKind.STRING and not self.value

    @property
    def string_value(self) -> str | None:
        return self.value if self.kind is ValueKind.STRING else None

    @property
    def number_value(self) -> Decimal | None:
        return self.value if self.kind is ValueKind.NUMBER else None

    @property
    def date_value(self) -> date | None:
        return self.value if self.kind is ValueKind.DATE else None

    @property
    def datetime_value(self) -> datetime | None:
        return self.value if self.kind is ValueKind.DATETIME else None
