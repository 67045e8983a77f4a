"""Attribute Set — the complete, validated custom field values of one content item.

Invariants:
    - At most one AttributeValue per field id (duplicates rejected at construction)
    - Read-only after construction (Mapping, no mutators)
    - build_attribute_set is batch validation: every definition is coerced,
      all failures reported together in one ValidationFailedError
    - A definition with no raw value is coerced from "" (never skipped)

Design Decisions:
    - collections.abc.Mapping over dict subclass: no inherited mutators to guard
    - Raw values for unknown field ids are ignored here; the caller decides whether to log them
"""

from collections.abc import Iterable, Iterator, Mapping, Sequence

from wallride.core.attribute_value import AttributeValue
from wallride.core.domain_types import FieldId
from wallride.core.errors import (
    FieldError, FieldNotFoundError, InvalidValueError, ValidationFailedError,
)
from wallride.core.field_definition import FieldDefinition
from wallride.core.value_coercion import coerce, render


class AttributeSet(Mapping):
    """Immutable mapping of field id -> AttributeValue."""

    def __init__(self, values: Iterable[AttributeValue] = ()):
        self._values: dict[FieldId, AttributeValue] = {}
        for value in values:
            if value.field_id in self._values:
                raise ValueError(f"Duplicate attribute value for field {value.field_id}")
            self._values[value.field_id] = value

    def __getitem__(self, field_id: FieldId) -> AttributeValue:
        return self._values[field_id]

    def __iter__(self) -> Iterator[FieldId]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"AttributeSet({list(self._values.values())!r})"

    def non_empty(self) -> list[AttributeValue]:
        """Values with a populated slot — the rows worth persisting."""
        return [v for v in self._values.values() if not v.is_empty]

    def to_raw(self) -> dict[FieldId, str]:
        """Re-render every value to its raw form string."""
        return {field_id: render(v) for field_id, v in self._values.items()}


def build_attribute_set(
    definitions: Sequence[FieldDefinition],
    raw_values: Mapping[int, str | None],
) -> AttributeSet:
    """Coerce one raw value per definition. Raises ValidationFailedError with every failure."""
    seen: set[FieldId] = set()
    for definition in definitions:
        if definition.id in seen:
            raise ValueError(f"Duplicate field definition {definition.id}")
        seen.add(definition.id)

    values: list[AttributeValue] = []
    errors: list[FieldError] = []
    for definition in definitions:
        try:
            values.append(coerce(definition, raw_values.get(definition.id, "")))
        except (InvalidValueError, FieldNotFoundError) as e:
            errors.append(e.to_field_error())

    if errors:
        raise ValidationFailedError(errors)
    return AttributeSet(values)


def unknown_field_ids(
    definitions: Sequence[FieldDefinition], raw_values: Mapping[int, str | None],
) -> list[int]:
    """Raw value keys with no matching definition, in submission order."""
    known = {d.id for d in definitions}
    return [field_id for field_id in raw_values if field_id not in known]
