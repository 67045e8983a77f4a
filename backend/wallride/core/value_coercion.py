"""Value Coercion — turns a raw form string into a typed AttributeValue.

Invariants:
    - coerce is PURE: no IO, no state, same input -> same output
    - Text types are trimmed and may be blank; every other type requires a value
    - SELECT/RADIO succeed iff the raw value is exactly one of the options;
      CHECKBOX succeeds iff every comma-separated part is exactly an option
    - NUMBER/DATE/DATETIME input is trimmed before parsing
    - NUMBER fits the storage column: at most NUMBER_PRECISION digits, NUMBER_SCALE after the point
    - Failures raise InvalidValueError (type mismatch) or FieldNotFoundError (no definition)
    - render(coerce(d, raw)) == raw.strip() for text fields

Design Decisions:
    - Decimal over float for NUMBER: form input round-trips without binary noise
    - One parser per FieldType in a dispatch dict: adding a type is one function + one entry
"""

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Callable

from wallride.core.attribute_value import AttributeValue
from wallride.core.domain_types import (
    CHECKBOX_SEPARATOR, DATE_FORMAT, DATETIME_FORMAT,
    NUMBER_PRECISION, NUMBER_SCALE,
    FieldType, TEXT_FIELD_TYPES, ValueKind,
)
from wallride.core.errors import FieldNotFoundError, InvalidValueError
from wallride.core.field_definition import FieldDefinition


def coerce(definition: FieldDefinition | None, raw_value: str | None) -> AttributeValue:
    """Coerce one raw form value against its field definition."""
    if definition is None:
        raise FieldNotFoundError(None)

    raw_value = raw_value or ""
    if definition.field_type in TEXT_FIELD_TYPES:
        return AttributeValue.of_string(definition.id, raw_value.strip())
    if not raw_value.strip():
        raise InvalidValueError(
            definition.id, f"a {definition.field_type.value} value is required",
        )
    return _PARSERS[definition.field_type](definition, raw_value)


def render(value: AttributeValue) -> str:
    """Render a coerced value back to the raw form representation."""
    if value.kind is ValueKind.NUMBER:
        return format(value.value, "f")
    if value.kind is ValueKind.DATE:
        return value.value.strftime(DATE_FORMAT)
    if value.kind is ValueKind.DATETIME:
        return value.value.strftime(DATETIME_FORMAT)
    return value.value


# ─── Parsers (raw value is non-blank) ───────────────────────────

def _parse_number(definition: FieldDefinition, raw: str) -> AttributeValue:
    text = raw.strip()
    try:
        number = Decimal(text)
    except InvalidOperation:
        raise InvalidValueError(definition.id, f"'{text}' is not a number")
    if not number.is_finite():
        raise InvalidValueError(definition.id, f"'{text}' is not a finite number")
    exponent = number.normalize().as_tuple().exponent
    if -exponent > NUMBER_SCALE:
        raise InvalidValueError(
            definition.id, f"'{text}' has more than {NUMBER_SCALE} decimal places",
        )
    if abs(number) >= Decimal(10) ** (NUMBER_PRECISION - NUMBER_SCALE):
        raise InvalidValueError(
            definition.id,
            f"'{text}' has more than {NUMBER_PRECISION - NUMBER_SCALE} integer digits",
        )
    return AttributeValue.of_number(definition.id, number)


def _parse_date(definition: FieldDefinition, raw: str) -> AttributeValue:
    text = raw.strip()
    try:
        parsed = datetime.strptime(text, DATE_FORMAT)
    except ValueError:
        raise InvalidValueError(
            definition.id, f"'{text}' does not match yyyy/MM/dd",
        )
    return AttributeValue.of_date(definition.id, parsed.date())


def _parse_datetime(definition: FieldDefinition, raw: str) -> AttributeValue:
    text = raw.strip()
    try:
        parsed = datetime.strptime(text, DATETIME_FORMAT)
    except ValueError:
        raise InvalidValueError(
            definition.id, f"'{text}' does not match yyyy/MM/dd HH:mm",
        )
    return AttributeValue.of_datetime(definition.id, parsed)


def _parse_choice(definition: FieldDefinition, raw: str) -> AttributeValue:
    if raw not in definition.options:
        raise InvalidValueError(
            definition.id,
            f"'{raw}' is not one of: {', '.join(definition.options)}",
        )
    return AttributeValue.of_string(definition.id, raw)


def _parse_choices(definition: FieldDefinition, raw: str) -> AttributeValue:
    selected: list[str] = []
    for choice in raw.split(CHECKBOX_SEPARATOR):
        if choice not in selected:
            selected.append(choice)
    unknown = [c for c in selected if c not in definition.options]
    if unknown:
        raise InvalidValueError(
            definition.id,
            f"{', '.join(repr(c) for c in unknown)} not in: "
            f"{', '.join(definition.options)}",
        )
    return AttributeValue.of_string(definition.id, CHECKBOX_SEPARATOR.join(selected))


_PARSERS: dict[FieldType, Callable[[FieldDefinition, str], AttributeValue]] = {
    FieldType.NUMBER: _parse_number,
    FieldType.DATE: _parse_date,
    FieldType.DATETIME: _parse_datetime,
    FieldType.SELECT: _parse_choice,
    FieldType.RADIO: _parse_choice,
    FieldType.CHECKBOX: _parse_choices,
}
