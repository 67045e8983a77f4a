"""Attribute Set — verifies batch assembly and the unique-per-field invariant.

Tests:
    - Missing raw values are treated as "" (N TEXT definitions -> N values)
    - A missing value for a non-text field is a failure for that field
    - Every failing field is reported, not just the first
    - SELECT scenario: "green" against [red, blue] fails for field 1
    - Duplicate ids rejected in both AttributeSet and definition lists
    - Raw values for unknown ids are ignored and reported by unknown_field_ids
    - to_raw() reproduces TEXT input exactly
"""

import pytest

from wallride.core.attribute_set import (
    AttributeSet, build_attribute_set, unknown_field_ids,
)
from wallride.core.attribute_value import AttributeValue
from wallride.core.domain_types import FieldId, FieldType
from wallride.core.errors import ValidationFailedError
from wallride.core.field_definition import FieldDefinition


def _text(field_id: int, name: str = "Field") -> FieldDefinition:
    return FieldDefinition(FieldId(field_id), f"{name} {field_id}", FieldType.TEXT)


# ─── build_attribute_set ─────────────────────────────────────────

def test_missing_raw_values_become_empty_strings():
    definitions = [_text(i) for i in range(1, 6)]
    raw = {1: "one", 3: "three"}  # 3 of 5 missing
    attributes = build_attribute_set(definitions, raw)
    assert len(attributes) == 5
    assert attributes[FieldId(2)].string_value == ""
    assert attributes[FieldId(3)].string_value == "three"


def test_select_scenario_reports_invalid_value_for_field():
    definitions = [
        FieldDefinition(FieldId(1), "Color", FieldType.SELECT, options=["red", "blue"]),
    ]
    with pytest.raises(ValidationFailedError) as exc_info:
        build_attribute_set(definitions, {1: "green"})
    errors = exc_info.value.errors
    assert len(errors) == 1
    assert errors[0].field == "1"
    assert errors[0].code == "INVALID_VALUE"


def test_all_failures_are_collected():
    definitions = [
        FieldDefinition(FieldId(1), "Price", FieldType.NUMBER),
        _text(2),
        FieldDefinition(FieldId(3), "Release", FieldType.DATE),
        FieldDefinition(FieldId(4), "Color", FieldType.SELECT, options=["red"]),
    ]
    raw = {1: "abc", 2: "fine", 3: "tomorrow", 4: "red"}
    with pytest.raises(ValidationFailedError) as exc_info:
        build_attribute_set(definitions, raw)
    assert exc_info.value.fields == ["1", "3"]


@pytest.mark.parametrize("definition", [
    FieldDefinition(FieldId(1), "Color", FieldType.SELECT, options=["red", "blue"]),
    FieldDefinition(FieldId(1), "Price", FieldType.NUMBER),
])
def test_missing_non_text_value_fails(definition):
    with pytest.raises(ValidationFailedError) as exc_info:
        build_attribute_set([definition, _text(2)], {})
    assert exc_info.value.fields == ["1"]


def test_duplicate_definitions_are_a_programming_error():
    with pytest.raises(ValueError, match="Duplicate field definition"):
        build_attribute_set([_text(1), _text(1)], {})


def test_unknown_raw_keys_are_ignored():
    attributes = build_attribute_set([_text(1)], {1: "a", 99: "stray"})
    assert list(attributes) == [FieldId(1)]
    assert unknown_field_ids([_text(1)], {1: "a", 99: "stray"}) == [99]


def test_to_raw_round_trips_text_values():
    definitions = [_text(1), _text(2)]
    raw = {1: "Hello", 2: "multi word value"}
    assert build_attribute_set(definitions, raw).to_raw() == raw


# ─── AttributeSet ────────────────────────────────────────────────

def test_attribute_set_rejects_duplicate_field_ids():
    with pytest.raises(ValueError, match="Duplicate attribute value"):
        AttributeSet([
            AttributeValue.of_string(FieldId(1), "a"),
            AttributeValue.of_string(FieldId(1), "b"),
        ])


def test_non_empty_skips_blank_text_values():
    attributes = AttributeSet([
        AttributeValue.of_string(FieldId(1), "a"),
        AttributeValue.of_string(FieldId(2), ""),
    ])
    assert [v.field_id for v in attributes.non_empty()] == [1]


def test_attribute_set_is_read_only():
    attributes = AttributeSet([AttributeValue.of_string(FieldId(1), "a")])
    with pytest.raises(TypeError):
        attributes[FieldId(2)] = AttributeValue.of_string(FieldId(2), "b")
