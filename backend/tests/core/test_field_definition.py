"""Field Definition — verifies construction invariants and matching helpers.

Tests:
    - Enumerated types require options; other types reject them
    - Options normalized to a tuple; duplicate, blank and padded options rejected
    - Checkbox options cannot contain the separator
    - Blank names rejected
    - matches_keyword is case-insensitive over name/code/description
    - applies_to treats language None as every language
"""

import pytest

from wallride.core.domain_types import FieldId, FieldType
from wallride.core.field_definition import FieldDefinition


def _select(**kwargs) -> FieldDefinition:
    defaults = dict(
        id=FieldId(1), name="Color", field_type=FieldType.SELECT,
        options=["red", "blue"],
    )
    defaults.update(kwargs)
    return FieldDefinition(**defaults)


# ─── Invariants ──────────────────────────────────────────────────

def test_select_without_options_is_rejected():
    with pytest.raises(ValueError, match="requires at least one option"):
        _select(options=[])


def test_text_with_options_is_rejected():
    with pytest.raises(ValueError, match="does not take options"):
        FieldDefinition(FieldId(2), "Subtitle", FieldType.TEXT, options=["a"])


def test_options_are_stored_as_tuple():
    definition = _select()
    assert definition.options == ("red", "blue")


def test_duplicate_options_are_rejected():
    with pytest.raises(ValueError, match="unique"):
        _select(options=["red", "red"])


@pytest.mark.parametrize("options", [["red", " blue"], ["red ", "blue"], ["red", ""]])
def test_blank_or_padded_options_are_rejected(options):
    with pytest.raises(ValueError, match="surrounding whitespace"):
        _select(options=options)


def test_checkbox_option_cannot_contain_separator():
    with pytest.raises(ValueError, match="cannot contain"):
        FieldDefinition(
            FieldId(3), "Sizes", FieldType.CHECKBOX, options=["S,M", "L"],
        )


def test_blank_name_is_rejected():
    with pytest.raises(ValueError, match="name cannot be empty"):
        FieldDefinition(FieldId(4), "   ", FieldType.TEXT)


def test_field_type_accepts_string_value():
    definition = FieldDefinition(FieldId(5), "Price", "number")
    assert definition.field_type is FieldType.NUMBER


def test_definition_is_frozen():
    definition = _select()
    with pytest.raises(AttributeError):
        definition.name = "Colour"


# ─── Helpers ─────────────────────────────────────────────────────

def test_matches_keyword_is_case_insensitive():
    definition = _select(code="product-color", description="Primary finish")
    assert definition.matches_keyword("COL")
    assert definition.matches_keyword("product-")
    assert definition.matches_keyword("finish")
    assert not definition.matches_keyword("weight")


def test_applies_to_language_neutral_definition():
    assert _select(language=None).applies_to("ja")


def test_applies_to_only_matching_language():
    definition = _select(language="en")
    assert definition.applies_to("en")
    assert not definition.applies_to("ja")
