"""Article Form Schema — verifies boundary validation of the article create form.

Tests:
    - date accepts yyyy/MM/dd HH:mm, ISO 8601 and blank
    - ISO offsets are converted to UTC and stored naive
    - language is required and stripped
    - duplicate custom_field_id entries rejected
    - raw_custom_field_values maps field id -> raw string
    - CustomFieldValueForm.from_definition pre-fills the default value
"""

from datetime import datetime

import pytest
from pydantic import ValidationError

from wallride.core.domain_types import FieldId, FieldType
from wallride.core.field_definition import FieldDefinition
from wallride.schemas.article import ArticleCreateForm, CustomFieldValueForm


def test_date_accepts_form_pattern():
    form = ArticleCreateForm(language="en", date="2024/05/01 09:30")
    assert form.date == datetime(2024, 5, 1, 9, 30)


def test_date_accepts_iso_format():
    form = ArticleCreateForm(language="en", date="2024-05-01T09:30:00")
    assert form.date == datetime(2024, 5, 1, 9, 30)


@pytest.mark.parametrize("raw,expected", [
    ("2024-03-01T10:00:00Z", datetime(2024, 3, 1, 10, 0)),
    ("2024-03-01T19:00:00+09:00", datetime(2024, 3, 1, 10, 0)),
    ("2024-03-01T05:30:00-04:30", datetime(2024, 3, 1, 10, 0)),
])
def test_iso_offset_is_converted_to_naive_utc(raw, expected):
    form = ArticleCreateForm(language="en", date=raw)
    assert form.date == expected
    assert form.date.tzinfo is None


def test_blank_date_is_none():
    assert ArticleCreateForm(language="en", date="  ").date is None


def test_invalid_date_is_rejected():
    with pytest.raises(ValidationError):
        ArticleCreateForm(language="en", date="next tuesday")


def test_language_is_required():
    with pytest.raises(ValidationError):
        ArticleCreateForm(title="Hello")


def test_whitespace_language_is_rejected():
    with pytest.raises(ValidationError, match="language cannot be empty"):
        ArticleCreateForm(language="   ")


def test_language_is_stripped():
    assert ArticleCreateForm(language=" en ").language == "en"


def test_duplicate_custom_field_ids_rejected():
    with pytest.raises(ValidationError, match="duplicate custom_field_id"):
        ArticleCreateForm(
            language="en",
            custom_field_values=[
                {"custom_field_id": 1, "value": "a"},
                {"custom_field_id": 1, "value": "b"},
            ],
        )


def test_raw_custom_field_values():
    form = ArticleCreateForm(
        language="en",
        custom_field_values=[
            {"custom_field_id": 1, "value": "a"},
            {"custom_field_id": 2},
        ],
    )
    assert form.raw_custom_field_values() == {1: "a", 2: None}


def test_category_ids_are_a_set():
    form = ArticleCreateForm(language="en", category_ids=[3, 3, 4])
    assert form.category_ids == {3, 4}


def test_value_form_from_definition():
    definition = FieldDefinition(
        FieldId(4), "Color", FieldType.SELECT,
        description="Finish", options=["red", "blue"], default_value="red",
    )
    entry = CustomFieldValueForm.from_definition(definition)
    assert entry.custom_field_id == 4
    assert entry.field_type is FieldType.SELECT
    assert entry.options == ["red", "blue"]
    assert entry.value == "red"
