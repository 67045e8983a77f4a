"""Custom Field Repository — verifies SQL search, paging and snapshot conversion.

Tests:
    - get() converts rows to FieldDefinition, raises FieldNotFoundError when absent
    - get_all(language) includes language-neutral rows, ordered by (idx, id)
    - search() counts all matches and returns the requested page
    - keyword matches name/code/description case-insensitively; LIKE wildcards are literal
    - field type filter and descending sort
"""

import pytest

from wallride.core.domain_types import FieldId, FieldSortKey, FieldType, SortDirection
from wallride.core.errors import FieldNotFoundError
from wallride.core.search_criteria import PageRequest, SearchCriteria
from wallride.infrastructure.custom_field_repository import SqlFieldDefinitionRepository


async def test_get_converts_row(test_db, seed_fields):
    repository = SqlFieldDefinitionRepository(test_db)
    definition = await repository.get(FieldId(seed_fields["color"].id))
    assert definition.field_type is FieldType.SELECT
    assert definition.options == ("red", "blue")
    assert definition.description == "Primary finish"


async def test_get_unknown_raises(test_db, seed_fields):
    with pytest.raises(FieldNotFoundError):
        await SqlFieldDefinitionRepository(test_db).get(FieldId(999))


async def test_get_all_for_language(test_db, seed_fields):
    definitions = await SqlFieldDefinitionRepository(test_db).get_all(language="en")
    assert [d.code for d in definitions] == ["subtitle", "price", "color", "release"]


async def test_get_all_without_language(test_db, seed_fields):
    definitions = await SqlFieldDefinitionRepository(test_db).get_all()
    assert len(definitions) == 5


async def test_search_default_page_size(test_db, seed_fields):
    repository = SqlFieldDefinitionRepository(test_db, default_page_size=2)
    page = await repository.search(SearchCriteria())
    assert page.size == 2
    assert len(page.content) == 2
    assert page.total_elements == 5
    assert page.total_pages == 3


async def test_search_second_page(test_db, seed_fields):
    page = await SqlFieldDefinitionRepository(test_db).search(
        SearchCriteria(language="en"), PageRequest(page=1, size=3),
    )
    assert [d.code for d in page.content] == ["release"]
    assert page.total_elements == 4
    assert page.has_previous
    assert not page.has_next


async def test_search_keyword_matches_description(test_db, seed_fields):
    page = await SqlFieldDefinitionRepository(test_db).search(
        SearchCriteria(keyword="FINISH"),
    )
    assert [d.code for d in page.content] == ["color"]


async def test_search_keyword_escapes_wildcards(test_db, seed_fields):
    page = await SqlFieldDefinitionRepository(test_db).search(
        SearchCriteria(keyword="%"),
    )
    assert page.total_elements == 0


async def test_search_by_field_type(test_db, seed_fields):
    page = await SqlFieldDefinitionRepository(test_db).search(
        SearchCriteria(field_types=frozenset({FieldType.TEXT})),
    )
    assert {d.code for d in page.content} == {"subtitle", "midashi"}


async def test_search_sorted_by_name_descending(test_db, seed_fields):
    page = await SqlFieldDefinitionRepository(test_db).search(
        SearchCriteria(language="en"),
        PageRequest(size=10, sort=FieldSortKey.NAME, direction=SortDirection.DESC),
    )
    assert [d.name for d in page.content] == [
        "Subtitle", "Release date", "Price", "Color",
    ]
