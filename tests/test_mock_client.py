import asyncio

import pytest

from homesearch.clients.mock_client import MockPropertyClient, filter_properties
from homesearch.clients.mock_data import MOCK_PROPERTIES
from homesearch.models import SearchParams


def _search(**kwargs):
    return asyncio.run(MockPropertyClient().search(SearchParams(**kwargs)))


def test_no_filters_returns_everything_paginated():
    result = _search()
    assert result.using_mock_data is True
    assert result.total == len(MOCK_PROPERTIES)
    assert [p.id for p in result.properties] == [p.id for p in MOCK_PROPERTIES]


def test_city_is_case_insensitive_substring():
    result = _search(city="san")
    cities = {p.city for p in result.properties}
    assert "San Francisco" in cities
    assert cities <= {"San Francisco", "San Diego"}
    assert result.total == 3


def test_state_is_case_insensitive_exact():
    result = _search(state="ca")
    assert result.total == 4
    assert all(p.state == "CA" for p in result.properties)
    assert _search(state="c").total == 0


def test_zip_is_exact():
    result = _search(zip_code="78704")
    assert [p.id for p in result.properties] == ["mock-5"]
    assert _search(zip_code="7870").total == 0


def test_filters_combine():
    result = _search(city="austin", state="TX", zip_code="78702")
    assert [p.id for p in result.properties] == ["mock-6"]


def test_total_counts_before_pagination():
    result = _search(state="CA", limit=2, offset=1)
    assert result.total == 4
    assert len(result.properties) == 2
    assert [p.id for p in result.properties] == ["mock-2", "mock-3"]


@pytest.mark.parametrize("limit, offset", [(5, 0), (5, 10), (24, 12), (1, 11), (50, 3)])
def test_page_length_matches_window(limit, offset):
    result = _search(limit=limit, offset=offset)
    expected = max(0, min(limit, result.total - offset))
    assert len(result.properties) == expected


def test_filtering_never_mutates_source():
    before = list(MOCK_PROPERTIES)
    filtered = filter_properties(MOCK_PROPERTIES, city="denver")
    filtered.clear()
    _search(city="san", limit=1)
    assert list(MOCK_PROPERTIES) == before


def test_mock_ids_are_unique():
    ids = [p.id for p in MOCK_PROPERTIES]
    assert len(ids) == len(set(ids))
