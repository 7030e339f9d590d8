"""Unit tests for the listing query builder (pure, no database)."""

from __future__ import annotations

import pytest
from product_api.services._shared.errors import ValidationError
from product_api.services.products.listing import MAX_PAGE, build_listing_query, parse_sort


def test_defaults():
    q = build_listing_query({})

    assert q.page == 1
    assert q.limit == 10
    assert q.skip == 0
    assert q.sort == (("created_at", True),)
    assert q.filter.active_only is True
    assert q.filter.search is None


def test_page_and_limit_drive_skip():
    q = build_listing_query({"page": "3", "limit": "20"})

    assert (q.page, q.limit, q.skip) == (3, 20, 40)


def test_configured_default_limit_is_used():
    assert build_listing_query({}, default_limit=25).limit == 25


@pytest.mark.parametrize(
    ("params", "field"),
    [
        ({"page": "0"}, "page"),
        ({"page": "abc"}, "page"),
        ({"limit": "0"}, "limit"),
        ({"limit": "101"}, "limit"),
        ({"limit": "ten"}, "limit"),
        ({"sort": "colour"}, "sort"),
        ({"sort": "-"}, "sort"),
    ],
)
def test_invalid_parameters_raise_field_errors(params, field):
    with pytest.raises(ValidationError) as exc:
        build_listing_query(params)
    assert field in exc.value.errors
    assert all(v["field"] for v in exc.value.violations())


def test_page_limit_and_sort_errors_are_collected_together():
    with pytest.raises(ValidationError) as exc:
        build_listing_query({"page": "0", "limit": "500", "sort": "nope"})
    assert set(exc.value.errors) == {"page", "limit", "sort"}


def test_page_has_an_upper_bound():
    assert build_listing_query({"page": str(MAX_PAGE)}).page == MAX_PAGE
    with pytest.raises(ValidationError) as exc:
        build_listing_query({"page": str(MAX_PAGE + 1)})
    assert set(exc.value.errors) == {"page"}


def test_configured_max_limit_is_enforced():
    assert build_listing_query({"limit": "150"}, max_limit=200).limit == 150
    with pytest.raises(ValidationError) as exc:
        build_listing_query({"limit": "30"}, max_limit=20)
    assert exc.value.errors["limit"] == ["Must be between 1 and 20."]


def test_limit_and_sort_errors_are_collected_together():
    with pytest.raises(ValidationError) as exc:
        build_listing_query({"limit": "500", "sort": "nope"})
    assert set(exc.value.errors) == {"limit", "sort"}


def test_blank_search_means_absent():
    assert build_listing_query({"search": "   "}).filter.search is None
    assert build_listing_query({"search": " desk "}).filter.search == "desk"


def test_unknown_parameters_are_ignored():
    q = build_listing_query({"colour": "red", "active": "false"})
    assert q.filter.active_only is True


class TestParseSort:
    def test_multiple_tokens_and_directions(self):
        assert parse_sort("-price,name") == (("price", True), ("name", False))

    def test_camel_case_aliases(self):
        assert parse_sort("createdAt,-updatedAt") == (
            ("created_at", False),
            ("updated_at", True),
        )

    def test_blank_and_empty_tokens(self):
        assert parse_sort(None) == (("created_at", True),)
        assert parse_sort("  ") == (("created_at", True),)
        assert parse_sort("stock,,") == (("stock", False),)
