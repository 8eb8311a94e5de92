"""
Tests for query-string translation.
"""
import sys
import pytest
from pydantic import ValidationError

from stayfinder.models.filters import ListFilters, Sorting
from stayfinder.services.query import map_list_query_to_filters, parse_int, parse_sorting


class TestParseInt:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("42", 42),
            ("  42", 42),
            ("-3", -3),
            ("+8", 8),
            ("7.9", 7),
            ("12km", 12),
            ("007", 7),
            ("\u0663", None),
            ("4\u0663", 4),
            ("abc", None),
            ("", None),
            (None, None),
        ],
    )
    def test_leading_integer(self, raw, expected):
        assert parse_int(raw) == expected


class TestListFilters:

    def test_defaults(self):
        filters = map_list_query_to_filters()
        assert filters == ListFilters()
        assert filters.title == ""
        assert filters.max_centre == sys.maxsize
        assert filters.min_price == 0
        assert filters.min_avg_rating == 0
        assert filters.min_reviews_count == 0

    def test_all_values(self):
        filters = map_list_query_to_filters(
            search="Inn",
            centre="4",
            min_price="250",
            min_avg_rating="7",
            min_reviews_count="30",
        )
        assert filters == ListFilters(
            title="Inn", max_centre=4, min_price=250, min_avg_rating=7, min_reviews_count=30
        )

    def test_malformed_values_fall_back(self):
        filters = map_list_query_to_filters(
            centre="far", min_price="cheap", min_avg_rating="?", min_reviews_count="many"
        )
        assert filters == ListFilters()

    def test_zero_centre_means_unbounded(self):
        assert map_list_query_to_filters(centre="0").max_centre == sys.maxsize

    def test_filters_are_frozen(self):
        filters = map_list_query_to_filters(search="Inn")
        with pytest.raises(ValidationError):
            filters.title = "Hotel"

    def test_empty_search(self):
        assert map_list_query_to_filters(search="").title == ""


class TestParseSorting:

    @pytest.mark.parametrize("token", [s.value for s in Sorting])
    def test_known_tokens(self, token):
        assert parse_sorting(token) is Sorting(token)

    @pytest.mark.parametrize("token", [None, "", "min_price", "RANDOM"])
    def test_unknown_tokens(self, token):
        assert parse_sorting(token) is None


class TestHugeNumbers:

    def test_long_digit_run_is_clamped(self):
        assert parse_int("9" * 5000) == sys.maxsize
        assert parse_int("-" + "9" * 5000) == -sys.maxsize

    def test_long_run_of_zeros(self):
        assert parse_int("0" * 5000 + "42") == 42

    def test_just_above_maxsize(self):
        assert parse_int(str(sys.maxsize + 1)) == sys.maxsize

    def test_huge_min_price_excludes_everything(self):
        assert map_list_query_to_filters(min_price="9" * 5000).min_price == sys.maxsize

    def test_huge_centre_is_unbounded(self):
        assert map_list_query_to_filters(centre="1" * 5000).max_centre == sys.maxsize
