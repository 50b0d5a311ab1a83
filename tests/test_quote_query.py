import random

import pytest

from quotes_api.errors import NotFoundError
from quotes_api.models.quotes import Quote
from quotes_api.services import quote_query


def test_filter_by_author_is_case_insensitive_substring(quotes):
    result = quote_query.filter_by_author(quotes, "LENN")
    assert [q.author for q in result] == ["John Lennon"]


def test_filter_by_author_without_match(quotes):
    assert quote_query.filter_by_author(quotes, "Shakespeare") == []


def test_limit_keeps_original_order(quotes):
    result = quote_query.limit_quotes(quotes, "2")
    assert [q.id for q in result] == [1, 2]


@pytest.mark.parametrize("value", [None, "", "abc", "2abc", "1_0", "NaN"])
def test_limit_ignores_non_numeric_values(quotes, value):
    assert quote_query.limit_quotes(quotes, value) == quotes


def test_limit_truncates_fractions(quotes):
    assert [q.id for q in quote_query.limit_quotes(quotes, "2.5")] == [1, 2]
    assert [q.id for q in quote_query.limit_quotes(quotes, " 3 ")] == [1, 2, 3]


def test_limit_larger_than_collection(quotes):
    assert len(quote_query.limit_quotes(quotes, "50")) == 5


def test_limit_zero_returns_nothing(quotes):
    assert quote_query.limit_quotes(quotes, "0") == []
    assert quote_query.limit_quotes(quotes, ".5") == []


def test_limit_negative_counts_from_the_end(quotes):
    assert [q.id for q in quote_query.limit_quotes(quotes, "-1")] == [1, 2, 3, 4]
    assert quote_query.limit_quotes(quotes, "-10") == []


@pytest.mark.parametrize(
    "value, expected",
    [("3", 3), ("3abc", 3), ("3.7", 3), ("  12", 12), ("-4", -4), ("+7x", 7),
     ("abc", None), ("", None), (None, None), ("1_0", 1)],
)
def test_parse_int_prefix(value, expected):
    assert quote_query.parse_int_prefix(value) == expected


def test_search_and_filter_skip_missing_fields(quotes):
    bare = Quote(id=9)
    assert quote_query.search([bare] + quotes, "torvalds")[0].id == 5
    assert quote_query.filter_by_author([bare], "a") == []


def test_search_matches_text(quotes):
    result = quote_query.search(quotes, "OPPORTUNITY")
    assert [q.id for q in result] == [3]


def test_search_matches_author_only(quotes):
    # "torvalds" does not occur in any quote text
    result = quote_query.search(quotes, "torvalds")
    assert [q.id for q in result] == [5]


def test_pick_random_from_collection(quotes):
    rng = random.Random(42)
    picked = quote_query.pick_random(quotes, rng=rng)
    assert picked in quotes


def test_pick_random_single_quote(quotes):
    assert quote_query.pick_random(quotes[:1]).id == 1


def test_pick_random_empty_raises_not_found():
    with pytest.raises(NotFoundError):
        quote_query.pick_random([])


def test_next_id(quotes):
    assert quote_query.next_id([]) == 1
    assert quote_query.next_id(quotes) == 6
    # max + 1, not len + 1
    assert quote_query.next_id([quotes[0], quotes[4]]) == 6


def test_find_index(quotes):
    assert quote_query.find_index(quotes, 3) == 2
    assert quote_query.find_index(quotes, 99) is None
