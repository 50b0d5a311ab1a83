# quotes_api/services/quote_query.py
"""
Filtering and lookup over an in-memory list of quotes.

Everything here is a plain function of its arguments; the handlers load the
collection from the store and pass it in.
"""

import math
import random
import re
from typing import List, Optional

from quotes_api.errors import NotFoundError
from quotes_api.models.quotes import Quote

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_int_prefix(value: Optional[str]) -> Optional[int]:
    """
    Integer made of the leading digits of value, so "3abc" and "3.7" are 3.
    None when value does not start with a number.
    """
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None


def _is_numeric(value: str) -> bool:
    if "_" in value:
        return False
    try:
        return not math.isnan(float(value))
    except ValueError:
        return False


def _lower(value: Optional[str]) -> str:
    return (value or "").lower()


def filter_by_author(quotes: List[Quote], substring: str) -> List[Quote]:
    needle = substring.lower()
    return [q for q in quotes if needle in _lower(q.author)]


def limit_quotes(quotes: List[Quote], n: Optional[str]) -> List[Quote]:
    """
    Slice the list to its first n quotes. A non-numeric n is ignored; a
    fractional one is truncated and a negative one counts from the end.
    """
    if not n or not _is_numeric(n):
        return quotes
    count = parse_int_prefix(n)
    if count is None:
        # numeric but with no leading digits, e.g. ".5" or "Infinity"
        return []
    return quotes[:count]


def search(quotes: List[Quote], term: str) -> List[Quote]:
    """Case-insensitive substring match against text or author."""
    needle = term.lower()
    return [
        q for q in quotes
        if needle in _lower(q.text) or needle in _lower(q.author)
    ]


def pick_random(quotes: List[Quote], rng=random) -> Quote:
    if not quotes:
        raise NotFoundError("No quotes found")
    return rng.choice(quotes)


def next_id(quotes: List[Quote]) -> int:
    return max((q.id for q in quotes), default=0) + 1


def find_index(quotes: List[Quote], quote_id: int) -> Optional[int]:
    for i, q in enumerate(quotes):
        if q.id == quote_id:
            return i
    return None
