"""Translation of raw query-string values into typed list filters.

Parsing is permissive: a value that cannot be read as an integer silently
falls back to its default instead of producing a validation error.
"""
import re
import sys
from typing import Optional

from stayfinder.models.filters import ListFilters, Sorting

_LEADING_INT = re.compile(r"\s*([+-]?)([0-9]+)")
_MAX_DIGITS = len(str(sys.maxsize))


def parse_int(value: Optional[str]) -> Optional[int]:
    """Read the leading base-10 integer of ``value``.

    Mirrors ``parseInt(value, 10)`` from the browser clients of this API:
    ``"7.9"`` gives 7, ``"12km"`` gives 12, and ``"abc"`` or ``None`` give None.
    Only ASCII digits count. Results are clamped to ``sys.maxsize`` either way.
    """
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    sign = -1 if match.group(1) == "-" else 1
    digits = match.group(2).lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS:
        return sign * sys.maxsize
    return sign * min(int(digits), sys.maxsize)


def map_list_query_to_filters(
    search: Optional[str] = None,
    centre: Optional[str] = None,
    min_price: Optional[str] = None,
    min_avg_rating: Optional[str] = None,
    min_reviews_count: Optional[str] = None,
) -> ListFilters:
    # A zero or missing value means "not set" for every numeric filter
    return ListFilters(
        title=search or "",
        max_centre=parse_int(centre) or sys.maxsize,
        min_price=parse_int(min_price) or 0,
        min_avg_rating=parse_int(min_avg_rating) or 0,
        min_reviews_count=parse_int(min_reviews_count) or 0,
    )


def parse_sorting(value: Optional[str]) -> Optional[Sorting]:
    """Return the matching sort key, or None for a missing or unknown token."""
    if not value:
        return None
    try:
        return Sorting(value)
    except ValueError:
        return None
