"""
Pagination helpers for contact listings.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

# Largest value a signed 64-bit SQL INTEGER can bind.
MAX_SQL_INTEGER = 2**63 - 1

_LEADING_INT = re.compile(r"\s*([+-]?)0*([0-9]+)")


@dataclass(frozen=True)
class PageRequest:
    """A resolved 1-indexed page and page size."""

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def past_storage_range(self) -> bool:
        """True when the offset cannot be bound as a SQL integer.

        No row can live that far in, so the page is empty.
        """
        return self.offset > MAX_SQL_INTEGER


@dataclass(frozen=True)
class PageInfo:
    """Pagination metadata returned alongside a page of records."""

    current_page: int
    total_pages: int
    total_items: int

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.current_page > 1


def parse_positive_int(raw: str | int | None, default: int) -> int:
    """Read a positive integer from a query value, falling back to ``default``.

    Leading digits are honoured ("3abc" reads as 3); anything that does not
    start with an integer, is zero or negative, or exceeds MAX_SQL_INTEGER
    yields ``default``. Never raises.
    """
    if raw is None:
        return default
    if isinstance(raw, int):
        return raw if 0 < raw <= MAX_SQL_INTEGER else default

    match = _LEADING_INT.match(raw)
    if match is None:
        return default
    sign, digits = match.groups()
    # Longer than MAX_SQL_INTEGER's 19 digits: out of range, and not worth converting.
    if sign == "-" or len(digits) > 19:
        return default
    value = int(digits)
    return value if 0 < value <= MAX_SQL_INTEGER else default


def resolve_page_request(
    page: str | int | None = None,
    limit: str | int | None = None,
) -> PageRequest:
    """Build a PageRequest from raw, possibly missing or malformed, values."""
    return PageRequest(
        page=parse_positive_int(page, DEFAULT_PAGE),
        limit=parse_positive_int(limit, DEFAULT_LIMIT),
    )


def build_page_info(request: PageRequest, total: int) -> PageInfo:
    """Compute page metadata; an empty collection has zero pages."""
    return PageInfo(
        current_page=request.page,
        total_pages=-(-total // request.limit),
        total_items=total,
    )
