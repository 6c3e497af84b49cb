"""
Tests for pagination parsing and metadata.
"""

import pytest

from contactbook.contacts.pagination import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    MAX_SQL_INTEGER,
    PageRequest,
    build_page_info,
    parse_positive_int,
    resolve_page_request,
)


class TestParsePositiveInt:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("3", 3),
            (" 7", 7),
            ("2abc", 2),
            ("4.9", 4),
            (5, 5),
        ],
    )
    def test_reads_leading_integer(self, raw, expected: int) -> None:
        assert parse_positive_int(raw, default=1) == expected

    @pytest.mark.parametrize("raw", [None, "", "abc", "0", "-2", 0, -1, "x3"])
    def test_falls_back_to_default(self, raw) -> None:
        assert parse_positive_int(raw, default=9) == 9

    def test_accepts_largest_sql_integer(self) -> None:
        assert parse_positive_int(str(MAX_SQL_INTEGER), default=1) == MAX_SQL_INTEGER

    @pytest.mark.parametrize(
        "raw",
        ["9223372036854775808", "99999999999999999999", "1" * 5000, 2**63],
    )
    def test_beyond_sql_integer_falls_back(self, raw) -> None:
        assert parse_positive_int(raw, default=9) == 9


class TestResolvePageRequest:
    def test_defaults(self) -> None:
        request = resolve_page_request()

        assert request == PageRequest(page=DEFAULT_PAGE, limit=DEFAULT_LIMIT)
        assert request.offset == 0

    def test_offset(self) -> None:
        request = resolve_page_request("3", "20")

        assert request.offset == 40

    def test_offset_past_storage_range(self) -> None:
        request = resolve_page_request(str(10**18), "10")

        assert request.page == 10**18
        assert request.past_storage_range is True

    def test_offset_within_storage_range(self) -> None:
        assert resolve_page_request("3", "20").past_storage_range is False

    def test_garbage_never_raises(self) -> None:
        request = resolve_page_request("nope", "also-nope")

        assert request.page == 1
        assert request.limit == 10


class TestBuildPageInfo:
    def test_empty_collection_has_zero_pages(self) -> None:
        info = build_page_info(PageRequest(page=1, limit=10), total=0)

        assert info.total_pages == 0
        assert info.has_next is False
        assert info.has_prev is False

    def test_rounds_up(self) -> None:
        info = build_page_info(PageRequest(page=1, limit=10), total=15)

        assert info.total_pages == 2
        assert info.has_next is True
        assert info.has_prev is False

    def test_last_page(self) -> None:
        info = build_page_info(PageRequest(page=2, limit=10), total=15)

        assert info.has_next is False
        assert info.has_prev is True

    def test_exact_multiple(self) -> None:
        info = build_page_info(PageRequest(page=2, limit=5), total=10)

        assert info.total_pages == 2
        assert info.has_next is False

    def test_page_past_the_end(self) -> None:
        info = build_page_info(PageRequest(page=5, limit=10), total=15)

        assert info.current_page == 5
        assert info.has_next is False
        assert info.has_prev is True
