"""Tests for cursor codec, PageRequest validation and page trimming."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from photofeed.application.listing import (
    MAX_PAGE_LIMIT,
    Page,
    PageRequest,
    decode_cursor,
    encode_cursor,
    paginate,
)
from photofeed.domain.exceptions import InvalidCursorException, ValidationException

T0 = datetime(2026, 3, 1, 12, 0, 0, 123456, tzinfo=UTC)


class TestCursor:
    def test_encode_keeps_microseconds_with_z_suffix(self) -> None:
        assert encode_cursor(T0) == "2026-03-01T12:00:00.123456Z"

    def test_encode_pads_zero_microseconds(self) -> None:
        assert encode_cursor(T0.replace(microsecond=0)).endswith("12:00:00.000000Z")

    def test_encode_converts_to_utc(self) -> None:
        eat = timezone(timedelta(hours=3))
        local = datetime(2026, 3, 1, 15, 0, 0, tzinfo=eat)
        assert encode_cursor(local) == "2026-03-01T12:00:00.000000Z"

    def test_encode_reads_naive_as_utc(self) -> None:
        assert encode_cursor(T0.replace(tzinfo=None)) == encode_cursor(T0)

    def test_decode_inverts_encode(self) -> None:
        assert decode_cursor(encode_cursor(T0)) == T0

    def test_decode_accepts_z_suffix(self) -> None:
        assert decode_cursor("2026-03-01T12:00:00.123456Z") == T0

    def test_decode_result_is_utc_aware(self) -> None:
        decoded = decode_cursor("2026-03-01T15:00:00+03:00")
        assert decoded.tzinfo is not None
        assert decoded.utcoffset() == timedelta(0)
        assert decoded.hour == 12

    @pytest.mark.parametrize("raw", ["not-a-date", "2026-13-01T00:00:00", "12345abc", "   "])
    def test_decode_invalid_raises(self, raw: str) -> None:
        with pytest.raises(InvalidCursorException) as exc_info:
            decode_cursor(raw)
        assert exc_info.value.error_code == "INVALID_CURSOR"
        assert exc_info.value.details["field"] == "cursor"
        assert exc_info.value.details["cursor"] == raw

    def test_invalid_cursor_is_a_validation_error(self) -> None:
        with pytest.raises(ValidationException):
            decode_cursor("garbage")


class TestPageRequest:
    def test_absent_limit_uses_default(self) -> None:
        page = PageRequest.create(None, None, default_limit=10)
        assert page.limit == 10
        assert page.cursor is None

    def test_fetch_size_is_one_more_than_limit(self) -> None:
        assert PageRequest.create(7, None, default_limit=10).fetch_size == 8

    @pytest.mark.parametrize("limit", [1, 25, MAX_PAGE_LIMIT])
    def test_limit_bounds_inclusive(self, limit: int) -> None:
        assert PageRequest.create(limit, None, default_limit=10).limit == limit

    @pytest.mark.parametrize("limit", [0, -1, MAX_PAGE_LIMIT + 1, 1000])
    def test_limit_out_of_range_raises(self, limit: int) -> None:
        with pytest.raises(ValidationException) as exc_info:
            PageRequest.create(limit, None, default_limit=10)
        assert exc_info.value.error_code == "VALIDATION_ERROR"
        assert exc_info.value.details == {"field": "limit"}

    def test_custom_max_limit(self) -> None:
        with pytest.raises(ValidationException):
            PageRequest.create(21, None, default_limit=10, max_limit=20)

    def test_cursor_is_decoded(self) -> None:
        page = PageRequest.create(5, encode_cursor(T0), default_limit=10)
        assert page.cursor == T0

    def test_empty_cursor_means_first_page(self) -> None:
        assert PageRequest.create(5, "", default_limit=10).cursor is None

    def test_invalid_cursor_raises(self) -> None:
        with pytest.raises(InvalidCursorException):
            PageRequest.create(5, "yesterday", default_limit=10)

    def test_limit_checked_before_cursor(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            PageRequest.create(0, "yesterday", default_limit=10)
        assert exc_info.value.details["field"] == "limit"


class TestPaginate:
    @staticmethod
    def _rows(n: int) -> list[tuple[str, datetime]]:
        # newest first, one second apart
        return [(f"r{i}", T0 - timedelta(seconds=i)) for i in range(n)]

    def test_fewer_rows_than_limit(self) -> None:
        page = paginate(self._rows(3), 5, lambda r: r[1])
        assert len(page.items) == 3
        assert page.has_more is False
        assert page.next_cursor is None

    def test_exactly_limit_rows_has_no_more(self) -> None:
        page = paginate(self._rows(5), 5, lambda r: r[1])
        assert len(page.items) == 5
        assert page.has_more is False
        assert page.next_cursor is None

    def test_limit_plus_one_drops_extra_row(self) -> None:
        rows = self._rows(6)
        page = paginate(rows, 5, lambda r: r[1])
        assert [r[0] for r in page.items] == ["r0", "r1", "r2", "r3", "r4"]
        assert page.has_more is True
        assert page.next_cursor == encode_cursor(rows[4][1])

    def test_empty(self) -> None:
        page = paginate([], 5, lambda r: r[1])
        assert page == Page.empty()

    def test_with_items_keeps_continuation(self) -> None:
        page = paginate(self._rows(3), 2, lambda r: r[1])
        mapped = page.with_items([r[0].upper() for r in page.items])
        assert mapped.items == ["R0", "R1"]
        assert mapped.has_more is True
        assert mapped.next_cursor == page.next_cursor
