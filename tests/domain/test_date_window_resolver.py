"""Unit tests for the DateWindowResolver domain service."""

import logging
from datetime import datetime, timedelta, timezone

import pytest

from sellerdash.domain.service.date_window_resolver import (
    DateWindowResolver,
    end_of_day,
    parse_or_default,
)

NOW = datetime(2024, 3, 15, 9, 30, tzinfo=timezone.utc)


def _default():
    return (NOW - timedelta(days=30), NOW)


class TestParseOrDefault:

    def test_date_only(self):
        assert parse_or_default("2024-01-05") == datetime(2024, 1, 5, tzinfo=timezone.utc)

    def test_keeps_explicit_offset(self):
        parsed = parse_or_default("2024-01-05T10:00:00+02:00")
        assert parsed.utcoffset() == timedelta(hours=2)

    def test_zulu_suffix(self):
        assert parse_or_default("2024-01-05T10:00:00Z") == datetime(
            2024, 1, 5, 10, tzinfo=timezone.utc
        )

    @pytest.mark.parametrize("raw", [None, "", "   ", "not-a-date", "2024-13-40"])
    def test_returns_fallback_instead_of_raising(self, raw):
        assert parse_or_default(raw, NOW) == NOW


class TestDefaultWindow:

    def test_no_input_uses_last_30_days(self):
        window = DateWindowResolver().resolve(now=NOW)
        assert (window.start, window.end) == _default()

    def test_only_one_bound_uses_default(self):
        window = DateWindowResolver().resolve("2024-01-01", None, now=NOW)
        assert (window.start, window.end) == _default()

    def test_naive_now_taken_as_utc(self):
        window = DateWindowResolver().resolve(now=NOW.replace(tzinfo=None))
        assert window.end == NOW

    def test_custom_default_days(self):
        window = DateWindowResolver(default_days=7).resolve(now=NOW)
        assert window.start == NOW - timedelta(days=7)


class TestFallbackOnInvalidRange:

    @pytest.mark.parametrize(
        "raw_start, raw_end",
        [
            ("garbage", "2024-01-05"),
            ("2024-01-01", "garbage"),
            ("2024-01-06", "2024-01-05"),
        ],
    )
    def test_invalid_range_falls_back(self, raw_start, raw_end):
        window = DateWindowResolver().resolve(raw_start, raw_end, now=NOW)
        assert (window.start, window.end) == _default()

    def test_fallback_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING):
            DateWindowResolver().resolve("2024-01-06", "2024-01-05", now=NOW)
        assert "start is after end" in caplog.text

    def test_default_window_is_not_logged(self, caplog):
        with caplog.at_level(logging.WARNING):
            DateWindowResolver().resolve(now=NOW)
        assert caplog.text == ""


class TestExplicitRange:

    def test_end_widened_to_end_of_day(self):
        window = DateWindowResolver().resolve("2024-01-01", "2024-01-05", now=NOW)
        assert window.start == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert window.end == datetime(2024, 1, 5, 23, 59, 59, 999000, tzinfo=timezone.utc)

    def test_end_of_day_inclusive_boundaries(self):
        window = DateWindowResolver().resolve("2024-01-01", "2024-01-05", now=NOW)
        assert window.contains(datetime(2024, 1, 5, 23, 0, tzinfo=timezone.utc))
        assert not window.contains(datetime(2024, 1, 6, 0, 0, 1, tzinfo=timezone.utc))

    def test_time_of_day_on_end_is_ignored(self):
        window = DateWindowResolver().resolve(
            "2024-01-01", "2024-01-05T08:00:00", now=NOW
        )
        assert window.end.hour == 23

    def test_same_day_range_is_valid(self):
        window = DateWindowResolver().resolve("2024-01-05", "2024-01-05", now=NOW)
        assert window.start.date() == window.end.date()

    def test_explicit_range_may_lie_in_the_future(self):
        window = DateWindowResolver().resolve("2030-01-01", "2030-01-02", now=NOW)
        assert window.start.year == 2030


def test_end_of_day_keeps_timezone():
    tz = timezone(timedelta(hours=-5))
    moment = datetime(2024, 1, 5, 3, tzinfo=tz)
    assert end_of_day(moment).tzinfo is tz
