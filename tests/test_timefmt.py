"""Tests for biscuits.timefmt — expires and max-age conversions."""

import locale
from datetime import UTC, datetime, timedelta, timezone

import pytest

from biscuits.errors import FormatError
from biscuits.timefmt import (
    EXPIRES_LAYOUT,
    format_expires,
    format_max_age,
    parse_expires,
    parse_max_age,
)


class TestParseExpires:
    def test_parses_layout(self) -> None:
        result = parse_expires("Wed, 30 Dec 2015 12:00:00 UTC")
        assert result == datetime(2015, 12, 30, 12, 0, 0, tzinfo=UTC)

    def test_result_is_aware_utc(self) -> None:
        result = parse_expires("Fri, 01 Jan 2016 00:00:01 UTC")
        assert result.tzinfo is UTC

    def test_weekday_not_checked(self) -> None:
        """30 Dec 2015 was a Wednesday; the name is accepted regardless."""
        result = parse_expires("Thu, 30 Dec 2015 12:00:00 UTC")
        assert result == datetime(2015, 12, 30, 12, 0, 0, tzinfo=UTC)

    @pytest.mark.parametrize("value", [None, ""])
    def test_unset_raises(self, value: str | None) -> None:
        with pytest.raises(FormatError) as exc_info:
            parse_expires(value)
        assert exc_info.value.field == "expires"

    @pytest.mark.parametrize(
        "value",
        [
            "2015-12-30T12:00:00Z",
            "Wed, 30 Dec 2015 12:00:00 GMT",
            "Wed, 30-Dec-2015 12:00:00 UTC",
            "Mi, 30 Dez 2015 12:00:00 UTC",
            "Wed, 30 Dec 2015 12:00:00 UTC trailing",
        ],
    )
    def test_wrong_layout_raises(self, value: str) -> None:
        with pytest.raises(FormatError) as exc_info:
            parse_expires(value)
        assert exc_info.value.value == value
        assert exc_info.value.layout == EXPIRES_LAYOUT

    @pytest.mark.parametrize(
        "value",
        [
            "Wed, 32 Dec 2015 12:00:00 UTC",
            "Sun, 29 Feb 2015 12:00:00 UTC",
            "Wed, 30 Dec 2015 24:00:00 UTC",
        ],
    )
    def test_impossible_date_raises(self, value: str) -> None:
        with pytest.raises(FormatError) as exc_info:
            parse_expires(value)
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_names_ignore_time_locale(self) -> None:
        saved = locale.setlocale(locale.LC_TIME)
        try:
            locale.setlocale(locale.LC_TIME, "de_DE.UTF-8")
        except locale.Error:
            pytest.skip("de_DE.UTF-8 locale not installed")
        try:
            when = datetime(2015, 12, 30, 12, tzinfo=UTC)
            assert format_expires(when) == "Wed, 30 Dec 2015 12:00:00 UTC"
            assert parse_expires("Thu, 30 Dec 2015 12:00:00 UTC") == when
        finally:
            locale.setlocale(locale.LC_TIME, saved)


class TestFormatExpires:
    def test_aware_utc(self) -> None:
        when = datetime(2015, 12, 30, 12, 0, 0, tzinfo=UTC)
        assert format_expires(when) == "Wed, 30 Dec 2015 12:00:00 UTC"

    def test_naive_is_taken_as_utc(self) -> None:
        when = datetime(2020, 2, 29, 23, 59, 59)
        assert format_expires(when) == "Sat, 29 Feb 2020 23:59:59 UTC"

    def test_other_timezone_converted(self) -> None:
        plus_one = timezone(timedelta(hours=1))
        when = datetime(2016, 1, 1, 0, 30, 0, tzinfo=plus_one)
        assert format_expires(when) == "Thu, 31 Dec 2015 23:30:00 UTC"

    def test_day_is_zero_padded(self) -> None:
        when = datetime(2021, 3, 5, 7, 8, 9, tzinfo=UTC)
        assert format_expires(when) == "Fri, 05 Mar 2021 07:08:09 UTC"

    def test_parse_accepts_formatted(self) -> None:
        when = datetime(2030, 6, 15, 8, 0, 0, tzinfo=UTC)
        assert parse_expires(format_expires(when)) == when


class TestParseMaxAge:
    def test_integer_seconds(self) -> None:
        assert parse_max_age("300") == timedelta(seconds=300)

    def test_fractional_seconds(self) -> None:
        assert parse_max_age("1.5") == timedelta(seconds=1.5)

    def test_zero(self) -> None:
        assert parse_max_age("0") == timedelta(0)

    def test_negative(self) -> None:
        assert parse_max_age("-60") == timedelta(minutes=-1)

    @pytest.mark.parametrize("value", [None, ""])
    def test_unset_raises(self, value: str | None) -> None:
        with pytest.raises(FormatError) as exc_info:
            parse_max_age(value)
        assert exc_info.value.field == "max-age"

    @pytest.mark.parametrize("value", ["abc", "5m", "nan", "inf"])
    def test_non_numeric_raises(self, value: str) -> None:
        with pytest.raises(FormatError):
            parse_max_age(value)


class TestFormatMaxAge:
    def test_whole_seconds(self) -> None:
        assert format_max_age(timedelta(minutes=5)) == "300"

    def test_truncates_fraction(self) -> None:
        assert format_max_age(timedelta(seconds=90.9)) == "90"

    def test_truncates_toward_zero(self) -> None:
        assert format_max_age(timedelta(seconds=-1.5)) == "-1"

    def test_days(self) -> None:
        assert format_max_age(timedelta(days=1)) == "86400"
