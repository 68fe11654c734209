"""Tests for the DateTime primitive."""

from __future__ import annotations

import pytest

from momento.core import DateTime, Duration
from momento.errors import OverflowError, ParseError, TimezoneError, ValidationError
from momento.units import Timezone


class TestDateTimeConstruction:
    """Tests for DateTime construction and validation."""

    def test_fields(self) -> None:
        """Component accessors return what was given."""
        dt = DateTime(2024, 3, 1, 9, 30, 15, nanosecond=123_456_789)
        assert (dt.year, dt.month, dt.day) == (2024, 3, 1)
        assert (dt.hour, dt.minute, dt.second) == (9, 30, 15)
        assert dt.millisecond == 123
        assert dt.microsecond == 123_456
        assert dt.nanosecond == 123_456_789
        assert dt.is_naive

    def test_sub_second_components_combine(self) -> None:
        """millisecond, microsecond and nanosecond add up."""
        dt = DateTime(2024, 1, 1, millisecond=1, microsecond=2, nanosecond=3)
        assert dt.nanosecond == 1_002_003

    @pytest.mark.parametrize(
        "args",
        [(2023, 2, 29), (2024, 13, 1), (2024, 4, 31), (2024, 1, 1, 24), (2024, 1, 1, 0, 60)],
    )
    def test_invalid_components(self, args) -> None:
        """Out-of-range components raise ValidationError."""
        with pytest.raises(ValidationError):
            DateTime(*args)

    @pytest.mark.parametrize(
        "field", ["hour", "second", "millisecond", "microsecond", "nanosecond"]
    )
    def test_non_integer_components(self, field: str) -> None:
        """Every component must be an int."""
        with pytest.raises(ValidationError, match=field):
            DateTime(2024, 1, 1, **{field: 0.5})

    def test_fraction_must_stay_below_one_second(self) -> None:
        """A fraction of a full second or more is invalid."""
        with pytest.raises(ValidationError):
            DateTime(2024, 1, 1, nanosecond=1_000_000_000)


class TestCalendarFields:
    """Tests for weekday, day of year and ISO week fields."""

    def test_weekday(self) -> None:
        """2024-03-01 is a Friday."""
        dt = DateTime(2024, 3, 1)
        assert dt.weekday == 4
        assert dt.weekday_from_sunday == 5

    def test_day_of_year(self) -> None:
        """Day of year counts the leap day."""
        assert DateTime(2024, 3, 1).day_of_year == 61
        assert DateTime(2023, 3, 1).day_of_year == 60
        assert DateTime(2024, 12, 31).day_of_year == 366

    @pytest.mark.parametrize(
        "ymd, week, week_year",
        [
            ((2021, 1, 3), 53, 2020),
            ((2020, 12, 31), 53, 2020),
            ((2024, 12, 30), 1, 2025),
            ((2024, 3, 1), 9, 2024),
            ((2026, 1, 1), 1, 2026),
        ],
    )
    def test_iso_week(self, ymd, week, week_year) -> None:
        """ISO week numbering rolls over at year ends."""
        dt = DateTime(*ymd)
        assert dt.iso_week == week
        assert dt.iso_week_year == week_year


class TestTimezones:
    """Tests for zone attachment and conversion."""

    def test_astimezone_keeps_instant(self) -> None:
        """Converting zones moves the wall clock, not the instant."""
        dt = DateTime(2024, 3, 1, 0, 30, timezone=Timezone.utc())
        shifted = dt.astimezone(Timezone.from_hours(-5))
        assert (shifted.year, shifted.month, shifted.day, shifted.hour) == (2024, 2, 29, 19)
        assert shifted == dt

    def test_naive_conversion_fails(self) -> None:
        """Naive values cannot be converted."""
        with pytest.raises(TimezoneError):
            DateTime(2024, 3, 1).astimezone(Timezone.utc())

    def test_replace_timezone_keeps_wall_clock(self) -> None:
        """replace_timezone only attaches the zone."""
        dt = DateTime(2024, 3, 1, 12).replace_timezone(Timezone.from_hours(2))
        assert dt.hour == 12
        assert dt.offset_seconds == 7200

    def test_mixed_comparison(self) -> None:
        """Naive and aware values do not order against each other."""
        naive = DateTime(2024, 3, 1)
        aware = DateTime(2024, 3, 1, timezone=Timezone.utc())
        assert naive != aware
        with pytest.raises(TypeError):
            naive < aware  # noqa: B015

    def test_unix_time(self) -> None:
        """Unix conversions floor before the epoch."""
        dt = DateTime.from_unix_nanos(-1, timezone=Timezone.utc())
        assert (dt.year, dt.hour, dt.nanosecond) == (1969, 23, 999_999_999)
        assert dt.to_unix_seconds() == -1
        assert dt.to_unix_millis() == -1
        assert DateTime.from_timestamp(1.5, timezone=Timezone.utc()).nanosecond == 500_000_000


class TestArithmetic:
    """Tests for span and calendar arithmetic."""

    def test_add_duration_crosses_days(self) -> None:
        """Adding a span carries into the date."""
        dt = DateTime(2024, 2, 28, 23) + Duration.from_hours(2)
        assert (dt.month, dt.day, dt.hour) == (2, 29, 1)

    def test_subtract_datetimes(self) -> None:
        """DateTime - DateTime gives a Duration."""
        assert DateTime(2024, 3, 1) - DateTime(2024, 2, 1) == Duration.from_days(29)

    def test_add_months_clamps(self) -> None:
        """Month arithmetic clamps the day."""
        assert DateTime(2024, 1, 31).add_months(1) == DateTime(2024, 2, 29)
        assert DateTime(2024, 3, 31).add_months(-1) == DateTime(2024, 2, 29)
        assert DateTime(2024, 11, 15).add_months(3) == DateTime(2025, 2, 15)

    def test_overflow(self) -> None:
        """Leaving the supported years raises OverflowError."""
        with pytest.raises(OverflowError):
            DateTime(9999, 12, 31, 23) + Duration.from_hours(1)
        with pytest.raises(OverflowError):
            DateTime(9999, 12, 1).add_months(1)


class TestIsoFormat:
    """Tests for ISO text in and out."""

    def test_round_trip_with_nanoseconds(self) -> None:
        """Nanosecond fractions survive formatting and parsing."""
        dt = DateTime(2024, 1, 15, 14, 30, 45, nanosecond=5, timezone=Timezone.utc())
        assert dt.to_iso_format() == "2024-01-15T14:30:45.000000005Z"
        assert DateTime.from_iso_format(dt.to_iso_format()) == dt

    def test_precision(self) -> None:
        """Fixed precisions truncate the fraction."""
        dt = DateTime(2024, 1, 15, 14, 30, 45, nanosecond=123_456_789)
        assert dt.to_iso_format(precision="millis") == "2024-01-15T14:30:45.123"
        assert dt.to_iso_format(precision="seconds") == "2024-01-15T14:30:45"

    def test_invalid(self) -> None:
        """Non-ISO text raises ParseError carrying the input."""
        with pytest.raises(ParseError) as info:
            DateTime.from_iso_format("yesterday")
        assert info.value.text == "yesterday"
