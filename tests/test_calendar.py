"""Tests for the calendar classifier."""

from __future__ import annotations

import pytest

from momento.core import DateTime, Duration
from momento.errors import ValidationError
from momento.format.calendar import calendar, default_calendar_policy, phrase_for
from momento.locale import EN_GB, EN_US, CalendarBucket, CalendarFormats
from momento.units import Timezone

UTC = Timezone.utc()
# Friday 2024-03-01, late afternoon
REFERENCE = DateTime(2024, 3, 1, 17, 30, timezone=UTC)
REFERENCE_START = DateTime(2024, 3, 1, timezone=UTC)


def at(days: int, hour: int = 9, minute: int = 0) -> DateTime:
    return REFERENCE_START.add_days(days).replace(hour=hour, minute=minute)


class TestDefaultPolicy:
    """Tests for the default bucket thresholds."""

    @pytest.mark.parametrize(
        "days, bucket",
        [
            (-7, CalendarBucket.SAME_ELSE),
            (-6, CalendarBucket.LAST_WEEK),
            (-2, CalendarBucket.LAST_WEEK),
            (-1, CalendarBucket.LAST_DAY),
            (0, CalendarBucket.SAME_DAY),
            (1, CalendarBucket.NEXT_DAY),
            (2, CalendarBucket.NEXT_WEEK),
            (6, CalendarBucket.NEXT_WEEK),
            (7, CalendarBucket.SAME_ELSE),
        ],
    )
    def test_day_boundaries(self, days: int, bucket: CalendarBucket) -> None:
        """Whole-day offsets from the reference day land in their bucket."""
        assert default_calendar_policy(REFERENCE_START.add_days(days), REFERENCE_START) is bucket

    def test_exact_fractional_edges(self) -> None:
        """One nanosecond either side of a boundary changes the bucket."""
        tick = Duration(nanoseconds=1)
        assert default_calendar_policy(REFERENCE_START - tick, REFERENCE_START) is CalendarBucket.LAST_DAY
        assert default_calendar_policy(REFERENCE_START, REFERENCE_START) is CalendarBucket.SAME_DAY
        six_back = REFERENCE_START.add_days(-6)
        assert default_calendar_policy(six_back - tick, REFERENCE_START) is CalendarBucket.SAME_ELSE
        seven_ahead = REFERENCE_START.add_days(7)
        assert default_calendar_policy(seven_ahead - tick, REFERENCE_START) is CalendarBucket.NEXT_WEEK


class TestCalendarPhrases:
    """Tests for calendar() formatting."""

    @pytest.mark.parametrize(
        "days, expected",
        [
            (0, "Today at 9:00 AM"),
            (1, "Tomorrow at 9:00 AM"),
            (-1, "Yesterday at 9:00 AM"),
            (3, "Monday at 9:00 AM"),
            (-3, "Last Tuesday at 9:00 AM"),
            (10, "03/11/2024"),
            (-10, "02/20/2024"),
        ],
    )
    def test_en_us(self, days: int, expected: str) -> None:
        """en-us phrases for each bucket."""
        assert calendar(at(days), REFERENCE, EN_US) == expected

    def test_en_gb(self) -> None:
        """en-gb uses its own LT and L."""
        assert calendar(at(1, 21, 15), REFERENCE, EN_GB) == "Tomorrow at 21:15"
        assert calendar(at(10), REFERENCE, EN_GB) == "11/03/2024"

    def test_reference_time_of_day_is_ignored(self) -> None:
        """Only the reference's day matters."""
        early = REFERENCE.replace(hour=0, minute=1)
        assert calendar(at(0, 23, 59), early, EN_US) == calendar(at(0, 23, 59), REFERENCE, EN_US)

    def test_format_overrides(self) -> None:
        """A partial mapping overrides only the buckets it names."""
        formats = {CalendarBucket.SAME_DAY: "[Now-ish]", "next_day": "[Soon]"}
        assert calendar(at(0), REFERENCE, EN_US, formats=formats) == "Now-ish"
        assert calendar(at(1), REFERENCE, EN_US, formats=formats) == "Soon"
        assert calendar(at(-1), REFERENCE, EN_US, formats=formats) == "Yesterday at 9:00 AM"

    def test_full_override_table(self) -> None:
        """A CalendarFormats replaces the locale table."""
        table = CalendarFormats("[a]", "[b]", "[c]", "[d]", "[e]", "YYYY")
        assert calendar(at(-1), REFERENCE, EN_US, formats=table) == "d"
        assert calendar(at(30), REFERENCE, EN_US, formats=table) == "2024"

    def test_policy_override(self) -> None:
        """A custom policy chooses the bucket."""
        always_else = lambda dt, start: CalendarBucket.SAME_ELSE  # noqa: E731
        assert calendar(at(0), REFERENCE, EN_US, policy=always_else) == "03/01/2024"
        by_name = lambda dt, start: "next_day"  # noqa: E731
        assert calendar(at(0), REFERENCE, EN_US, policy=by_name) == "Tomorrow at 9:00 AM"

    def test_policy_must_return_a_bucket(self) -> None:
        """Anything else is a ValidationError."""
        with pytest.raises(ValidationError):
            calendar(at(0), REFERENCE, EN_US, policy=lambda dt, start: "someday")

    def test_phrase_for_falls_back_to_locale(self) -> None:
        """Missing overrides use the locale phrase."""
        assert phrase_for(CalendarBucket.LAST_WEEK, EN_US, {}) == "[Last] dddd [at] LT"
