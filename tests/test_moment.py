"""Tests for the Moment facade."""

from __future__ import annotations

import pytest

from momento import DateTime, Duration, Moment, Timezone, Unit
from momento.errors import LocaleError, ParseError, TimezoneError, ValidationError

UTC = Timezone.utc()


def friday(hour: int = 0, minute: int = 0, locale: str = "en-us") -> Moment:
    return Moment(DateTime(2024, 3, 1, hour, minute, timezone=UTC), locale)


class TestConstruction:
    """Tests for building Moments."""

    def test_from_aware_datetime(self) -> None:
        """An aware DateTime keeps its zone."""
        dt = DateTime(2024, 3, 1, 9, timezone=Timezone.from_hours(2))
        m = Moment.from_datetime(dt)
        assert m.datetime is dt
        assert m.timezone.offset_seconds == 7200

    def test_naive_datetime_is_local(self) -> None:
        """A naive DateTime is bound to the local offset."""
        m = Moment(DateTime(2024, 3, 1, 9))
        assert m.timezone.offset_seconds == Timezone.local_at(2024, 3, 1, 9).offset_seconds
        assert m.hour == 9

    def test_rejects_other_types(self) -> None:
        """Only DateTime is accepted."""
        with pytest.raises(TypeError):
            Moment("2024-03-01")  # type: ignore[arg-type]

    def test_default_locale(self) -> None:
        """Without a locale the configured default is used."""
        assert friday().locale_data.name == "en-us"

    def test_default_locale_from_env(self, monkeypatch) -> None:
        """MOMENTO_DEFAULT_LOCALE changes the default."""
        from momento.config import reset_settings

        monkeypatch.setenv("MOMENTO_DEFAULT_LOCALE", "en_GB")
        reset_settings()
        assert Moment(DateTime(2024, 3, 1, timezone=UTC)).locale_data.name == "en-gb"

    def test_unknown_locale(self) -> None:
        """Unknown locale names raise LocaleError."""
        with pytest.raises(LocaleError):
            friday(locale="xx-yy")

    def test_from_timestamp(self) -> None:
        """Unix seconds land in the requested zone."""
        m = Moment.from_timestamp(0, timezone="+05:30")
        assert m.format("YYYY-MM-DD HH:mm Z") == "1970-01-01 05:30 +05:30"
        assert m.unix == 0

    def test_now(self) -> None:
        """now() and utc_now() denote roughly the same instant."""
        a = Moment.utc_now()
        b = Moment.now()
        assert a.timezone.is_utc
        assert abs(b.diff(a).total_seconds) < 60


class TestLocalOffset:
    """Tests for binding naive input to the host zone."""

    def test_naive_datetime_uses_offset_of_its_date(self, eastern_host) -> None:
        """Winter and summer wall times get their own offsets."""
        winter = Moment(DateTime(2024, 1, 15, 10))
        summer = Moment(DateTime(2024, 7, 15, 10))
        assert winter.timezone.offset_seconds == -5 * 3600
        assert summer.timezone.offset_seconds == -4 * 3600
        assert winter.hour == summer.hour == 10

    def test_parse_uses_offset_of_parsed_date(self, eastern_host) -> None:
        """Offset-less text is bound to the offset in force on its date."""
        assert str(Moment.parse("2024-01-15T10:00")) == "2024-01-15T10:00:00-05:00"
        assert str(Moment.parse("2024-07-15T10:00")) == "2024-07-15T10:00:00-04:00"


class TestParse:
    """Tests for Moment.parse."""

    def test_rfc3339_keeps_offset(self) -> None:
        """An explicit offset wins over the timezone argument."""
        m = Moment.parse("2024-03-01T09:00:00-05:00", timezone="UTC")
        assert m.timezone.offset_seconds == -5 * 3600
        assert m.hour == 9

    def test_offsetless_uses_timezone(self) -> None:
        """Offset-less text is read in the given zone."""
        m = Moment.parse("2024-03-01 09:00", timezone="+01:00")
        assert str(m) == "2024-03-01T09:00:00+01:00"

    def test_offsetless_defaults_to_local(self) -> None:
        """Without a timezone the local offset is used."""
        m = Moment.parse("2024-03-01")
        assert m.timezone.offset_seconds == Timezone.local_at(2024, 3, 1).offset_seconds

    def test_pattern(self) -> None:
        """A strptime pattern is honoured."""
        m = Moment.parse("1/3/2024 17:45", "%d/%m/%Y %H:%M", timezone=UTC)
        assert repr(m) == "Moment('2024-03-01T17:45:00Z', locale='en-us')"

    def test_bad_timezone(self) -> None:
        """An unparseable timezone string raises TimezoneError."""
        with pytest.raises(TimezoneError):
            Moment.parse("2024-03-01", timezone="Mars/Olympus")

    def test_parse_error_carries_context(self) -> None:
        """ParseError exposes the text and pattern."""
        with pytest.raises(ParseError) as info:
            Moment.parse("yesterday", "%Y-%m-%d")
        assert info.value.text == "yesterday"
        assert info.value.pattern == "%Y-%m-%d"


class TestArithmetic:
    """Tests for add, subtract and diff."""

    def test_add_pairs(self) -> None:
        """(magnitude, Unit) pairs are aggregated."""
        m = friday().add({(1, Unit.DAY), (2, Unit.HOUR)})
        assert m.format("YYYY-MM-DD HH:mm") == "2024-03-02 02:00"

    def test_add_month_is_four_weeks(self) -> None:
        """A month in a duration spec is 28 days."""
        assert friday().add([(1, Unit.MONTH)]).format("YYYY-MM-DD") == "2024-03-29"

    def test_subtract_duration(self) -> None:
        """A Duration may be passed directly."""
        m = friday().subtract(Duration(nanoseconds=1))
        assert m.format("YYYY-MM-DD HH:mm:ss.SSSSSSSSS") == "2024-02-29 23:59:59.999999999"

    def test_rejects_strings(self) -> None:
        """A string is not a duration spec."""
        with pytest.raises(ValidationError):
            friday().add("1 day")  # type: ignore[arg-type]

    def test_diff(self) -> None:
        """diff is the elapsed time from the argument."""
        assert friday(12).diff(friday(9)) == Duration.from_hours(3)
        with pytest.raises(TypeError):
            friday().diff(DateTime(2024, 1, 1))  # type: ignore[arg-type]

    def test_immutability(self) -> None:
        """Operations return new Moments."""
        m = friday()
        m.add({(1, Unit.DAY)})
        m.start_of("month")
        assert m == friday()


class TestTruncation:
    """Tests for start_of and end_of."""

    def test_unit_names(self) -> None:
        """Units may be named by string."""
        m = friday(14, 30)
        assert m.start_of("hour").format("HH:mm") == "14:00"
        assert m.start_of(Unit.YEAR).format("YYYY-MM-DD") == "2024-01-01"
        assert m.end_of("M").format("YYYY-MM-DD HH:mm:ss") == "2024-03-31 23:59:59"

    def test_week_follows_locale(self) -> None:
        """Week starts on Sunday in en-us and Monday in en-gb."""
        assert friday().start_of("week").format("dddd D") == "Sunday 25"
        assert friday(locale="en-gb").start_of("week").format("dddd D") == "Monday 26"
        assert friday().start_of("isoWeek").format("dddd D") == "Monday 26"

    def test_end_of_day(self) -> None:
        """end_of is one nanosecond before the next boundary."""
        m = friday(9).end_of("day")
        assert m.format("HH:mm:ss.SSSSSSSSS") == "23:59:59.999999999"
        assert m.add([(1, Unit.NANOSECOND)]) == friday().start_of("day").add([(1, Unit.DAY)])

    def test_unknown_unit(self) -> None:
        """Unknown unit names raise ValidationError."""
        with pytest.raises(ValidationError):
            friday().start_of("fortnight")


class TestPresentation:
    """Tests for format, calendar and locale switching."""

    def test_default_format(self) -> None:
        """The default pattern is ISO-like with the offset."""
        assert friday(9, 5).format() == "2024-03-01T09:05:00+00:00"

    def test_end_to_end(self) -> None:
        """The documented examples."""
        m = Moment.parse("2024-03-01T00:00:00Z")
        assert m.format("YYYY-MM-DD") == "2024-03-01"
        assert m.format("dddd, MMMM D, YYYY") == "Friday, March 1, 2024"

    def test_locale_switch(self) -> None:
        """locale() rebinds without changing the instant."""
        us = friday(14, 30)
        gb = us.locale("en-gb")
        assert us.format("LLLL") == "Friday, March 1, 2024 2:30 PM"
        assert gb.format("LLLL") == "Friday, 1 March 2024 14:30"
        assert us == gb
        assert us.locale_data.name == "en-us"

    def test_calendar(self) -> None:
        """calendar() describes the Moment relative to a reference."""
        reference = friday(17, 30)
        assert friday(9).calendar(reference) == "Today at 9:00 AM"
        assert friday(9).subtract({(1, Unit.DAY)}).calendar(reference) == "Yesterday at 9:00 AM"
        assert friday(9, locale="en-gb").add({(1, Unit.DAY)}).calendar(reference) == "Tomorrow at 09:00"

    def test_calendar_reference_zone(self) -> None:
        """The reference day is taken in this Moment's zone."""
        # 23:30 UTC on Feb 29 is already Friday in +02:00
        reference = Moment(DateTime(2024, 2, 29, 23, 30, timezone=UTC))
        m = Moment(DateTime(2024, 3, 1, 9, timezone=Timezone.from_hours(2)))
        assert m.calendar(reference) == "Today at 9:00 AM"

    def test_calendar_overrides(self) -> None:
        """Per-call formats and policies are forwarded."""
        reference = friday(17, 30)
        assert friday(9).calendar(reference, formats={"same_day": "[Earlier]"}) == "Earlier"


class TestZonesAndAccessors:
    """Tests for zone conversion and field access."""

    def test_to_timezone(self) -> None:
        """Zone conversion keeps the instant."""
        m = friday(23, 30)
        tokyo = m.to_timezone("+09:00")
        assert tokyo.format("YYYY-MM-DD HH:mm") == "2024-03-02 08:30"
        assert tokyo == m
        assert tokyo.utc().timezone.is_utc

    def test_fields(self) -> None:
        """Accessors read the zoned wall clock."""
        m = friday(14, 30)
        assert (m.year, m.month, m.day, m.hour, m.minute, m.second, m.nanosecond) == (
            2024, 3, 1, 14, 30, 0, 0,
        )
        assert m.weekday == 4
        assert m.day_of_year == 61
        assert m.unix_millis == m.unix * 1000

    def test_weeks(self) -> None:
        """week is the locale week, iso_week the ISO one."""
        m = Moment(DateTime(2024, 12, 29, timezone=UTC))
        assert (m.week, m.week_year) == (1, 2025)
        assert (m.iso_week, m.iso_week_year) == (52, 2024)
        gb = m.locale("en-gb")
        assert (gb.week, gb.week_year) == (52, 2024)

    def test_ordering_and_hash(self) -> None:
        """Moments order and hash by instant."""
        early, late = friday(9), friday(10)
        assert early < late and late > early
        assert early <= friday(9) and late >= friday(10)
        shifted = early.to_timezone("-03:00")
        assert hash(shifted) == hash(early)
        assert len({early, shifted, late}) == 2

    def test_str(self) -> None:
        """str() is RFC 3339."""
        assert str(friday(9).to_timezone("+05:30")) == "2024-03-01T14:30:00+05:30"
