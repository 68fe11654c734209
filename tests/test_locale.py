"""Tests for locale tables, the Locale type and the registry."""

from __future__ import annotations

import dataclasses
import re

import pytest

from momento.errors import LocaleError
from momento.locale import (
    DEFAULT_REGISTRY,
    EN_GB,
    EN_US,
    CalendarBucket,
    CalendarFormats,
    LocaleRegistry,
    LongDateFormat,
    MonthNames,
    get_locale,
    normalize_name,
)


class TestTables:
    """Tests for the fixed-arity lookup tables."""

    def test_month_table_arity(self) -> None:
        """Month tables cannot be built with 11 names."""
        with pytest.raises(TypeError):
            MonthNames(*("x",) * 11)

    def test_long_date_format_lookup(self) -> None:
        """LongDateFormat.get returns None for unknown keys."""
        assert EN_US.long_date_format.get("LLL") == "MMMM D, YYYY h:mm A"
        assert EN_US.long_date_format.get("LLLLL") is None

    def test_calendar_formats_by_bucket(self) -> None:
        """Each bucket maps to its phrase field."""
        assert EN_US.calendar.for_bucket(CalendarBucket.LAST_WEEK) == "[Last] dddd [at] LT"
        assert EN_US.calendar.for_bucket(CalendarBucket.SAME_ELSE) == "L"


class TestLocale:
    """Tests for Locale construction and helpers."""

    def test_names(self) -> None:
        """Names are indexed from January and from Sunday."""
        assert EN_US.month_name(0) == "January"
        assert EN_US.month_name(11, short=True) == "Dec"
        assert EN_US.weekday_name(0) == "Sunday"
        assert EN_US.weekday_name(5, "short") == "Fri"
        assert EN_US.weekday_name(6, "min") == "Sa"

    def test_name_index_out_of_range(self) -> None:
        """Lookups outside the table raise IndexError."""
        with pytest.raises(IndexError):
            EN_US.month_name(12)
        with pytest.raises(IndexError):
            EN_US.weekday_name(-1)

    @pytest.mark.parametrize(
        "number, text",
        [(1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"), (11, "11th"), (12, "12th"),
         (13, "13th"), (21, "21st"), (22, "22nd"), (101, "101st"), (111, "111th")],
    )
    def test_ordinal(self, number: int, text: str) -> None:
        """English ordinal suffixes follow the teens rule."""
        assert EN_US.ordinal(number) == text

    def test_parse_ordinal(self) -> None:
        """parse_ordinal reads numbers back out of ordinals."""
        assert EN_US.parse_ordinal("3rd") == 3
        assert EN_US.parse_ordinal("22nd") == 22
        assert EN_US.parse_ordinal("third") is None

    def test_meridiem(self) -> None:
        """Hours before noon are AM."""
        assert EN_US.meridiem(11, 59) == "AM"
        assert EN_US.meridiem(12, 0) == "PM"

    def test_relative_lookup(self) -> None:
        """Relative-time templates are plain data."""
        assert EN_US.relative("future") == "in %s"
        assert EN_US.relative("hh") == "%d hours"
        with pytest.raises(LocaleError):
            EN_US.relative("fortnight")

    def test_tables_are_coerced(self) -> None:
        """Plain sequences become table types."""
        locale = dataclasses.replace(EN_US, name="xx", months=list(EN_US.months))
        assert isinstance(locale.months, MonthNames)
        assert isinstance(locale.ordinal_parse, re.Pattern)

    def test_incomplete_table(self) -> None:
        """A month table with a missing entry is rejected."""
        with pytest.raises(LocaleError, match="months needs 12 entries"):
            dataclasses.replace(EN_US, name="xx", months=list(EN_US.months)[:11])

    def test_non_string_entry(self) -> None:
        """Table entries must be strings."""
        weekdays = list(EN_US.weekdays)
        weekdays[3] = None
        with pytest.raises(LocaleError, match="weekdays"):
            dataclasses.replace(EN_US, name="xx", weekdays=weekdays)

    def test_frozen(self) -> None:
        """Locales cannot be mutated."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            EN_US.name = "changed"  # type: ignore[misc]

    def test_en_gb_differs_where_expected(self) -> None:
        """en-gb shares names but not week rules or long formats."""
        assert EN_GB.months == EN_US.months
        assert EN_GB.week.dow == 1 and EN_GB.week.doy == 4
        assert EN_GB.long_date_format.L == "DD/MM/YYYY"
        assert EN_GB.long_date_format.LT == "HH:mm"


class TestRegistry:
    """Tests for locale lookup by name."""

    @pytest.mark.parametrize("name", ["en-us", "en_US", "EN-US", " en_us "])
    def test_name_normalization(self, name: str) -> None:
        """Lookups are case- and separator-insensitive."""
        assert DEFAULT_REGISTRY.resolve(name) is EN_US

    def test_normalize_name(self) -> None:
        """Underscores become hyphens and case is folded."""
        assert normalize_name("en_GB") == "en-gb"

    def test_names(self) -> None:
        """The default registry holds en-gb and en-us."""
        assert DEFAULT_REGISTRY.names() == ("en-gb", "en-us")
        assert len(DEFAULT_REGISTRY) == 2
        assert "en_GB" in DEFAULT_REGISTRY

    def test_unknown(self) -> None:
        """Unknown names raise LocaleError."""
        with pytest.raises(LocaleError, match="unknown locale"):
            DEFAULT_REGISTRY.resolve("tlh")
        with pytest.raises(KeyError):
            DEFAULT_REGISTRY["tlh"]

    def test_with_locale_returns_new_registry(self) -> None:
        """Adding a locale leaves the original registry untouched."""
        custom = dataclasses.replace(
            EN_US,
            name="en-ca",
            long_date_format=LongDateFormat("h:mm A", "h:mm:ss A", "YYYY-MM-DD",
                                            "MMMM D, YYYY", "MMMM D, YYYY h:mm A",
                                            "dddd, MMMM D, YYYY h:mm A"),
        )
        extended = DEFAULT_REGISTRY.with_locale(custom)
        assert extended.resolve("en_CA") is custom
        assert "en-ca" not in DEFAULT_REGISTRY
        assert isinstance(extended, LocaleRegistry)

    def test_registry_rejects_non_locales(self) -> None:
        """Only Locale instances can be registered."""
        with pytest.raises(LocaleError):
            LocaleRegistry([CalendarFormats("a", "b", "c", "d", "e", "f")])  # type: ignore[list-item]

    def test_get_locale_default(self, monkeypatch) -> None:
        """get_locale() follows MOMENTO_DEFAULT_LOCALE."""
        from momento.config import reset_settings

        assert get_locale() is EN_US
        monkeypatch.setenv("MOMENTO_DEFAULT_LOCALE", "en_GB")
        reset_settings()
        assert get_locale() is EN_GB
