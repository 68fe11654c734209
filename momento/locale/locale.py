"""The Locale value type.

A Locale bundles every table and rule the formatting engine consults. It
is a frozen dataclass whose constructor checks that each table is complete,
so lookups by index or key can never miss once a Locale exists.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from momento.errors import LocaleError
from momento.locale.tables import (
    CalendarFormats,
    LongDateFormat,
    MonthNames,
    RelativeTime,
    WeekConfig,
    WeekdayNames,
)

OrdinalFunc = Callable[[int], str]
MeridiemFunc = Callable[[int, int], str]

_WEEKDAY_STYLES = ("long", "short", "min")


@dataclass(frozen=True)
class Locale:
    """Immutable language/region formatting rules.

    Tables may be passed as plain sequences; they are coerced into their
    fixed-arity table types during construction.

    Attributes:
        name: Normalized locale name, e.g. "en-us".
        invalid_date: Text shown for a value that cannot be rendered.
        months, months_short: Month names indexed 0 (January) to 11.
        weekdays, weekdays_short, weekdays_min: Weekday names indexed
            0 (Sunday) to 6.
        long_date_format: Expansions for LT, LTS, L, LL, LLL, LLLL.
        calendar: Phrase per calendar bucket.
        relative_time: Relative-time templates (lookup only).
        ordinal_parse: Pattern matching an ordinal such as "21st".
        ordinal: Renders an integer with its ordinal suffix.
        week: First day of week and week-1 rule.
        meridiem: Maps (hour, minute) to an AM/PM style label.

    Raises:
        LocaleError: If any table is missing entries or holds non-strings.
    """

    name: str
    invalid_date: str
    months: MonthNames
    months_short: MonthNames
    weekdays: WeekdayNames
    weekdays_short: WeekdayNames
    weekdays_min: WeekdayNames
    long_date_format: LongDateFormat
    calendar: CalendarFormats
    relative_time: RelativeTime
    ordinal_parse: re.Pattern[str]
    ordinal: OrdinalFunc
    week: WeekConfig
    meridiem: MeridiemFunc

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise LocaleError(f"locale name must be a non-empty string, got {self.name!r}")
        if not isinstance(self.invalid_date, str):
            raise LocaleError(f"locale {self.name!r}: invalid_date must be a string")

        for field_name, table_type in (
            ("months", MonthNames),
            ("months_short", MonthNames),
            ("weekdays", WeekdayNames),
            ("weekdays_short", WeekdayNames),
            ("weekdays_min", WeekdayNames),
            ("long_date_format", LongDateFormat),
            ("calendar", CalendarFormats),
            ("relative_time", RelativeTime),
        ):
            table = _coerce_table(self.name, field_name, getattr(self, field_name), table_type)
            object.__setattr__(self, field_name, table)

        if isinstance(self.ordinal_parse, str):
            object.__setattr__(self, "ordinal_parse", re.compile(self.ordinal_parse))
        elif not isinstance(self.ordinal_parse, re.Pattern):
            raise LocaleError(f"locale {self.name!r}: ordinal_parse must be a pattern")
        if not callable(self.ordinal):
            raise LocaleError(f"locale {self.name!r}: ordinal must be callable")
        if not callable(self.meridiem):
            raise LocaleError(f"locale {self.name!r}: meridiem must be callable")
        if not isinstance(self.week, WeekConfig):
            raise LocaleError(f"locale {self.name!r}: week must be a WeekConfig")

    def month_name(self, index: int, *, short: bool = False) -> str:
        """Return the month name for a 0-based month index.

        Raises:
            IndexError: If ``index`` is not 0-11.
        """
        table = self.months_short if short else self.months
        if not 0 <= index < len(table):
            raise IndexError(f"month index must be 0-11, got {index}")
        return table[index]

    def weekday_name(self, index: int, style: str = "long") -> str:
        """Return the weekday name for a Sunday-based index.

        Args:
            index: 0 (Sunday) through 6 (Saturday).
            style: "long" ("Sunday"), "short" ("Sun") or "min" ("Su").

        Raises:
            IndexError: If ``index`` is not 0-6.
            ValueError: If ``style`` is unknown.
        """
        if style not in _WEEKDAY_STYLES:
            raise ValueError(f"weekday style must be one of {_WEEKDAY_STYLES}, got {style!r}")
        table = {
            "long": self.weekdays,
            "short": self.weekdays_short,
            "min": self.weekdays_min,
        }[style]
        if not 0 <= index < len(table):
            raise IndexError(f"weekday index must be 0-6, got {index}")
        return table[index]

    def parse_ordinal(self, text: str) -> int | None:
        """Return the number in an ordinal such as "3rd", or None.

        Examples:
            >>> from momento.locale import get_locale
            >>> get_locale("en-us").parse_ordinal("21st")
            21
            >>> get_locale("en-us").parse_ordinal("21") is None
            True
        """
        match = self.ordinal_parse.fullmatch(text.strip())
        if match is None:
            return None
        digits = re.match(r"\d+", match.group(0))
        return int(digits.group(0)) if digits else None

    def relative(self, key: str) -> str:
        """Return the relative-time template stored under ``key``.

        Raises:
            LocaleError: If ``key`` is not one of the 14 slots.
        """
        template = self.relative_time.get(key)
        if template is None:
            raise LocaleError(f"locale {self.name!r} has no relative-time slot {key!r}")
        return template

    def __repr__(self) -> str:
        return f"Locale({self.name!r})"


def _coerce_table(locale_name: str, field_name: str, value: Any, table_type: type) -> Any:
    arity = len(table_type._fields)
    if isinstance(value, table_type):
        entries = tuple(value)
    else:
        try:
            entries = tuple(value)
        except TypeError:
            raise LocaleError(
                f"locale {locale_name!r}: {field_name} must be a sequence of {arity} strings"
            ) from None
        if len(entries) != arity:
            raise LocaleError(
                f"locale {locale_name!r}: {field_name} needs {arity} entries, got {len(entries)}"
            )
    for position, entry in enumerate(entries):
        if not isinstance(entry, str):
            raise LocaleError(
                f"locale {locale_name!r}: {field_name}[{position}] "
                f"({table_type._fields[position]}) must be a string, got {type(entry).__name__}"
            )
    return value if isinstance(value, table_type) else table_type(*entries)


__all__ = ["Locale", "OrdinalFunc", "MeridiemFunc"]
