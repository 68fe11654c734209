"""Fixed-arity lookup tables that make up a Locale.

Every table is a NamedTuple (or a frozen dataclass for WeekConfig), so a
table cannot be built with a missing entry: month tables always hold 12
names, weekday tables 7, the long-date table its 6 macros, and so on.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

from momento.errors import LocaleError


class MonthNames(NamedTuple):
    """Twelve month names, indexed 0 (January) through 11 (December)."""

    january: str
    february: str
    march: str
    april: str
    may: str
    june: str
    july: str
    august: str
    september: str
    october: str
    november: str
    december: str


class WeekdayNames(NamedTuple):
    """Seven weekday names, indexed 0 (Sunday) through 6 (Saturday).

    The index is positional from Sunday regardless of the locale's first
    day of week.
    """

    sunday: str
    monday: str
    tuesday: str
    wednesday: str
    thursday: str
    friday: str
    saturday: str


class LongDateFormat(NamedTuple):
    """The six long-date macros a locale must define.

    Examples:
        >>> table = LongDateFormat("h:mm A", "h:mm:ss A", "MM/DD/YYYY",
        ...                        "MMMM D, YYYY", "MMMM D, YYYY h:mm A",
        ...                        "dddd, MMMM D, YYYY h:mm A")
        >>> table.get("LL")
        'MMMM D, YYYY'
        >>> table.get("LLLLL") is None
        True
    """

    LT: str
    LTS: str
    L: str
    LL: str
    LLL: str
    LLLL: str

    def get(self, key: str) -> str | None:
        """Return the expansion registered for ``key``, or None."""
        if key in self._fields:
            return getattr(self, key)
        return None


class CalendarBucket(Enum):
    """Relative-day classification of an instant against a reference day."""

    SAME_DAY = "same_day"
    NEXT_DAY = "next_day"
    NEXT_WEEK = "next_week"
    LAST_DAY = "last_day"
    LAST_WEEK = "last_week"
    SAME_ELSE = "same_else"


class CalendarFormats(NamedTuple):
    """One format string per CalendarBucket."""

    same_day: str
    next_day: str
    next_week: str
    last_day: str
    last_week: str
    same_else: str

    def for_bucket(self, bucket: CalendarBucket) -> str:
        return getattr(self, bucket.value)


class RelativeTime(NamedTuple):
    """Relative-time phrase templates (``%s`` / ``%d`` placeholders).

    Only the lookup lives here; building sentences from these templates is
    left to callers.
    """

    future: str
    past: str
    s: str
    ss: str
    m: str
    mm: str
    h: str
    hh: str
    d: str
    dd: str
    M: str
    MM: str
    y: str
    yy: str

    def get(self, key: str) -> str | None:
        """Return the template stored in slot ``key``, or None."""
        if key in self._fields:
            return getattr(self, key)
        return None


@dataclass(frozen=True)
class WeekConfig:
    """Locale week rules.

    Attributes:
        dow: Day that starts the week, 0 (Sunday) to 6 (Saturday).
        doy: Week-1 rule: ``7 + dow - doy`` is the January day that always
            falls in week 1. US convention is ``dow=0, doy=6`` (the week
            holding January 1); ISO convention is ``dow=1, doy=4`` (the
            week holding January 4).
    """

    dow: int = 0
    doy: int = 6

    def __post_init__(self) -> None:
        if not isinstance(self.dow, int) or isinstance(self.dow, bool) or not 0 <= self.dow <= 6:
            raise LocaleError(f"week dow must be 0-6, got {self.dow!r}")
        if (
            not isinstance(self.doy, int)
            or isinstance(self.doy, bool)
            or not 1 <= self.first_week_day <= 7
        ):
            raise LocaleError(
                f"week doy {self.doy!r} must put day 7 + dow - doy within January 1-7"
            )

    @property
    def first_week_day(self) -> int:
        """January day that is always inside week 1."""
        return 7 + self.dow - self.doy


__all__ = [
    "MonthNames",
    "WeekdayNames",
    "LongDateFormat",
    "CalendarBucket",
    "CalendarFormats",
    "RelativeTime",
    "WeekConfig",
]
