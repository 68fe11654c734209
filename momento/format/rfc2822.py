"""RFC 2822 (email ``Date:`` header) parsing.

Accepted shape::

    [Day, ] D Mon YYYY HH:MM[:SS] zone

Month and day names are English and case-insensitive. The zone is a
numeric ``+HHMM``/``-HHMM``, ``UT``, ``GMT``, ``Z``, or one of the obsolete
North American names (EST, EDT, CST, CDT, MST, MDT, PST, PDT). Two-digit
years 00-49 are 20xx, 50-99 are 19xx, and three-digit years add 1900.

Examples:
    >>> parse_rfc2822("Fri, 01 Mar 2024 09:30:00 +0100")
    DateTime(2024, 3, 1, 9, 30, 0, nanosecond=0, timezone=+01:00)
"""

from __future__ import annotations

import re

from momento.core.datetime import DateTime
from momento.errors import ParseError
from momento.units.timezone import Timezone

_MONTHS = ("jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec")
_WEEKDAYS = ("mon", "tue", "wed", "thu", "fri", "sat", "sun")

_NAMED_ZONES: dict[str, int] = {
    "UT": 0,
    "GMT": 0,
    "Z": 0,
    "EST": -5,
    "EDT": -4,
    "CST": -6,
    "CDT": -5,
    "MST": -7,
    "MDT": -6,
    "PST": -8,
    "PDT": -7,
}

_RFC2822_PATTERN = re.compile(
    r"^(?:(?P<weekday>[A-Za-z]{3})\s*,\s*)?"
    r"(?P<day>\d{1,2})\s+(?P<month>[A-Za-z]{3})\s+(?P<year>\d{2,4})\s+"
    r"(?P<hour>\d{2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?\s+"
    r"(?P<zone>[+-]\d{4}|[A-Za-z]{1,3})$"
)


def _full_year(text: str) -> int:
    year = int(text)
    if len(text) == 2:
        return year + (2000 if year < 50 else 1900)
    if len(text) == 3:
        return year + 1900
    return year


def _zone(text: str, source: str) -> Timezone:
    if text[0] in "+-":
        sign = -1 if text[0] == "-" else 1
        hours, minutes = int(text[1:3]), int(text[3:5])
        if minutes > 59:
            raise ParseError(f"Invalid RFC 2822 zone: {text!r}", text=source)
        return Timezone(sign * (hours * 3600 + minutes * 60))
    hours = _NAMED_ZONES.get(text.upper())
    if hours is None:
        raise ParseError(f"Unknown RFC 2822 zone: {text!r}", text=source)
    return Timezone.utc() if hours == 0 else Timezone(hours * 3600, name=text.upper())


def parse_rfc2822(s: str) -> DateTime:
    """Parse an RFC 2822 date into an aware DateTime.

    Raises:
        ParseError: If the text is not RFC 2822, names an unknown month or
            zone, or gives a weekday that disagrees with the date.
        ValidationError: If a component is out of range.
        TimezoneError: If a numeric zone exceeds 14 hours.

    Examples:
        >>> parse_rfc2822("1 mar 24 09:30 GMT").year
        2024
        >>> parse_rfc2822("Mon, 01 Mar 2024 09:30:00 GMT")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ParseError: Weekday 'Mon' does not match 2024-03-01
    """
    text = " ".join(s.split())
    match = _RFC2822_PATTERN.match(text)
    if match is None:
        raise ParseError(f"Invalid RFC 2822 date: {s!r}", text=s)

    month_name = match.group("month").lower()
    if month_name not in _MONTHS:
        raise ParseError(f"Unknown month name {match.group('month')!r}", text=s)

    result = DateTime(
        _full_year(match.group("year")),
        _MONTHS.index(month_name) + 1,
        int(match.group("day")),
        int(match.group("hour")),
        int(match.group("minute")),
        int(match.group("second") or 0),
        timezone=_zone(match.group("zone"), s),
    )

    weekday = match.group("weekday")
    if weekday is not None:
        if weekday.lower() not in _WEEKDAYS:
            raise ParseError(f"Unknown weekday name {weekday!r}", text=s)
        if _WEEKDAYS.index(weekday.lower()) != result.weekday:
            raise ParseError(
                f"Weekday {weekday!r} does not match "
                f"{result.year:04d}-{result.month:02d}-{result.day:02d}",
                text=s,
            )
    return result


__all__ = ["parse_rfc2822"]
