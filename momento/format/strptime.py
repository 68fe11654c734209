"""strftime-style pattern parsing.

Supported Directives:
    %Y - Year, optionally signed (2024, -0044)
    %y - Two-digit year; 69-99 map to 19xx, 00-68 to 20xx
    %m - Month (1-12, optional leading zero)
    %d - Day of month (1-31, optional leading zero)
    %e - Day of month, optionally space padded
    %H - Hour, 24-hour clock
    %I - Hour, 12-hour clock (combine with %p)
    %M - Minute
    %S - Second
    %f - Fraction of a second, 1-9 digits
    %p - AM/PM (case-insensitive)
    %b - Abbreviated month name (Jan)
    %B - Full month name (January)
    %a - Abbreviated weekday name (Mon)
    %A - Full weekday name (Monday)
    %z - UTC offset (+0530, +05:30)
    %:z - UTC offset with colon (+05:30)
    %Z - UTC, GMT, UT, Z or a +HH:MM offset
    %% - Literal %

Names are matched against the en-us tables regardless of locale.

Examples:
    >>> strptime("2024-01-15 14:30:45", "%Y-%m-%d %H:%M:%S")
    DateTime(2024, 1, 15, 14, 30, 45, nanosecond=0)

    >>> strptime("Friday, March 1 2024 6:05 PM +0100", "%A, %B %d %Y %I:%M %p %z")
    DateTime(2024, 3, 1, 18, 5, 0, nanosecond=0, timezone=+01:00)
"""

from __future__ import annotations

import re

from momento.core.datetime import DateTime
from momento.errors import ParseError, TimezoneError, ValidationError
from momento.locale.en_us import MONTHS, MONTHS_SHORT, WEEKDAYS, WEEKDAYS_SHORT
from momento.units.timezone import Timezone


def _names(table: tuple[str, ...]) -> str:
    return "|".join(sorted((re.escape(name) for name in table), key=len, reverse=True))


# Directive -> (group name, regex)
_PARSE_PATTERNS: dict[str, tuple[str | None, str]] = {
    "%Y": ("year", r"[+-]?\d{4,6}"),
    "%y": ("year2", r"\d{2}"),
    "%m": ("month", r"\d{1,2}"),
    "%d": ("day", r"\d{1,2}"),
    "%e": ("day", r" ?\d{1,2}"),
    "%H": ("hour", r"\d{1,2}"),
    "%I": ("hour12", r"\d{1,2}"),
    "%M": ("minute", r"\d{2}"),
    "%S": ("second", r"\d{2}"),
    "%f": ("fraction", r"\d{1,9}"),
    "%p": ("meridiem", r"[AaPp][Mm]"),
    "%b": ("month_short", _names(MONTHS_SHORT)),
    "%B": ("month_long", _names(MONTHS)),
    "%a": ("weekday_short", _names(WEEKDAYS_SHORT)),
    "%A": ("weekday_long", _names(WEEKDAYS)),
    "%z": ("offset", r"[+-]\d{2}:?\d{2}"),
    "%:z": ("offset", r"[+-]\d{2}:\d{2}"),
    "%Z": ("zone", r"[A-Za-z]{1,3}|[+-]\d{2}:\d{2}"),
    "%%": (None, r"%"),
}

SUPPORTED_DIRECTIVES = tuple(_PARSE_PATTERNS)


def _format_to_regex(fmt: str) -> re.Pattern[str]:
    """Convert a strftime pattern to an anchored, case-insensitive regex.

    A directive used twice must match the same text both times.

    Raises:
        ValidationError: If the pattern holds an unsupported directive.
    """
    result: list[str] = []
    seen: set[str] = set()
    i = 0
    while i < len(fmt):
        if fmt[i] == "%" and i + 1 < len(fmt):
            directive = fmt[i : i + 3] if fmt[i + 1] == ":" else fmt[i : i + 2]
            if directive not in _PARSE_PATTERNS:
                raise ValidationError(
                    f"unsupported strptime directive: {directive}. "
                    f"Supported: {', '.join(SUPPORTED_DIRECTIVES)}"
                )
            name, regex = _PARSE_PATTERNS[directive]
            if name is None:
                result.append(regex)
            elif name in seen:
                result.append(f"(?P={name})")
            else:
                seen.add(name)
                result.append(f"(?P<{name}>{regex})")
            i += len(directive)
        elif fmt[i].isspace():
            result.append(r"\s+")
            while i < len(fmt) and fmt[i].isspace():
                i += 1
        else:
            result.append(re.escape(fmt[i]))
            i += 1

    return re.compile("^" + "".join(result) + "$", re.IGNORECASE)


def _lookup(name: str, table: tuple[str, ...]) -> int:
    lowered = [entry.lower() for entry in table]
    return lowered.index(name.lower())


def strptime(s: str, fmt: str) -> DateTime:
    """Parse ``s`` according to the strftime-style pattern ``fmt``.

    Missing time components default to zero. The result is naive unless
    the pattern parses a zone (%z, %:z or %Z).

    Args:
        s: The text to parse.
        fmt: Pattern with %-directives.

    Returns:
        The parsed DateTime.

    Raises:
        ParseError: If the text does not match, lacks a year, month or day,
            names a zone that is not an offset, or gives a weekday that
            disagrees with the date.
        ValidationError: If the pattern is unsupported or a component is
            out of range.
    """
    match = _format_to_regex(fmt).match(s.strip())
    if match is None:
        raise ParseError(f"string {s!r} does not match format {fmt!r}", text=s, pattern=fmt)
    groups = {key: value for key, value in match.groupdict().items() if value is not None}

    year: int | None = None
    if "year" in groups:
        year = int(groups["year"])
    elif "year2" in groups:
        short_year = int(groups["year2"])
        year = short_year + (1900 if short_year >= 69 else 2000)

    month: int | None = None
    if "month" in groups:
        month = int(groups["month"])
    elif "month_long" in groups:
        month = _lookup(groups["month_long"], MONTHS) + 1
    elif "month_short" in groups:
        month = _lookup(groups["month_short"], MONTHS_SHORT) + 1

    day = int(groups["day"]) if "day" in groups else None
    if year is None or month is None or day is None:
        raise ParseError(
            "strptime requires year, month, and day components. "
            f"Got: year={year}, month={month}, day={day}",
            text=s,
            pattern=fmt,
        )

    if "hour12" in groups:
        hour12 = int(groups["hour12"])
        if not 1 <= hour12 <= 12:
            raise ValidationError(f"12-hour clock hour must be 1-12, got {hour12}")
        hour = hour12 % 12
        if groups.get("meridiem", "am").lower() == "pm":
            hour += 12
    else:
        hour = int(groups.get("hour", 0))

    fraction = groups.get("fraction")
    timezone = _parse_zone(groups, s, fmt)

    result = DateTime(
        year,
        month,
        day,
        hour,
        int(groups.get("minute", 0)),
        int(groups.get("second", 0)),
        nanosecond=int(fraction.ljust(9, "0")) if fraction else 0,
        timezone=timezone,
    )

    if "weekday_long" in groups:
        weekday = _lookup(groups["weekday_long"], WEEKDAYS)
    elif "weekday_short" in groups:
        weekday = _lookup(groups["weekday_short"], WEEKDAYS_SHORT)
    else:
        weekday = None
    if weekday is not None and weekday != result.weekday_from_sunday:
        raise ParseError(
            f"weekday in {s!r} does not match the date "
            f"{result.year:04d}-{result.month:02d}-{result.day:02d}",
            text=s,
            pattern=fmt,
        )
    return result


def _parse_zone(groups: dict[str, str], s: str, fmt: str) -> Timezone | None:
    text = groups.get("offset") or groups.get("zone")
    if text is None:
        return None
    try:
        return Timezone.from_string(text)
    except TimezoneError as exc:
        raise ParseError(f"{exc}; zone names other than UTC are not resolved", text=s, pattern=fmt) from None


__all__ = ["SUPPORTED_DIRECTIVES", "strptime"]
