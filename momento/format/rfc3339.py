"""RFC 3339 formatting and parsing.

RFC 3339 is the internet profile of ISO 8601: the ``T`` separator, seconds
and an offset (``Z`` or ``+HH:MM``) are all mandatory. It is the first
format tried when a Moment is parsed without a pattern, and the form
``str(moment)`` produces.

Examples:
    >>> parse_rfc3339("2024-01-15T14:30:45+05:30")
    DateTime(2024, 1, 15, 14, 30, 45, nanosecond=0, timezone=+05:30)
"""

from __future__ import annotations

import re

from momento.core.datetime import DateTime
from momento.errors import ParseError, TimezoneError
from momento.units.timezone import Timezone

_RFC3339_PATTERN = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})"  # Date: YYYY-MM-DD
    r"[Tt]"  # T separator (case insensitive)
    r"(\d{2}):(\d{2}):(\d{2})"  # Time: HH:MM:SS
    r"(?:\.(\d{1,9}))?"  # Optional fractional seconds
    r"([Zz]|[+-]\d{2}:\d{2})$"  # Required offset
)


def parse_rfc3339(s: str) -> DateTime:
    """Parse an RFC 3339 timestamp into an aware DateTime.

    Raises:
        ParseError: If the text is not RFC 3339.
        ValidationError: If a component is out of range.

    Examples:
        >>> parse_rfc3339("2024-01-15T14:30:45.123456789Z").nanosecond
        123456789
        >>> parse_rfc3339("2024-01-15 14:30:45Z")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ParseError: Invalid RFC 3339 timestamp...
    """
    match = _RFC3339_PATTERN.match(s.strip())
    if match is None:
        raise ParseError(
            f"Invalid RFC 3339 timestamp: {s!r}. "
            "Expected YYYY-MM-DDTHH:MM:SS[.fraction](Z|+HH:MM)",
            text=s,
        )

    year, month, day, hour, minute, second = (int(match.group(i)) for i in range(1, 7))
    fraction = match.group(7)
    try:
        timezone = Timezone.from_string(match.group(8))
    except TimezoneError as exc:
        raise ParseError(str(exc), text=s) from None

    return DateTime(
        year,
        month,
        day,
        hour,
        minute,
        second,
        nanosecond=int(fraction.ljust(9, "0")) if fraction else 0,
        timezone=timezone,
    )


def format_rfc3339(value: DateTime, *, precision: str = "auto") -> str:
    """Format an aware DateTime as RFC 3339 text.

    Raises:
        TypeError: If value is not a DateTime.
        TimezoneError: If value is naive.

    Examples:
        >>> dt = DateTime(2024, 1, 15, 14, 30, 45, millisecond=120, timezone=Timezone.utc())
        >>> format_rfc3339(dt, precision="millis")
        '2024-01-15T14:30:45.120Z'
    """
    if not isinstance(value, DateTime):
        raise TypeError(f"expected DateTime, got {type(value).__name__}")
    if value.timezone is None:
        raise TimezoneError(
            "RFC 3339 requires timezone information. "
            "Use format_iso8601 for naive datetimes or add a timezone."
        )
    return value.to_iso_format(precision=precision)


__all__ = ["parse_rfc3339", "format_rfc3339"]
