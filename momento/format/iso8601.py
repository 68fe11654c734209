"""ISO 8601 formatting and parsing.

Supported forms:

Extended:
    - YYYY-MM-DD
    - YYYY-MM-DDTHH:MM[:SS[.f]]  (``T`` or a space between date and time)
    - -YYYY-MM-DD / +YYYYY-MM-DD (signed and expanded years)

Basic:
    - YYYYMMDD
    - YYYYMMDDTHHMM[SS[.f]]

Any datetime may end in ``Z``, ``+HH:MM``, ``+HHMM`` or ``+HH``. Fractions
keep up to nine digits (nanoseconds).

Examples:
    >>> parse_iso8601("2024-03-01T09:30:00+01:00").hour
    9
    >>> parse_iso8601("20240301T0930Z")
    DateTime(2024, 3, 1, 9, 30, 0, nanosecond=0, timezone=UTC)
"""

from __future__ import annotations

import re

from momento.core.datetime import DateTime
from momento.errors import ParseError, TimezoneError
from momento.units.timezone import Timezone

_BASIC_PATTERN = re.compile(
    r"^(\d{4})(\d{2})(\d{2})"  # Date: YYYYMMDD
    r"(?:[Tt](\d{2})(\d{2})(\d{2})?"  # Time: THHMM[SS]
    r"(?:[.,](\d{1,9}))?"  # Optional fraction
    r"([Zz]|[+-]\d{2}(?::?\d{2})?)?)?$"  # Optional offset
)


def parse_iso8601(s: str) -> DateTime:
    """Parse an ISO 8601 date or datetime string.

    Args:
        s: The ISO 8601 text.

    Returns:
        A DateTime; naive unless the text carries an offset. A date alone
        yields midnight.

    Raises:
        ParseError: If the text is not ISO 8601.
        ValidationError: If a component is out of range.
    """
    text = s.strip()
    basic = _BASIC_PATTERN.match(text)
    if basic is None:
        return DateTime.from_iso_format(text)

    year, month, day = (int(basic.group(index)) for index in (1, 2, 3))
    if basic.group(4) is None:
        return DateTime(year, month, day)

    fraction = basic.group(7)
    timezone = None
    if basic.group(8):
        try:
            timezone = Timezone.from_string(basic.group(8))
        except TimezoneError as exc:
            raise ParseError(str(exc), text=s) from None

    return DateTime(
        year,
        month,
        day,
        int(basic.group(4)),
        int(basic.group(5)),
        int(basic.group(6) or 0),
        nanosecond=int(fraction.ljust(9, "0")) if fraction else 0,
        timezone=timezone,
    )


def format_iso8601(value: DateTime, *, precision: str = "auto") -> str:
    """Format a DateTime as ISO 8601 text.

    Args:
        value: The DateTime to format.
        precision: "auto", "seconds", "millis", "micros" or "nanos".

    Raises:
        TypeError: If value is not a DateTime.

    Examples:
        >>> format_iso8601(DateTime(2024, 1, 15, 14, 30, 45))
        '2024-01-15T14:30:45'
    """
    if not isinstance(value, DateTime):
        raise TypeError(f"expected DateTime, got {type(value).__name__}")
    return value.to_iso_format(precision=precision)


__all__ = ["parse_iso8601", "format_iso8601"]
