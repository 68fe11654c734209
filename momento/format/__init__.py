"""Formatting and parsing.

This package provides:
    - expand_macros: locale long-date macro expansion (LT, LL, llll, ...)
    - format_moment: moment.js-style token formatting
    - calendar: relative-day phrasing ("Tomorrow at 9:00 AM")
    - parse_datetime: auto-detecting or pattern-driven parsing
    - ISO 8601, RFC 3339 and RFC 2822 codecs and strptime

Examples:
    >>> from momento.core import DateTime
    >>> from momento.locale import get_locale
    >>> format_moment("YYYY-MM-DD", DateTime(2024, 3, 1), get_locale("en-us"))
    '2024-03-01'
"""

from __future__ import annotations

from momento.format.calendar import calendar, default_calendar_policy, phrase_for
from momento.format.iso8601 import format_iso8601, parse_iso8601
from momento.format.macros import expand_macros, long_date_format
from momento.format.parse import parse_datetime
from momento.format.rfc2822 import parse_rfc2822
from momento.format.rfc3339 import format_rfc3339, parse_rfc3339
from momento.format.strptime import strptime
from momento.format.tokens import FORMAT_TOKENS, format_moment, format_token

__all__: list[str] = [
    # Token engine
    "FORMAT_TOKENS",
    "format_moment",
    "format_token",
    # Macros
    "expand_macros",
    "long_date_format",
    # Calendar
    "calendar",
    "default_calendar_policy",
    "phrase_for",
    # Parsing
    "parse_datetime",
    "parse_iso8601",
    "format_iso8601",
    "parse_rfc3339",
    "format_rfc3339",
    "parse_rfc2822",
    "strptime",
]
