"""Momento: locale-aware date formatting and calendar phrasing.

Momento renders instants through moment.js-style patterns, expands locale
long-date macros, numbers weeks under locale rules, and describes an
instant relative to a reference day ("Yesterday at 5:30 PM").

Core Types:
    Moment: Instant bound to a fixed-offset zone and a locale
    DateTime: Civil date and time with nanosecond precision
    Duration: Signed span with nanosecond precision
    Unit: Granularities from NANOSECOND to YEAR
    Timezone: UTC offset-based timezone
    Locale: Immutable bundle of locale tables and rules

Functions:
    duration: Aggregate (magnitude, Unit) pairs into a Duration
    start_of / end_of: Truncate a DateTime to a unit boundary
    format_moment: Render a DateTime through a token pattern
    expand_macros: Expand LT/LL/... macros for a locale
    calendar: Pick and render the calendar phrase for an instant
    get_locale: Look a locale up by name

Exceptions:
    MomentoError: Base exception
    ValidationError: Invalid input values
    ParseError: Failed to parse string
    OverflowError: Arithmetic overflow
    TimezoneError: Invalid timezone
    UnsupportedTokenError: Zone-name token requested
    LocaleError: Malformed or unknown locale

Example:
    >>> from momento import Moment
    >>> m = Moment.parse("2024-03-01T14:30:00Z")
    >>> m.format("LLLL")
    'Friday, March 1, 2024 2:30 PM'
    >>> m.locale("en-gb").format("LLLL")
    'Friday, 1 March 2024 14:30'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from momento.core.datetime import DateTime
from momento.core.duration import Duration, DurationSpec, duration
from momento.core.truncate import end_of, start_of

# Units
from momento.units.timezone import Timezone
from momento.units.unit import Unit

# Locales
from momento.locale import (
    DEFAULT_REGISTRY,
    EN_GB,
    EN_US,
    CalendarBucket,
    CalendarFormats,
    Locale,
    LocaleRegistry,
    WeekConfig,
    get_locale,
)

# Formatting
from momento.format import calendar, expand_macros, format_moment, parse_datetime

# Moment
from momento.moment import Moment

# Configuration
from momento.config import Settings, get_settings, reset_settings

# Exceptions
from momento.errors import (
    LocaleError,
    MomentoError,
    OverflowError,
    ParseError,
    TimezoneError,
    UnsupportedTokenError,
    ValidationError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "DateTime",
    "Duration",
    "DurationSpec",
    "Moment",
    "duration",
    "start_of",
    "end_of",
    # Units
    "Timezone",
    "Unit",
    # Locales
    "CalendarBucket",
    "CalendarFormats",
    "DEFAULT_REGISTRY",
    "EN_GB",
    "EN_US",
    "Locale",
    "LocaleRegistry",
    "WeekConfig",
    "get_locale",
    # Formatting
    "calendar",
    "expand_macros",
    "format_moment",
    "parse_datetime",
    # Configuration
    "Settings",
    "get_settings",
    "reset_settings",
    # Exceptions
    "MomentoError",
    "ValidationError",
    "ParseError",
    "OverflowError",
    "TimezoneError",
    "UnsupportedTokenError",
    "LocaleError",
]
