"""Internal constants for Momento.

Unit conversions, supported ranges and calendar tables shared by the
primitive and the formatting engine. Not part of the public API.
"""

from __future__ import annotations

# Sub-day units, all in nanoseconds
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000 * NANOS_PER_MICROSECOND
NANOS_PER_SECOND: int = 1_000 * NANOS_PER_MILLISECOND
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR
NANOS_PER_WEEK: int = 7 * NANOS_PER_DAY

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 3_600
SECONDS_PER_DAY: int = 86_400

# Supported civil years for DateTime
MIN_YEAR: int = -9999
MAX_YEAR: int = 9999

# Largest span magnitude: i64::MAX milliseconds, as nanoseconds
MAX_SPAN_NANOS: int = (2**63 - 1) * NANOS_PER_MILLISECOND

# Fixed UTC offsets are limited to +/-14 hours (Pacific/Kiritimati)
MAX_UTC_OFFSET_SECONDS: int = 14 * SECONDS_PER_HOUR

# Month lengths in a common year, indexed 1-12
DAYS_IN_MONTH: tuple[int, ...] = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Cumulative days before the first of each month in a common year
DAYS_BEFORE_MONTH: tuple[int, ...] = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "NANOS_PER_WEEK",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "MIN_YEAR",
    "MAX_YEAR",
    "MAX_SPAN_NANOS",
    "MAX_UTC_OFFSET_SECONDS",
    "DAYS_IN_MONTH",
    "DAYS_BEFORE_MONTH",
]
