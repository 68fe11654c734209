"""Core temporal types and engines.

This package provides:
    - DateTime: civil date and time with nanosecond precision
    - Duration: normalized signed span with nanosecond precision
    - duration: aggregator from (magnitude, Unit) pairs to a Duration
    - start_of / end_of: truncation to unit boundaries
    - locale_week_of_year and friends: locale-aware week numbering
"""

from __future__ import annotations

from momento.core.datetime import DateTime
from momento.core.duration import Duration, DurationSpec, duration
from momento.core.truncate import end_of, start_of
from momento.core.week import (
    first_week_offset,
    locale_day_of_week,
    locale_week_of_year,
    locale_week_year,
    weeks_in_year,
)

__all__: list[str] = [
    "DateTime",
    "Duration",
    "DurationSpec",
    "duration",
    "start_of",
    "end_of",
    "first_week_offset",
    "locale_day_of_week",
    "locale_week_of_year",
    "locale_week_year",
    "weeks_in_year",
]
