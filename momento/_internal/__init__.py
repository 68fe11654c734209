"""Internal utilities for Momento.

This package contains private implementation details:
    - Constants and unit conversions
    - Proleptic Gregorian calendar arithmetic on epoch days

Note: This package is not part of the public API.
"""

from __future__ import annotations

from momento._internal.calendar import (
    days_in_month,
    days_in_year,
    is_leap_year,
)

__all__: list[str] = [
    "days_in_month",
    "days_in_year",
    "is_leap_year",
]
