"""Proleptic Gregorian calendar helpers.

Dates are handled as *epoch days*: the number of days since 1970-01-01,
negative before it. The conversions use the era-based algorithm (400-year
cycles of 146097 days), which is exact for every year including year 0
and BCE years without special cases.

This module is not part of the public API.
"""

from __future__ import annotations

from momento._internal.constants import (
    DAYS_BEFORE_MONTH,
    DAYS_IN_MONTH,
    MAX_YEAR,
    MIN_YEAR,
)

_DAYS_PER_ERA = 146_097
# Days from 0000-03-01 to 1970-01-01
_EPOCH_SHIFT = 719_468


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    Divisible by 4 and not by 100, unless also divisible by 400.

    Examples:
        >>> is_leap_year(2024), is_leap_year(1900), is_leap_year(2000)
        (True, False, True)
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` (1-12) of ``year``."""
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based ordinal day within the year."""
    leap_shift = 1 if month > 2 and is_leap_year(year) else 0
    return DAYS_BEFORE_MONTH[month] + leap_shift + day


def ymd_to_days(year: int, month: int, day: int) -> int:
    """Convert a civil date to epoch days.

    Examples:
        >>> ymd_to_days(1970, 1, 1)
        0
        >>> ymd_to_days(2024, 3, 1)
        19783
    """
    # Shift so the year starts in March; February's leap day falls last.
    y = year - 1 if month <= 2 else year
    era = y // 400
    year_of_era = y - era * 400
    shifted_month = month - 3 if month > 2 else month + 9
    day_of_era_year = (153 * shifted_month + 2) // 5 + day - 1
    day_of_era = (
        year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_era_year
    )
    return era * _DAYS_PER_ERA + day_of_era - _EPOCH_SHIFT


def days_to_ymd(days: int) -> tuple[int, int, int]:
    """Convert epoch days back to ``(year, month, day)``.

    Examples:
        >>> days_to_ymd(0)
        (1970, 1, 1)
        >>> days_to_ymd(-1)
        (1969, 12, 31)
    """
    z = days + _EPOCH_SHIFT
    era = z // _DAYS_PER_ERA
    day_of_era = z - era * _DAYS_PER_ERA
    year_of_era = (
        day_of_era
        - day_of_era // 1460
        + day_of_era // 36524
        - day_of_era // (_DAYS_PER_ERA - 1)
    ) // 365
    day_of_era_year = day_of_era - (
        365 * year_of_era + year_of_era // 4 - year_of_era // 100
    )
    shifted_month = (5 * day_of_era_year + 2) // 153
    day = day_of_era_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = year_of_era + era * 400 + (1 if month <= 2 else 0)
    return (year, month, day)


def weekday(days: int) -> int:
    """Return the ISO day of week for epoch days (Monday=0, Sunday=6)."""
    # 1970-01-01 was a Thursday
    return (days + 3) % 7


def weekday_from_sunday(days: int) -> int:
    """Return the day of week counted from Sunday (Sunday=0, Saturday=6)."""
    return (days + 4) % 7


def iso_week_date(days: int) -> tuple[int, int]:
    """Return ``(iso_week_year, iso_week)`` for epoch days.

    ISO weeks start on Monday and week 1 is the week holding the year's
    first Thursday, so the ISO year is the year of that week's Thursday.

    Examples:
        >>> iso_week_date(ymd_to_days(2024, 12, 30))
        (2025, 1)
        >>> iso_week_date(ymd_to_days(2021, 1, 3))
        (2020, 53)
    """
    thursday = days - weekday(days) + 3
    iso_year = days_to_ymd(thursday)[0]
    week = (thursday - ymd_to_days(iso_year, 1, 1)) // 7 + 1
    return (iso_year, week)


def validate_date(year: int, month: int, day: int) -> None:
    """Validate that year, month, day form a supported date.

    Raises:
        ValueError: If any component is out of range.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ValueError(f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}")
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValueError(f"day must be 1-{max_day} for {year}-{month:02d}, got {day}")


MIN_EPOCH_DAYS: int = ymd_to_days(MIN_YEAR, 1, 1)
MAX_EPOCH_DAYS: int = ymd_to_days(MAX_YEAR, 12, 31)


__all__ = [
    "is_leap_year",
    "days_in_year",
    "days_in_month",
    "day_of_year",
    "ymd_to_days",
    "days_to_ymd",
    "weekday",
    "weekday_from_sunday",
    "iso_week_date",
    "validate_date",
    "MIN_EPOCH_DAYS",
    "MAX_EPOCH_DAYS",
]
