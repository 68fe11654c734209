"""Locale-aware week arithmetic.

Locales disagree on which day starts the week and on which week of January
is "week 1". These functions resolve week-of-year and week-year numbers
under a WeekConfig, including the rollover at both ends of the year:
early-January days can belong to the previous year's last week, and
late-December days to the next year's week 1.

ISO week numbers come straight from the DateTime primitive
(``DateTime.iso_week`` / ``DateTime.iso_week_year``).
"""

from __future__ import annotations

from momento._internal.calendar import days_in_year, weekday_from_sunday, ymd_to_days
from momento.core.datetime import DateTime
from momento.locale.tables import WeekConfig


def locale_day_of_week(dt: DateTime, week: WeekConfig) -> int:
    """Return the day's position within the locale week (0 = first day).

    Examples:
        >>> monday = DateTime(2024, 3, 4)
        >>> locale_day_of_week(monday, WeekConfig(dow=0, doy=6))
        1
        >>> locale_day_of_week(monday, WeekConfig(dow=1, doy=4))
        0
    """
    return (dt.weekday_from_sunday - week.dow + 7) % 7


def first_week_offset(year: int, week: WeekConfig) -> int:
    """Return the day-of-year offset at which week 1 of ``year`` starts.

    The result is negative when week 1 begins in the previous December:
    week 1 starts on day ``offset + 1`` of ``year``.
    """
    anchor = week.first_week_day
    anchor_weekday = weekday_from_sunday(ymd_to_days(year, 1, anchor))
    # Distance from the anchor back to the start of its locale week
    anchor_shift = (7 + anchor_weekday - week.dow) % 7
    return anchor - anchor_shift - 1


def weeks_in_year(year: int, week: WeekConfig) -> int:
    """Return the number of locale weeks (52 or 53) in ``year``.

    Examples:
        >>> weeks_in_year(2020, WeekConfig(dow=1, doy=4))
        53
        >>> weeks_in_year(2024, WeekConfig(dow=1, doy=4))
        52
    """
    offset = first_week_offset(year, week)
    next_offset = first_week_offset(year + 1, week)
    return (days_in_year(year) - offset + next_offset) // 7


def locale_week_of_year(dt: DateTime, week: WeekConfig) -> tuple[int, int]:
    """Return ``(week_number, week_year)`` for ``dt`` under ``week``.

    Examples:
        >>> iso_like = WeekConfig(dow=1, doy=4)
        >>> locale_week_of_year(DateTime(2021, 1, 3), iso_like)
        (53, 2020)
        >>> locale_week_of_year(DateTime(2024, 12, 30), iso_like)
        (1, 2025)
    """
    year = dt.year
    number = (dt.day_of_year - first_week_offset(year, week) - 1) // 7 + 1

    if number < 1:
        return (number + weeks_in_year(year - 1, week), year - 1)
    total = weeks_in_year(year, week)
    if number > total:
        return (number - total, year + 1)
    return (number, year)


def locale_week_year(dt: DateTime, week: WeekConfig) -> int:
    """Return the locale week-year that owns ``dt``."""
    return locale_week_of_year(dt, week)[1]


__all__ = [
    "locale_day_of_week",
    "first_week_offset",
    "weeks_in_year",
    "locale_week_of_year",
    "locale_week_year",
]
