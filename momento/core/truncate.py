"""Start-of / end-of truncation.

``start_of`` resets every field finer than the unit, composing the finer
truncations recursively (DAY is start of HOUR with the hour zeroed, and so
on). ``end_of`` is the last nanosecond before the next unit boundary.
"""

from __future__ import annotations

from momento._internal.constants import NANOS_PER_MICROSECOND, NANOS_PER_MILLISECOND
from momento.core.datetime import DateTime
from momento.core.duration import Duration, duration
from momento.core.week import locale_day_of_week
from momento.locale.tables import WeekConfig
from momento.units.unit import Unit

DEFAULT_WEEK = WeekConfig()

# Calendar-length units, stepped with add_months
_CALENDAR_MONTHS: dict[Unit, int] = {
    Unit.MONTH: 1,
    Unit.QUARTER: 3,
    Unit.YEAR: 12,
}

_ONE_NANOSECOND = Duration(nanoseconds=1)


def start_of(dt: DateTime, unit: Unit, week: WeekConfig = DEFAULT_WEEK) -> DateTime:
    """Return ``dt`` rounded down to the start of ``unit``.

    WEEK steps back to the locale's first day of week, ISO_WEEK to Monday.
    QUARTER lands on January, April, July or October.

    Examples:
        >>> start_of(DateTime(2024, 5, 17, 13, 45), Unit.QUARTER)
        DateTime(2024, 4, 1, 0, 0, 0, nanosecond=0)
        >>> start_of(DateTime(2024, 3, 1, 8), Unit.WEEK)  # Friday -> Sunday
        DateTime(2024, 2, 25, 0, 0, 0, nanosecond=0)
    """
    if unit is Unit.NANOSECOND:
        return dt
    if unit is Unit.MICROSECOND:
        return dt.replace(nanosecond=dt.nanosecond - dt.nanosecond % NANOS_PER_MICROSECOND)
    if unit is Unit.MILLISECOND:
        finer = start_of(dt, Unit.MICROSECOND, week)
        return finer.replace(nanosecond=finer.nanosecond - finer.nanosecond % NANOS_PER_MILLISECOND)
    if unit is Unit.SECOND:
        return start_of(dt, Unit.MILLISECOND, week).replace(nanosecond=0)
    if unit is Unit.MINUTE:
        return start_of(dt, Unit.SECOND, week).replace(second=0)
    if unit is Unit.HOUR:
        return start_of(dt, Unit.MINUTE, week).replace(minute=0)
    if unit is Unit.DAY:
        return start_of(dt, Unit.HOUR, week).replace(hour=0)
    if unit is Unit.WEEK:
        day = start_of(dt, Unit.DAY, week)
        return day.add_days(-locale_day_of_week(day, week))
    if unit is Unit.ISO_WEEK:
        day = start_of(dt, Unit.DAY, week)
        return day.add_days(-day.weekday)
    if unit is Unit.MONTH:
        return start_of(dt, Unit.DAY, week).replace(day=1)
    if unit is Unit.QUARTER:
        first = start_of(dt, Unit.MONTH, week)
        return first.replace(month=first.month - (first.month - 1) % 3)
    if unit is Unit.YEAR:
        return start_of(dt, Unit.MONTH, week).replace(month=1)
    raise TypeError(f"expected a Unit, got {unit!r}")


def next_boundary(start: DateTime, unit: Unit) -> DateTime:
    """Return the start of the unit following the one that begins at ``start``."""
    months = _CALENDAR_MONTHS.get(unit)
    if months is not None:
        return start.add_months(months)
    return start + duration({(1, unit)})


def end_of(dt: DateTime, unit: Unit, week: WeekConfig = DEFAULT_WEEK) -> DateTime:
    """Return the last nanosecond of the ``unit`` containing ``dt``.

    Raises:
        OverflowError: If the next boundary is past the supported range.

    Examples:
        >>> end_of(DateTime(2024, 2, 10, 6), Unit.MONTH)
        DateTime(2024, 2, 29, 23, 59, 59, nanosecond=999999999)
    """
    return next_boundary(start_of(dt, unit, week), unit) - _ONE_NANOSECOND


__all__ = ["DEFAULT_WEEK", "start_of", "end_of", "next_boundary"]
