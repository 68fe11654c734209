"""English (United States) locale data.

This is the default locale: weeks start on Sunday, week 1 is the week
holding January 1, and times use the 12-hour clock.
"""

from __future__ import annotations

from momento.locale.locale import Locale
from momento.locale.tables import (
    CalendarFormats,
    LongDateFormat,
    MonthNames,
    RelativeTime,
    WeekConfig,
    WeekdayNames,
)

MONTHS = MonthNames(
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
MONTHS_SHORT = MonthNames(
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
WEEKDAYS = WeekdayNames(
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)
WEEKDAYS_SHORT = WeekdayNames("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
WEEKDAYS_MIN = WeekdayNames("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa")

CALENDAR = CalendarFormats(
    same_day="[Today at] LT",
    next_day="[Tomorrow at] LT",
    next_week="dddd [at] LT",
    last_day="[Yesterday at] LT",
    last_week="[Last] dddd [at] LT",
    same_else="L",
)

RELATIVE_TIME = RelativeTime(
    future="in %s",
    past="%s ago",
    s="a few seconds",
    ss="%d seconds",
    m="a minute",
    mm="%d minutes",
    h="an hour",
    hh="%d hours",
    d="a day",
    dd="%d days",
    M="a month",
    MM="%d months",
    y="a year",
    yy="%d years",
)

ORDINAL_PARSE = r"\d{1,2}(st|nd|rd|th)"


def english_ordinal(number: int) -> str:
    """Return ``number`` with its English ordinal suffix.

    Examples:
        >>> [english_ordinal(n) for n in (1, 2, 3, 4, 11, 12, 13, 21, 112)]
        ['1st', '2nd', '3rd', '4th', '11th', '12th', '13th', '21st', '112th']
    """
    if (number % 100) // 10 == 1:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return f"{number}{suffix}"


def english_meridiem(hour: int, minute: int) -> str:
    return "AM" if hour < 12 else "PM"


EN_US = Locale(
    name="en-us",
    invalid_date="Invalid Date",
    months=MONTHS,
    months_short=MONTHS_SHORT,
    weekdays=WEEKDAYS,
    weekdays_short=WEEKDAYS_SHORT,
    weekdays_min=WEEKDAYS_MIN,
    long_date_format=LongDateFormat(
        LT="h:mm A",
        LTS="h:mm:ss A",
        L="MM/DD/YYYY",
        LL="MMMM D, YYYY",
        LLL="MMMM D, YYYY h:mm A",
        LLLL="dddd, MMMM D, YYYY h:mm A",
    ),
    calendar=CALENDAR,
    relative_time=RELATIVE_TIME,
    ordinal_parse=ORDINAL_PARSE,
    ordinal=english_ordinal,
    week=WeekConfig(dow=0, doy=6),
    meridiem=english_meridiem,
)


__all__ = ["EN_US", "english_ordinal", "english_meridiem"]
