"""English (United Kingdom) locale data.

Shares names, phrases and ordinals with en-us. Weeks start on Monday with
ISO week-1 rules, dates read day-first, and times use the 24-hour clock.
"""

from __future__ import annotations

import dataclasses

from momento.locale.en_us import EN_US
from momento.locale.tables import LongDateFormat, WeekConfig

EN_GB = dataclasses.replace(
    EN_US,
    name="en-gb",
    long_date_format=LongDateFormat(
        LT="HH:mm",
        LTS="HH:mm:ss",
        L="DD/MM/YYYY",
        LL="D MMMM YYYY",
        LLL="D MMMM YYYY HH:mm",
        LLLL="dddd, D MMMM YYYY HH:mm",
    ),
    week=WeekConfig(dow=1, doy=4),
)


__all__ = ["EN_GB"]
