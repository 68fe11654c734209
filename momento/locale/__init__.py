"""Locales.

This package provides:
    - Table types: MonthNames, WeekdayNames, LongDateFormat,
      CalendarFormats, RelativeTime, WeekConfig, CalendarBucket
    - Locale: immutable bundle of tables and rules
    - EN_US, EN_GB: built-in locale data
    - LocaleRegistry, DEFAULT_REGISTRY, get_locale: name lookup
"""

from __future__ import annotations

from momento.locale.en_gb import EN_GB
from momento.locale.en_us import EN_US
from momento.locale.locale import Locale
from momento.locale.registry import (
    DEFAULT_REGISTRY,
    LocaleRegistry,
    get_locale,
    normalize_name,
)
from momento.locale.tables import (
    CalendarBucket,
    CalendarFormats,
    LongDateFormat,
    MonthNames,
    RelativeTime,
    WeekConfig,
    WeekdayNames,
)

__all__: list[str] = [
    "CalendarBucket",
    "CalendarFormats",
    "DEFAULT_REGISTRY",
    "EN_GB",
    "EN_US",
    "Locale",
    "LocaleRegistry",
    "LongDateFormat",
    "MonthNames",
    "RelativeTime",
    "WeekConfig",
    "WeekdayNames",
    "get_locale",
    "normalize_name",
]
