"""Calendar classification ("Today at 2:30 PM", "Last Monday at ...").

An instant is bucketed by its distance from the start of a reference day,
then formatted with the locale phrase for that bucket. Both the bucketing
policy and the phrases can be overridden per call.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Union

from momento._internal.constants import NANOS_PER_DAY
from momento.core.datetime import DateTime
from momento.core.truncate import start_of
from momento.errors import ValidationError
from momento.format.tokens import format_moment
from momento.locale.locale import Locale
from momento.locale.tables import CalendarBucket, CalendarFormats
from momento.units.unit import Unit

CalendarPolicy = Callable[[DateTime, DateTime], Union[CalendarBucket, str]]
CalendarOverrides = Union[CalendarFormats, Mapping[Union[CalendarBucket, str], str]]

# Upper bounds (exclusive, in days from the reference day's start)
_THRESHOLDS: tuple[tuple[int, CalendarBucket], ...] = (
    (-6, CalendarBucket.SAME_ELSE),
    (-1, CalendarBucket.LAST_WEEK),
    (0, CalendarBucket.LAST_DAY),
    (1, CalendarBucket.SAME_DAY),
    (2, CalendarBucket.NEXT_DAY),
    (7, CalendarBucket.NEXT_WEEK),
)


def default_calendar_policy(dt: DateTime, reference_start: DateTime) -> CalendarBucket:
    """Bucket ``dt`` by its exact day distance from ``reference_start``.

    ====================  ===========
    distance (days)       bucket
    ====================  ===========
    below -6              SAME_ELSE
    [-6, -1)              LAST_WEEK
    [-1, 0)               LAST_DAY
    [0, 1)                SAME_DAY
    [1, 2)                NEXT_DAY
    [2, 7)                NEXT_WEEK
    7 and above           SAME_ELSE
    ====================  ===========

    Examples:
        >>> start = DateTime(2024, 3, 1)
        >>> default_calendar_policy(DateTime(2024, 2, 29, 23, 59), start)
        <CalendarBucket.LAST_DAY: 'last_day'>
        >>> default_calendar_policy(DateTime(2024, 3, 8), start)
        <CalendarBucket.SAME_ELSE: 'same_else'>
    """
    distance = (dt - reference_start).total_nanoseconds
    for bound, bucket in _THRESHOLDS:
        if distance < bound * NANOS_PER_DAY:
            return bucket
    return CalendarBucket.SAME_ELSE


def phrase_for(
    bucket: CalendarBucket,
    locale: Locale,
    formats: CalendarOverrides | None = None,
) -> str:
    """Return the phrase for ``bucket``, preferring ``formats`` over the locale.

    A mapping may be keyed by CalendarBucket or by bucket value
    (``"same_day"``); buckets it lacks fall back to the locale.
    """
    if isinstance(formats, CalendarFormats):
        return formats.for_bucket(bucket)
    if formats is not None:
        for key in (bucket, bucket.value):
            if key in formats:
                return formats[key]
    return locale.calendar.for_bucket(bucket)


def calendar(
    dt: DateTime,
    reference: DateTime,
    locale: Locale,
    formats: CalendarOverrides | None = None,
    policy: CalendarPolicy | None = None,
) -> str:
    """Format ``dt`` with the calendar phrase chosen relative to ``reference``.

    Args:
        dt: Instant to describe.
        reference: Instant whose day is "today".
        locale: Locale supplying phrases and week rules.
        formats: Optional phrase overrides.
        policy: Optional replacement for ``default_calendar_policy``;
            receives ``(dt, start_of(reference, DAY))`` and returns a
            CalendarBucket or a bucket value.

    Raises:
        ValidationError: If the policy returns something that is not a
            bucket.

    Examples:
        >>> from momento.locale import get_locale
        >>> calendar(DateTime(2024, 3, 2, 9), DateTime(2024, 3, 1, 18), get_locale("en-us"))
        'Tomorrow at 9:00 AM'
    """
    reference_start = start_of(reference, Unit.DAY, locale.week)
    choose = default_calendar_policy if policy is None else policy
    bucket = _as_bucket(choose(dt, reference_start))
    return format_moment(phrase_for(bucket, locale, formats), dt, locale)


def _as_bucket(value: object) -> CalendarBucket:
    if isinstance(value, CalendarBucket):
        return value
    try:
        return CalendarBucket(value)
    except ValueError:
        raise ValidationError(f"calendar policy returned {value!r}, not a CalendarBucket") from None


__all__ = [
    "CalendarOverrides",
    "CalendarPolicy",
    "calendar",
    "default_calendar_policy",
    "phrase_for",
]
