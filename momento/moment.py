"""Moment: an instant bound to a timezone and a locale.

Moment is the user-facing value type. It wraps an aware DateTime and a
Locale reference; every transformation returns a new Moment.

Examples:
    >>> from momento import Moment, Unit
    >>> m = Moment.parse("2024-03-01T00:00:00Z")
    >>> m.format("dddd, MMMM D, YYYY")
    'Friday, March 1, 2024'
    >>> m.add({(1, Unit.DAY)}).format("L")
    '03/02/2024'
    >>> m.end_of("day").format("HH:mm:ss.SSSSSSSSS")
    '23:59:59.999999999'
"""

from __future__ import annotations

from momento.core.datetime import DateTime
from momento.core.duration import Duration, DurationSpec, duration
from momento.core.truncate import end_of, start_of
from momento.core.week import locale_week_of_year
from momento.errors import ValidationError
from momento.format.calendar import CalendarOverrides, CalendarPolicy, calendar
from momento.format.parse import parse_datetime
from momento.format.rfc3339 import format_rfc3339
from momento.format.tokens import format_moment
from momento.locale.locale import Locale
from momento.locale.registry import get_locale
from momento.units.timezone import Timezone
from momento.units.unit import Unit

DEFAULT_FORMAT = "YYYY-MM-DDTHH:mm:ssZ"


def _resolve_locale(locale: Locale | str | None) -> Locale:
    if isinstance(locale, Locale):
        return locale
    return get_locale(locale)


def _resolve_timezone(timezone: Timezone | str) -> Timezone:
    if isinstance(timezone, Timezone):
        return timezone
    return Timezone.from_string(timezone)


def _local_zone(dt: DateTime) -> Timezone:
    return Timezone.local_at(dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second)


def _as_duration(span: Duration | DurationSpec) -> Duration:
    if isinstance(span, Duration):
        return span
    if isinstance(span, (str, bytes)):
        raise ValidationError(f"expected a Duration or (magnitude, unit) pairs, got {span!r}")
    return duration(span)


class Moment:
    """An immutable instant with a fixed-offset timezone and a locale.

    Moments compare and hash by the instant they denote; the locale and
    the zone are presentation only. A naive DateTime handed to the
    constructor is read as local wall-clock time, at the host offset in
    force on that date.

    Attributes:
        datetime: The aware DateTime in this Moment's zone.
        timezone: The zone the Moment is displayed in.
        locale_data: The bound Locale.
    """

    __slots__ = ("_dt", "_locale")

    def __init__(self, dt: DateTime, locale: Locale | str | None = None) -> None:
        if not isinstance(dt, DateTime):
            raise TypeError(f"expected DateTime, got {type(dt).__name__}")
        if dt.is_naive:
            dt = dt.replace_timezone(_local_zone(dt))
        self._dt: DateTime = dt
        self._locale: Locale = _resolve_locale(locale)

    def _with(self, dt: DateTime) -> Moment:
        moment = object.__new__(Moment)
        moment._dt = dt
        moment._locale = self._locale
        return moment

    # Construction

    @classmethod
    def now(cls, locale: Locale | str | None = None) -> Moment:
        """Return the current instant in the local zone."""
        return cls(DateTime.now(), locale)

    @classmethod
    def utc_now(cls, locale: Locale | str | None = None) -> Moment:
        """Return the current instant in UTC."""
        return cls(DateTime.utc_now(), locale)

    @classmethod
    def parse(
        cls,
        text: str,
        pattern: str | None = None,
        *,
        timezone: Timezone | str | None = None,
        locale: Locale | str | None = None,
    ) -> Moment:
        """Parse text into a Moment.

        Without ``pattern`` the text may be RFC 3339, ISO 8601 or RFC 2822;
        with one it is read by ``strptime``. Text without an offset is bound
        to ``timezone``, or when that is None to the host offset in force at
        the parsed wall-clock time. Text with an offset keeps it.

        Raises:
            ParseError: With ``text`` and ``pattern`` set, when parsing fails.

        Examples:
            >>> Moment.parse("1/3/2024 17:45", "%d/%m/%Y %H:%M", timezone="+01:00")
            Moment('2024-03-01T17:45:00+01:00', locale='en-us')
        """
        dt = parse_datetime(text, pattern)
        if dt.is_naive:
            zone = _local_zone(dt) if timezone is None else _resolve_timezone(timezone)
            dt = dt.replace_timezone(zone)
        return cls(dt, locale)

    @classmethod
    def from_datetime(cls, dt: DateTime, locale: Locale | str | None = None) -> Moment:
        return cls(dt, locale)

    @classmethod
    def from_timestamp(
        cls,
        seconds: int | float,
        *,
        timezone: Timezone | str | None = None,
        locale: Locale | str | None = None,
    ) -> Moment:
        """Create a Moment from Unix seconds, shown in ``timezone`` (local if None)."""
        zone = Timezone.local() if timezone is None else _resolve_timezone(timezone)
        return cls(DateTime.from_timestamp(seconds, timezone=zone), locale)

    # Zone conversion

    def utc(self) -> Moment:
        """Return the same instant in UTC."""
        return self._with(self._dt.to_utc())

    def local(self) -> Moment:
        """Return the same instant at the host's current local offset."""
        return self._with(self._dt.astimezone(Timezone.local()))

    def to_timezone(self, timezone: Timezone | str) -> Moment:
        """Return the same instant in ``timezone`` (a Timezone or "+05:30")."""
        return self._with(self._dt.astimezone(_resolve_timezone(timezone)))

    # Arithmetic

    def add(self, span: Duration | DurationSpec) -> Moment:
        """Return this Moment moved forward by ``span``.

        ``span`` is a Duration or ``(magnitude, Unit)`` pairs; months in the
        pairs count as four weeks.

        Raises:
            OverflowError: If the result is outside the supported range.
        """
        return self._with(self._dt + _as_duration(span))

    def subtract(self, span: Duration | DurationSpec) -> Moment:
        """Return this Moment moved back by ``span``."""
        return self._with(self._dt - _as_duration(span))

    def start_of(self, unit: Unit | str) -> Moment:
        """Return the first instant of the ``unit`` containing this Moment."""
        return self._with(start_of(self._dt, Unit.coerce(unit), self._locale.week))

    def end_of(self, unit: Unit | str) -> Moment:
        """Return the last nanosecond of the ``unit`` containing this Moment."""
        return self._with(end_of(self._dt, Unit.coerce(unit), self._locale.week))

    def diff(self, other: Moment) -> Duration:
        """Return the elapsed time from ``other`` to this Moment."""
        if not isinstance(other, Moment):
            raise TypeError(f"expected Moment, got {type(other).__name__}")
        return self._dt - other._dt

    # Presentation

    def format(self, pattern: str | None = None) -> str:
        """Render this Moment through a token pattern.

        Defaults to ``YYYY-MM-DDTHH:mm:ssZ``.

        Raises:
            UnsupportedTokenError: If the pattern uses ``z`` or ``zz``.
        """
        return format_moment(DEFAULT_FORMAT if pattern is None else pattern, self._dt, self._locale)

    def calendar(
        self,
        reference: Moment | None = None,
        formats: CalendarOverrides | None = None,
        policy: CalendarPolicy | None = None,
    ) -> str:
        """Describe this Moment relative to the day of ``reference`` (now if None).

        The reference is moved into this Moment's zone before its day is
        taken.

        Examples:
            >>> friday = Moment.parse("2024-03-01T09:00:00Z")
            >>> friday.add({(1, Unit.DAY)}).calendar(friday)
            'Tomorrow at 9:00 AM'
        """
        reference_dt = DateTime.now() if reference is None else reference.datetime
        reference_dt = reference_dt.astimezone(self._dt.timezone)
        return calendar(self._dt, reference_dt, self._locale, formats, policy)

    def locale(self, locale: Locale | str) -> Moment:
        """Return a copy of this Moment bound to ``locale``."""
        moment = self._with(self._dt)
        moment._locale = _resolve_locale(locale)
        return moment

    @property
    def locale_data(self) -> Locale:
        return self._locale

    # Accessors

    @property
    def datetime(self) -> DateTime:
        return self._dt

    @property
    def timezone(self) -> Timezone:
        return self._dt.timezone  # type: ignore[return-value]

    @property
    def year(self) -> int:
        return self._dt.year

    @property
    def month(self) -> int:
        return self._dt.month

    @property
    def day(self) -> int:
        return self._dt.day

    @property
    def hour(self) -> int:
        return self._dt.hour

    @property
    def minute(self) -> int:
        return self._dt.minute

    @property
    def second(self) -> int:
        return self._dt.second

    @property
    def nanosecond(self) -> int:
        return self._dt.nanosecond

    @property
    def weekday(self) -> int:
        """ISO day of week, Monday=0."""
        return self._dt.weekday

    @property
    def day_of_year(self) -> int:
        return self._dt.day_of_year

    @property
    def week(self) -> int:
        """Week of the year under the bound locale's week rules."""
        return locale_week_of_year(self._dt, self._locale.week)[0]

    @property
    def week_year(self) -> int:
        """Year owning this Moment's locale week."""
        return locale_week_of_year(self._dt, self._locale.week)[1]

    @property
    def iso_week(self) -> int:
        return self._dt.iso_week

    @property
    def iso_week_year(self) -> int:
        return self._dt.iso_week_year

    @property
    def unix(self) -> int:
        """Whole seconds since the Unix epoch (floored)."""
        return self._dt.to_unix_seconds()

    @property
    def unix_millis(self) -> int:
        return self._dt.to_unix_millis()

    # Comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Moment):
            return NotImplemented
        return self._dt == other._dt

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Moment):
            return NotImplemented
        return self._dt < other._dt

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Moment):
            return NotImplemented
        return self._dt <= other._dt

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Moment):
            return NotImplemented
        return self._dt > other._dt

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Moment):
            return NotImplemented
        return self._dt >= other._dt

    def __hash__(self) -> int:
        return hash(self._dt)

    def __repr__(self) -> str:
        return f"Moment({format_rfc3339(self._dt)!r}, locale={self._locale.name!r})"

    def __str__(self) -> str:
        return format_rfc3339(self._dt)


__all__ = ["DEFAULT_FORMAT", "Moment"]
