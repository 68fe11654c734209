"""DateTime: the civil date-time primitive under Moment.

This module provides the DateTime class, an instant with nanosecond
precision and an optional fixed-offset timezone. It supplies the field
accessors, checked span arithmetic and calendar month arithmetic that the
formatting engine builds on.
"""

from __future__ import annotations

import re
import time as _time
from typing import TYPE_CHECKING, overload

from momento._internal.calendar import (
    MAX_EPOCH_DAYS,
    MIN_EPOCH_DAYS,
    day_of_year,
    days_in_month,
    days_to_ymd,
    iso_week_date,
    validate_date,
    weekday,
    weekday_from_sunday,
    ymd_to_days,
)
from momento._internal.constants import (
    MAX_YEAR,
    MIN_YEAR,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from momento.errors import OverflowError, ParseError, TimezoneError, ValidationError
from momento.units.timezone import Timezone

if TYPE_CHECKING:
    from momento.core.duration import Duration

_ISO_DATE = re.compile(r"^([+-]?\d{4,6})-(\d{2})-(\d{2})$")
_ISO_TIME = re.compile(r"^(\d{2}):(\d{2})(?::(\d{2})(?:[.,](\d{1,9}))?)?$")
_ISO_ZONE = re.compile(r"([Zz]|[+-]\d{2}(?::?\d{2})?)$")


class DateTime:
    """A date and time of day with nanosecond precision.

    The local wall-clock value is stored as *epoch days* (days since
    1970-01-01) plus nanoseconds since midnight, with an optional
    Timezone. Aware instances compare and hash by the instant they denote;
    naive instances compare by wall-clock value and cannot be mixed with
    aware ones.

    Attributes:
        year, month, day: Civil date (year may be 0 or negative).
        hour, minute, second, nanosecond: Time of day.
        timezone: The fixed-offset zone, or None if naive.

    Examples:
        >>> dt = DateTime(2024, 3, 1, 9, 30, timezone=Timezone.utc())
        >>> dt.weekday  # Friday, Monday=0
        4
        >>> dt.day_of_year
        61
        >>> dt.add_months(1)
        DateTime(2024, 4, 1, 9, 30, 0, nanosecond=0, timezone=UTC)
    """

    __slots__ = ("_days", "_nanos", "_tz")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        millisecond: int = 0,
        microsecond: int = 0,
        nanosecond: int = 0,
        timezone: Timezone | None = None,
    ) -> None:
        """Create a DateTime from component parts.

        ``millisecond`` and ``microsecond`` are added to ``nanosecond``; the
        combined fraction must stay below one second.

        Raises:
            ValidationError: If any component is out of range.
        """
        for label, value in (
            ("year", year),
            ("month", month),
            ("day", day),
            ("hour", hour),
            ("minute", minute),
            ("second", second),
            ("millisecond", millisecond),
            ("microsecond", microsecond),
            ("nanosecond", nanosecond),
        ):
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValidationError(f"{label} must be an integer, got {type(value).__name__}")
        try:
            validate_date(year, month, day)
        except ValueError as exc:
            raise ValidationError(str(exc)) from None
        if not 0 <= hour <= 23:
            raise ValidationError(f"hour must be 0-23, got {hour}")
        if not 0 <= minute <= 59:
            raise ValidationError(f"minute must be 0-59, got {minute}")
        if not 0 <= second <= 59:
            raise ValidationError(f"second must be 0-59, got {second}")
        fraction = (
            millisecond * NANOS_PER_MILLISECOND
            + microsecond * NANOS_PER_MICROSECOND
            + nanosecond
        )
        if not 0 <= fraction < NANOS_PER_SECOND:
            raise ValidationError(f"sub-second fraction must be 0-999999999 ns, got {fraction}")

        self._days: int = ymd_to_days(year, month, day)
        self._nanos: int = (
            hour * NANOS_PER_HOUR
            + minute * NANOS_PER_MINUTE
            + second * NANOS_PER_SECOND
            + fraction
        )
        self._tz: Timezone | None = timezone

    @classmethod
    def _from_internal(cls, days: int, nanos: int, tz: Timezone | None) -> DateTime:
        """Build from epoch days + nanos, carrying overflow between them.

        Raises:
            OverflowError: If the result falls outside the supported years.
        """
        carry, nanos = divmod(nanos, NANOS_PER_DAY)
        days += carry
        if days < MIN_EPOCH_DAYS or days > MAX_EPOCH_DAYS:
            raise OverflowError(
                f"datetime is outside the supported range of years {MIN_YEAR}..{MAX_YEAR}"
            )
        instance = object.__new__(cls)
        instance._days = days
        instance._nanos = nanos
        instance._tz = tz
        return instance

    @classmethod
    def now(cls, timezone: Timezone | None = None) -> DateTime:
        """Return the current instant in ``timezone`` (local offset if None)."""
        zone = timezone if timezone is not None else Timezone.local()
        return cls.from_unix_nanos(_time.time_ns(), timezone=zone)

    @classmethod
    def utc_now(cls) -> DateTime:
        """Return the current instant in UTC."""
        return cls.from_unix_nanos(_time.time_ns(), timezone=Timezone.utc())

    @classmethod
    def from_unix_nanos(cls, nanos: int, *, timezone: Timezone | None = None) -> DateTime:
        """Create a DateTime from nanoseconds since the Unix epoch.

        For an aware result the wall clock is shifted into ``timezone``; a
        naive result reads the epoch value as wall-clock UTC.

        Examples:
            >>> DateTime.from_unix_nanos(0, timezone=Timezone.from_hours(2))
            DateTime(1970, 1, 1, 2, 0, 0, nanosecond=0, timezone=+02:00)
        """
        if timezone is not None:
            nanos += timezone.offset_seconds * NANOS_PER_SECOND
        return cls._from_internal(0, nanos, timezone)

    @classmethod
    def from_timestamp(cls, seconds: int | float, *, timezone: Timezone | None = None) -> DateTime:
        """Create a DateTime from Unix seconds (fractions kept to the nanosecond)."""
        if isinstance(seconds, float):
            return cls.from_unix_nanos(round(seconds * NANOS_PER_SECOND), timezone=timezone)
        return cls.from_unix_nanos(seconds * NANOS_PER_SECOND, timezone=timezone)

    @classmethod
    def from_iso_format(cls, s: str) -> DateTime:
        """Parse an ISO 8601 datetime.

        Accepts ``YYYY-MM-DD``, ``YYYY-MM-DDTHH:MM[:SS[.f]]`` (``T`` or a
        space as separator) with an optional ``Z``/``+HH:MM``/``+HHMM``/``+HH``
        suffix. Up to nine fractional digits are kept.

        Raises:
            ParseError: If the text is not ISO 8601.
            ValidationError: If a component is out of range.

        Examples:
            >>> DateTime.from_iso_format("2024-01-15T14:30:45.5Z")
            DateTime(2024, 1, 15, 14, 30, 45, nanosecond=500000000, timezone=UTC)
        """
        text = s.strip()
        if not text:
            raise ParseError("empty datetime string", text=s)

        if "T" in text or "t" in text:
            date_part, time_part = re.split(r"[Tt]", text, maxsplit=1)
        elif " " in text:
            date_part, time_part = text.split(" ", 1)
        else:
            date_part, time_part = text, ""

        date_match = _ISO_DATE.match(date_part)
        if not date_match:
            raise ParseError(f"Invalid ISO 8601 date: {date_part!r}", text=s)
        year, month, day = (int(group) for group in date_match.groups())
        if not time_part:
            return cls(year, month, day)

        timezone = None
        zone_match = _ISO_ZONE.search(time_part)
        if zone_match:
            try:
                timezone = Timezone.from_string(zone_match.group(1))
            except TimezoneError as exc:
                raise ParseError(str(exc), text=s) from None
            time_part = time_part[: zone_match.start()]

        time_match = _ISO_TIME.match(time_part.strip())
        if not time_match:
            raise ParseError(f"Invalid ISO 8601 time: {time_part!r}", text=s)
        hour, minute = int(time_match.group(1)), int(time_match.group(2))
        second = int(time_match.group(3) or 0)
        fraction = time_match.group(4)
        nanosecond = int(fraction.ljust(9, "0")) if fraction else 0
        return cls(
            year, month, day, hour, minute, second,
            nanosecond=nanosecond, timezone=timezone,
        )

    # Date fields

    @property
    def year(self) -> int:
        return days_to_ymd(self._days)[0]

    @property
    def month(self) -> int:
        return days_to_ymd(self._days)[1]

    @property
    def day(self) -> int:
        return days_to_ymd(self._days)[2]

    @property
    def weekday(self) -> int:
        """ISO day of week, Monday=0 through Sunday=6."""
        return weekday(self._days)

    @property
    def weekday_from_sunday(self) -> int:
        """Day of week counted from Sunday, Sunday=0 through Saturday=6."""
        return weekday_from_sunday(self._days)

    @property
    def day_of_year(self) -> int:
        """Ordinal day within the year, 1-366."""
        year, month, day = days_to_ymd(self._days)
        return day_of_year(year, month, day)

    @property
    def iso_week(self) -> int:
        """ISO 8601 week number, 1-53."""
        return iso_week_date(self._days)[1]

    @property
    def iso_week_year(self) -> int:
        """Year that owns this date's ISO week."""
        return iso_week_date(self._days)[0]

    # Time fields

    @property
    def hour(self) -> int:
        return self._nanos // NANOS_PER_HOUR

    @property
    def minute(self) -> int:
        return (self._nanos % NANOS_PER_HOUR) // NANOS_PER_MINUTE

    @property
    def second(self) -> int:
        return (self._nanos % NANOS_PER_MINUTE) // NANOS_PER_SECOND

    @property
    def millisecond(self) -> int:
        return (self._nanos % NANOS_PER_SECOND) // NANOS_PER_MILLISECOND

    @property
    def microsecond(self) -> int:
        return (self._nanos % NANOS_PER_SECOND) // NANOS_PER_MICROSECOND

    @property
    def nanosecond(self) -> int:
        """Sub-second fraction in nanoseconds, 0-999999999."""
        return self._nanos % NANOS_PER_SECOND

    # Timezone

    @property
    def timezone(self) -> Timezone | None:
        return self._tz

    @property
    def is_naive(self) -> bool:
        return self._tz is None

    @property
    def is_aware(self) -> bool:
        return self._tz is not None

    @property
    def offset_seconds(self) -> int:
        """UTC offset in seconds; zero for naive values."""
        return self._tz.offset_seconds if self._tz is not None else 0

    def replace_timezone(self, timezone: Timezone | None) -> DateTime:
        """Attach (or drop) a timezone without moving the wall clock."""
        return DateTime._from_internal(self._days, self._nanos, timezone)

    def astimezone(self, timezone: Timezone) -> DateTime:
        """Return the same instant expressed in ``timezone``.

        Raises:
            TimezoneError: If this DateTime is naive.
        """
        if self._tz is None:
            raise TimezoneError(
                "Cannot convert naive datetime to timezone. "
                "Use replace_timezone() to add a timezone first."
            )
        shift = (timezone.offset_seconds - self._tz.offset_seconds) * NANOS_PER_SECOND
        return DateTime._from_internal(self._days, self._nanos + shift, timezone)

    def to_utc(self) -> DateTime:
        """Return the same instant in UTC."""
        return self.astimezone(Timezone.utc())

    # Unix time; naive values are read as UTC

    def to_unix_nanos(self) -> int:
        return self._days * NANOS_PER_DAY + self._nanos - self.offset_seconds * NANOS_PER_SECOND

    def to_unix_millis(self) -> int:
        return self.to_unix_nanos() // NANOS_PER_MILLISECOND

    def to_unix_seconds(self) -> int:
        return self.to_unix_nanos() // NANOS_PER_SECOND

    # Derivation

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        *,
        nanosecond: int | None = None,
        timezone: Timezone | None | object = ...,
    ) -> DateTime:
        """Return a copy with the given fields replaced.

        Omit ``timezone`` to keep the current one; pass None to make the
        result naive.

        Raises:
            ValidationError: If the resulting date or time is invalid.
        """
        current_year, current_month, current_day = days_to_ymd(self._days)
        return DateTime(
            current_year if year is None else year,
            current_month if month is None else month,
            current_day if day is None else day,
            self.hour if hour is None else hour,
            self.minute if minute is None else minute,
            self.second if second is None else second,
            nanosecond=self.nanosecond if nanosecond is None else nanosecond,
            timezone=self._tz if timezone is ... else timezone,  # type: ignore[arg-type]
        )

    def add_days(self, days: int) -> DateTime:
        """Move the wall-clock date by ``days``, keeping the time of day."""
        return DateTime._from_internal(self._days + days, self._nanos, self._tz)

    def add_months(self, months: int) -> DateTime:
        """Move by calendar months, clamping the day to the target month.

        Raises:
            OverflowError: If the result is outside the supported years.

        Examples:
            >>> DateTime(2024, 1, 31).add_months(1)
            DateTime(2024, 2, 29, 0, 0, 0, nanosecond=0)
        """
        year, month, day = days_to_ymd(self._days)
        year_shift, month0 = divmod(month - 1 + months, 12)
        new_year = year + year_shift
        if new_year < MIN_YEAR or new_year > MAX_YEAR:
            raise OverflowError(
                f"datetime is outside the supported range of years {MIN_YEAR}..{MAX_YEAR}"
            )
        new_day = min(day, days_in_month(new_year, month0 + 1))
        return DateTime._from_internal(
            ymd_to_days(new_year, month0 + 1, new_day), self._nanos, self._tz
        )

    def to_iso_format(self, *, precision: str = "auto") -> str:
        """Return ISO 8601 text.

        Args:
            precision: "auto" (trimmed fraction, omitted when zero),
                "seconds", "millis", "micros" or "nanos".
        """
        year, month, day = days_to_ymd(self._days)
        year_text = f"{year:04d}" if year >= 0 else f"-{abs(year):04d}"
        text = (
            f"{year_text}-{month:02d}-{day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )
        digits = {"millis": 3, "micros": 6, "nanos": 9}.get(precision)
        if digits is not None:
            text += "." + f"{self.nanosecond:09d}"[:digits]
        elif precision == "auto" and self.nanosecond:
            text += "." + f"{self.nanosecond:09d}".rstrip("0")
        if self._tz is not None:
            text += "Z" if self._tz.is_utc else self._tz.format_offset()
        return text

    # Arithmetic

    def __add__(self, other: object) -> DateTime:
        """Shift by a Duration.

        Raises:
            OverflowError: If the result is outside the supported years.
        """
        from momento.core.duration import Duration

        if not isinstance(other, Duration):
            return NotImplemented
        return DateTime._from_internal(
            self._days, self._nanos + other.total_nanoseconds, self._tz
        )

    @overload
    def __sub__(self, other: Duration) -> DateTime: ...

    @overload
    def __sub__(self, other: DateTime) -> Duration: ...

    def __sub__(self, other: object) -> DateTime | Duration:
        """Subtract a Duration (giving a DateTime) or a DateTime (giving a Duration)."""
        from momento.core.duration import Duration

        if isinstance(other, Duration):
            return DateTime._from_internal(
                self._days, self._nanos - other.total_nanoseconds, self._tz
            )
        if isinstance(other, DateTime):
            self._check_comparable(other)
            return Duration(nanoseconds=self._instant() - other._instant())
        return NotImplemented

    # Comparison

    def _instant(self) -> int:
        return self._days * NANOS_PER_DAY + self._nanos - self.offset_seconds * NANOS_PER_SECOND

    def _check_comparable(self, other: DateTime) -> None:
        if (self._tz is None) != (other._tz is None):
            raise TypeError(
                "can't compare naive and aware datetimes. "
                "Both must be naive or both must be aware."
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        if (self._tz is None) != (other._tz is None):
            return False
        return self._instant() == other._instant()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        self._check_comparable(other)
        return self._instant() < other._instant()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        self._check_comparable(other)
        return self._instant() <= other._instant()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        self._check_comparable(other)
        return self._instant() > other._instant()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        self._check_comparable(other)
        return self._instant() >= other._instant()

    def __hash__(self) -> int:
        return hash((self._instant(), self._tz is None))

    def __repr__(self) -> str:
        year, month, day = days_to_ymd(self._days)
        zone = f", timezone={self._tz}" if self._tz is not None else ""
        return (
            f"DateTime({year}, {month}, {day}, {self.hour}, {self.minute}, "
            f"{self.second}, nanosecond={self.nanosecond}{zone})"
        )

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["DateTime"]
