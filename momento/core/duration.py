"""Duration: a normalized, signed span of elapsed time.

This module provides the Duration class (nanosecond resolution) and the
``duration()`` aggregator that folds a collection of ``(magnitude, unit)``
pairs into a single Duration.
"""

from __future__ import annotations

from collections.abc import Iterable

from momento._internal.constants import (
    MAX_SPAN_NANOS,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    NANOS_PER_WEEK,
)
from momento.errors import OverflowError, ValidationError
from momento.units.unit import Unit

DurationSpec = Iterable[tuple[int, Unit]]


class Duration:
    """A signed span of time with nanosecond precision.

    A Duration is a single integer count of nanoseconds, exposed through
    normalized components: ``days`` carries the sign while ``seconds`` is
    in ``[0, 86400)`` and ``nanoseconds`` in ``[0, 10**9)``.

    The magnitude is limited to ``2**63 - 1`` milliseconds; anything larger
    raises OverflowError instead of wrapping.

    Examples:
        >>> d = Duration(days=1, seconds=3600)
        >>> d.days, d.seconds
        (1, 3600)

        >>> Duration(nanoseconds=-1)
        Duration(days=-1, seconds=86399, nanoseconds=999999999)

        >>> Duration.from_hours(2) + Duration.from_minutes(30) == Duration(seconds=9000)
        True
    """

    __slots__ = ("_total",)

    def __init__(
        self,
        days: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
        microseconds: int = 0,
        nanoseconds: int = 0,
    ) -> None:
        """Create a Duration from component parts.

        Components may be negative and are summed.

        Raises:
            OverflowError: If the total is outside the representable range.
        """
        total = (
            days * NANOS_PER_DAY
            + seconds * NANOS_PER_SECOND
            + milliseconds * NANOS_PER_MILLISECOND
            + microseconds * NANOS_PER_MICROSECOND
            + nanoseconds
        )
        self._total: int = _checked(total)

    @classmethod
    def _from_nanos(cls, total: int) -> Duration:
        instance = object.__new__(cls)
        instance._total = _checked(total)
        return instance

    @classmethod
    def zero(cls) -> Duration:
        """Return a zero-length Duration."""
        return cls._from_nanos(0)

    @classmethod
    def from_weeks(cls, weeks: int) -> Duration:
        """Create a Duration of ``weeks`` seven-day weeks."""
        return cls._from_nanos(weeks * NANOS_PER_WEEK)

    @classmethod
    def from_days(cls, days: int) -> Duration:
        """Create a Duration of ``days`` 24-hour days."""
        return cls._from_nanos(days * NANOS_PER_DAY)

    @classmethod
    def from_hours(cls, hours: int) -> Duration:
        """Create a Duration of ``hours`` hours."""
        return cls._from_nanos(hours * NANOS_PER_HOUR)

    @classmethod
    def from_minutes(cls, minutes: int) -> Duration:
        """Create a Duration of ``minutes`` minutes."""
        return cls._from_nanos(minutes * NANOS_PER_MINUTE)

    @classmethod
    def from_seconds(cls, seconds: int) -> Duration:
        """Create a Duration of ``seconds`` seconds."""
        return cls._from_nanos(seconds * NANOS_PER_SECOND)

    @classmethod
    def from_milliseconds(cls, milliseconds: int) -> Duration:
        """Create a Duration of ``milliseconds`` milliseconds."""
        return cls._from_nanos(milliseconds * NANOS_PER_MILLISECOND)

    @classmethod
    def from_microseconds(cls, microseconds: int) -> Duration:
        """Create a Duration of ``microseconds`` microseconds."""
        return cls._from_nanos(microseconds * NANOS_PER_MICROSECOND)

    @classmethod
    def from_nanoseconds(cls, nanoseconds: int) -> Duration:
        """Create a Duration of ``nanoseconds`` nanoseconds."""
        return cls._from_nanos(nanoseconds)

    @property
    def days(self) -> int:
        """Whole days, floored; negative for negative spans."""
        return self._total // NANOS_PER_DAY

    @property
    def seconds(self) -> int:
        """Seconds within the day, always in [0, 86400)."""
        return (self._total % NANOS_PER_DAY) // NANOS_PER_SECOND

    @property
    def nanoseconds(self) -> int:
        """Nanoseconds within the second, always in [0, 10**9)."""
        return self._total % NANOS_PER_SECOND

    @property
    def total_nanoseconds(self) -> int:
        """Return the whole span in nanoseconds."""
        return self._total

    @property
    def total_seconds(self) -> float:
        """Return the whole span in (fractional) seconds."""
        return self._total / NANOS_PER_SECOND

    @property
    def is_negative(self) -> bool:
        return self._total < 0

    @property
    def is_zero(self) -> bool:
        return self._total == 0

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration._from_nanos(self._total + other._total)

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration._from_nanos(self._total - other._total)

    def __mul__(self, other: object) -> Duration:
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return Duration._from_nanos(self._total * other)

    def __rmul__(self, other: object) -> Duration:
        return self.__mul__(other)

    def __neg__(self) -> Duration:
        return Duration._from_nanos(-self._total)

    def __pos__(self) -> Duration:
        return self

    def __abs__(self) -> Duration:
        return Duration._from_nanos(abs(self._total))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._total == other._total

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._total < other._total

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._total <= other._total

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._total > other._total

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._total >= other._total

    def __hash__(self) -> int:
        return hash(("Duration", self._total))

    def __bool__(self) -> bool:
        """A Duration is truthy unless it is zero."""
        return self._total != 0

    def __repr__(self) -> str:
        return (
            f"Duration(days={self.days}, seconds={self.seconds}, "
            f"nanoseconds={self.nanoseconds})"
        )

    def __str__(self) -> str:
        """Return ``[-]D day(s), HH:MM:SS[.fffffffff]`` like timedelta."""
        days = self.days
        hours, rest = divmod(self.seconds, 3600)
        minutes, seconds = divmod(rest, 60)
        clock = f"{hours}:{minutes:02d}:{seconds:02d}"
        if self.nanoseconds:
            clock += f".{self.nanoseconds:09d}"
        if days:
            plural = "" if abs(days) == 1 else "s"
            return f"{days} day{plural}, {clock}"
        return clock


def _checked(total: int) -> int:
    if abs(total) > MAX_SPAN_NANOS:
        raise OverflowError(
            f"duration of {total} nanoseconds exceeds the representable range "
            f"of +/-{MAX_SPAN_NANOS} nanoseconds"
        )
    return total


# Units whose length is fixed, in nanoseconds. MONTH is four weeks by
# convention; QUARTER and YEAR are re-expressed in months.
_FIXED_UNIT_NANOS: dict[Unit, int] = {
    Unit.NANOSECOND: 1,
    Unit.MICROSECOND: NANOS_PER_MICROSECOND,
    Unit.MILLISECOND: NANOS_PER_MILLISECOND,
    Unit.SECOND: NANOS_PER_SECOND,
    Unit.MINUTE: NANOS_PER_MINUTE,
    Unit.HOUR: NANOS_PER_HOUR,
    Unit.DAY: NANOS_PER_DAY,
    Unit.WEEK: NANOS_PER_WEEK,
    Unit.ISO_WEEK: NANOS_PER_WEEK,
    Unit.MONTH: 4 * NANOS_PER_WEEK,
}

_MONTHS_PER_UNIT: dict[Unit, int] = {
    Unit.QUARTER: 3,
    Unit.YEAR: 12,
}


def duration(spec: DurationSpec) -> Duration:
    """Aggregate ``(magnitude, unit)`` pairs into one Duration.

    The pairs form a set: a repeated identical pair counts once, while
    different magnitudes for the same unit are all summed. Conversions:

    - NANOSECOND through DAY are exact;
    - WEEK and ISO_WEEK are 7 days;
    - MONTH is 4 weeks. This is an approximation; calendar-accurate month
      arithmetic must go through ``DateTime.add_months`` instead;
    - QUARTER is 3 months and YEAR is 12 months, so one year aggregates to
      48 weeks.

    Args:
        spec: Any iterable of ``(int, Unit)`` pairs.

    Returns:
        The summed Duration.

    Raises:
        ValidationError: If a pair is malformed.
        OverflowError: If the running sum leaves the Duration range.

    Examples:
        >>> duration({(1, Unit.YEAR)}) == duration({(48, Unit.WEEK)})
        True
        >>> duration([(2, Unit.HOUR), (2, Unit.HOUR)]) == Duration.from_hours(2)
        True
    """
    total = Duration.zero()
    for magnitude, unit in _as_pairs(spec):
        total = total + _span_of(magnitude, unit)
    return total


def _span_of(magnitude: int, unit: Unit) -> Duration:
    months = _MONTHS_PER_UNIT.get(unit)
    if months is not None:
        return duration({(magnitude * months, Unit.MONTH)})
    return Duration._from_nanos(magnitude * _FIXED_UNIT_NANOS[unit])


def _as_pairs(spec: DurationSpec) -> set[tuple[int, Unit]]:
    pairs: set[tuple[int, Unit]] = set()
    for pair in spec:
        try:
            magnitude, unit = pair
        except (TypeError, ValueError):
            raise ValidationError(
                f"duration entries must be (magnitude, unit) pairs, got {pair!r}"
            ) from None
        if not isinstance(magnitude, int) or isinstance(magnitude, bool):
            raise ValidationError(
                f"duration magnitude must be an integer, got {type(magnitude).__name__}"
            )
        if not isinstance(unit, Unit):
            raise ValidationError(f"duration unit must be a Unit, got {unit!r}")
        pairs.add((magnitude, unit))
    return pairs


__all__ = ["Duration", "DurationSpec", "duration"]
