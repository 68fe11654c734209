"""Unit enumeration for calendar and clock granularities.

This module provides the Unit enum used by the aggregator, the truncation
engine and the Moment API, from nanoseconds up to years.
"""

from __future__ import annotations

from enum import Enum

from momento.errors import ValidationError


class Unit(Enum):
    """Calendar/time granularities, totally ordered by declaration.

    ``Unit.NANOSECOND < Unit.MICROSECOND < ... < Unit.YEAR``. WEEK uses the
    locale's first day of week; ISO_WEEK always starts on Monday. The two
    are distinct granularities even though they span the same length.

    Examples:
        >>> Unit.HOUR < Unit.DAY
        True

        >>> Unit.from_string("days")
        <Unit.DAY: 'day'>

        >>> max(Unit.QUARTER, Unit.MONTH)
        <Unit.MONTH: 'month'>
    """

    NANOSECOND = "nanosecond"
    MICROSECOND = "microsecond"
    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    ISO_WEEK = "isoWeek"
    QUARTER = "quarter"
    MONTH = "month"
    YEAR = "year"

    @property
    def rank(self) -> int:
        """Return the position of this unit in the total order (0-based)."""
        return _RANKS[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return self.rank >= other.rank

    @classmethod
    def from_string(cls, name: str) -> Unit:
        """Resolve a unit name or alias.

        Short aliases are case-sensitive (``"m"`` is minute, ``"M"`` is
        month, ``"w"`` is week, ``"W"`` is ISO week); long names are not
        (``"Days"``, ``"isoweek"``, ``"ISO_WEEK"``).

        Args:
            name: Singular, plural or short alias of a unit.

        Returns:
            The matching Unit.

        Raises:
            ValidationError: If the name is not a known unit.

        Examples:
            >>> Unit.from_string("M")
            <Unit.MONTH: 'month'>
            >>> Unit.from_string("isoWeeks")
            <Unit.ISO_WEEK: 'isoWeek'>
        """
        if not isinstance(name, str):
            raise ValidationError(f"unit name must be a string, got {type(name).__name__}")
        if name in _SHORT_ALIASES:
            return _SHORT_ALIASES[name]
        unit = _LONG_NAMES.get(name.strip().lower())
        if unit is None:
            raise ValidationError(f"unknown unit of time: {name!r}")
        return unit

    @classmethod
    def coerce(cls, value: Unit | str) -> Unit:
        """Return ``value`` itself if it is a Unit, else resolve it by name."""
        if isinstance(value, Unit):
            return value
        return cls.from_string(value)


_RANKS: dict[Unit, int] = {unit: index for index, unit in enumerate(Unit)}

_SHORT_ALIASES: dict[str, Unit] = {
    "ns": Unit.NANOSECOND,
    "us": Unit.MICROSECOND,
    "µs": Unit.MICROSECOND,
    "ms": Unit.MILLISECOND,
    "s": Unit.SECOND,
    "m": Unit.MINUTE,
    "h": Unit.HOUR,
    "d": Unit.DAY,
    "w": Unit.WEEK,
    "W": Unit.ISO_WEEK,
    "Q": Unit.QUARTER,
    "M": Unit.MONTH,
    "y": Unit.YEAR,
}

_LONG_NAMES: dict[str, Unit] = {}
for _unit in Unit:
    for _spelling in (_unit.name.lower(), _unit.value.lower()):
        _LONG_NAMES[_spelling] = _unit
        _LONG_NAMES[_spelling + "s"] = _unit
del _unit, _spelling


__all__ = ["Unit"]
