"""Fixed UTC-offset timezones.

Zones are modelled as a signed offset in seconds. There is no IANA
database: zone *names* are never resolved, which is also why the ``z``
format token is unsupported.
"""

from __future__ import annotations

import datetime as _datetime
import re
from typing import ClassVar

from momento._internal.constants import MAX_UTC_OFFSET_SECONDS, SECONDS_PER_HOUR
from momento.errors import TimezoneError

_OFFSET_PATTERN = re.compile(r"^([+-])(\d{2})(?::?(\d{2}))?$")


class Timezone:
    """A timezone represented as a fixed UTC offset.

    Positive offsets are east of UTC. Two zones are equal when their offsets
    are equal; the optional name is informational only.

    Attributes:
        offset_seconds: The UTC offset in seconds.
        name: Optional label such as "UTC" or "local".

    Examples:
        >>> Timezone.utc().is_utc
        True

        >>> str(Timezone.from_hours(5, 30))
        '+05:30'

        >>> Timezone.from_string("-0800").offset_seconds
        -28800
    """

    __slots__ = ("_offset_seconds", "_name")

    _utc_instance: ClassVar[Timezone | None] = None

    def __init__(self, offset_seconds: int, name: str | None = None) -> None:
        """Create a Timezone with the given UTC offset.

        Raises:
            TimezoneError: If the offset is not an int or exceeds 14 hours.
        """
        if not isinstance(offset_seconds, int) or isinstance(offset_seconds, bool):
            raise TimezoneError(
                f"offset_seconds must be an integer, got {type(offset_seconds).__name__}"
            )
        if abs(offset_seconds) > MAX_UTC_OFFSET_SECONDS:
            raise TimezoneError(
                f"offset_seconds {offset_seconds} is outside valid range "
                f"[-{MAX_UTC_OFFSET_SECONDS}, {MAX_UTC_OFFSET_SECONDS}]"
            )
        self._offset_seconds: int = offset_seconds
        self._name: str | None = name

    @classmethod
    def utc(cls) -> Timezone:
        """Return the shared UTC instance."""
        if cls._utc_instance is None:
            cls._utc_instance = cls(0, "UTC")
        return cls._utc_instance

    @classmethod
    def local(cls) -> Timezone:
        """Return the host's current local offset as a fixed zone.

        The offset is sampled now; a later DST change on the host does not
        affect the returned value.
        """
        return cls._from_host(_datetime.datetime.now())

    @classmethod
    def local_at(
        cls, year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0
    ) -> Timezone:
        """Return the host's local offset in force at the given wall-clock time.

        Daylight saving is resolved for that date, so a January time in a
        zone observing DST gets the winter offset even when called in July.
        Years the host cannot resolve (before 1 AD, or beyond the platform's
        time range) use the current offset.

        Examples:
            >>> Timezone.local_at(2024, 1, 15, 10).name
            'local'
        """
        try:
            wall = _datetime.datetime(year, month, day, hour, minute, second)
            return cls._from_host(wall)
        except (ValueError, OverflowError, OSError):
            return cls.local()

    @classmethod
    def _from_host(cls, wall: _datetime.datetime) -> Timezone:
        offset = wall.astimezone().utcoffset()
        seconds = int(offset.total_seconds()) if offset is not None else 0
        return cls(seconds, "local")

    @classmethod
    def from_hours(cls, hours: int, minutes: int = 0) -> Timezone:
        """Create a Timezone from an hour offset and unsigned minutes.

        The sign of ``hours`` applies to ``minutes`` as well, so
        ``from_hours(-3, 30)`` is UTC-03:30.

        Raises:
            TimezoneError: If minutes are outside 0-59 or the total is out
                of range.
        """
        if not isinstance(hours, int) or not isinstance(minutes, int):
            raise TimezoneError("hours and minutes must be integers")
        if minutes < 0 or minutes > 59:
            raise TimezoneError(f"minutes must be 0-59, got {minutes}")
        sign = -1 if hours < 0 else 1
        return cls(hours * SECONDS_PER_HOUR + sign * minutes * 60)

    @classmethod
    def from_string(cls, s: str) -> Timezone:
        """Parse ``Z``, ``UTC``, ``GMT``, ``+HH:MM``, ``+HHMM`` or ``+HH``.

        Raises:
            TimezoneError: If the string is not a recognized offset.

        Examples:
            >>> Timezone.from_string("Z").is_utc
            True
            >>> Timezone.from_string("+05:30").offset_seconds
            19800
        """
        if not isinstance(s, str):
            raise TimezoneError(f"Expected string, got {type(s).__name__}")
        text = s.strip()
        if text.upper() in ("Z", "UTC", "GMT", "UT"):
            return cls.utc()

        match = _OFFSET_PATTERN.match(text)
        if not match:
            raise TimezoneError(f"Cannot parse timezone string: {s!r}")
        sign_str, hours_str, minutes_str = match.groups()
        hours = int(hours_str)
        minutes = int(minutes_str) if minutes_str else 0
        if minutes > 59:
            raise TimezoneError(f"Offset minutes out of range: {s!r}")
        sign = 1 if sign_str == "+" else -1
        return cls(sign * (hours * SECONDS_PER_HOUR + minutes * 60))

    @property
    def offset_seconds(self) -> int:
        """Return the UTC offset in seconds (positive east of UTC)."""
        return self._offset_seconds

    @property
    def name(self) -> str | None:
        """Return the informational name, if any."""
        return self._name

    @property
    def is_utc(self) -> bool:
        """Return True if the offset is zero."""
        return self._offset_seconds == 0

    def format_offset(self, separator: str = ":") -> str:
        """Render the offset as ``+HH:MM`` (or ``+HHMM`` with ``separator=""``).

        Seconds within the offset are dropped.

        Examples:
            >>> Timezone.from_hours(-5).format_offset()
            '-05:00'
            >>> Timezone.from_hours(5, 45).format_offset("")
            '+0545'
        """
        sign = "-" if self._offset_seconds < 0 else "+"
        hours, minutes = divmod(abs(self._offset_seconds) // 60, 60)
        return f"{sign}{hours:02d}{separator}{minutes:02d}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timezone):
            return NotImplemented
        return self._offset_seconds == other._offset_seconds

    def __hash__(self) -> int:
        return hash(self._offset_seconds)

    def __repr__(self) -> str:
        if self._name:
            return f"Timezone(offset_seconds={self._offset_seconds}, name={self._name!r})"
        return f"Timezone(offset_seconds={self._offset_seconds})"

    def __str__(self) -> str:
        """Return "UTC" for a zero offset, else ``+HH:MM``."""
        if self._offset_seconds == 0:
            return "UTC"
        return self.format_offset()


__all__ = ["Timezone"]
