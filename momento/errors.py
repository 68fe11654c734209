"""Momento exception hierarchy.

All Momento-specific exceptions inherit from MomentoError. Every condition
the library reports is recoverable; nothing in the formatting engine aborts
the process.
"""

from __future__ import annotations


class MomentoError(Exception):
    """Base exception for all Momento errors."""

    pass


class ValidationError(MomentoError):
    """Invalid input values.

    Raised when a component or argument is out of range or of the wrong
    kind.

    Examples:
        - Month value outside 1-12
        - Unknown unit name such as "fortnight"
        - A DurationSpec pair whose unit is not a Unit
    """

    pass


class ParseError(MomentoError):
    """Failed to parse a date/time string.

    Carries the input text and, when one was used, the explicit pattern so
    callers can report exactly what failed.

    Attributes:
        text: The input that could not be parsed (None if not applicable).
        pattern: The explicit pattern tried (None for auto-detection).
    """

    def __init__(
        self,
        message: str,
        *,
        text: str | None = None,
        pattern: str | None = None,
    ) -> None:
        super().__init__(message)
        self.text = text
        self.pattern = pattern


class OverflowError(MomentoError):
    """Arithmetic exceeded the representable range.

    Examples:
        - Aggregating a span larger than the Duration range
        - Adding a span that moves an instant past year 9999
    """

    pass


class TimezoneError(MomentoError):
    """Invalid timezone or timezone operation.

    Examples:
        - Offset outside -14:00..+14:00
        - Converting a naive DateTime to another zone
    """

    pass


class UnsupportedTokenError(MomentoError):
    """A format token is recognized but deliberately not implemented.

    Zone names (``z``, ``zz``) cannot be derived from a fixed offset.

    Attributes:
        token: The token that was requested.
    """

    def __init__(self, token: str) -> None:
        super().__init__(
            f"format token {token!r} is not supported: "
            "time zone names cannot be derived from a UTC offset"
        )
        self.token = token


class LocaleError(MomentoError):
    """Malformed or unknown locale.

    Examples:
        - A month table with 11 entries
        - A long-date macro that expands into itself
        - Asking the registry for a locale it does not hold
    """

    pass


__all__ = [
    "MomentoError",
    "ValidationError",
    "ParseError",
    "OverflowError",
    "TimezoneError",
    "UnsupportedTokenError",
    "LocaleError",
]
