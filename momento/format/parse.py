"""Entry point for turning text into a DateTime.

Without a pattern the text is tried as RFC 3339, then ISO 8601, then
RFC 2822; with a pattern it goes through ``strptime``. Every failure
surfaces as a ParseError carrying the input and the pattern.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from momento.core.datetime import DateTime
from momento.errors import ParseError, TimezoneError, ValidationError
from momento.format.iso8601 import parse_iso8601
from momento.format.rfc2822 import parse_rfc2822
from momento.format.rfc3339 import parse_rfc3339
from momento.format.strptime import strptime

logger = logging.getLogger(__name__)

_AUTO_PARSERS: tuple[tuple[str, Callable[[str], DateTime]], ...] = (
    ("RFC 3339", parse_rfc3339),
    ("ISO 8601", parse_iso8601),
    ("RFC 2822", parse_rfc2822),
)

_RECOVERABLE = (ParseError, ValidationError, TimezoneError)


def parse_datetime(text: str, pattern: str | None = None) -> DateTime:
    """Parse ``text``, auto-detecting its format unless ``pattern`` is given.

    Args:
        text: The date/time text.
        pattern: Optional strftime-style pattern.

    Returns:
        The parsed DateTime; naive if the text carries no offset.

    Raises:
        ParseError: If no attempted format accepts the text.

    Examples:
        >>> parse_datetime("2024-03-01T00:00:00Z").month
        3
        >>> parse_datetime("Fri, 1 Mar 2024 00:00:00 GMT").day
        1
        >>> parse_datetime("01/03/2024", "%d/%m/%Y")
        DateTime(2024, 3, 1, 0, 0, 0, nanosecond=0)
    """
    if not isinstance(text, str):
        raise ParseError(f"expected a string to parse, got {type(text).__name__}")

    if pattern is not None:
        try:
            return strptime(text, pattern)
        except _RECOVERABLE as exc:
            raise ParseError(
                f'Date, "{text}", could not be parsed with format string "{pattern}"',
                text=text,
                pattern=pattern,
            ) from exc

    last_error: Exception | None = None
    for label, parser in _AUTO_PARSERS:
        try:
            return parser(text)
        except _RECOVERABLE as exc:
            logger.debug("%r is not %s: %s", text, label, exc)
            last_error = exc

    raise ParseError(
        f'Could not parse date, "{text}", as RFC 3339 / ISO 8601 or RFC 2822.',
        text=text,
    ) from last_error


__all__ = ["parse_datetime"]
