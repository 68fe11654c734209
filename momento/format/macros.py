"""Locale macro expansion.

Long-date macros (``LT``, ``LTS``, ``L`` .. ``LLLL`` and the lowercase
``l`` .. ``llll``) are shorthand for locale-specific token strings. They
are expanded before token formatting, repeatedly, until a pass changes
nothing.
"""

from __future__ import annotations

import logging

from momento.config import get_settings
from momento.errors import LocaleError
from momento.format._scanner import TOKEN, scan
from momento.locale.locale import Locale

logger = logging.getLogger(__name__)

MACRO_TOKENS = frozenset(
    {"LTS", "LT", "LLLL", "LLL", "LL", "L", "llll", "lll", "ll", "l"}
)

# Lowercase macros are their uppercase form with these tokens shortened
_SHORTENED = {"MMMM": "MMM", "MM": "M", "DD": "D", "dddd": "ddd"}
_SHORTENED_TOKENS = frozenset(_SHORTENED)


def long_date_format(locale: Locale, key: str) -> str | None:
    """Return the locale's expansion of macro ``key``, or None.

    Examples:
        >>> from momento.locale import get_locale
        >>> long_date_format(get_locale("en-us"), "ll")
        'MMM D, YYYY'
        >>> long_date_format(get_locale("en-us"), "LLLLL") is None
        True
    """
    value = locale.long_date_format.get(key)
    if value is not None:
        return value
    if key.islower():
        upper = locale.long_date_format.get(key.upper())
        if upper is not None:
            return _shorten(upper)
    return None


def _shorten(pattern: str) -> str:
    return "".join(
        _SHORTENED[piece.text] if piece.kind == TOKEN else piece.text
        for piece in scan(pattern, _SHORTENED_TOKENS)
    )


def _expand_once(pattern: str, locale: Locale) -> tuple[str, int]:
    """Run one pass; return the new text and how many macros it replaced."""
    out: list[str] = []
    replaced = 0
    for piece in scan(pattern, MACRO_TOKENS):
        expansion = long_date_format(locale, piece.text) if piece.kind == TOKEN else None
        if expansion is None:
            out.append(piece.text)
        else:
            out.append(expansion)
            replaced += 1
    return "".join(out), replaced


def expand_macros(pattern: str, locale: Locale, max_passes: int | None = None) -> str:
    """Expand every macro in ``pattern`` using ``locale``.

    Bracket runs and backslash escapes are kept as written so the token
    engine can treat them as literals. Expansion repeats until a pass
    finds no macro left to replace.

    Args:
        pattern: Format string that may contain macros.
        locale: Locale supplying the macro values.
        max_passes: Pass limit; defaults to ``Settings.max_macro_passes``.

    Returns:
        The pattern with no expandable macros left.

    Raises:
        LocaleError: If no fixed point is reached within the pass limit,
            which means the locale's macro table is cyclic.

    Examples:
        >>> from momento.locale import get_locale
        >>> expand_macros("LLLL", get_locale("en-us"))
        'dddd, MMMM D, YYYY h:mm A'
        >>> expand_macros("[LT] LT", get_locale("en-gb"))
        '[LT] HH:mm'
    """
    limit = get_settings().max_macro_passes if max_passes is None else max_passes
    current = pattern
    for passes in range(1, limit + 1):
        current, replaced = _expand_once(current, locale)
        if not replaced:
            logger.debug("Expanded %r to %r in %d pass(es)", pattern, current, passes)
            return current

    logger.warning(
        "Macro expansion of %r did not settle after %d passes for locale %r",
        pattern,
        limit,
        locale.name,
    )
    raise LocaleError(
        f"locale {locale.name!r}: macro expansion of {pattern!r} did not reach a "
        f"fixed point after {limit} passes; the long-date format table is cyclic"
    )


__all__ = ["MACRO_TOKENS", "expand_macros", "long_date_format"]
