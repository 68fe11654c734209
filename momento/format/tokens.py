"""Format token engine.

``format_moment`` renders a DateTime through a moment.js-style pattern
such as ``"dddd, MMMM Do YYYY, h:mm:ss a"``. Each token in the fixed table
below maps to one field of the DateTime or one lookup in the Locale;
everything else in the pattern is copied through.

Token families:

    Month       M Mo MM MMM MMMM
    Quarter     Q Qo
    Day         D Do DD             (day of month)
                DDD DDDo DDDD       (day of year)
    Weekday     d do e              (position in the locale week)
                dd ddd dddd         (min/short/long name)
                E                   (ISO, Monday=0)
    Week        w wo ww             (locale week of year)
                W Wo WW             (ISO week of year)
    Year        Y YY YYYY YYYYY YYYYYY  (YY gg GG: last two digits, unsigned)
    Week-year   gg gggg ggggg       (locale)
                GG GGGG GGGGG       (ISO)
    Meridiem    A a
    Hour        H HH h hh k kk Hmm Hmmss hmm hmmss
    Minute      m mm
    Second      s ss
    Fraction    S SS ... SSSSSSSSS
    Offset      Z ZZ                (z zz are unsupported)
    Unix        X x
"""

from __future__ import annotations

from collections.abc import Callable

from momento.core.datetime import DateTime
from momento.core.week import locale_day_of_week, locale_week_of_year
from momento.errors import UnsupportedTokenError
from momento.format._scanner import TOKEN, scan
from momento.format.macros import expand_macros
from momento.locale.locale import Locale
from momento.units.timezone import Timezone

TokenFormatter = Callable[[DateTime, Locale], str]


def _zero_fill(value: int, width: int, force_sign: bool = False) -> str:
    """Pad ``abs(value)`` with zeros to ``width`` and prefix its sign.

    Examples:
        >>> _zero_fill(7, 3), _zero_fill(-7, 3), _zero_fill(7, 6, True)
        ('007', '-007', '+000007')
    """
    if value < 0:
        sign = "-"
    else:
        sign = "+" if force_sign else ""
    return sign + str(abs(value)).zfill(width)


def _quarter(dt: DateTime) -> int:
    return (dt.month - 1) // 3 + 1


def _hour12(dt: DateTime) -> int:
    return dt.hour % 12 or 12


def _hour24(dt: DateTime) -> int:
    return dt.hour or 24


def _offset(dt: DateTime, separator: str) -> str:
    zone = dt.timezone if dt.timezone is not None else Timezone.utc()
    return zone.format_offset(separator)


def _fraction(digits: int) -> TokenFormatter:
    def render(dt: DateTime, locale: Locale) -> str:
        return f"{dt.nanosecond:09d}"[:digits]

    return render


def _year(dt: DateTime, locale: Locale) -> str:
    year = dt.year
    return _zero_fill(year, 4) if year <= 9999 else f"+{year}"


def _week(dt: DateTime, locale: Locale) -> int:
    return locale_week_of_year(dt, locale.week)[0]


def _week_year(dt: DateTime, locale: Locale) -> int:
    return locale_week_of_year(dt, locale.week)[1]


def _unsupported(token: str) -> TokenFormatter:
    def render(dt: DateTime, locale: Locale) -> str:
        raise UnsupportedTokenError(token)

    return render


_FORMATTERS: dict[str, TokenFormatter] = {
    # Month
    "M": lambda dt, loc: str(dt.month),
    "Mo": lambda dt, loc: loc.ordinal(dt.month),
    "MM": lambda dt, loc: _zero_fill(dt.month, 2),
    "MMM": lambda dt, loc: loc.months_short[dt.month - 1],
    "MMMM": lambda dt, loc: loc.months[dt.month - 1],
    # Quarter
    "Q": lambda dt, loc: str(_quarter(dt)),
    "Qo": lambda dt, loc: loc.ordinal(_quarter(dt)),
    # Day of month
    "D": lambda dt, loc: str(dt.day),
    "Do": lambda dt, loc: loc.ordinal(dt.day),
    "DD": lambda dt, loc: _zero_fill(dt.day, 2),
    # Day of year
    "DDD": lambda dt, loc: str(dt.day_of_year),
    "DDDo": lambda dt, loc: loc.ordinal(dt.day_of_year),
    "DDDD": lambda dt, loc: _zero_fill(dt.day_of_year, 3),
    # Day of week
    "d": lambda dt, loc: str(locale_day_of_week(dt, loc.week)),
    "do": lambda dt, loc: loc.ordinal(locale_day_of_week(dt, loc.week)),
    "e": lambda dt, loc: str(locale_day_of_week(dt, loc.week)),
    "dd": lambda dt, loc: loc.weekdays_min[dt.weekday_from_sunday],
    "ddd": lambda dt, loc: loc.weekdays_short[dt.weekday_from_sunday],
    "dddd": lambda dt, loc: loc.weekdays[dt.weekday_from_sunday],
    "E": lambda dt, loc: str(dt.weekday),
    # Week of year
    "w": lambda dt, loc: str(_week(dt, loc)),
    "wo": lambda dt, loc: loc.ordinal(_week(dt, loc)),
    "ww": lambda dt, loc: _zero_fill(_week(dt, loc), 2),
    "W": lambda dt, loc: str(dt.iso_week),
    "Wo": lambda dt, loc: loc.ordinal(dt.iso_week),
    "WW": lambda dt, loc: _zero_fill(dt.iso_week, 2),
    # Year
    "Y": _year,
    "YY": lambda dt, loc: _zero_fill(abs(dt.year) % 100, 2),
    "YYYY": lambda dt, loc: _zero_fill(dt.year, 4),
    "YYYYY": lambda dt, loc: _zero_fill(dt.year, 5),
    "YYYYYY": lambda dt, loc: _zero_fill(dt.year, 6, force_sign=True),
    # Week-year
    "gg": lambda dt, loc: _zero_fill(abs(_week_year(dt, loc)) % 100, 2),
    "gggg": lambda dt, loc: _zero_fill(_week_year(dt, loc), 4),
    "ggggg": lambda dt, loc: _zero_fill(_week_year(dt, loc), 5),
    "GG": lambda dt, loc: _zero_fill(abs(dt.iso_week_year) % 100, 2),
    "GGGG": lambda dt, loc: _zero_fill(dt.iso_week_year, 4),
    "GGGGG": lambda dt, loc: _zero_fill(dt.iso_week_year, 5),
    # Meridiem
    "A": lambda dt, loc: loc.meridiem(dt.hour, dt.minute),
    "a": lambda dt, loc: loc.meridiem(dt.hour, dt.minute).lower(),
    # Hour
    "H": lambda dt, loc: str(dt.hour),
    "HH": lambda dt, loc: _zero_fill(dt.hour, 2),
    "h": lambda dt, loc: str(_hour12(dt)),
    "hh": lambda dt, loc: _zero_fill(_hour12(dt), 2),
    "k": lambda dt, loc: str(_hour24(dt)),
    "kk": lambda dt, loc: _zero_fill(_hour24(dt), 2),
    "Hmm": lambda dt, loc: f"{dt.hour}{dt.minute:02d}",
    "Hmmss": lambda dt, loc: f"{dt.hour}{dt.minute:02d}{dt.second:02d}",
    "hmm": lambda dt, loc: f"{_hour12(dt)}{dt.minute:02d}",
    "hmmss": lambda dt, loc: f"{_hour12(dt)}{dt.minute:02d}{dt.second:02d}",
    # Minute, second
    "m": lambda dt, loc: str(dt.minute),
    "mm": lambda dt, loc: _zero_fill(dt.minute, 2),
    "s": lambda dt, loc: str(dt.second),
    "ss": lambda dt, loc: _zero_fill(dt.second, 2),
    # Offset
    "Z": lambda dt, loc: _offset(dt, ":"),
    "ZZ": lambda dt, loc: _offset(dt, ""),
    "z": _unsupported("z"),
    "zz": _unsupported("zz"),
    # Unix time
    "X": lambda dt, loc: str(dt.to_unix_seconds()),
    "x": lambda dt, loc: str(dt.to_unix_millis()),
}
_FORMATTERS.update({"S" * digits: _fraction(digits) for digits in range(1, 10)})

FORMAT_TOKENS = frozenset(_FORMATTERS)


def format_token(token: str, dt: DateTime, locale: Locale) -> str:
    """Render a single token.

    Raises:
        KeyError: If ``token`` is not in the token table.
        UnsupportedTokenError: For the zone-name tokens ``z`` and ``zz``.
    """
    return _FORMATTERS[token](dt, locale)


def format_moment(pattern: str, dt: DateTime, locale: Locale) -> str:
    """Render ``dt`` through ``pattern`` in ``locale``.

    Macros are expanded first; bracketed text and backslash-escaped tokens
    are copied literally, and characters outside the token table pass
    through unchanged.

    Raises:
        UnsupportedTokenError: If the pattern uses ``z`` or ``zz``.
        LocaleError: If the locale's macro table is cyclic.

    Examples:
        >>> from momento.locale import get_locale
        >>> en = get_locale("en-us")
        >>> format_moment("dddd, MMMM Do YYYY", DateTime(2024, 3, 1), en)
        'Friday, March 1st 2024'
        >>> format_moment("[Q]Q YYYY", DateTime(2024, 8, 9), en)
        'Q3 2024'
        >>> format_moment("L LT", DateTime(2024, 3, 1, 18, 5), en)
        '03/01/2024 6:05 PM'
    """
    expanded = expand_macros(pattern, locale)
    out: list[str] = []
    for piece in scan(expanded, FORMAT_TOKENS):
        if piece.kind == TOKEN:
            out.append(_FORMATTERS[piece.text](dt, locale))
        else:
            out.append(piece.literal)
    return "".join(out)


__all__ = ["FORMAT_TOKENS", "TokenFormatter", "format_moment", "format_token"]
