"""Locale-aware date formatting with Moment.js style tokens.

Example:
    formatter = DateTokenFormatter()
    formatter.format(datetime(2018, 1, 25, 7, 37, 59), "Do MMMM YYYY, LT", "en-US")
    # "25th January 2018, 7:37 AM"

Formatting runs in two passes. The first pass expands the locale tokens
(LT, LTS, L, LL, LLL, LLLL and their lowercase variants) into bracketed
literals rendered with the locale's CLDR formats. The second pass replaces
every atomic token; bracketed segments are emitted without the brackets and
backslash-escaped tokens as the literal token text.

Naive datetimes are treated as UTC. Plain dates are formatted as midnight UTC.
"""

import datetime
import re
from functools import lru_cache
from typing import Any, Callable, Dict, Optional, Tuple

from babel import Locale, UnknownLocaleError
from babel.dates import format_date, format_datetime, format_time, get_datetime_format

from infrastructure.i18n.formatters import Formatter
from infrastructure.logging import get_module_logger

logger = get_module_logger()

DEFAULT_LOCALE = "en"

LOCAL_TOKEN_PATTERN = re.compile(r"(\[[^\[]*\])|(\\)?(LTS|LT|LL?L?L?|l{1,4}|\[)")

TOKEN_PATTERN = re.compile(
    r"(\[[^\[]*\])|(\\)?([Hh]mm(ss)?|Mo|MM?M?M?|Do|DDDo|DD?D?D?|ddd?d?|do?|w[o|w]?|W[o|W]?|Qo?"
    r"|YYYYYY|YYYYY|YYYY|YY|gg(ggg?)?|GG(GGG?)?|e|E|a|A|hh?|HH?|kk?|mm?|ss?|S{1,9}|x|X|zz?|ZZ?|.)",
    re.DOTALL,
)

# Locale token -> (CLDR date width, CLDR time width)
LOCALE_TOKENS: Dict[str, Tuple[Optional[str], Optional[str]]] = {
    "LT": (None, "short"),
    "LTS": (None, "medium"),
    "L": ("short", None),
    "l": ("short", None),
    "LL": ("full", None),
    "ll": ("full", None),
    "LLL": ("short", "medium"),
    "lll": ("short", "short"),
    "LLLL": ("full", "medium"),
    "llll": ("full", "short"),
}

ORDINAL_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}

_EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)

TokenRenderer = Callable[[datetime.datetime, Locale], str]


@lru_cache(maxsize=128)
def get_locale(language: str) -> Locale:
    """Parse a language tag ("en-US" or "en_US") into a Babel locale.

    Unknown tags fall back to DEFAULT_LOCALE.
    """
    tag = (language or DEFAULT_LOCALE).replace("_", "-")
    try:
        return Locale.parse(tag, sep="-")
    except (UnknownLocaleError, ValueError):
        logger.warning("unknown_locale", language=language, fallback=DEFAULT_LOCALE)
        return Locale.parse(DEFAULT_LOCALE)


def add_ordinal(number: int) -> str:
    """Append the English ordinal suffix (1st, 2nd, 3rd, 4th, 11th...)."""
    if number <= 0:
        return str(number)
    if number % 100 in (11, 12, 13):
        return f"{number}th"
    return f"{number}{ORDINAL_SUFFIXES.get(number % 10, 'th')}"


def _quarter(value: datetime.datetime) -> int:
    return (value.month + 2) // 3


def _day_of_week(value: datetime.datetime) -> int:
    # Sunday is 0
    return (value.weekday() + 1) % 7


def _locale_week(value: datetime.datetime, locale: Locale) -> int:
    return int(format_date(value, "w", locale=locale))


def _iso_week(value: datetime.datetime) -> int:
    return value.isocalendar()[1]


def _fraction(value: datetime.datetime, digits: int) -> str:
    return f"{value.microsecond:06d}".ljust(9, "0")[:digits]


def _utc_offset(value: datetime.datetime, separator: str) -> str:
    offset = value.utcoffset() or datetime.timedelta(0)
    sign = "-" if offset < datetime.timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{sign}{minutes // 60:02d}{separator}{minutes % 60:02d}"


def _epoch_seconds(value: datetime.datetime) -> int:
    delta = value - _EPOCH
    return delta.days * 86400 + delta.seconds


def _epoch_milliseconds(value: datetime.datetime) -> int:
    delta = value - _EPOCH
    return (delta.days * 86400 + delta.seconds) * 1000 + delta.microseconds // 1000


def _cldr(pattern: str) -> TokenRenderer:
    return lambda value, locale: format_datetime(value, pattern, locale=locale)


def _literal(text: str) -> TokenRenderer:
    return lambda value, locale: text


TOKENS: Dict[str, TokenRenderer] = {
    "M": _cldr("M"),
    "Mo": lambda value, locale: add_ordinal(value.month),
    "MM": _cldr("MM"),
    "MMM": _cldr("MMM"),
    "MMMM": _cldr("MMMM"),
    "Q": lambda value, locale: str(_quarter(value)),
    "Qo": lambda value, locale: add_ordinal(_quarter(value)),
    "D": _cldr("d"),
    "Do": lambda value, locale: add_ordinal(value.day),
    "DD": _cldr("dd"),
    "DDD": lambda value, locale: str(value.timetuple().tm_yday),
    "DDDo": lambda value, locale: add_ordinal(value.timetuple().tm_yday),
    "DDDD": lambda value, locale: f"{value.timetuple().tm_yday:03d}",
    "d": lambda value, locale: str(_day_of_week(value)),
    "do": lambda value, locale: add_ordinal(_day_of_week(value)),
    "dd": _cldr("EEE"),
    "ddd": _cldr("EEEE"),
    "dddd": _cldr("EEEE"),
    "e": lambda value, locale: str(_day_of_week(value)),
    "E": lambda value, locale: str(_day_of_week(value) + 1),
    "w": lambda value, locale: str(_locale_week(value, locale)),
    "wo": lambda value, locale: add_ordinal(_locale_week(value, locale)),
    "ww": lambda value, locale: f"{_locale_week(value, locale):02d}",
    "W": lambda value, locale: str(_iso_week(value)),
    "Wo": lambda value, locale: add_ordinal(_iso_week(value)),
    "WW": lambda value, locale: f"{_iso_week(value):02d}",
    "YY": _cldr("yy"),
    "YYYY": _cldr("yyyy"),
    "Y": _literal("Y"),
    "gg": _literal("gg"),
    "gggg": _literal("GG"),
    "GG": _literal("gg"),
    "GGGG": _literal("GGGG"),
    "A": _cldr("a"),
    "a": lambda value, locale: format_datetime(value, "a", locale=locale).lower(),
    "H": _cldr("H"),
    "HH": _cldr("HH"),
    "h": _cldr("h"),
    "hh": _cldr("hh"),
    "k": lambda value, locale: str(value.hour + 1),
    "kk": lambda value, locale: f"{value.hour + 1:02d}",
    "m": _cldr("m"),
    "mm": _cldr("mm"),
    "s": _cldr("s"),
    "ss": _cldr("ss"),
    "z": lambda value, locale: value.tzname() or "UTC",
    "zz": lambda value, locale: value.tzname() or "UTC",
    "Z": lambda value, locale: _utc_offset(value, ":"),
    "ZZ": lambda value, locale: _utc_offset(value, ""),
    "X": lambda value, locale: str(_epoch_seconds(value)),
    "x": lambda value, locale: str(_epoch_milliseconds(value)),
}
TOKENS.update({"S" * digits: (lambda value, locale, d=digits: _fraction(value, d)) for digits in range(1, 10)})


class DateTokenFormatter(Formatter):
    """Formats dates and datetimes from Moment.js style token patterns."""

    def can_format(self, value: Any, format: str, language: str) -> bool:
        return isinstance(value, datetime.date)

    def format(self, value: Any, format: str, language: str) -> Optional[str]:
        if value is None:
            return None
        if not isinstance(value, datetime.date):
            return str(value)

        locale = get_locale(language)
        moment = self._as_datetime(value)
        pattern = self._expand_locale_tokens(moment, format, locale)
        return self._replace_tokens(moment, pattern, locale)

    @staticmethod
    def _as_datetime(value: datetime.date) -> datetime.datetime:
        if not isinstance(value, datetime.datetime):
            return datetime.datetime.combine(value, datetime.time(), tzinfo=datetime.timezone.utc)
        if value.tzinfo is None:
            return value.replace(tzinfo=datetime.timezone.utc)
        return value

    @staticmethod
    def _render_locale_token(value: datetime.datetime, token: str, locale: Locale) -> str:
        date_width, time_width = LOCALE_TOKENS[token]
        date_text = format_date(value, date_width, locale=locale) if date_width else None
        time_text = format_time(value, time_width, locale=locale) if time_width else None

        if date_text is None:
            return time_text
        if time_text is None:
            return date_text
        return (
            get_datetime_format(date_width, locale=locale)
            .replace("'", "")
            .replace("{0}", time_text)
            .replace("{1}", date_text)
        )

    def _expand_locale_tokens(self, value: datetime.datetime, pattern: str, locale: Locale) -> str:
        position = 0
        while True:
            match = LOCAL_TOKEN_PATTERN.search(pattern, position)
            if match is None:
                return pattern

            text = match.group(0)
            if text.startswith("[") or text.startswith("\\["):
                position = match.end()
                continue

            if text.startswith("\\"):
                replacement = f"[{text[1:]}]"
            elif text in LOCALE_TOKENS:
                replacement = f"[{self._render_locale_token(value, text, locale)}]"
            else:
                position = match.end()
                continue

            pattern = pattern[: match.start()] + replacement + pattern[match.end() :]
            position = match.start() + len(replacement)

    @staticmethod
    def _replace_tokens(value: datetime.datetime, pattern: str, locale: Locale) -> str:
        output = []
        for match in TOKEN_PATTERN.finditer(pattern):
            text = match.group(0)
            if text.startswith("[") and len(text) > 1:
                output.append(text[1:-1])
            elif text.startswith("\\"):
                output.append(text[1:])
            elif text in TOKENS:
                output.append(TOKENS[text](value, locale))
            else:
                output.append(text)
        return "".join(output)
