"""Modification dates and their display styles."""

from __future__ import annotations

import functools
import locale
import os
import re
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta

from lsview.options import DateFlag, Flags
from lsview.style import Colors, Elem, ElemKind

_DEFAULT_LOCALE = "en_US"
_LOCALE_PATTERN = re.compile(r"[a-z]{2,3}(_[A-Z][A-Za-z0-9]+)?|POSIX")
_LOCALE_LOCK = threading.Lock()

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR
_WEEK = 7 * _DAY
_MONTH = 30 * _DAY
_YEAR = 365 * _DAY

# About six months: 365.2425 * 24 * 60 * 60 / 2 seconds.
_HALF_YEAR = timedelta(seconds=15_778_476)

_RELATIVE_ABBREVIATIONS = (
    ("minute", "min"),
    ("second", "sec"),
    ("hour", "hr"),
    ("week", "wk"),
    ("month", "mon"),
    ("year", "yr"),
    ("a ", "1 "),
    ("an ", "1 "),
)


@functools.lru_cache(maxsize=None)
def current_locale() -> str:
    """The user's locale name, such as 'en_US'; 'en_US' when it is unknown."""
    raw = next(
        (os.environ[name] for name in ("LC_ALL", "LC_MESSAGES", "LANG") if os.environ.get(name)),
        "",
    )
    name = re.split(r"[.@]", raw, maxsplit=1)[0].replace("-", "_")
    return name if _LOCALE_PATTERN.fullmatch(name) else _DEFAULT_LOCALE


def _format_localized(value: datetime, fmt: str, locale_name: str) -> str:
    with _LOCALE_LOCK:
        saved = locale.setlocale(locale.LC_TIME)
        try:
            for candidate in (f"{locale_name}.UTF-8", f"{locale_name}.utf8", locale_name):
                try:
                    locale.setlocale(locale.LC_TIME, candidate)
                    break
                except locale.Error:
                    continue
            return value.strftime(fmt)
        finally:
            locale.setlocale(locale.LC_TIME, saved)


def _ctime(value: datetime) -> str:
    return (
        f"{_WEEKDAYS[value.weekday()]} {_MONTHS[value.month - 1]} {value.day:2d} "
        f"{value:%H:%M:%S} {value.year}"
    )


def _humanize(seconds: int) -> str:
    """Describe a signed duration roughly, like '2 days ago' or 'in an hour'."""
    n = abs(seconds)
    if n > 547 * _DAY:
        text = f"{max(n // _YEAR, 2)} years"
    elif n > 345 * _DAY:
        text = "a year"
    elif n > 45 * _DAY:
        text = f"{max(n // _MONTH, 2)} months"
    elif n > 29 * _DAY:
        text = "a month"
    elif n > 10 * _DAY + 12 * _HOUR:
        text = f"{max(n // _WEEK, 2)} weeks"
    elif n > 6 * _DAY + 12 * _HOUR:
        text = "a week"
    elif n > 36 * _HOUR:
        text = f"{max(n // _DAY, 2)} days"
    elif n > 22 * _HOUR:
        text = "a day"
    elif n > 90 * _MINUTE:
        text = f"{max(n // _HOUR, 2)} hours"
    elif n > 45 * _MINUTE:
        text = "an hour"
    elif n > 90:
        text = f"{max(n // _MINUTE, 2)} minutes"
    elif n > 45:
        text = "a minute"
    elif n > 10:
        text = f"{n} seconds"
    else:
        return "now"
    return f"{text} ago" if seconds < 0 else f"in {text}"


def _relative(value: datetime) -> str:
    seconds = int((value - datetime.now().astimezone()).total_seconds())
    text = _humanize(seconds)
    for long, short in _RELATIVE_ABBREVIATIONS:
        text = text.replace(long, short)
    parts = text.split()
    if len(parts) == 3:
        return f"{parts[0]:>3} {parts[1]:<5}{parts[2]}"
    return f"{text:>7}"


@functools.total_ordering
@dataclass(frozen=True)
class Date:
    """A local date and time; None marks a date that cannot be represented.

    An invalid date orders after every valid one.
    """

    value: datetime | None = None

    def _key(self) -> tuple[bool, float]:
        return (self.value is None, self.value.timestamp() if self.value is not None else 0.0)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def render(self, colors: Colors, flags: Flags) -> str:
        """The date text coloured by its age."""
        now = datetime.now().astimezone()
        value = self.value
        if value is None:
            kind = ElemKind.OLDER
        elif value > now - timedelta(hours=1):
            kind = ElemKind.HOUR_OLD
        elif value > now - timedelta(days=1):
            kind = ElemKind.DAY_OLD
        elif value > now - timedelta(weeks=1):
            kind = ElemKind.WEEK_OLD
        elif value > now - timedelta(weeks=4):
            kind = ElemKind.MONTH_OLD
        else:
            kind = ElemKind.OLDER
        return colors.colorize(self.date_string(flags), Elem(kind))

    def date_string(self, flags: Flags) -> str:
        """The date in the style the flags select; '-' for an invalid date."""
        value = self.value
        if value is None:
            return "-"
        if flags.date is DateFlag.DATE:
            return _ctime(value)
        if flags.date is DateFlag.LOCALE:
            return _format_localized(value, "%c", current_locale())
        if flags.date is DateFlag.RELATIVE:
            return _relative(value)
        if flags.date is DateFlag.ISO:
            if value > datetime.now().astimezone() - _HALF_YEAR:
                return value.strftime("%m-%d %H:%M")
            return value.strftime("%Y-%m-%d")
        if flags.date_format is None:
            raise ValueError("a formatted date needs a date format")
        return _format_localized(value, flags.date_format, current_locale())


def date_from_timestamp(timestamp: float) -> Date:
    """The local date of a POSIX timestamp; invalid when it is out of range."""
    try:
        return Date(datetime.fromtimestamp(timestamp).astimezone())
    except (OverflowError, OSError, ValueError):
        return Date(None)