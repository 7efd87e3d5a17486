"""Helpers for :class:`datetime.timedelta` values.

Whole-unit accessors (``in_days``, ``in_hours``, ...) truncate toward zero,
so ``-90`` minutes is ``-1`` hour. String renderers work on the absolute value
and prefix ``-`` for negative durations of at least one whole second.

Examples:
    >>> import datetime as dt
    >>> formatted(dt.timedelta(hours=1, minutes=23, seconds=45))
    '1h 23m 45s'
    >>> to_mm_ss(dt.timedelta(minutes=65, seconds=10))
    '65:10'
"""

import datetime as dt
import typing as tp

from utilbelt.core.clock import Clock, resolve_clock

__all__ = [
    "is_zero",
    "is_negative",
    "in_days",
    "in_hours",
    "in_minutes",
    "in_seconds",
    "in_weeks",
    "ago",
    "from_now",
    "formatted",
    "to_hh_mm_ss",
    "to_mm_ss",
]

_ZERO = dt.timedelta(0)


def _whole(value: dt.timedelta, unit: dt.timedelta) -> int:
    whole = abs(value) // unit
    return -whole if value < _ZERO else whole


def _sign(value: dt.timedelta, total_seconds: int) -> str:
    return "-" if value < _ZERO and total_seconds else ""


def is_zero(value: dt.timedelta) -> bool:
    return value == _ZERO


def is_negative(value: dt.timedelta) -> bool:
    return value < _ZERO


def in_days(value: dt.timedelta) -> int:
    return _whole(value, dt.timedelta(days=1))


def in_hours(value: dt.timedelta) -> int:
    return _whole(value, dt.timedelta(hours=1))


def in_minutes(value: dt.timedelta) -> int:
    return _whole(value, dt.timedelta(minutes=1))


def in_seconds(value: dt.timedelta) -> int:
    return _whole(value, dt.timedelta(seconds=1))


def in_weeks(value: dt.timedelta) -> int:
    return _whole(value, dt.timedelta(weeks=1))


def ago(
    value: dt.timedelta,
    clock: tp.Optional[Clock] = None,
    tz: tp.Optional[dt.tzinfo] = None,
) -> dt.datetime:
    """The instant ``value`` before now."""
    return resolve_clock(clock).now(tz) - value


def from_now(
    value: dt.timedelta,
    clock: tp.Optional[Clock] = None,
    tz: tp.Optional[dt.tzinfo] = None,
) -> dt.datetime:
    """The instant ``value`` after now."""
    return resolve_clock(clock).now(tz) + value


def formatted(value: dt.timedelta) -> str:
    """Compact form listing the non-zero units, largest first.

    Seconds are shown when every larger unit is zero, so a zero duration
    renders as ``"0s"``.

    Example:
        >>> formatted(dt.timedelta(hours=-1, minutes=-30))
        '-1h 30m'
    """
    total = in_seconds(abs(value))
    days, rest = divmod(total, 86400)
    hours, rest = divmod(rest, 3600)
    minutes, seconds = divmod(rest, 60)

    parts = [
        f"{amount}{unit}"
        for amount, unit in ((days, "d"), (hours, "h"), (minutes, "m"), (seconds, "s"))
        if amount
    ]
    if not parts:
        parts = ["0s"]
    return _sign(value, total) + " ".join(parts)


def to_hh_mm_ss(value: dt.timedelta) -> str:
    """``HH:MM:SS`` with total hours in the first field (``"26:00:00"``)."""
    total = in_seconds(abs(value))
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{_sign(value, total)}{hours:02d}:{minutes:02d}:{seconds:02d}"


def to_mm_ss(value: dt.timedelta) -> str:
    """``MM:SS`` with total minutes in the first field (``"65:10"``)."""
    total = in_seconds(abs(value))
    minutes, seconds = divmod(total, 60)
    return f"{_sign(value, total)}{minutes:02d}:{seconds:02d}"
