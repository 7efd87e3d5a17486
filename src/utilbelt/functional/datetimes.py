"""Date and time helpers for :class:`datetime.datetime` values.

Functions relative to "now" (``is_today``, ``is_past``, ``age``,
``time_ago``, ...) take an optional ``clock`` argument implementing
:class:`utilbelt.core.clock.Clock`. When omitted the process-wide default
clock is used. The current instant is always read in the timezone of the
value being tested (``clock.now(value.tzinfo)``), so naive values are compared
with naive local time and aware values with aware time in the same zone.

Boundary helpers keep the input's ``tzinfo``. "End" boundaries are the next
boundary minus one millisecond (``end_of_day`` is ``23:59:59.999``).

Examples:
    >>> import datetime as dt
    >>> from utilbelt.functional import datetimes
    >>> value = dt.datetime(2024, 3, 5, 14, 30, 45)
    >>> datetimes.format(value, "dd MMM yyyy")
    '05 Mar 2024'
    >>> datetimes.season(value)
    <Season.WINTER: 'Winter'>
"""

import calendar
import datetime as dt
import typing as tp

from utilbelt.core.clock import Clock, resolve_clock
from utilbelt.core.enums import Season, TimeOfDay, Weekday

__all__ = [
    # Relative to now
    "is_today",
    "is_yesterday",
    "is_tomorrow",
    "is_past",
    "is_future",
    # Comparison
    "is_same_year",
    "is_same_month",
    "is_same_day",
    "is_same_hour",
    "is_same_minute",
    "is_same_second",
    "is_same_millisecond",
    "is_between",
    "is_ahead_by_days",
    "is_behind_by_days",
    # Time of day and weekday
    "is_morning",
    "is_afternoon",
    "is_evening",
    "is_night",
    "time_of_day",
    "iso_weekday",
    "is_weekend",
    "is_weekday",
    "days_until_weekend",
    # Boundaries
    "start_of_day",
    "end_of_day",
    "start_of_week",
    "end_of_week",
    "start_of_month",
    "end_of_month",
    "start_of_year",
    "end_of_year",
    # Calendar
    "is_leap_year",
    "quarter_of_year",
    "week_of_year",
    "age",
    "season",
    "is_in_season",
    "days_in_month",
    # Arithmetic
    "days_until",
    "hours_until",
    "days_until_end_of_year",
    "add_workdays",
    "next_weekday",
    # Formatting
    "time_ago",
    "format",
]

_ONE_MS = dt.timedelta(milliseconds=1)
_ONE_DAY = dt.timedelta(days=1)

_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
_WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

# Ordered longest first; format() takes the first token that matches.
_FORMAT_TOKENS: tp.Dict[str, tp.Callable[[dt.datetime], str]] = {
    "yyyy": lambda d: f"{d.year:04d}",
    "MMMM": lambda d: _MONTH_NAMES[d.month - 1],
    "EEEE": lambda d: _WEEKDAY_NAMES[d.isoweekday() - 1],
    "MMM": lambda d: _MONTH_NAMES[d.month - 1][:3],
    "EEE": lambda d: _WEEKDAY_NAMES[d.isoweekday() - 1][:3],
    "yy": lambda d: f"{d.year % 100:02d}",
    "MM": lambda d: f"{d.month:02d}",
    "dd": lambda d: f"{d.day:02d}",
    "HH": lambda d: f"{d.hour:02d}",
    "mm": lambda d: f"{d.minute:02d}",
    "ss": lambda d: f"{d.second:02d}",
    "M": lambda d: str(d.month),
    "d": lambda d: str(d.day),
    "H": lambda d: str(d.hour),
}


def _now(value: dt.datetime, clock: tp.Optional[Clock]) -> dt.datetime:
    return resolve_clock(clock).now(value.tzinfo)


def _truncated(delta: dt.timedelta, unit: dt.timedelta) -> int:
    """Whole ``unit``s in ``delta``, truncated toward zero."""
    whole = abs(delta) // unit
    return -whole if delta < dt.timedelta(0) else whole


# --- Relative to now -------------------------------------------------------


def is_today(value: dt.datetime, clock: tp.Optional[Clock] = None) -> bool:
    return value.date() == _now(value, clock).date()


def is_yesterday(value: dt.datetime, clock: tp.Optional[Clock] = None) -> bool:
    return value.date() == _now(value, clock).date() - _ONE_DAY


def is_tomorrow(value: dt.datetime, clock: tp.Optional[Clock] = None) -> bool:
    return value.date() == _now(value, clock).date() + _ONE_DAY


def is_past(value: dt.datetime, clock: tp.Optional[Clock] = None) -> bool:
    return value < _now(value, clock)


def is_future(value: dt.datetime, clock: tp.Optional[Clock] = None) -> bool:
    return value > _now(value, clock)


# --- Comparison ------------------------------------------------------------


def is_same_year(value: dt.datetime, other: dt.datetime) -> bool:
    return value.year == other.year


def is_same_month(value: dt.datetime, other: dt.datetime) -> bool:
    return is_same_year(value, other) and value.month == other.month


def is_same_day(value: dt.datetime, other: dt.datetime) -> bool:
    return is_same_month(value, other) and value.day == other.day


def is_same_hour(value: dt.datetime, other: dt.datetime) -> bool:
    return is_same_day(value, other) and value.hour == other.hour


def is_same_minute(value: dt.datetime, other: dt.datetime) -> bool:
    return is_same_hour(value, other) and value.minute == other.minute


def is_same_second(value: dt.datetime, other: dt.datetime) -> bool:
    return is_same_minute(value, other) and value.second == other.second


def is_same_millisecond(value: dt.datetime, other: dt.datetime) -> bool:
    return is_same_second(value, other) and (
        value.microsecond // 1000 == other.microsecond // 1000
    )


def is_between(value: dt.datetime, start: dt.datetime, end: dt.datetime) -> bool:
    """Inclusive on both bounds."""
    return start <= value <= end


def is_ahead_by_days(value: dt.datetime, other: dt.datetime, days: int) -> bool:
    """True if ``value`` is at least ``days`` whole days after ``other``."""
    return _truncated(value - other, _ONE_DAY) >= days


def is_behind_by_days(value: dt.datetime, other: dt.datetime, days: int) -> bool:
    """True if ``value`` is at least ``days`` whole days before ``other``."""
    return _truncated(value - other, _ONE_DAY) <= -days


# --- Time of day and weekday -----------------------------------------------


def is_morning(value: dt.datetime) -> bool:
    return TimeOfDay.MORNING.contains(value.hour)


def is_afternoon(value: dt.datetime) -> bool:
    return TimeOfDay.AFTERNOON.contains(value.hour)


def is_evening(value: dt.datetime) -> bool:
    return TimeOfDay.EVENING.contains(value.hour)


def is_night(value: dt.datetime) -> bool:
    return TimeOfDay.NIGHT.contains(value.hour)


def time_of_day(value: dt.datetime) -> TimeOfDay:
    """Band containing the hour: morning, afternoon, evening or night."""
    return next(band for band in TimeOfDay if band.contains(value.hour))


def iso_weekday(value: dt.datetime) -> Weekday:
    return Weekday(value.isoweekday())


def is_weekend(value: dt.datetime) -> bool:
    return iso_weekday(value).is_weekend


def is_weekday(value: dt.datetime) -> bool:
    return not is_weekend(value)


def days_until_weekend(value: dt.datetime) -> int:
    """Days until Saturday; ``0`` on a weekend."""
    if is_weekend(value):
        return 0
    return Weekday.SATURDAY - value.isoweekday()


# --- Boundaries ------------------------------------------------------------


def start_of_day(value: dt.datetime) -> dt.datetime:
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(value: dt.datetime) -> dt.datetime:
    return start_of_day(value) + _ONE_DAY - _ONE_MS


def start_of_week(value: dt.datetime) -> dt.datetime:
    """Midnight on the Monday of the ISO week containing ``value``."""
    return start_of_day(value) - dt.timedelta(days=value.isoweekday() - 1)


def end_of_week(value: dt.datetime) -> dt.datetime:
    """Sunday ``23:59:59.999`` of the ISO week containing ``value``."""
    return start_of_week(value) + dt.timedelta(days=7) - _ONE_MS


def start_of_month(value: dt.datetime) -> dt.datetime:
    return start_of_day(value).replace(day=1)


def end_of_month(value: dt.datetime) -> dt.datetime:
    start = start_of_month(value)
    if start.month == 12:
        following = start.replace(year=start.year + 1, month=1)
    else:
        following = start.replace(month=start.month + 1)
    return following - _ONE_MS


def start_of_year(value: dt.datetime) -> dt.datetime:
    return start_of_month(value).replace(month=1)


def end_of_year(value: dt.datetime) -> dt.datetime:
    return start_of_year(value).replace(year=value.year + 1) - _ONE_MS


# --- Calendar --------------------------------------------------------------


def is_leap_year(value: dt.datetime) -> bool:
    return calendar.isleap(value.year)


def quarter_of_year(value: dt.datetime) -> int:
    return (value.month - 1) // 3 + 1


def week_of_year(value: dt.datetime) -> int:
    """ISO-8601 week number (week 1 holds the year's first Thursday).

    Dates near January 1 may fall in week 52/53 of the previous year, and
    dates near December 31 in week 1 of the next.
    """
    return value.isocalendar()[1]


def age(value: dt.datetime, clock: tp.Optional[Clock] = None) -> int:
    """Completed years since ``value`` (a birth date) as of now."""
    today = _now(value, clock)
    years = today.year - value.year
    if (today.month, today.day) < (value.month, value.day):
        years -= 1
    return years


def season(value: dt.datetime) -> Season:
    """Northern-Hemisphere season; each start date is inclusive.

    Spring from March 20, summer from June 21, autumn from September 23 and
    winter from December 21.
    """
    month_day = (value.month, value.day)
    if month_day >= Season.WINTER.start or month_day < Season.SPRING.start:
        return Season.WINTER
    if month_day < Season.SUMMER.start:
        return Season.SPRING
    if month_day < Season.AUTUMN.start:
        return Season.SUMMER
    return Season.AUTUMN


def is_in_season(value: dt.datetime, target: Season) -> bool:
    return season(value) is target


def days_in_month(value: dt.datetime) -> int:
    return calendar.monthrange(value.year, value.month)[1]


# --- Arithmetic ------------------------------------------------------------


def days_until(value: dt.datetime, other: dt.datetime) -> int:
    """Whole days from ``value`` to ``other``; negative if ``other`` is earlier."""
    return _truncated(other - value, _ONE_DAY)


def hours_until(value: dt.datetime, other: dt.datetime) -> int:
    """Whole hours from ``value`` to ``other``; negative if ``other`` is earlier."""
    return _truncated(other - value, dt.timedelta(hours=1))


def days_until_end_of_year(value: dt.datetime) -> int:
    """Whole days from ``value`` to January 1 of the following year."""
    return days_until(value, start_of_year(value).replace(year=value.year + 1))


def add_workdays(value: dt.datetime, n: int) -> dt.datetime:
    """Move ``n`` weekdays forward (or backward for negative ``n``).

    Saturdays and Sundays are stepped over without counting.

    Example:
        >>> add_workdays(dt.datetime(2024, 1, 5), 1)  # Friday
        datetime.datetime(2024, 1, 8, 0, 0)
    """
    step = _ONE_DAY if n >= 0 else -_ONE_DAY
    remaining = abs(n)
    current = value
    while remaining > 0:
        current += step
        if is_weekday(current):
            remaining -= 1
    return current


def next_weekday(value: dt.datetime, weekday: int) -> dt.datetime:
    """Next date strictly after ``value`` falling on ISO ``weekday`` (1..7).

    Raises:
        ValueError: If ``weekday`` is not in ``1..7``.
    """
    target = Weekday(weekday)
    current = value + _ONE_DAY
    while current.isoweekday() != target:
        current += _ONE_DAY
    return current


# --- Formatting ------------------------------------------------------------


def _plural(n: int, unit: str) -> str:
    return f"{n} {unit}" if n == 1 else f"{n} {unit}s"


def time_ago(
    value: dt.datetime,
    reference: tp.Optional[dt.datetime] = None,
    clock: tp.Optional[Clock] = None,
) -> str:
    """Relative description such as ``"5 minutes ago"`` or ``"in 3 hours"``.

    Args:
        value: The instant to describe.
        reference: The instant to describe it from. Defaults to now.
        clock: Time source used when ``reference`` is omitted.

    Returns:
        ``"just now"`` under a minute, otherwise the coarsest whole unit
        (minutes, hours, days, weeks, months of 30 days, years of 365 days).
    """
    if reference is None:
        reference = _now(value, clock)
    delta = reference - value
    future = delta < dt.timedelta(0)
    seconds = int(abs(delta).total_seconds())
    days = seconds // 86400

    if seconds < 60:
        return "just now"
    if seconds < 3600:
        text = _plural(seconds // 60, "minute")
    elif seconds < 86400:
        text = _plural(seconds // 3600, "hour")
    elif days < 7:
        text = _plural(days, "day")
    elif days < 30:
        text = _plural(days // 7, "week")
    elif days < 365:
        text = _plural(days // 30, "month")
    else:
        text = _plural(days // 365, "year")
    return f"in {text}" if future else f"{text} ago"


def format(value: dt.datetime, pattern: str) -> str:
    """Render ``value`` with a token pattern.

    Tokens: ``yyyy yy MMMM MMM MM M dd d HH H mm ss EEEE EEE``. The pattern is
    scanned left to right matching the longest token first; any other
    character is copied literally.

    Example:
        >>> format(dt.datetime(2024, 3, 5, 14, 30, 45), "yyyy-MM-dd HH:mm:ss")
        '2024-03-05 14:30:45'
    """
    parts = []
    i = 0
    while i < len(pattern):
        for token, render in _FORMAT_TOKENS.items():
            if pattern.startswith(token, i):
                parts.append(render(value))
                i += len(token)
                break
        else:
            parts.append(pattern[i])
            i += 1
    return "".join(parts)
