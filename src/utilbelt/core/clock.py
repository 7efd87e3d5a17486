"""Time sources for the "now"-relative date helpers.

Functions such as :func:`utilbelt.functional.datetimes.is_today` or
:func:`utilbelt.functional.durations.ago` read the current instant through a
:class:`Clock` rather than calling :meth:`datetime.datetime.now` directly. Each
accepts an explicit ``clock`` argument; when omitted, the process-wide default
returned by :func:`get_clock` is used. Tests swap the default with
:func:`use_clock` or pass a :class:`FixedClock` directly.
"""

import datetime as dt
import typing as tp
from contextlib import contextmanager

from utilbelt.logger.logger import logger

__all__ = [
    "Clock",
    "SystemClock",
    "FixedClock",
    "get_clock",
    "set_clock",
    "use_clock",
]


class Clock(tp.Protocol):
    def now(self, tz: tp.Optional[dt.tzinfo] = None) -> dt.datetime:
        """Return the current instant, in ``tz`` when given, naive otherwise."""
        ...


class SystemClock:
    """Wall-clock time source."""

    def now(self, tz: tp.Optional[dt.tzinfo] = None) -> dt.datetime:
        return dt.datetime.now(tz)


class FixedClock:
    """Clock frozen at a single instant.

    Args:
        instant: The instant every call to :meth:`now` reports. A naive
            instant is read as wall time in whatever zone is requested; an
            aware instant is converted to the requested zone.
    """

    def __init__(self, instant: dt.datetime):
        self.instant = instant

    def now(self, tz: tp.Optional[dt.tzinfo] = None) -> dt.datetime:
        if self.instant.tzinfo is None or tz is None:
            return self.instant.replace(tzinfo=tz)
        return self.instant.astimezone(tz)

    def advance(self, delta: dt.timedelta) -> None:
        """Move the frozen instant by ``delta``."""
        self.instant = self.instant + delta

    def __repr__(self) -> str:
        return f"FixedClock({self.instant.isoformat()})"


_default_clock: Clock = SystemClock()


def get_clock() -> Clock:
    """Return the process-wide default clock."""
    return _default_clock


def set_clock(clock: Clock) -> Clock:
    """Replace the process-wide default clock.

    Returns:
        The previously installed clock, so callers can restore it.
    """
    global _default_clock
    previous = _default_clock
    _default_clock = clock
    logger.debug(f"Default clock set to {clock!r}")
    return previous


@contextmanager
def use_clock(clock: Clock) -> tp.Iterator[Clock]:
    """Install ``clock`` as the default for the duration of a ``with`` block."""
    previous = set_clock(clock)
    try:
        yield clock
    finally:
        set_clock(previous)


def resolve_clock(clock: tp.Optional[Clock]) -> Clock:
    return clock if clock is not None else _default_clock
