"""Enumerations for calendar seasons, weekdays and times of day."""

import typing as tp
from enum import Enum, IntEnum

from utilbelt.functional import enums as enum_dispatch

R = tp.TypeVar("R")


class LabeledEnum(Enum):
    """Enum base exposing the dispatch helpers as members.

    Subclasses get ``member.label``, ``member.when({...})`` and
    ``member.when_or_else({...}, or_else)`` on top of the free functions in
    :mod:`utilbelt.functional.enums`.
    """

    @property
    def label(self) -> str:
        """Human-readable title derived from the member name."""
        return enum_dispatch.label(self)

    def when(self, cases: tp.Mapping[Enum, tp.Callable[[], R]]) -> R:
        return enum_dispatch.when(self, cases)

    def when_or_else(
        self,
        cases: tp.Mapping[Enum, tp.Callable[[], R]],
        or_else: tp.Callable[[], R],
    ) -> R:
        return enum_dispatch.when_or_else(self, cases, or_else)


class Season(LabeledEnum):
    """Northern-Hemisphere seasons.

    Each season starts on a fixed date (inclusive): spring on March 20,
    summer on June 21, autumn on September 23 and winter on December 21.
    """

    SPRING = "Spring"
    SUMMER = "Summer"
    AUTUMN = "Autumn"
    WINTER = "Winter"

    @property
    def start(self) -> tp.Tuple[int, int]:
        """(month, day) on which the season begins."""
        mapping = {
            Season.SPRING: (3, 20),
            Season.SUMMER: (6, 21),
            Season.AUTUMN: (9, 23),
            Season.WINTER: (12, 21),
        }
        return mapping[self]


class TimeOfDay(LabeledEnum):
    """Fixed hour bands of a day, as half-open ``[start, end)`` hour ranges."""

    MORNING = (6, 12)
    AFTERNOON = (12, 18)
    EVENING = (18, 23)
    NIGHT = (23, 6)  # wraps past midnight

    def contains(self, hour: int) -> bool:
        start, end = self.value
        if start < end:
            return start <= hour < end
        return hour >= start or hour < end


class Weekday(IntEnum):
    """ISO-8601 weekday numbers (Monday is 1, Sunday is 7)."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @property
    def is_weekend(self) -> bool:
        return self in (Weekday.SATURDAY, Weekday.SUNDAY)
