"""Core value types, enums, clock and configuration shared by the helpers."""

from utilbelt.core.base_models import Pair
from utilbelt.core.data_models import Color, HSLColor
from utilbelt.core.clock import (
    Clock,
    FixedClock,
    SystemClock,
    get_clock,
    set_clock,
    use_clock,
)
from utilbelt.core.enums import LabeledEnum, Season, TimeOfDay, Weekday
from utilbelt.core.config import Settings, settings

__all__ = [
    "Pair",
    "Color",
    "HSLColor",
    "Clock",
    "FixedClock",
    "SystemClock",
    "get_clock",
    "set_clock",
    "use_clock",
    "LabeledEnum",
    "Season",
    "TimeOfDay",
    "Weekday",
    "Settings",
    "settings",
]
