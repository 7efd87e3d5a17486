"""utilbelt: utility belts for Python's built-in types.

Pure helper functions for strings, lists, iterables, dicts, numbers,
datetimes, timedeltas, colours and enums.
"""

from utilbelt.core import Color, HSLColor, Pair
from utilbelt.functional import (
    colors,
    datetimes,
    durations,
    enums,
    iterables,
    lists,
    maps,
    numbers,
    strings,
)

__version__ = "0.1.0"

__all__ = [
    "Color",
    "HSLColor",
    "Pair",
    "colors",
    "datetimes",
    "durations",
    "enums",
    "iterables",
    "lists",
    "maps",
    "numbers",
    "strings",
]
