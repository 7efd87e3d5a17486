"""Value-to-thunk dispatch over enum members.

Works with any :class:`enum.Enum`; :class:`utilbelt.core.enums.LabeledEnum`
exposes the same helpers as member methods.

Examples:
    >>> from enum import Enum
    >>> class Status(Enum):
    ...     IN_PROGRESS = 1
    ...     DONE = 2
    >>> when(Status.DONE, {Status.IN_PROGRESS: lambda: "busy", Status.DONE: lambda: "ok"})
    'ok'
    >>> label(Status.IN_PROGRESS)
    'In Progress'
"""

import typing as tp
from enum import Enum

from utilbelt.functional.strings import split_words
from utilbelt.logger.logger import logger

__all__ = [
    "when",
    "when_or_else",
    "label",
]

R = tp.TypeVar("R")


def when(value: Enum, cases: tp.Mapping[Enum, tp.Callable[[], R]]) -> R:
    """Invoke the thunk registered for ``value``.

    Args:
        value: The enum member to dispatch on.
        cases: Mapping from member to a zero-argument callable.

    Returns:
        The result of the matching thunk. No other thunk is called.

    Raises:
        ValueError: If ``cases`` has no entry for ``value``.
    """
    if value not in cases:
        raise ValueError(f"No case registered for {value!r}")
    return cases[value]()


def when_or_else(
    value: Enum,
    cases: tp.Mapping[Enum, tp.Callable[[], R]],
    or_else: tp.Callable[[], R],
) -> R:
    """Like :func:`when`, but call ``or_else`` instead of raising."""
    if value not in cases:
        logger.debug(f"No case registered for {value!r}, using fallback")
        return or_else()
    return cases[value]()


def label(value: Enum) -> str:
    """Human-readable title from the member name.

    The name is split on underscores and lower-to-upper transitions and each
    word is title-cased (``IN_PROGRESS`` and ``inProgress`` both give
    ``"In Progress"``).
    """
    return " ".join(word.capitalize() for word in split_words(value.name))
