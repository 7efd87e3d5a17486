"""Base models shared across the utilbelt functional modules.

The only model here is :class:`Pair`, the return type of every operation that
splits or pairs values (list and map partitioning, positional zipping,
consecutive pairs). It is an immutable, value-equal two-element container
built on Pydantic v2 so that it shares validation and serialisation behaviour
with the other core models.
"""

from typing import Any, Generic, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict

__all__ = [
    "Pair",
]

A = TypeVar("A")
B = TypeVar("B")


class Pair(BaseModel, Generic[A, B]):
    """Immutable pair of two values with value equality.

    Members are stored as given (no copying or coercion), so a ``Pair`` of
    lists holds references to the caller's lists.

    Attributes:
        first: The first value.
        second: The second value.

    Example:
        >>> pair = Pair(1, "a")
        >>> pair.first, pair.second
        (1, 'a')
        >>> pair == Pair(1, "a")
        True
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    first: A
    second: B

    def __init__(self, first: A, second: B, **data: Any) -> None:
        super().__init__(first=first, second=second, **data)

    def as_tuple(self) -> Tuple[A, B]:
        """Return the pair as a plain ``(first, second)`` tuple."""
        return (self.first, self.second)

    def __repr__(self) -> str:
        return f"({self.first!r}, {self.second!r})"

    def __str__(self) -> str:
        return f"({self.first}, {self.second})"
