"""Helpers over arbitrary iterables.

Functions here consume their input once, so they accept generators as well as
sequences. Those that return sequences of results (:func:`map_indexed`,
:func:`where_indexed`, :func:`chunked`, :func:`distinct_by`) are lazy
generators; the rest consume the input eagerly.
"""

import typing as tp

__all__ = [
    "first_or_none",
    "last_or_none",
    "single_or_none",
    "count",
    "none",
    "sum_by",
    "average_by",
    "max_by",
    "min_by",
    "for_each_indexed",
    "map_indexed",
    "where_indexed",
    "flat_map",
    "chunked",
    "distinct_by",
    "group_by",
    "associate_by",
    "associate_with",
]

T = tp.TypeVar("T")
K = tp.TypeVar("K")
V = tp.TypeVar("V")
R = tp.TypeVar("R")


def first_or_none(
    items: tp.Iterable[T], predicate: tp.Optional[tp.Callable[[T], bool]] = None
) -> tp.Optional[T]:
    """First element (matching ``predicate`` if given), or ``None``."""
    for item in items:
        if predicate is None or predicate(item):
            return item
    return None


def last_or_none(
    items: tp.Iterable[T], predicate: tp.Optional[tp.Callable[[T], bool]] = None
) -> tp.Optional[T]:
    """Last element (matching ``predicate`` if given), or ``None``."""
    result = None
    for item in items:
        if predicate is None or predicate(item):
            result = item
    return result


def single_or_none(
    items: tp.Iterable[T], predicate: tp.Optional[tp.Callable[[T], bool]] = None
) -> tp.Optional[T]:
    """The only element (matching ``predicate`` if given).

    Returns:
        ``None`` when there are zero matches or more than one.
    """
    found = False
    result = None
    for item in items:
        if predicate is None or predicate(item):
            if found:
                return None
            found = True
            result = item
    return result


def count(items: tp.Iterable[T], predicate: tp.Callable[[T], bool]) -> int:
    return sum(1 for item in items if predicate(item))


def none(items: tp.Iterable[T], predicate: tp.Callable[[T], bool]) -> bool:
    """True if no element matches ``predicate`` (also for an empty iterable)."""
    return not any(predicate(item) for item in items)


def sum_by(items: tp.Iterable[T], selector: tp.Callable[[T], float]) -> float:
    return sum(selector(item) for item in items)


def average_by(items: tp.Iterable[T], selector: tp.Callable[[T], float]) -> float:
    """Mean of ``selector`` over the elements; ``0.0`` when empty."""
    total = 0.0
    n = 0
    for item in items:
        total += selector(item)
        n += 1
    return total / n if n else 0.0


def max_by(items: tp.Iterable[T], selector: tp.Callable[[T], tp.Any]) -> tp.Optional[T]:
    """Element with the largest key; the earliest wins ties, ``None`` when empty."""
    best = None
    best_key = None
    first = True
    for item in items:
        key = selector(item)
        if first or key > best_key:
            best, best_key, first = item, key, False
    return best


def min_by(items: tp.Iterable[T], selector: tp.Callable[[T], tp.Any]) -> tp.Optional[T]:
    """Element with the smallest key; the earliest wins ties, ``None`` when empty."""
    best = None
    best_key = None
    first = True
    for item in items:
        key = selector(item)
        if first or key < best_key:
            best, best_key, first = item, key, False
    return best


def for_each_indexed(items: tp.Iterable[T], action: tp.Callable[[int, T], None]) -> None:
    for index, item in enumerate(items):
        action(index, item)


def map_indexed(
    items: tp.Iterable[T], transform: tp.Callable[[int, T], R]
) -> tp.Iterator[R]:
    for index, item in enumerate(items):
        yield transform(index, item)


def where_indexed(
    items: tp.Iterable[T], predicate: tp.Callable[[int, T], bool]
) -> tp.Iterator[T]:
    for index, item in enumerate(items):
        if predicate(index, item):
            yield item


def flat_map(
    items: tp.Iterable[T], transform: tp.Callable[[T], tp.Iterable[R]]
) -> tp.List[R]:
    return [result for item in items for result in transform(item)]


def chunked(items: tp.Iterable[T], size: int) -> tp.Iterator[tp.List[T]]:
    """Yield consecutive lists of ``size`` elements; the last may be shorter.

    Raises:
        ValueError: If ``size`` is not positive. Raised on the first call, not
            on first iteration.
    """
    if size <= 0:
        raise ValueError(f"Chunk size must be positive, got {size}")
    return _chunks(items, size)


def _chunks(items: tp.Iterable[T], size: int) -> tp.Iterator[tp.List[T]]:
    chunk: tp.List[T] = []
    for item in items:
        chunk.append(item)
        if len(chunk) == size:
            yield chunk
            chunk = []
    if chunk:
        yield chunk


def distinct_by(items: tp.Iterable[T], selector: tp.Callable[[T], K]) -> tp.Iterator[T]:
    """Yield the first element seen for each key, in encounter order."""
    seen: tp.Set[K] = set()
    for item in items:
        key = selector(item)
        if key not in seen:
            seen.add(key)
            yield item


def group_by(
    items: tp.Iterable[T], selector: tp.Callable[[T], K]
) -> tp.Dict[K, tp.List[T]]:
    """Group elements by key; keys and group members keep encounter order."""
    groups: tp.Dict[K, tp.List[T]] = {}
    for item in items:
        groups.setdefault(selector(item), []).append(item)
    return groups


def associate_by(items: tp.Iterable[T], selector: tp.Callable[[T], K]) -> tp.Dict[K, T]:
    """Map each key to its element; later elements overwrite earlier ones."""
    return {selector(item): item for item in items}


def associate_with(items: tp.Iterable[K], selector: tp.Callable[[K], V]) -> tp.Dict[K, V]:
    """Map each element to the value computed from it."""
    return {item: selector(item) for item in items}
