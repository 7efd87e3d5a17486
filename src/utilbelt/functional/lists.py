"""List helpers: safe access, in-place removal, statistics and transformation.

Two kinds of function live here and the name says which:

    - In-place mutators (``remove_*``, ``clear_and_add_all``, ``swap``,
      ``move``) modify the list they are given.
    - Everything else returns a new list or value and leaves the input
      untouched.

Statistics (:func:`average`, :func:`median`) and the random helpers are
backed by NumPy. Random helpers draw from ``np.random.default_rng(seed)`` so a
fixed seed gives reproducible results.

Examples:
    >>> from utilbelt.functional import lists
    >>> items = [1, 2, 1, 3]
    >>> lists.remove_first(items, 1)
    True
    >>> items
    [2, 1, 3]
    >>> lists.chunk([1, 2, 3, 4, 5], 2)
    [[1, 2], [3, 4], [5]]
"""

import numbers
import typing as tp
from collections.abc import Sized
from decimal import Decimal

import numpy as np

from utilbelt.core.base_models import Pair
from utilbelt.logger.logger import logger

__all__ = [
    # Safe access
    "second",
    "third",
    "penultimate",
    # In-place
    "remove_first",
    "remove_last_occurrence",
    "remove_all",
    "remove_all_of",
    "remove_n",
    "clear_and_add_all",
    "swap",
    "move",
    # Aggregation
    "average",
    "median",
    "mode",
    "frequencies",
    "contains_all",
    # Transformation
    "chunk",
    "windowed",
    "zip_pairs",
    "to_pairs",
    "flatten",
    "distinct_by",
    "rotate",
    "sorted_by",
    "sorted_by_descending",
    "group_by",
    "to_map",
    "partition",
    "merge_list",
    "compact",
    "join_to_string",
    # Random
    "random",
    "sample",
]

T = tp.TypeVar("T")
K = tp.TypeVar("K")
V = tp.TypeVar("V")


# --- Safe access -----------------------------------------------------------


def second(items: tp.Sequence[T]) -> tp.Optional[T]:
    return items[1] if len(items) >= 2 else None


def third(items: tp.Sequence[T]) -> tp.Optional[T]:
    return items[2] if len(items) >= 3 else None


def penultimate(items: tp.Sequence[T]) -> tp.Optional[T]:
    """Second-to-last element, or ``None`` for fewer than two elements."""
    return items[-2] if len(items) >= 2 else None


# --- In-place mutation -----------------------------------------------------


def remove_first(items: tp.List[T], item: T) -> bool:
    """Remove the first occurrence of ``item``.

    Returns:
        True if an element was removed.
    """
    try:
        items.remove(item)
    except ValueError:
        return False
    return True


def remove_last_occurrence(items: tp.List[T], item: T) -> bool:
    """Remove the last occurrence of ``item``.

    Returns:
        True if an element was removed.
    """
    for index in range(len(items) - 1, -1, -1):
        if items[index] == item:
            del items[index]
            return True
    return False


def remove_all(items: tp.List[T], item: T) -> int:
    """Remove every occurrence of ``item`` and return how many were removed."""
    kept = [x for x in items if x != item]
    removed = len(items) - len(kept)
    items[:] = kept
    return removed


def remove_all_of(items: tp.List[T], others: tp.Iterable[T]) -> int:
    """Remove every element equal to one of ``others``; return the count removed."""
    targets = list(others)
    kept = [x for x in items if x not in targets]
    removed = len(items) - len(kept)
    items[:] = kept
    return removed


def remove_n(items: tp.List[T], item: T, n: int) -> int:
    """Remove up to ``abs(n)`` occurrences of ``item``.

    A positive ``n`` removes from the head of the list, a negative ``n`` from
    the tail.

    Returns:
        The number of elements removed.
    """
    removed = 0
    if n >= 0:
        while removed < n and remove_first(items, item):
            removed += 1
    else:
        while removed < -n and remove_last_occurrence(items, item):
            removed += 1
    return removed


def clear_and_add_all(items: tp.List[T], new_items: tp.Iterable[T]) -> None:
    """Replace the contents of ``items`` with ``new_items``."""
    items[:] = list(new_items)


def swap(items: tp.List[T], i: int, j: int) -> None:
    """Swap two positions in place.

    Raises:
        IndexError: If either index is out of range.
    """
    items[i], items[j] = items[j], items[i]


def move(items: tp.List[T], from_index: int, to_index: int) -> None:
    """Move the element at ``from_index`` so that it ends up at ``to_index``."""
    item = items.pop(from_index)
    items.insert(to_index, item)


# --- Aggregation -----------------------------------------------------------


def _as_numeric_array(items: tp.Sequence[tp.Any], operation: str) -> np.ndarray:
    for item in items:
        if not isinstance(item, (numbers.Real, Decimal)):
            raise TypeError(
                f"{operation} requires numeric elements, got {type(item).__name__}: {item!r}"
            )
    return np.asarray(items, dtype=float)


def average(items: tp.Sequence[float]) -> float:
    """Arithmetic mean; ``0`` for an empty list.

    Raises:
        TypeError: If any element is not a real number or ``Decimal``.
    """
    if not items:
        return 0
    return float(np.mean(_as_numeric_array(items, "average")))


def median(items: tp.Sequence[float]) -> float:
    """Middle value of the sorted elements; ``0`` for an empty list.

    For an even number of elements the mean of the two middle values is
    returned.

    Raises:
        TypeError: If any element is not a real number or ``Decimal``.
    """
    if not items:
        return 0
    return float(np.median(_as_numeric_array(items, "median")))


def mode(items: tp.Iterable[T]) -> tp.Optional[T]:
    """Most frequent element; ties go to the one encountered first."""
    counts = frequencies(items)
    best = None
    best_count = 0
    for item, n in counts.items():
        if n > best_count:
            best, best_count = item, n
    return best


def frequencies(
    items: tp.Iterable[T], key: tp.Optional[tp.Callable[[T], K]] = None
) -> tp.Dict[tp.Any, int]:
    """Count elements (or their ``key``) in encounter order."""
    counts: tp.Dict[tp.Any, int] = {}
    for item in items:
        k = key(item) if key is not None else item
        counts[k] = counts.get(k, 0) + 1
    return counts


def contains_all(items: tp.Iterable[T], others: tp.Iterable[T]) -> bool:
    pool = list(items)
    return all(other in pool for other in others)


# --- Transformation --------------------------------------------------------


def chunk(items: tp.Sequence[T], size: int) -> tp.List[tp.List[T]]:
    """Split into lists of ``size`` elements; the last may be shorter.

    Raises:
        ValueError: If ``size`` is not positive.
    """
    if size <= 0:
        raise ValueError(f"Chunk size must be positive, got {size}")
    return [list(items[i : i + size]) for i in range(0, len(items), size)]


def windowed(items: tp.Sequence[T], size: int, step: int = 1) -> tp.List[tp.List[T]]:
    """Overlapping windows of ``size`` elements, advancing by ``step``.

    Only full windows are returned.

    Example:
        >>> windowed([1, 2, 3, 4, 5], 3)
        [[1, 2, 3], [2, 3, 4], [3, 4, 5]]

    Raises:
        ValueError: If ``size`` or ``step`` is not positive.
    """
    if size <= 0:
        raise ValueError(f"Window size must be positive, got {size}")
    if step <= 0:
        raise ValueError(f"Window step must be positive, got {step}")
    return [list(items[i : i + size]) for i in range(0, len(items) - size + 1, step)]


def zip_pairs(items: tp.Iterable[T], other: tp.Iterable[V]) -> tp.List[Pair[T, V]]:
    """Pair elements positionally, truncating to the shorter input."""
    return [Pair(a, b) for a, b in zip(items, other)]


def to_pairs(items: tp.Sequence[T]) -> tp.List[Pair[T, T]]:
    """Consecutive pairs: ``[1, 2, 3]`` gives ``[(1, 2), (2, 3)]``."""
    return [Pair(items[i], items[i + 1]) for i in range(len(items) - 1)]


def flatten(items: tp.Iterable[tp.List[T]]) -> tp.List[T]:
    """Flatten one level of nesting.

    Raises:
        TypeError: If an element is not a list.
    """
    result: tp.List[T] = []
    for item in items:
        if not isinstance(item, list):
            raise TypeError(f"flatten expects a list of lists, found {type(item).__name__}")
        result.extend(item)
    return result


def distinct_by(items: tp.Iterable[T], selector: tp.Callable[[T], K]) -> tp.List[T]:
    seen: tp.Set[K] = set()
    result: tp.List[T] = []
    for item in items:
        key = selector(item)
        if key not in seen:
            seen.add(key)
            result.append(item)
    return result


def rotate(items: tp.Sequence[T], n: int) -> tp.List[T]:
    """Rotate left by ``n`` positions (right for negative ``n``).

    Example:
        >>> rotate([1, 2, 3, 4], 1)
        [2, 3, 4, 1]
    """
    if not items:
        return []
    shift = n % len(items)
    return list(items[shift:]) + list(items[:shift])


def sorted_by(items: tp.Iterable[T], selector: tp.Callable[[T], tp.Any]) -> tp.List[T]:
    return sorted(items, key=selector)


def sorted_by_descending(
    items: tp.Iterable[T], selector: tp.Callable[[T], tp.Any]
) -> tp.List[T]:
    """Sort descending by key; equal keys keep their original order."""
    return sorted(items, key=selector, reverse=True)


def group_by(
    items: tp.Iterable[T], selector: tp.Callable[[T], K]
) -> tp.Dict[K, tp.List[T]]:
    groups: tp.Dict[K, tp.List[T]] = {}
    for item in items:
        groups.setdefault(selector(item), []).append(item)
    return groups


def to_map(
    items: tp.Iterable[T],
    key_selector: tp.Callable[[T], K],
    value_selector: tp.Optional[tp.Callable[[T], V]] = None,
) -> tp.Dict[K, tp.Any]:
    """Build a dict from selectors; later duplicate keys overwrite earlier ones."""
    if value_selector is None:
        return {key_selector(item): item for item in items}
    return {key_selector(item): value_selector(item) for item in items}


def partition(
    items: tp.Iterable[T], predicate: tp.Callable[[T], bool]
) -> Pair[tp.List[T], tp.List[T]]:
    """Split into (matching, non-matching), each keeping relative order."""
    matching: tp.List[T] = []
    rest: tp.List[T] = []
    for item in items:
        (matching if predicate(item) else rest).append(item)
    return Pair(matching, rest)


def merge_list(items: tp.Iterable[T], other: tp.Iterable[T], unique: bool = False) -> tp.List[T]:
    """Concatenate two lists.

    Args:
        items: The leading elements.
        other: Elements appended after ``items``.
        unique: If True, elements of ``other`` already present in the result
            are skipped. Duplicates within ``items`` are kept.
    """
    result = list(items)
    for item in other:
        if unique and item in result:
            continue
        result.append(item)
    return result


def compact(items: tp.Iterable[T]) -> tp.List[T]:
    """Drop ``None`` and empty strings, collections and mappings."""
    return [
        item
        for item in items
        if item is not None and not (isinstance(item, Sized) and len(item) == 0)
    ]


def join_to_string(
    items: tp.Iterable[T],
    separator: str = ", ",
    prefix: str = "",
    suffix: str = "",
    transform: tp.Optional[tp.Callable[[T], str]] = None,
) -> str:
    parts = [transform(item) if transform is not None else str(item) for item in items]
    return prefix + separator.join(parts) + suffix


# --- Random ----------------------------------------------------------------


def random(items: tp.Sequence[T], seed: tp.Optional[int] = None) -> T:
    """Draw one element uniformly at random.

    Raises:
        IndexError: If ``items`` is empty.
    """
    if not items:
        raise IndexError("Cannot pick a random element from an empty list")
    rng = np.random.default_rng(seed)
    return items[int(rng.integers(len(items)))]


def sample(items: tp.Sequence[T], n: int, seed: tp.Optional[int] = None) -> tp.List[T]:
    """Draw ``n`` elements without replacement.

    When ``n`` is at least the list length a shuffled copy of the whole list
    is returned.

    Raises:
        ValueError: If ``n`` is negative.
    """
    if n < 0:
        raise ValueError(f"Sample size must be non-negative, got {n}")
    rng = np.random.default_rng(seed)
    if n >= len(items):
        logger.debug(f"Sample size {n} covers all {len(items)} elements, shuffling a full copy")
        indices = rng.permutation(len(items))
    else:
        indices = rng.choice(len(items), size=n, replace=False)
    return [items[int(i)] for i in indices]
