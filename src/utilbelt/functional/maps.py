"""Dictionary helpers.

Apart from :func:`get_or_put`, :func:`shift` and :func:`remove_exact`, which
mutate the dict they are given, every function returns a new dict and leaves
its input untouched. Returned dicts keep the input's iteration order.

Key and value casing functions reuse the converters in
:mod:`utilbelt.functional.strings`; entries whose key (or value) is not a
string pass through unchanged.
"""

import typing as tp
from collections.abc import Mapping
from urllib.parse import quote_plus

from utilbelt.core.base_models import Pair
from utilbelt.functional import strings

__all__ = [
    # Access
    "get_or_default",
    "get_or_put",
    # Filtering
    "filter",
    "reject",
    "filter_keys",
    "reject_keys",
    "filter_values",
    "reject_values",
    "filter_null",
    "filter_empty",
    # Transformation
    "map_keys",
    "map_values",
    "invert_map",
    "merge_with",
    "unique_values",
    # Casing
    "prefix_keys",
    "suffix_keys",
    "capitalize_keys",
    "camel_case_keys",
    "snake_case_keys",
    "kebab_case_keys",
    "pascal_case_keys",
    "capitalize_values",
    "camel_case_values",
    "snake_case_values",
    "kebab_case_values",
    "pascal_case_values",
    # Misc
    "partition",
    "shift",
    "contains",
    "remove_exact",
    "to_query_string",
    "flatten",
    "deep_get",
]

K = tp.TypeVar("K")
V = tp.TypeVar("V")
R = tp.TypeVar("R")


def get_or_default(mapping: tp.Mapping[K, V], key: K, default: V) -> V:
    """Value for ``key``, or ``default`` when it is missing or ``None``."""
    value = mapping.get(key)
    return default if value is None else value


def get_or_put(mapping: tp.MutableMapping[K, V], key: K, factory: tp.Callable[[], V]) -> V:
    """Return the value for ``key``, computing and storing it on a miss.

    ``factory`` is only called when ``key`` is absent.
    """
    if key in mapping:
        return mapping[key]
    value = factory()
    mapping[key] = value
    return value


# --- Filtering -------------------------------------------------------------


def filter(mapping: tp.Mapping[K, V], predicate: tp.Callable[[K, V], bool]) -> tp.Dict[K, V]:
    return {k: v for k, v in mapping.items() if predicate(k, v)}


def reject(mapping: tp.Mapping[K, V], predicate: tp.Callable[[K, V], bool]) -> tp.Dict[K, V]:
    return {k: v for k, v in mapping.items() if not predicate(k, v)}


def filter_keys(mapping: tp.Mapping[K, V], predicate: tp.Callable[[K], bool]) -> tp.Dict[K, V]:
    return {k: v for k, v in mapping.items() if predicate(k)}


def reject_keys(mapping: tp.Mapping[K, V], predicate: tp.Callable[[K], bool]) -> tp.Dict[K, V]:
    return {k: v for k, v in mapping.items() if not predicate(k)}


def filter_values(
    mapping: tp.Mapping[K, V], predicate: tp.Callable[[V], bool]
) -> tp.Dict[K, V]:
    return {k: v for k, v in mapping.items() if predicate(v)}


def reject_values(
    mapping: tp.Mapping[K, V], predicate: tp.Callable[[V], bool]
) -> tp.Dict[K, V]:
    return {k: v for k, v in mapping.items() if not predicate(v)}


def filter_null(mapping: tp.Mapping[K, tp.Optional[V]]) -> tp.Dict[K, V]:
    """Drop entries whose value is ``None``."""
    return {k: v for k, v in mapping.items() if v is not None}


def filter_empty(mapping: tp.Mapping[K, tp.Optional[V]]) -> tp.Dict[K, V]:
    """Drop entries whose value is ``None`` or renders as an empty string."""
    return {k: v for k, v in mapping.items() if v is not None and str(v) != ""}


# --- Transformation --------------------------------------------------------


def map_keys(mapping: tp.Mapping[K, V], transform: tp.Callable[[K], R]) -> tp.Dict[R, V]:
    """Rename keys; when two keys collide the later entry wins."""
    return {transform(k): v for k, v in mapping.items()}


def map_values(mapping: tp.Mapping[K, V], transform: tp.Callable[[V], R]) -> tp.Dict[K, R]:
    return {k: transform(v) for k, v in mapping.items()}


def invert_map(mapping: tp.Mapping[K, V]) -> tp.Dict[V, K]:
    """Swap keys and values; for duplicate values the later key wins."""
    return {v: k for k, v in mapping.items()}


def merge_with(
    mapping: tp.Mapping[K, V],
    other: tp.Mapping[K, V],
    resolve: tp.Optional[tp.Callable[[K, V, V], V]] = None,
) -> tp.Dict[K, V]:
    """Merge ``other`` into a copy of ``mapping``.

    Args:
        mapping: The base entries.
        other: Incoming entries.
        resolve: Called as ``resolve(key, existing, incoming)`` for keys present
            in both; its result is stored. By default the incoming value wins.
    """
    merged = dict(mapping)
    for key, value in other.items():
        if resolve is not None and key in merged:
            merged[key] = resolve(key, merged[key], value)
        else:
            merged[key] = value
    return merged


def unique_values(mapping: tp.Mapping[K, V]) -> tp.Dict[K, V]:
    """Keep only the first entry for each distinct value."""
    seen: tp.List[V] = []
    result: tp.Dict[K, V] = {}
    for k, v in mapping.items():
        if v not in seen:
            seen.append(v)
            result[k] = v
    return result


# --- Casing ----------------------------------------------------------------


def _convert_keys(mapping: tp.Mapping[K, V], convert: tp.Callable[[str], str]) -> tp.Dict[tp.Any, V]:
    return {(convert(k) if isinstance(k, str) else k): v for k, v in mapping.items()}


def _convert_values(mapping: tp.Mapping[K, V], convert: tp.Callable[[str], str]) -> tp.Dict[K, tp.Any]:
    return {k: (convert(v) if isinstance(v, str) else v) for k, v in mapping.items()}


def prefix_keys(mapping: tp.Mapping[K, V], prefix: str) -> tp.Dict[str, V]:
    return {f"{prefix}{k}": v for k, v in mapping.items()}


def suffix_keys(mapping: tp.Mapping[K, V], suffix: str) -> tp.Dict[str, V]:
    return {f"{k}{suffix}": v for k, v in mapping.items()}


def capitalize_keys(mapping: tp.Mapping[K, V]) -> tp.Dict[tp.Any, V]:
    return _convert_keys(mapping, strings.capitalize)


def camel_case_keys(mapping: tp.Mapping[K, V]) -> tp.Dict[tp.Any, V]:
    return _convert_keys(mapping, strings.to_camel_case)


def snake_case_keys(mapping: tp.Mapping[K, V]) -> tp.Dict[tp.Any, V]:
    return _convert_keys(mapping, strings.to_snake_case)


def kebab_case_keys(mapping: tp.Mapping[K, V]) -> tp.Dict[tp.Any, V]:
    return _convert_keys(mapping, strings.to_kebab_case)


def pascal_case_keys(mapping: tp.Mapping[K, V]) -> tp.Dict[tp.Any, V]:
    return _convert_keys(mapping, strings.to_pascal_case)


def capitalize_values(mapping: tp.Mapping[K, V]) -> tp.Dict[K, tp.Any]:
    return _convert_values(mapping, strings.capitalize)


def camel_case_values(mapping: tp.Mapping[K, V]) -> tp.Dict[K, tp.Any]:
    return _convert_values(mapping, strings.to_camel_case)


def snake_case_values(mapping: tp.Mapping[K, V]) -> tp.Dict[K, tp.Any]:
    return _convert_values(mapping, strings.to_snake_case)


def kebab_case_values(mapping: tp.Mapping[K, V]) -> tp.Dict[K, tp.Any]:
    return _convert_values(mapping, strings.to_kebab_case)


def pascal_case_values(mapping: tp.Mapping[K, V]) -> tp.Dict[K, tp.Any]:
    return _convert_values(mapping, strings.to_pascal_case)


# --- Misc ------------------------------------------------------------------


def partition(
    mapping: tp.Mapping[K, V], predicate: tp.Callable[[K, V], bool]
) -> Pair[tp.Dict[K, V], tp.Dict[K, V]]:
    """Split into (matching, non-matching) dicts."""
    matching: tp.Dict[K, V] = {}
    rest: tp.Dict[K, V] = {}
    for k, v in mapping.items():
        (matching if predicate(k, v) else rest)[k] = v
    return Pair(matching, rest)


def shift(mapping: tp.MutableMapping[K, V]) -> tp.Tuple[K, V]:
    """Remove and return the first ``(key, value)`` entry.

    Raises:
        KeyError: If the mapping is empty.
    """
    for key in mapping:
        return key, mapping.pop(key)
    raise KeyError("shift(): mapping is empty")


def contains(mapping: tp.Mapping[K, V], key: K, value: V) -> bool:
    """True if ``key`` is present and maps to ``value``."""
    return key in mapping and mapping[key] == value


def remove_exact(mapping: tp.MutableMapping[K, V], key: K, value: V) -> bool:
    """Remove ``key`` only if it currently maps to ``value``.

    Returns:
        True if the entry was removed.
    """
    if contains(mapping, key, value):
        del mapping[key]
        return True
    return False


def to_query_string(mapping: tp.Mapping[tp.Any, tp.Any]) -> str:
    """URL-encode each key and value and join the pairs with ``&``.

    Example:
        >>> to_query_string({"q": "hello world", "page": 2})
        'q=hello+world&page=2'
    """
    return "&".join(f"{quote_plus(str(k))}={quote_plus(str(v))}" for k, v in mapping.items())


def flatten(mapping: tp.Mapping[tp.Any, tp.Any], separator: str = ".") -> tp.Dict[str, tp.Any]:
    """Collapse nested dicts into one level with joined keys.

    Empty nested dicts are kept as leaf values.

    Example:
        >>> flatten({"a": {"b": 1, "c": {"d": 2}}, "e": 3})
        {'a.b': 1, 'a.c.d': 2, 'e': 3}
    """
    result: tp.Dict[str, tp.Any] = {}

    def walk(node: tp.Mapping[tp.Any, tp.Any], prefix: str) -> None:
        for k, v in node.items():
            key = f"{prefix}{separator}{k}" if prefix else str(k)
            if isinstance(v, Mapping) and v:
                walk(v, key)
            else:
                result[key] = v

    walk(mapping, "")
    return result


def deep_get(mapping: tp.Mapping[tp.Any, tp.Any], path: tp.Sequence[tp.Any]) -> tp.Any:
    """Follow ``path`` through nested mappings.

    Returns:
        The value at the end of the path, or ``None`` at the first missing key
        or non-mapping intermediate value.
    """
    node: tp.Any = mapping
    for key in path:
        if not isinstance(node, Mapping) or key not in node:
            return None
        node = node[key]
    return node
