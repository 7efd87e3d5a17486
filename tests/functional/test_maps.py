import pytest

from utilbelt.core.base_models import Pair
from utilbelt.functional import maps


@pytest.fixture
def scores():
    return {"ann": 3, "bob": 0, "cy": 5}


def test_get_or_default():
    data = {"a": 1, "b": None}
    assert maps.get_or_default(data, "a", 9) == 1
    assert maps.get_or_default(data, "b", 9) == 9
    assert maps.get_or_default(data, "z", 9) == 9


def test_get_or_put_only_computes_on_miss():
    data = {"a": 1}
    calls = []

    def factory():
        calls.append(1)
        return 42

    assert maps.get_or_put(data, "a", factory) == 1
    assert calls == []
    assert maps.get_or_put(data, "b", factory) == 42
    assert data == {"a": 1, "b": 42}
    assert calls == [1]


def test_filtering(scores):
    assert maps.filter(scores, lambda k, v: v > 0) == {"ann": 3, "cy": 5}
    assert maps.reject(scores, lambda k, v: v > 0) == {"bob": 0}
    assert maps.filter_keys(scores, lambda k: len(k) == 3) == {"ann": 3, "bob": 0}
    assert maps.reject_keys(scores, lambda k: len(k) == 3) == {"cy": 5}
    assert maps.filter_values(scores, lambda v: v >= 3) == {"ann": 3, "cy": 5}
    assert maps.reject_values(scores, lambda v: v >= 3) == {"bob": 0}
    assert scores == {"ann": 3, "bob": 0, "cy": 5}


def test_filter_null_and_empty():
    data = {"a": None, "b": "", "c": 0, "d": "x", "e": []}
    assert maps.filter_null(data) == {"b": "", "c": 0, "d": "x", "e": []}
    assert maps.filter_empty(data) == {"c": 0, "d": "x", "e": []}


def test_map_keys_and_values(scores):
    assert maps.map_keys(scores, str.upper) == {"ANN": 3, "BOB": 0, "CY": 5}
    assert maps.map_values(scores, lambda v: v * 2) == {"ann": 6, "bob": 0, "cy": 10}


def test_invert_map_later_duplicate_wins():
    assert maps.invert_map({"a": 1, "b": 2, "c": 1}) == {1: "c", 2: "b"}


def test_invert_map_twice_keeps_unique_entries():
    data = {"a": 1, "b": 2, "c": 1}
    twice = maps.invert_map(maps.invert_map(data))
    assert twice["b"] == 2


def test_merge_with():
    base = {"a": 1, "b": 2}
    assert maps.merge_with(base, {"b": 20, "c": 3}) == {"a": 1, "b": 20, "c": 3}
    summed = maps.merge_with(base, {"b": 20}, resolve=lambda k, old, new: old + new)
    assert summed == {"a": 1, "b": 22}
    assert base == {"a": 1, "b": 2}


def test_unique_values():
    assert maps.unique_values({"a": 1, "b": 2, "c": 1}) == {"a": 1, "b": 2}


def test_key_casing():
    data = {"first_name": 1, "lastName": 2, 3: "x"}
    assert maps.camel_case_keys(data) == {"firstName": 1, "lastName": 2, 3: "x"}
    assert maps.snake_case_keys(data) == {"first_name": 1, "last_name": 2, 3: "x"}
    assert maps.kebab_case_keys(data) == {"first-name": 1, "last-name": 2, 3: "x"}
    assert maps.pascal_case_keys(data) == {"FirstName": 1, "LastName": 2, 3: "x"}
    assert maps.capitalize_keys({"name": 1}) == {"Name": 1}
    assert maps.prefix_keys({"a": 1}, "x_") == {"x_a": 1}
    assert maps.suffix_keys({"a": 1}, "_x") == {"a_x": 1}


def test_value_casing():
    data = {"a": "hello world", "b": 1}
    assert maps.camel_case_values(data) == {"a": "helloWorld", "b": 1}
    assert maps.snake_case_values(data) == {"a": "hello_world", "b": 1}
    assert maps.kebab_case_values(data) == {"a": "hello-world", "b": 1}
    assert maps.pascal_case_values(data) == {"a": "HelloWorld", "b": 1}
    assert maps.capitalize_values(data) == {"a": "Hello world", "b": 1}


def test_partition(scores):
    assert maps.partition(scores, lambda k, v: v > 0) == Pair({"ann": 3, "cy": 5}, {"bob": 0})


def test_shift():
    data = {"x": 1, "y": 2}
    assert maps.shift(data) == ("x", 1)
    assert data == {"y": 2}
    maps.shift(data)
    with pytest.raises(KeyError):
        maps.shift(data)


def test_contains_and_remove_exact():
    data = {"a": 1, "b": 2}
    assert maps.contains(data, "a", 1)
    assert not maps.contains(data, "a", 2)
    assert not maps.contains(data, "z", 1)
    assert not maps.remove_exact(data, "a", 2)
    assert maps.remove_exact(data, "a", 1)
    assert data == {"b": 2}


def test_to_query_string():
    assert maps.to_query_string({"q": "hello world", "page": 2}) == "q=hello+world&page=2"
    assert maps.to_query_string({"a&b": "x=y"}) == "a%26b=x%3Dy"
    assert maps.to_query_string({}) == ""


def test_flatten():
    nested = {"a": {"b": 1, "c": {"d": 2}}, "e": 3, "f": {}}
    assert maps.flatten(nested) == {"a.b": 1, "a.c.d": 2, "e": 3, "f": {}}
    assert maps.flatten({"a": {"b": 1}}, separator="/") == {"a/b": 1}


def test_deep_get():
    nested = {"a": {"b": {"c": 42}}, "x": 1}
    assert maps.deep_get(nested, ["a", "b", "c"]) == 42
    assert maps.deep_get(nested, ["a", "missing", "c"]) is None
    assert maps.deep_get(nested, ["x", "y"]) is None
    assert maps.deep_get(nested, []) == nested
