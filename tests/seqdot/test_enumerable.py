import itertools as itl
from collections.abc import Iterator
from types import MappingProxyType

import pytest

from seqdot.enumerable import (
    NOT_FOUND_INDEX,
    distinct_by,
    first_or_default,
    for_each,
    index_of,
    is_null_or_empty,
    join_to_string,
    skip_safe,
    slice_if_required,
    to_readonly_collection,
    to_readonly_dict,
    to_readonly_list,
)
from seqdot.errors import NullInput


def numbers() -> Iterator[int]:
    yield from range(10)


def test_is_null_or_empty():
    assert is_null_or_empty(None)
    assert is_null_or_empty([])
    assert is_null_or_empty("")
    assert is_null_or_empty(iter(()))
    assert not is_null_or_empty([None])
    assert not is_null_or_empty(numbers())
    assert not is_null_or_empty({"a": 1})


def test_first_or_default():
    assert first_or_default([4, 5], -1) == 4
    assert first_or_default([], -1) == -1
    assert first_or_default(numbers(), -1, lambda x: x > 6) == 7
    assert first_or_default(numbers(), -1, lambda x: x > 60) == -1
    assert first_or_default([None], -1) is None

    with pytest.raises(NullInput, match="'source'"):
        _ = first_or_default(None, -1)  # pyright: ignore[reportArgumentType]


def test_index_of():
    assert index_of([5, 7, 8, 9], lambda x: x % 2 == 0) == 2
    assert index_of(numbers(), lambda x: x == 0) == 0
    assert index_of([], bool) == NOT_FOUND_INDEX == -1

    with pytest.raises(NullInput, match="'predicate'"):
        _ = index_of([1], None)  # pyright: ignore[reportArgumentType]


def test_to_readonly_list_and_collection():
    assert to_readonly_list(numbers()) == tuple(range(10))
    assert to_readonly_collection([1, 2]) == (1, 2)
    assert isinstance(to_readonly_list([1]), tuple)

    with pytest.raises(NullInput):
        _ = to_readonly_list(None)  # pyright: ignore[reportArgumentType]


def test_to_readonly_dict():
    mapping = to_readonly_dict(["a", "bb", "ccc"], len)
    assert isinstance(mapping, MappingProxyType)
    assert dict(mapping) == {1: "a", 2: "bb", 3: "ccc"}
    assert dict(to_readonly_dict(["a", "bb"], len, str.upper)) == {1: "A", 2: "BB"}

    with pytest.raises(TypeError):
        mapping[4] = "dddd"  # pyright: ignore[reportIndexIssue]


def test_to_readonly_dict_rejects_bad_keys():
    with pytest.raises(ValueError, match="same key"):
        _ = to_readonly_dict(["a", "b"], len)
    with pytest.raises(NullInput, match="'key'"):
        _ = to_readonly_dict([1, 2], lambda _: None)
    with pytest.raises(NullInput, match="'value'"):
        _ = to_readonly_dict([1, 2], str, None)  # pyright: ignore[reportArgumentType]


def test_join_to_string_defaults():
    assert join_to_string([1, 2, 3]) == "'1', '2', '3'"
    assert join_to_string([None, "x"]) == ", 'x'"
    assert join_to_string(None) == "None"
    assert join_to_string([]) == "None"
    assert join_to_string(iter(())) == "None"


def test_join_to_string_options():
    assert join_to_string(numbers(), "", selector=str) == "0123456789"
    assert join_to_string([1, 2], None, selector=str) == "12"
    assert join_to_string([], empty_message="<empty>") == "<empty>"
    assert join_to_string(None, empty_message="nothing", selector=str) == "nothing"
    assert join_to_string(["a"], " | ") == "'a'"

    with pytest.raises(NullInput, match="'empty_message'"):
        _ = join_to_string([1], empty_message=None)  # pyright: ignore[reportArgumentType]


def test_for_each():
    seen: list[int] = []
    for_each(numbers(), seen.append)
    assert seen == list(range(10))

    with pytest.raises(NullInput, match="'action'"):
        for_each([1], None)  # pyright: ignore[reportArgumentType]


def test_distinct_by():
    assert list(distinct_by([1, 2, 3, 4, 5, 6], lambda x: x % 3)) == [1, 2, 3]
    assert list(distinct_by(["bb", "a", "cc", "d", "eee"], len)) == ["bb", "a", "eee"]
    assert list(distinct_by([], len)) == []


def test_distinct_by_is_lazy_but_validates_eagerly():
    infinite = distinct_by(itl.count(), lambda x: x % 4)
    assert list(itl.islice(infinite, 4)) == [0, 1, 2, 3]

    with pytest.raises(NullInput, match="'key'"):
        _ = distinct_by([1], None)  # pyright: ignore[reportArgumentType]


def test_slice_if_required():
    data = list(range(10))
    assert slice_if_required(data) is data
    assert list(slice_if_required(data, 2, 3)) == [2, 3, 4]
    assert list(slice_if_required(data, start=8)) == [8, 9]
    assert list(slice_if_required(data, count=2)) == [0, 1]
    assert list(slice_if_required(data, 8, 5)) == [8, 9]
    assert list(slice_if_required(data, 20)) == []


def test_slice_if_required_negative_values():
    data = list(range(5))
    assert list(slice_if_required(data, -3, 2)) == [0, 1]
    assert list(slice_if_required(data, 1, -2)) == []
    assert list(slice_if_required(numbers(), -1)) == list(range(10))


def test_skip_safe():
    assert list(skip_safe([1, 2, 3], 1)) == [2, 3]
    assert list(skip_safe([1, 2, 3], 3)) == []
    assert list(skip_safe([1, 2, 3], 10)) == []
    assert list(skip_safe([1, 2, 3], 0)) == [1, 2, 3]
    assert list(skip_safe(numbers(), -2)) == list(range(10))

    with pytest.raises(NullInput):
        _ = skip_safe(None, 1)  # pyright: ignore[reportArgumentType]
