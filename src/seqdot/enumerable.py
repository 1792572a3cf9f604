"""
Small helpers over iterables: emptiness checks, lookups, read-only
conversions, joining to a string, iteration with side effects, and slicing.
"""

import itertools as it
import logging
import typing as tp
from collections.abc import Callable, Hashable, Iterable, Iterator, Mapping, Sized
from types import MappingProxyType

from seqdot._helpers import consume, not_none
from seqdot.defaults import Exhausted
from seqdot.errors import NullInput
from seqdot.wtyping import Predicate

log = logging.getLogger(__name__)

NOT_FOUND_INDEX: tp.Final = -1


def is_null_or_empty(source: Iterable[object] | None) -> bool:
    """
    Check if source is None or has no elements.

    Sized iterables are checked with `len`; any other iterable is probed for
    one element, which consumes that element when source is an iterator.

    Example:
        >>> is_null_or_empty(None), is_null_or_empty([]), is_null_or_empty("a")
        (True, True, False)
        >>> is_null_or_empty(x for x in ())
        True
    """
    if source is None:
        return True
    if isinstance(source, Sized):
        return not len(source)
    return next(iter(source), Exhausted) is Exhausted


@not_none("source")
def first_or_default[T, F](
    source: Iterable[T], default: F, predicate: Predicate[T] | None = None
) -> T | F:
    """
    Return the first item of source (that satisfies predicate, if given),
    or default.

    Example:
        >>> first_or_default([], 0)
        0
        >>> first_or_default([1, 2, 3, 4], 0, lambda x: x % 2 == 0)
        2
        >>> first_or_default([1, 3], 0, lambda x: x % 2 == 0)
        0
    """
    return next(iter(source) if predicate is None else filter(predicate, source), default)


@not_none("source", "predicate")
def index_of[T](source: Iterable[T], predicate: Predicate[T]) -> int:
    """
    Zero-based index of the first item satisfying predicate, or NOT_FOUND_INDEX.

    Example:
        >>> index_of("abcd", str.isupper)
        -1
        >>> index_of([5, 7, 8, 9], lambda x: x % 2 == 0)
        2
    """
    return next(
        (index for index, item in enumerate(source) if predicate(item)),
        NOT_FOUND_INDEX,
    )


@not_none("source")
def to_readonly_list[T](source: Iterable[T]) -> tuple[T, ...]:
    """convert to an immutable sequence"""
    return tuple(source)


@not_none("source")
def to_readonly_collection[T](source: Iterable[T]) -> tuple[T, ...]:
    """convert to an immutable sized collection"""
    return tuple(source)


def _identity[T](item: T) -> T:
    return item


@not_none("source", "key", "value")
def to_readonly_dict[T, K: Hashable, V](
    source: Iterable[T],
    key: Callable[[T], K],
    value: Callable[[T], V] = _identity,
) -> Mapping[K, V]:
    """
    Build a read-only mapping of key(item) -> value(item).

    Raises:
        NullInput: key produced None.
        ValueError: key produced the same key for two items.

    Example:
        >>> mapping = to_readonly_dict(["a", "bb"], len, str.upper)
        >>> dict(mapping)
        {1: 'A', 2: 'BB'}
        >>> to_readonly_dict(["a", "b"], len)
        Traceback (most recent call last):
            ...
        ValueError: An item with the same key has already been added: 1
    """
    result: dict[K, V] = {}
    for item in source:
        item_key = key(item)
        if item_key is None:
            raise NullInput("key")
        if item_key in result:
            raise ValueError(
                f"An item with the same key has already been added: {item_key!r}"
            )
        result[item_key] = value(item)
    log.debug("Built read-only mapping with %d entries", len(result))
    return MappingProxyType(result)


def _quoted(item: object) -> str:
    return "" if item is None else f"'{item}'"


@not_none("empty_message")
def join_to_string[T](
    source: Iterable[T] | None,
    separator: str | None = ", ",
    empty_message: str = "None",
    selector: Callable[[T], str] | None = None,
) -> str:
    """
    Join the string form of each item with separator, or return empty_message
    if source is None or has no elements.

    Args:
        source: items to join, may be None.
        separator (optional): placed between items; None joins without one.
        empty_message (optional): returned for None or empty source.
        selector (optional): converts an item to str. By default items are
            single-quoted and None items become empty strings.

    Example:
        >>> join_to_string([1, None, "x"])
        "'1', , 'x'"
        >>> join_to_string([], empty_message="nothing")
        'nothing'
        >>> join_to_string(range(3), "-", selector=str)
        '0-1-2'
    """
    if source is None:
        return empty_message
    items = iter(source)
    first = next(items, Exhausted)
    if first is Exhausted:
        return empty_message
    to_str: Callable[[T], str] = _quoted if selector is None else selector
    return ("" if separator is None else separator).join(
        map(to_str, it.chain((first,), items))
    )


@not_none("source", "action")
def for_each[T](source: Iterable[T], action: Callable[[T], object]) -> None:
    """
    Call action on each item of source, in order.

    Example:
        >>> for_each([1, 2], print)
        1
        2
    """
    for item in source:
        _ = action(item)


@not_none("source", "key")
def distinct_by[T, K: Hashable](source: Iterable[T], key: Callable[[T], K]) -> Iterator[T]:
    """
    Lazily yield the first item for every distinct key, in input order.

    Example:
        >>> list(distinct_by([1, 2, 3, 4, 5, 6], lambda x: x % 3))
        [1, 2, 3]
    """

    def distinct() -> Iterator[T]:
        seen: set[K] = set()
        for item in source:
            if (item_key := key(item)) not in seen:
                seen.add(item_key)
                yield item

    return distinct()


@not_none("source")
def slice_if_required[T](
    source: Iterable[T], start: int | None = None, count: int | None = None
) -> Iterable[T]:
    """
    Skip `start` items and take `count` items, leaving source untouched when
    neither is given. Negative values count as zero.

    Example:
        >>> data = [0, 1, 2, 3, 4]
        >>> slice_if_required(data) is data
        True
        >>> list(slice_if_required(data, 1, 2))
        [1, 2]
        >>> list(slice_if_required(data, count=2)), list(slice_if_required(data, 3))
        ([0, 1], [3, 4])
    """
    if start is None and count is None:
        return source
    stop = None if count is None else max(start or 0, 0) + max(count, 0)
    return it.islice(source, max(start or 0, 0), stop)


@not_none("source")
def skip_safe[T](source: Iterable[T], n: int) -> Iterator[T]:
    """
    Skip up to n items; having fewer than n items is not an error.

    Example:
        >>> list(skip_safe([1, 2, 3], 2)), list(skip_safe([1, 2, 3], 5))
        ([3], [])
    """

    def skipped() -> Iterator[T]:
        iterator = iter(source)
        consume(it.islice(iterator, max(n, 0)))
        yield from iterator

    return skipped()
