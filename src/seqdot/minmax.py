"""
Minimum and maximum reductions over iterables.

Every reduction consumes its input in a single pass and keeps the first
encountered element among equally extremal ones. `None` elements (or `None`
keys, for the keyed variants) are skipped, so an iterable holding only `None`
counts as empty.

Under natural ordering NaN takes part in a total order of its own: it is
smaller than everything when hunting the minimum and greater than everything
when hunting the maximum. Plain IEEE-754 comparisons would make
`minimum([nan, 5.0])` NaN but `minimum([5.0, nan])` 5.0. Once a bound is NaN
it stays NaN. An explicit comparer opts out of this rule.
"""

import typing as tp
from collections.abc import Callable, Iterable, Iterator

from seqdot._helpers import isnan, not_none, release
from seqdot.defaults import EMPTY, Default, Empty, Found, NoDefault, Outcome
from seqdot.errors import EmptySequence
from seqdot.ordering import inverse, natural
from seqdot.wtyping import Comparer, SupportsSub


class MinMax[T](tp.NamedTuple):
    min: T
    max: T

    @property
    def ptp[TSupportsSub: SupportsSub](self: "MinMax[TSupportsSub]") -> TSupportsSub:
        """Peak to peak, i.e. `max - min`."""
        return self.max - self.min


def _beats[K](key: K, bound: K, compare: Comparer[K], nan_rule: bool) -> bool:
    if nan_rule:
        if isnan(bound):
            return False
        if isnan(key):
            return True
    return compare(key, bound) < 0


def _seed[T, K](
    iterator: Iterator[T], key: Callable[[T], K] | None
) -> tuple[T, K] | Empty:
    for item in iterator:
        item_key = tp.cast(K, item) if key is None else key(item)
        if item_key is not None:
            return item, item_key
    return EMPTY


def lazy_extreme[T, K](
    iterator: Iterator[T],
    key: Callable[[T], K] | None,
    compare: Comparer[K],
    *,
    nan_rule: bool,
) -> Outcome[T]:
    match _seed(iterator, key):
        case Empty():
            return EMPTY
        case (best, best_key):
            pass
    for item in iterator:
        item_key = tp.cast(K, item) if key is None else key(item)
        if item_key is not None and _beats(item_key, best_key, compare, nan_rule):
            best, best_key = item, item_key
    return Found(best)


def lazy_minmax[T, K](
    iterator: Iterator[T],
    key: Callable[[T], K] | None,
    compare: Comparer[K],
    *,
    nan_rule: bool,
) -> Outcome[MinMax[T]]:
    match _seed(iterator, key):
        case Empty():
            return EMPTY
        case (seed, seed_key):
            min, min_key = max, max_key = seed, seed_key
    reverse = inverse(compare)
    for item in iterator:
        item_key = tp.cast(K, item) if key is None else key(item)
        if item_key is None:
            continue
        if _beats(item_key, min_key, compare, nan_rule):
            min, min_key = item, item_key
        if _beats(item_key, max_key, reverse, nan_rule):
            max, max_key = item, item_key
    return Found(MinMax(min, max))


def _extreme[T, K](
    source: Iterable[T],
    key: Callable[[T], K] | None,
    comparer: Comparer[K] | None,
    *,
    largest: bool,
) -> Outcome[T]:
    compare: Comparer[K] = natural if comparer is None else comparer
    iterator = iter(source)
    try:
        return lazy_extreme(
            iterator,
            key,
            inverse(compare) if largest else compare,
            nan_rule=comparer is None,
        )
    finally:
        release(iterator)


def _extremes[T, K](
    source: Iterable[T],
    key: Callable[[T], K] | None,
    comparer: Comparer[K] | None,
) -> Outcome[MinMax[T]]:
    compare: Comparer[K] = natural if comparer is None else comparer
    iterator = iter(source)
    try:
        return lazy_minmax(iterator, key, compare, nan_rule=comparer is None)
    finally:
        release(iterator)


def _value_or_default[T, F](
    outcome: Outcome[T], default: F | tp.Literal[Default.NoDefault], operation: str
) -> T | F:
    match outcome:
        case Found(value=value):
            return value
        case Empty() if default is NoDefault:
            raise EmptySequence(operation)
        case _:
            return tp.cast(F, default)


def _pair_or_default[T, F](
    outcome: Outcome[MinMax[T]],
    default: F | tp.Literal[Default.NoDefault],
    operation: str,
) -> MinMax[T] | MinMax[F]:
    match outcome:
        case Found(value=pair):
            return pair
        case Empty() if default is NoDefault:
            raise EmptySequence(operation)
        case _:
            return MinMax(tp.cast(F, default), tp.cast(F, default))


@not_none("source")
def try_minimum[T](source: Iterable[T], comparer: Comparer[T] | None = None) -> Outcome[T]:
    """Find the smallest element, without raising on empty input.

    Example:
        >>> try_minimum([3, 1, 2])
        Found(value=1)
        >>> try_minimum([None, None])
        Empty()
    """
    return _extreme(source, None, comparer, largest=False)


@not_none("source")
def try_maximum[T](source: Iterable[T], comparer: Comparer[T] | None = None) -> Outcome[T]:
    """Find the largest element, without raising on empty input.

    Example:
        >>> try_maximum([3, 1, 2])
        Found(value=3)
    """
    return _extreme(source, None, comparer, largest=True)


@not_none("source")
def try_minmax[T](
    source: Iterable[T], comparer: Comparer[T] | None = None
) -> Outcome[MinMax[T]]:
    """Find the smallest and the largest element in one pass, without raising on
    empty input.

    Example:
        >>> try_minmax([3, 1, 4, 1, 5])
        Found(value=MinMax(min=1, max=5))
        >>> try_minmax(iter([]))
        Empty()
    """
    return _extremes(source, None, comparer)


@not_none("source", "key")
def try_minimum_by[T, K](
    source: Iterable[T], key: Callable[[T], K], comparer: Comparer[K] | None = None
) -> Outcome[T]:
    return _extreme(source, key, comparer, largest=False)


@not_none("source", "key")
def try_maximum_by[T, K](
    source: Iterable[T], key: Callable[[T], K], comparer: Comparer[K] | None = None
) -> Outcome[T]:
    return _extreme(source, key, comparer, largest=True)


@not_none("source", "key")
def try_minmax_by[T, K](
    source: Iterable[T], key: Callable[[T], K], comparer: Comparer[K] | None = None
) -> Outcome[MinMax[T]]:
    return _extremes(source, key, comparer)


@tp.overload
def minimum[T](
    source: Iterable[T],
    comparer: Comparer[T] | None = None,
    *,
    default: tp.Literal[Default.NoDefault] = NoDefault,
) -> T: ...
@tp.overload
def minimum[T, F](
    source: Iterable[T], comparer: Comparer[T] | None = None, *, default: F
) -> T | F: ...
def minimum[T, F](
    source: Iterable[T],
    comparer: Comparer[T] | None = None,
    *,
    default: F | tp.Literal[Default.NoDefault] = NoDefault,
) -> T | F:
    """calculate the min element in the iterable.

    Args:
        source: the iterable to reduce.
        comparer (optional): a comparer replacing natural ordering.
        default (optional):
            value to return if the iterable has no (non-None) element.
            If omitted, EmptySequence is raised instead.

    Returns:
        T | F: Either the min element, or default.

    Raises:
        NullInput: source is None.
        EmptySequence: no default is given and the iterable is empty.

    Example:
        >>> minimum([3, 4, 1, 9])
        1
        >>> minimum([], default=-1)
        -1
        >>> minimum([])
        Traceback (most recent call last):
            ...
        seqdot.errors.EmptySequence: minimum() iterable argument is empty
        >>> minimum([2.0, float("nan"), 1.0])
        nan
    """
    return _value_or_default(try_minimum(source, comparer), default, "minimum")


@tp.overload
def maximum[T](
    source: Iterable[T],
    comparer: Comparer[T] | None = None,
    *,
    default: tp.Literal[Default.NoDefault] = NoDefault,
) -> T: ...
@tp.overload
def maximum[T, F](
    source: Iterable[T], comparer: Comparer[T] | None = None, *, default: F
) -> T | F: ...
def maximum[T, F](
    source: Iterable[T],
    comparer: Comparer[T] | None = None,
    *,
    default: F | tp.Literal[Default.NoDefault] = NoDefault,
) -> T | F:
    """calculate the max element in the iterable.

    Same contract as `minimum`, with the comparer's order reversed.

    Example:
        >>> maximum([3, 4, 1, 9])
        9
        >>> maximum([], default=None) is None
        True
    """
    return _value_or_default(try_maximum(source, comparer), default, "maximum")


@tp.overload
def minmax[T](
    source: Iterable[T],
    comparer: Comparer[T] | None = None,
    *,
    default: tp.Literal[Default.NoDefault] = NoDefault,
) -> MinMax[T]: ...
@tp.overload
def minmax[T, F](
    source: Iterable[T], comparer: Comparer[T] | None = None, *, default: F
) -> MinMax[T] | MinMax[F]: ...
def minmax[T, F](
    source: Iterable[T],
    comparer: Comparer[T] | None = None,
    *,
    default: F | tp.Literal[Default.NoDefault] = NoDefault,
) -> MinMax[T] | MinMax[F]:
    """Lazily calculate min and max processing one item at a time.

    Args:
        source: the iterable to reduce.
        comparer (optional): a comparer replacing natural ordering.
        default (optional):
            if the iterable is empty, `MinMax(default, default)` is returned.
            If omitted, EmptySequence is raised instead.

    Returns:
        MinMax: A NamedTuple containing (min, max)

    Example:
        >>> minmax([3, 1, 4, 1, 5, 9, 2, 6])
        MinMax(min=1, max=9)
        >>> minmax([], default=None)
        MinMax(min=None, max=None)
        >>> minmax([])
        Traceback (most recent call last):
            ...
        seqdot.errors.EmptySequence: minmax() iterable argument is empty
    """
    return _pair_or_default(try_minmax(source, comparer), default, "minmax")


def minimum_by[T, K, F](
    source: Iterable[T],
    key: Callable[[T], K],
    comparer: Comparer[K] | None = None,
    *,
    default: F | tp.Literal[Default.NoDefault] = NoDefault,
) -> T | F:
    """Return the first element with the smallest key.

    Args:
        source: the iterable to reduce.
        key: called once per element. Elements whose key is None are
            skipped and never reach the comparer.
        comparer (optional): a comparer over keys replacing natural ordering.
        default (optional):
            value to return if no element has a non-None key.
            If omitted, EmptySequence is raised instead.

    Raises:
        NullInput: source or key is None.
        EmptySequence: no default is given and no element has a non-None key.

    Example:
        >>> minimum_by(["bb", "a", "ccc"], len)
        'a'
    """
    return _value_or_default(try_minimum_by(source, key, comparer), default, "minimum_by")


def maximum_by[T, K, F](
    source: Iterable[T],
    key: Callable[[T], K],
    comparer: Comparer[K] | None = None,
    *,
    default: F | tp.Literal[Default.NoDefault] = NoDefault,
) -> T | F:
    """Return the first element with the largest key.

    Same contract as `minimum_by`, None keys included.

    Example:
        >>> maximum_by(["bb", "a", "cc"], len)
        'bb'
    """
    return _value_or_default(try_maximum_by(source, key, comparer), default, "maximum_by")


def minmax_by[T, K, F](
    source: Iterable[T],
    key: Callable[[T], K],
    comparer: Comparer[K] | None = None,
    *,
    default: F | tp.Literal[Default.NoDefault] = NoDefault,
) -> MinMax[T] | MinMax[F]:
    """Return the elements with the smallest and the largest key.

    Args:
        source: the iterable to reduce.
        key: called once per element. Elements whose key is None are
            skipped and never reach the comparer.
        comparer (optional): a comparer over keys replacing natural ordering.
        default (optional):
            if no element has a non-None key, `MinMax(default, default)` is
            returned. If omitted, EmptySequence is raised instead.

    Raises:
        NullInput: source or key is None.
        EmptySequence: no default is given and no element has a non-None key.

    Example:
        >>> minmax_by(["bb", "a", "ccc", "dd"], len)
        MinMax(min='a', max='ccc')
    """
    return _pair_or_default(try_minmax_by(source, key, comparer), default, "minmax_by")


@not_none("source", "selector")
def minmax_of[T, K, F](
    source: Iterable[T],
    selector: Callable[[T], K],
    comparer: Comparer[K] | None = None,
    *,
    default: F | tp.Literal[Default.NoDefault] = NoDefault,
) -> MinMax[K] | MinMax[F]:
    """Apply selector on each element and return the smallest and largest result.

    Example:
        >>> minmax_of(["bb", "a", "ccc"], len)
        MinMax(min=1, max=3)
    """
    iterator = iter(source)
    try:
        outcome = try_minmax(map(selector, iterator), comparer)
    finally:
        release(iterator)
    return _pair_or_default(outcome, default, "minmax_of")
