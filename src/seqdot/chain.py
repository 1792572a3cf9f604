# pyright: reportImportCycles=false
from __future__ import annotations

import typing as tp
from collections.abc import Callable, Iterable, Iterator
from functools import update_wrapper

from seqdot import enumerable
from seqdot import minmax as reductions
from seqdot._helpers import prepend, release
from seqdot.defaults import Default, Exhausted, NoDefault


def _see_also[F: Callable[..., object]](inner: F, func: Callable[..., object]) -> F:
    _ = update_wrapper(inner, func, assigned=("__name__", "__qualname__"), updated=())
    inner.__doc__ = f"see {func.__module__}.{func.__qualname__}"
    return inner


class MethodKind[T]:
    @staticmethod
    def consumer[**P, R](
        func: Callable[tp.Concatenate[Iterable[T], P], R],
    ) -> Callable[tp.Concatenate[Iter[T], P], R]:
        def inner(self: Iter[T], *args: P.args, **kwargs: P.kwargs) -> R:
            return func(self, *args, **kwargs)

        return _see_also(inner, func)

    @staticmethod
    def augmentor[**P, R](
        func: Callable[tp.Concatenate[Iterable[T], P], Iterable[R]],
    ) -> Callable[tp.Concatenate[Iter[T], P], Iter[R]]:
        def inner(self: Iter[T], *args: P.args, **kwargs: P.kwargs) -> Iter[R]:
            return Iter(func(self, *args, **kwargs))

        return _see_also(inner, func)


@tp.final
class Iter[T](Iterator[T]):
    """
    Iterator over a given iterable, providing method chaining.

    Args:
        iterable: an iterable that is to be turned into an Iter

    Example:
        >>> Iter(["bb", "a", "ccc"]).map(len).minmax()
        MinMax(min=1, max=3)
        >>> Iter(range(10)).distinct_by(lambda x: x % 3).skip_safe(1).to_list()
        [1, 2]
        >>> Iter([4, 8, 15]).filter(lambda x: x > 5).join_to_string()
        "'8', '15'"
    """

    def __init__(self, iterable: Iterable[T] = ()) -> None:
        self.iterable = iterable
        self._iter: Iterator[T] = (
            iter(iterable) if not isinstance(iterable, Iter) else iterable._iter
        )
        # peek_next_value swaps _iter for a chain, _root is what gets closed
        self._root: Iterator[T] = (
            self._iter if not isinstance(iterable, Iter) else iterable._root
        )

    @tp.override
    def __iter__(self) -> Iterator[T]:
        return self

    @tp.override
    def __next__(self) -> T:
        return next(self._iter)

    def close(self) -> None:
        """Close the wrapped iterator, if it supports closing.

        Reductions call this once they are done with the Iter.

        Example:
            >>> itbl = Iter(x for x in range(3))
            >>> itbl.close(); itbl.to_list()
            []
        """
        release(self._root)

    # NOTE: consider if it should error
    @tp.overload
    def next(self, default: tp.Literal[Default.NoDefault] = NoDefault) -> T: ...
    @tp.overload
    def next[TDefault](self, default: TDefault) -> T | TDefault: ...
    def next[TDefault](self, default: TDefault = NoDefault) -> T | TDefault:
        """next value in the iterator.

        Returns:
            next value or default

        Example:
            >>> itbl = Iter([1, 2])
            >>> itbl.next(), itbl.next(), itbl.next(default=-1)
            (1, 2, -1)
        """
        return next(self) if default is NoDefault else next(self, default)

    @tp.overload
    def peek_next_value(
        self, default: tp.Literal[Default.Exhausted] = Exhausted
    ) -> T | tp.Literal[Default.Exhausted]: ...
    @tp.overload
    def peek_next_value[TDefault](self, default: TDefault) -> T | TDefault: ...
    @tp.no_type_check
    def peek_next_value[TDefault](self, default: TDefault = Exhausted) -> T | TDefault:
        """Peek the next value that would be yielded, if there is element left to yield.
        Otherwise, return default.

        Example:
            >>> itbl = Iter([1, 2])
            >>> itbl.peek_next_value(), itbl.peek_next_value()
            (1, 1)
            >>> itbl.to_list(); itbl.peek_next_value()
            [1, 2]
            <Default.Exhausted: 1>
        """
        item = default
        for item in self._iter:
            self._iter = prepend(item, to=self._iter)
            break
        return item

    def is_empty(self) -> bool:
        """Check whether no element is left, without consuming one.

        Example:
            >>> Iter([]).is_empty(), Iter([None]).is_empty()
            (True, False)
        """
        return self.peek_next_value() is Exhausted

    def map[R](self, func: Callable[[T], R]) -> Iter[R]:
        """
        map a function on each element of self.

        Example:
            >>> Iter(["0", "1", "10"]).map(int).to_list()
            [0, 1, 10]
        """
        return Iter(map(func, self))

    def filter(self, predicate: Callable[[T], bool] | None) -> Iter[T]:
        """
        Filter self based on predicate, None keeps truthy elements.

        Example:
            >>> Iter([0, 1, 2, 3]).filter(None).to_list()
            [1, 2, 3]
        """
        return Iter(filter(predicate, self._iter))

    to_list = MethodKind[T].consumer(list)
    """convert to list"""
    to_readonly_list = MethodKind[T].consumer(enumerable.to_readonly_list)
    to_readonly_dict = MethodKind[T].consumer(enumerable.to_readonly_dict)
    first_or_default = MethodKind[T].consumer(enumerable.first_or_default)
    index_of = MethodKind[T].consumer(enumerable.index_of)
    join_to_string = MethodKind[T].consumer(enumerable.join_to_string)
    for_each = MethodKind[T].consumer(enumerable.for_each)

    distinct_by = MethodKind[T].augmentor(enumerable.distinct_by)
    slice_if_required = MethodKind[T].augmentor(enumerable.slice_if_required)
    skip_safe = MethodKind[T].augmentor(enumerable.skip_safe)

    min = MethodKind[T].consumer(reductions.minimum)
    max = MethodKind[T].consumer(reductions.maximum)
    minmax = MethodKind[T].consumer(reductions.minmax)
    min_by = MethodKind[T].consumer(reductions.minimum_by)
    max_by = MethodKind[T].consumer(reductions.maximum_by)
    minmax_by = MethodKind[T].consumer(reductions.minmax_by)
    minmax_of = MethodKind[T].consumer(reductions.minmax_of)
