import typing as tp
from collections.abc import Callable

type Predicate[T] = Callable[[T], bool]

# negative, zero or positive; the classic `cmp` protocol
type Comparer[T] = Callable[[T, T], int]


class SupportsSub(tp.Protocol):
    def __sub__(self, other: tp.Self) -> tp.Self: ...
