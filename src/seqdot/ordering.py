"""
Defines comparers and functors producing comparers.

A comparer takes two values and returns a negative number, zero, or a
positive number when the first is smaller than, equal to, or greater than
the second, i.e. what `functools.cmp_to_key` expects.
"""

from collections.abc import Callable

from seqdot._helpers import not_none
from seqdot.errors import NotComparable
from seqdot.wtyping import Comparer


def natural(lhs: object, rhs: object, /) -> int:
    """
    Compare two values by their natural ordering (`<` and `>`).

    Example:
        >>> natural(1, 2), natural(2, 2), natural(3, 2)
        (-1, 0, 1)
        >>> natural("a", 1)
        Traceback (most recent call last):
            ...
        seqdot.errors.NotComparable: Cannot order 'str' and 'int'
    """
    try:
        return (lhs > rhs) - (lhs < rhs)  # pyright: ignore[reportOperatorIssue]
    except TypeError as exc:
        raise NotComparable(lhs, rhs) from exc


@not_none("comparer")
def inverse[T](comparer: Comparer[T]) -> Comparer[T]:
    """
    Given a comparer, returns a comparer for the reversed order.

    Example:
        >>> inverse(natural)(1, 2)
        1
    """

    def inverted(lhs: T, rhs: T, /) -> int:
        return -comparer(lhs, rhs)

    return inverted


@not_none("key")
def by_key[T, K](key: Callable[[T], K], comparer: Comparer[K] | None = None) -> Comparer[T]:
    """
    Given a key extractor, returns a comparer that orders values by their keys.

    Example:
        >>> by_key(len)("ccc", "a")
        1
        >>> by_key(len, inverse(natural))("ccc", "a")
        -1
    """
    compare: Comparer[K] = natural if comparer is None else comparer

    def keyed(lhs: T, rhs: T, /) -> int:
        return compare(key(lhs), key(rhs))

    return keyed
