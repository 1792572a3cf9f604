import inspect
import math
from collections import deque
from collections.abc import Callable, Iterator
from decimal import Decimal
from functools import wraps
from itertools import chain

from seqdot.errors import NullInput

consume = deque[object](maxlen=0).extend


def not_none[**P, R](*names: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Raise NullInput when any of the named arguments is passed as None.

    The check runs when the decorated function is called, so generator
    functions fail eagerly instead of on their first `next`.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        signature = inspect.signature(func)
        if unknown := set(names) - signature.parameters.keys():
            raise ValueError(
                f"{func.__qualname__} has no parameter(s): {', '.join(sorted(unknown))}"
            )

        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            arguments = signature.bind_partial(*args, **kwargs).arguments
            for name in names:
                if name in arguments and arguments[name] is None:
                    raise NullInput(name)
            return func(*args, **kwargs)

        return wrapper

    return decorator


def isnan(value: object) -> bool:
    match value:
        case float():
            return math.isnan(value)
        case Decimal():
            return value.is_nan()
        case _:
            return False


def release(iterator: Iterator[object]) -> None:
    # generators hold frames (and possibly resources) until closed
    close = getattr(iterator, "close", None)
    if callable(close):
        close()


def prepend[T](*val: T, to: Iterator[T]) -> Iterator[T]:
    return chain(val, to)
