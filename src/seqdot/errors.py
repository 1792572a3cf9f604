"""
Exceptions raised by seqdot.

Every exception derives from `SeqdotError` and from the builtin exception
a caller would expect for the same situation, so `except ValueError` keeps
working for an empty reduction and `except TypeError` for a missing argument.
"""


class SeqdotError(Exception):
    """Base class of all seqdot errors."""


class NullInput(SeqdotError, TypeError):
    """A required argument was None."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Argument {name!r} must not be None")
        self.name = name


class EmptySequence(SeqdotError, ValueError):
    """Reduction requested over an iterable without elements and no default."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation}() iterable argument is empty")
        self.operation = operation


class NotComparable(SeqdotError, TypeError):
    """Natural ordering is not defined between two values."""

    def __init__(self, lhs: object, rhs: object) -> None:
        super().__init__(
            f"Cannot order {type(lhs).__name__!r} and {type(rhs).__name__!r}"
        )
