import enum
from dataclasses import dataclass
from typing import Literal


class Default(enum.Enum):
    """Sentinel values used as defaults."""

    Exhausted = enum.auto()
    NoDefault = enum.auto()


# TODO: Replace with enum.global_enum if ever supported in pyright
Exhausted: Literal[Default.Exhausted] = Default.Exhausted
NoDefault: Literal[Default.NoDefault] = Default.NoDefault


@dataclass(frozen=True, slots=True)
class Found[T]:
    """A reduction produced `value`."""

    value: T


@dataclass(frozen=True, slots=True)
class Empty:
    """A reduction saw no elements."""


EMPTY = Empty()

type Outcome[T] = Found[T] | Empty
