import math
from collections.abc import Iterator
from decimal import Decimal
from fractions import Fraction

import pytest

from seqdot._helpers import consume, isnan, not_none, prepend, release
from seqdot.errors import NullInput


@not_none("source", "key")
def keyed(source: object, key: object, extra: object = None) -> tuple[object, ...]:
    return source, key, extra


def test_not_none_positional_and_keyword():
    assert keyed(1, 2) == (1, 2, None)
    assert keyed(source=1, key=2, extra=None) == (1, 2, None)

    with pytest.raises(NullInput, match="'source'") as excinfo:
        _ = keyed(None, 2)
    assert excinfo.value.name == "source"
    with pytest.raises(NullInput, match="'key'"):
        _ = keyed(1, key=None)


def test_not_none_is_eager_for_generators():
    @not_none("source")
    def gen(source: list[int]) -> Iterator[int]:
        yield from source

    with pytest.raises(NullInput):
        _ = gen(None)  # pyright: ignore[reportArgumentType]


def test_not_none_leaves_missing_arguments_to_python():
    with pytest.raises(TypeError, match="missing"):
        _ = keyed(1)  # pyright: ignore[reportCallIssue]


def test_not_none_rejects_unknown_parameter():
    with pytest.raises(ValueError, match="no parameter"):

        @not_none("missing")
        def _func(source: object) -> object:
            return source


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (float("nan"), True),
        (-math.nan, True),
        (Decimal("NaN"), True),
        (Decimal("sNaN"), True),
        (math.inf, False),
        (1.0, False),
        (Decimal("1.5"), False),
        (Fraction(1, 2), False),
        ("nan", False),
        (None, False),
    ],
)
def test_isnan(value: object, expected: bool):
    assert isnan(value) is expected


def test_release_closes_generators_only():
    state: list[str] = []

    def gen() -> Iterator[int]:
        try:
            yield 1
            yield 2
        finally:
            state.append("closed")

    running = gen()
    _ = next(running)
    release(running)
    assert state == ["closed"]

    listed = iter([1, 2])
    release(listed)
    assert next(listed) == 1


def test_prepend_and_consume():
    it = iter([2, 3])
    assert list(prepend(0, 1, to=it)) == [0, 1, 2, 3]

    it = iter(range(5))
    consume(next(it) for _ in range(2))
    assert list(it) == [2, 3, 4]
