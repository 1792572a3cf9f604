"""Reductions and helpers over iterables."""

import logging

from seqdot.asyncs import collect_async, for_each_async
from seqdot.chain import Iter
from seqdot.defaults import EMPTY, Empty, Found, NoDefault, Outcome
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
from seqdot.errors import EmptySequence, NotComparable, NullInput, SeqdotError
from seqdot.minmax import (
    MinMax,
    maximum,
    maximum_by,
    minimum,
    minimum_by,
    minmax,
    minmax_by,
    minmax_of,
    try_maximum,
    try_maximum_by,
    try_minimum,
    try_minimum_by,
    try_minmax,
    try_minmax_by,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "EMPTY",
    "NOT_FOUND_INDEX",
    "Empty",
    "EmptySequence",
    "Found",
    "Iter",
    "MinMax",
    "NoDefault",
    "NotComparable",
    "NullInput",
    "Outcome",
    "SeqdotError",
    "collect_async",
    "distinct_by",
    "first_or_default",
    "for_each",
    "for_each_async",
    "index_of",
    "is_null_or_empty",
    "join_to_string",
    "maximum",
    "maximum_by",
    "minimum",
    "minimum_by",
    "minmax",
    "minmax_by",
    "minmax_of",
    "skip_safe",
    "slice_if_required",
    "to_readonly_collection",
    "to_readonly_dict",
    "to_readonly_list",
    "try_maximum",
    "try_maximum_by",
    "try_minimum",
    "try_minimum_by",
    "try_minmax",
    "try_minmax_by",
]
