"""Legacy ``Investigator`` names.

Investigators and producers were once two separate types with identical
combinators. They are now the same type; this module keeps the old spelling
importable so existing claims do not have to change.
"""

from __future__ import annotations

from typing import TypeVar

from propcheck.generator import Generator
from propcheck.producer import (
    Producer,
    array_of,
    ascii_char,
    boolean,
    char,
    constant,
    convert,
    drop_if,
    floating,
    func,
    func1,
    func2,
    func3,
    func4,
    func5,
    integer,
    keep_if,
    list_of,
    lower_case_char,
    mapped,
    maybe,
    one_of,
    order,
    percentage,
    range_float,
    range_int,
    result,
    string,
    tuple2,
    tuple3,
    tuple4,
    tuple5,
    tuple_of,
    unicode,
    upper_case_char,
    void,
)
from propcheck.shrink import Shrinker

T = TypeVar("T")

Investigator = Producer


def investigator(generator: Generator[T], shrinker: Shrinker[T]) -> Producer[T]:
    return Producer(generator, shrinker)


__all__ = [
    "Investigator",
    "array_of",
    "ascii_char",
    "boolean",
    "char",
    "constant",
    "convert",
    "drop_if",
    "floating",
    "func",
    "func1",
    "func2",
    "func3",
    "func4",
    "func5",
    "integer",
    "investigator",
    "keep_if",
    "list_of",
    "lower_case_char",
    "mapped",
    "maybe",
    "one_of",
    "order",
    "percentage",
    "range_float",
    "range_int",
    "result",
    "string",
    "tuple2",
    "tuple3",
    "tuple4",
    "tuple5",
    "tuple_of",
    "unicode",
    "upper_case_char",
    "void",
]
