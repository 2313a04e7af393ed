from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import Any, TypeVar

from propcheck.types import Err, Ok, Order

A = TypeVar("A")
B = TypeVar("B")
T = TypeVar("T")

Shrinker = Callable[[T], Iterator[T]]

FLOAT_TOLERANCE = 1e-4


def no_shrink(value: Any) -> Iterator[Any]:
    return iter(())


def boolean(value: bool) -> Iterator[bool]:
    if value:
        yield False


def order(value: Order) -> Iterator[Order]:
    if value is Order.GT:
        yield Order.EQ
        yield Order.LT
    elif value is Order.LT:
        yield Order.EQ


def integer(value: int) -> Iterator[int]:
    if value < 0:
        yield -value
        for candidate in _series_int(0, -value):
            yield -candidate
    else:
        yield from _series_int(0, value)


def at_least_int(minimum: int) -> Shrinker[int]:
    def shrink(value: int) -> Iterator[int]:
        if minimum <= value < 0:
            yield -value
            for candidate in _series_int(0, -value):
                yield -candidate
        else:
            yield from _series_int(max(0, minimum), value)

    return shrink


def floating(value: float) -> Iterator[float]:
    if value < 0:
        yield -value
        for candidate in _series_float(0.0, -value):
            yield -candidate
    else:
        yield from _series_float(0.0, value)


def at_least_float(minimum: float) -> Shrinker[float]:
    def shrink(value: float) -> Iterator[float]:
        if minimum <= value < 0:
            yield -value
            for candidate in _series_float(0.0, -value):
                yield -candidate
        else:
            yield from _series_float(max(0.0, minimum), value)

    return shrink


def at_least_char(minimum: str) -> Shrinker[str]:
    return convert(chr, ord, at_least_int(ord(minimum)))


def char_range(lo: str, hi: str) -> Shrinker[str]:
    return keep_if(lambda ch: lo <= ch <= hi, at_least_char(lo))


def string(value: str) -> Iterator[str]:
    return _string_shrinker(value)


def maybe(shrinker: Shrinker[T]) -> Shrinker[T | None]:
    def shrink(value: T | None) -> Iterator[T | None]:
        if value is None:
            return
        yield None
        yield from shrinker(value)

    return shrink


def result(shrink_err: Shrinker[A], shrink_ok: Shrinker[B]) -> Shrinker[Err[A] | Ok[B]]:
    # arms never cross: an error only shrinks to smaller errors, a value to smaller values
    def shrink(value: Err[A] | Ok[B]) -> Iterator[Err[A] | Ok[B]]:
        if isinstance(value, Err):
            for error in shrink_err(value.error):
                yield Err(error)
        else:
            for item in shrink_ok(value.value):
                yield Ok(item)

    return shrink


def list_of(shrinker: Shrinker[T]) -> Shrinker[list[T]]:
    def shrink(values: list[T]) -> Iterator[list[T]]:
        items = list(values)
        chunk = len(items)
        previous: list[T] | None = None
        while chunk > 0:
            for candidate in _removals(chunk, items):
                # runs of equal elements give back-to-back identical removals
                if candidate != previous:
                    yield candidate
                previous = candidate
            chunk //= 2
        yield from _shrink_each(shrinker, items)

    return shrink


def array_of(shrinker: Shrinker[T]) -> Shrinker[tuple[T, ...]]:
    return convert(tuple, list, list_of(shrinker))


def tuple_of(*shrinkers: Shrinker[Any]) -> Shrinker[tuple[Any, ...]]:
    def shrink(value: tuple[Any, ...]) -> Iterator[tuple[Any, ...]]:
        for index, (shrinker, component) in enumerate(zip(shrinkers, value)):
            for candidate in shrinker(component):
                yield value[:index] + (candidate,) + value[index + 1 :]

    return shrink


def convert(to: Callable[[A], B], back: Callable[[B], A], shrinker: Shrinker[A]) -> Shrinker[B]:
    # a non-injective `to` can map a smaller source value back onto the input
    def shrink(value: B) -> Iterator[B]:
        for candidate in shrinker(back(value)):
            converted = to(candidate)
            if converted != value:
                yield converted

    return shrink


def keep_if(predicate: Callable[[T], bool], shrinker: Shrinker[T]) -> Shrinker[T]:
    def shrink(value: T) -> Iterator[T]:
        for candidate in shrinker(value):
            if predicate(candidate):
                yield candidate

    return shrink


def drop_if(predicate: Callable[[T], bool], shrinker: Shrinker[T]) -> Shrinker[T]:
    return keep_if(lambda value: not predicate(value), shrinker)


def _series_int(low: int, high: int) -> Iterator[int]:
    while low < high:
        yield low
        if low == high - 1:
            return
        low += (high - low) // 2


def _series_float(low: float, high: float) -> Iterator[float]:
    if not low < high:
        return
    yield low
    while True:
        # halving stalls once the gap is a single ulp, which happens above ~1e12
        step = low + (high - low) / 2
        if not low < step < high or high - step <= FLOAT_TOLERANCE:
            return
        yield step
        low = step


def _removals(chunk: int, items: Sequence[T]) -> Iterator[list[T]]:
    prefix: list[T] = []
    rest = list(items)
    while chunk <= len(rest):
        head, tail = rest[:chunk], rest[chunk:]
        yield prefix + tail
        prefix = prefix + head
        rest = tail


def _shrink_each(shrinker: Shrinker[T], items: list[T]) -> Iterator[list[T]]:
    for index, item in enumerate(items):
        for candidate in shrinker(item):
            yield items[:index] + [candidate] + items[index + 1 :]


character: Shrinker[str] = at_least_char(" ")
_string_shrinker: Shrinker[str] = convert("".join, list, list_of(character))
