from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from propcheck import generator as gen
from propcheck import shrink
from propcheck.config import DEFAULT_MAX_LIST_LENGTH, MAX_FLOAT, MAX_INT, MIN_INT, default_config
from propcheck.generator import GeneratedFunction, Generator, Seed
from propcheck.shrink import Shrinker
from propcheck.types import Err, Ok, Order

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
E = TypeVar("E")
T = TypeVar("T")
U = TypeVar("U")

_SURROGATE_LO = 0xD800
_SURROGATE_HI = 0xDFFF
_MAX_CODE_POINT = 0x10FFFF


@dataclass(frozen=True)
class Producer(Generic[T]):
    generator: Generator[T]
    shrinker: Shrinker[T]

    def sample(self, seed: Seed) -> tuple[T, Seed]:
        return self.generator.step(seed)

    def shrink(self, value: T) -> Iterator[T]:
        return self.shrinker(value)

    def map(self, func: Callable[[T], U]) -> Producer[U]:
        return mapped(func, self)

    def convert(
        self,
        to: Callable[[T], U],
        back: Callable[[U], T],
        *,
        check_inverse: bool = False,
    ) -> Producer[U]:
        return convert(to, back, self, check_inverse=check_inverse)

    def keep_if(
        self, predicate: Callable[[T], bool], *, attempts: int | None = None
    ) -> Producer[T]:
        return keep_if(predicate, self, attempts=attempts)

    def drop_if(
        self, predicate: Callable[[T], bool], *, attempts: int | None = None
    ) -> Producer[T]:
        return drop_if(predicate, self, attempts=attempts)


# base producers


def void() -> Producer[None]:
    return Producer(gen.constant(None), shrink.no_shrink)


def constant(value: T) -> Producer[T]:
    return Producer(gen.constant(value), shrink.no_shrink)


def one_of(values: Iterable[T]) -> Producer[T]:
    options = tuple(values)
    return Producer(gen.one_of(options), _earlier_options(options))


def boolean() -> Producer[bool]:
    return Producer(gen.boolean(), shrink.boolean)


def order() -> Producer[Order]:
    return Producer(gen.one_of(list(Order)), shrink.order)


def integer() -> Producer[int]:
    generator = gen.frequency(
        [
            (3, gen.int_range(-50, 50)),
            (0.2, gen.constant(0)),
            (1, gen.int_range(0, MAX_INT)),
            (1, gen.int_range(MIN_INT, 0)),
        ]
    )
    return Producer(generator, shrink.keep_if(_within(MIN_INT, MAX_INT), shrink.integer))


def range_int(lo: int, hi: int) -> Producer[int]:
    assert lo <= hi, f"range_int needs lo <= hi, got lo={lo} hi={hi}"
    return Producer(gen.int_range(lo, hi), shrink.keep_if(_within(lo, hi), shrink.integer))


def floating() -> Producer[float]:
    generator = gen.frequency(
        [
            (3, gen.float_range(-50.0, 50.0)),
            (0.5, gen.constant(0.0)),
            (1, gen.float_range(-1.0, 1.0)),
            (1, gen.float_range(0.0, MAX_FLOAT)),
            (1, gen.float_range(-MAX_FLOAT, 0.0)),
        ]
    )
    return Producer(generator, shrink.floating)


def range_float(lo: float, hi: float) -> Producer[float]:
    assert lo <= hi, f"range_float needs lo <= hi, got lo={lo} hi={hi}"
    shrinker = shrink.keep_if(_within(lo, hi), shrink.at_least_float(lo))
    return Producer(gen.float_range(lo, hi), shrinker)


def percentage() -> Producer[float]:
    generator = gen.frequency(
        [
            (8, gen.float_range(0.0, 1.0)),
            (1, gen.constant(0.0)),
            (1, gen.constant(1.0)),
        ]
    )
    return Producer(generator, shrink.keep_if(_within(0.0, 1.0), shrink.floating))


def char() -> Producer[str]:
    return _char_range(32, 126)


def ascii_char() -> Producer[str]:
    return _char_range(0, 127)


def upper_case_char() -> Producer[str]:
    return _char_range(ord("A"), ord("Z"))


def lower_case_char() -> Producer[str]:
    return _char_range(ord("a"), ord("z"))


def unicode() -> Producer[str]:
    gap = _SURROGATE_HI - _SURROGATE_LO + 1
    generator = gen.int_range(0, _MAX_CODE_POINT - gap).map(
        lambda code: chr(code + gap if code >= _SURROGATE_LO else code)
    )
    return Producer(generator, shrink.keep_if(_not_surrogate, shrink.character))


def string() -> Producer[str]:
    generator = gen.list_of(
        gen.int_range(0, DEFAULT_MAX_LIST_LENGTH), char().generator
    ).map("".join)
    return Producer(generator, shrink.string)


# structural combinators


def maybe(producer: Producer[T]) -> Producer[T | None]:
    generator = gen.frequency([(1, gen.constant(None)), (3, producer.generator)])
    return Producer(generator, shrink.maybe(producer.shrinker))


def result(errors: Producer[E], values: Producer[T]) -> Producer[Err[E] | Ok[T]]:
    generator: Generator[Err[E] | Ok[T]] = gen.frequency(
        [(1, errors.generator.map(Err)), (1, values.generator.map(Ok))]
    )
    return Producer(generator, shrink.result(errors.shrinker, values.shrinker))


def list_of(
    producer: Producer[T], *, max_length: int = DEFAULT_MAX_LIST_LENGTH
) -> Producer[list[T]]:
    generator = gen.list_of(gen.int_range(0, max_length), producer.generator)
    return Producer(generator, shrink.list_of(producer.shrinker))


def array_of(
    producer: Producer[T], *, max_length: int = DEFAULT_MAX_LIST_LENGTH
) -> Producer[tuple[T, ...]]:
    generator = gen.list_of(gen.int_range(0, max_length), producer.generator).map(tuple)
    return Producer(generator, shrink.array_of(producer.shrinker))


def tuple_of(*producers: Producer[Any]) -> Producer[tuple[Any, ...]]:
    generator = gen.zip_all(*(item.generator for item in producers))
    return Producer(generator, shrink.tuple_of(*(item.shrinker for item in producers)))


def tuple2(first: Producer[A], second: Producer[B]) -> Producer[tuple[A, B]]:
    return tuple_of(first, second)


def tuple3(
    first: Producer[A], second: Producer[B], third: Producer[C]
) -> Producer[tuple[A, B, C]]:
    return tuple_of(first, second, third)


def tuple4(
    first: Producer[A], second: Producer[B], third: Producer[C], fourth: Producer[D]
) -> Producer[tuple[A, B, C, D]]:
    return tuple_of(first, second, third, fourth)


def tuple5(
    first: Producer[A],
    second: Producer[B],
    third: Producer[C],
    fourth: Producer[D],
    fifth: Producer[E],
) -> Producer[tuple[A, B, C, D, E]]:
    return tuple_of(first, second, third, fourth, fifth)


# transformation combinators


def mapped(func: Callable[[T], U], producer: Producer[T]) -> Producer[U]:
    # func is not known to be invertible, so there is nothing safe to shrink towards
    return Producer(producer.generator.map(func), shrink.no_shrink)


def convert(
    to: Callable[[T], U],
    back: Callable[[U], T],
    producer: Producer[T],
    *,
    check_inverse: bool = False,
) -> Producer[U]:
    """Move a producer into another type through a pair of conversions.

    Shrinking goes through ``back``: a value is pulled into the source domain,
    shrunk there, and every candidate is pushed forward with ``to``. This is
    only coherent when ``to(back(y)) == y`` for every value ``y`` the producer
    can sample; nothing here can verify that in general. ``check_inverse``
    asserts it on each sampled value, which is useful while writing a test
    but costs an extra round trip per sample.
    """
    generator = producer.generator.map(to)
    if check_inverse:
        generator = generator.map(_round_trip_checked(to, back))
    return Producer(generator, shrink.convert(to, back, producer.shrinker))


def keep_if(
    predicate: Callable[[T], bool],
    producer: Producer[T],
    *,
    attempts: int | None = None,
) -> Producer[T]:
    attempts = default_config().filter_attempts if attempts is None else attempts
    generator = producer.generator.keep_if(predicate, attempts, "keep_if")
    return Producer(generator, shrink.keep_if(predicate, producer.shrinker))


def drop_if(
    predicate: Callable[[T], bool],
    producer: Producer[T],
    *,
    attempts: int | None = None,
) -> Producer[T]:
    attempts = default_config().filter_attempts if attempts is None else attempts
    generator = producer.generator.keep_if(
        lambda value: not predicate(value), attempts, "drop_if"
    )
    return Producer(generator, shrink.drop_if(predicate, producer.shrinker))


# function producers


def func(codomain: Producer[T], arity: int) -> Producer[GeneratedFunction[T]]:
    return Producer(gen.function_of(codomain.generator, arity), shrink.no_shrink)


def func1(codomain: Producer[T]) -> Producer[GeneratedFunction[T]]:
    return func(codomain, 1)


def func2(codomain: Producer[T]) -> Producer[GeneratedFunction[T]]:
    return func(codomain, 2)


def func3(codomain: Producer[T]) -> Producer[GeneratedFunction[T]]:
    return func(codomain, 3)


def func4(codomain: Producer[T]) -> Producer[GeneratedFunction[T]]:
    return func(codomain, 4)


def func5(codomain: Producer[T]) -> Producer[GeneratedFunction[T]]:
    return func(codomain, 5)


def _within(lo: Any, hi: Any) -> Callable[[Any], bool]:
    return lambda value: lo <= value <= hi


def _not_surrogate(ch: str) -> bool:
    return not _SURROGATE_LO <= ord(ch) <= _SURROGATE_HI


def _char_range(lo: int, hi: int) -> Producer[str]:
    # shrink towards the space character when the range has it, else the lowest code
    target = max(lo, ord(" ")) if ord(" ") <= hi else lo
    return Producer(gen.int_range(lo, hi).map(chr), shrink.char_range(chr(target), chr(hi)))


def _earlier_options(options: Sequence[T]) -> Shrinker[T]:
    def shrinker(value: T) -> Iterator[T]:
        for option in options:
            if option == value:
                return
            yield option

    return shrinker


def _round_trip_checked(to: Callable[[T], U], back: Callable[[U], T]) -> Callable[[U], U]:
    def check(value: U) -> U:
        restored = to(back(value))
        assert restored == value, (
            f"convert round trip changed {value!r} into {restored!r}; "
            "shrinking through this conversion is incoherent"
        )
        return value

    return check
