from __future__ import annotations

import hashlib
import logging
import random
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from propcheck.canonical import canonical_args_bytes
from propcheck.config import DEFAULT_FILTER_ATTEMPTS
from propcheck.errors import UnsatisfiableFilterError

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")

_MASK64 = (1 << 64) - 1


@dataclass(frozen=True)
class Seed:
    state: int

    @classmethod
    def initial(cls, value: int) -> Seed:
        return cls(state=value & _MASK64)

    def split(self) -> tuple[Seed, Seed]:
        return self.derive(b"split-left"), self.derive(b"split-right")

    def derive(self, key: bytes) -> Seed:
        digest = hashlib.sha256(self.state.to_bytes(8, "big") + key).digest()
        return Seed(state=int.from_bytes(digest[:8], "big"))


@dataclass(frozen=True)
class Generator(Generic[T]):
    step: Callable[[Seed], tuple[T, Seed]]

    def sample(self, seed: Seed) -> tuple[T, Seed]:
        return self.step(seed)

    def map(self, func: Callable[[T], U]) -> Generator[U]:
        def step(seed: Seed) -> tuple[U, Seed]:
            value, next_seed = self.step(seed)
            return func(value), next_seed

        return Generator(step)

    def and_then(self, func: Callable[[T], Generator[U]]) -> Generator[U]:
        def step(seed: Seed) -> tuple[U, Seed]:
            value, next_seed = self.step(seed)
            return func(value).step(next_seed)

        return Generator(step)

    def keep_if(
        self,
        predicate: Callable[[T], bool],
        attempts: int = DEFAULT_FILTER_ATTEMPTS,
        description: str = "keep_if",
    ) -> Generator[T]:
        def step(seed: Seed) -> tuple[T, Seed]:
            current = seed
            for _ in range(attempts):
                value, current = self.step(current)
                if predicate(value):
                    return value, current
            logger.warning(
                "filter exhausted description=%s attempts=%s", description, attempts
            )
            raise UnsatisfiableFilterError(attempts, description)

        return Generator(step)


def _draw(draw: Callable[[random.Random], T]) -> Generator[T]:
    def step(seed: Seed) -> tuple[T, Seed]:
        rng = random.Random(seed.state)
        value = draw(rng)
        return value, Seed(state=rng.getrandbits(64))

    return Generator(step)


def constant(value: T) -> Generator[T]:
    return Generator(lambda seed: (value, seed))


def int_range(lo: int, hi: int) -> Generator[int]:
    return _draw(lambda rng: rng.randint(lo, hi))


def float_range(lo: float, hi: float) -> Generator[float]:
    return _draw(lambda rng: rng.uniform(lo, hi))


def boolean() -> Generator[bool]:
    return _draw(lambda rng: rng.random() < 0.5)


def one_of(values: Iterable[T]) -> Generator[T]:
    options = tuple(values)
    if not options:
        raise ValueError("one_of needs at least one value")
    return _draw(lambda rng: rng.choice(options))


def frequency(choices: Iterable[tuple[float, Generator[T]]]) -> Generator[T]:
    options = tuple(choices)
    if not options:
        raise ValueError("frequency needs at least one option")
    total = sum(weight for weight, _ in options)

    def pick(rng: random.Random) -> Generator[T]:
        target = rng.random() * total
        for weight, gen in options:
            if target < weight:
                return gen
            target -= weight
        return options[-1][1]

    return _draw(pick).and_then(lambda gen: gen)


def list_of(length: Generator[int], gen: Generator[T]) -> Generator[list[T]]:
    def step(seed: Seed) -> tuple[list[T], Seed]:
        size, current = length.step(seed)
        values: list[T] = []
        for _ in range(size):
            value, current = gen.step(current)
            values.append(value)
        return values, current

    return Generator(step)


def zip_all(*gens: Generator[Any]) -> Generator[tuple[Any, ...]]:
    def step(seed: Seed) -> tuple[tuple[Any, ...], Seed]:
        current = seed
        values: list[Any] = []
        for gen in gens:
            value, current = gen.step(current)
            values.append(value)
        return tuple(values), current

    return Generator(step)


def sample_many(gen: Generator[T], n: int, seed: Seed) -> tuple[list[T], Seed]:
    values: list[T] = []
    current = seed
    for _ in range(n):
        value, current = gen.step(current)
        values.append(value)
    return values, current


@dataclass(frozen=True)
class GeneratedFunction(Generic[T]):
    arity: int
    seed: Seed
    codomain: Generator[T] = field(repr=False)

    def __call__(self, *args: Any) -> T:
        if len(args) != self.arity:
            raise TypeError(
                f"generated function takes {self.arity} arguments but {len(args)} were given"
            )
        value, _ = self.codomain.step(self.seed.derive(canonical_args_bytes(args)))
        return value


def function_of(codomain: Generator[T], arity: int) -> Generator[GeneratedFunction[T]]:
    def step(seed: Seed) -> tuple[GeneratedFunction[T], Seed]:
        base, next_seed = seed.split()
        return GeneratedFunction(arity=arity, seed=base, codomain=codomain), next_seed

    return Generator(step)
