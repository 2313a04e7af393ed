from __future__ import annotations

import pytest

from propcheck.generator import Seed
from propcheck.producer import func1, func2, func3, func4, func5, integer, string
from propcheck.types import Order


def test_generated_function_is_referentially_transparent() -> None:
    fn, _ = func1(integer()).sample(Seed.initial(3))
    for arg in range(-20, 20):
        assert fn(arg) == fn(arg)


def test_generated_function_varies_with_arguments() -> None:
    fn, _ = func1(integer()).sample(Seed.initial(3))
    outputs = {fn(arg) for arg in range(30)}
    assert len(outputs) > 1


def test_same_seed_gives_equivalent_functions() -> None:
    producer = func2(string())
    first, _ = producer.sample(Seed.initial(10))
    second, _ = producer.sample(Seed.initial(10))
    assert first == second
    for a in range(5):
        assert first(a, "x") == second(a, "x")


def test_successive_samples_are_different_functions() -> None:
    producer = func1(integer())
    first, seed = producer.sample(Seed.initial(10))
    second, _ = producer.sample(seed)
    assert any(first(arg) != second(arg) for arg in range(30))


def test_arity_is_enforced() -> None:
    fn, _ = func3(integer()).sample(Seed.initial(1))
    fn(1, 2, 3)
    with pytest.raises(TypeError):
        fn(1, 2)


def test_higher_arities_accept_mixed_arguments() -> None:
    fn4, _ = func4(integer()).sample(Seed.initial(2))
    fn5, _ = func5(integer()).sample(Seed.initial(2))
    assert fn4(1, "a", None, [1, 2]) == fn4(1, "a", None, [1, 2])
    assert fn5(Order.LT, 1.5, True, {"k": 1}, (1,)) == fn5(Order.LT, 1.5, True, {"k": 1}, (1,))


def test_dict_arguments_with_mixed_key_types() -> None:
    fn, _ = func1(integer()).sample(Seed.initial(1))
    assert fn({1: "a", "b": 2}) == fn({"b": 2, 1: "a"})
    assert fn({frozenset({1, "x"}): (2, None)}) == fn({frozenset({"x", 1}): (2, None)})


def test_function_producers_do_not_shrink() -> None:
    producer = func1(integer())
    fn, _ = producer.sample(Seed.initial(0))
    assert list(producer.shrink(fn)) == []
