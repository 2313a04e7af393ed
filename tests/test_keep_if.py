from __future__ import annotations

import pytest

from propcheck.errors import UnsatisfiableFilterError
from propcheck.generator import Seed
from propcheck.producer import drop_if, integer, keep_if, list_of, range_int


def _is_even(value: int) -> bool:
    return value % 2 == 0


def test_keep_if_samples_and_shrinks_satisfy_predicate() -> None:
    producer = keep_if(_is_even, range_int(0, 100))
    seed = Seed.initial(17)
    for _ in range(200):
        value, seed = producer.sample(seed)
        assert _is_even(value)
        for candidate in producer.shrink(value):
            assert _is_even(candidate)


def test_drop_if_samples_and_shrinks_avoid_predicate() -> None:
    producer = drop_if(_is_even, integer())
    seed = Seed.initial(18)
    for _ in range(200):
        value, seed = producer.sample(seed)
        assert not _is_even(value)
        for candidate in producer.shrink(value):
            assert not _is_even(candidate)


def test_keep_if_on_lists_filters_shrink_candidates() -> None:
    producer = list_of(integer()).keep_if(lambda values: len(values) >= 2)
    seed = Seed.initial(4)
    for _ in range(50):
        value, seed = producer.sample(seed)
        assert len(value) >= 2
        assert all(len(candidate) >= 2 for candidate in producer.shrink(value))


def test_unsatisfiable_keep_if_raises_after_attempts() -> None:
    producer = keep_if(lambda _: False, integer(), attempts=25)
    with pytest.raises(UnsatisfiableFilterError) as excinfo:
        producer.sample(Seed.initial(0))
    assert excinfo.value.attempts == 25
    assert excinfo.value.description == "keep_if"


def test_unsatisfiable_drop_if_raises() -> None:
    producer = range_int(0, 10).drop_if(lambda _: True, attempts=5)
    with pytest.raises(UnsatisfiableFilterError) as excinfo:
        producer.sample(Seed.initial(0))
    assert excinfo.value.description == "drop_if"
    assert isinstance(excinfo.value, RuntimeError)


def test_filter_attempts_default_comes_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PROPCHECK_FILTER_ATTEMPTS", "3")
    producer = keep_if(lambda _: False, integer())
    with pytest.raises(UnsatisfiableFilterError) as excinfo:
        producer.sample(Seed.initial(0))
    assert excinfo.value.attempts == 3
