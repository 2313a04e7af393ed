from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from propcheck.config import CheckConfig, default_config
from propcheck.errors import PropcheckError
from propcheck.evidence import Failure, MultiEvidence, UnitEvidence
from propcheck.generator import Seed
from propcheck.producer import Producer

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Claim(Generic[T]):
    name: str
    producer: Producer[T]
    actual: Callable[[T], Any]
    expected: Callable[[T], Any]


@dataclass(frozen=True)
class Suite:
    name: str
    claims: tuple[Union[Claim[Any], Suite], ...]


def claim(
    name: str,
    actual: Callable[[T], Any],
    expected: Callable[[T], Any],
    producer: Producer[T],
) -> Claim[T]:
    return Claim(name=name, producer=producer, actual=actual, expected=expected)


def claim_true(name: str, predicate: Callable[[T], bool], producer: Producer[T]) -> Claim[T]:
    return Claim(name=name, producer=producer, actual=predicate, expected=lambda _: True)


def claim_false(name: str, predicate: Callable[[T], bool], producer: Producer[T]) -> Claim[T]:
    return Claim(name=name, producer=producer, actual=predicate, expected=lambda _: False)


def suite(name: str, claims: Iterable[Claim[Any] | Suite]) -> Suite:
    return Suite(name=name, claims=tuple(claims))


def check(
    target: Claim[Any] | Suite,
    trials: int | None = None,
    seed: int | Seed | None = None,
    *,
    config: CheckConfig | None = None,
) -> UnitEvidence | MultiEvidence:
    config = config or default_config()
    trials = config.trials if trials is None else trials
    if isinstance(seed, Seed):
        start = seed
    else:
        start = Seed.initial(config.seed if seed is None else seed)
    if isinstance(target, Suite):
        logger.info("suite start name=%s claims=%s", target.name, len(target.claims))
        return MultiEvidence(
            name=target.name,
            evidence=[check(item, trials, start, config=config) for item in target.claims],
        )
    return _check_claim(target, trials, start, config)


def quick_check(target: Claim[Any] | Suite) -> UnitEvidence | MultiEvidence:
    return check(target, config=default_config())


def _check_claim(
    target: Claim[T], trials: int, seed: Seed, config: CheckConfig
) -> UnitEvidence:
    logger.info("check start name=%s trials=%s seed=%s", target.name, trials, seed.state)
    current = seed
    for index in range(trials):
        value, current = target.producer.sample(current)
        failure = _evaluate(target, value)
        if failure is None:
            continue
        shrunk, shrinks = _minimize(target, failure, config.max_shrinks)
        logger.info(
            "check fail name=%s checks=%s shrinks=%s",
            target.name,
            index + 1,
            shrinks,
        )
        return UnitEvidence(
            name=target.name,
            seed=seed.state,
            number_of_checks=index + 1,
            status="FAIL",
            failure=shrunk,
            original=failure,
            number_of_shrinks=shrinks,
        )
    logger.info("check pass name=%s checks=%s", target.name, trials)
    return UnitEvidence(
        name=target.name,
        seed=seed.state,
        number_of_checks=trials,
        status="PASS",
    )


def _evaluate(target: Claim[T], value: T) -> Failure | None:
    try:
        actual = target.actual(value)
        expected = target.expected(value)
    except PropcheckError:
        raise
    except Exception as exc:
        logger.debug("property raised name=%s error=%r", target.name, exc)
        return Failure(counterexample=value, actual=f"raised {exc!r}", expected="no exception")
    if actual == expected:
        return None
    return Failure(counterexample=value, actual=actual, expected=expected)


def _minimize(target: Claim[T], failure: Failure, max_shrinks: int) -> tuple[Failure, int]:
    current = failure
    shrinks = 0
    while shrinks < max_shrinks:
        for candidate in target.producer.shrink(current.counterexample):
            outcome = _evaluate(target, candidate)
            if outcome is not None:
                current = outcome
                shrinks += 1
                break
        else:
            break
    logger.debug("shrink complete name=%s shrinks=%s", target.name, shrinks)
    return current, shrinks
