from __future__ import annotations

import pytest

from propcheck.errors import UnsatisfiableFilterError
from propcheck.evaluate import check, claim, claim_false, claim_true, quick_check, suite
from propcheck.evidence import MultiEvidence, UnitEvidence, count_checks, evidence_passed
from propcheck.producer import integer, keep_if, list_of, range_int


def test_passing_claim_runs_every_trial() -> None:
    reverse_twice = claim(
        "reversing twice gives the original list",
        lambda xs: list(reversed(list(reversed(xs)))),
        lambda xs: xs,
        list_of(integer()),
    )
    evidence = check(reverse_twice, 50, 3)
    assert isinstance(evidence, UnitEvidence)
    assert evidence.status == "PASS"
    assert evidence.number_of_checks == 50
    assert evidence.failure is None


def test_failing_claim_is_shrunk_to_small_counterexample() -> None:
    sorted_claim = claim_true("lists are sorted", lambda xs: xs == sorted(xs), list_of(integer()))
    evidence = check(sorted_claim, 100, 1)
    assert isinstance(evidence, UnitEvidence)
    assert evidence.status == "FAIL"
    assert evidence.failure is not None
    assert evidence.original is not None
    counterexample = evidence.failure.counterexample
    assert len(counterexample) == 2
    assert counterexample[0] > counterexample[1]
    assert all(abs(item) <= 1 for item in counterexample)
    assert evidence.number_of_shrinks > 0
    assert len(evidence.original.counterexample) >= 2


def test_claim_false_and_expected_actual_recorded() -> None:
    never_five = claim_false("numbers are never five", lambda n: n == 5, range_int(5, 5))
    evidence = check(never_five, 10, 0)
    assert evidence.status == "FAIL"
    assert evidence.failure is not None
    assert evidence.failure.counterexample == 5
    assert evidence.failure.actual is True
    assert evidence.failure.expected is False
    assert evidence.number_of_checks == 1


def test_exception_in_property_is_failing_evidence() -> None:
    def explode(value: int) -> bool:
        if value > 3:
            raise ValueError("too big")
        return True

    evidence = check(claim_true("small values", explode, range_int(0, 100)), 100, 2)
    assert evidence.status == "FAIL"
    assert evidence.failure is not None
    assert evidence.failure.counterexample == 4
    assert str(evidence.failure.actual).startswith("raised ValueError")


def test_unsatisfiable_filter_is_not_a_counterexample() -> None:
    never = keep_if(lambda _: False, integer(), attempts=10)
    with pytest.raises(UnsatisfiableFilterError):
        check(claim_true("never sampled", lambda _: True, never), 5, 0)


def test_suite_collects_evidence_for_each_claim() -> None:
    checks = suite(
        "integers",
        [
            claim_true("abs is non-negative", lambda n: abs(n) >= 0, integer()),
            claim_true("everything is small", lambda n: abs(n) < 10, integer()),
            suite("nested", [claim_true("trivial", lambda _: True, integer())]),
        ],
    )
    evidence = check(checks, 40, 6)
    assert isinstance(evidence, MultiEvidence)
    assert [item.name for item in evidence.evidence] == [
        "abs is non-negative",
        "everything is small",
        "nested",
    ]
    assert not evidence_passed(evidence)
    failing = evidence.evidence[1]
    assert isinstance(failing, UnitEvidence)
    assert failing.failure is not None
    assert failing.failure.counterexample in (10, -10)
    assert count_checks(evidence.evidence[0]) == 40


def test_check_is_reproducible_for_a_seed() -> None:
    sorted_claim = claim_true("lists are sorted", lambda xs: xs == sorted(xs), list_of(integer()))
    first = check(sorted_claim, 100, 77)
    second = check(sorted_claim, 100, 77)
    assert first == second


def test_quick_check_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PROPCHECK_TRIALS", "7")
    monkeypatch.setenv("PROPCHECK_SEED", "3")
    evidence = quick_check(claim_true("trivial", lambda _: True, integer()))
    assert evidence.number_of_checks == 7
    assert evidence.seed == 3


def test_evidence_dumps_to_json() -> None:
    short_lists = claim_true("lists are short", lambda xs: len(xs) < 2, list_of(integer()))
    evidence = check(short_lists, 50, 0)
    payload = evidence.model_dump(mode="json")
    assert payload["status"] == "FAIL"
    assert payload["failure"]["counterexample"] == [0, 0]
    restored = UnitEvidence.model_validate(payload)
    assert restored.failure is not None
    assert restored.failure.counterexample == [0, 0]
