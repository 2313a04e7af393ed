from __future__ import annotations

import json
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, field_serializer

from propcheck.canonical import canonical_json_str


class Failure(BaseModel):
    counterexample: Any
    actual: Any
    expected: Any

    @field_serializer("counterexample", "actual", "expected", when_used="json")
    def _serialize_value(self, value: Any) -> Any:
        return json.loads(canonical_json_str(value))


class UnitEvidence(BaseModel):
    kind: Literal["unit"] = "unit"
    name: str
    seed: int
    number_of_checks: int
    status: Literal["PASS", "FAIL"]
    failure: Failure | None = None
    original: Failure | None = None
    number_of_shrinks: int = 0


class MultiEvidence(BaseModel):
    kind: Literal["multi"] = "multi"
    name: str
    evidence: list[Evidence] = Field(default_factory=list)


Evidence = Annotated[Union[UnitEvidence, MultiEvidence], Field(discriminator="kind")]

MultiEvidence.model_rebuild()


def evidence_passed(evidence: UnitEvidence | MultiEvidence) -> bool:
    return not failed_units(evidence)


def failed_units(evidence: UnitEvidence | MultiEvidence) -> list[UnitEvidence]:
    if isinstance(evidence, UnitEvidence):
        return [evidence] if evidence.status == "FAIL" else []
    failures: list[UnitEvidence] = []
    for item in evidence.evidence:
        failures.extend(failed_units(item))
    return failures


def count_checks(evidence: UnitEvidence | MultiEvidence) -> int:
    if isinstance(evidence, UnitEvidence):
        return evidence.number_of_checks
    return sum(count_checks(item) for item in evidence.evidence)
