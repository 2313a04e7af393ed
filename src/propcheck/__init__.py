from __future__ import annotations

from propcheck.config import CheckConfig, default_config
from propcheck.errors import PropcheckError, UnsatisfiableFilterError
from propcheck.evaluate import (
    Claim,
    Suite,
    check,
    claim,
    claim_false,
    claim_true,
    quick_check,
    suite,
)
from propcheck.evidence import Failure, MultiEvidence, UnitEvidence, evidence_passed
from propcheck.generator import GeneratedFunction, Generator, Seed
from propcheck.investigator import Investigator, investigator
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
from propcheck.report import assert_evidence, render_evidence
from propcheck.types import Err, Ok, Order

__all__ = [
    "CheckConfig",
    "Claim",
    "Err",
    "Failure",
    "GeneratedFunction",
    "Generator",
    "Investigator",
    "MultiEvidence",
    "Ok",
    "Order",
    "Producer",
    "PropcheckError",
    "Seed",
    "Suite",
    "UnitEvidence",
    "UnsatisfiableFilterError",
    "array_of",
    "ascii_char",
    "assert_evidence",
    "boolean",
    "char",
    "check",
    "claim",
    "claim_false",
    "claim_true",
    "constant",
    "convert",
    "default_config",
    "drop_if",
    "evidence_passed",
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
    "quick_check",
    "range_float",
    "range_int",
    "render_evidence",
    "result",
    "string",
    "suite",
    "tuple2",
    "tuple3",
    "tuple4",
    "tuple5",
    "tuple_of",
    "unicode",
    "upper_case_char",
    "void",
]
