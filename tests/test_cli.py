from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from propcheck.cli import app

runner = CliRunner()

CLAIMS_MODULE = """
from propcheck import claim_true, range_int, suite

bounded = claim_true("bounded", lambda n: n <= 10, range_int(0, 10))
tiny = claim_true("tiny", lambda n: n < 3, range_int(0, 10))
both = suite("numbers", [bounded, tiny])
not_a_claim = 42
"""


def _lines(output: str) -> list[str]:
    return [line for line in output.splitlines() if line.strip()]


def test_cli_catalog_lists_producers() -> None:
    result = runner.invoke(app, ["catalog"])
    assert result.exit_code == 0
    assert "list-int" in result.stdout
    assert "percentage" in result.stdout


def test_cli_sample_is_reproducible_and_in_range() -> None:
    first = runner.invoke(app, ["sample", "range-int", "--n", "5", "--seed", "3"])
    second = runner.invoke(app, ["sample", "range-int", "--n", "5", "--seed", "3"])
    assert first.exit_code == 0
    assert first.stdout == second.stdout
    values = [int(line) for line in _lines(first.stdout)]
    assert len(values) == 5
    assert all(-10 <= value <= 10 for value in values)


def test_cli_verbose_flag_enables_debug_logging(caplog: pytest.LogCaptureFixture) -> None:
    root = logging.getLogger()
    previous = root.level
    try:
        result = runner.invoke(app, ["-vv", "sample", "bool", "--n", "2"])
        assert result.exit_code == 0
        assert root.level == logging.DEBUG
        assert len(_lines(result.stdout)) == 2
        assert any("sample start producer=bool" in rec.getMessage() for rec in caplog.records)
    finally:
        root.setLevel(previous)


def test_cli_shrink_int() -> None:
    result = runner.invoke(app, ["shrink", "int", "10"])
    assert result.exit_code == 0
    assert _lines(result.stdout) == ["0", "5", "7", "8", "9"]


def test_cli_shrink_list_starts_with_empty_list() -> None:
    result = runner.invoke(app, ["shrink", "list-int", "[1,2,3]", "--limit", "2"])
    assert result.exit_code == 0
    assert [json.loads(line) for line in _lines(result.stdout)] == [[], [2, 3]]


def test_cli_shrink_result_round_trips_encoding() -> None:
    result = runner.invoke(app, ["shrink", "result-int-string", '{"err": 2}'])
    assert result.exit_code == 0
    assert [json.loads(line) for line in _lines(result.stdout)] == [{"err": 0}, {"err": 1}]


def test_cli_rejects_unknown_producer_and_bad_value() -> None:
    unknown = runner.invoke(app, ["sample", "nope"])
    assert unknown.exit_code != 0
    bad = runner.invoke(app, ["shrink", "order", '"SIDEWAYS"'])
    assert bad.exit_code != 0


@pytest.fixture
def claims_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    (tmp_path / "propcheck_cli_claims.py").write_text(CLAIMS_MODULE)
    monkeypatch.syspath_prepend(str(tmp_path))
    return "propcheck_cli_claims"


def test_cli_run_passing_claim(claims_module: str) -> None:
    result = runner.invoke(app, ["run", f"{claims_module}:bounded", "--trials", "30"])
    assert result.exit_code == 0
    assert "PASS" in result.stdout


def test_cli_run_failing_suite_exits_nonzero(claims_module: str) -> None:
    result = runner.invoke(app, ["run", f"{claims_module}:both", "--seed", "4"])
    assert result.exit_code == 1
    assert "FAIL" in result.stdout


def test_cli_run_json_output(claims_module: str) -> None:
    result = runner.invoke(app, ["run", f"{claims_module}:tiny", "--json"])
    assert result.exit_code == 1
    assert '"status": "FAIL"' in result.stdout
    assert '"counterexample": 3' in result.stdout


def test_cli_run_rejects_non_claim_targets(claims_module: str) -> None:
    result = runner.invoke(app, ["run", f"{claims_module}:not_a_claim"])
    assert result.exit_code != 0
    missing = runner.invoke(app, ["run", "no_such_module_for_propcheck:thing"])
    assert missing.exit_code != 0
