from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from propcheck.evidence import MultiEvidence, UnitEvidence, failed_units


def render_evidence(
    evidence: UnitEvidence | MultiEvidence, console: Console | None = None
) -> None:
    console = console or Console()
    table = Table(title=escape(evidence.name))
    table.add_column("Claim")
    table.add_column("Status")
    table.add_column("Checks", justify="right")
    table.add_column("Shrinks", justify="right")
    table.add_column("Counterexample")
    for path, unit in _walk(evidence, ()):
        counterexample = repr(unit.failure.counterexample) if unit.failure else ""
        table.add_row(
            escape(" / ".join(path)),
            unit.status,
            str(unit.number_of_checks),
            str(unit.number_of_shrinks),
            escape(counterexample),
        )
    console.print(table)


def evidence_summary(evidence: UnitEvidence | MultiEvidence) -> list[str]:
    lines: list[str] = []
    for path, unit in _walk(evidence, ()):
        label = " / ".join(path)
        if unit.failure is None:
            lines.append(f"{label}: PASS after {unit.number_of_checks} checks")
            continue
        lines.append(
            f"{label}: FAIL after {unit.number_of_checks} checks and "
            f"{unit.number_of_shrinks} shrinks; counterexample={unit.failure.counterexample!r} "
            f"expected={unit.failure.expected!r} actual={unit.failure.actual!r}"
        )
    return lines


def assert_evidence(evidence: UnitEvidence | MultiEvidence) -> None:
    failures = failed_units(evidence)
    if not failures:
        return
    lines = [line for line in evidence_summary(evidence) if ": FAIL " in line]
    raise AssertionError(
        f"{len(failures)} claim(s) failed (seed={failures[0].seed}):\n" + "\n".join(lines)
    )


def _walk(
    evidence: UnitEvidence | MultiEvidence, prefix: tuple[str, ...]
) -> list[tuple[tuple[str, ...], UnitEvidence]]:
    path = prefix + (evidence.name,)
    if isinstance(evidence, UnitEvidence):
        return [(path, evidence)]
    rows: list[tuple[tuple[str, ...], UnitEvidence]] = []
    for item in evidence.evidence:
        rows.extend(_walk(item, path))
    return rows
