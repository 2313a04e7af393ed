from __future__ import annotations

import importlib
import itertools
import json
import logging
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from propcheck.canonical import canonical_json_str
from propcheck.catalog import CATALOG, CatalogEntry, get_entry
from propcheck.evaluate import Claim, Suite, check
from propcheck.config import default_config
from propcheck.evidence import evidence_passed
from propcheck.generator import Seed, sample_many
from propcheck.report import render_evidence
from propcheck.runtime import configure_logging

app = typer.Typer(help="propcheck: producers, shrinkers and claims")

console = Console()
logger = logging.getLogger(__name__)

N_OPTION = typer.Option(10, "--n", min=0)
SEED_OPTION = typer.Option(0, "--seed")
LIMIT_OPTION = typer.Option(20, "--limit", min=0)
TRIALS_OPTION = typer.Option(None, "--trials", min=0)
RUN_SEED_OPTION = typer.Option(None, "--seed")
JSON_OPTION = typer.Option(False, "--json")
VERBOSE_OPTION = typer.Option(0, "--verbose", "-v", count=True, help="-v for info, -vv for debug")


def _entry(name: str) -> CatalogEntry:
    try:
        return get_entry(name)
    except KeyError as exc:
        raise typer.BadParameter(str(exc.args[0])) from exc


def _print_value(entry: CatalogEntry, value: Any) -> None:
    console.print(
        canonical_json_str(entry.encode(value)),
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


def _load_target(target: str) -> Claim[Any] | Suite:
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise typer.BadParameter(f"target must look like module:attribute, got {target!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise typer.BadParameter(f"cannot import {module_name}: {exc}") from exc
    loaded = getattr(module, attr, None)
    if not isinstance(loaded, (Claim, Suite)):
        raise typer.BadParameter(f"{target} is not a claim or suite")
    return loaded


@app.callback()
def main(verbose: int = VERBOSE_OPTION) -> None:
    level = configure_logging(verbose)
    logger.debug("logging configured level=%s", logging.getLevelName(level))


@app.command("catalog")
def catalog_list() -> None:
    table = Table(title="Producers")
    table.add_column("Name")
    table.add_column("Description")
    for name in sorted(CATALOG):
        table.add_row(name, CATALOG[name].description)
    console.print(table)


@app.command("sample")
def sample(name: str, n: int = N_OPTION, seed: int = SEED_OPTION) -> None:
    entry = _entry(name)
    logger.info("sample start producer=%s n=%s seed=%s", name, n, seed)
    values, _ = sample_many(entry.factory().generator, n, Seed.initial(seed))
    for value in values:
        _print_value(entry, value)


@app.command("shrink")
def shrink_value(
    name: str,
    value: str = typer.Argument(..., help="JSON encoded value to shrink"),
    limit: int = LIMIT_OPTION,
) -> None:
    entry = _entry(name)
    try:
        decoded = entry.decode(json.loads(value))
    except ValueError as exc:
        raise typer.BadParameter(f"cannot decode {value!r} for {name}: {exc}") from exc
    logger.info("shrink start producer=%s limit=%s", name, limit)
    candidates = entry.factory().shrink(decoded)
    for candidate in itertools.islice(candidates, limit):
        _print_value(entry, candidate)


@app.command("run")
def run(
    target: str,
    trials: int | None = TRIALS_OPTION,
    seed: int | None = RUN_SEED_OPTION,
    as_json: bool = JSON_OPTION,
) -> None:
    loaded = _load_target(target)
    config = default_config()
    logger.info("run start target=%s trials=%s seed=%s", target, trials, seed)
    evidence = check(loaded, trials, seed, config=config)
    if as_json:
        console.print(
            json.dumps(evidence.model_dump(mode="json"), indent=2),
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
    else:
        render_evidence(evidence, console)
    if not evidence_passed(evidence):
        raise typer.Exit(code=1)
    logger.info("run complete target=%s", target)


if __name__ == "__main__":
    app()
