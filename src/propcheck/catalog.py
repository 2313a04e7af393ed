from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from propcheck import producer as p
from propcheck.producer import Producer
from propcheck.types import Err, Ok, Order


def _identity(value: Any) -> Any:
    return value


@dataclass(frozen=True)
class CatalogEntry:
    name: str
    description: str
    factory: Callable[[], Producer[Any]]
    decode: Callable[[Any], Any] = _identity
    encode: Callable[[Any], Any] = _identity


def _decode_result(raw: Any) -> Err[Any] | Ok[Any]:
    if isinstance(raw, dict) and set(raw) == {"err"}:
        return Err(raw["err"])
    if isinstance(raw, dict) and set(raw) == {"ok"}:
        return Ok(raw["ok"])
    raise ValueError('result values are encoded as {"ok": value} or {"err": error}')


def _encode_result(value: Err[Any] | Ok[Any]) -> dict[str, Any]:
    if isinstance(value, Err):
        return {"err": value.error}
    return {"ok": value.value}


def _decode_list(raw: Any) -> list[Any]:
    if not isinstance(raw, list):
        raise ValueError("expected a JSON array")
    return raw


def _decode_tuple(raw: Any) -> tuple[Any, ...]:
    return tuple(_decode_list(raw))


def _decode_pair(raw: Any) -> tuple[Any, ...]:
    pair = _decode_tuple(raw)
    if len(pair) != 2:
        raise ValueError("expected a JSON array with two items")
    return pair


_ENTRIES = [
    CatalogEntry("void", "the unit value, never shrinks", p.void),
    CatalogEntry("bool", "True or False", p.boolean),
    CatalogEntry("order", "LT, EQ or GT", p.order, decode=Order, encode=lambda v: v.value),
    CatalogEntry("int", "integers biased towards [-50, 50]", p.integer),
    CatalogEntry("range-int", "integers in [-10, 10]", lambda: p.range_int(-10, 10)),
    CatalogEntry("float", "floats biased towards [-50, 50]", p.floating),
    CatalogEntry("percentage", "floats in [0, 1] with boosted bounds", p.percentage),
    CatalogEntry("char", "printable ASCII characters", p.char),
    CatalogEntry("ascii", "ASCII characters", p.ascii_char),
    CatalogEntry("unicode", "any code point except surrogates", p.unicode),
    CatalogEntry("upper", "upper case letters", p.upper_case_char),
    CatalogEntry("lower", "lower case letters", p.lower_case_char),
    CatalogEntry("string", "printable strings of length 0..10", p.string),
    CatalogEntry(
        "list-int",
        "lists of integers",
        lambda: p.list_of(p.integer()),
        decode=_decode_list,
    ),
    CatalogEntry(
        "array-int",
        "arrays (tuples) of integers",
        lambda: p.array_of(p.integer()),
        decode=_decode_tuple,
        encode=list,
    ),
    CatalogEntry("maybe-int", "an integer or null", lambda: p.maybe(p.integer())),
    CatalogEntry(
        "result-int-string",
        "an integer error or a string value",
        lambda: p.result(p.integer(), p.string()),
        decode=_decode_result,
        encode=_encode_result,
    ),
    CatalogEntry(
        "tuple-int-bool",
        "pairs of an integer and a boolean",
        lambda: p.tuple2(p.integer(), p.boolean()),
        decode=_decode_pair,
        encode=list,
    ),
]

CATALOG: dict[str, CatalogEntry] = {entry.name: entry for entry in _ENTRIES}


def get_entry(name: str) -> CatalogEntry:
    entry = CATALOG.get(name)
    if entry is None:
        known = ", ".join(sorted(CATALOG))
        raise KeyError(f"unknown producer {name!r}; known producers: {known}")
    return entry
