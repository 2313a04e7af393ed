from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any


def canonical_json_bytes(obj: Any) -> bytes:
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=repr,
    ).encode("utf-8")


def canonical_json_str(obj: Any) -> str:
    return canonical_json_bytes(obj).decode("utf-8")


def _orderless(value: Any) -> Any:
    """Rewrite dicts and sets into sorted lists so any key mix encodes stably."""
    if isinstance(value, dict):
        pairs = [[_orderless(key), _orderless(item)] for key, item in value.items()]
        pairs.sort(key=lambda pair: canonical_json_str(pair[0]))
        return {"dict": pairs}
    if isinstance(value, (set, frozenset)):
        items = [_orderless(item) for item in value]
        return {"set": sorted(items, key=canonical_json_str)}
    if isinstance(value, (list, tuple)):
        return [_orderless(item) for item in value]
    return value


def canonical_args_bytes(args: Sequence[Any]) -> bytes:
    # arity is part of the key so f(1) and g(1, ...) never collide
    return canonical_json_bytes({"arity": len(args), "args": _orderless(list(args))})
