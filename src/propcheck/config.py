from __future__ import annotations

import os
import sys
from dataclasses import dataclass

MIN_INT = -(2**63)
MAX_INT = 2**63 - 1
MAX_FLOAT = sys.float_info.max

DEFAULT_TRIALS = 100
DEFAULT_SEED = 1
DEFAULT_MAX_SHRINKS = 1000
DEFAULT_FILTER_ATTEMPTS = 1000
DEFAULT_MAX_LIST_LENGTH = 10


@dataclass(frozen=True)
class CheckConfig:
    trials: int = DEFAULT_TRIALS
    seed: int = DEFAULT_SEED
    max_shrinks: int = DEFAULT_MAX_SHRINKS
    filter_attempts: int = DEFAULT_FILTER_ATTEMPTS


def default_config() -> CheckConfig:
    return CheckConfig(
        trials=_env_int("PROPCHECK_TRIALS", DEFAULT_TRIALS),
        seed=_env_int("PROPCHECK_SEED", DEFAULT_SEED),
        max_shrinks=_env_int("PROPCHECK_MAX_SHRINKS", DEFAULT_MAX_SHRINKS),
        filter_attempts=_env_int("PROPCHECK_FILTER_ATTEMPTS", DEFAULT_FILTER_ATTEMPTS),
    )


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
