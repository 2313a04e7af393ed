from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

E = TypeVar("E")
T = TypeVar("T")


class Order(Enum):
    LT = "LT"
    EQ = "EQ"
    GT = "GT"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

