"""Injectable random source and selection primitives."""

from __future__ import annotations

import random
import uuid
from collections.abc import Sequence
from typing import Any, Protocol, TypeVar

from mystery_forge.settings import RuntimeSettings

T = TypeVar("T")


class EmptyWordBankError(ValueError):
    """Raised when a selection is requested from an empty pool."""


class RandomSource(Protocol):
    """Subset of `random.Random` used by generators."""

    def random(self) -> float:
        ...

    def randint(self, a: int, b: int) -> int:
        ...

    def getrandbits(self, k: int) -> int:
        ...

    def shuffle(self, x: list[Any]) -> None:
        ...


def resolve_rng(rng: RandomSource | None = None) -> RandomSource:
    """Return `rng`, or a fresh `random.Random` seeded from the environment."""
    if rng is not None:
        return rng
    return random.Random(RuntimeSettings.from_env().seed)


def pick_one(items: Sequence[T], *, rng: RandomSource, pool_name: str = "pool") -> T:
    """Pick one element; empty pools are a programmer error."""
    if not items:
        raise EmptyWordBankError(f"Cannot pick a random element from empty {pool_name}.")
    return items[int(rng.random() * len(items)) % len(items)]


def pick_many(items: Sequence[T], count: int, *, rng: RandomSource) -> list[T]:
    """Shuffle a copy of `items` and slice off `count` distinct positions."""
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}.")
    shuffled = list(items)
    rng.shuffle(shuffled)
    return shuffled[:count]


def coin_flip(rng: RandomSource, threshold: float = 0.5) -> bool:
    """Return True when the next draw exceeds `threshold`."""
    return rng.random() > threshold


def random_uuid(rng: RandomSource) -> str:
    """Version-4 UUID drawn from `rng` so seeded runs produce stable ids."""
    return str(uuid.UUID(int=rng.getrandbits(128), version=4))
