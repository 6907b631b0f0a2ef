"""
Random source for the generators.

A ``RandomSource`` is built once per generation call and handed down
explicitly, either from a fixed 32-byte seed (reproducible) or from OS
entropy.
"""

from __future__ import annotations

import os
import random
from typing import Optional, Sequence, Union

SEED_SIZE = 32

SeedLike = Union[bytes, bytearray, Sequence[int]]


def coerce_seed(seed: SeedLike) -> bytes:
    """Normalise *seed* to exactly ``SEED_SIZE`` bytes or raise ``ValueError``."""
    if isinstance(seed, (bytes, bytearray)):
        raw = bytes(seed)
    elif isinstance(seed, str):
        raise ValueError("Seed must be bytes or a sequence of ints, not str")
    else:
        try:
            raw = bytes(seed)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Seed must be a sequence of ints in [0, 255]: {exc}") from exc

    if len(raw) != SEED_SIZE:
        raise ValueError(f"Seed must be exactly {SEED_SIZE} bytes, got {len(raw)}")
    return raw


class RandomSource:
    """Uniform ``[0, 1)`` draws backed by ``random.Random``."""

    def __init__(self, rng: random.Random, seeded: bool) -> None:
        self._rng = rng
        self.seeded = seeded
        self.draws = 0

    @classmethod
    def from_seed(cls, seed: SeedLike) -> "RandomSource":
        return cls(random.Random(coerce_seed(seed)), seeded=True)

    @classmethod
    def from_entropy(cls) -> "RandomSource":
        return cls(random.Random(os.urandom(SEED_SIZE)), seeded=False)

    @classmethod
    def from_optional_seed(cls, seed: Optional[SeedLike]) -> "RandomSource":
        if seed is None:
            return cls.from_entropy()
        return cls.from_seed(seed)

    def uniform(self) -> float:
        self.draws += 1
        return self._rng.random()
