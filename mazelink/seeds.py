"""Источник сидов: 64-битное случайное число, не детерминированное."""

from __future__ import annotations

import numpy as np

SEED_BITS = 64


def fresh_seed() -> int:
    """Свежий сид в диапазоне uint64."""
    rng = np.random.default_rng()
    return int(rng.integers(0, 2**SEED_BITS, dtype=np.uint64))


def seed_stream(seed: int) -> np.random.Generator:
    """Детерминированный генератор для заданного сида (любой точности >= 0)."""
    return np.random.default_rng(int(seed))
