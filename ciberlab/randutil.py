"""Random numbers with uniform and normal distributions."""

from __future__ import annotations

import math
import random
from typing import Optional


def _source(rng: Optional[random.Random]) -> random.Random:
    if rng is None:
        return random.Random()
    return rng


def rand_uniform(low: float, high: float, rng: Optional[random.Random] = None) -> float:
    """A number drawn uniformly from ``[low, high)``."""
    generator = _source(rng)
    return low + generator.random() * (high - low)


def rand_normal(mean: float, stddev: float, rng: Optional[random.Random] = None) -> float:
    """A normally distributed number, using the polar Box-Muller method."""
    generator = _source(rng)
    while True:
        x = 2.0 * generator.random() - 1.0
        y = 2.0 * generator.random() - 1.0
        r = x * x + y * y
        if 0.0 < r <= 1.0:
            break
    factor = math.sqrt(-2.0 * math.log(r) / r)
    return x * factor * stddev + mean