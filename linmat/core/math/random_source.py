"""
Random Source — Process-level random generator for Matrix.fill_random

The generator is created and seeded once, on first use. It is never reseeded
implicitly; callers that need reproducible fills either seed it explicitly
with seed_default_random_source() or pass their own random.Random.
"""

import random
from numbers import Integral
from typing import Any

_DEFAULT_SOURCE: random.Random | None = None


def default_random_source() -> random.Random:
    """
    Return the process-level random source, creating it on first use.

    Returns:
        Shared random.Random instance (OS-entropy seeded on creation)
    """
    global _DEFAULT_SOURCE

    if _DEFAULT_SOURCE is None:
        _DEFAULT_SOURCE = random.Random()
    return _DEFAULT_SOURCE


def seed_default_random_source(seed: Any) -> random.Random:
    """
    Seed the process-level random source for reproducible fills.

    Args:
        seed: Any value accepted by random.Random.seed

    Returns:
        The seeded shared source
    """
    source = default_random_source()
    source.seed(seed)
    return source


def draw(rng: random.Random, low: Any, high: Any) -> Any:
    """
    Draw one value from the closed interval [low, high].

    Integral bounds yield integers (randint, both ends inclusive); any other
    real bounds yield floats (uniform).

    Args:
        rng: Source to draw from
        low: Lower bound
        high: Upper bound (caller guarantees low <= high)

    Returns:
        Drawn value
    """
    if isinstance(low, Integral) and isinstance(high, Integral):
        return rng.randint(int(low), int(high))
    return rng.uniform(low, high)
