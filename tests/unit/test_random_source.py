"""
Tests for the Random Source

Checks:
1. The process-level source is created once and reused
2. Explicit seeding makes fills reproducible
3. draw() respects the closed interval and the bound types
"""

import random

import pytest

from linmat import Matrix
from linmat.core.math import random_source
from linmat.core.math.random_source import (
    default_random_source,
    draw,
    seed_default_random_source,
)


@pytest.fixture(autouse=True)
def fresh_source(monkeypatch):
    """Each test starts without a process-level source."""
    monkeypatch.setattr(random_source, "_DEFAULT_SOURCE", None)


class TestDefaultSource:
    """default_random_source / seed_default_random_source"""

    def test_created_once(self) -> None:
        first = default_random_source()
        second = default_random_source()
        assert first is second
        assert isinstance(first, random.Random)

    def test_seeding_reproducible(self) -> None:
        seed_default_random_source(11)
        first = Matrix(3, 3)
        first.fill_random(0, 1000)

        seed_default_random_source(11)
        second = Matrix(3, 3)
        second.fill_random(0, 1000)

        assert first == second

    def test_fill_does_not_reseed(self) -> None:
        seed_default_random_source(5)
        first = Matrix(2, 2)
        first.fill_random(0, 10**9)
        second = Matrix(2, 2)
        second.fill_random(0, 10**9)
        assert first != second

    def test_seed_returns_shared_source(self) -> None:
        assert seed_default_random_source(1) is default_random_source()


class TestDraw:
    """draw()"""

    def test_integers_inclusive(self) -> None:
        rng = random.Random(0)
        values = {draw(rng, 0, 2) for _ in range(200)}
        assert values == {0, 1, 2}

    def test_floats(self) -> None:
        rng = random.Random(0)
        for _ in range(100):
            value = draw(rng, 0.5, 1.5)
            assert isinstance(value, float)
            assert 0.5 <= value <= 1.5

    def test_mixed_bounds_draw_floats(self) -> None:
        assert isinstance(draw(random.Random(0), 0, 1.0), float)

    def test_degenerate_interval(self) -> None:
        assert draw(random.Random(0), 4, 4) == 4
