"""
Pytest configuration and shared fixtures for mathsets tests.
"""

import random

import pytest

from mathsets import ExtensionalSet, math_set_from
from mathsets.config import get_config, set_config


@pytest.fixture(autouse=True)
def restore_config():
    """Put back the active configuration after each test."""
    saved = get_config()
    yield
    set_config(saved)


@pytest.fixture
def universe():
    """A small finite universe shared by the algebra tests."""
    return math_set_from(range(-5, 15))


@pytest.fixture
def random_set_factory():
    """Factory fixture for seeded random finite sets drawn from [-5, 15)."""

    def _create(seed: int, count: int = 3) -> list[ExtensionalSet[int]]:
        rng = random.Random(seed)
        return [
            ExtensionalSet(rng.sample(range(-5, 15), rng.randint(0, 12)))
            for _ in range(count)
        ]

    return _create
