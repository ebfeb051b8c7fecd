"""Pytest configuration and fixtures."""

import random

import pytest

from tests.helpers import RANDOM_SEED, random_value
from ubigint import BigInt, BigIntConfig


@pytest.fixture(autouse=True)
def default_config(monkeypatch: pytest.MonkeyPatch) -> BigIntConfig:
    """Pin BigInt to the default config regardless of UBIGINT_* variables."""
    config = BigIntConfig()
    monkeypatch.setattr(BigInt, "config", config)
    return config


@pytest.fixture
def checked_underflow(monkeypatch: pytest.MonkeyPatch) -> BigIntConfig:
    """Enable the underflow check for one test."""
    config = BigIntConfig(check_underflow=True)
    monkeypatch.setattr(BigInt, "config", config)
    return config


@pytest.fixture
def rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(RANDOM_SEED)


@pytest.fixture
def sample_pairs(rng: random.Random) -> list[tuple[int, int]]:
    """200 random (a, b) int pairs."""
    return [(random_value(rng), random_value(rng)) for _ in range(200)]
