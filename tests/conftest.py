"""Pytest configuration - shared fixtures for mandala tests."""
from __future__ import annotations

from pathlib import Path

import pytest

from mandalas import GenerationParams, PatternParams, SeededRandom

ROOT = Path(__file__).resolve().parents[1]

TWO_COLORS = ["#FF0000", "#00FF00"]
FIVE_COLORS = ["#E53935", "#1E88E5", "#FDD835", "#43A047", "#8E24AA"]


@pytest.fixture
def project_root():
    """Return path to project root."""
    return ROOT


@pytest.fixture
def two_colors():
    return list(TWO_COLORS)


@pytest.fixture
def five_colors():
    return list(FIVE_COLORS)


@pytest.fixture
def beginner_params():
    """Beginner reference round: seed "42" on a 400px canvas."""
    return GenerationParams(
        seed="42",
        canvas_size=400,
        difficulty="beginner",
        palette=list(TWO_COLORS),
    )


@pytest.fixture
def make_pattern_params():
    """Factory for primitive inputs on a 400px canvas."""

    def _make(complexity: int = 1, seed: str = "fixture", colors=None, start_id: int = 0):
        return PatternParams(
            center=(200.0, 200.0),
            size=400,
            colors=list(colors or FIVE_COLORS),
            rng=SeededRandom(seed),
            complexity=complexity,
            start_id=start_id,
        )

    return _make
