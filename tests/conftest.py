"""Shared fixtures for the progression test suite."""
from __future__ import annotations

import pytest

from xp_progression.mechanics.formulas import dnd_5e, linear
from xp_progression.mechanics.level_floor import LevelFormula
from xp_progression.models.progression import Progression


@pytest.fixture
def linear_formula() -> LevelFormula:
    return linear(100)


@pytest.fixture
def dnd_formula() -> LevelFormula:
    return dnd_5e()


@pytest.fixture
def fractional_formula() -> LevelFormula:
    return lambda experience: experience / 100


@pytest.fixture
def progression(linear_formula) -> Progression:
    return Progression(linear_formula, 350)
