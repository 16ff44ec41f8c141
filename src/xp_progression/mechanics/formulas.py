"""Built-in experience->level formulas — pure math, no I/O."""
from __future__ import annotations

import math
from typing import Any, Callable

from xp_progression.errors import InvalidArgumentError
from xp_progression.mechanics.level_floor import LevelFormula

DND_5E_THRESHOLDS: dict[int, int] = {
    1: 0, 2: 300, 3: 900, 4: 2700, 5: 6500,
    6: 14000, 7: 23000, 8: 34000, 9: 48000, 10: 64000,
    11: 85000, 12: 100000, 13: 120000, 14: 140000, 15: 165000,
    16: 195000, 17: 225000, 18: 265000, 19: 305000, 20: 355000,
}


def linear(step: int = 100) -> LevelFormula:
    """One level every ``step`` experience: ``e // step``."""
    if step < 1:
        raise InvalidArgumentError("step must be at least 1")

    def formula(experience: int) -> int:
        return experience // step

    return formula


def quadratic(step: int = 100) -> LevelFormula:
    """Level L starts at ``step * L**2`` experience."""
    if step < 1:
        raise InvalidArgumentError("step must be at least 1")

    def formula(experience: int) -> int:
        return math.isqrt(experience // step)

    return formula


def threshold_table(thresholds: dict[int, int]) -> LevelFormula:
    """Level lookup from a {level: minimum experience} table.

    Experience below every threshold maps to the lowest level in the table.
    """
    if not thresholds:
        raise InvalidArgumentError("thresholds cannot be empty")
    ordered = sorted(thresholds.items())
    for (_, prev_xp), (lvl, xp) in zip(ordered, ordered[1:]):
        if xp < prev_xp:
            raise InvalidArgumentError(f"Threshold for level {lvl} is lower than the previous level")

    def formula(experience: int) -> int:
        level = ordered[0][0]
        for lvl, xp in ordered:
            if experience >= xp:
                level = lvl
            else:
                break
        return level

    return formula


def dnd_5e() -> LevelFormula:
    return threshold_table(DND_5E_THRESHOLDS)


_FACTORIES: dict[str, Callable[..., LevelFormula]] = {
    "linear": linear,
    "quadratic": quadratic,
    "dnd5e": dnd_5e,
}

FORMULA_NAMES: tuple[str, ...] = tuple(_FACTORIES)

# Formulas whose factory takes a ``step`` argument.
STEPPED_FORMULAS = frozenset({"linear", "quadratic"})


def get_formula(name: str, **params: Any) -> LevelFormula:
    """Build a registered formula by name, e.g. ``get_formula("linear", step=50)``."""
    factory = _FACTORIES.get(name.lower())
    if factory is None:
        raise InvalidArgumentError(
            f"Unknown formula '{name}'. Choose one of: {', '.join(FORMULA_NAMES)}"
        )
    return factory(**params)
