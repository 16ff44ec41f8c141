from __future__ import annotations

from xp_progression.errors import (
    InternalProgressionError,
    InvalidArgumentError,
    LevelNotReachableError,
    ProgressionError,
)
from xp_progression.mechanics.formulas import get_formula, linear, quadratic, threshold_table
from xp_progression.mechanics.level_floor import MAX_EXPERIENCE, LevelFormula, find_level_floor
from xp_progression.models.progression import Progression

__all__ = [
    "Progression",
    "LevelFormula",
    "MAX_EXPERIENCE",
    "find_level_floor",
    "get_formula",
    "linear",
    "quadratic",
    "threshold_table",
    "ProgressionError",
    "InvalidArgumentError",
    "InternalProgressionError",
    "LevelNotReachableError",
]
