from __future__ import annotations

import logging
from dataclasses import dataclass

from xp_progression.errors import InternalProgressionError, InvalidArgumentError
from xp_progression.mechanics.level_floor import (
    MAX_EXPERIENCE,
    LevelFormula,
    find_level_floor,
    round_level,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Progression:
    """Immutable snapshot of accumulated experience and the formula that levels it.

    Every transition returns a new instance sharing the same formula and
    search bound; the original is never altered.
    """

    formula: LevelFormula
    experience: int = 0
    upper_bound: int = MAX_EXPERIENCE

    def __post_init__(self) -> None:
        if self.formula is None or not callable(self.formula):
            raise InvalidArgumentError("The experience formula cannot be None")
        if isinstance(self.experience, bool) or not isinstance(self.experience, int):
            raise InvalidArgumentError(f"Experience must be an integer, got {self.experience!r}")
        if self.experience < 0:
            raise InvalidArgumentError("Can't create a Progression with negative experience")
        if isinstance(self.upper_bound, bool) or not isinstance(self.upper_bound, int):
            raise InvalidArgumentError(f"upper_bound must be an integer, got {self.upper_bound!r}")
        if self.upper_bound < 0:
            raise InvalidArgumentError("upper_bound cannot be less than 0")

    # -- Derived queries --

    @property
    def level(self) -> int:
        return round_level(self.formula(self.experience))

    @property
    def experience_until_level_up(self) -> int:
        """Experience still needed to reach the next level."""
        return self.experience_for_level(self.level + 1) - self.experience

    @property
    def percentage_until_level_up(self) -> int:
        """Whole percent of the next level's floor already accumulated (0-100)."""
        next_floor = self.experience_for_level(self.level + 1)
        if next_floor <= 0:
            raise InternalProgressionError(
                f"Internal error: level {self.level + 1} starts at experience {next_floor}"
            )
        percentage = self.experience * 100 // next_floor
        if not 0 <= percentage <= 100:
            raise InternalProgressionError(
                f"Internal error: evaluated percentage {percentage} is not within range 0-100"
            )
        return percentage

    def expected_level(self, experience: int) -> int | float:
        """Unrounded formula output for ``experience``."""
        if experience < 0:
            raise InvalidArgumentError("Cannot expect a level for experience less than 0")
        return self.formula(experience)

    def experience_for_level(self, level: int) -> int:
        """Minimum experience at which the formula yields ``level``."""
        return find_level_floor(self.formula, level, upper_bound=self.upper_bound)

    def experience_from_current_to_level(self, level: int) -> int:
        """Current experience minus the floor of ``level``; negative when below it."""
        if level < 0:
            raise InvalidArgumentError("Level cannot be less than 0")
        return self.experience - self.experience_for_level(level)

    # -- Transitions --

    def add_experience(self, experience: int) -> Progression:
        if experience < 0:
            raise InvalidArgumentError("Experience added cannot be less than 0")
        return self._with_experience(self.experience + experience)

    def remove_experience(self, experience: int) -> Progression:
        if experience < 0:
            raise InvalidArgumentError("Experience removed cannot be less than 0")
        return self._with_experience(self.experience - experience)

    def set_level(self, level: int) -> Progression:
        if level < 0:
            raise InvalidArgumentError("Level cannot be less than 0")
        return self._with_experience(self.experience_for_level(level))

    def reset_experience_to_current_level(self) -> Progression:
        """Drop any progress made since the current level was reached."""
        return self._with_experience(self.experience_for_level(self.level))

    def _with_experience(self, experience: int) -> Progression:
        if experience < 0:
            raise InternalProgressionError(
                f"Experience modification error: new experience {experience} is less than 0"
            )
        logger.debug(f"Experience {self.experience} -> {experience}")
        return Progression(self.formula, experience, self.upper_bound)
