"""Level floor search — inverts an experience->level formula, pure math, no I/O."""
from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Union

from xp_progression.errors import InvalidArgumentError, LevelNotReachableError

logger = logging.getLogger(__name__)

LevelFormula = Callable[[int], Union[int, float]]

# Largest experience searched by default (signed 64-bit).
MAX_EXPERIENCE = 2**63 - 1


def round_level(value: int | float) -> int:
    """Round a formula output to the nearest level, ties away from zero."""
    if isinstance(value, int):
        return value
    return int(Decimal(value).to_integral_value(rounding=ROUND_HALF_UP))


def find_level_floor(
    formula: LevelFormula,
    level: int,
    *,
    upper_bound: int = MAX_EXPERIENCE,
) -> int:
    """Smallest experience in [0, upper_bound] for which ``formula`` yields ``level``.

    The formula must be monotonic non-decreasing. The search grows an
    exponential bracket from 0 until the formula reaches ``level``, then
    bisects it keeping ``formula(low) < level <= formula(high)``. When the
    indices meet, ``high`` is the first experience of the level's plateau.

    Raises:
        InvalidArgumentError: ``upper_bound`` is negative.
        LevelNotReachableError: ``level`` is below ``formula(0)``, above
            ``formula(upper_bound)``, or skipped by the formula.
    """
    if upper_bound < 0:
        raise InvalidArgumentError("upper_bound cannot be less than 0")

    evaluations = 0

    def evaluate(experience: int) -> int | float:
        nonlocal evaluations
        evaluations += 1
        return formula(experience)

    start = evaluate(0)
    if start == level:
        logger.debug(f"Level {level} floor found at 0 after {evaluations} evaluation(s)")
        return 0
    if start > level:
        raise LevelNotReachableError(level, upper_bound, f"formula(0) is already {start}")

    low, high = 0, min(1, upper_bound)
    high_value = evaluate(high)
    while high_value < level:
        if high == upper_bound:
            raise LevelNotReachableError(
                level, upper_bound, f"formula({upper_bound}) only reaches {high_value}"
            )
        low, high = high, min(high * 2, upper_bound)
        high_value = evaluate(high)

    while high - low > 1:
        mid = low + (high - low) // 2
        mid_value = evaluate(mid)
        if mid_value >= level:
            high, high_value = mid, mid_value
        else:
            low = mid

    if high_value != level:
        raise LevelNotReachableError(
            level, upper_bound, f"formula jumps from {evaluate(low)} to {high_value} at {high}"
        )

    logger.debug(f"Level {level} floor found at {high} after {evaluations} evaluation(s)")
    return high
