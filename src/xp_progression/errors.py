"""Exception types raised by the progression core."""
from __future__ import annotations


class ProgressionError(Exception):
    """Base class for every progression failure."""


class InvalidArgumentError(ProgressionError, ValueError):
    """A caller passed a missing formula or a negative experience/level."""


class InternalProgressionError(ProgressionError, RuntimeError):
    """A computed value broke an invariant, usually from a misbehaving formula."""


class LevelNotReachableError(ProgressionError, LookupError):
    """The formula never evaluates to the requested level within the search bound."""

    def __init__(self, level: int, upper_bound: int, reason: str):
        self.level = level
        self.upper_bound = upper_bound
        super().__init__(f"Level {level} is not reachable in [0, {upper_bound}]: {reason}")
