"""Tests for src/xp_progression/models/progression.py."""
from __future__ import annotations

import dataclasses
import logging

import pytest

from xp_progression.errors import (
    InternalProgressionError,
    InvalidArgumentError,
    LevelNotReachableError,
)
from xp_progression.models.progression import Progression


class TestConstruction:
    def test_defaults_to_zero_experience(self, linear_formula):
        progression = Progression(linear_formula)
        assert progression.experience == 0
        assert progression.level == 0

    def test_missing_formula(self):
        with pytest.raises(InvalidArgumentError):
            Progression(None)

    def test_non_callable_formula(self):
        with pytest.raises(InvalidArgumentError):
            Progression(100)

    def test_negative_experience(self, linear_formula):
        with pytest.raises(InvalidArgumentError):
            Progression(linear_formula, -1)

    @pytest.mark.parametrize("experience", [1.5, "10", True])
    def test_non_integer_experience(self, linear_formula, experience):
        with pytest.raises(InvalidArgumentError):
            Progression(linear_formula, experience)

    @pytest.mark.parametrize("upper_bound", [-1, 10.5, "1000", True])
    def test_invalid_upper_bound(self, linear_formula, upper_bound):
        with pytest.raises(InvalidArgumentError):
            Progression(linear_formula, 0, upper_bound)

    def test_zero_upper_bound(self, linear_formula):
        assert Progression(linear_formula, 0, 0).experience_for_level(0) == 0

    def test_invalid_argument_is_value_error(self, linear_formula):
        with pytest.raises(ValueError):
            Progression(linear_formula, -1)

    def test_frozen(self, progression):
        with pytest.raises(dataclasses.FrozenInstanceError):
            progression.experience = 0

    def test_value_equality(self, linear_formula):
        assert Progression(linear_formula, 5) == Progression(linear_formula, 5)
        assert Progression(linear_formula, 5) != Progression(linear_formula, 6)


class TestDerivedQueries:
    def test_level(self, progression):
        assert progression.level == 3

    @pytest.mark.parametrize("experience, expected", [(249, 2), (250, 3), (350, 4), (0, 0)])
    def test_level_rounds_half_away_from_zero(self, fractional_formula, experience, expected):
        assert Progression(fractional_formula, experience).level == expected

    def test_experience_for_level(self, progression):
        assert progression.experience_for_level(3) == 300

    @pytest.mark.parametrize("experience, expected", [(0, 100), (350, 50), (399, 1), (400, 100)])
    def test_experience_until_level_up(self, linear_formula, experience, expected):
        assert Progression(linear_formula, experience).experience_until_level_up == expected

    @pytest.mark.parametrize("experience, expected", [(0, 0), (50, 50), (300, 75), (350, 87), (399, 99)])
    def test_percentage_until_level_up(self, linear_formula, experience, expected):
        assert Progression(linear_formula, experience).percentage_until_level_up == expected

    def test_percentage_keeps_fraction_before_scaling(self, linear_formula):
        # 350 / 400 truncated to an integer first would give 0.
        assert Progression(linear_formula, 350).percentage_until_level_up != 0

    def test_percentage_in_range(self, linear_formula, dnd_formula):
        for formula in (linear_formula, dnd_formula):
            for experience in range(0, 20000, 37):
                assert 0 <= Progression(formula, experience).percentage_until_level_up <= 100

    def test_percentage_out_of_range(self):
        # Not monotonic: drops back to level 0 from 1000 on.
        misbehaving = lambda e: 0 if e >= 1000 else e // 100
        with pytest.raises(InternalProgressionError):
            Progression(misbehaving, 1000).percentage_until_level_up

    def test_expected_level(self, progression, fractional_formula):
        assert progression.expected_level(350) == 3
        assert Progression(fractional_formula).expected_level(350) == 3.5

    def test_expected_level_negative(self, progression):
        with pytest.raises(InvalidArgumentError):
            progression.expected_level(-1)

    def test_experience_from_current_to_level(self, progression):
        assert progression.experience_from_current_to_level(2) == 150
        assert progression.experience_from_current_to_level(5) == -150

    def test_experience_from_current_to_negative_level(self, progression):
        with pytest.raises(InvalidArgumentError):
            progression.experience_from_current_to_level(-1)


class TestTransitions:
    def test_add_experience(self, progression):
        result = progression.add_experience(100)
        assert result.experience == 450
        assert result.level == 4
        assert progression.experience == 350
        assert result.formula is progression.formula

    def test_add_negative_experience(self, progression):
        with pytest.raises(InvalidArgumentError):
            progression.add_experience(-5)
        assert progression.experience == 350

    def test_add_from_zero(self, linear_formula):
        assert Progression(linear_formula).add_experience(350).level == 3

    def test_remove_experience(self, progression):
        result = progression.remove_experience(50)
        assert result.experience == 300
        assert progression.experience == 350

    def test_remove_all_experience(self, progression):
        assert progression.remove_experience(350).experience == 0

    def test_remove_more_than_held(self, progression):
        with pytest.raises(InternalProgressionError):
            progression.remove_experience(351)
        assert progression.experience == 350

    def test_remove_negative_experience(self, progression):
        with pytest.raises(InvalidArgumentError):
            progression.remove_experience(-1)

    @pytest.mark.parametrize("level, expected", [(0, 0), (1, 100), (7, 700)])
    def test_set_level(self, progression, level, expected):
        assert progression.set_level(level).experience == expected

    def test_set_negative_level(self, progression):
        with pytest.raises(InvalidArgumentError):
            progression.set_level(-1)

    def test_set_unreachable_level(self, dnd_formula):
        with pytest.raises(LevelNotReachableError):
            Progression(dnd_formula).set_level(0)
        assert Progression(dnd_formula).set_level(5).experience == 6500

    def test_reset_to_current_level(self, progression):
        assert progression.reset_experience_to_current_level().experience == 300

    def test_reset_is_idempotent(self, linear_formula, dnd_formula):
        for formula in (linear_formula, dnd_formula):
            for experience in (0, 1, 350, 999, 64001):
                once = Progression(formula, experience).reset_experience_to_current_level()
                twice = once.reset_experience_to_current_level()
                assert once.experience == twice.experience

    def test_upper_bound_is_carried(self, linear_formula):
        bounded = Progression(linear_formula, 0, upper_bound=1000)
        moved = bounded.add_experience(5).set_level(3)
        assert moved.upper_bound == 1000
        with pytest.raises(LevelNotReachableError):
            moved.set_level(20)

    def test_transition_chain_never_negative(self, linear_formula):
        progression = Progression(linear_formula)
        for step in range(50):
            progression = progression.add_experience(step * 13)
            progression = progression.remove_experience(min(progression.experience, step * 7))
            progression = progression.set_level(progression.level)
            assert progression.experience >= 0

    def test_transitions_logged(self, linear_formula, caplog):
        with caplog.at_level(logging.DEBUG, logger="xp_progression.models.progression"):
            Progression(linear_formula).add_experience(350)
        assert "Experience 0 -> 350" in caplog.text
