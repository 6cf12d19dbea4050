"""Tests for derived volume figures."""

import pytest
from pydantic import ValidationError

from runplan.plans.types import DailyWorkout, WeeklyPlan
from runplan.plans.volume import compute_plan_distance_km, compute_weekly_average_km, compute_weekly_volume_km
from runplan.utils.rounding import round_half_up, round_half_up_to


def _week(number: int, total: int) -> WeeklyPlan:
    days = [DailyWorkout(day="Monday", workout_type="Long Run", distance_km=total, intensity="moderate")]
    days.extend(DailyWorkout(day=name) for name in ("Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"))
    return WeeklyPlan(week_number=number, total_distance_km=total, days=tuple(days))


def test_weekly_volume_ignores_rest_days():
    """Test that only scheduled workouts count toward weekly volume."""
    days = [
        DailyWorkout(day="Monday", workout_type="Long Run", distance_km=12, intensity="moderate"),
        DailyWorkout(day="Tuesday"),
        DailyWorkout(day="Wednesday", workout_type="Tempo Run", distance_km=6, intensity="moderate"),
    ]
    assert compute_weekly_volume_km(days) == 18


def test_plan_distance_sums_week_totals():
    """Test that plan distance is the sum of week totals."""
    assert compute_plan_distance_km([_week(1, 20), _week(2, 22), _week(3, 16)]) == 58


def test_weekly_average():
    """Test the one-decimal weekly average."""
    assert compute_weekly_average_km(250, 12) == 20.8
    assert compute_weekly_average_km(100, 4) == 25.0
    assert compute_weekly_average_km(100, 0) == 0.0


def test_weekly_average_ties_round_up():
    """Test that an exact .x5 average rounds up, not to even."""
    assert compute_weekly_average_km(243, 12) == 20.3
    assert compute_weekly_average_km(63, 12) == 5.3
    assert compute_weekly_average_km(303, 12) == 25.3


def test_week_requires_seven_days():
    """Test that a week with a missing day is rejected."""
    week = _week(1, 20)
    with pytest.raises(ValidationError, match="7 days"):
        WeeklyPlan(week_number=1, total_distance_km=20, days=week.days[:6])


def test_round_half_up():
    """Test that ties round up, unlike the built-in round."""
    assert round_half_up(2.5) == 3
    assert round_half_up(7.5) == 8
    assert round_half_up(7.49) == 7
    assert round(2.5) == 2
    assert round_half_up_to(20.25, 1) == 20.3
    assert round_half_up_to(5.24, 1) == 5.2
