"""Tests for end-to-end plan generation.

Tests that generated plans:
- Have the duration and progression of their goal
- Always have seven days per week, rest days without pace guidance
- Report total distance as the sum of week totals
- Are deterministic for the same inputs and reference date
"""

from datetime import timedelta
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from runplan.plans.errors import PlanInputError, UnsupportedGoalError
from runplan.plans.generator import (
    generate_fitness_plan,
    generate_race_training_plan,
    generate_running_plan,
    generate_weight_loss_plan,
)
from runplan.plans.inputs import GeneralFitnessInputs, RaceTrainingInputs, WeightLossInputs


def _assert_well_formed(plan):
    assert len(plan.weeks) == plan.duration_weeks
    assert [week.week_number for week in plan.weeks] == list(range(1, plan.duration_weeks + 1))
    assert plan.total_distance_km == sum(week.total_distance_km for week in plan.weeks)
    for week in plan.weeks:
        assert len(week.days) == 7
        assert week.days[0].day == "Monday"
        assert week.days[6].day == "Sunday"
        for day in week.days:
            if day.intensity == "rest":
                assert day.pace_guidance is None
                assert day.distance_km == 0
            else:
                assert day.pace_guidance


def test_weight_loss_plan(weight_loss_data):
    """Test weight loss duration, base volume and capped build."""
    plan = generate_weight_loss_plan(WeightLossInputs(**weight_loss_data))

    _assert_well_formed(plan)
    assert plan.title == "Weight Loss Running Plan"
    assert plan.subtitle == "12-week progressive plan focused on fat burning"
    assert plan.goal_type == "weight-loss"
    assert plan.duration_weeks == 12
    # 85 kg starts at 20 km
    assert plan.weeks[0].total_distance_km == 21
    assert plan.weeks[5].total_distance_km == 25
    assert plan.weeks[11].total_distance_km == 28
    assert plan.paces is not None
    assert plan.paces.easy == "7:48 min/km"
    assert len(plan.key_features) == 4
    assert len(plan.notes) == 5


def test_weight_loss_timeframe_sets_duration(weight_loss_data):
    """Test four weeks per month of timeframe."""
    plan = generate_weight_loss_plan(WeightLossInputs(**{**weight_loss_data, "timeframe_months": 1}))
    assert plan.duration_weeks == 4


def test_fitness_plan(fitness_data):
    """Test the twelve-week fitness plan and its down weeks."""
    plan = generate_fitness_plan(GeneralFitnessInputs(**fitness_data))

    _assert_well_formed(plan)
    assert plan.title == "General Fitness Running Plan"
    assert plan.subtitle == "12-week progressive plan for endurance improvement"
    assert plan.duration_weeks == 12
    assert plan.weeks[3].total_distance_km == 20
    assert plan.weeks[7].total_distance_km == 20
    assert "Integrated strength training recommendations" in plan.key_features

    monday = plan.weeks[0].days[0]
    assert monday.workout_type == "Long Run"
    assert monday.pace_guidance == plan.paces.moderate


def test_fitness_plan_without_strength(fitness_data):
    """Test the cross-training feature line."""
    plan = generate_fitness_plan(GeneralFitnessInputs(**{**fitness_data, "strength_training": False}))
    assert "Optional cross-training suggestions" in plan.key_features


def test_race_plan(race_data, today):
    """Test race plan length, taper and wording."""
    plan = generate_race_training_plan(RaceTrainingInputs(**race_data), today=today)

    _assert_well_formed(plan)
    assert plan.title == "Half Marathon Training Plan"
    assert plan.subtitle == "12-week plan focused on traditional training approach"
    assert plan.duration_weeks == 12
    assert plan.weeks[7].total_distance_km == 24
    assert plan.weeks[8].total_distance_km == 45
    assert [week.total_distance_km for week in plan.weeks[9:]] == [12, 15, 18]
    assert "Road-optimized training" in plan.key_features
    assert "Race-specific workouts tailored for Half Marathon distance" in plan.key_features
    assert plan.feasibility is None
    assert len(plan.notes) == 5


def test_race_plan_terrain_feature(race_data, today):
    """Test that off-road races get a terrain feature."""
    plan = generate_race_training_plan(RaceTrainingInputs(**{**race_data, "race_terrain": "trail"}), today=today)
    assert "Terrain-specific training for trail conditions" in plan.key_features


def test_race_close_adds_start_week_note(race_data, today):
    """Test the note telling the runner where to join a plan that is too long."""
    race_date = (today + timedelta(weeks=6)).isoformat()
    plan = generate_race_training_plan(RaceTrainingInputs(**{**race_data, "race_date": race_date}), today=today)

    assert plan.duration_weeks == 12
    assert any("start this 12-week plan at week 7" in note for note in plan.notes)


def test_race_in_past_is_rejected(race_data, today):
    """Test that race days before today cannot be planned."""
    race_date = (today - timedelta(days=1)).isoformat()
    with pytest.raises(PlanInputError) as exc_info:
        generate_race_training_plan(RaceTrainingInputs(**{**race_data, "race_date": race_date}), today=today)
    assert exc_info.value.code == "RACE_DATE_IN_PAST"


def test_race_plan_with_recent_result(race_data, today):
    """Test that a recent race adds a feasibility assessment and note."""
    inputs = RaceTrainingInputs(**{**race_data, "recent_race_distance": "10k", "recent_race_time": "50:00"})
    plan = generate_race_training_plan(inputs, today=today)

    assert plan.feasibility is not None
    assert plan.feasibility.verdict == "ambitious"
    assert plan.notes[-1].startswith("Based on your recent race")


def test_marathon_plan_is_sixteen_weeks(race_data, today):
    """Test long race duration and long-run emphasis."""
    plan = generate_race_training_plan(
        RaceTrainingInputs(**{**race_data, "race_distance": "marathon", "target_time": "3:45:00"}), today=today
    )
    assert plan.duration_weeks == 16
    assert plan.title == "Marathon Training Plan"
    tuesday = plan.weeks[0].days[1]
    assert tuesday.workout_type == "Long Run"
    assert tuesday.description == "Build endurance with steady effort, practice nutrition strategy"


def test_generation_is_deterministic(race_data, today):
    """Test that the same inputs give the same plan."""
    inputs = RaceTrainingInputs(**race_data)
    assert generate_running_plan(inputs, today=today) == generate_running_plan(inputs, today=today)


def test_dispatch_by_goal(weight_loss_data, fitness_data, race_data, today):
    """Test that generate_running_plan routes each goal to its generator."""
    assert generate_running_plan(WeightLossInputs(**weight_loss_data)).goal_type == "weight-loss"
    assert generate_running_plan(GeneralFitnessInputs(**fitness_data)).goal_type == "general-fitness"
    assert generate_running_plan(RaceTrainingInputs(**race_data), today=today).goal_type == "race-training"


def test_unknown_inputs_are_unsupported():
    """Test that inputs for an unknown goal are rejected."""
    with pytest.raises(UnsupportedGoalError):
        generate_running_plan(SimpleNamespace(goal_type="swimming", training_days=[]))


def test_plans_are_immutable(fitness_data):
    """Test that a generated plan cannot be edited in place."""
    plan = generate_fitness_plan(GeneralFitnessInputs(**fitness_data))
    with pytest.raises(ValidationError):
        plan.weeks[0].days[0].distance_km = 99
