"""Tests for input validation guardrails.

Tests enforce the rules applied before any plan is generated:
- Required fields must be present and non-empty
- Inputs must match their goal schema
- Race day must not be in the past
"""

from datetime import date

import pytest

from runplan.plans.errors import PlanInputError, UnsupportedGoalError
from runplan.plans.inputs import RaceTrainingInputs, WeightLossInputs
from runplan.plans.validators import find_missing_fields, parse_user_inputs, validate_race_date


def test_complete_forms_have_no_missing_fields(weight_loss_data, fitness_data, race_data):
    """Test that the shared fixtures are complete."""
    assert find_missing_fields("weight-loss", weight_loss_data) == []
    assert find_missing_fields("general-fitness", fitness_data) == []
    assert find_missing_fields("race-training", race_data) == []


def test_empty_and_zero_values_are_missing(weight_loss_data):
    """Test that zero, empty strings and empty lists count as missing."""
    data = {**weight_loss_data, "height_cm": 0, "activity_level": "", "training_days": []}
    assert find_missing_fields("weight-loss", data) == ["height_cm", "activity_level", "training_days"]


def test_optional_fields_are_not_required(fitness_data):
    """Test that injury history may be left blank."""
    assert find_missing_fields("general-fitness", {**fitness_data, "injury_history": ""}) == []


def test_unknown_goal_is_rejected():
    """Test that an unknown goal raises UnsupportedGoalError."""
    with pytest.raises(UnsupportedGoalError) as exc_info:
        find_missing_fields("swimming", {})
    assert exc_info.value.code == "UNSUPPORTED_GOAL"

    with pytest.raises(UnsupportedGoalError):
        parse_user_inputs("swimming", {})


def test_parse_picks_goal_schema(weight_loss_data, race_data):
    """Test that the goal type selects the input model."""
    assert isinstance(parse_user_inputs("weight-loss", weight_loss_data), WeightLossInputs)
    assert isinstance(parse_user_inputs("race-training", race_data), RaceTrainingInputs)


def test_training_days_are_normalized(fitness_data):
    """Test that day names are lowercased, deduplicated and put in calendar order."""
    inputs = parse_user_inputs(
        "general-fitness", {**fitness_data, "training_days": ["Saturday", "monday", "MONDAY", " wednesday "]}
    )
    assert inputs.training_days == ["monday", "wednesday", "saturday"]


def test_unknown_training_day_is_invalid(fitness_data):
    """Test that a misspelled day is rejected."""
    with pytest.raises(PlanInputError) as exc_info:
        parse_user_inputs("general-fitness", {**fitness_data, "training_days": ["funday"]})
    assert exc_info.value.code == "INVALID_INPUT"
    assert any("training_days" in detail for detail in exc_info.value.details)


@pytest.mark.parametrize("target_time", ["fast", "1h45", "1:45:00:00", "0:00", "00:00:00", "5:99", "1:75:00"])
def test_bad_target_time_is_invalid(race_data, target_time):
    """Test that target times must be a nonzero h:mm:ss or mm:ss."""
    with pytest.raises(PlanInputError) as exc_info:
        parse_user_inputs("race-training", {**race_data, "target_time": target_time})
    assert exc_info.value.code == "INVALID_INPUT"


def test_out_of_range_values_are_invalid(weight_loss_data):
    """Test schema bounds on timeframe and stress level."""
    with pytest.raises(PlanInputError):
        parse_user_inputs("weight-loss", {**weight_loss_data, "timeframe_months": 30})
    with pytest.raises(PlanInputError):
        parse_user_inputs("weight-loss", {**weight_loss_data, "stress_level": 6})


def test_blank_recent_race_time_is_dropped(race_data):
    """Test that a blank optional recent time becomes None."""
    inputs = parse_user_inputs("race-training", {**race_data, "recent_race_time": "  "})
    assert inputs.recent_race_time is None


def test_zero_recent_race_time_is_invalid(race_data):
    """Test that a zero recent time is rejected rather than predicting 0:00 paces."""
    with pytest.raises(PlanInputError):
        parse_user_inputs("race-training", {**race_data, "recent_race_distance": "10k", "recent_race_time": "0:00"})


def test_long_finish_time_is_valid(race_data):
    """Test that the leading field may exceed 59."""
    inputs = parse_user_inputs("race-training", {**race_data, "target_time": "75:30"})
    assert inputs.target_time == "75:30"


def test_race_date_in_past(race_data):
    """Test that race days before today are rejected."""
    inputs = RaceTrainingInputs(**{**race_data, "race_date": "2025-12-31"})
    with pytest.raises(PlanInputError) as exc_info:
        validate_race_date(inputs, date(2026, 1, 5))
    assert exc_info.value.code == "RACE_DATE_IN_PAST"


def test_race_today_is_allowed(race_data):
    """Test that a race today passes the date check."""
    inputs = RaceTrainingInputs(**{**race_data, "race_date": "2026-01-05"})
    validate_race_date(inputs, date(2026, 1, 5))
