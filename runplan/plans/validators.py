"""Input validators with hard guardrails.

Enforces invariants before any plan is generated:
- Every required field is present and non-empty
- Inputs match their goal schema
- Race day is not in the past
"""

from datetime import date
from typing import Any

from loguru import logger
from pydantic import ValidationError

from runplan.plans.errors import PlanInputError, UnsupportedGoalError
from runplan.plans.inputs import (
    USER_INPUTS_ADAPTER,
    GeneralFitnessInputs,
    RaceTrainingInputs,
    WeightLossInputs,
)

REQUIRED_FIELDS: dict[str, tuple[str, ...]] = {
    "weight-loss": (
        "current_weight_kg",
        "target_weight_kg",
        "height_cm",
        "timeframe_months",
        "activity_level",
        "training_days",
    ),
    "general-fitness": (
        "current_volume_km",
        "fitness_level",
        "primary_focus",
        "training_days",
    ),
    "race-training": (
        "race_distance",
        "race_date",
        "target_time",
        "current_volume_km",
        "longest_run_km",
        "approach_preference",
        "race_terrain",
        "training_days",
    ),
}


def find_missing_fields(goal_type: str, data: dict[str, Any]) -> list[str]:
    """List required fields that are absent, empty or zero.

    Args:
        goal_type: Goal the form belongs to
        data: Raw form data

    Returns:
        Names of missing fields in form order

    Raises:
        UnsupportedGoalError: If the goal has no form
    """
    if goal_type not in REQUIRED_FIELDS:
        raise UnsupportedGoalError(goal_type)
    return [name for name in REQUIRED_FIELDS[goal_type] if not data.get(name)]


def parse_user_inputs(
    goal_type: str, data: dict[str, Any]
) -> WeightLossInputs | GeneralFitnessInputs | RaceTrainingInputs:
    """Build typed inputs from raw form data.

    Args:
        goal_type: Goal the form belongs to
        data: Raw form data

    Returns:
        Goal-specific inputs

    Raises:
        UnsupportedGoalError: If the goal has no form
        PlanInputError: If the data does not match the goal schema
    """
    if goal_type not in REQUIRED_FIELDS:
        raise UnsupportedGoalError(goal_type)

    try:
        return USER_INPUTS_ADAPTER.validate_python({**data, "goal_type": goal_type})
    except ValidationError as e:
        details = [f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()]
        logger.info(f"Rejected {goal_type} inputs: {details}")
        raise PlanInputError("INVALID_INPUT", details) from e


def validate_race_date(inputs: RaceTrainingInputs, today: date) -> None:
    """Reject race dates before today.

    Args:
        inputs: Race training inputs
        today: Reference date

    Raises:
        PlanInputError: If the race date is in the past
    """
    if inputs.race_date < today:
        raise PlanInputError(
            "RACE_DATE_IN_PAST",
            [f"Race date {inputs.race_date.isoformat()} is before {today.isoformat()}"],
        )
