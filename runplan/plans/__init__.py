"""Plans module - deterministic running plan generation.

This module provides:
- Goal-specific input schemas and validation
- Pace table and pace guidance from a target pace
- Fixed-percentage weekly workout distribution
- Per-goal weekly progression, recovery weeks and taper
- Riegel race-time prediction for target feasibility
"""

from runplan.plans.errors import PlanInputError, UnsupportedGoalError
from runplan.plans.generator import (
    generate_fitness_plan,
    generate_race_training_plan,
    generate_running_plan,
    generate_weight_loss_plan,
)
from runplan.plans.inputs import GeneralFitnessInputs, RaceTrainingInputs, UserInputs, WeightLossInputs
from runplan.plans.pace import add_pace_guidance, calculate_paces, format_pace, parse_finish_time
from runplan.plans.prediction import assess_pace_feasibility, predict_race_time
from runplan.plans.types import DailyWorkout, GoalType, PaceTable, RunningPlan, WeeklyPlan
from runplan.plans.validators import find_missing_fields, parse_user_inputs

__all__ = [
    "DailyWorkout",
    "GeneralFitnessInputs",
    "GoalType",
    "PaceTable",
    "PlanInputError",
    "RaceTrainingInputs",
    "RunningPlan",
    "UnsupportedGoalError",
    "UserInputs",
    "WeeklyPlan",
    "WeightLossInputs",
    "add_pace_guidance",
    "assess_pace_feasibility",
    "calculate_paces",
    "find_missing_fields",
    "format_pace",
    "generate_fitness_plan",
    "generate_race_training_plan",
    "generate_running_plan",
    "generate_weight_loss_plan",
    "parse_finish_time",
    "parse_user_inputs",
    "predict_race_time",
]
