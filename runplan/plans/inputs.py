"""User input schemas, one per goal.

Inputs are transient: they exist for a single plan submission and are
discriminated on ``goal_type``.
"""

import re
from datetime import date
from typing import Annotated, Literal

from pydantic import BaseModel, Field, RootModel, TypeAdapter, field_validator

from runplan.plans.race.constants import RaceDistance
from runplan.plans.types import WEEKDAYS

ActivityLevel = Literal["sedentary", "lightly-active", "moderately-active", "very-active"]
FitnessLevel = Literal["beginner", "intermediate", "advanced"]
PrimaryFocus = Literal["endurance", "maintenance", "speed"]
ApproachPreference = Literal["traditional", "speed", "high-mileage", "low-mileage"]
RaceTerrain = Literal["road", "mixed", "hilly", "trail"]

# "h:mm:ss" or "mm:ss"
_FINISH_TIME_RE = re.compile(r"^\d{1,2}(:\d{1,2}){1,2}$")


def _normalize_training_days(value: list[str]) -> list[str]:
    days = [day.strip().lower() for day in value]
    unknown = [day for day in days if day not in WEEKDAYS]
    if unknown:
        raise ValueError(f"Unknown training days: {unknown}")
    # Keep calendar order, drop duplicates
    return [day for day in WEEKDAYS if day in days]


def _validate_finish_time(value: str) -> str:
    value = value.strip()
    if not _FINISH_TIME_RE.match(value):
        raise ValueError(f"Finish time must be h:mm:ss or mm:ss, got {value!r}")

    parts = [int(part) for part in value.split(":")]
    # Leading field is unbounded (hours, or minutes for mm:ss)
    if any(part >= 60 for part in parts[1:]):
        raise ValueError(f"Minutes and seconds must be below 60, got {value!r}")
    total_seconds = 0
    for part in parts:
        total_seconds = total_seconds * 60 + part
    if total_seconds <= 0:
        raise ValueError(f"Finish time must be longer than zero, got {value!r}")
    return value


class _BaseInputs(BaseModel):
    training_days: list[str] = Field(min_length=1)
    injury_history: str = ""

    @field_validator("training_days")
    @classmethod
    def validate_training_days(cls, value: list[str]) -> list[str]:
        return _normalize_training_days(value)


class WeightLossInputs(_BaseInputs):
    goal_type: Literal["weight-loss"] = "weight-loss"
    current_weight_kg: float = Field(gt=0)
    target_weight_kg: float = Field(gt=0)
    height_cm: float = Field(gt=0)
    timeframe_months: int = Field(default=3, ge=1, le=24)
    stress_level: int = Field(default=3, ge=1, le=5)
    activity_level: ActivityLevel
    dietary_preferences: str = ""
    tracking_calories: bool = False


class GeneralFitnessInputs(_BaseInputs):
    goal_type: Literal["general-fitness"] = "general-fitness"
    current_volume_km: float = Field(gt=0)
    fitness_level: FitnessLevel
    primary_focus: PrimaryFocus
    strength_training: bool = True


class RaceTrainingInputs(_BaseInputs):
    goal_type: Literal["race-training"] = "race-training"
    race_distance: RaceDistance
    race_date: date
    target_time: str
    current_volume_km: float = Field(gt=0)
    longest_run_km: float = Field(gt=0)
    approach_preference: ApproachPreference
    race_terrain: RaceTerrain
    strength_training: bool = True

    # Optional recent result, used to judge the target time
    recent_race_distance: RaceDistance | None = None
    recent_race_time: str | None = None

    @field_validator("target_time")
    @classmethod
    def validate_target_time(cls, value: str) -> str:
        return _validate_finish_time(value)

    @field_validator("recent_race_time")
    @classmethod
    def validate_recent_race_time(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return _validate_finish_time(value)


UserInputs = Annotated[
    WeightLossInputs | GeneralFitnessInputs | RaceTrainingInputs,
    Field(discriminator="goal_type"),
]

USER_INPUTS_ADAPTER: TypeAdapter[WeightLossInputs | GeneralFitnessInputs | RaceTrainingInputs] = TypeAdapter(
    UserInputs
)


class PlanRequest(RootModel[UserInputs]):
    """Request body wrapper: any goal's inputs, routed on goal_type."""
