"""Canonical running plan schema.

This module defines the plan object graph produced by the generator:
- Distances are whole kilometres
- Every week has exactly seven days, Monday first
- Days without a workout are explicit rest days
- Plans are immutable once generated
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

GoalType = Literal["weight-loss", "general-fitness", "race-training"]

# Intensity describes effort, not pace
Intensity = Literal["easy", "moderate", "hard", "rest"]

WEEKDAYS: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

REST_DAY_TYPE = "Rest Day"
REST_DAY_DESCRIPTION = "Complete rest or light stretching"


class WorkoutSlot(BaseModel):
    """A workout produced by the weekly distribution, not yet bound to a day."""

    model_config = ConfigDict(frozen=True)

    workout_type: str
    distance_km: int
    description: str
    intensity: Intensity


class DailyWorkout(BaseModel):
    """One calendar day of a training week.

    Attributes:
        day: Capitalized day name ("Monday".."Sunday")
        workout_type: Workout label shown to the runner
        distance_km: Distance in whole kilometres (0 on rest days)
        description: Free-text workout description
        intensity: Effort level
        pace_guidance: Pace instructions (never set on rest days)
    """

    model_config = ConfigDict(frozen=True)

    day: str
    workout_type: str = REST_DAY_TYPE
    distance_km: int = 0
    description: str = REST_DAY_DESCRIPTION
    intensity: Intensity = "rest"
    pace_guidance: str | None = None


class WeeklyPlan(BaseModel):
    """A training week: week number, total distance and seven days."""

    model_config = ConfigDict(frozen=True)

    week_number: int = Field(ge=1)
    total_distance_km: int
    days: tuple[DailyWorkout, ...]

    @field_validator("days")
    @classmethod
    def validate_seven_days(cls, value: tuple[DailyWorkout, ...]) -> tuple[DailyWorkout, ...]:
        if len(value) != len(WEEKDAYS):
            raise ValueError(f"A week must have {len(WEEKDAYS)} days, got {len(value)}")
        return value


class PaceTable(BaseModel):
    """Formatted training paces ("m:ss min/km") for each effort zone."""

    model_config = ConfigDict(frozen=True)

    easy: str
    moderate: str
    threshold: str
    interval: str
    repetition: str


FeasibilityVerdict = Literal["conservative", "realistic", "ambitious", "very-ambitious"]


class PaceFeasibility(BaseModel):
    """Comparison of a target finish time against a Riegel prediction.

    Attributes:
        predicted_seconds: Predicted goal-race time from a recent result
        target_seconds: Runner's target finish time
        ratio: target / predicted (below 1.0 means faster than predicted)
        verdict: Classification of the target
    """

    model_config = ConfigDict(frozen=True)

    predicted_seconds: int
    target_seconds: int
    ratio: float
    verdict: FeasibilityVerdict


class RunningPlan(BaseModel):
    """A complete multi-week running plan."""

    model_config = ConfigDict(frozen=True)

    title: str
    subtitle: str
    goal_type: GoalType
    duration_weeks: int = Field(ge=1)
    total_distance_km: int
    weeks: tuple[WeeklyPlan, ...]
    key_features: tuple[str, ...]
    notes: tuple[str, ...]
    paces: PaceTable | None = None
    feasibility: PaceFeasibility | None = None
