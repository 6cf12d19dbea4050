"""Centralized pace estimation logic - single source of truth.

This module provides the ONLY place where training paces are derived.
No hard-coded paces anywhere else.

All training paces use a target pace (seconds per km) as the anchor and
apply multipliers to derive each zone:
- Race plans anchor on goal race pace (target time / race distance)
- Other plans anchor on a default pace for the runner's fitness level
"""

from loguru import logger

from runplan.plans.inputs import GeneralFitnessInputs, RaceTrainingInputs, WeightLossInputs
from runplan.plans.race.constants import RACE_DISTANCE_KM
from runplan.plans.types import DailyWorkout, PaceTable
from runplan.utils.rounding import round_half_up

# Pace multipliers relative to target pace (target = 1.00)
# Multipliers > 1.00 = slower than target pace
# Multipliers < 1.00 = faster than target pace
PACE_MULTIPLIERS: dict[str, float] = {
    "easy": 1.3,
    "moderate": 1.15,
    "threshold": 1.05,
    "interval": 0.95,
    "repetition": 0.9,
}

# Anchor pace in seconds per km when no race target is available
FITNESS_LEVEL_PACE_SECONDS: dict[str, int] = {
    "beginner": 390,
    "intermediate": 330,
    "advanced": 270,
}
DEFAULT_PACE_SECONDS = 360
DEFAULT_RACE_DISTANCE_KM = 5.0


def parse_finish_time(value: str) -> int:
    """Parse a finish time into seconds.

    Args:
        value: "h:mm:ss" or "mm:ss"

    Returns:
        Total seconds

    Raises:
        ValueError: If the value is not in either format
    """
    try:
        parts = [int(part) for part in value.strip().split(":")]
    except ValueError as e:
        raise ValueError(f"Invalid finish time: {value!r}") from e

    if len(parts) == 3:
        hours, minutes, seconds = parts
        return hours * 3600 + minutes * 60 + seconds
    if len(parts) == 2:
        minutes, seconds = parts
        return minutes * 60 + seconds
    raise ValueError(f"Invalid finish time: {value!r}. Expected h:mm:ss or mm:ss")


def format_pace(seconds: int) -> str:
    """Format a pace in seconds per km as "m:ss min/km"."""
    minutes, secs = divmod(seconds, 60)
    return f"{minutes}:{secs:02d} min/km"


def get_target_pace_seconds(
    inputs: WeightLossInputs | GeneralFitnessInputs | RaceTrainingInputs,
) -> int:
    """Get the anchor pace in seconds per km.

    Args:
        inputs: Goal-specific user inputs

    Returns:
        Target pace in seconds per km
    """
    if isinstance(inputs, RaceTrainingInputs) and inputs.target_time:
        total_seconds = parse_finish_time(inputs.target_time)
        distance_km = RACE_DISTANCE_KM.get(inputs.race_distance, DEFAULT_RACE_DISTANCE_KM)
        return round_half_up(total_seconds / distance_km)

    fitness_level = getattr(inputs, "fitness_level", None)
    return FITNESS_LEVEL_PACE_SECONDS.get(fitness_level or "", DEFAULT_PACE_SECONDS)


def estimate_pace(zone: str, target_pace_seconds: int) -> int:
    """Estimate a zone pace from the anchor pace.

    This is the ONLY function that should be used to estimate training paces.

    Args:
        zone: Pace zone (must be in PACE_MULTIPLIERS)
        target_pace_seconds: Anchor pace in seconds per km

    Returns:
        Zone pace in seconds per km

    Raises:
        ValueError: If zone is not recognized
    """
    if zone not in PACE_MULTIPLIERS:
        raise ValueError(f"Unknown zone: {zone}. Valid zones: {list(PACE_MULTIPLIERS.keys())}")
    return round_half_up(target_pace_seconds * PACE_MULTIPLIERS[zone])


def calculate_paces(
    inputs: WeightLossInputs | GeneralFitnessInputs | RaceTrainingInputs,
) -> PaceTable:
    """Build the formatted pace table for a plan.

    Args:
        inputs: Goal-specific user inputs

    Returns:
        PaceTable with one formatted pace per zone
    """
    target = get_target_pace_seconds(inputs)
    logger.debug(f"Target pace anchor: {format_pace(target)} (goal={inputs.goal_type})")
    return PaceTable(**{zone: format_pace(estimate_pace(zone, target)) for zone in PACE_MULTIPLIERS})


def get_pace_guidance(workout: DailyWorkout, paces: PaceTable) -> str | None:
    """Pick pace guidance for a workout from its label and intensity.

    Rules are checked in order; the first match wins.

    Args:
        workout: Day to annotate
        paces: Plan pace table

    Returns:
        Guidance string, or None for rest days and unmatched workouts
    """
    if workout.intensity == "rest":
        return None

    workout_type = workout.workout_type
    if "Interval" in workout_type or "Speed" in workout_type:
        return f"Work intervals: {paces.interval}, Recovery: {paces.easy}"
    if "Tempo" in workout_type:
        return f"Main effort: {paces.threshold}, Warm-up/cooldown: {paces.easy}"
    if workout.intensity == "easy" or "Recovery" in workout_type:
        return paces.easy
    if workout.intensity == "moderate" or "Steady" in workout_type:
        return paces.moderate
    if workout.intensity == "hard":
        return paces.threshold
    return None


def add_pace_guidance(days: list[DailyWorkout], paces: PaceTable) -> list[DailyWorkout]:
    """Return a copy of the week's days with pace guidance filled in."""
    annotated: list[DailyWorkout] = []
    for day in days:
        if day.intensity == "rest":
            annotated.append(day)
            continue
        annotated.append(day.model_copy(update={"pace_guidance": get_pace_guidance(day, paces)}))
    return annotated
