"""Week planner - progression and day assignment.

This module provides week planning utilities that enforce:
- Seven days per week, Monday first, rest by default
- Workouts land on the runner's training days in calendar order
- Weekly volume follows a per-goal progression factor
"""

from runplan.plans.distribution import distribute_workouts
from runplan.plans.race.constants import RECOVERY_WEEK_FACTOR, TAPER_WEEKS_DEFAULT
from runplan.plans.race.utils import get_taper_factor, is_recovery_week, is_taper_week
from runplan.plans.types import WEEKDAYS, DailyWorkout, GoalType
from runplan.utils.rounding import round_half_up

WEIGHT_LOSS_HEAVY_THRESHOLD_KG = 80
WEIGHT_LOSS_HEAVY_BASE_KM = 20
WEIGHT_LOSS_BASE_KM = 25
WEEKS_PER_MONTH = 4

FITNESS_DEFAULT_BASE_KM = 15
FITNESS_PLAN_WEEKS = 12
RACE_DEFAULT_BASE_KM = 20


def get_weight_loss_base_volume(current_weight_kg: float) -> int:
    """Starting weekly km for a weight loss plan (heavier runners start lower)."""
    if current_weight_kg > WEIGHT_LOSS_HEAVY_THRESHOLD_KG:
        return WEIGHT_LOSS_HEAVY_BASE_KM
    return WEIGHT_LOSS_BASE_KM


def weight_loss_progress_factor(week_number: int, duration_weeks: int) -> float:
    """Linear build to +50%, capped at 1.4."""
    return min(1 + (week_number / duration_weeks) * 0.5, 1.4)


def fitness_progress_factor(week_number: int, duration_weeks: int) -> float:
    """Linear build to +30% with a down week every fourth week."""
    if is_recovery_week(week_number):
        return RECOVERY_WEEK_FACTOR
    return min(1 + (week_number / duration_weeks) * 0.3, 1.3)


def race_progress_factor(week_number: int, duration_weeks: int) -> float:
    """Build, down weeks, then taper into race week.

    Taper takes precedence over down weeks.
    """
    if is_taper_week(week_number, duration_weeks):
        return get_taper_factor(week_number, duration_weeks)
    if is_recovery_week(week_number):
        return RECOVERY_WEEK_FACTOR
    build_weeks = max(duration_weeks - TAPER_WEEKS_DEFAULT, 1)
    return min(1 + (week_number / build_weeks) * 0.5, 1.6)


def get_week_distance(base_volume_km: float, progress_factor: float) -> int:
    """Week total in whole km."""
    return round_half_up(base_volume_km * progress_factor)


def generate_daily_workouts(
    training_days: list[str],
    total_week_distance_km: int,
    goal_type: GoalType,
    focus: str | None = None,
    race_distance: str | None = None,
) -> list[DailyWorkout]:
    """Lay a week's workouts onto the calendar.

    Args:
        training_days: Lowercase day names the runner can train on
        total_week_distance_km: Week total in km
        goal_type: Plan goal
        focus: Primary focus or approach preference
        race_distance: Race distance key (race training only)

    Returns:
        Seven DailyWorkout entries, Monday through Sunday
    """
    selected_days = [day for day in WEEKDAYS if day in training_days]
    workouts = distribute_workouts(total_week_distance_km, len(selected_days), goal_type, focus, race_distance)

    days = [DailyWorkout(day=day.capitalize()) for day in WEEKDAYS]
    for slot, day in zip(workouts, selected_days):
        days[WEEKDAYS.index(day)] = DailyWorkout(
            day=day.capitalize(),
            workout_type=slot.workout_type,
            distance_km=slot.distance_km,
            description=slot.description,
            intensity=slot.intensity,
        )
    return days
