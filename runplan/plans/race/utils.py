"""Race and taper utility functions.

Deterministic, stateless helpers for race/taper calculations.
"""

from datetime import date

from runplan.plans.race.constants import (
    PLAN_WEEKS_BY_DISTANCE,
    PLAN_WEEKS_DEFAULT,
    RACE_DISTANCE_LABELS,
    RECOVERY_WEEK_INTERVAL,
    SHORT_PLAN_VOLUME_THRESHOLD_KM,
    SHORT_PLAN_WEEKS,
    TAPER_BASE_FACTOR,
    TAPER_STEP,
    TAPER_WEEKS_DEFAULT,
)


def format_race_distance(race_distance: str) -> str:
    """Return the display label for a race distance.

    Unknown distances are returned unchanged.
    """
    return RACE_DISTANCE_LABELS.get(race_distance, race_distance)


def get_plan_duration_weeks(race_distance: str, current_volume_km: float | None) -> int:
    """Number of weeks in a race training block.

    Args:
        race_distance: Race distance key (5k, 10k, half-marathon, marathon, ultra)
        current_volume_km: Current weekly running volume in km

    Returns:
        Plan duration in weeks
    """
    if race_distance == "5k" and (current_volume_km or 0) > SHORT_PLAN_VOLUME_THRESHOLD_KM:
        return SHORT_PLAN_WEEKS
    return PLAN_WEEKS_BY_DISTANCE.get(race_distance, PLAN_WEEKS_DEFAULT)


def is_taper_week(week_number: int, duration_weeks: int, taper_weeks: int = TAPER_WEEKS_DEFAULT) -> bool:
    """Check if the week falls in the final taper block of the plan.

    Args:
        week_number: 1-based week number
        duration_weeks: Total weeks in the plan
        taper_weeks: Number of taper weeks at the end of the plan

    Returns:
        True if the week is a taper week
    """
    return week_number > duration_weeks - taper_weeks


def is_recovery_week(week_number: int) -> bool:
    """Every fourth week is a down week."""
    return week_number % RECOVERY_WEEK_INTERVAL == 0


def get_taper_factor(week_number: int, duration_weeks: int) -> float:
    """Volume multiplier for a taper week.

    The multiplier moves by TAPER_STEP per week away from race week,
    anchored at TAPER_BASE_FACTOR on race week.

    Args:
        week_number: 1-based week number (must be a taper week)
        duration_weeks: Total weeks in the plan

    Returns:
        Volume multiplier for the week
    """
    return round(TAPER_BASE_FACTOR - (duration_weeks - week_number) * TAPER_STEP, 2)


def weeks_until_race(race_date: date, today: date) -> int:
    """Whole weeks between today and race day, never less than one.

    Args:
        race_date: Race day
        today: Reference date

    Returns:
        Weeks available for training
    """
    return max((race_date - today).days // 7, 1)


def get_recommended_start_week(duration_weeks: int, weeks_available: int) -> int:
    """Plan week to start at so the plan still ends on race week.

    Args:
        duration_weeks: Total weeks in the plan
        weeks_available: Weeks between today and race day

    Returns:
        1-based week number to start from
    """
    return max(duration_weeks - weeks_available + 1, 1)
