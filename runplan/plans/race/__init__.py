"""Race distance, duration and taper helpers."""

from runplan.plans.race.constants import RACE_DISTANCE_KM, RIEGEL_EXPONENT, TAPER_WEEKS_DEFAULT, RaceDistance
from runplan.plans.race.utils import (
    format_race_distance,
    get_plan_duration_weeks,
    get_recommended_start_week,
    get_taper_factor,
    is_recovery_week,
    is_taper_week,
    weeks_until_race,
)

__all__ = [
    "RACE_DISTANCE_KM",
    "RIEGEL_EXPONENT",
    "TAPER_WEEKS_DEFAULT",
    "RaceDistance",
    "format_race_distance",
    "get_plan_duration_weeks",
    "get_recommended_start_week",
    "get_taper_factor",
    "is_recovery_week",
    "is_taper_week",
    "weeks_until_race",
]
