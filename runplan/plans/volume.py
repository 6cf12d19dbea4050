"""Plan volume computation - kilometres only.

Volume is derived from the workouts, never typed in by hand.
"""

from runplan.plans.types import DailyWorkout, WeeklyPlan
from runplan.utils.rounding import round_half_up_to


def compute_weekly_volume_km(days: list[DailyWorkout] | tuple[DailyWorkout, ...]) -> int:
    """Sum of scheduled workout distances for a week.

    Rest days contribute nothing. Because per-day distances are rounded
    independently, this can differ by a km or two from the week's target
    total.

    Args:
        days: Days of the week

    Returns:
        Scheduled distance in km
    """
    return sum(day.distance_km for day in days if day.intensity != "rest")


def compute_plan_distance_km(weeks: list[WeeklyPlan] | tuple[WeeklyPlan, ...]) -> int:
    """Total plan distance: the sum of week totals."""
    return sum(week.total_distance_km for week in weeks)


def compute_weekly_average_km(total_distance_km: float, duration_weeks: int) -> float:
    """Average weekly distance rounded half up to one decimal."""
    if duration_weeks <= 0:
        return 0.0
    return round_half_up_to(total_distance_km / duration_weeks, 1)
