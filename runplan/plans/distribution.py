"""Weekly workout distribution - fixed percentage splits.

Splits a week's total distance into workouts for the number of training
days available. Every goal follows the same shape:
- 3+ days: key sessions take fixed shares, the remainder is spread evenly
  over easy days
- 1-2 days: one main session, plus a second shorter one on 2 days
- 0 days: no workouts
"""

from runplan.plans.race.constants import LONG_DISTANCE_RACES, SHORT_DISTANCE_RACES
from runplan.plans.types import GoalType, Intensity, WorkoutSlot
from runplan.utils.rounding import round_half_up

MIN_DAYS_FOR_FULL_WEEK = 3


def _slot(workout_type: str, total_km: float, share: float, description: str, intensity: Intensity) -> WorkoutSlot:
    return WorkoutSlot(
        workout_type=workout_type,
        distance_km=round_half_up(total_km * share),
        description=description,
        intensity=intensity,
    )


def _fill_easy_days(
    slots: list[WorkoutSlot],
    remaining_km: float,
    days_left: int,
    workout_type: str,
    description: str,
) -> list[WorkoutSlot]:
    distance_per_day = round_half_up(remaining_km / max(days_left, 1))
    slots.extend(
        WorkoutSlot(
            workout_type=workout_type,
            distance_km=distance_per_day,
            description=description,
            intensity="easy",
        )
        for _ in range(days_left)
    )
    return slots


def _weight_loss_workouts(total_km: float, days: int) -> list[WorkoutSlot]:
    if days >= MIN_DAYS_FOR_FULL_WEEK:
        slots = [
            _slot("Long Easy Run", total_km, 0.3, "Steady pace in fat-burning zone (60-70% max HR)", "easy"),
            _slot("Interval Training", total_km, 0.2, "5-8 x 2min hard efforts with 2min recovery jogs", "hard"),
        ]
        remaining = total_km - sum(slot.distance_km for slot in slots)
        return _fill_easy_days(
            slots, remaining, days - 2, "Easy Run", "Easy pace, focus on form and enjoying the run"
        )

    slots = [_slot("Steady Run", total_km, 0.6, "Moderate pace with 5min easy warmup and cooldown", "moderate")]
    if days > 1:
        slots.append(
            _slot("Interval Mix", total_km, 0.4, "Alternating 3min moderate/1min hard throughout run", "hard")
        )
    return slots


def _endurance_workouts(total_km: float, days: int) -> list[WorkoutSlot]:
    if days >= MIN_DAYS_FOR_FULL_WEEK:
        slots = [
            _slot("Long Run", total_km, 0.4, "Build endurance with consistent easy pace", "moderate"),
            _slot("Tempo Run", total_km, 0.2, "Comfortably hard pace for 15-20min in the middle", "moderate"),
        ]
        remaining = total_km - sum(slot.distance_km for slot in slots)
        return _fill_easy_days(slots, remaining, days - 2, "Recovery Run", "Very easy effort, focus on recovery")

    slots = [_slot("Long Endurance Run", total_km, 0.6, "Build endurance with steady effort", "moderate")]
    if days > 1:
        slots.append(_slot("Easy Run", total_km, 0.4, "Recovery pace, keep it light", "easy"))
    return slots


def _speed_workouts(total_km: float, days: int) -> list[WorkoutSlot]:
    if days >= MIN_DAYS_FOR_FULL_WEEK:
        slots = [
            _slot("Speed Intervals", total_km, 0.25, "8-10 x 400m at 5K pace with 200m jog recovery", "hard"),
            _slot("Tempo Run", total_km, 0.2, "15-20min at threshold pace (comfortably hard)", "moderate"),
            _slot("Long Run", total_km, 0.3, "Easy pace to build endurance base", "moderate"),
        ]
        remaining = total_km - sum(slot.distance_km for slot in slots)
        return _fill_easy_days(slots, remaining, days - 3, "Recovery Run", "Very easy pace to aid recovery")

    slots = [
        _slot("Speed + Endurance", total_km, 0.6, "10min warmup, 6x3min hard w/2min jog, 10min cooldown", "hard")
    ]
    if days > 1:
        slots.append(_slot("Easy Run", total_km, 0.4, "Recovery pace to balance the hard day", "easy"))
    return slots


def _maintenance_workouts(total_km: float, days: int) -> list[WorkoutSlot]:
    if days >= MIN_DAYS_FOR_FULL_WEEK:
        slots = [
            _slot("Long Run", total_km, 0.3, "Steady comfortable pace throughout", "moderate"),
            _slot("Fartlek Run", total_km, 0.2, "Mix of paces - alternate 2min hard/2min easy", "moderate"),
        ]
        remaining = total_km - sum(slot.distance_km for slot in slots)
        return _fill_easy_days(slots, remaining, days - 2, "Easy Run", "Comfortable conversational pace")

    slots = [
        _slot("Mixed Pace Run", total_km, 0.6, "10min easy, 15min moderate, 5min hard, 10min easy", "moderate")
    ]
    if days > 1:
        slots.append(_slot("Easy Run", total_km, 0.4, "Very easy recovery pace", "easy"))
    return slots


def _race_workouts(total_km: float, days: int, approach: str | None, race_distance: str | None) -> list[WorkoutSlot]:
    if days < MIN_DAYS_FOR_FULL_WEEK:
        slots = [_slot("Long Run", total_km, 0.65, "Build endurance for race day", "moderate")]
        if days > 1:
            slots.append(_slot("Quality Session", total_km, 0.35, "Mixed intervals based on race distance", "hard"))
        return slots

    is_long_race = race_distance in LONG_DISTANCE_RACES
    long_share = 0.4 if is_long_race else 0.3
    slots = [
        _slot(
            "Long Run",
            total_km,
            long_share,
            "Build endurance with steady effort, practice nutrition strategy"
            if is_long_race
            else "Build base endurance at conversational pace",
            "moderate",
        )
    ]

    if race_distance in SHORT_DISTANCE_RACES:
        slots.append(
            _slot(
                "Speed Intervals",
                total_km,
                0.2,
                "8-10 x 400m at 5K pace with 90sec recovery"
                if race_distance == "5k"
                else "5-6 x 800m at 10K pace with 2min recovery",
                "hard",
            )
        )
    else:
        slots.append(
            _slot(
                "Tempo Run",
                total_km,
                0.2,
                "Sustained effort at threshold pace (marathon or half pace +10-20sec/km)",
                "moderate",
            )
        )

    if approach == "speed":
        slots.append(_slot("Hill Repeats", total_km, 0.15, "6-8 x 60-90sec hill repeats with jog down recovery", "hard"))
    elif approach == "high-mileage":
        slots.append(_slot("Medium-Long Run", total_km, 0.2, "Steady run at easy to moderate effort", "moderate"))
    else:
        slots.append(_slot("Steady State Run", total_km, 0.15, "Comfortable but purposeful pace throughout", "moderate"))

    # Remainder is taken against the standard 15% third session, whatever the approach
    assigned_km = round_half_up(total_km * (long_share + 0.2 + 0.15))
    return _fill_easy_days(
        slots, total_km - assigned_km, days - 3, "Recovery Run", "Very easy effort to promote recovery"
    )


def distribute_workouts(
    total_distance_km: float,
    number_of_days: int,
    goal_type: GoalType,
    focus: str | None = None,
    race_distance: str | None = None,
) -> list[WorkoutSlot]:
    """Split a week's distance into ordered workouts.

    Args:
        total_distance_km: Week total in km
        number_of_days: Training days available
        goal_type: Plan goal
        focus: Primary focus (general fitness) or approach preference (race training)
        race_distance: Race distance key (race training only)

    Returns:
        Workouts in assignment order, at most one per training day
    """
    if number_of_days <= 0:
        return []

    if goal_type == "weight-loss":
        return _weight_loss_workouts(total_distance_km, number_of_days)
    if goal_type == "general-fitness":
        if focus == "endurance":
            return _endurance_workouts(total_distance_km, number_of_days)
        if focus == "speed":
            return _speed_workouts(total_distance_km, number_of_days)
        return _maintenance_workouts(total_distance_km, number_of_days)
    if goal_type == "race-training":
        return _race_workouts(total_distance_km, number_of_days, focus, race_distance)
    return []
