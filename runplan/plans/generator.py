"""Plan generation - user inputs in, immutable RunningPlan out.

Each goal has its own generator; generate_running_plan dispatches on the
inputs' goal type. Generation is deterministic: the same inputs (and the
same reference date for race plans) always produce the same plan.
"""

from collections.abc import Callable
from datetime import date

from loguru import logger

from runplan.plans.errors import UnsupportedGoalError
from runplan.plans.inputs import GeneralFitnessInputs, RaceTrainingInputs, WeightLossInputs
from runplan.plans.pace import add_pace_guidance, calculate_paces
from runplan.plans.prediction import assess_pace_feasibility, describe_feasibility
from runplan.plans.race.utils import (
    format_race_distance,
    get_plan_duration_weeks,
    get_recommended_start_week,
    weeks_until_race,
)
from runplan.plans.types import GoalType, PaceTable, RunningPlan, WeeklyPlan
from runplan.plans.validators import validate_race_date
from runplan.plans.volume import compute_plan_distance_km
from runplan.plans.week_planner import (
    FITNESS_DEFAULT_BASE_KM,
    FITNESS_PLAN_WEEKS,
    RACE_DEFAULT_BASE_KM,
    WEEKS_PER_MONTH,
    fitness_progress_factor,
    generate_daily_workouts,
    get_week_distance,
    get_weight_loss_base_volume,
    race_progress_factor,
    weight_loss_progress_factor,
)


def _build_weeks(
    duration_weeks: int,
    base_volume_km: float,
    progress_factor: Callable[[int, int], float],
    training_days: list[str],
    goal_type: GoalType,
    paces: PaceTable,
    focus: str | None = None,
    race_distance: str | None = None,
) -> tuple[WeeklyPlan, ...]:
    weeks: list[WeeklyPlan] = []
    for week_number in range(1, duration_weeks + 1):
        total = get_week_distance(base_volume_km, progress_factor(week_number, duration_weeks))
        days = generate_daily_workouts(training_days, total, goal_type, focus, race_distance)
        weeks.append(
            WeeklyPlan(
                week_number=week_number,
                total_distance_km=total,
                days=tuple(add_pace_guidance(days, paces)),
            )
        )
    return tuple(weeks)


def generate_weight_loss_plan(inputs: WeightLossInputs) -> RunningPlan:
    """Progressive plan focused on calorie burn.

    Args:
        inputs: Weight loss inputs

    Returns:
        RunningPlan lasting four weeks per month of timeframe
    """
    base_volume = get_weight_loss_base_volume(inputs.current_weight_kg)
    duration = inputs.timeframe_months * WEEKS_PER_MONTH
    paces = calculate_paces(inputs)

    weeks = _build_weeks(
        duration_weeks=duration,
        base_volume_km=base_volume,
        progress_factor=weight_loss_progress_factor,
        training_days=inputs.training_days,
        goal_type="weight-loss",
        paces=paces,
    )

    return RunningPlan(
        title="Weight Loss Running Plan",
        subtitle=f"{duration}-week progressive plan focused on fat burning",
        goal_type="weight-loss",
        duration_weeks=duration,
        total_distance_km=compute_plan_distance_km(weeks),
        weeks=weeks,
        paces=paces,
        key_features=(
            "Gradually increasing intensity to maximize calorie burn",
            "Mix of steady-state and interval training for metabolic boost",
            "Strategic rest days to prevent overtraining",
            "Combination of shorter frequent runs and longer steady-state sessions",
        ),
        notes=(
            "Combine this plan with a moderate calorie deficit (300-500 calories/day) for optimal results",
            "Fuel properly before and after runs - focus on protein and complex carbs",
            "Stay hydrated throughout the day, not just during runs",
            "Consider strength training on 1-2 non-running days for best results",
            "Listen to your body and take extra rest if needed",
        ),
    )


def generate_fitness_plan(inputs: GeneralFitnessInputs) -> RunningPlan:
    """Twelve-week general fitness plan with a down week every fourth week."""
    base_volume = inputs.current_volume_km or FITNESS_DEFAULT_BASE_KM
    duration = FITNESS_PLAN_WEEKS
    paces = calculate_paces(inputs)

    weeks = _build_weeks(
        duration_weeks=duration,
        base_volume_km=base_volume,
        progress_factor=fitness_progress_factor,
        training_days=inputs.training_days,
        goal_type="general-fitness",
        paces=paces,
        focus=inputs.primary_focus,
    )

    return RunningPlan(
        title="General Fitness Running Plan",
        subtitle=f"12-week progressive plan for {inputs.primary_focus} improvement",
        goal_type="general-fitness",
        duration_weeks=duration,
        total_distance_km=compute_plan_distance_km(weeks),
        weeks=weeks,
        paces=paces,
        key_features=(
            "Gradually increasing volume with recovery weeks",
            "Balanced mix of easy, moderate and challenging sessions",
            "Focus on building aerobic base with strategic intensity",
            "Integrated strength training recommendations"
            if inputs.strength_training
            else "Optional cross-training suggestions",
        ),
        notes=(
            "Run at conversational pace for easy runs (you should be able to talk)",
            "Recovery is just as important as training - prioritize sleep and nutrition",
            "Pay attention to your body's signals and adjust as needed",
            "Consider a running log to track progress and identify patterns",
            "Have fun with your running - mix up routes and types of runs to stay motivated",
        ),
    )


def generate_race_training_plan(inputs: RaceTrainingInputs, today: date | None = None) -> RunningPlan:
    """Race plan: build, down weeks every fourth week, three-week taper.

    Args:
        inputs: Race training inputs
        today: Reference date for race-date checks (defaults to today)

    Returns:
        RunningPlan ending on race week

    Raises:
        PlanInputError: If the race date is in the past
    """
    today = today or date.today()
    validate_race_date(inputs, today)

    base_volume = inputs.current_volume_km or RACE_DEFAULT_BASE_KM
    duration = get_plan_duration_weeks(inputs.race_distance, inputs.current_volume_km)
    race_label = format_race_distance(inputs.race_distance)
    paces = calculate_paces(inputs)

    weeks = _build_weeks(
        duration_weeks=duration,
        base_volume_km=base_volume,
        progress_factor=race_progress_factor,
        training_days=inputs.training_days,
        goal_type="race-training",
        paces=paces,
        focus=inputs.approach_preference,
        race_distance=inputs.race_distance,
    )

    notes = [
        "The long run is the cornerstone of your training - prioritize it each week",
        "Practice your race day nutrition strategy during longer training runs",
        "Consider race-pace segments in your longer runs as you approach race day",
        "Taper properly by reducing volume but maintaining some intensity",
        "Trust your training and focus on consistent execution rather than perfect workouts",
    ]

    weeks_available = weeks_until_race(inputs.race_date, today)
    start_week = get_recommended_start_week(duration, weeks_available)
    if start_week > 1:
        logger.info(f"Race in {weeks_available} weeks, plan is {duration} weeks: start at week {start_week}")
        notes.append(
            f"Your race is {weeks_available} weeks away - start this {duration}-week plan at week {start_week} "
            "so the taper lines up with race day"
        )

    feasibility = assess_pace_feasibility(inputs)
    if feasibility is not None:
        notes.append(describe_feasibility(feasibility, inputs.race_distance))

    return RunningPlan(
        title=f"{race_label} Training Plan",
        subtitle=f"{duration}-week plan focused on {inputs.approach_preference} training approach",
        goal_type="race-training",
        duration_weeks=duration,
        total_distance_km=compute_plan_distance_km(weeks),
        weeks=weeks,
        paces=paces,
        feasibility=feasibility,
        key_features=(
            "Progressive overload with strategic recovery weeks",
            f"Race-specific workouts tailored for {race_label} distance",
            "Proper tapering period to optimize race day performance",
            f"Terrain-specific training for {inputs.race_terrain} conditions"
            if inputs.race_terrain != "road"
            else "Road-optimized training",
            "Complementary strength training for running economy"
            if inputs.strength_training
            else "Focus on running-specific conditioning",
        ),
        notes=tuple(notes),
    )


def generate_running_plan(
    inputs: WeightLossInputs | GeneralFitnessInputs | RaceTrainingInputs,
    today: date | None = None,
) -> RunningPlan:
    """Generate a plan for any supported goal.

    Args:
        inputs: Goal-specific user inputs
        today: Reference date for race plans (defaults to today)

    Returns:
        Generated RunningPlan

    Raises:
        UnsupportedGoalError: If the inputs' goal has no generator
        PlanInputError: If the inputs cannot produce a plan
    """
    logger.info(f"Generating {inputs.goal_type} plan ({len(inputs.training_days)} training days)")

    if isinstance(inputs, WeightLossInputs):
        plan = generate_weight_loss_plan(inputs)
    elif isinstance(inputs, GeneralFitnessInputs):
        plan = generate_fitness_plan(inputs)
    elif isinstance(inputs, RaceTrainingInputs):
        plan = generate_race_training_plan(inputs, today=today)
    else:
        raise UnsupportedGoalError(str(getattr(inputs, "goal_type", type(inputs).__name__)))

    logger.info(f"Generated '{plan.title}': {plan.duration_weeks} weeks, {plan.total_distance_km} km")
    return plan
