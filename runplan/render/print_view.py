"""Printable plain-text rendering of a plan.

Layout, top to bottom: title block, pace table, summary, key features,
notes, every week day by day, then a generation footer.
"""

from datetime import date

from runplan.plans.types import DailyWorkout, RunningPlan, WeeklyPlan
from runplan.render.summary import summarize_plan

RULE = "=" * 60
THIN_RULE = "-" * 60


def _render_day(day: DailyWorkout) -> list[str]:
    header = f"{day.day:<10} [{day.intensity.capitalize()}] {day.workout_type}"
    if day.distance_km > 0:
        header += f" - {day.distance_km} km"
    lines = [header, f"    {day.description}"]
    if day.pace_guidance:
        lines.append(f"    Pace: {day.pace_guidance}")
    return lines


def render_week(week: WeeklyPlan) -> str:
    """Render one week as text."""
    lines = [f"Week {week.week_number} - {week.total_distance_km} km", THIN_RULE]
    for day in week.days:
        lines.extend(_render_day(day))
    return "\n".join(lines)


def render_print_view(plan: RunningPlan, generated_on: date | None = None) -> str:
    """Render the whole plan for printing.

    Args:
        plan: Plan to render
        generated_on: Date for the footer (defaults to today)

    Returns:
        Plain-text document
    """
    summary = summarize_plan(plan)
    generated_on = generated_on or date.today()

    lines: list[str] = [RULE, plan.title, plan.subtitle, RULE, ""]

    if plan.paces is not None:
        lines.extend(
            [
                "Training Paces",
                f"  Easy:       {plan.paces.easy}",
                f"  Moderate:   {plan.paces.moderate}",
                f"  Threshold:  {plan.paces.threshold}",
                f"  Interval:   {plan.paces.interval}",
                f"  Repetition: {plan.paces.repetition}",
                "",
            ]
        )

    lines.extend(
        [
            "Plan Summary",
            f"  Duration:       {summary.duration_weeks} weeks",
            f"  Total Distance: {summary.total_distance_km} km",
            f"  Weekly Average: {summary.weekly_average_km:.1f} km",
            "",
            "Key Features",
            *(f"  * {feature}" for feature in summary.key_features),
            "",
            "Notes",
            *(f"  * {note}" for note in summary.notes),
            "",
        ]
    )

    for week in plan.weeks:
        lines.append(render_week(week))
        lines.append("")

    lines.append(f"Generated on {generated_on.isoformat()}")
    return "\n".join(lines)
