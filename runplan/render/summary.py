"""Plan summary figures."""

from pydantic import BaseModel

from runplan.plans.types import RunningPlan
from runplan.plans.volume import compute_weekly_average_km


class PlanSummary(BaseModel):
    duration_weeks: int
    total_distance_km: int
    weekly_average_km: float
    key_features: list[str]
    notes: list[str]


def summarize_plan(plan: RunningPlan) -> PlanSummary:
    return PlanSummary(
        duration_weeks=plan.duration_weeks,
        total_distance_km=plan.total_distance_km,
        weekly_average_km=compute_weekly_average_km(plan.total_distance_km, plan.duration_weeks),
        key_features=list(plan.key_features),
        notes=list(plan.notes),
    )
