"""Plan generation API endpoints.

Stateless: each request carries the full inputs and gets a fresh plan.
Nothing is stored between requests.
"""

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import PlainTextResponse
from loguru import logger

from runplan.plans.errors import PlanInputError
from runplan.plans.generator import generate_running_plan
from runplan.plans.inputs import PlanRequest, UserInputs
from runplan.plans.types import RunningPlan
from runplan.render.print_view import render_print_view
from runplan.render.summary import PlanSummary, summarize_plan

router = APIRouter(prefix="/plans", tags=["plans"])


def _generate(inputs: UserInputs) -> RunningPlan:
    try:
        return generate_running_plan(inputs)
    except PlanInputError as e:
        logger.info(f"Plan request rejected: {e.code} {e.details}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"code": e.code, "details": e.details},
        ) from e
    except Exception as e:
        logger.exception(f"Failed to generate {inputs.goal_type} plan")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="There was a problem generating your plan. Please try again.",
        ) from e


@router.post("", response_model=RunningPlan)
def create_plan(request: PlanRequest) -> RunningPlan:
    """Generate a running plan from goal-specific inputs."""
    return _generate(request.root)


@router.post("/print", response_class=PlainTextResponse)
def print_plan(request: PlanRequest) -> str:
    """Generate a plan and return its printable text view."""
    return render_print_view(_generate(request.root))


@router.post("/summary", response_model=PlanSummary)
def plan_summary(request: PlanRequest) -> PlanSummary:
    """Generate a plan and return only its summary figures."""
    return summarize_plan(_generate(request.root))
