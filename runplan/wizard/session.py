"""Plan wizard state machine.

Mirrors the browser flow: pick a goal, fill in that goal's form, submit
to get a plan, optionally open the coach, reset to start over. All state
is held on the session object and discarded with it.
"""

from copy import deepcopy
from datetime import date
from typing import Any

from loguru import logger

from runplan.coach.conversation import CoachConversation
from runplan.plans.errors import PlanInputError, UnsupportedGoalError
from runplan.plans.generator import generate_running_plan
from runplan.plans.types import GoalType, RunningPlan
from runplan.plans.validators import find_missing_fields, parse_user_inputs
from runplan.wizard.errors import MissingInformationError, PlanGenerationError, WizardStateError

INITIAL_FORM_DATA: dict[str, dict[str, Any]] = {
    "weight-loss": {
        "current_weight_kg": 0,
        "target_weight_kg": 0,
        "height_cm": 0,
        "timeframe_months": 3,
        "stress_level": 3,
        "activity_level": "",
        "training_days": ["monday", "wednesday", "friday"],
        "injury_history": "",
        "dietary_preferences": "",
        "tracking_calories": False,
    },
    "general-fitness": {
        "current_volume_km": 0,
        "fitness_level": "",
        "primary_focus": "",
        "strength_training": True,
        "training_days": ["monday", "wednesday", "saturday"],
        "injury_history": "",
    },
    "race-training": {
        "race_distance": "",
        "race_date": None,
        "target_time": "",
        "current_volume_km": 0,
        "longest_run_km": 0,
        "approach_preference": "",
        "race_terrain": "",
        "strength_training": True,
        "training_days": ["tuesday", "thursday", "saturday"],
        "injury_history": "",
    },
}


class WizardSession:
    """One runner's pass through the plan wizard."""

    def __init__(self) -> None:
        self.selected_goal: GoalType | None = None
        self.form_data: dict[str, dict[str, Any]] = deepcopy(INITIAL_FORM_DATA)
        self.plan: RunningPlan | None = None
        self.show_coach = False
        self.conversation: CoachConversation | None = None

    def select_goal(self, goal: str) -> None:
        """Choose a goal; clears any generated plan and hides the coach.

        Raises:
            UnsupportedGoalError: If the goal has no form
        """
        if goal not in self.form_data:
            raise UnsupportedGoalError(goal)
        self.selected_goal = goal  # type: ignore[assignment]
        self.plan = None
        self.show_coach = False
        logger.debug(f"Wizard goal selected: {goal}")

    def current_form(self) -> dict[str, Any]:
        if self.selected_goal is None:
            raise WizardStateError("No goal selected")
        return self.form_data[self.selected_goal]

    def update(self, **fields: Any) -> dict[str, Any]:
        """Merge partial form data into the selected goal's form.

        Returns:
            The updated form data
        """
        form = self.current_form()
        form.update(fields)
        return form

    def toggle_training_day(self, day: str) -> list[str]:
        """Add the day if absent, remove it if present."""
        form = self.current_form()
        day = day.lower()
        days = list(form.get("training_days") or [])
        if day in days:
            days.remove(day)
        else:
            days.append(day)
        form["training_days"] = days
        return days

    def submit(self, today: date | None = None) -> RunningPlan:
        """Validate the selected form and generate the plan.

        Args:
            today: Reference date for race plans (defaults to today)

        Returns:
            Generated plan (also stored on the session)

        Raises:
            WizardStateError: If no goal is selected
            MissingInformationError: If required fields are empty
            PlanInputError: If inputs are present but invalid
            PlanGenerationError: If generation fails unexpectedly
        """
        goal = self.selected_goal
        form = self.current_form()

        missing = find_missing_fields(goal, form)
        if missing:
            logger.info(f"Wizard submit rejected, missing fields: {missing}")
            raise MissingInformationError(missing)

        inputs = parse_user_inputs(goal, form)
        try:
            plan = generate_running_plan(inputs, today=today)
        except PlanInputError:
            raise
        except Exception as e:
            logger.exception(f"Plan generation failed for goal={goal}")
            raise PlanGenerationError(goal) from e

        self.plan = plan
        return plan

    def ask_coach(self) -> CoachConversation:
        """Show the coach panel, starting a conversation if needed."""
        self.show_coach = True
        if self.conversation is None:
            self.conversation = CoachConversation()
        return self.conversation

    def reset(self) -> None:
        """Back to goal selection with every form at its defaults."""
        self.selected_goal = None
        self.plan = None
        self.show_coach = False
        self.conversation = None
        self.form_data = deepcopy(INITIAL_FORM_DATA)
        logger.debug("Wizard reset")
