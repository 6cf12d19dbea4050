"""Error types for the plan wizard.

Distinct error types to differentiate user errors vs generation failures.
"""

from runplan.plans.errors import PlanInputError


class MissingInformationError(PlanInputError):
    """Raised when the form is submitted with required fields left empty.

    This is a user-facing error: the runner should fill in the listed fields.
    """

    title = "Missing information"
    description = "Please fill in all required fields."

    def __init__(self, missing_fields: list[str]):
        self.missing_fields = missing_fields
        super().__init__("MISSING_FIELDS", missing_fields)


class PlanGenerationError(RuntimeError):
    """Raised when valid inputs still fail to produce a plan.

    This indicates a bug in the generator, not a problem with the inputs.
    """

    title = "Error"
    description = "There was a problem generating your plan. Please try again."

    def __init__(self, goal_type: str, message: str | None = None):
        self.goal_type = goal_type
        super().__init__(message or f"{self.description} (goal={goal_type})")


class WizardStateError(RuntimeError):
    """Raised when a wizard step is used out of order (e.g. submit before choosing a goal)."""
