"""Canonical plan error types.

No raw ValueErrors should escape plan generation - all input problems use
these types so callers can tell user errors apart from bugs.

Standard error codes:
- MISSING_FIELDS: Required inputs were not provided
- INVALID_INPUT: Inputs failed schema validation
- RACE_DATE_IN_PAST: Race date is before today
- UNSUPPORTED_GOAL: Goal type has no generator
"""


class PlanInputError(ValueError):
    """Raised when user inputs cannot produce a plan.

    Attributes:
        code: Error code (e.g., "MISSING_FIELDS", "INVALID_INPUT")
        details: List of error detail strings
    """

    def __init__(self, code: str, details: list[str]):
        self.code = code
        self.details = details
        super().__init__(f"{code}: {details}")


class UnsupportedGoalError(PlanInputError):
    """Raised when a goal type has no plan generator."""

    def __init__(self, goal_type: str):
        self.goal_type = goal_type
        super().__init__("UNSUPPORTED_GOAL", [f"Unsupported goal type: {goal_type}"])
