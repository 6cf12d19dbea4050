"""Race-time prediction and target feasibility.

Uses the Riegel formula T2 = T1 * (D2 / D1) ** 1.06 to project a recent
race result onto the goal distance, then grades the runner's target time
against that projection.
"""

from loguru import logger

from runplan.plans.inputs import RaceTrainingInputs
from runplan.plans.pace import parse_finish_time
from runplan.plans.race.constants import RACE_DISTANCE_KM, RIEGEL_EXPONENT
from runplan.plans.race.utils import format_race_distance
from runplan.plans.types import FeasibilityVerdict, PaceFeasibility
from runplan.utils.rounding import round_half_up

# Bounds on target / predicted time
CONSERVATIVE_RATIO = 1.05
REALISTIC_RATIO = 0.97
AMBITIOUS_RATIO = 0.90


def predict_race_time(
    known_seconds: float,
    known_distance_km: float,
    target_distance_km: float,
    exponent: float = RIEGEL_EXPONENT,
) -> float:
    """Predict a finish time at a new distance from a known result.

    Args:
        known_seconds: Finish time of the known result
        known_distance_km: Distance of the known result
        target_distance_km: Distance to predict
        exponent: Fatigue exponent (Riegel uses 1.06)

    Returns:
        Predicted finish time in seconds

    Raises:
        ValueError: If any time or distance is not positive
    """
    if known_seconds <= 0 or known_distance_km <= 0 or target_distance_km <= 0:
        raise ValueError("Times and distances must be positive for race prediction")
    return known_seconds * (target_distance_km / known_distance_km) ** exponent


def classify_target(ratio: float) -> FeasibilityVerdict:
    """Grade a target/predicted ratio."""
    if ratio > CONSERVATIVE_RATIO:
        return "conservative"
    if ratio >= REALISTIC_RATIO:
        return "realistic"
    if ratio >= AMBITIOUS_RATIO:
        return "ambitious"
    return "very-ambitious"


def assess_pace_feasibility(inputs: RaceTrainingInputs) -> PaceFeasibility | None:
    """Compare the target time with a prediction from the recent result.

    Args:
        inputs: Race training inputs

    Returns:
        PaceFeasibility, or None if no recent result was given
    """
    if not inputs.recent_race_distance or not inputs.recent_race_time:
        return None

    recent_seconds = parse_finish_time(inputs.recent_race_time)
    target_seconds = parse_finish_time(inputs.target_time)
    if recent_seconds <= 0 or target_seconds <= 0:
        logger.warning("Skipping feasibility check: zero finish time")
        return None

    predicted = predict_race_time(
        known_seconds=recent_seconds,
        known_distance_km=RACE_DISTANCE_KM[inputs.recent_race_distance],
        target_distance_km=RACE_DISTANCE_KM[inputs.race_distance],
    )
    ratio = target_seconds / predicted
    verdict = classify_target(ratio)
    logger.info(
        f"Feasibility: target={target_seconds}s predicted={predicted:.0f}s ratio={ratio:.3f} verdict={verdict}"
    )
    return PaceFeasibility(
        predicted_seconds=round_half_up(predicted),
        target_seconds=target_seconds,
        ratio=round(ratio, 3),
        verdict=verdict,
    )


def format_duration(seconds: int) -> str:
    """Format seconds as h:mm:ss (or m:ss under an hour)."""
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def describe_feasibility(feasibility: PaceFeasibility, race_distance: str) -> str:
    """One-line plan note summarising a feasibility assessment."""
    label = format_race_distance(race_distance)
    predicted = format_duration(feasibility.predicted_seconds)
    messages: dict[str, str] = {
        "conservative": "your target looks conservative - you may be able to aim higher",
        "realistic": "your target looks realistic for your current fitness",
        "ambitious": "your target is ambitious - consistent training will be key",
        "very-ambitious": "your target is very ambitious - consider a stepping-stone goal",
    }
    return f"Based on your recent race, your predicted {label} time is {predicted}; {messages[feasibility.verdict]}"
