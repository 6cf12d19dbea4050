"""Root conftest for all tests.

Shared form data for the three goals and a fixed reference date, so race
plans never depend on the day the suite runs.
"""

from datetime import date, timedelta

import pytest

# A Monday
TODAY = date(2026, 1, 5)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def weight_loss_data() -> dict:
    """Complete weight loss form for an 85 kg runner over three months."""
    return {
        "current_weight_kg": 85,
        "target_weight_kg": 78,
        "height_cm": 178,
        "timeframe_months": 3,
        "stress_level": 3,
        "activity_level": "lightly-active",
        "training_days": ["monday", "wednesday", "friday"],
        "injury_history": "",
        "dietary_preferences": "",
        "tracking_calories": False,
    }


@pytest.fixture
def fitness_data() -> dict:
    """Complete general fitness form, endurance focus, 25 km a week."""
    return {
        "current_volume_km": 25,
        "fitness_level": "intermediate",
        "primary_focus": "endurance",
        "strength_training": True,
        "training_days": ["monday", "wednesday", "saturday"],
        "injury_history": "",
    }


@pytest.fixture
def race_data() -> dict:
    """Complete half marathon form with the race twenty weeks out."""
    return {
        "race_distance": "half-marathon",
        "race_date": (TODAY + timedelta(weeks=20)).isoformat(),
        "target_time": "1:45:00",
        "current_volume_km": 30,
        "longest_run_km": 14,
        "approach_preference": "traditional",
        "race_terrain": "road",
        "strength_training": True,
        "training_days": ["tuesday", "thursday", "saturday", "sunday"],
        "injury_history": "",
    }
