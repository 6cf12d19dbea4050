"""Tests for the Streamlit front end.

The backend is never started: ``requests`` is patched so every call fails
unless a test seeds the session state it needs.
"""

from pathlib import Path

import pytest
import requests
from streamlit.testing.v1 import AppTest

from runplan.plans.generator import generate_fitness_plan
from runplan.plans.inputs import GeneralFitnessInputs

APP_PATH = str(Path(__file__).resolve().parents[2] / "ui" / "app.py")


def _unreachable(*args, **kwargs):
    raise requests.ConnectionError("backend down")


@pytest.fixture(autouse=True)
def offline_backend(monkeypatch):
    monkeypatch.setattr(requests, "get", _unreachable)
    monkeypatch.setattr(requests, "post", _unreachable)


def test_coach_message_with_backend_down():
    """Test that a failed coach request becomes an apology, not a crash."""
    at = AppTest.from_file(APP_PATH)
    at.session_state["show_coach"] = True
    at.run()
    assert not at.exception

    at.text_input(key="coach_input").input("My knee hurts").run()
    assert not at.exception

    chat = at.session_state["coach_chat"]
    assert chat[-2] == {"role": "user", "content": "My knee hurts"}
    assert chat[-1]["role"] == "assistant"
    assert "could not reach the coach" in chat[-1]["content"]


def test_weekly_average_comes_from_summary(fitness_data):
    """Test that the weekly average metric shows the API summary figure."""
    plan = generate_fitness_plan(GeneralFitnessInputs(**fitness_data)).model_dump(mode="json")

    at = AppTest.from_file(APP_PATH)
    at.session_state["plan"] = plan
    at.session_state["plan_summary"] = {
        "duration_weeks": 12,
        "total_distance_km": 243,
        "weekly_average_km": 20.3,
        "key_features": [],
        "notes": [],
    }
    at.run()
    assert not at.exception

    metrics = {metric.label: metric.value for metric in at.metric}
    assert metrics["Weekly Average"] == "20.3 km"


def test_weekly_average_without_summary(fitness_data):
    """Test the placeholder when the summary could not be fetched."""
    plan = generate_fitness_plan(GeneralFitnessInputs(**fitness_data)).model_dump(mode="json")

    at = AppTest.from_file(APP_PATH)
    at.session_state["plan"] = plan
    at.run()
    assert not at.exception

    metrics = {metric.label: metric.value for metric in at.metric}
    assert metrics["Weekly Average"] == "n/a"
