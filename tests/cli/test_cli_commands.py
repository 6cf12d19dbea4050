"""Tests for the runplan CLI.

Plans are generated from JSON answer files so no prompts are needed,
except for one walk through the interactive wizard.
"""

import json
from datetime import date, timedelta

import pytest
from typer.testing import CliRunner

from cli.cli import app, render_week_table
from runplan.plans.generator import generate_fitness_plan
from runplan.plans.inputs import GeneralFitnessInputs

runner = CliRunner()


@pytest.fixture
def fitness_file(tmp_path, fitness_data):
    path = tmp_path / "fitness.json"
    path.write_text(json.dumps({"goal_type": "general-fitness", **fitness_data}), encoding="utf-8")
    return path


@pytest.fixture
def race_file(tmp_path, race_data):
    path = tmp_path / "race.json"
    race_date = (date.today() + timedelta(weeks=30)).isoformat()
    path.write_text(json.dumps({"goal_type": "race-training", **race_data, "race_date": race_date}), encoding="utf-8")
    return path


def test_generate_json(fitness_file):
    """Test that --format json prints the plan as JSON only."""
    result = runner.invoke(app, ["generate", "--input", str(fitness_file), "--format", "json"])
    assert result.exit_code == 0, result.output

    plan = json.loads(result.stdout)
    assert plan["title"] == "General Fitness Running Plan"
    assert len(plan["weeks"]) == 12


def test_generate_text(race_file):
    """Test the printable text format."""
    result = runner.invoke(app, ["generate", "-i", str(race_file), "-f", "text"])
    assert result.exit_code == 0, result.output
    assert "Half Marathon Training Plan" in result.stdout
    assert "Generated on " in result.stdout


def test_generate_table(fitness_file):
    """Test the default rich table output."""
    result = runner.invoke(app, ["generate", "--input", str(fitness_file)])
    assert result.exit_code == 0, result.output
    assert "General Fitness Running Plan" in result.stdout
    assert "Week 1 - " in result.stdout
    assert "Scheduled: " in result.stdout


def test_generate_to_file(tmp_path, fitness_file):
    """Test writing the plan to --output."""
    output = tmp_path / "plan.json"
    result = runner.invoke(app, ["generate", "-i", str(fitness_file), "-f", "json", "-o", str(output)])
    assert result.exit_code == 0, result.output
    assert json.loads(output.read_text(encoding="utf-8"))["goal_type"] == "general-fitness"


def test_goal_option_overrides_file(tmp_path, fitness_data):
    """Test that --goal picks the form when the file has no goal_type."""
    path = tmp_path / "answers.json"
    path.write_text(json.dumps(fitness_data), encoding="utf-8")
    result = runner.invoke(app, ["generate", "--goal", "general-fitness", "-i", str(path), "-f", "json"])
    assert result.exit_code == 0, result.output


def test_missing_fields_exit_1(tmp_path):
    """Test that an incomplete answer file is reported."""
    path = tmp_path / "partial.json"
    path.write_text(json.dumps({"goal_type": "general-fitness", "current_volume_km": 20}), encoding="utf-8")
    result = runner.invoke(app, ["generate", "-i", str(path)])
    assert result.exit_code == 1
    assert "Missing information" in result.output


def test_invalid_inputs_exit_1(tmp_path, fitness_data):
    """Test that schema errors are reported as invalid input."""
    path = tmp_path / "bad.json"
    path.write_text(
        json.dumps({"goal_type": "general-fitness", **fitness_data, "fitness_level": "elite"}), encoding="utf-8"
    )
    result = runner.invoke(app, ["generate", "-i", str(path)])
    assert result.exit_code == 1
    assert "Invalid input" in result.output


def test_unknown_goal_exit_2():
    """Test that an unknown goal is a usage error."""
    result = runner.invoke(app, ["generate", "--goal", "swimming"])
    assert result.exit_code == 2


def test_unknown_format_exit_2(fitness_file):
    """Test that an unknown output format is a usage error."""
    result = runner.invoke(app, ["generate", "-i", str(fitness_file), "-f", "xml"])
    assert result.exit_code == 2


def test_malformed_json_exit_2(tmp_path):
    """Test that an unparseable answer file is a usage error, not a traceback."""
    path = tmp_path / "broken.json"
    path.write_text('{"goal_type": "general-fitness",', encoding="utf-8")
    result = runner.invoke(app, ["generate", "-i", str(path)])
    assert result.exit_code == 2
    assert "Invalid JSON" in result.output


def test_non_object_json_exit_2(tmp_path):
    """Test that an answer file must hold an object."""
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert runner.invoke(app, ["generate", "-i", str(path)]).exit_code == 2


def test_interactive_wizard():
    """Test the prompt flow for a general fitness plan."""
    # goal, volume, level, focus, then accept default days, strength and injury history
    answers = "2\n25\nintermediate\nendurance\n\n\n\n"
    result = runner.invoke(app, ["generate"], input=answers)
    assert result.exit_code == 0, result.output
    assert "General Fitness Running Plan" in result.output


def test_coach_session():
    """Test one question and quitting the coach."""
    result = runner.invoke(app, ["coach"], input="My knee has pain\nquit\n")
    assert result.exit_code == 0, result.output
    assert "Coach (injury)" in result.output


def test_faq_filter():
    """Test FAQ filtering and the no-match exit code."""
    result = runner.invoke(app, ["faq", "missed"])
    assert result.exit_code == 0
    assert "How should I modify the plan if I miss workouts?" in result.output

    assert runner.invoke(app, ["faq", "xyzzy"]).exit_code == 1


def test_week_table_caption_shows_scheduled_km(fitness_data):
    """Test that each week table is captioned with the km actually scheduled."""
    plan = generate_fitness_plan(GeneralFitnessInputs(**fitness_data))
    week = plan.weeks[0]
    scheduled = sum(day.distance_km for day in week.days if day.intensity != "rest")
    assert render_week_table(week).caption == f"Scheduled: {scheduled} km"
