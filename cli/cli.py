"""CLI for the running plan generator.

Runs the plan wizard in the terminal, chats with the scripted coach,
prints the FAQ, or starts the API server.
"""

import json
from pathlib import Path

import typer
import uvicorn
from loguru import logger
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from runplan.coach.conversation import CoachConversation
from runplan.core.logger import setup_logger
from runplan.core.settings import settings
from runplan.faq.content import find_faq_entries
from runplan.plans.errors import PlanInputError
from runplan.plans.types import RunningPlan, WeeklyPlan
from runplan.plans.volume import compute_weekly_volume_km
from runplan.render.print_view import render_print_view
from runplan.render.summary import summarize_plan
from runplan.wizard.errors import MissingInformationError, PlanGenerationError
from runplan.wizard.session import WizardSession

# Initialize Rich console for output
console = Console()

app = typer.Typer(
    name="runplan",
    help="Running plan generator - wizard, coach and FAQ",
    add_completion=False,
)

GOAL_CHOICES = {
    "1": "weight-loss",
    "2": "general-fitness",
    "3": "race-training",
}

# (field, prompt, type, choices) per goal
FORM_PROMPTS: dict[str, list[tuple[str, str, type, tuple[str, ...] | None]]] = {
    "weight-loss": [
        ("current_weight_kg", "Current weight (kg)", float, None),
        ("target_weight_kg", "Target weight (kg)", float, None),
        ("height_cm", "Height (cm)", float, None),
        ("timeframe_months", "Weight loss timeframe (months, 1-24)", int, None),
        ("activity_level", "Daily activity level", str, ("sedentary", "lightly-active", "moderately-active", "very-active")),
        ("stress_level", "Stress level (1-5)", int, None),
    ],
    "general-fitness": [
        ("current_volume_km", "Current weekly running volume (km)", float, None),
        ("fitness_level", "Fitness level", str, ("beginner", "intermediate", "advanced")),
        ("primary_focus", "Primary focus", str, ("endurance", "maintenance", "speed")),
    ],
    "race-training": [
        ("race_distance", "Race distance", str, ("5k", "10k", "half-marathon", "marathon", "ultra")),
        ("race_date", "Race date (YYYY-MM-DD)", str, None),
        ("target_time", "Target finish time (h:mm:ss)", str, None),
        ("current_volume_km", "Current weekly running volume (km)", float, None),
        ("longest_run_km", "Longest recent run (km)", float, None),
        ("approach_preference", "Training approach", str, ("traditional", "speed", "high-mileage", "low-mileage")),
        ("race_terrain", "Race terrain", str, ("road", "mixed", "hilly", "trail")),
    ],
}

INTENSITY_STYLES = {
    "easy": "green",
    "moderate": "yellow",
    "hard": "red",
    "rest": "dim",
}


def _setup_logging(debug: bool = False) -> None:
    # Terminal output is the plan itself; only warnings unless debugging
    setup_logger(level="DEBUG" if debug else "WARNING", log_file=settings.log_file)


def _prompt_field(label: str, field_type: type, choices: tuple[str, ...] | None, default: object) -> object:
    if choices:
        label = f"{label} [{'/'.join(choices)}]"
    prompt_default = default if default not in (None, "", 0) else None
    while True:
        value = typer.prompt(label, default=prompt_default, type=field_type, show_default=prompt_default is not None)
        if choices and value not in choices:
            console.print(f"[red]Choose one of: {', '.join(choices)}[/red]")
            continue
        return value


def _run_wizard(session: WizardSession) -> None:
    goal = session.selected_goal
    form = session.current_form()
    for field, label, field_type, choices in FORM_PROMPTS[goal]:
        session.update(**{field: _prompt_field(label, field_type, choices, form.get(field))})

    days = typer.prompt(
        "Training days (comma separated)",
        default=",".join(form["training_days"]),
    )
    session.update(training_days=[day.strip().lower() for day in days.split(",") if day.strip()])

    if "strength_training" in form:
        session.update(strength_training=typer.confirm("Include strength training?", default=form["strength_training"]))
    if goal == "race-training" and typer.confirm("Add a recent race result to check your target?", default=False):
        session.update(
            recent_race_distance=_prompt_field(
                "Recent race distance",
                str,
                ("5k", "10k", "half-marathon", "marathon", "ultra"),
                None,
            ),
            recent_race_time=typer.prompt("Recent race time (h:mm:ss)"),
        )
    session.update(injury_history=typer.prompt("Injury history", default="", show_default=False))


def render_week_table(week: WeeklyPlan) -> Table:
    table = Table(
        title=f"Week {week.week_number} - {week.total_distance_km} km",
        caption=f"Scheduled: {compute_weekly_volume_km(week.days)} km",
        show_lines=False,
    )
    table.add_column("Day")
    table.add_column("Intensity")
    table.add_column("Workout")
    table.add_column("km", justify="right")
    table.add_column("Pace")
    for day in week.days:
        style = INTENSITY_STYLES[day.intensity]
        table.add_row(
            day.day,
            Text(day.intensity.capitalize(), style=style),
            f"{day.workout_type}\n[dim]{day.description}[/dim]",
            str(day.distance_km) if day.distance_km > 0 else "",
            day.pace_guidance or "",
        )
    return table


def print_plan(plan: RunningPlan) -> None:
    summary = summarize_plan(plan)
    console.print(Panel(Text(plan.subtitle), title=plan.title, border_style="cyan"))

    if plan.paces is not None:
        paces = Table(title="Training Paces")
        for zone in ("easy", "moderate", "threshold", "interval", "repetition"):
            paces.add_column(zone.capitalize())
        paces.add_row(
            plan.paces.easy, plan.paces.moderate, plan.paces.threshold, plan.paces.interval, plan.paces.repetition
        )
        console.print(paces)

    console.print(
        f"[bold]Duration:[/bold] {summary.duration_weeks} weeks  "
        f"[bold]Total:[/bold] {summary.total_distance_km} km  "
        f"[bold]Weekly average:[/bold] {summary.weekly_average_km:.1f} km"
    )
    for week in plan.weeks:
        console.print(render_week_table(week))

    console.print("\n[bold]Key features[/bold]")
    for feature in summary.key_features:
        console.print(f"  • {feature}")
    console.print("\n[bold]Notes[/bold]")
    for note in summary.notes:
        console.print(f"  • {note}")


def _emit(plan: RunningPlan, output_format: str, output_file: Path | None) -> None:
    if output_format == "table" and output_file is None:
        print_plan(plan)
        return

    content = plan.model_dump_json(indent=2) if output_format == "json" else render_print_view(plan)
    if output_file is not None:
        output_file.write_text(content, encoding="utf-8")
        console.print(f"[green]Plan written to {output_file}[/green]")
    else:
        typer.echo(content)


@app.command()
def generate(
    goal: str | None = typer.Option(None, "--goal", "-g", help="weight-loss, general-fitness or race-training"),
    input_file: Path | None = typer.Option(None, "--input", "-i", help="JSON file with form answers"),
    output_format: str = typer.Option("table", "--format", "-f", help="table, text or json"),
    output_file: Path | None = typer.Option(None, "--output", "-o", help="Write the plan to a file"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Generate a running plan, interactively or from a JSON file."""
    _setup_logging(debug)
    if output_format not in {"table", "text", "json"}:
        console.print(f"[red]Unknown format: {output_format}[/red]")
        raise typer.Exit(2)

    session = WizardSession()
    answers: dict = {}
    if input_file is not None:
        try:
            answers = json.loads(input_file.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            console.print(f"[red]Invalid JSON (line {e.lineno}: {e.msg}) in {input_file}[/red]")
            raise typer.Exit(2) from e
        if not isinstance(answers, dict):
            console.print(f"[red]Expected a JSON object of form answers in {input_file}[/red]")
            raise typer.Exit(2)
        goal = goal or answers.pop("goal_type", None)
        answers.pop("goal_type", None)

    if goal is None:
        console.print("What's your running goal?")
        for key, name in GOAL_CHOICES.items():
            console.print(f"  {key}. {name}")
        choice = typer.prompt("Goal", default="1")
        goal = GOAL_CHOICES.get(choice, choice)

    try:
        session.select_goal(goal)
    except PlanInputError as e:
        console.print(f"[red]{e.details[0]}[/red]")
        raise typer.Exit(2) from e

    if input_file is not None:
        session.update(**answers)
    else:
        _run_wizard(session)

    try:
        plan = session.submit()
    except MissingInformationError as e:
        console.print(Panel(Text(e.description), title=e.title, subtitle=", ".join(e.missing_fields), border_style="red"))
        raise typer.Exit(1) from e
    except PlanInputError as e:
        console.print(Panel(Text("\n".join(e.details)), title="Invalid input", border_style="red"))
        raise typer.Exit(1) from e
    except PlanGenerationError as e:
        console.print(Panel(Text(e.description), title=e.title, border_style="red"))
        raise typer.Exit(1) from e

    _emit(plan, output_format, output_file)


@app.command()
def coach(debug: bool = typer.Option(False, "--debug", help="Enable debug logging")) -> None:
    """Chat with the scripted running coach. Empty line or 'quit' to exit."""
    _setup_logging(debug)
    conversation = CoachConversation()
    console.print(Panel(Text(conversation.messages[0].content), title="AI Running Coach", border_style="cyan"))
    while True:
        question = typer.prompt("You", default="", show_default=False)
        if not question.strip() or question.strip().lower() in {"quit", "exit"}:
            break
        reply = conversation.send(question)
        if reply is not None:
            console.print(Panel(Text(reply.content), title=f"Coach ({reply.topic})", border_style="green"))
    logger.debug(f"Coach session ended after {len(conversation.messages)} messages")


@app.command()
def faq(query: str = typer.Argument("", help="Filter entries by text")) -> None:
    """Print the running FAQ."""
    entries = find_faq_entries(query)
    if not entries:
        console.print(f"[yellow]No FAQ entries match {query!r}[/yellow]")
        raise typer.Exit(1)
    for entry in entries:
        body = "\n".join([entry.intro, *(f"• {point}" for point in entry.points), *entry.closing])
        console.print(Panel(Text(body), title=entry.question, border_style="blue"))


@app.command()
def server(
    host: str = typer.Option(settings.host, "--host", "-h", help="Host to bind to"),
    port: int = typer.Option(settings.port, "--port", "-p", help="Port to bind to"),
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload"),
) -> None:
    """Run the FastAPI server."""
    logger.info(f"Starting FastAPI server on {host}:{port} (reload={reload})")
    uvicorn.run("runplan.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
