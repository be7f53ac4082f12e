"""CLI Entry Point - Main command interface.

This module provides the kidquiz command for inspecting a child's quiz
history and producing the next adaptive quiz.
"""

import asyncio
import json
import random
from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from kidquiz.cli.ui.display import display_analytics, display_generated_quiz, display_request
from kidquiz.modules.analytics import PerformanceAnalyzer, QuizRecord
from kidquiz.modules.quiz import (
    AdaptiveQuizOrchestrator,
    HttpQuizContentProvider,
    parse_history,
)
from kidquiz.modules.recommendation import RecommendationStrategy
from kidquiz.shared.config import get_settings
from kidquiz.shared.exceptions import InvalidQuizPayloadError, KidQuizException
from kidquiz.shared.logging import setup_logging

app = typer.Typer(
    name="kidquiz",
    help="kidquiz - Adaptive quiz recommendations for young learners",
    no_args_is_help=True,
)
console = Console()


def run_async(coro):
    """Helper to run async functions in sync context."""
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


def load_history(path: Path) -> list[QuizRecord]:
    """Read a JSON array of quiz payloads from disk."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidQuizPayloadError(f"cannot read {path}: {e}") from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidQuizPayloadError(f"{path} is not valid JSON: {e.msg}") from e
    return parse_history(data)


def build_analyzer(seed: Optional[int]) -> PerformanceAnalyzer:
    settings = get_settings()
    rng = random.Random(seed) if seed is not None else None
    return PerformanceAnalyzer(strategy=RecommendationStrategy.from_settings(settings, rng=rng))


HistoryArgument = typer.Argument(
    ...,
    exists=True,
    dir_okay=False,
    readable=True,
    help="JSON file with the child's quizzes, oldest first",
)
SeedOption = typer.Option(None, "--seed", help="Seed for the recommendation strategy")
JsonOption = typer.Option(False, "--json", help="Print machine-readable JSON")


@app.command("analyze")
def analyze(
    history: Path = HistoryArgument,
    child_id: str = typer.Option("", "--child-id", help="Child the history belongs to"),
    seed: Optional[int] = SeedOption,
    as_json: bool = JsonOption,
) -> None:
    """Show performance analytics for a quiz history."""
    try:
        records = load_history(history)
        analytics = build_analyzer(seed).analyze(records)
    except KidQuizException as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1)

    analytics = replace(analytics, child_id=child_id)
    if as_json:
        typer.echo(json.dumps(analytics.to_dict(), indent=2))
        return
    display_analytics(analytics)


@app.command("recommend")
def recommend(
    history: Path = HistoryArgument,
    age: int = typer.Option(..., "--age", "-a", min=1, help="Child's age in years"),
    seed: Optional[int] = SeedOption,
    as_json: bool = JsonOption,
) -> None:
    """Recommend the next quiz without generating it."""
    try:
        records = load_history(history)
        orchestrator = AdaptiveQuizOrchestrator(
            provider=HttpQuizContentProvider.from_settings(get_settings()),
            analyzer=build_analyzer(seed),
        )
        request = orchestrator.build_request(age, records)
    except KidQuizException as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(request.to_dict(), indent=2))
        return
    display_request(request)


@app.command("generate")
def generate(
    child_id: str = typer.Option(..., "--child-id", help="Child to generate the quiz for"),
    age: int = typer.Option(..., "--age", "-a", min=1, help="Child's age in years"),
    history: Optional[Path] = typer.Option(
        None,
        "--history",
        exists=True,
        dir_okay=False,
        help="Use this JSON history instead of fetching it from the quiz service",
    ),
    seed: Optional[int] = SeedOption,
) -> None:
    """Generate the next adaptive quiz through the quiz service."""
    provider = HttpQuizContentProvider.from_settings(get_settings())
    orchestrator = AdaptiveQuizOrchestrator(provider=provider, analyzer=build_analyzer(seed))

    try:
        if history is not None:
            records = load_history(history)
        else:
            records = run_async(provider.list_quizzes(child_id))
        quiz = run_async(orchestrator.orchestrate(age, records, child_id=child_id))
    except KidQuizException as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1)

    display_generated_quiz(quiz)


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
) -> None:
    """kidquiz - Adaptive quiz recommendations for young learners.

    Quick start:
      kidquiz analyze history.json            - Show performance analytics
      kidquiz recommend history.json --age 7  - Recommend the next quiz
    """
    if verbose:
        setup_logging(verbose=True)


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
