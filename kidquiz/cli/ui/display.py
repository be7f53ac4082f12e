"""Display Utilities - Rich output formatting."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from kidquiz.modules.analytics.interface import ChildPerformanceAnalytics, SubjectPerformance
from kidquiz.modules.quiz.interface import GeneratedQuiz, RecommendedQuizRequest

console = Console()

TREND_LABELS = {
    "improving": "[green]improving[/green]",
    "stable": "[cyan]stable[/cyan]",
    "declining": "[red]declining[/red]",
    "insufficient_data": "[dim]not enough data[/dim]",
}


def _score_color(score: float) -> str:
    return "green" if score >= 80 else "yellow" if score >= 60 else "red"


def _subject_table(title: str, subjects: list[SubjectPerformance]) -> Table:
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Subject", min_width=10)
    table.add_column("Average", justify="right")
    table.add_column("Quizzes", justify="right")
    table.add_column("Last", justify="right")
    table.add_column("Weakest topic", min_width=15)

    for subject in subjects:
        color = _score_color(subject.average_score)
        weakest = subject.topics[0].topic if subject.topics else "-"
        table.add_row(
            subject.subject,
            f"[{color}]{subject.average_score:.1f}%[/{color}]",
            str(subject.quizzes_taken),
            f"{subject.last_score}%" if subject.last_score is not None else "-",
            weakest,
        )
    return table


def display_analytics(analytics: ChildPerformanceAnalytics) -> None:
    """Display performance analytics."""
    color = _score_color(analytics.average_score)
    console.print(Panel.fit(
        f"[bold cyan]Performance Analytics[/bold cyan]\n"
        f"Average: [{color}]{analytics.average_score:.1f}%[/{color}] | "
        f"Quizzes: {analytics.total_quizzes_taken} | "
        f"Trend: {TREND_LABELS.get(analytics.performance_trend.value, analytics.performance_trend.value)}",
        border_style="cyan",
    ))

    if analytics.strong_subjects:
        console.print(_subject_table("Strongest subjects", analytics.strong_subjects))
    if analytics.weak_subjects:
        console.print(_subject_table("Weakest subjects", analytics.weak_subjects))

    if analytics.recent_improvement:
        console.print("[green]Improved on the latest quiz![/green]")

    console.print(
        f"\n[bold]Next:[/bold] {analytics.recommended_subject} - "
        f"{analytics.recommended_topic} ({analytics.recommended_difficulty})"
    )


def display_request(request: RecommendedQuizRequest) -> None:
    """Display the recommended quiz request."""
    table = Table(show_header=False, box=None)
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("Subject", request.subject)
    table.add_row("Topic", request.topic)
    table.add_row("Difficulty", request.difficulty)
    table.add_row("Questions", str(request.question_count))

    console.print(Panel.fit("[bold green]Recommended Quiz[/bold green]", border_style="green"))
    console.print(table)


def display_generated_quiz(quiz: GeneratedQuiz) -> None:
    """Display a generated quiz and its questions."""
    record = quiz.record
    console.print(Panel.fit(
        f"[bold green]{record.title or 'Quiz'}[/bold green]\n"
        f"{record.subject} - {record.topic} ({record.difficulty})",
        border_style="green",
    ))

    for index, question in enumerate(quiz.questions, start=1):
        console.print(f"\n[bold]{index}. {question.question_text}[/bold]")
        for option_index, option in enumerate(question.options):
            console.print(f"   {chr(ord('A') + option_index)}) {option}")
