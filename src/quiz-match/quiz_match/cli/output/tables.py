"""Rich table renderers for CLI output."""

from rich.table import Table

from quiz_match.answers.domain.completeness import Completeness
from quiz_match.scoring.domain.result import CompatibilityResult


def _score_style(score: int) -> str:
    if score >= 80:
        return "green"
    if score >= 60:
        return "yellow"
    return "red"


def _bar(score: int, width: int = 10) -> str:
    filled = round(score * width / 100)
    return "█" * filled + "░" * (width - filled)


def category_table(result: CompatibilityResult) -> Table:
    table = Table(title="By category")
    table.add_column("Category")
    table.add_column("Score", justify="right")
    table.add_column("")
    for category, category_score in result.categories.items():
        style = _score_style(score=category_score)
        table.add_row(
            category,
            f"[{style}]{category_score}%[/{style}]",
            f"[{style}]{_bar(score=category_score)}[/{style}]",
        )
    return table


def ranking_table(subject_id: str, results: list[CompatibilityResult]) -> Table:
    table = Table(title=f"Best matches for {subject_id}")
    table.add_column("#", justify="right")
    table.add_column("Partner")
    table.add_column("Score", justify="right")
    table.add_column("Tier")
    for position, result in enumerate(results, start=1):
        style = _score_style(score=result.score)
        table.add_row(
            str(position),
            result.partner_of(subject_id),
            f"[{style}]{result.score}%[/{style}]",
            result.tier.headline,
        )
    return table


def status_table(completeness_by_subject: dict[str, Completeness]) -> Table:
    table = Table(title="Answer status")
    table.add_column("Subject")
    table.add_column("Answered", justify="right")
    table.add_column("Status")
    table.add_column("Missing questions")
    for subject_id, completeness in completeness_by_subject.items():
        status = (
            "[green]complete[/green]"
            if completeness.is_complete
            else "[yellow]incomplete[/yellow]"
        )
        table.add_row(
            subject_id,
            f"{completeness.answered}/{completeness.total}",
            status,
            ", ".join(str(qid) for qid in completeness.missing_question_ids) or "-",
        )
    return table
