"""CLI entrypoint for quiz-match — typer app with `score`, `rank` and `status` commands."""

import sys
from pathlib import Path

import structlog
import typer
from rich.console import Console

from quiz_match.answers.domain.answer import Answer, SubjectId
from quiz_match.answers.domain.completeness import assess_completeness
from quiz_match.answers.domain.loader import AnswerLoader
from quiz_match.answers.infrastructure.errors import SubjectNotFoundError
from quiz_match.answers.infrastructure.jsonl_loader import JsonlAnswerLoader
from quiz_match.answers.infrastructure.observer import StructlogAnswerObserver
from quiz_match.catalog.domain.catalog import QuestionCatalog
from quiz_match.catalog.infrastructure.factory import create_catalog_loader
from quiz_match.catalog.infrastructure.observer import StructlogCatalogObserver
from quiz_match.cli.output.report import build_report, write_report
from quiz_match.cli.output.tables import category_table, ranking_table, status_table
from quiz_match.config.infrastructure.observer import StructlogConfigObserver
from quiz_match.config.infrastructure.yaml_loader import YamlConfigLoader
from quiz_match.core.errors import QuizMatchError
from quiz_match.scoring.application.service import CompatibilityService
from quiz_match.scoring.infrastructure.observer import StructlogScoringObserver

app = typer.Typer(add_completion=False, no_args_is_help=True)

_LOG_FORMAT_OPTION = typer.Option(
    "console",
    "--log-format",
    help="Log format: 'console' or 'json'",
)


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format. Logs go to stderr."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _load_session(
    config_path: Path,
) -> tuple[QuestionCatalog, dict[SubjectId, list[Answer]]]:
    """Load config, catalog and answers for one CLI invocation."""
    config = YamlConfigLoader(observer=StructlogConfigObserver()).load(path=config_path)
    catalog = create_catalog_loader(
        config=config.catalog, observer=StructlogCatalogObserver()
    ).load()
    answer_loader: AnswerLoader = JsonlAnswerLoader(observer=StructlogAnswerObserver())
    return catalog, answer_loader.load(config=config.answers)


def _answers_for(
    answers_by_subject: dict[SubjectId, list[Answer]], subject_id: SubjectId
) -> list[Answer]:
    if subject_id not in answers_by_subject:
        raise SubjectNotFoundError(subject_id=subject_id)
    return answers_by_subject[subject_id]


@app.command()
def score(
    config_path: Path = typer.Argument(..., help="Path to quiz config YAML"),
    subject_a: str = typer.Argument(..., help="First subject id"),
    subject_b: str = typer.Argument(..., help="Second subject id"),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write a JSON report to this path"
    ),
    log_format: str = _LOG_FORMAT_OPTION,
) -> None:
    """Score the compatibility of two subjects."""
    _configure_structlog(log_format=log_format)
    console = Console()
    try:
        catalog, answers_by_subject = _load_session(config_path=config_path)
        service = CompatibilityService(
            catalog=catalog, observer=StructlogScoringObserver()
        )
        result = service.compare(
            subject_a=subject_a,
            answers_a=_answers_for(answers_by_subject, subject_a),
            subject_b=subject_b,
            answers_b=_answers_for(answers_by_subject, subject_b),
        )
    except QuizMatchError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    tier = result.tier
    console.print(f"[bold]{result.subject_a} × {result.subject_b}[/bold]")
    console.print(f"Compatibility: [bold]{result.score}%[/bold]")
    console.print(f"{tier.headline} {tier.message}")
    console.print(category_table(result=result))

    if output is not None:
        write_report(path=output, report=build_report(result=result, catalog=catalog))
        console.print(f"Report written to {output}")


@app.command()
def rank(
    config_path: Path = typer.Argument(..., help="Path to quiz config YAML"),
    subject: str = typer.Argument(..., help="Subject to find matches for"),
    top: int | None = typer.Option(
        None, "--top", "-n", min=1, help="Show only the best N matches"
    ),
    log_format: str = _LOG_FORMAT_OPTION,
) -> None:
    """Rank every subject with a complete answer set against SUBJECT."""
    _configure_structlog(log_format=log_format)
    console = Console()
    try:
        catalog, answers_by_subject = _load_session(config_path=config_path)
        _answers_for(answers_by_subject, subject)
        service = CompatibilityService(
            catalog=catalog, observer=StructlogScoringObserver()
        )
        results = service.rank(subject_id=subject, answers_by_subject=answers_by_subject)
    except QuizMatchError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    if top is not None:
        results = results[:top]
    if not results:
        console.print(f"No partners with complete answers for {subject}.")
        return
    console.print(ranking_table(subject_id=subject, results=results))


@app.command()
def status(
    config_path: Path = typer.Argument(..., help="Path to quiz config YAML"),
    log_format: str = _LOG_FORMAT_OPTION,
) -> None:
    """Show how much of the catalog each subject has answered."""
    _configure_structlog(log_format=log_format)
    try:
        catalog, answers_by_subject = _load_session(config_path=config_path)
    except QuizMatchError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    completeness = {
        subject_id: assess_completeness(answers, catalog)
        for subject_id, answers in answers_by_subject.items()
    }
    Console().print(status_table(completeness_by_subject=completeness))


if __name__ == "__main__":
    app()
