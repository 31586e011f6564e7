"""File catalog loader — reads questions from a YAML or JSON document."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from quiz_match.catalog.domain.catalog import QuestionCatalog
from quiz_match.catalog.domain.observer import CatalogObserver
from quiz_match.catalog.domain.question import Question
from quiz_match.catalog.infrastructure.errors import CatalogLoadError


class FileCatalogLoader:
    """Loads a QuestionCatalog from a YAML (or JSON) file.

    The document is either a bare list of question mappings or a mapping with
    a ``questions`` key holding that list. Each question mapping carries
    ``id``, ``prompt`` and ``category``.
    """

    def __init__(self, path: Path, observer: CatalogObserver) -> None:
        self._path = path
        self._observer = observer

    def load(self) -> QuestionCatalog:
        """
        Load, validate, and return the catalog.

        Collects ALL per-question errors before raising a single CatalogLoadError.

        Raises:
            CatalogLoadError: if the file is missing, unparseable, any question
                is invalid, or the ids are not unique and contiguous from 1.
        """
        source = str(self._path)
        self._observer.catalog_loading_started(source=source)

        try:
            catalog = self._load_catalog()
        except CatalogLoadError as exc:
            self._observer.catalog_loading_failed(source=source, reason=str(exc))
            raise

        self._observer.catalog_loaded(
            source=source,
            total_questions=len(catalog),
            categories=catalog.categories,
        )
        return catalog

    def _load_catalog(self) -> QuestionCatalog:
        raw = self._read(path=self._path)
        entries = _question_entries(raw=raw)
        questions, errors = _parse_questions(entries=entries)
        if errors:
            raise CatalogLoadError(reason="; ".join(errors))
        try:
            return QuestionCatalog(questions=tuple(questions))
        except ValidationError as exc:
            raise CatalogLoadError(reason=_first_error(exc)) from exc

    def _read(self, path: Path) -> Any:
        try:
            with path.open("r", encoding="utf-8") as fh:
                return yaml.safe_load(fh)
        except FileNotFoundError as exc:
            raise CatalogLoadError(reason=f"file not found: {path}") from exc
        except OSError as exc:
            raise CatalogLoadError(reason=f"cannot read {path}: {exc.strerror}") from exc
        except UnicodeDecodeError as exc:
            raise CatalogLoadError(reason=f"{path} is not valid UTF-8") from exc
        except yaml.YAMLError as exc:
            raise CatalogLoadError(reason=f"invalid document: {exc}") from exc


def _question_entries(raw: Any) -> list[Any]:
    if isinstance(raw, dict):
        raw = raw.get("questions")
    if not isinstance(raw, list):
        raise CatalogLoadError(reason="expected a list of questions")
    return raw


def _parse_questions(entries: list[Any]) -> tuple[list[Question], list[str]]:
    """Parse each entry into a Question, collecting errors without aborting early."""
    questions: list[Question] = []
    errors: list[str] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            errors.append(f"entry {index}: expected a mapping")
            continue
        try:
            questions.append(Question.model_validate(entry))
        except ValidationError as exc:
            errors.append(f"entry {index}: {_first_error(exc)}")
    return questions, errors


def _first_error(exc: ValidationError) -> str:
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error["loc"])
    return f"{location}: {error['msg']}" if location else error["msg"]
