"""JSONL answer loader — reads recorded answers and groups them by subject."""

import json
from pathlib import Path

from pydantic import ValidationError

from quiz_match.answers.domain.answer import Answer, SubjectId
from quiz_match.answers.domain.observer import AnswerObserver
from quiz_match.answers.infrastructure.errors import AnswerLoadError
from quiz_match.config.domain.answers import AnswersConfig


class JsonlAnswerLoader:
    """Loads a JSONL answer file and returns each subject's latest answers.

    Lines are applied in file order with upsert semantics on
    (subject, question): a later line for the same pair overwrites the
    earlier one.
    """

    def __init__(self, observer: AnswerObserver) -> None:
        self._observer = observer

    def load(self, config: AnswersConfig) -> dict[SubjectId, list[Answer]]:
        """
        Load all answers from the JSONL file described by config.

        Collects ALL per-line errors before raising a single AnswerLoadError.

        Raises:
            AnswerLoadError: if the file cannot be read, any line is invalid JSON,
                misses a configured key, or carries an invalid value.
        """
        path_str = str(config.path)
        self._observer.answers_loading_started(path=path_str)

        try:
            lines = self._read_lines(path=config.path)
        except FileNotFoundError as exc:
            reason = f"file not found: {path_str}"
            self._observer.answers_loading_failed(path=path_str, reason=reason)
            raise AnswerLoadError(reason=reason) from exc
        except OSError as exc:
            reason = f"cannot read {path_str}: {exc.strerror}"
            self._observer.answers_loading_failed(path=path_str, reason=reason)
            raise AnswerLoadError(reason=reason) from exc
        except UnicodeDecodeError as exc:
            reason = f"{path_str} is not valid UTF-8"
            self._observer.answers_loading_failed(path=path_str, reason=reason)
            raise AnswerLoadError(reason=reason) from exc

        answers, errors = self._parse_lines(lines=lines, config=config)

        if errors:
            reason = "; ".join(errors)
            self._observer.answers_loading_failed(path=path_str, reason=reason)
            raise AnswerLoadError(reason=reason)

        grouped = self._group(answers=answers)
        self._observer.answers_loading_completed(
            path=path_str,
            total_answers=sum(len(group) for group in grouped.values()),
            total_subjects=len(grouped),
        )
        return grouped

    def _read_lines(self, path: Path) -> list[tuple[int, str]]:
        """Return (line_number, text) for every non-blank line, numbered from 1."""
        with open(path, encoding="utf-8") as fh:
            return [
                (number, line)
                for number, line in enumerate(fh, start=1)
                if line.strip()
            ]

    def _parse_lines(
        self, lines: list[tuple[int, str]], config: AnswersConfig
    ) -> tuple[list[Answer], list[str]]:
        answers: list[Answer] = []
        errors: list[str] = []
        for number, line in lines:
            result = self._parse_line(line=line, number=number, config=config)
            if isinstance(result, str):
                errors.append(result)
            else:
                answers.append(result)
        return answers, errors

    def _parse_line(self, line: str, number: int, config: AnswersConfig) -> Answer | str:
        """Return an Answer on success, or an error string describing the problem."""
        try:
            data = json.loads(line)
        except json.JSONDecodeError as exc:
            return f"line {number}: invalid JSON: {exc}"

        if not isinstance(data, dict):
            return f"line {number}: expected a JSON object"

        keys = (config.subject_key, config.question_key, config.value_key)
        missing = [key for key in keys if key not in data]
        if missing:
            listed = ", ".join(f"'{k}'" for k in missing)
            return f"line {number}: missing key(s) {listed}"

        try:
            return Answer(
                subject_id=data[config.subject_key],
                question_id=data[config.question_key],
                value=data[config.value_key],
            )
        except ValidationError as exc:
            fields = ", ".join(str(e["loc"][0]) for e in exc.errors())
            return f"line {number}: invalid {fields}"

    def _group(self, answers: list[Answer]) -> dict[SubjectId, list[Answer]]:
        by_pair: dict[tuple[SubjectId, int], Answer] = {}
        for answer in answers:
            key = (answer.subject_id, answer.question_id)
            if key in by_pair:
                self._observer.answers_answer_overwritten(
                    subject_id=answer.subject_id, question_id=answer.question_id
                )
            by_pair[key] = answer

        grouped: dict[SubjectId, list[Answer]] = {}
        for answer in by_pair.values():
            grouped.setdefault(answer.subject_id, []).append(answer)
        return grouped
