"""Answer domain value object — one subject's response to one question."""

from pydantic import BaseModel, Field

from quiz_match.answers.domain.likert import LIKERT_MAX, LIKERT_MIN

type SubjectId = str


class Answer(BaseModel, frozen=True):
    """Immutable value object representing a single Likert answer.

    One answer exists per (subject, question) pair; a later answer for the
    same pair replaces an earlier one.
    """

    question_id: int = Field(ge=1)
    subject_id: SubjectId = Field(min_length=1)
    # Strict: booleans, numeric strings and floats are rejected.
    value: int = Field(strict=True, ge=LIKERT_MIN, le=LIKERT_MAX)


def latest_answers(answers: list[Answer]) -> list[Answer]:
    """Collapse repeated (subject, question) answers, last write wins.

    Each surviving answer keeps the position where its pair first appeared.
    """
    latest: dict[tuple[SubjectId, int], Answer] = {}
    for answer in answers:
        latest[(answer.subject_id, answer.question_id)] = answer
    return list(latest.values())
