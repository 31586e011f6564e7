"""Completeness — how far a subject's answer set covers the catalog."""

from pydantic import BaseModel, Field

from quiz_match.answers.domain.answer import Answer
from quiz_match.catalog.domain.catalog import QuestionCatalog


class Completeness(BaseModel, frozen=True):
    """Immutable report of an answer set measured against a catalog."""

    answered: int = Field(ge=0)
    total: int = Field(ge=1)
    missing_question_ids: list[int]
    unknown_question_ids: list[int]

    @property
    def is_complete(self) -> bool:
        """True when there is exactly one answer per catalog question and nothing else."""
        return not self.missing_question_ids and not self.unknown_question_ids


def assess_completeness(
    answers: list[Answer], catalog: QuestionCatalog
) -> Completeness:
    """Measure ``answers`` against ``catalog``.

    Repeated answers to the same question count once. Answers to question
    ids outside the catalog are reported separately and do not count.
    """
    answered_ids = {a.question_id for a in answers}
    known = [qid for qid in catalog.question_ids if qid in answered_ids]
    return Completeness(
        answered=len(known),
        total=len(catalog),
        missing_question_ids=[
            qid for qid in catalog.question_ids if qid not in answered_ids
        ],
        unknown_question_ids=sorted(qid for qid in answered_ids if qid not in catalog),
    )
