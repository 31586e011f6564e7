"""AnswerSheet — a subject's in-progress answers while taking the quiz."""

from pydantic import BaseModel, Field

from quiz_match.answers.domain.answer import Answer, SubjectId
from quiz_match.catalog.domain.catalog import QuestionCatalog


class AnswerSheet(BaseModel, frozen=True):
    """Immutable accumulation of one subject's answers.

    Every mutation returns a new sheet. Answers are kept in the order they
    were last recorded, so ``undo`` always removes the most recent one.
    """

    subject_id: SubjectId = Field(min_length=1)
    answers: tuple[Answer, ...] = ()

    def record(self, question_id: int, value: int) -> "AnswerSheet":
        """Return a new sheet with ``value`` recorded for ``question_id``.

        Re-answering a question replaces the earlier answer.
        """
        answer = Answer(question_id=question_id, subject_id=self.subject_id, value=value)
        kept = tuple(a for a in self.answers if a.question_id != question_id)
        return self.model_copy(update={"answers": (*kept, answer)})

    def undo(self) -> "AnswerSheet":
        """Return a new sheet without the most recently recorded answer."""
        return self.model_copy(update={"answers": self.answers[:-1]})

    def value_for(self, question_id: int) -> int | None:
        for answer in self.answers:
            if answer.question_id == question_id:
                return answer.value
        return None

    def next_question_id(self, catalog: QuestionCatalog) -> int | None:
        """Return the first catalog question not yet answered, or None when done."""
        answered = {a.question_id for a in self.answers}
        for question_id in catalog.question_ids:
            if question_id not in answered:
                return question_id
        return None

    def to_answers(self) -> list[Answer]:
        return list(self.answers)
