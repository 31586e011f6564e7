"""QuestionCatalog aggregate — the fixed, ordered list of questions every comparison uses."""

from pydantic import BaseModel, Field, model_validator

from quiz_match.catalog.domain.question import Question

type QuestionId = int
type Category = str


class QuestionCatalog(BaseModel, frozen=True):
    """Immutable, ordered catalog of questions.

    Ids are unique and numbered contiguously from 1 in list order, so the
    position of a question in the catalog and its id always agree.
    """

    questions: tuple[Question, ...] = Field(min_length=1)

    @model_validator(mode="after")
    def _check_contiguous_ids(self) -> "QuestionCatalog":
        ids = [q.id for q in self.questions]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"duplicate question ids: {duplicates}")
        expected = list(range(1, len(ids) + 1))
        if ids != expected:
            raise ValueError(
                f"question ids must run contiguously from 1 to {len(ids)} in order,"
                f" got {ids}"
            )
        return self

    def __len__(self) -> int:
        return len(self.questions)

    def __contains__(self, question_id: object) -> bool:
        return (
            isinstance(question_id, int)
            and not isinstance(question_id, bool)
            and 1 <= question_id <= len(self.questions)
        )

    @property
    def question_ids(self) -> list[QuestionId]:
        return [q.id for q in self.questions]

    @property
    def categories(self) -> list[Category]:
        """Distinct categories in order of first appearance."""
        return list(dict.fromkeys(q.category for q in self.questions))

    def get(self, question_id: QuestionId) -> Question | None:
        if question_id not in self:
            return None
        return self.questions[question_id - 1]

    def category_of(self, question_id: QuestionId) -> Category | None:
        question = self.get(question_id)
        return question.category if question is not None else None
