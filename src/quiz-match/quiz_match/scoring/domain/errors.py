"""Error types raised while comparing two subjects' answers."""

from quiz_match.core.errors import QuizMatchError


class MismatchedAnswerCountError(QuizMatchError):
    """Raised when the two answer collections differ in length.

    Signals a caller bug, such as comparing a complete set against a partial
    one. Never retriable.
    """

    def __init__(self, count_a: int, count_b: int) -> None:
        self.count_a = count_a
        self.count_b = count_b
        super().__init__(
            f"Failed to compare answers: answer counts differ ({count_a} vs {count_b})"
        )


class NoComparableAnswersError(QuizMatchError):
    """Raised when no question was answered by both subjects."""

    def __init__(self) -> None:
        super().__init__(
            "Failed to compare answers: no question was answered by both subjects"
        )


class UnknownQuestionError(QuizMatchError):
    """Raised when answers reference question ids missing from the catalog."""

    def __init__(self, subject_id: str, question_ids: list[int]) -> None:
        self.subject_id = subject_id
        self.question_ids = question_ids
        listed = ", ".join(str(qid) for qid in question_ids)
        super().__init__(
            f"Failed to reconcile answers for '{subject_id}':"
            f" unknown question id(s) {listed}"
        )


class ForeignAnswerError(QuizMatchError):
    """Raised when an answer set contains answers recorded by another subject."""

    def __init__(self, subject_id: str, foreign_subject_ids: list[str]) -> None:
        self.subject_id = subject_id
        self.foreign_subject_ids = foreign_subject_ids
        listed = ", ".join(f"'{s}'" for s in foreign_subject_ids)
        super().__init__(
            f"Failed to reconcile answers for '{subject_id}':"
            f" answers belong to {listed}"
        )


class IncompleteAnswersError(QuizMatchError):
    """Raised when an operation needs a subject's full answer set and it is partial."""

    def __init__(self, subject_id: str, answered: int, total: int) -> None:
        self.subject_id = subject_id
        self.answered = answered
        self.total = total
        super().__init__(
            f"Failed to rank partners for '{subject_id}':"
            f" only {answered} of {total} questions answered"
        )
