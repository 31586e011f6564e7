"""Observer port for the answers domain — defines events in domain language."""

from typing import Protocol


class AnswerObserver(Protocol):
    def answers_loading_started(self, path: str) -> None: ...

    def answers_answer_overwritten(self, subject_id: str, question_id: int) -> None: ...

    def answers_loading_completed(
        self, path: str, total_answers: int, total_subjects: int
    ) -> None: ...

    def answers_loading_failed(self, path: str, reason: str) -> None: ...
