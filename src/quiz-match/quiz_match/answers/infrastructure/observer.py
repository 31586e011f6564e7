"""Structlog implementation of the AnswerObserver port."""

import structlog


class StructlogAnswerObserver:
    """Delegates answers domain events to structlog.

    Satisfies the AnswerObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def answers_loading_started(self, path: str) -> None:
        self._log.info("answers.loading_started", path=path)

    def answers_answer_overwritten(self, subject_id: str, question_id: int) -> None:
        self._log.debug(
            "answers.answer_overwritten",
            subject_id=subject_id,
            question_id=question_id,
        )

    def answers_loading_completed(
        self, path: str, total_answers: int, total_subjects: int
    ) -> None:
        self._log.info(
            "answers.loading_completed",
            path=path,
            total_answers=total_answers,
            total_subjects=total_subjects,
        )

    def answers_loading_failed(self, path: str, reason: str) -> None:
        self._log.error("answers.loading_failed", path=path, reason=reason)
