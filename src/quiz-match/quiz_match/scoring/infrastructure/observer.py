"""Structlog implementation of the ScoringObserver port."""

import structlog


class StructlogScoringObserver:
    """Logs scoring domain events to structlog.

    Does NOT inherit from ScoringObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def scoring_incomplete_answers(
        self, subject_id: str, answered: int, total: int
    ) -> None:
        self._log.warning(
            "scoring.incomplete_answers",
            subject_id=subject_id,
            answered=answered,
            total=total,
        )

    def scoring_comparison_completed(
        self, subject_a: str, subject_b: str, score: int, compared_questions: int
    ) -> None:
        self._log.info(
            "scoring.comparison_completed",
            subject_a=subject_a,
            subject_b=subject_b,
            score=score,
            compared_questions=compared_questions,
        )

    def scoring_comparison_failed(
        self, subject_a: str, subject_b: str, reason: str
    ) -> None:
        self._log.error(
            "scoring.comparison_failed",
            subject_a=subject_a,
            subject_b=subject_b,
            reason=reason,
        )

    def scoring_partner_skipped(
        self, subject_id: str, partner_id: str, reason: str
    ) -> None:
        self._log.debug(
            "scoring.partner_skipped",
            subject_id=subject_id,
            partner_id=partner_id,
            reason=reason,
        )
