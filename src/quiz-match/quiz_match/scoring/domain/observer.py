"""ScoringObserver port — domain events emitted while comparing subjects."""

from typing import Protocol


class ScoringObserver(Protocol):
    """Observer port for scoring domain events.

    Implementations may log to structlog or record for tests.
    """

    def scoring_incomplete_answers(
        self, subject_id: str, answered: int, total: int
    ) -> None: ...

    def scoring_comparison_completed(
        self, subject_a: str, subject_b: str, score: int, compared_questions: int
    ) -> None: ...

    def scoring_comparison_failed(
        self, subject_a: str, subject_b: str, reason: str
    ) -> None: ...

    def scoring_partner_skipped(
        self, subject_id: str, partner_id: str, reason: str
    ) -> None: ...
