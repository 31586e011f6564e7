"""CompatibilityService — reconciles answer sets against the catalog, then scores them."""

from quiz_match.answers.domain.answer import Answer, SubjectId, latest_answers
from quiz_match.answers.domain.completeness import assess_completeness
from quiz_match.catalog.domain.catalog import QuestionCatalog
from quiz_match.core.errors import QuizMatchError
from quiz_match.scoring.domain.errors import (
    ForeignAnswerError,
    IncompleteAnswersError,
    UnknownQuestionError,
)
from quiz_match.scoring.domain.observer import ScoringObserver
from quiz_match.scoring.domain.result import CompatibilityResult
from quiz_match.scoring.domain.scorer import score, score_by_category


class CompatibilityService:
    """Compares subjects against one fixed catalog and reports results.

    The scoring itself is delegated to the pure functions in
    ``quiz_match.scoring.domain.scorer``; this service owns reconciliation
    and observer events.
    """

    def __init__(self, catalog: QuestionCatalog, observer: ScoringObserver) -> None:
        self._catalog = catalog
        self._observer = observer

    def reconcile(self, subject_id: SubjectId, answers: list[Answer]) -> list[Answer]:
        """Return subject_id's latest answers, checked against the catalog.

        Raises:
            ForeignAnswerError: if any answer was recorded by a different subject.
            UnknownQuestionError: if any answer references a question outside the catalog.
        """
        foreign = sorted({a.subject_id for a in answers if a.subject_id != subject_id})
        if foreign:
            raise ForeignAnswerError(subject_id=subject_id, foreign_subject_ids=foreign)

        latest = latest_answers(answers)
        completeness = assess_completeness(latest, self._catalog)
        if completeness.unknown_question_ids:
            raise UnknownQuestionError(
                subject_id=subject_id, question_ids=completeness.unknown_question_ids
            )
        if not completeness.is_complete:
            self._observer.scoring_incomplete_answers(
                subject_id=subject_id,
                answered=completeness.answered,
                total=completeness.total,
            )
        return latest

    def compare(
        self,
        subject_a: SubjectId,
        answers_a: list[Answer],
        subject_b: SubjectId,
        answers_b: list[Answer],
    ) -> CompatibilityResult:
        """Reconcile both answer sets and return their CompatibilityResult.

        Raises:
            ForeignAnswerError, UnknownQuestionError: from reconciliation.
            MismatchedAnswerCountError: if the reconciled sets differ in length.
            NoComparableAnswersError: if no question was answered by both.
        """
        try:
            reconciled_a = self.reconcile(subject_id=subject_a, answers=answers_a)
            reconciled_b = self.reconcile(subject_id=subject_b, answers=answers_b)
            overall = score(reconciled_a, reconciled_b, self._catalog)
            categories = score_by_category(reconciled_a, reconciled_b, self._catalog)
        except QuizMatchError as exc:
            self._observer.scoring_comparison_failed(
                subject_a=subject_a, subject_b=subject_b, reason=str(exc)
            )
            raise

        answered_b = {a.question_id for a in reconciled_b}
        self._observer.scoring_comparison_completed(
            subject_a=subject_a,
            subject_b=subject_b,
            score=overall,
            compared_questions=sum(
                1 for a in reconciled_a if a.question_id in answered_b
            ),
        )
        return CompatibilityResult(
            subject_a=subject_a,
            subject_b=subject_b,
            score=overall,
            categories=categories,
        )

    def rank(
        self,
        subject_id: SubjectId,
        answers_by_subject: dict[SubjectId, list[Answer]],
    ) -> list[CompatibilityResult]:
        """Compare subject_id with every other subject holding a complete answer set.

        Partners with incomplete answers are skipped. Results are ordered best
        score first, ties broken by partner id.

        Raises:
            KeyError: if subject_id has no answers in answers_by_subject.
            ForeignAnswerError, UnknownQuestionError: if any answer set fails
                reconciliation, the subject's own or a partner's.
            IncompleteAnswersError: if subject_id has not answered the full catalog.
        """
        own_answers = self.reconcile(
            subject_id=subject_id, answers=answers_by_subject[subject_id]
        )
        own = assess_completeness(own_answers, self._catalog)
        if not own.is_complete:
            raise IncompleteAnswersError(
                subject_id=subject_id, answered=own.answered, total=own.total
            )

        results: list[CompatibilityResult] = []
        for partner_id, partner_answers in answers_by_subject.items():
            if partner_id == subject_id:
                continue
            partner_answers = self.reconcile(
                subject_id=partner_id, answers=partner_answers
            )
            completeness = assess_completeness(partner_answers, self._catalog)
            if not completeness.is_complete:
                self._observer.scoring_partner_skipped(
                    subject_id=subject_id,
                    partner_id=partner_id,
                    reason=(
                        f"incomplete answers ({completeness.answered}"
                        f"/{completeness.total})"
                    ),
                )
                continue
            results.append(
                self.compare(
                    subject_a=subject_id,
                    answers_a=own_answers,
                    subject_b=partner_id,
                    answers_b=partner_answers,
                )
            )
        return sorted(results, key=lambda r: (-r.score, r.subject_b))
