"""Compatibility scoring — pure functions comparing two subjects' Likert answers.

Each question both subjects answered scores ``4 - abs(a - b)`` points out of
a possible 4; identical answers score 4 and opposite ends of the scale score
0. The percentage is the points earned over the points possible, rounded
half up to an integer.
"""

from collections.abc import Iterable, Sequence

from quiz_match.answers.domain.answer import Answer
from quiz_match.answers.domain.likert import MAX_DIFFERENCE
from quiz_match.catalog.domain.catalog import QuestionCatalog
from quiz_match.scoring.domain.errors import (
    MismatchedAnswerCountError,
    NoComparableAnswersError,
)


def score(
    answers_a: Sequence[Answer],
    answers_b: Sequence[Answer],
    catalog: QuestionCatalog | None = None,
) -> int:
    """Return the overall compatibility percentage (0-100) of two answer sets.

    Questions considered are the catalog's ids, or ids ``1..len(answers_a)``
    when no catalog is given. A question missing from either side is skipped.

    Raises:
        MismatchedAnswerCountError: if the collections differ in length.
        NoComparableAnswersError: if no considered question was answered by both.
    """
    _check_counts(answers_a=answers_a, answers_b=answers_b)
    question_ids = (
        catalog.question_ids
        if catalog is not None
        else range(1, len(answers_a) + 1)
    )

    total = 0
    max_possible = 0
    for points in _question_points(answers_a, answers_b, question_ids).values():
        total += points
        max_possible += MAX_DIFFERENCE

    if max_possible == 0:
        raise NoComparableAnswersError()
    return to_percentage(total=total, max_possible=max_possible)


def score_by_category(
    answers_a: Sequence[Answer],
    answers_b: Sequence[Answer],
    catalog: QuestionCatalog,
) -> dict[str, int]:
    """Return a compatibility percentage per catalog category.

    Categories in which no question was answered by both subjects are left
    out. Keys follow the catalog's first-seen category order.

    Raises:
        MismatchedAnswerCountError: if the collections differ in length.
    """
    _check_counts(answers_a=answers_a, answers_b=answers_b)

    totals: dict[str, list[int]] = {}
    points_by_question = _question_points(answers_a, answers_b, catalog.question_ids)
    for question_id, points in points_by_question.items():
        category = catalog.category_of(question_id)
        if category is None:
            continue
        accumulator = totals.setdefault(category, [0, 0])
        accumulator[0] += points
        accumulator[1] += MAX_DIFFERENCE

    return {
        category: to_percentage(total=total, max_possible=max_possible)
        for category, (total, max_possible) in totals.items()
    }


def to_percentage(total: int, max_possible: int) -> int:
    """Return ``round(total / max_possible * 100)`` with halves rounded up.

    Integer arithmetic keeps results exact, e.g. 1/8 gives 13, not 12.
    """
    return (200 * total + max_possible) // (2 * max_possible)


def question_points(value_a: int, value_b: int) -> int:
    """Points earned on one question: 4 for identical answers down to 0 for opposites."""
    return MAX_DIFFERENCE - abs(value_a - value_b)


def _check_counts(answers_a: Sequence[Answer], answers_b: Sequence[Answer]) -> None:
    if len(answers_a) != len(answers_b):
        raise MismatchedAnswerCountError(count_a=len(answers_a), count_b=len(answers_b))


def _question_points(
    answers_a: Sequence[Answer],
    answers_b: Sequence[Answer],
    question_ids: Iterable[int],
) -> dict[int, int]:
    """Map every question id answered on both sides to its points, in id order given."""
    values_a = _index(answers_a)
    values_b = _index(answers_b)
    return {
        qid: question_points(values_a[qid], values_b[qid])
        for qid in question_ids
        if qid in values_a and qid in values_b
    }


def _index(answers: Sequence[Answer]) -> dict[int, int]:
    # Later entries for the same question overwrite earlier ones.
    return {answer.question_id: answer.value for answer in answers}
