"""Tests for the overall compatibility score."""

import itertools

import pytest

from quiz_match.answers.domain.answer import Answer
from quiz_match.scoring.domain.errors import (
    MismatchedAnswerCountError,
    NoComparableAnswersError,
)
from quiz_match.scoring.domain.scorer import question_points, score, to_percentage
from tests.answers_factory import make_answers, make_catalog, uniform_answers


class TestScoreScenarios:
    """Concrete fifteen-question comparisons."""

    def test_identical_answers_score_100(self) -> None:
        a = uniform_answers("alice", value=3)
        b = uniform_answers("bob", value=3)

        assert score(a, b) == 100

    def test_two_points_apart_on_every_question_scores_50(self) -> None:
        a = uniform_answers("alice", value=3)
        b = uniform_answers("bob", value=5)

        assert score(a, b) == 50

    def test_opposite_ends_on_every_question_scores_0(self) -> None:
        a = uniform_answers("alice", value=1)
        b = uniform_answers("bob", value=5)

        assert score(a, b) == 0

    def test_opposite_ends_reversed_scores_0(self) -> None:
        a = uniform_answers("alice", value=5)
        b = uniform_answers("bob", value=1)

        assert score(a, b) == 0

    def test_mixed_answers(self) -> None:
        # points: 4 + 3 + 0 + 2 = 9 of 16 -> 56.25
        a = make_answers("alice", {1: 3, 2: 1, 3: 1, 4: 2})
        b = make_answers("bob", {1: 3, 2: 2, 3: 5, 4: 4})

        assert score(a, b) == 56


class TestScoreLookup:
    """Answers are matched by question id, not by position."""

    def test_differently_ordered_inputs_are_matched_by_question_id(self) -> None:
        a = make_answers("alice", {1: 1, 2: 5, 3: 3})
        b = make_answers("bob", {3: 3, 1: 1, 2: 5})

        assert score(a, b) == 100

    def test_question_missing_on_one_side_is_skipped(self) -> None:
        # Only questions 1 and 2 are shared: 4 + 0 = 4 of 8.
        a = make_answers("alice", {1: 2, 2: 1, 3: 5})
        b = make_answers("bob", {1: 2, 2: 5, 4: 5})

        assert score(a, b) == 50

    def test_skipped_questions_do_not_count_towards_maximum(self) -> None:
        # With question 3 counted as a maximum of 12 the result would be 67.
        a = make_answers("alice", {1: 3, 2: 3, 3: 3})
        b = make_answers("bob", {1: 3, 2: 3, 4: 3})

        assert score(a, b) == 100

    def test_without_catalog_only_ids_up_to_the_answer_count_are_considered(
        self,
    ) -> None:
        # ids 1..2 are considered; question 7 is never looked at.
        a = make_answers("alice", {1: 3, 7: 1})
        b = make_answers("bob", {1: 3, 7: 5})

        assert score(a, b) == 100

    def test_catalog_defines_the_considered_question_ids(self) -> None:
        catalog = make_catalog(["x", "x", "y", "y"])
        a = make_answers("alice", {3: 1, 4: 1})
        b = make_answers("bob", {3: 5, 4: 5})

        assert score(a, b, catalog) == 0

    def test_repeated_question_uses_last_answer(self) -> None:
        a = [
            Answer(question_id=1, subject_id="alice", value=1),
            Answer(question_id=1, subject_id="alice", value=4),
        ]
        b = make_answers("bob", {1: 4, 2: 4})

        assert score(a, b) == 100


class TestScoreErrors:
    """Precondition failures surface to the caller."""

    def test_mismatched_counts_raise(self) -> None:
        a = uniform_answers("alice", value=3, count=15)
        b = uniform_answers("bob", value=3, count=14)

        with pytest.raises(MismatchedAnswerCountError) as exc_info:
            score(a, b)

        assert exc_info.value.count_a == 15
        assert exc_info.value.count_b == 14

    def test_mismatched_counts_raise_even_when_overlap_exists(self) -> None:
        a = make_answers("alice", {1: 3, 2: 3})
        b = make_answers("bob", {1: 3})

        with pytest.raises(MismatchedAnswerCountError):
            score(a, b)

    def test_no_shared_questions_raises(self) -> None:
        a = make_answers("alice", {1: 3})
        b = make_answers("bob", {2: 3})

        with pytest.raises(NoComparableAnswersError):
            score(a, b)

    def test_two_empty_collections_raise(self) -> None:
        with pytest.raises(NoComparableAnswersError):
            score([], [])

    def test_errors_are_not_retriable(self) -> None:
        with pytest.raises(NoComparableAnswersError) as exc_info:
            score([], [])

        assert exc_info.value.retriable is False


class TestScoreProperties:
    """Symmetry, range and monotonicity over small exhaustive inputs."""

    @pytest.mark.parametrize(
        "values_a, values_b",
        [
            ((1, 2, 3), (5, 4, 3)),
            ((2, 2, 5), (1, 3, 4)),
            ((5, 5, 5), (1, 1, 2)),
        ],
    )
    def test_score_is_commutative(
        self, values_a: tuple[int, ...], values_b: tuple[int, ...]
    ) -> None:
        a = make_answers("alice", dict(enumerate(values_a, start=1)))
        b = make_answers("bob", dict(enumerate(values_b, start=1)))

        assert score(a, b) == score(b, a)

    def test_every_pair_of_two_question_answers_stays_in_range(self) -> None:
        values = range(1, 6)
        for a1, a2, b1, b2 in itertools.product(values, repeat=4):
            a = make_answers("alice", {1: a1, 2: a2})
            b = make_answers("bob", {1: b1, 2: b2})

            assert 0 <= score(a, b) <= 100

    def test_moving_one_answer_closer_never_lowers_the_score(self) -> None:
        fixed_a = {1: 2, 2: 4}
        fixed_b = {1: 5, 2: 1}
        previous = -1
        # Walk bob's answer to question 1 from 5 down to alice's value of 2.
        for value in (5, 4, 3, 2):
            a = make_answers("alice", fixed_a)
            b = make_answers("bob", {**fixed_b, 1: value})
            current = score(a, b)

            assert current >= previous
            previous = current


class TestPercentageRounding:
    """Halves round up rather than to even."""

    def test_exact_half_rounds_up(self) -> None:
        # 1 / 8 = 12.5%
        assert to_percentage(total=1, max_possible=8) == 13

    def test_below_half_rounds_down(self) -> None:
        # 1 / 12 = 8.33%
        assert to_percentage(total=1, max_possible=12) == 8

    def test_two_thirds_rounds_to_67(self) -> None:
        assert to_percentage(total=8, max_possible=12) == 67

    def test_full_and_empty_scores(self) -> None:
        assert to_percentage(total=60, max_possible=60) == 100
        assert to_percentage(total=0, max_possible=60) == 0

    def test_question_points_range_from_4_to_0(self) -> None:
        assert question_points(3, 3) == 4
        assert question_points(1, 5) == 0
        assert question_points(5, 3) == 2
