"""Tests for AnswerSheet and assess_completeness()."""

import pytest
from pydantic import ValidationError

from quiz_match.answers.domain.answer import Answer
from quiz_match.answers.domain.completeness import assess_completeness
from quiz_match.answers.domain.sheet import AnswerSheet
from tests.answers_factory import make_answers, make_catalog


class TestAnswerSheet:
    """AnswerSheet accumulates answers immutably."""

    def test_record_returns_new_sheet(self) -> None:
        empty = AnswerSheet(subject_id="alice")

        sheet = empty.record(question_id=1, value=4)

        assert empty.answers == ()
        assert sheet.value_for(1) == 4
        assert sheet.answers[0].subject_id == "alice"

    def test_re_recording_overwrites(self) -> None:
        sheet = AnswerSheet(subject_id="alice").record(1, 2).record(2, 3).record(1, 5)

        assert len(sheet.answers) == 2
        assert sheet.value_for(1) == 5

    def test_undo_removes_most_recent_answer(self) -> None:
        sheet = AnswerSheet(subject_id="alice").record(1, 2).record(2, 3)

        assert sheet.undo().value_for(2) is None
        assert sheet.undo().value_for(1) == 2

    def test_undo_on_empty_sheet_is_a_no_op(self) -> None:
        assert AnswerSheet(subject_id="alice").undo().answers == ()

    def test_invalid_value_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            AnswerSheet(subject_id="alice").record(1, 6)

    def test_next_question_walks_the_catalog(self) -> None:
        catalog = make_catalog(["a", "b", "c"])
        sheet = AnswerSheet(subject_id="alice").record(1, 3)

        assert sheet.next_question_id(catalog) == 2
        assert sheet.record(2, 3).record(3, 3).next_question_id(catalog) is None

    def test_to_answers_feeds_completeness(self) -> None:
        catalog = make_catalog(["a", "b"])
        sheet = AnswerSheet(subject_id="alice").record(1, 3).record(2, 1)

        assert assess_completeness(sheet.to_answers(), catalog).is_complete


class TestAssessCompleteness:
    """assess_completeness() measures answers against the catalog."""

    def test_complete_set(self) -> None:
        catalog = make_catalog(["a", "b", "c"])
        completeness = assess_completeness(
            make_answers("alice", {1: 3, 2: 3, 3: 3}), catalog
        )

        assert completeness.is_complete
        assert completeness.answered == 3
        assert completeness.total == 3

    def test_missing_questions_are_listed(self) -> None:
        catalog = make_catalog(["a", "b", "c"])
        completeness = assess_completeness(make_answers("alice", {2: 3}), catalog)

        assert not completeness.is_complete
        assert completeness.missing_question_ids == [1, 3]

    def test_unknown_questions_make_a_set_incomplete(self) -> None:
        catalog = make_catalog(["a"])
        completeness = assess_completeness(make_answers("alice", {1: 3, 7: 3}), catalog)

        assert completeness.answered == 1
        assert completeness.unknown_question_ids == [7]
        assert not completeness.is_complete

    def test_repeated_answers_count_once(self) -> None:
        catalog = make_catalog(["a", "b"])
        answers = [
            Answer(question_id=1, subject_id="alice", value=3),
            Answer(question_id=1, subject_id="alice", value=4),
        ]

        completeness = assess_completeness(answers, catalog)

        assert completeness.answered == 1
        assert completeness.missing_question_ids == [2]
