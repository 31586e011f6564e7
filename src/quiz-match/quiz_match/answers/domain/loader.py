"""AnswerLoader Protocol — structural interface for answer sources."""

from typing import Protocol

from quiz_match.answers.domain.answer import Answer, SubjectId
from quiz_match.config.domain.answers import AnswersConfig


class AnswerLoader(Protocol):
    """Loads every subject's latest answers from the source described by config.

    Returns answers grouped by subject id, subjects in order of first appearance.
    """

    def load(self, config: AnswersConfig) -> dict[SubjectId, list[Answer]]: ...
