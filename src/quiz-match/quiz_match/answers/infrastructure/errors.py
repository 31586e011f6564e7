"""Error types raised by answers infrastructure."""

from quiz_match.core.errors import QuizMatchError


class AnswerLoadError(QuizMatchError):
    """Raised when a JSONL answer file cannot be loaded or is malformed."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to load answers: {reason}")


class SubjectNotFoundError(QuizMatchError):
    """Raised when the answer source holds no answers for a requested subject."""

    def __init__(self, subject_id: str) -> None:
        self.subject_id = subject_id
        super().__init__(f"Failed to find answers for subject '{subject_id}'")
