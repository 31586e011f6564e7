"""Base exception class for all quiz-match-specific errors."""


class QuizMatchError(Exception):
    """Base class for all quiz-match errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
