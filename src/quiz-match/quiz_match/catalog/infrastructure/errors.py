"""Error types raised by catalog infrastructure."""

from quiz_match.core.errors import QuizMatchError


class CatalogLoadError(QuizMatchError):
    """Raised when a question catalog cannot be loaded or is malformed."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to load question catalog: {reason}")
