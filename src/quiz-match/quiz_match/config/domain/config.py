"""Top-level QuizConfig aggregate — the root configuration object."""

from pydantic import BaseModel, Field

from quiz_match.config.domain.answers import AnswersConfig
from quiz_match.config.domain.catalog import CatalogConfig


class QuizConfig(BaseModel, frozen=True):
    """Root configuration aggregate for a quiz-match session."""

    name: str = Field(min_length=1)
    catalog: CatalogConfig = CatalogConfig()
    answers: AnswersConfig
