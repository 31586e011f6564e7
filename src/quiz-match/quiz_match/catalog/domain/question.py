"""Question domain value object — one entry of the quiz catalog."""

from pydantic import BaseModel, Field


class Question(BaseModel, frozen=True):
    """Immutable value object representing a single Likert-scale question."""

    id: int = Field(ge=1)
    prompt: str = Field(min_length=1)
    category: str = Field(min_length=1)
