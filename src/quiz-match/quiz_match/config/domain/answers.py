"""Answer source configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field


class AnswersConfig(BaseModel, frozen=True):
    path: Path
    subject_key: str = Field(default="subject_id", min_length=1)
    question_key: str = Field(default="question_id", min_length=1)
    value_key: str = Field(default="value", min_length=1)
