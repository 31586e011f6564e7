"""Question catalog configuration model."""

from pathlib import Path

from pydantic import BaseModel


class CatalogConfig(BaseModel, frozen=True):
    # None selects the built-in catalog.
    path: Path | None = None
