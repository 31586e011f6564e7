"""CatalogLoader Protocol — structural interface for question sources."""

from typing import Protocol

from quiz_match.catalog.domain.catalog import QuestionCatalog


class CatalogLoader(Protocol):
    """Produces the QuestionCatalog used for every comparison in a session."""

    def load(self) -> QuestionCatalog: ...
