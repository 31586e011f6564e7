"""Fallback catalog loader — tries a primary source, then a static fallback."""

from quiz_match.catalog.domain.catalog import QuestionCatalog
from quiz_match.catalog.domain.loader import CatalogLoader
from quiz_match.catalog.domain.observer import CatalogObserver
from quiz_match.catalog.infrastructure.errors import CatalogLoadError


class FallbackCatalogLoader:
    """Loads from ``primary``; on CatalogLoadError, loads from ``fallback`` instead.

    Errors raised by the fallback propagate unchanged.
    """

    def __init__(
        self,
        primary: CatalogLoader,
        fallback: CatalogLoader,
        observer: CatalogObserver,
        primary_source: str,
    ) -> None:
        self._primary = primary
        self._fallback = fallback
        self._observer = observer
        self._primary_source = primary_source

    def load(self) -> QuestionCatalog:
        try:
            return self._primary.load()
        except CatalogLoadError as exc:
            self._observer.catalog_fallback_used(
                failed_source=self._primary_source, reason=str(exc)
            )
            return self._fallback.load()
