"""Structlog implementation of the CatalogObserver port."""

import structlog


class StructlogCatalogObserver:
    """Delegates catalog domain events to structlog.

    Satisfies the CatalogObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def catalog_loading_started(self, source: str) -> None:
        self._log.debug("catalog.loading_started", source=source)

    def catalog_loaded(
        self, source: str, total_questions: int, categories: list[str]
    ) -> None:
        self._log.info(
            "catalog.loaded",
            source=source,
            total_questions=total_questions,
            categories=categories,
        )

    def catalog_loading_failed(self, source: str, reason: str) -> None:
        self._log.error("catalog.loading_failed", source=source, reason=reason)

    def catalog_fallback_used(self, failed_source: str, reason: str) -> None:
        self._log.warning(
            "catalog.fallback_used",
            failed_source=failed_source,
            reason=reason,
            message="Falling back to the built-in question catalog",
        )
