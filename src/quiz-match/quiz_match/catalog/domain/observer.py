"""Observer port for the catalog domain — defines events in domain language."""

from typing import Protocol


class CatalogObserver(Protocol):
    def catalog_loading_started(self, source: str) -> None: ...

    def catalog_loaded(
        self, source: str, total_questions: int, categories: list[str]
    ) -> None: ...

    def catalog_loading_failed(self, source: str, reason: str) -> None: ...

    def catalog_fallback_used(self, failed_source: str, reason: str) -> None: ...
