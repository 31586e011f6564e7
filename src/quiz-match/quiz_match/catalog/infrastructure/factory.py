"""Builds the CatalogLoader matching a CatalogConfig."""

from quiz_match.catalog.domain.loader import CatalogLoader
from quiz_match.catalog.domain.observer import CatalogObserver
from quiz_match.catalog.infrastructure.builtin import BuiltinCatalogLoader
from quiz_match.catalog.infrastructure.fallback_loader import FallbackCatalogLoader
from quiz_match.catalog.infrastructure.file_loader import FileCatalogLoader
from quiz_match.config.domain.catalog import CatalogConfig


def create_catalog_loader(
    config: CatalogConfig, observer: CatalogObserver
) -> CatalogLoader:
    """Return the built-in loader, or a file loader backed by the built-in catalog."""
    builtin = BuiltinCatalogLoader(observer=observer)
    if config.path is None:
        return builtin
    return FallbackCatalogLoader(
        primary=FileCatalogLoader(path=config.path, observer=observer),
        fallback=builtin,
        observer=observer,
        primary_source=str(config.path),
    )
