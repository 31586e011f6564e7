"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, name: str) -> None:
        self._log.info("config.loaded", name=name)

    def config_builtin_catalog_selected(self) -> None:
        self._log.info(
            "config.builtin_catalog_selected",
            message="No catalog path configured; using the built-in questions",
        )
