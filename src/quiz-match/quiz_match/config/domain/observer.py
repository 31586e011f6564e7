"""Observer port for the config domain — defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(self, name: str) -> None: ...

    def config_builtin_catalog_selected(self) -> None: ...
