"""Observer port for the config domain — defines events in domain language."""

from pathlib import Path
from typing import Protocol


class ConfigObserver(Protocol):
    def config_default_created(self, path: Path) -> None: ...

    def config_loaded(self, path: Path, server_count: int) -> None: ...

    def config_load_failed(self, path: Path | None, reason: str) -> None: ...
