"""Structlog implementation of the ConfigObserver port."""

from pathlib import Path

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_default_created(self, path: Path) -> None:
        self._log.info("config.default_created", path=str(path))

    def config_loaded(self, path: Path, server_count: int) -> None:
        self._log.info("config.loaded", path=str(path), server_count=server_count)

    def config_load_failed(self, path: Path | None, reason: str) -> None:
        self._log.error(
            "config.load_failed", path=str(path) if path else None, reason=reason
        )
