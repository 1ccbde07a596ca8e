"""Structlog implementation of the ToolRegistryObserver port."""

import structlog


class StructlogToolRegistryObserver:
    """Delegates tool-registry domain events to structlog.

    Satisfies the ToolRegistryObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def server_registration_started(self, server_id: str, command: str) -> None:
        self._log.info("tools.server_registration_started", server=server_id, command=command)

    def server_registered(self, server_id: str) -> None:
        self._log.info("tools.server_registered", server=server_id)

    def server_registration_failed(self, server_id: str, reason: str) -> None:
        self._log.error("tools.server_registration_failed", server=server_id, reason=reason)

    def registration_rolled_back(self, server_ids: list[str]) -> None:
        self._log.warning("tools.registration_rolled_back", servers=server_ids)

    def tools_listed(self, server_id: str, count: int) -> None:
        self._log.info("tools.tools_listed", server=server_id, count=count)

    def tool_listing_failed(self, server_id: str, reason: str) -> None:
        self._log.error("tools.tool_listing_failed", server=server_id, reason=reason)

    def tool_unroutable(self, server_id: str, tool_name: str) -> None:
        self._log.warning("tools.tool_unroutable", server=server_id, tool=tool_name)

    def server_closed(self, server_id: str) -> None:
        self._log.info("tools.server_closed", server=server_id)

    def server_close_failed(self, server_id: str, reason: str) -> None:
        self._log.warning("tools.server_close_failed", server=server_id, reason=reason)
