"""ToolRegistryObserver port — domain events emitted by the tool-server registry."""

from typing import Protocol


class ToolRegistryObserver(Protocol):
    """Observer port for tool-server lifecycle and routing events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def server_registration_started(self, server_id: str, command: str) -> None: ...

    def server_registered(self, server_id: str) -> None: ...

    def server_registration_failed(self, server_id: str, reason: str) -> None: ...

    def registration_rolled_back(self, server_ids: list[str]) -> None: ...

    def tools_listed(self, server_id: str, count: int) -> None: ...

    def tool_listing_failed(self, server_id: str, reason: str) -> None: ...

    def tool_unroutable(self, server_id: str, tool_name: str) -> None: ...

    def server_closed(self, server_id: str) -> None: ...

    def server_close_failed(self, server_id: str, reason: str) -> None: ...
