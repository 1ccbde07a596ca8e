"""FakeToolRegistryObserver — records tool-registry events for assertion in tests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ServerEvent:
    server_id: str
    reason: str | None = None


@dataclass(frozen=True)
class ToolsListedEvent:
    server_id: str
    count: int


@dataclass(frozen=True)
class UnroutableToolEvent:
    server_id: str
    tool_name: str


class FakeToolRegistryObserver:
    """Records all emitted registry events as typed frozen dataclasses."""

    def __init__(self) -> None:
        self.registration_started: list[ServerEvent] = []
        self.registered: list[ServerEvent] = []
        self.registration_failed: list[ServerEvent] = []
        self.rolled_back: list[list[str]] = []
        self.tools_listed_events: list[ToolsListedEvent] = []
        self.listing_failed: list[ServerEvent] = []
        self.unroutable: list[UnroutableToolEvent] = []
        self.closed: list[ServerEvent] = []
        self.close_failed: list[ServerEvent] = []

    def server_registration_started(self, server_id: str, command: str) -> None:
        self.registration_started.append(ServerEvent(server_id=server_id))

    def server_registered(self, server_id: str) -> None:
        self.registered.append(ServerEvent(server_id=server_id))

    def server_registration_failed(self, server_id: str, reason: str) -> None:
        self.registration_failed.append(ServerEvent(server_id=server_id, reason=reason))

    def registration_rolled_back(self, server_ids: list[str]) -> None:
        self.rolled_back.append(list(server_ids))

    def tools_listed(self, server_id: str, count: int) -> None:
        self.tools_listed_events.append(ToolsListedEvent(server_id=server_id, count=count))

    def tool_listing_failed(self, server_id: str, reason: str) -> None:
        self.listing_failed.append(ServerEvent(server_id=server_id, reason=reason))

    def tool_unroutable(self, server_id: str, tool_name: str) -> None:
        self.unroutable.append(UnroutableToolEvent(server_id=server_id, tool_name=tool_name))

    def server_closed(self, server_id: str) -> None:
        self.closed.append(ServerEvent(server_id=server_id))

    def server_close_failed(self, server_id: str, reason: str) -> None:
        self.close_failed.append(ServerEvent(server_id=server_id, reason=reason))
