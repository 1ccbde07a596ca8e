"""Fake tool-server connection and launcher for registry and orchestration tests."""

from dataclasses import dataclass
from typing import Any

from mcp_host.config.domain.mcp_servers import ServerLaunchSpec
from mcp_host.conversation.domain.content import ToolResultItem
from mcp_host.tools.domain.descriptor import ToolDescriptor
from mcp_host.tools.domain.result import ToolResult


@dataclass(frozen=True)
class RecordedCall:
    name: str
    arguments: dict[str, Any]


def text_result(*texts: str) -> ToolResult:
    return ToolResult(items=[ToolResultItem(type="text", text=text) for text in texts])


class FakeToolServerConnection:
    """Satisfies the ToolServerConnection protocol.

    ``results`` maps a local tool name to the ToolResult to return or the
    Exception to raise. Unknown tools return an empty result.
    """

    def __init__(
        self,
        server_id: str,
        tools: list[str] | None = None,
        results: dict[str, ToolResult | Exception] | None = None,
        listing_error: Exception | None = None,
        close_error: Exception | None = None,
    ) -> None:
        self._server_id = server_id
        self._tools = list(tools or [])
        self._results = dict(results or {})
        self._listing_error = listing_error
        self._close_error = close_error
        self.calls: list[RecordedCall] = []
        self.closed = False

    @property
    def server_id(self) -> str:
        return self._server_id

    async def list_tools(self) -> list[ToolDescriptor]:
        if self._listing_error is not None:
            raise self._listing_error
        return [
            ToolDescriptor(name=name, description=f"{name} from {self._server_id}")
            for name in self._tools
        ]

    async def call_tool(self, name: str, arguments: dict[str, Any]) -> ToolResult:
        self.calls.append(RecordedCall(name=name, arguments=dict(arguments)))
        outcome = self._results.get(name, ToolResult())
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    async def close(self) -> None:
        self.closed = True
        if self._close_error is not None:
            raise self._close_error


class FakeToolServerLauncher:
    """Satisfies the ToolServerLauncher protocol.

    Returns the pre-built connection for each server id, or raises the
    configured failure for it. Servers with neither get a tool-less connection.
    """

    def __init__(
        self,
        connections: list[FakeToolServerConnection] | None = None,
        failures: dict[str, Exception] | None = None,
    ) -> None:
        self._connections = {conn.server_id: conn for conn in connections or []}
        self._failures = dict(failures or {})
        self.launched: list[str] = []

    async def launch(self, server_id: str, spec: ServerLaunchSpec) -> FakeToolServerConnection:
        self.launched.append(server_id)
        if server_id in self._failures:
            raise self._failures[server_id]
        return self._connections.setdefault(
            server_id, FakeToolServerConnection(server_id=server_id)
        )
