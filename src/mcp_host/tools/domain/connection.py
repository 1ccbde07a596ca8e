"""Ports for talking to external tool-server processes."""

from typing import Any, Protocol

from mcp_host.config.domain.mcp_servers import ServerLaunchSpec
from mcp_host.tools.domain.descriptor import ToolDescriptor
from mcp_host.tools.domain.result import ToolResult


class ToolServerConnection(Protocol):
    """A live, handshaked connection to one tool-server process."""

    @property
    def server_id(self) -> str: ...

    async def list_tools(self) -> list[ToolDescriptor]:
        """Return the server's tools under their local (un-namespaced) names."""
        ...

    async def call_tool(self, name: str, arguments: dict[str, Any]) -> ToolResult: ...

    async def close(self) -> None: ...


class ToolServerLauncher(Protocol):
    """Starts a tool-server process and completes its capability handshake."""

    async def launch(self, server_id: str, spec: ServerLaunchSpec) -> ToolServerConnection: ...
