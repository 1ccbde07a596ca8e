"""ToolRouter Protocol — the orchestrator's view of the tool-server registry."""

from typing import Any, Protocol

from mcp_host.tools.domain.result import ToolResult


class ToolRouter(Protocol):
    async def invoke(self, name: str, arguments: dict[str, Any]) -> ToolResult:
        """Route a namespaced tool call.

        Raises:
            MalformedToolNameError: if the name is not server and tool joined by
                the namespace separator.
            ToolServerNotFoundError: if the server is not registered.
            ToolInvocationError: if the call fails in transport or execution.
        """
        ...
