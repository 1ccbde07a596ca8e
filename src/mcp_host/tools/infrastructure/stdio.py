"""MCP stdio transport — launches tool servers as subprocesses via the MCP client SDK."""

import asyncio
import contextlib
from contextlib import AsyncExitStack
from typing import Any

from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client
from mcp.types import Implementation

from mcp_host.config.domain.mcp_servers import ServerLaunchSpec
from mcp_host.conversation.domain.content import ToolResultItem
from mcp_host.tools.domain.descriptor import ToolDescriptor
from mcp_host.tools.domain.result import ToolResult
from mcp_host.tools.infrastructure.errors import (
    ToolInvocationError,
    ToolListingError,
    ToolServerHandshakeError,
    ToolServerStartError,
)

DEFAULT_HANDSHAKE_TIMEOUT_SECONDS = 120.0


class McpStdioConnection:
    """A handshaked MCP client session bound to one tool-server subprocess.

    Satisfies the ToolServerConnection protocol structurally. The exit stack
    owns both the subprocess streams and the session; closing it terminates
    the subprocess. It must be closed from the task that opened it.
    """

    def __init__(
        self, server_id: str, session: ClientSession, stack: AsyncExitStack
    ) -> None:
        self._server_id = server_id
        self._session = session
        self._stack = stack

    @property
    def server_id(self) -> str:
        return self._server_id

    async def list_tools(self) -> list[ToolDescriptor]:
        """Raises ToolListingError on any transport or protocol failure."""
        try:
            result = await self._session.list_tools()
        except Exception as exc:
            raise ToolListingError(server_id=self._server_id, reason=str(exc)) from exc

        return [
            ToolDescriptor(
                name=tool.name,
                description=tool.description or "",
                input_schema=dict(tool.inputSchema or {"type": "object"}),
            )
            for tool in result.tools
        ]

    async def call_tool(self, name: str, arguments: dict[str, Any]) -> ToolResult:
        """Raises ToolInvocationError on any transport or protocol failure."""
        try:
            result = await self._session.call_tool(name, arguments)
        except Exception as exc:
            raise ToolInvocationError(tool_name=name, reason=str(exc)) from exc

        return ToolResult(
            items=[_to_result_item(content) for content in result.content or []],
            is_error=bool(result.isError),
        )

    async def close(self) -> None:
        await self._stack.aclose()


class McpStdioLauncher:
    """Starts tool servers over stdio and completes the MCP initialize handshake.

    Satisfies the ToolServerLauncher protocol structurally.
    """

    def __init__(
        self,
        client_name: str,
        client_version: str,
        handshake_timeout: float = DEFAULT_HANDSHAKE_TIMEOUT_SECONDS,
    ) -> None:
        self._client_info = Implementation(name=client_name, version=client_version)
        self._handshake_timeout = handshake_timeout

    async def launch(self, server_id: str, spec: ServerLaunchSpec) -> McpStdioConnection:
        """Start the subprocess and run the handshake under the timeout ceiling.

        On any failure the subprocess is torn down before the error propagates.

        Raises:
            ToolServerStartError: if the subprocess or its session cannot be opened.
            ToolServerHandshakeError: if initialize fails or exceeds the ceiling.
        """
        params = StdioServerParameters(
            command=spec.command,
            args=list(spec.args),
            env=dict(spec.env) if spec.env else None,
        )
        stack = AsyncExitStack()

        try:
            read_stream, write_stream = await stack.enter_async_context(
                stdio_client(params)
            )
            session = await stack.enter_async_context(
                ClientSession(read_stream, write_stream, client_info=self._client_info)
            )
        except Exception as exc:
            await _discard(stack)
            raise ToolServerStartError(server_id=server_id, reason=str(exc)) from exc

        try:
            await asyncio.wait_for(session.initialize(), timeout=self._handshake_timeout)
        except TimeoutError as exc:
            await _discard(stack)
            raise ToolServerHandshakeError(
                server_id=server_id,
                reason=f"timed out after {self._handshake_timeout:g}s",
            ) from exc
        except Exception as exc:
            await _discard(stack)
            raise ToolServerHandshakeError(server_id=server_id, reason=str(exc)) from exc

        return McpStdioConnection(server_id=server_id, session=session, stack=stack)


def _to_result_item(content: Any) -> ToolResultItem:
    """Map an MCP content object (text, image, resource, ...) to a ToolResultItem."""
    if isinstance(content, dict):
        raw = content
    else:
        raw = content.model_dump(mode="json", exclude_none=True)
    return ToolResultItem.model_validate(raw)


async def _discard(stack: AsyncExitStack) -> None:
    # Teardown errors are dropped; the launch failure is raised.
    with contextlib.suppress(Exception):
        await stack.aclose()
