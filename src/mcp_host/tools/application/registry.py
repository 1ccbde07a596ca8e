"""ToolServerRegistry — owns tool-server connections and routes namespaced tool calls."""

import asyncio
from collections.abc import Mapping
from typing import Any

from mcp_host.config.domain.mcp_servers import ServerLaunchSpec
from mcp_host.core.errors import McpHostError
from mcp_host.tools.domain.connection import ToolServerConnection, ToolServerLauncher
from mcp_host.tools.domain.descriptor import (
    ToolDescriptor,
    is_routable,
    is_valid_server_id,
    namespace,
    split_namespaced,
)
from mcp_host.tools.domain.observer import ToolRegistryObserver
from mcp_host.tools.domain.result import ToolResult
from mcp_host.tools.infrastructure.errors import (
    InvalidServerIdError,
    MalformedToolNameError,
    ToolInvocationError,
    ToolListingError,
    ToolServerAlreadyRegisteredError,
    ToolServerNotFoundError,
)

DEFAULT_LISTING_TIMEOUT_SECONDS = 10.0
DEFAULT_CALL_TIMEOUT_SECONDS = 60.0


class ToolServerRegistry:
    """Process-wide set of tool-server connections.

    The connection set is only mutated during startup (``register_all``) and
    shutdown. In steady state it is read concurrently by every prompt
    resolution through ``invoke``.
    """

    def __init__(
        self,
        launcher: ToolServerLauncher,
        observer: ToolRegistryObserver,
        listing_timeout: float = DEFAULT_LISTING_TIMEOUT_SECONDS,
        call_timeout: float = DEFAULT_CALL_TIMEOUT_SECONDS,
    ) -> None:
        self._launcher = launcher
        self._observer = observer
        self._listing_timeout = listing_timeout
        self._call_timeout = call_timeout
        self._connections: dict[str, ToolServerConnection] = {}

    @property
    def server_ids(self) -> list[str]:
        """Registered server ids, in registration order."""
        return list(self._connections)

    async def register(
        self, server_id: str, spec: ServerLaunchSpec
    ) -> ToolServerConnection:
        """Launch and handshake one tool server, then record its connection.

        The launcher owns the handshake timeout and tears down its own process
        when the handshake fails.

        Raises:
            ToolServerAlreadyRegisteredError: if server_id is already registered.
            InvalidServerIdError: if tools of server_id could not be routed back to it.
            ToolServerStartError: if the process cannot be started.
            ToolServerHandshakeError: if initialization fails or times out.
        """
        if server_id in self._connections:
            raise ToolServerAlreadyRegisteredError(server_id=server_id)

        if not is_valid_server_id(server_id):
            error = InvalidServerIdError(server_id=server_id)
            self._observer.server_registration_failed(
                server_id=server_id, reason=str(error)
            )
            raise error

        self._observer.server_registration_started(
            server_id=server_id, command=spec.command
        )
        try:
            connection = await self._launcher.launch(server_id=server_id, spec=spec)
        except McpHostError as exc:
            self._observer.server_registration_failed(
                server_id=server_id, reason=str(exc)
            )
            raise

        self._connections[server_id] = connection
        self._observer.server_registered(server_id=server_id)
        return connection

    async def register_all(self, specs: Mapping[str, ServerLaunchSpec]) -> None:
        """Register every configured server, or none of them.

        If any registration fails, every connection opened by this batch is
        closed before the error propagates.
        """
        registered: list[str] = []
        for server_id, spec in specs.items():
            try:
                await self.register(server_id=server_id, spec=spec)
            except McpHostError:
                await self._close(server_ids=list(reversed(registered)))
                self._observer.registration_rolled_back(server_ids=registered)
                raise
            registered.append(server_id)

    async def list_tools(self, server_id: str) -> list[ToolDescriptor]:
        """Return the local tool descriptors advertised by one server.

        Raises:
            ToolServerNotFoundError: if server_id is not registered.
            ToolListingError: on timeout or transport failure.
        """
        connection = self._get(server_id=server_id)
        try:
            return await asyncio.wait_for(
                connection.list_tools(), timeout=self._listing_timeout
            )
        except TimeoutError as exc:
            raise ToolListingError(
                server_id=server_id,
                reason=f"timed out after {self._listing_timeout:g}s",
            ) from exc

    async def build_catalog(self) -> list[ToolDescriptor]:
        """List every server's tools under namespaced names.

        A server whose listing fails is reported and left out; the others are
        unaffected. A tool whose namespaced name would not split back into
        its server and tool (such as ``read__file``) is reported and left out.
        """
        catalog: list[ToolDescriptor] = []
        for server_id in self.server_ids:
            try:
                tools = await self.list_tools(server_id=server_id)
            except ToolListingError as exc:
                self._observer.tool_listing_failed(server_id=server_id, reason=str(exc))
                continue
            for tool in tools:
                if not is_routable(server_id, tool.name):
                    self._observer.tool_unroutable(server_id=server_id, tool_name=tool.name)
                    continue
                catalog.append(tool.namespaced(server_id))
            self._observer.tools_listed(server_id=server_id, count=len(tools))
        return catalog

    @staticmethod
    def namespace(server_id: str, local_name: str) -> str:
        return namespace(server_id, local_name)

    async def invoke(self, name: str, arguments: dict[str, Any]) -> ToolResult:
        """Route a namespaced tool call to its owning server.

        Raises:
            MalformedToolNameError: if name does not split into exactly two parts.
                No connection is touched.
            ToolServerNotFoundError: if the server part is not registered.
            ToolInvocationError: on timeout, transport failure, or a result the
                server flagged as an error.
        """
        parts = split_namespaced(name)
        if parts is None:
            raise MalformedToolNameError(name=name)

        server_id, tool_name = parts
        connection = self._get(server_id=server_id)

        try:
            result = await asyncio.wait_for(
                connection.call_tool(name=tool_name, arguments=arguments),
                timeout=self._call_timeout,
            )
        except TimeoutError as exc:
            raise ToolInvocationError(
                tool_name=tool_name, reason=f"timed out after {self._call_timeout:g}s"
            ) from exc

        if result.is_error:
            raise ToolInvocationError(
                tool_name=tool_name, reason=result.text or "tool reported an error"
            )
        return result

    async def shutdown(self) -> None:
        """Close every connection, most recently registered first. Idempotent."""
        server_ids = list(reversed(self._connections))
        await self._close(server_ids=server_ids)

    async def _close(self, server_ids: list[str]) -> None:
        for server_id in server_ids:
            connection = self._connections.pop(server_id, None)
            if connection is None:
                continue
            try:
                await connection.close()
            except Exception as exc:
                # Keep closing the remaining servers.
                self._observer.server_close_failed(server_id=server_id, reason=str(exc))
                continue
            self._observer.server_closed(server_id=server_id)

    def _get(self, server_id: str) -> ToolServerConnection:
        connection = self._connections.get(server_id)
        if connection is None:
            raise ToolServerNotFoundError(server_id=server_id)
        return connection
