"""Error types raised by the tool-server registry and its transports."""

from mcp_host.core.errors import McpHostError


class ToolServerStartError(McpHostError):
    """Raised when a tool-server process cannot be started."""

    def __init__(self, server_id: str, reason: str) -> None:
        self.server_id = server_id
        super().__init__(f"Failed to start tool server '{server_id}': {reason}")


class ToolServerHandshakeError(McpHostError):
    """Raised when a started tool server fails or times out during initialization."""

    def __init__(self, server_id: str, reason: str) -> None:
        self.server_id = server_id
        super().__init__(f"Failed to initialize tool server '{server_id}': {reason}")


class ToolServerAlreadyRegisteredError(McpHostError):
    """Raised when a server id is registered twice."""

    def __init__(self, server_id: str) -> None:
        self.server_id = server_id
        super().__init__(
            f"Failed to register tool server: '{server_id}' is already registered"
        )


class ToolListingError(McpHostError):
    """Raised when a tool server's tool list cannot be fetched."""

    def __init__(self, server_id: str, reason: str) -> None:
        self.server_id = server_id
        super().__init__(f"Failed to list tools for server '{server_id}': {reason}")


class MalformedToolNameError(McpHostError):
    """Raised when a tool name does not split into exactly server and tool parts."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Failed to route tool call: malformed tool name '{name}'")


class ToolServerNotFoundError(McpHostError):
    """Raised when a tool call names a server that is not registered."""

    def __init__(self, server_id: str) -> None:
        self.server_id = server_id
        super().__init__(f"Failed to route tool call: server '{server_id}' not found")


class ToolInvocationError(McpHostError):
    """Raised when a routed tool call fails in transport or in execution."""

    def __init__(self, tool_name: str, reason: str) -> None:
        self.tool_name = tool_name
        self.reason = reason
        super().__init__(f"Failed to call tool {tool_name}: {reason}")


class InvalidServerIdError(McpHostError):
    """Raised when a server id cannot be recovered from the tool names it prefixes."""

    def __init__(self, server_id: str) -> None:
        self.server_id = server_id
        super().__init__(
            f"Failed to register tool server: id '{server_id}' cannot be namespaced;"
            " it must be non-empty, contain no '__' and not end with '_'"
        )
