"""Base exception class for all mcp-host-specific errors."""


class McpHostError(Exception):
    """Base class for all mcp-host errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
