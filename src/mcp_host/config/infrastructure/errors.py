"""Error types raised by config infrastructure."""

from pathlib import Path

from mcp_host.core.errors import McpHostError


class ConfigValidationError(McpHostError):
    """Raised when the loaded config fails schema or semantic validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate config: {reason}")


class ConfigLoadError(McpHostError):
    """Raised when the config file cannot be created, opened, read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to load config {path}: {reason}")
