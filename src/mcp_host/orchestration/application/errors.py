"""Error types raised by the orchestration loop."""

from mcp_host.core.errors import McpHostError


class EmptyPromptError(McpHostError):
    """Raised when a resolution is started without any prompt text."""

    def __init__(self) -> None:
        super().__init__("Failed to run prompt: prompt is empty")


class RoundLimitExceededError(McpHostError):
    """Raised when the model keeps requesting tools past the round limit."""

    def __init__(self, max_rounds: int) -> None:
        self.max_rounds = max_rounds
        super().__init__(
            f"Failed to run prompt: model still requested tools after {max_rounds} rounds"
        )
