"""UnavailableModelBackend — stands in when the configured backend could not be built."""

from mcp_host.conversation.domain.turn import Turn
from mcp_host.model.domain.result import ModelTurnResult
from mcp_host.model.infrastructure.errors import ModelBackendError
from mcp_host.tools.domain.descriptor import ToolDescriptor


class UnavailableModelBackend:
    """Satisfies the ModelBackend protocol; every call fails with the startup reason.

    Lets the rest of the server (health, tool catalog, history) keep running
    when only the model backend is misconfigured.
    """

    def __init__(self, reason: str) -> None:
        self._reason = reason

    @property
    def name(self) -> str:
        return "unavailable"

    async def create_message(
        self,
        prompt: str,
        conversation: list[Turn],
        tools: list[ToolDescriptor],
    ) -> ModelTurnResult:
        raise ModelBackendError(reason=f"model backend not initialized: {self._reason}")
