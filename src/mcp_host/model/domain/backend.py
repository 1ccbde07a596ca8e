"""ModelBackend Protocol — structural interface for all model backends."""

from typing import Protocol

from mcp_host.conversation.domain.turn import Turn
from mcp_host.model.domain.result import ModelTurnResult
from mcp_host.tools.domain.descriptor import ToolDescriptor


class ModelBackend(Protocol):
    """Turns a conversation plus a tool catalog into the next assistant turn.

    Each implementation owns its authentication, endpoint configuration and
    vendor wire format.
    """

    @property
    def name(self) -> str: ...

    async def create_message(
        self,
        prompt: str,
        conversation: list[Turn],
        tools: list[ToolDescriptor],
    ) -> ModelTurnResult:
        """Return the next assistant turn.

        ``prompt`` is the user text that started this round, or "" when the
        model is being asked to react to tool results. It is already the last
        turn of ``conversation`` when non-empty.

        Raises:
            ModelBackendError: if the backend cannot produce a turn.
        """
        ...
