"""FakeModelBackend — in-memory ModelBackend implementation for use in tests."""

from dataclasses import dataclass

from mcp_host.conversation.domain.turn import Turn
from mcp_host.model.domain.result import ModelTurnResult
from mcp_host.tools.domain.descriptor import ToolDescriptor


@dataclass(frozen=True)
class RecordedRequest:
    prompt: str
    conversation: list[Turn]
    tools: list[ToolDescriptor]


class FakeModelBackend:
    """Satisfies the ModelBackend protocol. Replays scripted replies in order.

    Each call pops from the front of ``replies``:
    - If the item is an Exception, it is raised.
    - If the item is a ModelTurnResult, it is returned.
    Once the list is exhausted, a plain text reply with no tool calls is returned.
    """

    def __init__(self, replies: list[ModelTurnResult | Exception] | None = None) -> None:
        self._replies: list[ModelTurnResult | Exception] = list(replies or [])
        self.requests: list[RecordedRequest] = []

    def enqueue(self, *replies: ModelTurnResult | Exception) -> None:
        self._replies.extend(replies)

    @property
    def name(self) -> str:
        return "fake"

    async def create_message(
        self,
        prompt: str,
        conversation: list[Turn],
        tools: list[ToolDescriptor],
    ) -> ModelTurnResult:
        self.requests.append(
            RecordedRequest(prompt=prompt, conversation=list(conversation), tools=list(tools))
        )
        if self._replies:
            reply = self._replies.pop(0)
            if isinstance(reply, Exception):
                raise reply
            return reply
        return ModelTurnResult(text="done")
