"""Turn value object — one role-tagged entry in a conversation."""

from typing import Literal

from pydantic import BaseModel, TypeAdapter

from mcp_host.conversation.domain.content import (
    ContentBlock,
    TextBlock,
    ToolResultBlock,
    ToolUseBlock,
)

type Role = Literal["user", "assistant"]


class Turn(BaseModel, frozen=True):
    """An immutable conversation turn: a role and an ordered list of content blocks."""

    role: Role
    content: list[ContentBlock]

    @classmethod
    def user_text(cls, text: str) -> "Turn":
        return cls(role="user", content=[TextBlock(text=text)])

    @property
    def text(self) -> str:
        """Concatenated text of every text block in this turn."""
        return "".join(
            block.text for block in self.content if isinstance(block, TextBlock)
        )

    @property
    def tool_uses(self) -> list[ToolUseBlock]:
        return [block for block in self.content if isinstance(block, ToolUseBlock)]

    @property
    def tool_results(self) -> list[ToolResultBlock]:
        return [block for block in self.content if isinstance(block, ToolResultBlock)]


TURN_LIST_ADAPTER: TypeAdapter[list[Turn]] = TypeAdapter(list[Turn])


def dump_turns(turns: list[Turn]) -> bytes:
    """Serialize turns to their JSON wire format."""
    return TURN_LIST_ADAPTER.dump_json(turns)


def load_turns(data: str | bytes) -> list[Turn]:
    """Parse turns from their JSON wire format.

    Raises:
        pydantic.ValidationError: if the payload does not describe a list of turns.
    """
    return TURN_LIST_ADAPTER.validate_json(data)
