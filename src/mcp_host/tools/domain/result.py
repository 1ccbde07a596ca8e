"""ToolResult value object — the raw output of one tool invocation."""

from pydantic import BaseModel, Field

from mcp_host.conversation.domain.content import ToolResultItem, flatten_result_text


class ToolResult(BaseModel, frozen=True):
    items: list[ToolResultItem] = Field(default_factory=list)
    is_error: bool = False

    @property
    def text(self) -> str:
        return flatten_result_text(self.items)
