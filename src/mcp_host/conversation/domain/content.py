"""Content block value objects — the atomic pieces of a conversation turn.

A turn's content is an ordered list of blocks. Each block is one variant of a
tagged union discriminated on ``type``:

- ``text``: free text authored by the user or the model.
- ``tool_use``: a request from the model to invoke a namespaced tool.
- ``tool_result``: the outcome of a tool invocation, carrying both the raw
  structured result items and a flattened text summary.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class ToolResultItem(BaseModel, frozen=True):
    """One item of raw tool output.

    Tool servers return heterogeneous items (text, images, embedded resources).
    Only ``type`` and an optional ``text`` are modelled; any other fields are
    preserved verbatim so the raw result survives serialization.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    type: str
    text: str | None = None


def flatten_result_text(items: list[ToolResultItem]) -> str:
    """Join the text of every item that carries one, separated by spaces."""
    return " ".join(item.text for item in items if item.text is not None).strip()


class TextBlock(BaseModel, frozen=True):
    type: Literal["text"] = "text"
    text: str


class ToolUseBlock(BaseModel, frozen=True):
    """A tool invocation requested by the model."""

    type: Literal["tool_use"] = "tool_use"
    id: str
    name: str
    input: Any = Field(default_factory=dict)


class ToolResultBlock(BaseModel, frozen=True):
    """The result of one tool invocation, matched to its request by tool_use_id."""

    type: Literal["tool_result"] = "tool_result"
    tool_use_id: str
    content: list[ToolResultItem] = Field(default_factory=list)
    text: str = ""
    is_error: bool = False

    @classmethod
    def from_items(cls, tool_use_id: str, items: list[ToolResultItem]) -> "ToolResultBlock":
        return cls(
            tool_use_id=tool_use_id,
            content=list(items),
            text=flatten_result_text(items),
        )

    @classmethod
    def from_error(cls, tool_use_id: str, message: str) -> "ToolResultBlock":
        return cls(
            tool_use_id=tool_use_id,
            content=[ToolResultItem(type="text", text=message)],
            text=message,
            is_error=True,
        )


type ContentBlock = Annotated[
    TextBlock | ToolUseBlock | ToolResultBlock,
    Field(discriminator="type"),
]
