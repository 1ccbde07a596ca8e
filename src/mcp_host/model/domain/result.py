"""ToolCallRequest and ModelTurnResult — what one model call produces."""

from typing import Any

from pydantic import BaseModel, Field

from mcp_host.model.domain.usage import UsageMetrics


class ToolCallRequest(BaseModel, frozen=True):
    """One tool invocation requested by the model.

    ``arguments`` is whatever the backend could decode; it is normally a JSON
    object, but a backend passes through anything it could not parse so that
    the orchestrator can reject it.
    """

    id: str
    name: str
    arguments: Any = Field(default_factory=dict)


class ModelTurnResult(BaseModel, frozen=True):
    """A single assistant turn returned by a model backend."""

    text: str | None = None
    tool_calls: list[ToolCallRequest] = Field(default_factory=list)
    usage: UsageMetrics | None = None
