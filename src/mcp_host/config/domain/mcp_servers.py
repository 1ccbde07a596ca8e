"""Tool-server launch configuration models."""

from pydantic import BaseModel, ConfigDict, Field

type ServerId = str


class ServerLaunchSpec(BaseModel, frozen=True):
    """How to start one tool server as a stdio subprocess."""

    command: str = Field(min_length=1)
    args: list[str] = Field(default_factory=list)
    env: dict[str, str] = Field(default_factory=dict)


class McpServersConfig(BaseModel, frozen=True):
    """Root of the tool-server config document (``{"mcpServers": {...}}``)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    mcp_servers: dict[ServerId, ServerLaunchSpec] = Field(
        default_factory=dict, alias="mcpServers"
    )
