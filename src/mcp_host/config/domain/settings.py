"""HostSettings — process-wide settings read from the environment and ``.env``."""

from pathlib import Path
from typing import Any

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SERVER_PORT = 8115
DEFAULT_MESSAGE_WINDOW = 10
DEFAULT_MAX_ROUNDS = 20
DEFAULT_TOOL_CALL_TIMEOUT = 60.0


def _int_or_default(value: Any, default: int, minimum: int = 0) -> Any:
    """Unparsable integers, or ones below minimum, fall back to the default."""
    if value is None or value == "":
        return default
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return default
    return parsed if parsed >= minimum else default


def _positive_float_or_default(value: Any, default: float) -> Any:
    if value is None or value == "":
        return default
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return default
    return parsed if parsed > 0 else default


class HostSettings(BaseSettings):
    """Settings for one mcp-host process.

    Field names are Pythonic; each reads the environment variable named in its
    ``validation_alias``. Construct with field names in tests (``populate_by_name``).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )

    server_host: str = Field("0.0.0.0", validation_alias="MCP_SERVER_HOST")
    server_port: int = Field(DEFAULT_SERVER_PORT, validation_alias="MCP_SERVER_PORT")
    config_path: Path | None = Field(None, validation_alias="MCP_CONFIG_PATH")
    message_window: int = Field(
        DEFAULT_MESSAGE_WINDOW, validation_alias="MCP_MESSAGE_WINDOW"
    )
    model: str = Field(
        "anthropic:claude-3-5-sonnet-latest", validation_alias="MCP_MODEL"
    )
    max_rounds: int = Field(
        DEFAULT_MAX_ROUNDS, ge=1, validation_alias="MCP_MAX_ROUNDS"
    )
    tool_call_timeout: float = Field(
        DEFAULT_TOOL_CALL_TIMEOUT, gt=0.0, validation_alias="MCP_TOOL_CALL_TIMEOUT"
    )

    anthropic_api_key: SecretStr | None = Field(
        None, validation_alias="ANTHROPIC_API_KEY"
    )
    anthropic_base_url: str | None = Field(None, validation_alias="ANTHROPIC_BASE_URL")
    openai_api_key: SecretStr | None = Field(None, validation_alias="OPENAI_API_KEY")
    openai_base_url: str | None = Field(None, validation_alias="OPENAI_BASE_URL")
    ollama_base_url: str | None = Field(None, validation_alias="OLLAMA_BASE_URL")

    client_name: str = Field("mcp-host", validation_alias="LIB_NAME")
    client_version: str = Field("0.1.0", validation_alias="LIB_VERSION")

    @field_validator("server_port", mode="before")
    @classmethod
    def _port_or_default(cls, value: Any) -> Any:
        return _int_or_default(value, DEFAULT_SERVER_PORT)

    @field_validator("message_window", mode="before")
    @classmethod
    def _window_or_default(cls, value: Any) -> Any:
        return _int_or_default(value, DEFAULT_MESSAGE_WINDOW)

    @field_validator("max_rounds", mode="before")
    @classmethod
    def _rounds_or_default(cls, value: Any) -> Any:
        return _int_or_default(value, DEFAULT_MAX_ROUNDS, minimum=1)

    @field_validator("tool_call_timeout", mode="before")
    @classmethod
    def _timeout_or_default(cls, value: Any) -> Any:
        return _positive_float_or_default(value, DEFAULT_TOOL_CALL_TIMEOUT)

    @field_validator(
        "config_path",
        "anthropic_api_key",
        "anthropic_base_url",
        "openai_api_key",
        "openai_base_url",
        "ollama_base_url",
        mode="before",
    )
    @classmethod
    def _blank_is_unset(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value
