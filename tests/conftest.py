"""Shared fixtures: keep host environment variables out of settings-driven tests."""

import os

import pytest

# litellm fetches its model cost map over the network at import time; use the
# bundled copy so test collection does not depend on network access.
os.environ.setdefault("LITELLM_LOCAL_MODEL_COST_MAP", "True")

_HOST_ENV_VARS = (
    "MCP_SERVER_HOST",
    "MCP_SERVER_PORT",
    "MCP_CONFIG_PATH",
    "MCP_MESSAGE_WINDOW",
    "MCP_MODEL",
    "MCP_MAX_ROUNDS",
    "MCP_TOOL_CALL_TIMEOUT",
    "ANTHROPIC_API_KEY",
    "ANTHROPIC_BASE_URL",
    "OPENAI_API_KEY",
    "OPENAI_BASE_URL",
    "OLLAMA_BASE_URL",
    "LIB_NAME",
    "LIB_VERSION",
)


@pytest.fixture(autouse=True)
def _clean_host_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _HOST_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
