"""Tests for the mcp-host CLI — `ask` and `tools` commands and log configuration."""

import json
from collections.abc import Iterator
from contextlib import AbstractAsyncContextManager
from pathlib import Path

import pytest
import structlog
from typer.testing import CliRunner

from mcp_host.cli.main import app
from mcp_host.config.domain.settings import HostSettings
from mcp_host.model.domain.result import ModelTurnResult
from mcp_host.model.infrastructure.errors import ModelBackendError
from mcp_host.server.context import AppContext, open_context
from tests.model.fake_backend import FakeModelBackend
from tests.tools.fake_connection import FakeToolServerConnection, FakeToolServerLauncher

runner = CliRunner()


@pytest.fixture(autouse=True)
def _config_in_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "mcp.json"
    path.write_text('{"mcpServers": {"fs": {"command": "npx"}}}', encoding="utf-8")
    monkeypatch.setenv("MCP_CONFIG_PATH", str(path))
    monkeypatch.chdir(tmp_path)
    return path


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


def _patch_context(
    monkeypatch: pytest.MonkeyPatch, backend: FakeModelBackend
) -> None:
    launcher = FakeToolServerLauncher(
        connections=[FakeToolServerConnection(server_id="fs", tools=["list_dir"])]
    )

    def fake_open_context(settings: HostSettings) -> AbstractAsyncContextManager[AppContext]:
        return open_context(settings=settings, launcher=launcher, backend=backend)

    monkeypatch.setattr("mcp_host.cli.main.open_context", fake_open_context)


class TestAsk:
    """`ask` resolves one prompt and prints the turns as JSON."""

    def test_prints_turns_as_json(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _patch_context(monkeypatch, FakeModelBackend([ModelTurnResult(text="4")]))

        result = runner.invoke(app, ["ask", "What is 2+2?", "--log-level", "error"])

        assert result.exit_code == 0
        turns = json.loads(result.stdout)
        assert [turn["role"] for turn in turns] == ["user", "assistant"]
        assert turns[1]["content"] == [{"type": "text", "text": "4"}]

    def test_backend_failure_exits_with_code_1(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        _patch_context(
            monkeypatch, FakeModelBackend([ModelBackendError(reason="rate limited")])
        )

        result = runner.invoke(app, ["ask", "hi"])

        assert result.exit_code == 1


class TestTools:
    def test_prints_namespaced_catalog(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _patch_context(monkeypatch, FakeModelBackend())

        result = runner.invoke(app, ["tools"])

        assert result.exit_code == 0
        assert "fs__list_dir" in result.stdout


class TestLogConfiguration:
    """Invalid log options are rejected before any work starts."""

    def test_invalid_log_format_exits_with_code_1(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        backend = FakeModelBackend()
        _patch_context(monkeypatch, backend)

        result = runner.invoke(app, ["ask", "hi", "--log-format", "xml"])

        assert result.exit_code == 1
        assert backend.requests == []

    def test_invalid_log_level_exits_with_code_1(self) -> None:
        result = runner.invoke(app, ["tools", "--log-level", "loud"])

        assert result.exit_code == 1
