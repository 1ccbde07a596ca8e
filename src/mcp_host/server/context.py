"""AppContext — the single object holding everything request handlers share.

Built once at startup by ``open_context`` and torn down at shutdown. Startup is
forgiving per component: a misconfigured model backend or a failed tool-server
batch is reported and replaced by an unavailable backend or an empty tool set,
so the server still answers health, catalog and history requests.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from mcp_host.config.domain.mcp_servers import McpServersConfig
from mcp_host.config.domain.observer import ConfigObserver
from mcp_host.config.domain.settings import HostSettings
from mcp_host.config.infrastructure.json_loader import JsonConfigLoader
from mcp_host.config.infrastructure.observer import StructlogConfigObserver
from mcp_host.conversation.domain.history import MessageHistory
from mcp_host.core.errors import McpHostError
from mcp_host.model.domain.backend import ModelBackend
from mcp_host.model.domain.observer import ModelObserver
from mcp_host.model.infrastructure.observer import StructlogModelObserver
from mcp_host.model.infrastructure.registry import create_model_backend
from mcp_host.model.infrastructure.unavailable import UnavailableModelBackend
from mcp_host.orchestration.application.orchestrator import Orchestrator
from mcp_host.orchestration.infrastructure.observer import StructlogOrchestrationObserver
from mcp_host.tools.application.registry import ToolServerRegistry
from mcp_host.tools.domain.connection import ToolServerLauncher
from mcp_host.tools.domain.descriptor import ToolDescriptor
from mcp_host.tools.infrastructure.observer import StructlogToolRegistryObserver
from mcp_host.tools.infrastructure.stdio import McpStdioLauncher


@dataclass(frozen=True)
class AppContext:
    settings: HostSettings
    backend: ModelBackend
    registry: ToolServerRegistry
    catalog: list[ToolDescriptor]
    history: MessageHistory
    orchestrator: Orchestrator


@asynccontextmanager
async def open_context(
    settings: HostSettings,
    launcher: ToolServerLauncher | None = None,
    backend: ModelBackend | None = None,
) -> AsyncIterator[AppContext]:
    """Build the application context and shut its tool servers down on exit.

    ``launcher`` and ``backend`` default to the MCP stdio launcher and the
    backend selected by settings.model.
    """
    if backend is None:
        backend = _create_backend(settings=settings, observer=StructlogModelObserver())

    servers = _load_servers(settings=settings, observer=StructlogConfigObserver())

    registry = ToolServerRegistry(
        launcher=launcher
        or McpStdioLauncher(
            client_name=settings.client_name, client_version=settings.client_version
        ),
        observer=StructlogToolRegistryObserver(),
        call_timeout=settings.tool_call_timeout,
    )

    try:
        try:
            await registry.register_all(servers.mcp_servers)
        except McpHostError:
            # Reported through the registry observer; the batch was rolled back
            # and the server continues without tools.
            pass

        catalog = await registry.build_catalog()
        history = MessageHistory(window_size=settings.message_window)
        orchestrator = Orchestrator(
            backend=backend,
            router=registry,
            catalog=catalog,
            history=history,
            observer=StructlogOrchestrationObserver(),
            max_rounds=settings.max_rounds,
        )
        yield AppContext(
            settings=settings,
            backend=backend,
            registry=registry,
            catalog=catalog,
            history=history,
            orchestrator=orchestrator,
        )
    finally:
        await registry.shutdown()


def _create_backend(settings: HostSettings, observer: ModelObserver) -> ModelBackend:
    try:
        return create_model_backend(settings=settings, observer=observer)
    except McpHostError as exc:
        observer.model_unavailable(reason=str(exc))
        return UnavailableModelBackend(reason=str(exc))


def _load_servers(settings: HostSettings, observer: ConfigObserver) -> McpServersConfig:
    try:
        return JsonConfigLoader(observer=observer).load(path=settings.config_path)
    except McpHostError as exc:
        observer.config_load_failed(path=settings.config_path, reason=str(exc))
        return McpServersConfig()
