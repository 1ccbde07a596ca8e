"""CLI entrypoint for mcp-host — typer app with `serve`, `tools` and `ask` commands."""

import asyncio
import logging
import sys

import structlog
import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from mcp_host.config.domain.settings import HostSettings
from mcp_host.conversation.domain.turn import Turn, dump_turns
from mcp_host.core.errors import McpHostError
from mcp_host.server.app import create_app
from mcp_host.server.context import open_context
from mcp_host.tools.domain.descriptor import ToolDescriptor

app = typer.Typer(add_completion=False)

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def _configure_structlog(log_format: str, log_level: str) -> None:
    """Configure structlog based on the requested format and level.

    Logs go to stderr so that command output on stdout stays machine-readable.
    """
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    level = _LOG_LEVELS.get(log_level.lower())
    if level is None:
        typer.echo(
            f"Invalid log level: {log_level!r}. Must be one of {', '.join(_LOG_LEVELS)}."
        )
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


_LOG_FORMAT_OPTION = typer.Option(
    "console", "--log-format", help="Log format: 'console' or 'json'"
)
_LOG_LEVEL_OPTION = typer.Option(
    "info", "--log-level", help="Log level: debug, info, warning or error"
)


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Listen host (MCP_SERVER_HOST)"),
    port: int | None = typer.Option(None, "--port", "-p", help="Listen port (MCP_SERVER_PORT)"),
    log_format: str = _LOG_FORMAT_OPTION,
    log_level: str = _LOG_LEVEL_OPTION,
) -> None:
    """Run the HTTP server."""
    _configure_structlog(log_format=log_format, log_level=log_level)
    settings = HostSettings()

    log = structlog.get_logger()
    listen_host = host or settings.server_host
    listen_port = port or settings.server_port
    log.info("server.starting", host=listen_host, port=listen_port, model=settings.model)

    server_app = create_app(context_factory=lambda: open_context(settings=settings))
    uvicorn.run(server_app, host=listen_host, port=listen_port)


@app.command()
def tools(
    log_format: str = _LOG_FORMAT_OPTION,
    log_level: str = _LOG_LEVEL_OPTION,
) -> None:
    """Start the configured tool servers and print their namespaced tools."""
    _configure_structlog(log_format=log_format, log_level=log_level)
    catalog = asyncio.run(_load_catalog(settings=HostSettings()))
    _print_catalog(catalog=catalog)


@app.command()
def ask(
    prompt: str = typer.Argument(..., help="Prompt to resolve"),
    log_format: str = _LOG_FORMAT_OPTION,
    log_level: str = _LOG_LEVEL_OPTION,
) -> None:
    """Resolve one prompt and print the produced turns as JSON."""
    _configure_structlog(log_format=log_format, log_level=log_level)
    try:
        turns = asyncio.run(_ask(settings=HostSettings(), prompt=prompt))
    except McpHostError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(dump_turns(turns).decode("utf-8"))


async def _load_catalog(settings: HostSettings) -> list[ToolDescriptor]:
    async with open_context(settings=settings) as context:
        return context.catalog


async def _ask(settings: HostSettings, prompt: str) -> list[Turn]:
    async with open_context(settings=settings) as context:
        return await context.orchestrator.run(prompt=prompt)


def _print_catalog(catalog: list[ToolDescriptor]) -> None:
    console = Console()
    if not catalog:
        console.print("[dim]No tools available.[/dim]")
        return

    table = Table(title=f"{len(catalog)} tools")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Description")
    for tool in catalog:
        table.add_row(tool.name, tool.description)
    console.print(table)


if __name__ == "__main__":
    app()
