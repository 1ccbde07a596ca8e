"""FastAPI application exposing the health, prompt, tool and history endpoints."""

from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Any

from fastapi import APIRouter, Depends, FastAPI, Form, Request
from fastapi.responses import PlainTextResponse, Response
from pydantic import TypeAdapter
from pydantic_core import PydanticSerializationError

from mcp_host.conversation.domain.turn import TURN_LIST_ADAPTER
from mcp_host.core.errors import McpHostError
from mcp_host.server.context import AppContext
from mcp_host.tools.domain.descriptor import ToolDescriptor

type ContextFactory = Callable[[], AbstractAsyncContextManager[AppContext]]

_CATALOG_ADAPTER: TypeAdapter[list[ToolDescriptor]] = TypeAdapter(list[ToolDescriptor])

router = APIRouter()


def create_app(context_factory: ContextFactory) -> FastAPI:
    """Build the app; the context is opened on startup and closed on shutdown."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        async with context_factory() as context:
            app.state.context = context
            yield

    app = FastAPI(title="mcp-host", lifespan=lifespan)
    app.include_router(router)
    return app


def get_context(request: Request) -> AppContext:
    return request.app.state.context


@router.get("/health", response_class=PlainTextResponse)
async def health() -> str:
    return "Server is healthy"


@router.post("/prompt")
async def run_prompt(
    prompt: str = Form(""),
    context: AppContext = Depends(get_context),
) -> Response:
    if not prompt.strip():
        return PlainTextResponse("Prompt is required", status_code=400)

    try:
        turns = await context.orchestrator.run(prompt=prompt)
    except McpHostError as exc:
        return PlainTextResponse(f"Error executing prompt: {exc}", status_code=500)

    return _json_response(adapter=TURN_LIST_ADAPTER, value=turns)


@router.get("/tool")
async def tools(context: AppContext = Depends(get_context)) -> Response:
    return _json_response(adapter=_CATALOG_ADAPTER, value=context.catalog)


@router.get("/history")
async def history(context: AppContext = Depends(get_context)) -> Response:
    return _json_response(adapter=TURN_LIST_ADAPTER, value=context.history.recent_window())


def _json_response(adapter: TypeAdapter[Any], value: Any) -> Response:
    try:
        body = adapter.dump_json(value)
    except PydanticSerializationError as exc:
        return PlainTextResponse(f"Error marshaling response: {exc}", status_code=500)
    return Response(content=body, media_type="application/json")
