"""LiteLLMBackend — model backend implementation routed through LiteLLM.

LiteLLM speaks the OpenAI chat-completions shape for every provider, so this
module only has to translate between conversation turns and that one format:

- a user text block becomes ``{"role": "user", "content": text}``;
- an assistant turn becomes one assistant message with optional ``tool_calls``;
- each tool_result block, in either role, becomes a ``{"role": "tool", "tool_call_id": ...}`` message.
"""

import json
import time
import uuid
from typing import Any

import litellm
from pydantic import ValidationError

from mcp_host.conversation.domain.turn import Turn
from mcp_host.model.domain.observer import ModelObserver
from mcp_host.model.domain.result import ModelTurnResult, ToolCallRequest
from mcp_host.model.domain.selection import ModelSelection, ProviderKind
from mcp_host.model.domain.usage import UsageMetrics
from mcp_host.model.infrastructure.errors import ModelBackendError
from mcp_host.tools.domain.descriptor import ToolDescriptor

# LiteLLM route prefix per provider. Ollama's chat route is the one that
# supports native tool calling.
_ROUTE_PREFIX: dict[ProviderKind, str] = {
    ProviderKind.ANTHROPIC: "anthropic",
    ProviderKind.OPENAI: "openai",
    ProviderKind.OLLAMA: "ollama_chat",
}


class LiteLLMBackend:
    """Model backend that delegates to a provider via LiteLLM.

    One instance is constructed at startup and shared by every prompt
    resolution; it holds no per-conversation state.
    """

    def __init__(
        self,
        selection: ModelSelection,
        observer: ModelObserver,
        api_key: str | None = None,
        api_base: str | None = None,
    ) -> None:
        self._selection = selection
        self._observer = observer
        self._api_key = api_key
        self._api_base = api_base
        self._route = f"{_ROUTE_PREFIX[selection.provider]}/{selection.model}"

    @property
    def name(self) -> str:
        return self._selection.provider.value

    @property
    def route(self) -> str:
        return self._route

    async def create_message(
        self,
        prompt: str,
        conversation: list[Turn],
        tools: list[ToolDescriptor],
    ) -> ModelTurnResult:
        """Send the conversation to the model and map the reply to a ModelTurnResult.

        Raises:
            ModelBackendError: if the LiteLLM call fails or the reply is unusable.
        """
        self._observer.model_request_started(
            backend=self.name, model=self._selection.model, num_turns=len(conversation)
        )

        kwargs: dict[str, Any] = {
            "model": self._route,
            "messages": to_chat_messages(conversation),
        }
        if tools:
            kwargs["tools"] = [_to_function_tool(tool) for tool in tools]
        if self._api_key:
            kwargs["api_key"] = self._api_key
        if self._api_base:
            kwargs["api_base"] = self._api_base

        start = time.monotonic()
        try:
            response = await litellm.acompletion(**kwargs)
        except Exception as exc:
            self._report_failure(reason=str(exc))
            raise ModelBackendError(reason=str(exc)) from exc

        try:
            result = _to_turn_result(response)
        except ModelBackendError as exc:
            self._report_failure(reason=exc.reason)
            raise

        self._observer.model_request_completed(
            backend=self.name,
            model=self._selection.model,
            duration_ms=int((time.monotonic() - start) * 1000),
            num_tool_calls=len(result.tool_calls),
        )
        return result

    def _report_failure(self, reason: str) -> None:
        self._observer.model_request_failed(
            backend=self.name, model=self._selection.model, reason=reason
        )


def to_chat_messages(conversation: list[Turn]) -> list[dict[str, Any]]:
    """Translate turns into OpenAI-format chat messages."""
    messages: list[dict[str, Any]] = []
    for turn in conversation:
        if turn.role == "assistant":
            message: dict[str, Any] = {"role": "assistant", "content": turn.text or None}
            tool_uses = turn.tool_uses
            if tool_uses:
                message["tool_calls"] = [
                    {
                        "id": use.id,
                        "type": "function",
                        "function": {"name": use.name, "arguments": json.dumps(use.input)},
                    }
                    for use in tool_uses
                ]
            elif message["content"] is None:
                message["content"] = ""
            messages.append(message)
            messages.extend(_to_tool_messages(turn))
            continue

        messages.extend(_to_tool_messages(turn))
        if turn.text:
            messages.append({"role": "user", "content": turn.text})
    return messages


def _to_tool_messages(turn: Turn) -> list[dict[str, Any]]:
    return [
        {"role": "tool", "tool_call_id": result.tool_use_id, "content": result.text}
        for result in turn.tool_results
    ]


def _to_function_tool(tool: ToolDescriptor) -> dict[str, Any]:
    return {
        "type": "function",
        "function": {
            "name": tool.name,
            "description": tool.description,
            "parameters": tool.input_schema,
        },
    }


def _to_turn_result(response: Any) -> ModelTurnResult:
    if not response.choices:
        raise ModelBackendError(reason="response contained no choices")

    message = response.choices[0].message
    try:
        tool_calls = [
            ToolCallRequest(
                id=call.id or f"call_{uuid.uuid4().hex[:12]}",
                name=call.function.name,
                arguments=_decode_arguments(call.function.arguments),
            )
            for call in (getattr(message, "tool_calls", None) or [])
        ]
        return ModelTurnResult(
            text=message.content or None,
            tool_calls=tool_calls,
            usage=_map_usage(getattr(response, "usage", None)),
        )
    except ValidationError as exc:
        raise ModelBackendError(reason=f"malformed response: {exc}") from exc


def _decode_arguments(raw: Any) -> Any:
    """Decode JSON-string arguments; undecodable strings are passed through as-is."""
    if not isinstance(raw, str):
        return raw if raw is not None else {}
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _map_usage(raw: Any) -> UsageMetrics | None:
    if raw is None:
        return None
    return UsageMetrics(
        input_tokens=getattr(raw, "prompt_tokens", 0) or 0,
        output_tokens=getattr(raw, "completion_tokens", 0) or 0,
    )
