"""Orchestrator — resolves a user prompt through rounds of model queries and tool calls."""

from dataclasses import dataclass

from mcp_host.conversation.domain.content import (
    ContentBlock,
    TextBlock,
    ToolResultBlock,
    ToolUseBlock,
)
from mcp_host.conversation.domain.history import MessageHistory
from mcp_host.conversation.domain.turn import Turn
from mcp_host.core.errors import McpHostError
from mcp_host.model.domain.backend import ModelBackend
from mcp_host.model.domain.result import ModelTurnResult, ToolCallRequest
from mcp_host.model.domain.usage import UsageMetrics
from mcp_host.orchestration.application.errors import (
    EmptyPromptError,
    RoundLimitExceededError,
)
from mcp_host.orchestration.domain.observer import OrchestrationObserver
from mcp_host.orchestration.domain.router import ToolRouter
from mcp_host.tools.domain.descriptor import ToolDescriptor
from mcp_host.tools.infrastructure.errors import (
    MalformedToolNameError,
    ToolInvocationError,
    ToolServerNotFoundError,
)

DEFAULT_MAX_ROUNDS = 20


@dataclass(frozen=True)
class _RoundOutcome:
    """The turns produced by one model round."""

    assistant_turn: Turn
    results_turn: Turn | None


class Orchestrator:
    """Runs the query-model / dispatch-tools loop for one prompt at a time.

    Each call to ``run`` owns a fresh conversation: the model sees only the
    turns of the current resolution. On success those turns are merged into the
    shared long-lived history; on failure nothing is merged.

    The orchestrator is free of infrastructure dependencies. It receives the
    backend, the tool router and the catalog so that fakes can be swapped in
    for testing.
    """

    def __init__(
        self,
        backend: ModelBackend,
        router: ToolRouter,
        catalog: list[ToolDescriptor],
        history: MessageHistory,
        observer: OrchestrationObserver,
        max_rounds: int = DEFAULT_MAX_ROUNDS,
    ) -> None:
        self._backend = backend
        self._router = router
        self._catalog = list(catalog)
        self._history = history
        self._observer = observer
        self._max_rounds = max_rounds

    @property
    def catalog(self) -> list[ToolDescriptor]:
        return list(self._catalog)

    async def run(self, prompt: str) -> list[Turn]:
        """Resolve a prompt and return every turn produced, starting with the prompt.

        Tool calls within a round are dispatched sequentially in model order.
        After a round with at least one successful tool result the model is
        queried again with an empty prompt; the loop ends on a round without one.

        Raises:
            EmptyPromptError: if prompt is blank.
            ModelBackendError: if any model query fails.
            RoundLimitExceededError: if the model is still requesting tools
                after max_rounds queries.
        """
        if not prompt.strip():
            raise EmptyPromptError()

        self._observer.prompt_received(prompt=prompt)
        conversation: list[Turn] = [Turn.user_text(prompt)]
        usage = UsageMetrics()
        round_prompt = prompt
        rounds = 0

        while True:
            if rounds >= self._max_rounds:
                error = RoundLimitExceededError(max_rounds=self._max_rounds)
                self._observer.prompt_failed(reason=str(error))
                raise error

            reply = await self._query_model(prompt=round_prompt, conversation=conversation)
            self._observer.model_responded(
                round_idx=rounds, text=reply.text, num_tool_calls=len(reply.tool_calls)
            )
            if reply.usage is not None:
                usage = usage + reply.usage
                self._observer.usage_reported(
                    round_idx=rounds,
                    input_tokens=reply.usage.input_tokens,
                    output_tokens=reply.usage.output_tokens,
                )
            rounds += 1

            outcome = await self._dispatch(reply=reply)
            conversation.append(outcome.assistant_turn)
            if outcome.results_turn is None:
                break
            conversation.append(outcome.results_turn)
            round_prompt = ""

        self._history.append(*conversation)
        self._observer.prompt_completed(
            num_turns=len(conversation),
            num_rounds=rounds,
            input_tokens=usage.input_tokens,
            output_tokens=usage.output_tokens,
        )
        return conversation

    async def _query_model(self, prompt: str, conversation: list[Turn]) -> ModelTurnResult:
        try:
            return await self._backend.create_message(
                prompt=prompt,
                conversation=list(conversation),
                tools=self.catalog,
            )
        except McpHostError as exc:
            self._observer.prompt_failed(reason=str(exc))
            raise

    async def _dispatch(self, reply: ModelTurnResult) -> _RoundOutcome:
        """Invoke each requested tool in order and collect the round's turns.

        Calls that cannot be routed (bad arguments, malformed name, unknown
        server) are skipped without any block. A failing call keeps its
        tool_use block and gets an error tool_result right after it in the
        assistant turn. Only successful results go into the following user
        turn, and only that turn sends the loop back to the model.
        """
        assistant_content: list[ContentBlock] = []
        results: list[ContentBlock] = []

        if reply.text:
            assistant_content.append(TextBlock(text=reply.text))

        for call in reply.tool_calls:
            result = await self._invoke(call=call)
            if result is None:
                continue
            assistant_content.append(
                ToolUseBlock(id=call.id, name=call.name, input=call.arguments)
            )
            if result.is_error:
                assistant_content.append(result)
            else:
                results.append(result)

        assistant_turn = Turn(role="assistant", content=assistant_content)
        results_turn = Turn(role="user", content=results) if results else None
        return _RoundOutcome(assistant_turn=assistant_turn, results_turn=results_turn)

    async def _invoke(self, call: ToolCallRequest) -> ToolResultBlock | None:
        """Return the call's result block, or None if the call was skipped."""
        if not isinstance(call.arguments, dict):
            self._observer.tool_call_skipped(
                tool_name=call.name, reason="arguments are not a JSON object"
            )
            return None

        self._observer.tool_call_started(tool_name=call.name, tool_use_id=call.id)
        try:
            result = await self._router.invoke(name=call.name, arguments=call.arguments)
        except (MalformedToolNameError, ToolServerNotFoundError) as exc:
            self._observer.tool_call_skipped(tool_name=call.name, reason=str(exc))
            return None
        except ToolInvocationError as exc:
            self._observer.tool_call_failed(tool_name=call.name, reason=str(exc))
            return ToolResultBlock.from_error(tool_use_id=call.id, message=str(exc))

        block = ToolResultBlock.from_items(tool_use_id=call.id, items=result.items)
        self._observer.tool_call_completed(tool_name=call.name, result_text=block.text)
        return block
