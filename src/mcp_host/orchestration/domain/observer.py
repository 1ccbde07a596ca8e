"""OrchestrationObserver port — domain events emitted while resolving a prompt."""

from typing import Protocol


class OrchestrationObserver(Protocol):
    """Observer port for orchestration loop events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def prompt_received(self, prompt: str) -> None: ...

    def model_responded(self, round_idx: int, text: str | None, num_tool_calls: int) -> None: ...

    def usage_reported(self, round_idx: int, input_tokens: int, output_tokens: int) -> None: ...

    def tool_call_started(self, tool_name: str, tool_use_id: str) -> None: ...

    def tool_call_skipped(self, tool_name: str, reason: str) -> None: ...

    def tool_call_failed(self, tool_name: str, reason: str) -> None: ...

    def tool_call_completed(self, tool_name: str, result_text: str) -> None: ...

    def prompt_completed(
        self,
        num_turns: int,
        num_rounds: int,
        input_tokens: int,
        output_tokens: int,
    ) -> None: ...

    def prompt_failed(self, reason: str) -> None: ...
