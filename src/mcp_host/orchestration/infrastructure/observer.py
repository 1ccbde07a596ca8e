"""Structlog implementation of the OrchestrationObserver port."""

import structlog


class StructlogOrchestrationObserver:
    """Delegates orchestration events to structlog.

    Satisfies the OrchestrationObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def prompt_received(self, prompt: str) -> None:
        self._log.info("orchestration.prompt_received", prompt=prompt)

    def model_responded(self, round_idx: int, text: str | None, num_tool_calls: int) -> None:
        self._log.info(
            "orchestration.model_responded",
            round_idx=round_idx,
            text=text,
            num_tool_calls=num_tool_calls,
        )

    def usage_reported(self, round_idx: int, input_tokens: int, output_tokens: int) -> None:
        self._log.info(
            "orchestration.usage_reported",
            round_idx=round_idx,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            total_tokens=input_tokens + output_tokens,
        )

    def tool_call_started(self, tool_name: str, tool_use_id: str) -> None:
        self._log.info(
            "orchestration.tool_call_started", tool=tool_name, tool_use_id=tool_use_id
        )

    def tool_call_skipped(self, tool_name: str, reason: str) -> None:
        self._log.warning("orchestration.tool_call_skipped", tool=tool_name, reason=reason)

    def tool_call_failed(self, tool_name: str, reason: str) -> None:
        self._log.warning("orchestration.tool_call_failed", tool=tool_name, reason=reason)

    def tool_call_completed(self, tool_name: str, result_text: str) -> None:
        self._log.debug(
            "orchestration.tool_call_completed", tool=tool_name, result_text=result_text
        )

    def prompt_completed(
        self,
        num_turns: int,
        num_rounds: int,
        input_tokens: int,
        output_tokens: int,
    ) -> None:
        self._log.info(
            "orchestration.prompt_completed",
            num_turns=num_turns,
            num_rounds=num_rounds,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )

    def prompt_failed(self, reason: str) -> None:
        self._log.error("orchestration.prompt_failed", reason=reason)
