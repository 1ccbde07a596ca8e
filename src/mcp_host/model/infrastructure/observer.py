"""Structlog implementation of the ModelObserver port."""

import structlog


class StructlogModelObserver:
    """Delegates model backend events to structlog.

    Satisfies the ModelObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def model_request_started(self, backend: str, model: str, num_turns: int) -> None:
        self._log.debug(
            "model.request_started", backend=backend, model=model, num_turns=num_turns
        )

    def model_request_completed(
        self,
        backend: str,
        model: str,
        duration_ms: int,
        num_tool_calls: int,
    ) -> None:
        self._log.info(
            "model.request_completed",
            backend=backend,
            model=model,
            duration_ms=duration_ms,
            num_tool_calls=num_tool_calls,
        )

    def model_request_failed(self, backend: str, model: str, reason: str) -> None:
        self._log.error("model.request_failed", backend=backend, model=model, reason=reason)

    def model_unavailable(self, reason: str) -> None:
        self._log.error("model.unavailable", reason=reason)
