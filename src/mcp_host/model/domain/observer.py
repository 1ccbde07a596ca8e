"""ModelObserver port — domain events emitted around model backend calls."""

from typing import Protocol


class ModelObserver(Protocol):
    def model_request_started(self, backend: str, model: str, num_turns: int) -> None: ...

    def model_request_completed(
        self,
        backend: str,
        model: str,
        duration_ms: int,
        num_tool_calls: int,
    ) -> None: ...

    def model_request_failed(self, backend: str, model: str, reason: str) -> None: ...

    def model_unavailable(self, reason: str) -> None: ...
