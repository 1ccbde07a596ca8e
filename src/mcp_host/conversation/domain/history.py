"""MessageHistory — the long-lived, append-only log of every completed conversation."""

import threading

from mcp_host.conversation.domain.turn import Turn


class MessageHistory:
    """Append-only turn log shared by all prompt resolutions.

    Every turn is retained for the life of the process; only a trailing window
    is exposed through ``recent_window``. A window size of 0 means unbounded.

    The lock is never held across an ``await``, so it is safe to use from
    coroutines running on the event loop as well as from worker threads.
    """

    def __init__(self, window_size: int = 10) -> None:
        if window_size < 0:
            raise ValueError(f"window_size must be >= 0, got {window_size}")
        self._window_size = window_size
        self._turns: list[Turn] = []
        self._lock = threading.Lock()

    @property
    def window_size(self) -> int:
        return self._window_size

    def append(self, *turns: Turn) -> None:
        """Append turns in order. All turns land together or not at all."""
        with self._lock:
            self._turns.extend(turns)

    def recent_window(self, n: int | None = None) -> list[Turn]:
        """Return the last ``n`` turns in original order (defaults to the window size)."""
        size = self._window_size if n is None else n
        with self._lock:
            if size <= 0 or size >= len(self._turns):
                return list(self._turns)
            return self._turns[-size:]

    def all(self) -> list[Turn]:
        with self._lock:
            return list(self._turns)

    def __len__(self) -> int:
        with self._lock:
            return len(self._turns)
