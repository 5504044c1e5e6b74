"""Coalescing trigger state shared by the host's event sources."""

import threading


class PendingFlag:
    """A single "reorder may be needed" flag.

    Any number of ``mark_pending`` calls between two checks collapse into one
    pending reorder.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._pending = False

    def mark_pending(self) -> None:
        with self._lock:
            self._pending = True

    def consume_if_pending(self) -> bool:
        """Clear the flag and report whether it was set."""
        with self._lock:
            pending = self._pending
            self._pending = False
            return pending

    @property
    def is_pending(self) -> bool:
        with self._lock:
            return self._pending
