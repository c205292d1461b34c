# planwright/planning/cancellation.py
"""
Cooperative cancellation token.

Owned by the caller (CLI signal handler, HTTP disconnect watcher), only
observed by the orchestrators at phase and query boundaries. Monotonic:
once cancelled it stays cancelled.
"""

import logging
import threading

from planwright.errors import Cancelled

logger = logging.getLogger(__name__)


class CancellationToken:
    """Settable, thread-safe, one-way flag."""

    def __init__(self) -> None:
        self._event = threading.Event()
        self._reason: str | None = None

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    @property
    def reason(self) -> str | None:
        return self._reason

    def cancel(self, reason: str = "cancelled by caller") -> None:
        """Request cancellation. Later calls keep the first reason."""
        if not self._event.is_set():
            self._reason = reason
            self._event.set()
            logger.info(f"Cancellation requested: {reason}")

    def raise_if_cancelled(self) -> None:
        """Checkpoint: raise Cancelled if the flag is set."""
        if self._event.is_set():
            raise Cancelled(f"Request cancelled ({self._reason})")
