"""Cooperative cancellation for command handlers.

A caller creates a :class:`CancellationToken`, hands it to the message bus
and may cancel it from another thread. Handlers check the token between
steps; a cancelled handler leaves its unit of work uncommitted.
"""

from __future__ import annotations

import threading


class OperationCancelledError(Exception):
    """Raised when a handler observes a cancelled token."""


class CancellationToken:
    """Thread-safe, one-way cancellation flag."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        """Request cancellation. Idempotent."""
        self._event.set()

    @property
    def cancelled(self) -> bool:
        """True once :meth:`cancel` has been called."""
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        """Raise :class:`OperationCancelledError` if cancellation was requested."""
        if self._event.is_set():
            raise OperationCancelledError("operation cancelled")


class _NeverCancelled(CancellationToken):
    def cancel(self) -> None:
        raise TypeError("NEVER_CANCELLED cannot be cancelled")


#: Default token for callers that do not support cancellation.
NEVER_CANCELLED: CancellationToken = _NeverCancelled()
