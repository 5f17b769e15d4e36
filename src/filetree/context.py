"""Cooperative cancellation and deadline signal for scans."""

from __future__ import annotations

import threading
import time

from filetree.errors import ScanCancelledError, ScanDeadlineExceededError


class ScanContext:
    """Cancellation/deadline signal polled by the scanner.

    The scanner never interrupts itself; it calls :meth:`check` at every
    node visit and sibling iteration. :meth:`cancel` is safe to call from
    any thread.
    """

    def __init__(
        self,
        timeout: float | None = None,
        cancel_event: threading.Event | None = None,
    ) -> None:
        """Initialize the context.

        Args:
            timeout: Seconds from now until the deadline. ``None`` means
                no deadline.
            cancel_event: Optional externally owned event. Setting it
                cancels the scan.
        """
        self._event = cancel_event if cancel_event is not None else threading.Event()
        self._deadline: float | None = None
        if timeout is not None:
            self._deadline = time.monotonic() + timeout

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    @property
    def deadline_exceeded(self) -> bool:
        return self._deadline is not None and time.monotonic() >= self._deadline

    def remaining(self) -> float | None:
        """Return seconds left before the deadline, or ``None`` without one."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def check(self) -> None:
        """Raise if the scan should stop.

        Raises:
            ScanCancelledError: When :meth:`cancel` was called.
            ScanDeadlineExceededError: When the deadline has passed.
        """
        if self._event.is_set():
            raise ScanCancelledError()
        if self.deadline_exceeded:
            raise ScanDeadlineExceededError()
