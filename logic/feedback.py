"""Transient acknowledgements shown on toolbar controls."""

from __future__ import annotations
import time
from typing import Callable

__all__ = ["FeedbackTracker", "DEFAULT_ACK_SECONDS"]

DEFAULT_ACK_SECONDS = 2.0


class FeedbackTracker:
    """Track per-control acknowledgement windows.

    Triggering a control again while its window is open replaces the
    deadline, so the window always runs from the latest action.
    """

    def __init__(
        self,
        duration: float = DEFAULT_ACK_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.duration = duration
        self._clock = clock
        self._deadlines: dict[str, float] = {}

    def trigger(self, control: str, duration: float | None = None) -> None:
        """Start (or restart) the acknowledgement for ``control``."""
        span = self.duration if duration is None else duration
        self._deadlines[control] = self._clock() + span

    def is_active(self, control: str) -> bool:
        deadline = self._deadlines.get(control)
        if deadline is None:
            return False
        if self._clock() >= deadline:
            # expired windows revert on the next check
            del self._deadlines[control]
            return False
        return True
