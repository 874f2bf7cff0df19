"""Owner of the single editable text buffer."""

from __future__ import annotations
import logging
from typing import Callable

from logic.text_stats import compute_stats
from logic.trigger_engine import TriggerEngine, build_default_graph
from models.text_models import StatsSnapshot

logger = logging.getLogger(__name__)

__all__ = ["BufferController"]


class BufferController:
    """Hold the text buffer, apply transforms and keep statistics current.

    Every mutation goes through :meth:`set_text`, which notifies the trigger
    engine (recomputing the statistics) and then every subscriber.
    """

    def __init__(
        self,
        text: str = "",
        engine: TriggerEngine | None = None,
        words_per_minute: int | None = None,
    ) -> None:
        if engine is None:
            engine = build_default_graph(TriggerEngine(), words_per_minute)
        self._engine = engine
        self._state: dict = {"text": "", "stats": compute_stats("")}
        self._subscribers: list[Callable[[str], None]] = []
        if text:
            self.set_text(text)

    def get_text(self) -> str:
        return self._state["text"]

    def set_text(self, text: str) -> None:
        """Replace the buffer and propagate the change."""
        self._state["text"] = text
        self._engine.notify_change("text", self._state)
        for callback in list(self._subscribers):
            callback(text)

    @property
    def stats(self) -> StatsSnapshot:
        """Statistics as of the last buffer change."""
        return self._state["stats"]

    def apply(self, transform: Callable[[str], str]) -> str:
        """Run ``transform`` on the buffer and store its result."""
        result = transform(self.get_text())
        logger.debug(
            "Applied %s: %d -> %d chars",
            getattr(transform, "__name__", transform),
            len(self.get_text()),
            len(result),
        )
        self.set_text(result)
        return result

    def subscribe(self, callback: Callable[[str], None]) -> Callable[[], None]:
        """Register ``callback`` for buffer changes; return an unsubscribe function."""
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe
