"""Change propagation between buffer fields.

The buffer state is a plain dict (``{"text": ..., "stats": ...}``). Derived
fields are nodes of a dependency graph; when a source field changes, every
downstream processor runs in dependency order.
"""
from __future__ import annotations
from typing import Callable, Iterable
import networkx as nx

from logic.text_stats import compute_stats

__all__ = ["TriggerEngine", "build_default_graph"]

Processor = Callable[[dict], None]


class TriggerEngine:
    """Directed acyclic graph of buffer fields and their processors."""

    def __init__(self) -> None:
        self.graph: nx.DiGraph = nx.DiGraph()
        self._processors: dict[str, Processor] = {}

    def register_dependency(self, source: str, target: str) -> None:
        """Declare that ``target`` is derived from ``source``.

        Raises:
            ValueError: If the edge would introduce a cycle.
        """
        self.graph.add_edge(source, target)
        if not nx.is_directed_acyclic_graph(self.graph):
            self.graph.remove_edge(source, target)
            raise ValueError(f"Dependency {source!r} -> {target!r} creates a cycle")

    def register_dependencies(self, pairs: Iterable[tuple[str, str]]) -> None:
        for src, tgt in pairs:
            self.register_dependency(src, tgt)

    def register_processor(self, key: str, func: Processor) -> None:
        """Attach ``func`` to recompute ``key`` from the state dict."""
        self.graph.add_node(key)
        self._processors[key] = func

    def affected(self, updated_key: str) -> list[str]:
        """Return downstream fields of ``updated_key`` in dependency order."""
        if updated_key not in self.graph:
            return []
        downstream = nx.descendants(self.graph, updated_key)
        return [n for n in nx.topological_sort(self.graph) if n in downstream]

    def notify_change(self, updated_key: str, state: dict) -> None:
        """Run the processors of every field derived from ``updated_key``."""
        for node in self.affected(updated_key):
            processor = self._processors.get(node)
            if processor:
                processor(state)


def build_default_graph(
    engine: TriggerEngine, words_per_minute: int | None = None
) -> TriggerEngine:
    """Wire the buffer text to its statistics snapshot."""

    def _update_stats(state: dict) -> None:
        if words_per_minute is None:
            state["stats"] = compute_stats(state.get("text", ""))
        else:
            state["stats"] = compute_stats(state.get("text", ""), words_per_minute)

    engine.register_dependency("text", "stats")
    engine.register_processor("stats", _update_stats)
    return engine
