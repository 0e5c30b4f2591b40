from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from visgraph.graph.graph_store import GraphStore


class GraphAction(ABC):
    """
    A recorded mutation that carries enough data to compute its own inverse.
    """

    @abstractmethod
    def apply(self, store: GraphStore) -> "GraphAction":
        """
        Perform the mutation on ``store`` and return the action to record.
        """

    @abstractmethod
    def revert(self, store: GraphStore) -> bool:
        """
        Undo the mutation through the store's removal operations.

        Returns whether the store actually changed.
        """

    @abstractmethod
    def describe(self) -> str:
        ...


@dataclass(frozen=True)
class AddVertex(GraphAction):
    vertex_id: int

    def apply(self, store: GraphStore) -> "AddVertex":
        store.add_vertex(self.vertex_id)
        return self

    def revert(self, store: GraphStore) -> bool:
        return store.remove_vertex(self.vertex_id)

    def describe(self) -> str:
        return f"vertex {self.vertex_id}"


@dataclass(frozen=True)
class AddEdge(GraphAction):
    """
    Edge addition. Once applied it carries the store's edge id, so reverting
    removes exactly the arcs it created even if the mode flag changed since.
    """

    source: int
    target: int
    weight: int = 1
    edge_id: Optional[int] = None

    def apply(self, store: GraphStore) -> "AddEdge":
        edge_id = store.add_edge(self.source, self.target, self.weight)
        return AddEdge(self.source, self.target, self.weight, edge_id)

    def revert(self, store: GraphStore) -> bool:
        if self.edge_id is None:
            return store.remove_edge(self.source, self.target)
        return store.remove_edge_by_id(self.edge_id)

    def describe(self) -> str:
        return f"edge {self.source} -> {self.target}"
