from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from visgraph.analysis.report import GraphReport, analyze
from visgraph.config.settings import VisgraphConfig
from visgraph.graph.graph_query import GraphTraversal
from visgraph.graph.graph_store import GraphStore
from visgraph.history.actions import AddEdge, AddVertex
from visgraph.history.command_log import CommandLog, UndoResult


logger = logging.getLogger("visgraph.editor")


class GraphEditor:
    """
    Caller-side editing session around one graph.

    Assigns vertex ids, keeps vertex positions keyed by id, and records
    every successful mutation so it can be undone. The store never sees
    positions or history.
    """

    def __init__(self, config: Optional[VisgraphConfig] = None) -> None:
        self.config = config or VisgraphConfig()
        self.store = GraphStore(
            directed=self.config.graph.directed,
            weighted=self.config.graph.weighted,
        )
        self.traversal = GraphTraversal(self.store)
        self.history = CommandLog(limit=self.config.editor.history_limit)
        self.positions: Dict[int, Tuple[float, float]] = {}
        self._last_vertex_id = 0

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_vertex(self, x: Optional[float] = None, y: Optional[float] = None) -> int:
        """
        Add a vertex with the next unused id and return that id.

        Ids are never reused, even after the vertex is undone.
        """
        self._last_vertex_id += 1
        action = AddVertex(self._last_vertex_id).apply(self.store)
        self.history.record(action)

        if x is not None and y is not None:
            self.positions[action.vertex_id] = (x, y)

        logger.info(
            "vertex %s added, total vertices: %s",
            action.vertex_id,
            self.store.vertex_count(),
        )
        return action.vertex_id

    def add_edge(self, source: int, target: int, weight: Optional[int] = None) -> AddEdge:
        """
        Connect two existing vertices.

        Raises ``MissingVertex`` without recording anything when an
        endpoint is absent. Unweighted graphs always use the default weight.
        """
        if weight is None or not self.store.weighted:
            weight = self.config.graph.default_weight

        action = AddEdge(source, target, weight).apply(self.store)
        self.history.record(action)

        logger.info(
            "edge added: %s -> %s%s",
            source,
            target,
            f" (weight: {weight})" if self.store.weighted else "",
        )
        return action

    def remove_vertex(self, vertex_id: int) -> None:
        self.store.remove_vertex(vertex_id)
        self.positions.pop(vertex_id, None)

    def remove_edge(self, source: int, target: int) -> bool:
        return self.store.remove_edge(source, target)

    def undo(self) -> Optional[UndoResult]:
        result = self.history.undo(self.store)
        if result is not None and isinstance(result.action, AddVertex):
            self.positions.pop(result.action.vertex_id, None)
        return result

    def clear(self) -> None:
        self.store.clear()
        self.history.clear()
        self.positions.clear()
        self._last_vertex_id = 0
        logger.info("graph cleared")

    def set_directed(self, directed: bool) -> None:
        self.store.directed = directed

    def set_weighted(self, weighted: bool) -> None:
        self.store.weighted = weighted

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def vertex_at(self, x: float, y: float) -> Optional[int]:
        """
        Id of the most recently added vertex whose circle contains (x, y).
        """
        radius_sq = self.config.editor.vertex_radius ** 2
        for vertex_id in reversed(list(self.positions)):
            vx, vy = self.positions[vertex_id]
            if (x - vx) ** 2 + (y - vy) ** 2 <= radius_sq:
                return vertex_id
        return None

    def bfs(self, start: int) -> List[int]:
        return self.traversal.bfs(start)

    def dfs(self, start: int) -> List[int]:
        return self.traversal.dfs(start)

    def analyze(self) -> GraphReport:
        return analyze(self.store)
