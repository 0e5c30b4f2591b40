from __future__ import annotations

import logging
from typing import Iterator, List, Tuple

import networkx as nx

from visgraph.graph.errors import MissingVertex, UnknownVertex
from visgraph.graph.graph_schema import Arc


logger = logging.getLogger("visgraph.store")


class GraphStore:
    """
    Authoritative in-memory graph representation.

    Vertices are integer ids. Every arc is a keyed edge of a networkx
    MultiDiGraph, so per-vertex adjacency keeps insertion order and parallel
    arcs are preserved. Whether an edge is stored as one arc or two is
    decided by ``directed`` at the moment the edge is added.
    """

    def __init__(self, *, directed: bool = False, weighted: bool = False) -> None:
        self._graph = nx.MultiDiGraph()
        self._next_edge_id = 0
        self.directed = directed
        self.weighted = weighted

    # -------------------- Vertices --------------------

    def add_vertex(self, vertex_id: int) -> None:
        if vertex_id in self._graph:
            return
        self._graph.add_node(vertex_id)
        logger.debug("added vertex %s", vertex_id)

    def remove_vertex(self, vertex_id: int) -> bool:
        """
        Remove a vertex together with its own arcs and every arc pointing at it.
        """
        if vertex_id not in self._graph:
            return False
        self._graph.remove_node(vertex_id)
        logger.debug("removed vertex %s", vertex_id)
        return True

    def has_vertex(self, vertex_id: int) -> bool:
        return vertex_id in self._graph

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._graph

    def vertices(self) -> List[int]:
        return list(self._graph.nodes)

    # -------------------- Edges --------------------

    def add_edge(self, source: int, target: int, weight: int = 1) -> int:
        """
        Add a logical edge and return its id.

        Both endpoints must already exist; otherwise ``MissingVertex`` is
        raised before anything is written.
        """
        missing = tuple(
            dict.fromkeys(v for v in (source, target) if v not in self._graph)
        )
        if missing:
            raise MissingVertex(missing)

        edge_id = self._next_edge_id
        self._next_edge_id += 1

        self._graph.add_edge(source, target, weight=weight, edge=edge_id)
        if not self.directed:
            self._graph.add_edge(target, source, weight=weight, edge=edge_id)

        logger.debug(
            "added edge %s: %s -> %s (weight=%s, directed=%s)",
            edge_id,
            source,
            target,
            weight,
            self.directed,
        )
        return edge_id

    def remove_edge(self, source: int, target: int) -> bool:
        """
        Remove the first arc ``source -> target`` and, when undirected, the
        first reciprocal arc. Returns whether any arc was removed.
        """
        removed = self._remove_first_arc(source, target)
        if not self.directed:
            removed = self._remove_first_arc(target, source) or removed

        if not removed:
            logger.warning("no edge %s -> %s to remove", source, target)
        return removed

    def remove_edge_by_id(self, edge_id: int) -> bool:
        """
        Remove every arc created by one logical edge, whatever the current
        mode flag says. Returns whether any arc was removed.
        """
        keys = [
            (source, target, key)
            for source, target, key, data in self._graph.edges(keys=True, data=True)
            if data["edge"] == edge_id
        ]
        for source, target, key in keys:
            self._graph.remove_edge(source, target, key=key)

        if not keys:
            logger.warning("no arcs left for edge %s", edge_id)
        return bool(keys)

    def _remove_first_arc(self, source: int, target: int) -> bool:
        if not self._graph.has_edge(source, target):
            return False
        key = next(iter(self._graph[source][target]))
        self._graph.remove_edge(source, target, key=key)
        return True

    def has_edge(self, source: int, target: int) -> bool:
        return self._graph.has_edge(source, target)

    def arcs(self, vertex_id: int) -> List[Arc]:
        if vertex_id not in self._graph:
            raise UnknownVertex(vertex_id)
        return [
            Arc(dest=dest, weight=data["weight"], edge_id=data["edge"])
            for dest, keyed in self._graph.adj[vertex_id].items()
            for data in keyed.values()
        ]

    def iter_arcs(self) -> Iterator[Tuple[int, Arc]]:
        for source in self._graph.nodes:
            for arc in self.arcs(source):
                yield source, arc

    # -------------------- Traversal --------------------

    def neighbors(self, vertex_id: int) -> List[int]:
        """
        Distinct destinations of a vertex's arcs, in first-arc order.
        """
        if vertex_id not in self._graph:
            return []
        return list(self._graph.successors(vertex_id))

    # -------------------- Analytics --------------------

    def vertex_count(self) -> int:
        return self._graph.number_of_nodes()

    def edge_count(self) -> int:
        """
        Number of logical edges that still own at least one arc.
        """
        return len({data["edge"] for _, _, data in self._graph.edges(data=True)})

    # -------------------- Lifecycle --------------------

    def clear(self) -> None:
        self._graph.clear()
        self._next_edge_id = 0
        logger.debug("cleared graph")

    def clone(self) -> "GraphStore":
        g = GraphStore(directed=self.directed, weighted=self.weighted)
        g._graph = self._graph.copy()
        g._next_edge_id = self._next_edge_id
        return g

    def to_networkx(self) -> nx.MultiDiGraph:
        """
        Snapshot of the arc structure as a standalone networkx graph.
        """
        return self._graph.copy()
