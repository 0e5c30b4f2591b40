from __future__ import annotations

from collections import deque
from typing import Deque, Iterator, List, Set, Tuple

from visgraph.graph.graph_store import GraphStore


class GraphTraversal:
    """
    Read-only traversal and connectivity queries over a GraphStore.

    Neighbors are always visited in the order their arcs were inserted,
    which keeps every result deterministic. Nothing here mutates the store
    and no state is kept between calls.
    """

    def __init__(self, store: GraphStore) -> None:
        self.store = store

    def bfs(self, start: int) -> List[int]:
        """
        Breadth-first discovery order from ``start``.

        Vertices are marked visited when enqueued, so each reachable vertex
        appears exactly once. An unknown start yields an empty list.
        """
        if start not in self.store:
            return []

        visited: Set[int] = {start}
        queue: Deque[int] = deque([start])
        order: List[int] = []

        while queue:
            vertex = queue.popleft()
            order.append(vertex)

            for nbr in self.store.neighbors(vertex):
                if nbr not in visited:
                    visited.add(nbr)
                    queue.append(nbr)

        return order

    def dfs(self, start: int) -> List[int]:
        """
        Depth-first pre-order from ``start``; empty for an unknown start.
        """
        if start not in self.store:
            return []

        visited: Set[int] = {start}
        order: List[int] = [start]
        # Explicit stack of neighbor iterators reproduces recursive pre-order.
        stack: List[Tuple[int, Iterator[int]]] = [
            (start, iter(self.store.neighbors(start)))
        ]

        while stack:
            _, pending = stack[-1]
            for nbr in pending:
                if nbr not in visited:
                    visited.add(nbr)
                    order.append(nbr)
                    stack.append((nbr, iter(self.store.neighbors(nbr))))
                    break
            else:
                stack.pop()

        return order

    def is_connected(self) -> bool:
        vertices = self.get_all_vertices_sorted()
        if not vertices:
            return True
        return len(self.bfs(vertices[0])) == len(vertices)

    def component_sweeps(self) -> List[List[int]]:
        """
        BFS sweeps started from each still-unvisited vertex in ascending id
        order, each listed in BFS discovery order.

        On undirected graphs the sweeps are exactly the connected components.
        On directed graphs a later sweep may reach vertices an earlier one
        already covered, so sweeps can overlap: with a single arc 2 -> 1 the
        result is [[1], [2, 1]].
        """
        visited: Set[int] = set()
        components: List[List[int]] = []

        for vertex in self.get_all_vertices_sorted():
            if vertex in visited:
                continue
            reached = self.bfs(vertex)
            visited.update(reached)
            components.append(reached)

        return components

    def count_connected_components(self) -> int:
        return len(self.component_sweeps())

    def get_all_vertices_sorted(self) -> List[int]:
        return sorted(self.store.vertices())
