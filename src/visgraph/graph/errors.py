from __future__ import annotations

from typing import Tuple


class GraphError(Exception):
    """
    Base class for graph engine errors.
    """


class UnknownVertex(GraphError, KeyError):
    """
    Raised by strict accessors when a vertex id is not in the graph.

    Traversals never raise it; they degrade to an empty result.
    """

    def __init__(self, vertex_id: int) -> None:
        super().__init__(vertex_id)
        self.vertex_id = vertex_id

    def __str__(self) -> str:
        return f"unknown vertex {self.vertex_id}"


class MissingVertex(GraphError, KeyError):
    """
    Raised when an edge references an endpoint that was never added.
    """

    def __init__(self, missing: Tuple[int, ...]) -> None:
        super().__init__(missing)
        self.missing = missing

    def __str__(self) -> str:
        ids = ", ".join(str(v) for v in self.missing)
        return f"missing vertex: {ids}"
