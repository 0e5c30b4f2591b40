"""
Graph engine for visgraph.

The store owns vertices and ordered adjacency; traversal answers
BFS/DFS and connectivity queries over it without mutating anything.
"""

from visgraph.graph.errors import GraphError, MissingVertex, UnknownVertex
from visgraph.graph.graph_schema import Arc
from visgraph.graph.graph_store import GraphStore
from visgraph.graph.graph_query import GraphTraversal

__all__ = [
    "Arc",
    "GraphStore",
    "GraphTraversal",
    "GraphError",
    "MissingVertex",
    "UnknownVertex",
]
