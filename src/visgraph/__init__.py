"""
visgraph
========

In-memory graph engine behind a click-to-build graph analyzer.

Core idea:
- The engine owns integer vertex ids and ordered adjacency.
- Callers record each mutation as an invertible action to undo it.

Public API:
- GraphStore
- GraphTraversal
- CommandLog
- GraphEditor
"""

from visgraph.graph.graph_store import GraphStore
from visgraph.graph.graph_query import GraphTraversal
from visgraph.graph.errors import MissingVertex, UnknownVertex
from visgraph.history.command_log import CommandLog
from visgraph.editor.graph_editor import GraphEditor

__all__ = [
    "GraphStore",
    "GraphTraversal",
    "MissingVertex",
    "UnknownVertex",
    "CommandLog",
    "GraphEditor",
]

__version__ = "0.1.0"
