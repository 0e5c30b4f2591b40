"""
Undo support: invertible graph actions and the stack that records them.
"""

from visgraph.history.actions import GraphAction, AddVertex, AddEdge
from visgraph.history.command_log import CommandLog, UndoResult

__all__ = [
    "GraphAction",
    "AddVertex",
    "AddEdge",
    "CommandLog",
    "UndoResult",
]
