from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Arc:
    """
    One directed connection record stored in a vertex's adjacency sequence.

    An undirected edge is stored as two arcs sharing the same ``edge_id``.
    ``weight`` is only meaningful when the graph is weighted; traversal
    ignores it.
    """

    dest: int
    weight: int = 1
    edge_id: int = 0
