from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from visgraph.graph.graph_query import GraphTraversal
from visgraph.graph.graph_store import GraphStore


RULE = "-----------------------------------------------"
BANNER = "==============================================="


@dataclass(frozen=True)
class GraphReport:
    """
    Snapshot of a graph's properties and traversal paths.

    Paths are keyed by start vertex, in ascending id order.
    """

    vertex_count: int
    edge_count: int
    directed: bool
    weighted: bool
    connected: bool
    component_count: int
    bfs_paths: Dict[int, List[int]] = field(default_factory=dict)
    dfs_paths: Dict[int, List[int]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "vertex_count": self.vertex_count,
            "edge_count": self.edge_count,
            "directed": self.directed,
            "weighted": self.weighted,
            "connected": self.connected,
            "component_count": self.component_count,
            "bfs_paths": {k: list(v) for k, v in self.bfs_paths.items()},
            "dfs_paths": {k: list(v) for k, v in self.dfs_paths.items()},
        }


def analyze(store: GraphStore) -> GraphReport:
    traversal = GraphTraversal(store)
    starts = traversal.get_all_vertices_sorted()

    return GraphReport(
        vertex_count=store.vertex_count(),
        edge_count=store.edge_count(),
        directed=store.directed,
        weighted=store.weighted,
        connected=traversal.is_connected(),
        component_count=traversal.count_connected_components(),
        bfs_paths={v: traversal.bfs(v) for v in starts},
        dfs_paths={v: traversal.dfs(v) for v in starts},
    )


def format_path(path: List[int]) -> str:
    if not path:
        return "No path (isolated vertex)"
    return " -> ".join(str(v) for v in path)


def render_report(report: GraphReport) -> str:
    """
    Plain-text analysis report, one traversal path per start vertex.
    """
    lines: List[str] = [
        BANNER,
        "       GRAPH ANALYSIS RESULTS",
        BANNER,
        "",
        "GRAPH PROPERTIES:",
        RULE,
        f"  * Total Vertices: {report.vertex_count}",
        f"  * Total Edges: {report.edge_count}",
        f"  * Graph Type: {'Directed' if report.directed else 'Undirected'}",
        f"  * Weight Type: {'Weighted' if report.weighted else 'Unweighted'}",
        f"  * Connected: {'Yes' if report.connected else 'No'}",
        f"  * Connected Components: {report.component_count}",
        "",
        "POSSIBLE TRAVERSAL ALGORITHMS:",
        RULE,
        "  > BFS (Breadth-First Search) - Possible",
        "  > DFS (Depth-First Search) - Possible",
        "",
    ]

    for title, paths in (
        ("BFS TRAVERSAL PATHS:", report.bfs_paths),
        ("DFS TRAVERSAL PATHS:", report.dfs_paths),
    ):
        if not paths:
            continue
        lines.append(title)
        lines.append(RULE)
        for start, path in paths.items():
            lines.append(f"  From Node {start}: {format_path(path)}")
        lines.append("")

    lines.append(BANNER)
    return "\n".join(lines) + "\n"
