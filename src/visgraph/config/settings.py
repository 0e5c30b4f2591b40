from __future__ import annotations

from dataclasses import dataclass, field

# ---------------------------------------------------------------------
# Graph interpretation
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class GraphConfig:
    """
    Initial mode flags of a graph and the weight used when the caller
    does not supply one.
    """

    directed: bool = False
    weighted: bool = False
    default_weight: int = 1


# ---------------------------------------------------------------------
# Editing session
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class EditorConfig:
    """
    Controls the caller-side editing session: undo depth and the hit-test
    radius used to find a vertex under a point.
    """

    history_limit: int = 0  # 0 = unbounded
    vertex_radius: float = 20.0


# ---------------------------------------------------------------------
# Root configuration object
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class VisgraphConfig:
    """
    Root configuration object for visgraph.

    Constructed explicitly and passed to the editor; never read from
    global state inside the library.
    """

    graph: GraphConfig = field(default_factory=GraphConfig)
    editor: EditorConfig = field(default_factory=EditorConfig)
