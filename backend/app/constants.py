DEFAULTS = {
    # Treat new edges as directed arcs
    "GRAPH_DIRECTED": False,
    # Show and accept edge weights
    "GRAPH_WEIGHTED": False,
    # Weight used when none is supplied
    "GRAPH_DEFAULT_WEIGHT": 1,
    # Maximum undo depth (0 = unbounded)
    "EDITOR_HISTORY_LIMIT": 0,
    # Hit-test radius for locating a vertex under a point
    "EDITOR_VERTEX_RADIUS": 20.0,
    # Logging level for the backend process
    "LOG_LEVEL": "INFO",
}
