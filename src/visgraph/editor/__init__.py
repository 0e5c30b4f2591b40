from visgraph.editor.graph_editor import GraphEditor

__all__ = ["GraphEditor"]
