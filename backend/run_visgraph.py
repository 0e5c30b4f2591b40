import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.app.config import AppConfig  # noqa: E402
from visgraph.analysis.report import render_report  # noqa: E402
from visgraph.editor.graph_editor import GraphEditor  # noqa: E402


def main() -> None:
    config = AppConfig()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logger = logging.getLogger("visgraph.run")

    editor = GraphEditor(config.visgraph)

    # Two components: a path 1-2-3 with a branch to 4, and 5-6.
    ids = [editor.add_vertex(x=100.0 * i, y=100.0) for i in range(1, 7)]
    for source, target in [(1, 2), (2, 3), (2, 4), (5, 6)]:
        editor.add_edge(ids[source - 1], ids[target - 1])

    logger.info("\n%s", render_report(editor.analyze()))

    editor.undo()
    logger.info(
        "after undo: %s edges, %s components",
        editor.store.edge_count(),
        editor.traversal.count_connected_components(),
    )


if __name__ == "__main__":
    main()
