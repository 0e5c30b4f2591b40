from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator

from visgraph.config.settings import VisgraphConfig
from visgraph.editor.graph_editor import GraphEditor


class GraphEditorService:
    """
    Owns the single editing session served by the backend.

    The engine assumes one writer, while FastAPI runs sync endpoints on a
    thread pool, so every request works on the editor under one lock.
    """

    def __init__(self, *, config: VisgraphConfig) -> None:
        self.config = config
        self.editor = GraphEditor(config)
        self._lock = threading.Lock()

    @contextmanager
    def session(self) -> Iterator[GraphEditor]:
        with self._lock:
            yield self.editor
