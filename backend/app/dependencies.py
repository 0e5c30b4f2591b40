from functools import lru_cache
import logging

from backend.app.config import AppConfig
from backend.app.services.editor_service import GraphEditorService


@lru_cache
def get_config() -> AppConfig:
    return AppConfig()


@lru_cache
def get_editor_service() -> GraphEditorService:
    config = get_config()
    service = GraphEditorService(config=config.visgraph)
    logging.getLogger("visgraph.startup").info(
        "[startup] editor ready (directed=%s, weighted=%s)",
        service.editor.store.directed,
        service.editor.store.weighted,
    )
    return service
