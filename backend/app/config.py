from dataclasses import dataclass
from dynaconf import Dynaconf
from backend.app.constants import DEFAULTS

from visgraph.config.settings import (
    GraphConfig,
    EditorConfig,
    VisgraphConfig,
)

settings = Dynaconf(
    envvar_prefix="VISGRAPH",
    load_dotenv=True,
    settings_files=[],
)
settings.update(DEFAULTS)


@dataclass(frozen=True)
class AppConfig:
    # ---------------- App ----------------
    app_name: str = settings.get("APP_NAME", "visgraph-backend")
    api_prefix: str = settings.get("API_PREFIX", "")
    log_level: str = settings.get("LOG_LEVEL", "INFO")

    # ---------------- Visgraph Policy ----------------
    visgraph: VisgraphConfig = VisgraphConfig(
        graph=GraphConfig(
            directed=settings.get("GRAPH_DIRECTED", False),
            weighted=settings.get("GRAPH_WEIGHTED", False),
            default_weight=settings.get("GRAPH_DEFAULT_WEIGHT", 1),
        ),
        editor=EditorConfig(
            history_limit=settings.get("EDITOR_HISTORY_LIMIT", 0),
            vertex_radius=settings.get("EDITOR_VERTEX_RADIUS", 20.0),
        ),
    )
