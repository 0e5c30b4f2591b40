"""
Configuration layer for visgraph.

Configuration is explicit (passed, not global) and immutable once built.
"""

from visgraph.config.settings import (
    GraphConfig,
    EditorConfig,
    VisgraphConfig,
)

__all__ = [
    "GraphConfig",
    "EditorConfig",
    "VisgraphConfig",
]
