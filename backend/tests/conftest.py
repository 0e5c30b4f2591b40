from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from contextlib import asynccontextmanager

from backend.app.main import create_app
from backend.app.config import AppConfig
from backend.app.dependencies import get_editor_service
from backend.app.services.editor_service import GraphEditorService

from visgraph.config.settings import VisgraphConfig


@pytest.fixture()
def service() -> GraphEditorService:
    return GraphEditorService(config=VisgraphConfig())


@pytest.fixture()
def client(service: GraphEditorService):
    @asynccontextmanager
    async def _no_lifespan(_: FastAPI):
        yield

    app = create_app(AppConfig())
    app.router.lifespan_context = _no_lifespan

    app.dependency_overrides[get_editor_service] = lambda: service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
