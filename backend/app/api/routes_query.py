from fastapi import APIRouter, Depends

from backend.app.api.schemas import (
    AnalysisResponse,
    ConnectivityResponse,
    TraversalResponse,
)
from backend.app.dependencies import get_editor_service
from backend.app.services.editor_service import GraphEditorService
from visgraph.analysis.report import render_report

router = APIRouter()


@router.get("/bfs/{start}", response_model=TraversalResponse)
def bfs(start: int, service: GraphEditorService = Depends(get_editor_service)):
    with service.session() as editor:
        return TraversalResponse(start=start, order=editor.bfs(start))


@router.get("/dfs/{start}", response_model=TraversalResponse)
def dfs(start: int, service: GraphEditorService = Depends(get_editor_service)):
    with service.session() as editor:
        return TraversalResponse(start=start, order=editor.dfs(start))


@router.get("/connectivity", response_model=ConnectivityResponse)
def connectivity(service: GraphEditorService = Depends(get_editor_service)):
    with service.session() as editor:
        return ConnectivityResponse(
            connected=editor.traversal.is_connected(),
            components=editor.traversal.count_connected_components(),
        )


@router.get("/analysis", response_model=AnalysisResponse)
def analysis(service: GraphEditorService = Depends(get_editor_service)):
    with service.session() as editor:
        report = editor.analyze()

    return AnalysisResponse(**report.to_dict(), text=render_report(report))
