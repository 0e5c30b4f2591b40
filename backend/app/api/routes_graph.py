from fastapi import APIRouter, Depends, HTTPException

from backend.app.api.schemas import (
    EdgeCreateRequest,
    EdgeRemoveResponse,
    EdgeResponse,
    GraphArc,
    GraphExportResponse,
    GraphStatsResponse,
    GraphVertex,
    ModeRequest,
    UndoResponse,
    VertexCreateRequest,
    VertexCreateResponse,
)
from backend.app.dependencies import get_editor_service
from backend.app.services.editor_service import GraphEditorService
from visgraph.graph.errors import MissingVertex

router = APIRouter()


@router.get("/stats", response_model=GraphStatsResponse)
def graph_stats(service: GraphEditorService = Depends(get_editor_service)):
    with service.session() as editor:
        return GraphStatsResponse(
            vertices=editor.store.vertex_count(),
            edges=editor.store.edge_count(),
            directed=editor.store.directed,
            weighted=editor.store.weighted,
            history=len(editor.history),
        )


@router.get("/export", response_model=GraphExportResponse)
def graph_export(service: GraphEditorService = Depends(get_editor_service)):
    with service.session() as editor:
        vertices = []
        for vertex_id in editor.store.vertices():
            x, y = editor.positions.get(vertex_id, (None, None))
            vertices.append(GraphVertex(id=vertex_id, x=x, y=y))

        arcs = [
            GraphArc(
                source=source,
                target=arc.dest,
                weight=arc.weight,
                edge_id=arc.edge_id,
            )
            for source, arc in editor.store.iter_arcs()
        ]

    return GraphExportResponse(vertices=vertices, arcs=arcs)


@router.post("/vertices", response_model=VertexCreateResponse)
def add_vertex(
    request: VertexCreateRequest,
    service: GraphEditorService = Depends(get_editor_service),
):
    with service.session() as editor:
        return VertexCreateResponse(id=editor.add_vertex(request.x, request.y))


@router.delete("/vertices/{vertex_id}", status_code=204)
def remove_vertex(
    vertex_id: int,
    service: GraphEditorService = Depends(get_editor_service),
):
    with service.session() as editor:
        if not editor.store.has_vertex(vertex_id):
            raise HTTPException(status_code=404, detail=f"unknown vertex {vertex_id}")
        editor.remove_vertex(vertex_id)


@router.post("/edges", response_model=EdgeResponse)
def add_edge(
    request: EdgeCreateRequest,
    service: GraphEditorService = Depends(get_editor_service),
):
    with service.session() as editor:
        try:
            action = editor.add_edge(request.source, request.target, request.weight)
        except MissingVertex as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc

    return EdgeResponse(source=action.source, target=action.target, weight=action.weight)


@router.delete("/edges/{source}/{target}", response_model=EdgeRemoveResponse)
def remove_edge(
    source: int,
    target: int,
    service: GraphEditorService = Depends(get_editor_service),
):
    with service.session() as editor:
        return EdgeRemoveResponse(removed=editor.remove_edge(source, target))


@router.put("/mode", response_model=GraphStatsResponse)
def set_mode(
    request: ModeRequest,
    service: GraphEditorService = Depends(get_editor_service),
):
    with service.session() as editor:
        if request.directed is not None:
            editor.set_directed(request.directed)
        if request.weighted is not None:
            editor.set_weighted(request.weighted)

    return graph_stats(service)


@router.post("/undo", response_model=UndoResponse)
def undo(service: GraphEditorService = Depends(get_editor_service)):
    with service.session() as editor:
        result = editor.undo()

    if result is None:
        return UndoResponse()
    return UndoResponse(undone=result.action.describe(), changed=result.changed)


@router.post("/clear", response_model=GraphStatsResponse)
def clear(service: GraphEditorService = Depends(get_editor_service)):
    with service.session() as editor:
        editor.clear()

    return graph_stats(service)
