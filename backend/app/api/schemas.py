from typing import List, Dict, Optional
from pydantic import BaseModel


class GraphStatsResponse(BaseModel):
    vertices: int
    edges: int
    directed: bool
    weighted: bool
    history: int


class VertexCreateRequest(BaseModel):
    x: Optional[float] = None
    y: Optional[float] = None


class VertexCreateResponse(BaseModel):
    id: int


class EdgeCreateRequest(BaseModel):
    source: int
    target: int
    weight: Optional[int] = None


class EdgeResponse(BaseModel):
    source: int
    target: int
    weight: int


class EdgeRemoveResponse(BaseModel):
    removed: bool


class ModeRequest(BaseModel):
    directed: Optional[bool] = None
    weighted: Optional[bool] = None


class UndoResponse(BaseModel):
    undone: Optional[str] = None
    changed: bool = False


class GraphVertex(BaseModel):
    id: int
    x: Optional[float] = None
    y: Optional[float] = None


class GraphArc(BaseModel):
    source: int
    target: int
    weight: int
    edge_id: int


class GraphExportResponse(BaseModel):
    vertices: List[GraphVertex]
    arcs: List[GraphArc]


class TraversalResponse(BaseModel):
    start: int
    order: List[int]


class ConnectivityResponse(BaseModel):
    connected: bool
    components: int


class AnalysisResponse(BaseModel):
    vertex_count: int
    edge_count: int
    directed: bool
    weighted: bool
    connected: bool
    component_count: int
    bfs_paths: Dict[int, List[int]]
    dfs_paths: Dict[int, List[int]]
    text: str
