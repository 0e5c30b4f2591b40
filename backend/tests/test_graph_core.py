import pytest

from visgraph.graph.errors import MissingVertex, UnknownVertex
from visgraph.graph.graph_schema import Arc
from visgraph.graph.graph_store import GraphStore


def _build(vertices, edges=(), *, directed: bool = False) -> GraphStore:
    store = GraphStore(directed=directed)
    for v in vertices:
        store.add_vertex(v)
    for source, target in edges:
        store.add_edge(source, target)
    return store


def test_add_vertex_is_idempotent():
    store = GraphStore()
    store.add_vertex(5)
    store.add_vertex(5)

    assert store.vertex_count() == 1
    assert store.arcs(5) == []


def test_undirected_edge_stores_reciprocal_arc_with_same_weight():
    store = _build([1, 2])
    edge_id = store.add_edge(1, 2, 7)

    assert store.arcs(1) == [Arc(dest=2, weight=7, edge_id=edge_id)]
    assert store.arcs(2) == [Arc(dest=1, weight=7, edge_id=edge_id)]
    assert store.edge_count() == 1


def test_directed_edge_stores_single_arc():
    store = _build([1, 2], directed=True)
    store.add_edge(1, 2)

    assert [a.dest for a in store.arcs(1)] == [2]
    assert store.arcs(2) == []
    assert store.edge_count() == 1


def test_symmetry_holds_for_every_undirected_arc():
    store = _build([1, 2, 3, 4], [(1, 2), (2, 3), (3, 1), (4, 2)])

    for source, arc in store.iter_arcs():
        reverse = [a for a in store.arcs(arc.dest) if a.dest == source]
        assert reverse and reverse[0].weight == arc.weight


def test_arc_order_follows_insertion():
    store = _build([1, 2, 3, 4], [(1, 4), (1, 2), (1, 3)])

    assert [a.dest for a in store.arcs(1)] == [4, 2, 3]
    assert store.neighbors(1) == [4, 2, 3]


def test_add_edge_with_missing_vertex_leaves_graph_unchanged():
    store = _build([1])

    with pytest.raises(MissingVertex) as exc_info:
        store.add_edge(1, 2, 3)

    assert exc_info.value.missing == (2,)
    assert store.arcs(1) == []
    assert store.edge_count() == 0
    assert not store.has_vertex(2)


def test_add_edge_with_missing_source_is_reported():
    store = _build([2])

    with pytest.raises(MissingVertex) as exc_info:
        store.add_edge(9, 2)

    assert exc_info.value.missing == (9,)
    assert store.arcs(2) == []


def test_remove_undirected_edge_removes_both_arcs():
    store = _build([1, 2, 3], [(1, 2), (2, 3)])

    assert store.remove_edge(1, 2) is True

    assert not store.has_edge(1, 2)
    assert not store.has_edge(2, 1)
    assert store.has_edge(2, 3)
    assert store.edge_count() == 1


def test_remove_edge_removes_only_first_parallel_arc():
    store = _build([1, 2], directed=True)
    store.add_edge(1, 2, 1)
    store.add_edge(1, 2, 5)

    store.remove_edge(1, 2)

    assert [a.weight for a in store.arcs(1)] == [5]
    assert store.edge_count() == 1


def test_remove_missing_edge_keeps_count():
    store = _build([1, 2], [(1, 2)])

    assert store.remove_edge(2, 3) is False
    assert store.edge_count() == 1


def test_remove_vertex_drops_incident_arcs_and_edges():
    store = _build([1, 2, 3], [(1, 2), (2, 3), (1, 3)])

    store.remove_vertex(2)

    assert store.vertices() == [1, 3]
    assert [a.dest for a in store.arcs(1)] == [3]
    assert [a.dest for a in store.arcs(3)] == [1]
    assert store.edge_count() == 1


def test_remove_vertex_drops_incoming_directed_arcs():
    store = _build([1, 2, 3], [(1, 3), (2, 3)], directed=True)

    store.remove_vertex(3)

    assert store.arcs(1) == []
    assert store.arcs(2) == []
    assert store.edge_count() == 0


def test_mode_change_only_affects_future_edges():
    store = _build([1, 2, 3], [(1, 2)])
    store.directed = True
    store.add_edge(2, 3)

    assert store.has_edge(2, 1)
    assert not store.has_edge(3, 2)
    assert store.edge_count() == 2


def test_arcs_of_unknown_vertex_raise():
    store = GraphStore()

    with pytest.raises(UnknownVertex):
        store.arcs(42)
    assert store.neighbors(42) == []


def test_clear_resets_to_fresh_state():
    store = _build([1, 2, 3], [(1, 2)], directed=True)
    store.clear()

    assert store.vertex_count() == 0
    assert store.edge_count() == 0
    assert store.vertices() == []
    assert store.directed is True


def test_clone_is_independent():
    store = _build([1, 2], [(1, 2)])
    copy = store.clone()
    copy.remove_edge(1, 2)

    assert store.edge_count() == 1
    assert copy.edge_count() == 0


def test_to_networkx_snapshot_matches_arcs():
    store = _build([1, 2, 3], [(1, 2), (2, 3)])
    graph = store.to_networkx()

    assert sorted(graph.nodes) == [1, 2, 3]
    assert graph.number_of_edges() == 4
    assert graph.has_edge(3, 2)


def test_remove_edge_by_id_ignores_current_mode():
    store = _build([1, 2, 3])
    first = store.add_edge(1, 2)
    store.directed = True
    store.add_edge(2, 1)

    assert store.remove_edge_by_id(first) is True

    assert [a.dest for a in store.arcs(2)] == [1]
    assert store.arcs(1) == []
    assert store.edge_count() == 1
    assert store.remove_edge_by_id(first) is False
