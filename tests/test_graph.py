import io
import random

import pytest

from tarjankit.graph import AdjacencyListGraph, DirectedHashGraph, Graph


def _make(hashed):
    return DirectedHashGraph() if hashed else AdjacencyListGraph()


def test_graph_is_abstract():
    with pytest.raises(TypeError):
        Graph()


@pytest.mark.parametrize("hashed", [True, False], ids=["hash", "adjacency"])
def test_insert_edge_and_exists(hashed):
    g = _make(hashed)
    g.insert_edge(1, 2)
    assert g.edge_exists(1, 2)
    assert not g.edge_exists(1, 3)
    assert list(g.neighbors(1)) == [2]


def test_hash_graph_adds_both_endpoints():
    g = DirectedHashGraph()
    g.insert_edge(1, 2)
    assert g.vertices() == {1, 2}
    assert len(g) == 2
    assert g.neighbors(2) == frozenset()
    assert not g.edge_exists(2, 1)


def test_adjacency_graph_adds_only_source():
    g = AdjacencyListGraph()
    g.insert_edge(1, 2)
    assert g.vertices() == {1}
    assert len(g) == 1
    with pytest.raises(KeyError):
        g.neighbors(2)


def test_adjacency_keeps_parallel_edges():
    g = AdjacencyListGraph()
    g.bulk_insert_edges([(1, 2), (1, 2), (1, 3)])
    assert g.neighbors(1) == (2, 2, 3)


def test_hash_graph_deduplicates_edges():
    g = DirectedHashGraph()
    g.bulk_insert_edges([(1, 2), (1, 2), (1, 3)])
    assert g.neighbors(1) == frozenset({2, 3})


@pytest.mark.parametrize("hashed", [True, False], ids=["hash", "adjacency"])
def test_insert_vertex_idempotent(hashed):
    g = _make(hashed)
    g.insert_edge(5, 6)
    g.insert_vertex(5)
    assert 6 in g.neighbors(5)
    g.insert_vertex(7)
    assert 7 in g.vertices()
    assert len(g.neighbors(7)) == 0


@pytest.mark.parametrize("hashed", [True, False], ids=["hash", "adjacency"])
def test_remove_edge(hashed):
    g = _make(hashed)
    g.bulk_insert_edges([(1, 2), (1, 3)])
    g.remove_edge(1, 2)
    assert not g.edge_exists(1, 2)
    assert g.edge_exists(1, 3)


def test_adjacency_remove_edge_removes_all_copies():
    g = AdjacencyListGraph()
    g.bulk_insert_edges([(1, 2), (1, 3), (1, 2)])
    g.remove_edge(1, 2)
    assert g.neighbors(1) == (3,)


@pytest.mark.parametrize("hashed", [True, False], ids=["hash", "adjacency"])
def test_remove_vertex(hashed):
    g = _make(hashed)
    g.insert_edge(1, 2)
    g.remove_vertex(1)
    assert 1 not in g.vertices()
    g.remove_vertex(99)
    assert 99 not in g.vertices()


def test_hash_edge_exists_unknown_source_raises():
    g = DirectedHashGraph()
    with pytest.raises(KeyError):
        g.edge_exists(1, 2)


def test_adjacency_edge_exists_unknown_source_false():
    g = AdjacencyListGraph()
    assert g.edge_exists(1, 2) is False


@pytest.mark.parametrize("hashed", [True, False], ids=["hash", "adjacency"])
def test_vertex_list_cached_until_update(hashed):
    g = _make(hashed)
    g.insert_vertex(1)
    assert g.vertex_list() == []
    g.update_vertex_list()
    assert g.vertex_list() == [1]
    g.insert_vertex(2)
    assert g.vertex_list() == [1]
    g.update_vertex_list()
    assert sorted(g.vertex_list()) == [1, 2]


@pytest.mark.parametrize("hashed", [True, False], ids=["hash", "adjacency"])
def test_constructor_from_mapping(hashed):
    edges = {1: [2, 3], 2: [], 3: [1]}
    g = DirectedHashGraph(edges) if hashed else AdjacencyListGraph(edges)
    assert sorted(g.vertex_list()) == [1, 2, 3]
    assert g.edge_exists(3, 1)
    assert len(g) == 3


@pytest.mark.parametrize("hashed", [True, False], ids=["hash", "adjacency"])
def test_shuffled_vertices_is_permutation(hashed):
    g = _make(hashed)
    for v in range(50):
        g.insert_vertex(v)
    result = g.shuffled_vertices(random.Random(3))
    assert sorted(result) == list(range(50))
    assert sorted(g.shuffled_vertices()) == list(range(50))


@pytest.mark.parametrize("hashed", [True, False], ids=["hash", "adjacency"])
def test_shuffled_vertices_deterministic_with_seed(hashed):
    g = _make(hashed)
    for v in range(20):
        g.insert_vertex(v)
    first = g.shuffled_vertices(random.Random(7))
    second = g.shuffled_vertices(random.Random(7))
    assert sorted(first) == list(range(20))
    assert first == second


@pytest.mark.parametrize("hashed", [True, False], ids=["hash", "adjacency"])
def test_print_graph_format(hashed):
    g = _make(hashed)
    g.insert_edge(1, 2)
    buf = io.StringIO()
    g.print_graph(buf)
    assert buf.getvalue() == "1--->2, \n"


@pytest.mark.parametrize("hashed", [True, False], ids=["hash", "adjacency"])
def test_print_graph_skips_vertices_without_edges(hashed):
    g = _make(hashed)
    g.insert_vertex(4)
    buf = io.StringIO()
    g.print_graph(buf)
    assert buf.getvalue() == ""