import pytest

from plane_tools import Graph


def _path_graph():
    return Graph.from_data(['a', 'b', 'c', 'd'], [('a', 'b'), ('b', 'c'), ('c', 'd')])


def test_empty_graph():
    graph = Graph()

    assert graph.is_empty()
    assert len(graph) == 0
    assert graph.vertices() == []
    assert graph.edges() == []


def test_with_capacity_records_hints():
    graph = Graph.with_capacity(16, 6)

    assert graph.is_empty()
    assert graph.vertex_capacity_hint == 16
    assert graph.edge_per_vertex_hint == 6


def test_add_vertex_reports_insertion():
    graph = Graph()

    assert graph.add_vertex('a') is True
    assert graph.add_vertex('a') is False
    assert len(graph) == 1
    assert graph.contains('a')
    assert 'a' in graph
    assert not graph.contains('b')


def test_add_edge_requires_both_endpoints():
    graph = Graph.from_data(['a', 'b'], [])

    assert graph.add_edge('a', 'b') is True
    assert graph.add_edge('a', 'b') is True
    assert graph.add_edge('a', 'z') is False
    assert graph.connects_of('a') == {'b'}
    assert graph.connects_of('b') == {'a'}
    assert 'z' not in graph


def test_remove_edge_keeps_vertices():
    graph = _path_graph()

    assert graph.remove_edge('a', 'b') is True
    assert not graph.is_connected('a', 'b')
    assert not graph.is_connected('b', 'a')
    assert 'a' in graph
    assert graph.connects_of('a') == set()
    # absent edge between present vertices is a no-op
    assert graph.remove_edge('a', 'd') is True
    assert graph.remove_edge('a', 'z') is False


def test_from_data_collapses_duplicates_and_drops_dangling_edges():
    graph = Graph.from_data(['a', 'b', 'a'], [('a', 'b'), ('a', 'missing'), ('missing', 'b')])

    assert sorted(graph.vertices()) == ['a', 'b']
    assert graph.edges() == [('a', 'b')]


def test_queries_on_missing_vertex():
    graph = _path_graph()

    assert graph.is_connected('z', 'a') is False
    assert graph.is_connected('a', 'z') is False
    assert graph.connects_of('z') is None
    assert graph.degree('z') == 0


def test_connection_is_symmetric():
    graph = _path_graph()
    names = ['a', 'b', 'c', 'd', 'z']

    for v1 in names:
        for v2 in names:
            assert graph.is_connected(v1, v2) == graph.is_connected(v2, v1)


def test_edges_lists_each_edge_once():
    graph = _path_graph()

    edges = {frozenset(edge) for edge in graph.edges()}

    assert len(graph.edges()) == 3
    assert edges == {frozenset('ab'), frozenset('bc'), frozenset('cd')}


def test_remove_vertex_returns_neighbours():
    graph = _path_graph()

    assert graph.remove_vertex('b') == {'a', 'c'}
    assert 'b' not in graph
    assert graph.connects_of('a') == set()
    assert graph.connects_of('c') == {'d'}
    assert graph.remove_vertex('b') is None


def test_remove_weak_connected_prunes_dangling_chains():
    # triangle a-b-c with a tail c-d-e and an isolated vertex f
    graph = Graph.from_data(
        'abcdef',
        [('a', 'b'), ('b', 'c'), ('c', 'a'), ('c', 'd'), ('d', 'e')],
    )

    removed = graph.remove_weak_connected(2)

    assert removed == {'d', 'e', 'f'}
    assert sorted(graph.vertices()) == ['a', 'b', 'c']
    assert graph.connects_of('c') == {'a', 'b'}


def test_remove_weak_connected_rejects_negative_level():
    with pytest.raises(ValueError):
        Graph().remove_weak_connected(-1)


def test_copy_is_independent_and_equal():
    graph = _path_graph()
    clone = graph.copy()

    assert clone == graph
    clone.remove_edge('a', 'b')
    assert clone != graph
    assert graph.is_connected('a', 'b')


def test_connects_of_cannot_break_symmetry():
    graph = Graph.from_data('abc', [('a', 'b')])

    connects = graph.connects_of('a')
    with pytest.raises(AttributeError):
        connects.add('c')

    assert not graph.is_connected('a', 'c')
    assert not graph.is_connected('c', 'a')
    assert graph.connects_of('a') == {'b'}


def test_copy_keeps_subclass():
    class TaggedGraph(Graph):
        pass

    graph = TaggedGraph.from_data('ab', [('a', 'b')])

    clone = graph.copy()

    assert type(clone) is TaggedGraph
    assert clone == graph
