import pytest

from frontierbfs.bfs import (
    NOT_VISITED,
    bfs_bottom_up,
    bfs_hybrid,
    bfs_top_down,
    bottom_up_step,
    top_down_step,
)
from frontierbfs.graph import Graph

SEARCHES = [bfs_top_down, bfs_bottom_up, bfs_hybrid]


def _from_adjacency(adjacency):
    starts, edges = [], []
    for targets in adjacency:
        starts.append(len(edges))
        edges.extend(targets)
    return Graph.from_outgoing(starts, edges)


def _chain(n):
    return _from_adjacency([[i + 1] if i + 1 < n else [] for i in range(n)])


def _grid(width):
    adjacency = []
    for row in range(width):
        for col in range(width):
            targets = []
            for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
                r, c = row + dr, col + dc
                if 0 <= r < width and 0 <= c < width:
                    targets.append(r * width + c)
            adjacency.append(targets)
    return _from_adjacency(adjacency)


def _star_with_tail():
    # vertex 0 reaches many leaves at once, one leaf continues into a chain,
    # and vertices 12 and 13 form an unreachable island.
    adjacency = [list(range(1, 9))] + [[] for _ in range(8)]
    adjacency[3] = [9]
    adjacency.append([10])
    adjacency.append([11])
    adjacency.append([])
    adjacency.append([13])
    adjacency.append([12])
    return _from_adjacency(adjacency)


GRAPHS = [_chain(6), _grid(7), _star_with_tail()]


def _assert_valid_bfs(graph, distances):
    assert len(distances) == graph.num_nodes
    assert distances[0] == 0
    for vertex in range(graph.num_nodes):
        reached_parents = [u for u in graph.incoming(vertex) if distances[u] != NOT_VISITED]
        if vertex == 0:
            continue
        if distances[vertex] == NOT_VISITED:
            assert reached_parents == []
        else:
            assert distances[vertex] > 0
            assert min(distances[u] for u in reached_parents) == distances[vertex] - 1


@pytest.mark.parametrize("search", SEARCHES)
def test_chain_distances(search):
    assert search(_chain(4)) == [0, 1, 2, 3]


@pytest.mark.parametrize("graph", GRAPHS)
def test_distances_are_valid_bfs(graph):
    results = [bfs_top_down(graph), bfs_bottom_up(graph), bfs_hybrid(graph)]
    for distances in results:
        assert distances[0] == 0
        _assert_valid_bfs(graph, distances)


@pytest.mark.parametrize("graph", GRAPHS)
def test_all_strategies_agree(graph):
    expected = bfs_top_down(graph)
    assert bfs_bottom_up(graph) == expected
    assert bfs_hybrid(graph) == expected


@pytest.mark.parametrize("search", SEARCHES)
def test_unreachable_vertices_stay_unvisited(search):
    distances = search(_star_with_tail())
    assert distances[12] == NOT_VISITED
    assert distances[13] == NOT_VISITED
    assert distances[11] == distances[10] + 1


@pytest.mark.parametrize("search", SEARCHES)
def test_single_vertex(search):
    assert search(Graph.from_outgoing([0], [])) == [0]


@pytest.mark.parametrize("search", SEARCHES)
def test_empty_graph_rejected(search):
    with pytest.raises(ValueError):
        search(Graph.from_outgoing([], []))


def test_top_down_step_updates_in_place():
    graph = _chain(4)
    distances = [0, NOT_VISITED, NOT_VISITED, NOT_VISITED]
    assert top_down_step(graph, [0], distances) == [1]
    assert distances == [0, 1, NOT_VISITED, NOT_VISITED]


def test_bottom_up_step_matches_top_down_step():
    graph = _grid(5)
    td = [NOT_VISITED] * graph.num_nodes
    bu = [NOT_VISITED] * graph.num_nodes
    td[0] = bu[0] = 0
    td_frontier, bu_frontier = [0], [0]
    while td_frontier:
        td_frontier = top_down_step(graph, td_frontier, td)
        bu_frontier = bottom_up_step(graph, bu_frontier, bu)
        assert sorted(td_frontier) == bu_frontier
        assert td == bu
    assert bu_frontier == []


def test_empty_frontier_step_changes_nothing():
    graph = _chain(3)
    distances = [0, NOT_VISITED, NOT_VISITED]
    assert bottom_up_step(graph, [], distances) == []
    assert distances == [0, NOT_VISITED, NOT_VISITED]