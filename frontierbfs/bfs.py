"""Breadth-first search from vertex 0: top-down, bottom-up and hybrid."""

from __future__ import annotations

from typing import Callable, MutableSequence, Sequence

from frontierbfs.graph import Graph

ROOT_NODE_ID = 0
NOT_VISITED = -1

# The hybrid search switches to bottom-up once the frontier holds more than
# this share of all vertices, and back to top-down below the second share.
TOP_DOWN_TO_BOTTOM_UP = 0.15
BOTTOM_UP_TO_TOP_DOWN = 0.07

_Step = Callable[[Graph, Sequence[int], MutableSequence[int]], list]


def top_down_step(
    graph: Graph, frontier: Sequence[int], distances: MutableSequence[int]
) -> list[int]:
    """Expand every frontier vertex along its outgoing edges.

    Unvisited neighbours get a distance one greater than their discoverer's and
    are returned as the next frontier. ``distances`` is updated in place.
    """
    next_frontier: list[int] = []
    for vertex in frontier:
        step = distances[vertex] + 1
        for neighbour in graph.outgoing(vertex):
            if distances[neighbour] == NOT_VISITED:
                distances[neighbour] = step
                next_frontier.append(neighbour)
    return next_frontier


def bottom_up_step(
    graph: Graph, frontier: Sequence[int], distances: MutableSequence[int]
) -> list[int]:
    """Let every unvisited vertex look for a parent among the frontier.

    A vertex with an incoming edge from a frontier vertex joins the next
    frontier. ``distances`` is updated in place.
    """
    in_frontier = set(frontier)
    next_frontier: list[int] = []
    for vertex in range(graph.num_nodes):
        if distances[vertex] != NOT_VISITED:
            continue
        parent = next(
            (source for source in graph.incoming(vertex) if source in in_frontier),
            None,
        )
        if parent is not None:
            distances[vertex] = distances[parent] + 1
            next_frontier.append(vertex)
    return next_frontier


def _start(graph: Graph) -> tuple[list[int], list[int]]:
    if graph.num_nodes == 0:
        raise ValueError("cannot search a graph without vertices")
    distances = [NOT_VISITED] * graph.num_nodes
    distances[ROOT_NODE_ID] = 0
    return distances, [ROOT_NODE_ID]


def _run(graph: Graph, step: _Step) -> list[int]:
    distances, frontier = _start(graph)
    while frontier:
        frontier = step(graph, frontier, distances)
    return distances


def bfs_top_down(graph: Graph) -> list[int]:
    """Distances from vertex 0 to every vertex, -1 where unreachable."""
    return _run(graph, top_down_step)


def bfs_bottom_up(graph: Graph) -> list[int]:
    """Distances from vertex 0 computed with bottom-up steps only."""
    return _run(graph, bottom_up_step)


def bfs_hybrid(graph: Graph) -> list[int]:
    """Distances from vertex 0, choosing the step kind by frontier size."""
    distances, frontier = _start(graph)
    using_top_down = True
    while frontier:
        ratio = len(frontier) / graph.num_nodes
        if using_top_down and ratio > TOP_DOWN_TO_BOTTOM_UP:
            using_top_down = False
        elif not using_top_down and ratio < BOTTOM_UP_TO_TOP_DOWN:
            using_top_down = True
        step = top_down_step if using_top_down else bottom_up_step
        frontier = step(graph, frontier, distances)
    return distances