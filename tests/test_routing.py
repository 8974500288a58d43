"""Tests for breadth-first route finding."""

import random

import numpy as np
import pytest
from scipy.sparse.csgraph import shortest_path

from graph_schedule import (
    NoRouteError,
    SparseGraph,
    adjacency_matrix,
    find_route,
    has_route,
    route_distances,
)


def make_simple_graph(store):
    graph = store("a graph")
    for label in ["node 1", "node 2", "node 3", "node 4"]:
        graph.add_node(label)
    graph.add_directed_edge("node 1", "node 2")
    graph.add_directed_edge("node 2", "node 3")
    return graph


def make_graph4(store):
    graph = store()
    for label in ["1", "2", "3", "4", "5", "6", "7"]:
        graph.add_node(label)
    graph.add_directed_edge("1", "2")
    graph.add_directed_edge("2", "3")
    graph.add_directed_edge("4", "3")
    graph.add_directed_edge("1", "2")
    graph.add_directed_edge("5", "6")
    graph.add_directed_edge("7", "6")
    graph.add_undirected_edge("4", "5")
    graph.add_undirected_edge("4", "7")
    return graph


def random_graph(store, seed, n=12, density=0.15):
    rng = random.Random(seed)
    graph = store()
    labels = [f"v{i}" for i in range(n)]
    for label in labels:
        graph.add_node(label)
    for a in labels:
        for b in labels:
            if rng.random() < density:
                graph.add_directed_edge(a, b)
    return graph


def is_valid_route(graph, route, start, end):
    """Route starts and ends right and follows existing edges."""
    if route[0] != start or route[-1] != end:
        return False
    return all(graph.has_edge(a, b) for a, b in zip(route, route[1:]))


def bfs_oracle(graph):
    """Unweighted all-pairs hop counts computed by scipy."""
    labels, matrix = adjacency_matrix(graph)
    dist = shortest_path(matrix.astype(np.float64), directed=True, unweighted=True)
    index = {label: i for i, label in enumerate(labels)}
    return dist, index


class TestFindRoute:
    """Tests for find_route."""

    def test_simple_route(self, store):
        """A chain yields the full chain."""
        graph = make_simple_graph(store)

        route = find_route(graph, "node 1", "node 3")

        assert route == ["node 1", "node 2", "node 3"]
        assert is_valid_route(graph, route, "node 1", "node 3")

    def test_no_route(self, store):
        """An unreachable node raises NoRouteError."""
        graph = make_simple_graph(store)

        with pytest.raises(NoRouteError, match="node 4"):
            find_route(graph, "node 1", "node 4")

    def test_unregistered_target(self, store):
        """A target outside the graph is unreachable."""
        graph = make_simple_graph(store)

        with pytest.raises(NoRouteError):
            find_route(graph, "node 1", "nowhere")

    def test_unregistered_source(self, store):
        """A source outside the graph reaches nothing."""
        graph = make_simple_graph(store)

        with pytest.raises(NoRouteError):
            find_route(graph, "nowhere", "node 1")

    def test_route_to_self(self, store):
        """A node routes to itself in one step."""
        graph = make_simple_graph(store)

        assert find_route(graph, "node 2", "node 2") == ["node 2"]
        assert find_route(graph, "node 4", "node 4") == ["node 4"]

    def test_route_to_self_unregistered(self, store):
        """The trivial route does not consult the graph."""
        assert find_route(store(), "x", "x") == ["x"]

    def test_directed_edges_only(self, store):
        """Routes do not walk edges backwards."""
        graph = make_simple_graph(store)

        with pytest.raises(NoRouteError):
            find_route(graph, "node 3", "node 1")

    def test_graph4(self, store):
        """Mixed directed/undirected graph from the lab fixtures."""
        graph = make_graph4(store)

        with pytest.raises(NoRouteError):
            find_route(graph, "1", "4")

        route = find_route(graph, "1", "3")
        assert len(route) == 3
        assert is_valid_route(graph, route, "1", "3")

        route = find_route(graph, "5", "3")
        assert route == ["5", "4", "3"]

        route = find_route(graph, "7", "6")
        assert route == ["7", "6"]

    def test_prefers_shorter_route(self, store):
        """A shortcut beats a longer chain."""
        graph = store()
        graph.add_directed_edge("a", "b")
        graph.add_directed_edge("b", "c")
        graph.add_directed_edge("c", "d")
        graph.add_directed_edge("a", "d")

        assert find_route(graph, "a", "d") == ["a", "d"]

    def test_cycle_back_to_source(self, store):
        """Cycles through the source do not confuse reconstruction."""
        graph = store()
        graph.add_undirected_edge("a", "b")
        graph.add_undirected_edge("b", "c")
        graph.add_directed_edge("c", "a")

        assert find_route(graph, "a", "c") == ["a", "b", "c"]

    def test_first_discovery_wins(self):
        """Ties are broken by the store's neighbor order."""
        graph = SparseGraph()
        graph.add_directed_edge("s", "right")
        graph.add_directed_edge("s", "left")
        graph.add_directed_edge("left", "t")
        graph.add_directed_edge("right", "t")

        assert find_route(graph, "s", "t") == ["s", "right", "t"]

    def test_does_not_mutate_graph(self, store):
        """Routing leaves the graph untouched."""
        graph = make_graph4(store)
        before = {label: graph.neighbors(label) for label in graph}

        find_route(graph, "5", "3")

        assert {label: graph.neighbors(label) for label in graph} == before


class TestRouteOptimality:
    """Route lengths match an independent shortest path computation."""

    @pytest.mark.parametrize("seed", range(10))
    def test_matches_scipy_distances(self, store, seed):
        """Every reachable pair gets a valid route of optimal length."""
        graph = random_graph(store, seed)
        dist, index = bfs_oracle(graph)

        for a in graph:
            for b in graph:
                d = dist[index[a], index[b]]
                if np.isinf(d):
                    with pytest.raises(NoRouteError):
                        find_route(graph, a, b)
                    continue
                route = find_route(graph, a, b)
                assert len(route) - 1 == int(d)
                assert is_valid_route(graph, route, a, b)


class TestRouteHelpers:
    """Tests for has_route and route_distances."""

    def test_has_route(self, store):
        """has_route mirrors find_route."""
        graph = make_simple_graph(store)

        assert has_route(graph, "node 1", "node 3")
        assert has_route(graph, "node 4", "node 4")
        assert not has_route(graph, "node 1", "node 4")
        assert not has_route(graph, "node 3", "node 1")

    def test_route_distances(self, store):
        """Distances cover exactly the reachable nodes."""
        graph = make_graph4(store)

        assert route_distances(graph, "5") == {"5": 0, "4": 1, "6": 1, "3": 2, "7": 2}
        assert route_distances(graph, "3") == {"3": 0}

    @pytest.mark.parametrize("seed", range(5))
    def test_route_distances_match_scipy(self, store, seed):
        """BFS distances agree with scipy."""
        graph = random_graph(store, seed, n=15, density=0.1)
        dist, index = bfs_oracle(graph)

        for a in graph:
            expected = {
                b: int(dist[index[a], index[b]])
                for b in graph
                if not np.isinf(dist[index[a], index[b]])
            }
            assert route_distances(graph, a) == expected
