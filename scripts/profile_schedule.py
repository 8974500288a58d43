#!/usr/bin/env python3
"""
Profile scheduling and routing on both graph stores.

Usage:
    uv run python scripts/profile_schedule.py
"""

import cProfile
import pstats
import random
import time
from io import StringIO

from graph_schedule import DenseGraph, Graph, SparseGraph, compute_schedule, has_route


def generate_bipartite_graph(
    graph: Graph, n_top: int, n_bottom: int, edge_density: float, rng: random.Random
) -> Graph:
    """Fill a graph with a random bipartite conflict structure."""
    for i in range(n_top + n_bottom):
        graph.add_node(f"n{i}")

    for i in range(n_top):
        for j in range(n_top, n_top + n_bottom):
            if rng.random() < edge_density:
                graph.add_undirected_edge(f"n{i}", f"n{j}")

    return graph


def benchmark_store(store: type, n_top: int, n_bottom: int, edge_density: float):
    """Build a graph, schedule it, route across it; return elapsed times."""
    rng = random.Random(42)

    start = time.perf_counter()
    if store is DenseGraph:
        graph = DenseGraph(size_warning=None)
    else:
        graph = store()
    generate_bipartite_graph(graph, n_top, n_bottom, edge_density, rng)
    build = time.perf_counter() - start

    start = time.perf_counter()
    compute_schedule(graph)
    schedule = time.perf_counter() - start

    start = time.perf_counter()
    has_route(graph, "n0", f"n{n_top + n_bottom - 1}")
    route = time.perf_counter() - start

    return build, schedule, route, graph.edge_count()


def profile_schedule(n_top: int, n_bottom: int, edge_density: float = 0.2):
    """Profile compute_schedule on a sparse graph and return stats."""
    graph = generate_bipartite_graph(SparseGraph(), n_top, n_bottom, edge_density, random.Random(42))

    profiler = cProfile.Profile()

    profiler.enable()
    compute_schedule(graph)
    profiler.disable()

    stream = StringIO()
    stats = pstats.Stats(profiler, stream=stream)
    stats.strip_dirs()
    stats.sort_stats("cumulative")
    stats.print_stats(30)

    return stream.getvalue()


def main():
    print("=" * 78)
    print("GRAPH STORE BENCHMARK")
    print("=" * 78)
    print()

    print(f"{'Graph':<26} {'Store':<8} {'Edges':>8} {'Build':>10} {'Schedule':>10} {'Route':>10}")
    print("-" * 78)

    test_cases = [
        (50, 50, 0.3),
        (100, 100, 0.3),
        (200, 200, 0.2),
        (500, 500, 0.1),
    ]

    for n_top, n_bottom, density in test_cases:
        for store in (DenseGraph, SparseGraph):
            build, schedule, route, n_edges = benchmark_store(store, n_top, n_bottom, density)
            label = f"Bipartite ({n_top}x{n_bottom})"
            name = store.__name__.replace("Graph", "")
            print(
                f"{label:<26} {name:<8} {n_edges:>8} "
                f"{build:>9.4f}s {schedule:>9.4f}s {route:>9.4f}s"
            )

    print("-" * 78)
    print()

    print("=" * 78)
    print("DETAILED PROFILING (compute_schedule, 300x300 sparse)")
    print("=" * 78)

    print(profile_schedule(300, 300, 0.2))


if __name__ == "__main__":
    main()
