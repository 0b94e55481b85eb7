"""Properties that must hold across the three searches on random graphs."""

from __future__ import annotations

import random

import pytest

from digraph.domain.models import Edge, Vertex
from digraph.graph.directed_graph import DirectedGraph


def random_graph(
    seed: int, size: int = 12, edges: int = 30
) -> DirectedGraph[Vertex, Edge]:
    rng = random.Random(seed)
    graph: DirectedGraph[Vertex, Edge] = DirectedGraph()
    ids = [f"V{i}" for i in range(size)]
    for vertex_id in ids:
        graph.upsert_vertex(Vertex(vertex_id))
    for _ in range(edges):
        from_id, to_id = rng.sample(ids, 2)
        graph.add_edge(from_id, to_id, Edge(float(rng.randint(1, 9))))
    return graph


def all_pairs(graph: DirectedGraph[Vertex, Edge]):
    for start in graph.vertices:
        for target in graph.vertices:
            yield start.id, target.id


@pytest.mark.parametrize("seed", range(8))
def test_bfs_is_never_longer_than_dfs(seed):
    graph = random_graph(seed)

    for start_id, target_id in all_pairs(graph):
        dfs = graph.depth_first_search(start_id, target_id)
        bfs = graph.breadth_first_search(start_id, target_id)

        assert (dfs is None) == (bfs is None)
        if bfs is not None:
            assert bfs.num_edges <= dfs.num_edges


@pytest.mark.parametrize("seed", range(8))
def test_unit_weight_dijkstra_matches_bfs_length(seed):
    graph = random_graph(seed)

    for start_id, target_id in all_pairs(graph):
        bfs = graph.breadth_first_search(start_id, target_id)
        dijkstra = graph.dijkstra_shortest_path(start_id, target_id, lambda e: 1.0)

        assert (bfs is None) == (dijkstra is None)
        if bfs is not None:
            assert dijkstra.num_edges == bfs.num_edges
            assert dijkstra.total_weight == bfs.num_edges


@pytest.mark.parametrize("seed", range(8))
def test_dijkstra_never_heavier_than_other_paths(seed):
    graph = random_graph(seed)

    def weight_of(path) -> float:
        pairs = zip(path.ids, path.ids[1:])
        return sum(graph.get_edge(a, b).weight for a, b in pairs)

    for start_id, target_id in all_pairs(graph):
        best = graph.dijkstra_shortest_path(start_id, target_id)
        if best is None:
            continue
        assert best.total_weight == weight_of(best)
        for other in (
            graph.depth_first_search(start_id, target_id),
            graph.breadth_first_search(start_id, target_id),
        ):
            assert best.total_weight <= weight_of(other)


@pytest.mark.parametrize("seed", range(4))
def test_returned_paths_follow_edges(seed):
    graph = random_graph(seed)

    for start_id, target_id in all_pairs(graph):
        for path in (
            graph.depth_first_search(start_id, target_id),
            graph.breadth_first_search(start_id, target_id),
            graph.dijkstra_shortest_path(start_id, target_id),
        ):
            if path is None:
                continue
            assert path.ids[0] == start_id
            assert path.ids[-1] == target_id
            assert len(set(path.ids)) == len(path.ids)
            for a, b in zip(path.ids, path.ids[1:]):
                assert graph.get_edge(a, b) is not None
            assert set(path.ids) <= path.visited_ids


@pytest.mark.parametrize("method", ["depth_first_search", "breadth_first_search"])
def test_missing_target_is_not_found(method):
    graph = random_graph(0)
    assert getattr(graph, method)("V0", "missing") is None
    assert graph.dijkstra_shortest_path("V0", "missing") is None
