import pytest

from digraph.domain.models import Edge, Vertex
from digraph.graph.dijkstra import dijkstra_shortest_path, edge_weight
from digraph.graph.directed_graph import DirectedGraph


def weighted(edges: list[tuple[str, str, float]]) -> DirectedGraph[Vertex, Edge]:
    graph: DirectedGraph[Vertex, Edge] = DirectedGraph()
    for from_id, to_id, weight in edges:
        graph.add_edge(
            graph.get_vertex(from_id) or Vertex(from_id),
            graph.get_vertex(to_id) or Vertex(to_id),
            Edge(weight),
        )
    return graph


def test_dijkstra_finds_direct_edge():
    graph = weighted([("A", "B", 10.0)])

    path = dijkstra_shortest_path(graph, "A", "B")

    assert path.ids == ("A", "B")
    assert path.total_weight == 10.0


def test_dijkstra_chooses_shortest_path():
    # A -> C costs 5, but A -> B -> C costs 3
    graph = weighted(
        [("A", "B", 1.0), ("B", "C", 2.0), ("A", "C", 5.0), ("C", "D", 1.0)]
    )

    path = dijkstra_shortest_path(graph, "A", "D")

    assert path.ids == ("A", "B", "C", "D")
    assert path.total_weight == 4.0


def test_dijkstra_relaxes_tentative_distance():
    # B is discovered at 10 from A, then improved to 2 through C
    graph = weighted(
        [("A", "B", 10.0), ("A", "C", 1.0), ("C", "B", 1.0), ("B", "D", 1.0)]
    )

    path = dijkstra_shortest_path(graph, "A", "D")

    assert path.ids == ("A", "C", "B", "D")
    assert path.total_weight == 3.0


def test_dijkstra_start_equals_target():
    graph = weighted([("A", "B", 1.0)])

    path = dijkstra_shortest_path(graph, "A", "A")

    assert path.ids == ("A",)
    assert path.total_weight == 0.0
    assert path.visited_ids == {"A"}


@pytest.mark.parametrize("start_id, target_id", [("A", "Z"), ("Z", "A")])
def test_dijkstra_invalid_nodes(start_id, target_id):
    graph = weighted([("A", "B", 1.0)])
    assert dijkstra_shortest_path(graph, start_id, target_id) is None


def test_dijkstra_no_path_returns_none():
    graph = weighted([("A", "B", 5.0), ("A", "C", 1.0), ("C", "B", 1.0)])
    graph.upsert_vertex(Vertex("D"))

    assert dijkstra_shortest_path(graph, "A", "D") is None
    assert dijkstra_shortest_path(graph, "B", "A") is None


def test_dijkstra_ties_break_by_discovery_order():
    graph = weighted(
        [("A", "B", 1.0), ("A", "C", 1.0), ("B", "D", 1.0), ("C", "D", 1.0)]
    )

    first = dijkstra_shortest_path(graph, "A", "D")
    second = dijkstra_shortest_path(graph, "A", "D")

    assert first.ids == ("A", "B", "D")
    assert second == first


def test_dijkstra_zero_weight_edges():
    graph = weighted([("A", "B", 0.0), ("B", "C", 0.0), ("A", "C", 1.0)])

    path = dijkstra_shortest_path(graph, "A", "C")

    assert path.ids == ("A", "B", "C")
    assert path.total_weight == 0.0


def test_dijkstra_accumulates_fractional_weights():
    graph = weighted([("A", "B", 0.1), ("B", "C", 0.2)])

    path = dijkstra_shortest_path(graph, "A", "C")

    assert path.total_weight == pytest.approx(0.3)


def test_dijkstra_visited_contains_path():
    graph = weighted(
        [("A", "B", 1.0), ("B", "C", 2.0), ("A", "C", 5.0), ("C", "D", 1.0)]
    )

    path = dijkstra_shortest_path(graph, "A", "D")

    assert set(path.ids) <= path.visited_ids


def test_dijkstra_with_custom_weight_function():
    graph: DirectedGraph[Vertex, dict] = DirectedGraph()
    graph.add_edge(Vertex("A"), Vertex("B"), {"km": 40, "minutes": 20})
    graph.add_edge(Vertex("B"), Vertex("C"), {"km": 40, "minutes": 20})
    graph.add_edge(Vertex("A"), Vertex("C"), {"km": 70, "minutes": 60})

    by_distance = dijkstra_shortest_path(graph, "A", "C", lambda e: e["km"])
    by_time = dijkstra_shortest_path(graph, "A", "C", lambda e: e["minutes"])

    assert by_distance.ids == ("A", "C")
    assert by_distance.total_weight == 70
    assert by_time.ids == ("A", "B", "C")
    assert by_time.total_weight == 40


def test_dijkstra_through_graph_method():
    graph = weighted([("A", "B", 3.0), ("B", "C", 4.0), ("A", "C", 10.0)])

    path = graph.dijkstra_shortest_path("A", "C")

    assert path.ids == ("A", "B", "C")
    assert path.total_weight == 7.0
    assert graph.dijkstra_shortest_path("A", "C", lambda e: 1.0).ids == ("A", "C")


def test_edge_weight_reads_weight_attribute():
    assert edge_weight(Edge(2.5, "x")) == 2.5
