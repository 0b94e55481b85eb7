from digraph.domain.errors import DigraphError, GraphLoadError
from digraph.domain.models import Edge, Path, Vertex


def test_path_derived_properties():
    a, b, c = Vertex("A"), Vertex("B"), Vertex("C")
    path = Path(vertices=(a, b), total_weight=2.5, visited=(a, c, b))

    assert path.ids == ("A", "B")
    assert path.visited_ids == {"A", "B", "C"}
    assert path.num_vertices == 2
    assert path.num_edges == 1
    assert path.start is a
    assert path.target is b
    assert not path.is_empty
    assert str(path) == "Weight=2.500000 Length=2 visited=3 (A, B)"


def test_empty_path():
    path: Path[Vertex] = Path(vertices=())

    assert path.is_empty
    assert path.num_edges == 0
    assert path.total_weight == 0.0
    assert path.visited == ()


def test_vertex_and_edge_rendering():
    assert str(Vertex("RTD", "Rotterdam")) == "RTD"
    assert str(Edge(3.0)) == "3"
    assert str(Edge(2.5, "A16")) == "A16:2.5"


def test_error_str_includes_cause():
    cause = ValueError("bad weight")
    error = GraphLoadError("Failed to load edges", file_path="edges.csv", cause=cause)

    assert str(error) == "Failed to load edges: bad weight"
    assert isinstance(error, DigraphError)
    assert str(DigraphError("plain")) == "plain"


def test_path_shares_the_vertex_type_variable():
    from digraph.domain import models
    from digraph.ports import graph

    assert models.V is graph.V
