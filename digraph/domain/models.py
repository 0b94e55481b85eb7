"""Immutable domain models for the directed graph engine.

All models are frozen dataclasses with slots. Vertex and edge types are
defaults only: the graph accepts any vertex exposing an ``id`` and any
edge payload at all.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic

from ..ports.graph import V


@dataclass(frozen=True, slots=True)
class Vertex:
    """A uniquely identified node.

    Attributes:
        id: Unique vertex identifier (e.g., 'RTD')
        name: Optional human-readable name
    """

    id: str
    name: str = ""

    def __str__(self) -> str:
        return self.id


@dataclass(frozen=True, slots=True)
class Edge:
    """Default edge payload carrying a weight.

    Attributes:
        weight: Weight used by shortest-path searches
        label: Optional free-form label
    """

    weight: float = 1.0
    label: str = ""

    def __str__(self) -> str:
        if self.label:
            return f"{self.label}:{self.weight:g}"
        return f"{self.weight:g}"


@dataclass(frozen=True, slots=True)
class Path(Generic[V]):
    """Result of a single search between two vertices.

    ``total_weight`` is 0 for unweighted searches. ``visited`` holds every
    vertex the search reached, in discovery order; it always contains the
    vertices of the path itself.

    Attributes:
        vertices: Ordered vertices from start to target (inclusive)
        total_weight: Accumulated edge weight along the path
        visited: Vertices reached during the search
    """

    vertices: tuple[V, ...]
    total_weight: float = 0.0
    visited: tuple[V, ...] = field(default_factory=tuple)

    @property
    def ids(self) -> tuple[str, ...]:
        """Return the identifiers of the path vertices."""
        return tuple(v.id for v in self.vertices)

    @property
    def visited_ids(self) -> frozenset[str]:
        """Return the identifiers of all visited vertices."""
        return frozenset(v.id for v in self.visited)

    @property
    def is_empty(self) -> bool:
        """Check if the path holds no vertices."""
        return len(self.vertices) == 0

    @property
    def num_vertices(self) -> int:
        return len(self.vertices)

    @property
    def num_edges(self) -> int:
        """Return the number of edges traversed by the path."""
        return max(0, len(self.vertices) - 1)

    @property
    def start(self) -> V:
        return self.vertices[0]

    @property
    def target(self) -> V:
        return self.vertices[-1]

    def __str__(self) -> str:
        joined = ", ".join(self.ids)
        return (
            f"Weight={self.total_weight:f} Length={len(self.vertices)} "
            f"visited={len(self.visited)} ({joined})"
        )
