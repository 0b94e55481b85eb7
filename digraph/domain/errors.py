"""Typed domain errors for the directed graph engine.

The graph store and the search algorithms never raise for an expected
outcome: a missing vertex or an unreachable target comes back as None,
and a rejected edge as False. These errors belong to the facades that
callers opt into (PathSolver.solve, CSVGraphRepository.load) where an
exception is the more convenient signal.

All errors inherit from DigraphError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class DigraphError(Exception):
    """Base error for the graph engine.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class VertexNotFoundError(DigraphError):
    """Vertex identifier does not resolve in the graph.

    Attributes:
        vertex_id: The identifier that was not found
    """

    vertex_id: str = ""


@dataclass
class NoPathFoundError(DigraphError):
    """The search finished without reaching the target.

    Attributes:
        start_id: Identifier of the start vertex
        target_id: Identifier of the target vertex
        algorithm: Name of the search that was run
    """

    start_id: str = ""
    target_id: str = ""
    algorithm: str = ""


@dataclass
class GraphLoadError(DigraphError):
    """Graph import or data integrity error.

    Attributes:
        file_path: Path to the data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class ConfigurationError(DigraphError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
