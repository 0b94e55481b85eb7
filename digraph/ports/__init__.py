"""Ports layer - Abstract interfaces (Protocols) for the engine.

Ports define the contracts between the graph engine and the adapters
that load graphs and run searches on behalf of callers.
"""

from .graph import (
    E,
    GraphRepositoryPort,
    Identifiable,
    PathSearch,
    PathSolverPort,
    V,
    WeightFunction,
)

__all__ = [
    "Identifiable",
    "V",
    "E",
    "WeightFunction",
    "PathSearch",
    "GraphRepositoryPort",
    "PathSolverPort",
]
