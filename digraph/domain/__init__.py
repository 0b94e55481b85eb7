"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the engine. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    DigraphError,
    GraphLoadError,
    NoPathFoundError,
    VertexNotFoundError,
)
from .models import Edge, Path, Vertex

__all__ = [
    # Models
    "Vertex",
    "Edge",
    "Path",
    # Errors
    "DigraphError",
    "VertexNotFoundError",
    "NoPathFoundError",
    "GraphLoadError",
    "ConfigurationError",
]
