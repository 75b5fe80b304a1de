"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the engine. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    GraphError,
    InvalidStateError,
    NoPathFoundError,
    ShortestPathError,
    VertexNotFoundError,
)
from .models import Edge, EngineState, PathResult, Vertex

__all__ = [
    # Models
    "Vertex",
    "Edge",
    "EngineState",
    "PathResult",
    # Errors
    "ShortestPathError",
    "InvalidStateError",
    "GraphError",
    "VertexNotFoundError",
    "NoPathFoundError",
    "ConfigurationError",
]
