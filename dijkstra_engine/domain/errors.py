"""Typed domain errors for the shortest-path engine.

All errors inherit from ShortestPathError and can optionally
wrap a root cause exception for debugging.

Unreachable vertices are not errors at the engine level: queries
return ``math.inf`` and empty paths instead. Lookups of vertices
that are not part of the graph surface as the underlying ``KeyError``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class ShortestPathError(Exception):
    """Base error for the shortest-path domain.

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
class InvalidStateError(ShortestPathError):
    """Engine operation called out of lifecycle order.

    Raised when distances or paths are queried before ``run()``,
    or when ``run()`` is called before ``initialize()``.

    Attributes:
        operation: Name of the rejected operation
        state: Name of the engine state at the time of the call
    """

    operation: str = ""
    state: str = ""


@dataclass
class GraphError(ShortestPathError):
    """Graph construction or data integrity error.

    Attributes:
        vertex_count: Number of vertices involved, if relevant
    """

    vertex_count: Optional[int] = None


@dataclass
class VertexNotFoundError(ShortestPathError):
    """Vertex is not part of the graph.

    Attributes:
        vertex: The vertex (or label) that was not found
    """

    vertex: Any = None


@dataclass
class NoPathFoundError(ShortestPathError):
    """No path exists between the requested vertices.

    Attributes:
        source: Source vertex
        target: Target vertex
    """

    source: Any = None
    target: Any = None


@dataclass
class ConfigurationError(ShortestPathError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
