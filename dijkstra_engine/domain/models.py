"""Immutable domain models for the shortest-path engine.

Vertices and edges are frozen dataclasses that compare and hash by
identity, so a vertex from one graph never matches a vertex of
another. The dense integer ``index`` is only the slot assigned when
the graph is built.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Optional


class EngineState(Enum):
    """Lifecycle of a Dijkstra engine instance."""

    UNINITIALIZED = auto()
    INITIALIZED = auto()
    COMPUTED = auto()


@dataclass(frozen=True, slots=True, eq=False)
class Vertex:
    """A graph vertex.

    Attributes:
        index: Dense identifier, unique within its graph
        element: Arbitrary payload (e.g., a label)
    """

    index: int
    element: Any = None

    def __str__(self) -> str:
        return str(self.element)


@dataclass(frozen=True, slots=True, eq=False)
class Edge:
    """An undirected graph edge.

    Attributes:
        index: Dense identifier, unique within its graph
        origin: First endpoint, as inserted
        destination: Second endpoint, as inserted
        element: Arbitrary payload (e.g., a weight or a label)
    """

    index: int
    origin: Vertex
    destination: Vertex
    element: Any = None

    @property
    def endpoints(self) -> tuple[Vertex, Vertex]:
        """Return both endpoints in insertion order."""
        return (self.origin, self.destination)

    def __str__(self) -> str:
        return f"{self.origin}{self.destination}/{self.element}"


@dataclass(frozen=True, slots=True)
class PathResult:
    """Shortest path from a source to a target vertex.

    An unreachable target yields an empty result with an infinite
    distance.

    Attributes:
        source: Vertex the search started from
        target: Vertex the path leads to
        distance: Total weight of the path
        vertices: Ordered vertices from source to target (inclusive)
        edges: Ordered edges from source to target
    """

    source: Optional[Vertex]
    target: Optional[Vertex]
    distance: float = math.inf
    vertices: tuple[Vertex, ...] = field(default_factory=tuple)
    edges: tuple[Edge, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        """Check if no path was found."""
        return len(self.vertices) == 0

    @property
    def num_edges(self) -> int:
        """Return the number of edges on the path."""
        return len(self.edges)
