"""Adjacency-list graph adapter.

In-memory undirected graph implementing GraphPort. Vertices and
edges receive dense indices in insertion order, and each vertex keeps
the list of edges incident to it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ...domain.errors import GraphError
from ...domain.models import Edge, Vertex


@dataclass
class AdjacencyListGraph:
    """Undirected graph stored as per-vertex incidence lists.

    Only insertion is supported; the engine never mutates a graph.
    """

    _vertices: List[Vertex] = field(default_factory=list, repr=False)
    _edges: List[Edge] = field(default_factory=list, repr=False)
    _incidence: Dict[Vertex, List[Edge]] = field(default_factory=dict, repr=False)

    def insert_vertex(self, element: Any = None) -> Vertex:
        """Add a vertex carrying ``element`` and return it."""
        vertex = Vertex(index=len(self._vertices), element=element)
        self._vertices.append(vertex)
        self._incidence[vertex] = []
        return vertex

    def insert_edge(self, u: Vertex, v: Vertex, element: Any = None) -> Edge:
        """Add an undirected edge between ``u`` and ``v``.

        Args:
            u: First endpoint.
            v: Second endpoint.
            element: Payload, usually the weight.

        Returns:
            The new edge.

        Raises:
            KeyError: If either endpoint is not a vertex of this graph.
        """
        u_edges = self._incidence[u]
        v_edges = self._incidence[v]
        edge = Edge(index=len(self._edges), origin=u, destination=v, element=element)
        self._edges.append(edge)
        u_edges.append(edge)
        if v != u:
            v_edges.append(edge)
        return edge

    def vertices(self) -> List[Vertex]:
        return list(self._vertices)

    def edges(self) -> List[Edge]:
        return list(self._edges)

    def num_vertices(self) -> int:
        return len(self._vertices)

    def num_edges(self) -> int:
        return len(self._edges)

    def get_vertex(self, element: Any) -> Optional[Vertex]:
        """Find the first vertex carrying ``element``, or None."""
        for vertex in self._vertices:
            if vertex.element == element:
                return vertex
        return None

    def incident_edges(self, vertex: Vertex) -> List[Edge]:
        """Return the edges touching ``vertex``.

        Raises:
            KeyError: If ``vertex`` is not part of this graph.
        """
        return list(self._incidence[vertex])

    def opposite(self, vertex: Vertex, edge: Edge) -> Vertex:
        """Return the endpoint of ``edge`` across from ``vertex``.

        Raises:
            GraphError: If ``edge`` does not touch ``vertex``.
        """
        if edge.origin == vertex:
            return edge.destination
        if edge.destination == vertex:
            return edge.origin
        raise GraphError(f"Edge {edge} is not incident to vertex {vertex}")

    def end_vertices(self, edge: Edge) -> Tuple[Vertex, Vertex]:
        return edge.endpoints
