"""Single-source shortest paths using Dijkstra's algorithm.

The engine runs against any object satisfying GraphPort and takes
the edge weight from an injected EdgeWeight function. Usage follows
an explicit lifecycle:

    engine = Dijkstra(graph, weight)
    engine.initialize(source)
    engine.run()            # or engine.run(target) to stop early
    engine.distance_to(v)
    engine.path_vertices(v)
    engine.path_edges(v)

Weights must be non-negative. This is not checked, and results are
meaningless if it does not hold.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional

from ..domain.errors import InvalidStateError
from ..domain.models import Edge, EngineState, Vertex
from ..ports.graph import EdgeWeight, GraphPort
from .frontier import VertexFrontier
from .weights import element_weight

logger = logging.getLogger(__name__)


class Dijkstra:
    """Dijkstra's algorithm over an undirected weighted graph.

    Stores, for every vertex, the best known distance from the source
    and the edge used to reach it. Paths are rebuilt by walking those
    predecessor edges back to the source.

    Attributes:
        graph: The graph to search.
        weight: Function returning the weight of an edge.
    """

    def __init__(self, graph: GraphPort, weight: Optional[EdgeWeight] = None) -> None:
        self.graph = graph
        self.weight: EdgeWeight = weight or element_weight

        self._state = EngineState.UNINITIALIZED
        self._source: Optional[Vertex] = None
        self._distance: Dict[Vertex, float] = {}
        self._previous: Dict[Vertex, Optional[Edge]] = {}
        self._finalized: List[Vertex] = []

    @property
    def state(self) -> EngineState:
        """Current lifecycle state."""
        return self._state

    @property
    def source(self) -> Optional[Vertex]:
        """Source vertex of the current run state, if any."""
        return self._source

    @property
    def finalized(self) -> tuple[Vertex, ...]:
        """Vertices settled by the last run, in extraction order."""
        return tuple(self._finalized)

    def initialize(self, source: Vertex) -> None:
        """Reset the run state for a search from ``source``.

        Every vertex starts at an infinite distance with no predecessor,
        except the source which starts at zero. Any previous run state
        is discarded.

        Args:
            source: Start vertex.

        Raises:
            KeyError: If ``source`` is not a vertex of the graph.
        """
        distance: Dict[Vertex, float] = {}
        previous: Dict[Vertex, Optional[Edge]] = {}
        for v in self.graph.vertices():
            distance[v] = math.inf
            previous[v] = None

        if source not in distance:
            raise KeyError(source)
        distance[source] = 0.0

        self._source = source
        self._distance = distance
        self._previous = previous
        self._finalized = []
        self._state = EngineState.INITIALIZED

        logger.debug(
            "Engine initialized",
            extra={"source": str(source), "vertices": len(distance)},
        )

    def run(self, target: Optional[Vertex] = None) -> None:
        """Compute shortest paths from the source.

        With no ``target``, distances to every reachable vertex are
        computed. With a ``target``, the search stops as soon as that
        vertex is settled; its distance and path are then final.

        Args:
            target: Optional finish vertex.

        Raises:
            InvalidStateError: If ``initialize()`` has not been called.
        """
        if self._state is EngineState.UNINITIALIZED:
            raise InvalidStateError(
                "run() requires initialize() first",
                operation="run",
                state=self._state.name,
            )

        distance = self._distance
        previous = self._previous

        frontier: VertexFrontier[Vertex] = VertexFrontier()
        for v in self.graph.vertices():
            frontier.push(v, distance[v])

        self._finalized = []
        relaxations = 0
        stop_reason = "exhausted"

        while frontier:
            v, dist_v = frontier.pop()

            if v == target:
                self._finalized.append(v)
                stop_reason = "target"
                break

            # Everything left in the frontier is unreachable
            if dist_v == math.inf:
                stop_reason = "unreachable"
                break

            self._finalized.append(v)

            for e in self.graph.incident_edges(v):
                u = self.graph.opposite(v, e)
                candidate = dist_v + self.weight(e)
                if candidate < distance[u]:
                    distance[u] = candidate
                    previous[u] = e
                    relaxations += 1
                    # u is still queued: non-negative weights never improve a settled vertex
                    if u in frontier:
                        frontier.update(u, candidate)

        self._state = EngineState.COMPUTED

        logger.debug(
            "Engine run complete",
            extra={
                "source": str(self._source),
                "target": None if target is None else str(target),
                "settled": len(self._finalized),
                "relaxations": relaxations,
                "stop_reason": stop_reason,
            },
        )

    def distance_to(self, vertex: Vertex) -> float:
        """Return the shortest distance from the source to ``vertex``.

        Returns ``math.inf`` when ``vertex`` is unreachable.
        """
        self._require_computed("distance_to")
        return self._distance[vertex]

    def is_reachable(self, vertex: Vertex) -> bool:
        """Check whether a path from the source to ``vertex`` was found."""
        return self.distance_to(vertex) != math.inf

    def path_vertices(self, vertex: Vertex) -> List[Vertex]:
        """Return the vertices on the shortest path to ``vertex``.

        The list runs from the source to ``vertex`` inclusive, and is
        empty when ``vertex`` is unreachable.
        """
        if not self.is_reachable(vertex):
            return []

        path = [vertex]
        current = vertex
        while current != self._source:
            edge = self._previous[current]
            current = self.graph.opposite(current, edge)
            path.append(current)

        path.reverse()
        return path

    def path_edges(self, vertex: Vertex) -> List[Edge]:
        """Return the edges on the shortest path to ``vertex``.

        The list runs from the source outwards, and is empty when
        ``vertex`` is the source or is unreachable.
        """
        if not self.is_reachable(vertex):
            return []

        path: List[Edge] = []
        current = vertex
        while current != self._source:
            edge = self._previous[current]
            path.append(edge)
            current = self.graph.opposite(current, edge)

        path.reverse()
        return path

    def _require_computed(self, operation: str) -> None:
        if self._state is not EngineState.COMPUTED:
            raise InvalidStateError(
                f"{operation}() requires run() first",
                operation=operation,
                state=self._state.name,
            )
