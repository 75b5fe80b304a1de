"""Shortest-path algorithm core.

This subpackage contains the Dijkstra engine, the indexed priority
frontier it relies on, and the stock edge-weight functions.
"""

from .dijkstra import Dijkstra
from .frontier import VertexFrontier
from .weights import attribute_weight, element_weight, unit_weight

__all__ = [
    "Dijkstra",
    "VertexFrontier",
    "attribute_weight",
    "element_weight",
    "unit_weight",
]
