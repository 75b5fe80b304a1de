"""Stock edge-weight functions.

Any callable ``Edge -> float`` satisfies the EdgeWeight port; these
cover the common payload shapes.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Callable

from ..domain.models import Edge


def element_weight(edge: Edge) -> float:
    """Use the edge payload itself as its weight."""
    return float(edge.element)


def unit_weight(edge: Edge) -> float:
    """Weigh every edge 1.0, so distances count hops."""
    return 1.0


def attribute_weight(name: str) -> Callable[[Edge], float]:
    """Build a weight function reading one field of the edge payload.

    Mapping payloads are indexed by ``name``; anything else is read
    with ``getattr``.

    Args:
        name: Key or attribute holding the weight.

    Returns:
        A weight function for the engine.
    """

    def weight(edge: Edge) -> float:
        element = edge.element
        if isinstance(element, Mapping):
            return float(element[name])
        return float(getattr(element, name))

    weight.__name__ = f"attribute_weight_{name}"
    return weight
