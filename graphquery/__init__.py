"""Depth-first graph queries over vertex graphs and adjacency maps."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from graphquery.model import (
    Airport,
    FlightNetwork,
    InvalidReferenceError,
    Vertex,
    VertexGraph,
)
from graphquery.types import AirportSpec, VertexSpec
from graphquery.graph_utils import (
    can_reach,
    longest_word,
    print_self_loopers,
    print_short_words,
    unreachable,
)

__version__ = "0.1.0"

# Library code logs but never configures handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())


def build(specs: Iterable[VertexSpec | Mapping[str, Any]]) -> VertexGraph:
    """Build a vertex graph from id-indexed specs.

    Args:
        specs: Vertex specs or dicts with 'id', 'data' and 'neighbors'.

    Returns:
        VertexGraph instance.

    Raises:
        InvalidReferenceError: If a neighbor id does not exist.
    """
    return VertexGraph(specs)


def build_network(routes: Mapping[str, Iterable[str]]) -> FlightNetwork:
    """Build a flight network from a mapping of code to outbound codes.

    Every code that appears as a destination must also be a key.

    Raises:
        InvalidReferenceError: If a destination code is not a key.
    """
    return FlightNetwork(
        AirportSpec(code=code, outbound=list(outbound))
        for code, outbound in routes.items()
    )


__all__ = [
    "Airport",
    "AirportSpec",
    "FlightNetwork",
    "InvalidReferenceError",
    "Vertex",
    "VertexGraph",
    "VertexSpec",
    "build",
    "build_network",
    "can_reach",
    "longest_word",
    "print_self_loopers",
    "print_short_words",
    "unreachable",
]
