"""Conversions from vertex graphs to other representations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import networkx as nx

from .traversal import walk

if TYPE_CHECKING:
    from graphquery.model import Vertex


def to_adjacency(vertex: Vertex[Any] | None) -> dict[Any, list[Any]]:
    """Convert the part of a vertex graph reachable from vertex to an adjacency map.

    Keys are vertex payloads. Vertices sharing a payload merge into a
    single key whose neighbor lists are concatenated in visiting order.

    Returns:
        Dict mapping payload to list of neighbor payloads. Empty if
        vertex is None.
    """
    adjacency: dict[Any, list[Any]] = {}
    for v in walk(vertex):
        adjacency.setdefault(v.data, []).extend(
            n.data for n in v.neighbors if n is not None
        )
    return adjacency


def to_digraph(vertex: Vertex[Any] | None) -> nx.DiGraph:
    """Convert the part of a vertex graph reachable from vertex to a DiGraph.

    Nodes are keyed by ``id()`` of each vertex and carry a ``data``
    attribute, so vertices sharing a payload stay distinct. Duplicate
    edges collapse.
    """
    g = nx.DiGraph()
    for v in walk(vertex):
        g.add_node(id(v), data=v.data)
        for n in v.neighbors:
            if n is not None:
                g.add_edge(id(v), id(n))
    return g
