"""Self-loop detection for vertex graphs."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO, TypeVar

from .traversal import NONTREE, search

if TYPE_CHECKING:
    from graphquery.model import Vertex

logger = logging.getLogger(__name__)

T = TypeVar("T")


def self_loopers(vertex: Vertex[T] | None) -> list[T]:
    """Get payloads of reachable vertices that list themselves as a neighbor.

    A vertex is reported at most once, at the point the depth-first scan
    of its neighbor list first meets the self-loop edge.

    Returns:
        Payloads in report order. Empty list if vertex is None.
    """
    reported: set[Vertex[T]] = set()
    result: list[T] = []

    for parent, child, kind in search(vertex):
        # A self-loop edge always leads to an already visited vertex
        if kind == NONTREE and child == parent and parent not in reported:
            reported.add(parent)
            result.append(parent.data)

    logger.debug("Found %d self-looping vertices from %r", len(result), vertex)
    return result


def print_self_loopers(vertex: Vertex[T] | None, file: TextIO | None = None) -> None:
    """Print the payload of every reachable vertex that has a self-loop.

    Args:
        vertex: Starting vertex. Prints nothing if None.
        file: Output stream. Defaults to sys.stdout.
    """
    out = file if file is not None else sys.stdout
    for data in self_loopers(vertex):
        print(data, file=out)
