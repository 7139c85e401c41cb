"""Reachability queries for flight networks and adjacency maps."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Mapping, Sequence
from typing import TYPE_CHECKING, TypeVar

from .traversal import reachable, walk

if TYPE_CHECKING:
    from graphquery.model import Airport

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)


def _outbound(airport: Airport) -> list[Airport]:
    return airport.get_outbound_flights()


def can_reach(start: Airport | None, destination: Airport | None) -> bool:
    """Check whether destination can be reached by flights from start.

    An airport always reaches itself, with zero flights. The search
    stops at the first path found and terminates on cyclic networks.

    Args:
        start: Departure airport.
        destination: Arrival airport.

    Returns:
        True if a (possibly empty) chain of flights connects them.
        False if either airport is None.
    """
    if start is None or destination is None:
        return False

    for airport in walk(start, _outbound):
        if airport == destination:
            return True

    logger.debug("No route from %r to %r", start, destination)
    return False


def unreachable(graph: Mapping[K, Sequence[K]], starting: K) -> set[K]:
    """Get all keys of graph that cannot be reached from starting.

    The graph maps each node to the ordered list of its neighbors.
    Neighbors that are not keys are dead ends. If starting is not a
    key, nothing is reachable and every key is returned.

    Args:
        graph: Adjacency map.
        starting: Node to search from.

    Returns:
        Set of unreachable keys.
    """
    seen = reachable(graph, starting)
    result = set(graph.keys()) - seen
    logger.debug(
        "%d of %d keys unreachable from %r", len(result), len(graph), starting
    )
    return result
