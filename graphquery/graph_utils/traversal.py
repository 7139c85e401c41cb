"""Iterative depth-first walks shared by the graph queries.

Walks keep an explicit stack of neighbor iterators instead of recursing,
so deep chains are not bounded by the interpreter recursion limit. The
visiting order is exactly the preorder of the recursive formulation:
a node is visited the first time it is met while scanning its parent's
neighbors left to right.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator, Mapping, Sequence
from typing import Any, TypeVar

N = TypeVar("N", bound=Hashable)
K = TypeVar("K", bound=Hashable)

# Edge kinds reported by search()
FORWARD = 1  # edge leads to a node seen for the first time
NONTREE = 0  # edge leads to an already visited node

NeighborFn = Callable[[Any], Iterable[Any]]


def vertex_neighbors(vertex: Any) -> Iterable[Any]:
    """Default neighbor accessor: the ``neighbors`` attribute."""
    return vertex.neighbors


def search(
    start: N | None,
    neighbors: NeighborFn = vertex_neighbors,
) -> Iterator[tuple[N, N, int]]:
    """Generate (parent, child, kind) triples for a DFS from start.

    The first triple is (start, start, FORWARD). Every edge examined
    afterwards is reported once, in scan order, as FORWARD when it
    discovers a node and NONTREE otherwise. ``None`` entries in a
    neighbor list are skipped.

    Args:
        start: Node to start from. ``None`` yields nothing.
        neighbors: Callable returning a node's ordered successors.
    """
    return _search(start, neighbors, skip_none=True)


def _search(
    start: N | None,
    neighbors: NeighborFn,
    skip_none: bool,
) -> Iterator[tuple[N, N, int]]:
    # With skip_none off, None is an ordinary node
    if skip_none and start is None:
        return

    seen: set[N] = {start}
    yield start, start, FORWARD
    stack: list[tuple[N, Iterator[N]]] = [(start, iter(neighbors(start)))]

    while stack:
        parent, children = stack[-1]
        for child in children:
            if skip_none and child is None:
                continue
            if child in seen:
                yield parent, child, NONTREE
                continue
            seen.add(child)
            yield parent, child, FORWARD
            stack.append((child, iter(neighbors(child))))
            break
        else:
            stack.pop()


def walk(
    start: N | None,
    neighbors: NeighborFn = vertex_neighbors,
) -> Iterator[N]:
    """Yield each node reachable from start (inclusive) once, in preorder."""
    for _, child, kind in search(start, neighbors):
        if kind == FORWARD:
            yield child


def walk_adjacency(graph: Mapping[K, Sequence[K]], starting: K) -> Iterator[K]:
    """Yield each key reachable from starting in an adjacency map.

    Values that are not keys end their branch and are not yielded.
    A starting value that is not a key yields nothing. ``None`` is a
    node like any other when it is a key.
    """
    if starting not in graph:
        return

    def successors(key: K) -> list[K]:
        return [value for value in graph[key] if value in graph]

    for _, child, kind in _search(starting, successors, skip_none=False):
        if kind == FORWARD:
            yield child


def reachable(graph: Mapping[K, Sequence[K]], starting: K) -> set[K]:
    """Keys of graph reachable from starting, including starting itself."""
    return set(walk_adjacency(graph, starting))
