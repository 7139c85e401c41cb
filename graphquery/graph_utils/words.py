"""Word queries over string-valued vertex graphs."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from .traversal import walk

if TYPE_CHECKING:
    from graphquery.model import Vertex

logger = logging.getLogger(__name__)


def short_words(vertex: Vertex[str] | None, k: int) -> list[str]:
    """Get words reachable from vertex that are strictly shorter than k.

    Args:
        vertex: Starting vertex (included in the search).
        k: Exclusive upper bound on word length.

    Returns:
        Matching words in depth-first visiting order, one entry per
        vertex. Empty list if vertex is None.
    """
    result = [v.data for v in walk(vertex) if len(v.data) < k]
    logger.debug("Found %d words shorter than %d from %r", len(result), k, vertex)
    return result


def print_short_words(
    vertex: Vertex[str] | None,
    k: int,
    file: TextIO | None = None,
) -> None:
    """Print each word reachable from vertex that is shorter than k.

    One word per line, in depth-first visiting order. Prints nothing
    if vertex is None.

    Args:
        vertex: Starting vertex.
        k: Exclusive upper bound on word length.
        file: Output stream. Defaults to sys.stdout.
    """
    out = file if file is not None else sys.stdout
    for word in short_words(vertex, k):
        print(word, file=out)


def longest_word(vertex: Vertex[str] | None) -> str:
    """Get the longest word reachable from vertex, including its own.

    Ties go to the word visited first. Returns an empty string if
    vertex is None.
    """
    visited = walk(vertex)
    root = next(visited, None)
    if root is None:
        return ""

    # The start vertex seeds the comparison even if it is the shortest
    longest = root.data
    for v in visited:
        if len(v.data) > len(longest):
            longest = v.data

    logger.debug("Longest word from %r is %r", vertex, longest)
    return longest
