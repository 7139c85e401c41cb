"""Depth-first queries over vertex graphs and adjacency maps.

Every query owns a fresh visited-set, so cyclic graphs, self-loops and
duplicate edges are safe. Queries never raise for graph shape: a None
start yields an empty result.

Example usage:
    from graphquery.graph_utils import (
        longest_word,
        can_reach,
        unreachable,
    )

    # Longest word reachable from a vertex
    word = longest_word(start)

    # Is there a chain of flights from one airport to another?
    ok = can_reach(network.airport("SEA"), network.airport("JFK"))

    # Keys of an adjacency map not reachable from "A"
    orphans = unreachable({"A": ["B"], "B": [], "C": []}, "A")
"""

# Traversal - shared walks
from .traversal import (
    search,
    walk,
    walk_adjacency,
    reachable,
)

# Words - string-valued vertex graphs
from .words import (
    short_words,
    print_short_words,
    longest_word,
)

# Loops - self-loop detection
from .loops import (
    self_loopers,
    print_self_loopers,
)

# Reachability - airports and adjacency maps
from .reachability import (
    can_reach,
    unreachable,
)

# Serialization
from .serialize import to_adjacency, to_digraph

__all__ = [
    # Traversal
    "search",
    "walk",
    "walk_adjacency",
    "reachable",
    # Words
    "short_words",
    "print_short_words",
    "longest_word",
    # Loops
    "self_loopers",
    "print_self_loopers",
    # Reachability
    "can_reach",
    "unreachable",
    # Serialization
    "to_adjacency",
    "to_digraph",
]
