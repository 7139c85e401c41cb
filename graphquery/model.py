"""Node types and id-indexed arenas for vertex graphs."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Generic, TypeVar

import networkx as nx

from graphquery.types import AirportSpec, VertexSpec

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InvalidReferenceError(ValueError):
    """Raised when a node references a non-existent node."""
    pass


class Vertex(Generic[T]):
    """A graph node holding a payload and its outgoing neighbors.

    Vertices compare and hash by identity, so two vertices carrying the
    same payload are still distinct nodes.
    """

    __slots__ = ("_data", "neighbors")

    def __init__(self, data: T, neighbors: list[Vertex[T]] | None = None) -> None:
        self._data = data
        self.neighbors: list[Vertex[T]] = neighbors if neighbors is not None else []

    @property
    def data(self) -> T:
        """Payload set at construction."""
        return self._data

    def add_neighbor(self, *vertices: Vertex[T]) -> Vertex[T]:
        """Append outgoing edges and return self for chaining."""
        self.neighbors.extend(vertices)
        return self

    def __repr__(self) -> str:
        return f"Vertex({self._data!r})"


class Airport:
    """An airport with directed outbound flights to other airports."""

    __slots__ = ("code", "_outbound")

    def __init__(self, code: str, outbound_flights: list[Airport] | None = None) -> None:
        self.code = code
        self._outbound: list[Airport] = (
            outbound_flights if outbound_flights is not None else []
        )

    def get_outbound_flights(self) -> list[Airport]:
        """Airports reachable by a single direct flight, in order."""
        return self._outbound

    def add_flight(self, *airports: Airport) -> Airport:
        """Append outbound flights and return self for chaining."""
        self._outbound.extend(airports)
        return self

    def __repr__(self) -> str:
        return f"Airport({self.code!r})"


def _coerce_specs(specs: Iterable[Any], model: type) -> list[Any]:
    return [
        spec if isinstance(spec, model) else model.model_validate(spec)
        for spec in specs
    ]


class VertexGraph:
    """Arena of vertices indexed by stable string ids.

    Builds linked ``Vertex`` objects from flat specs so cyclic and
    self-referential graphs can be described without forward references.
    """

    def __init__(self, specs: Iterable[VertexSpec | Mapping[str, Any]]) -> None:
        """Build vertices from specs.

        Args:
            specs: VertexSpec instances or dicts with 'id', 'data' and
                   'neighbors' (list of ids) keys.

        Raises:
            pydantic.ValidationError: If a spec is malformed.
            ValueError: If an id is declared twice.
            InvalidReferenceError: If a neighbor id does not exist.
        """
        self._specs: dict[str, VertexSpec] = {}
        self._vertices: dict[str, Vertex[Any]] = {}
        self._graph = nx.DiGraph()

        # Phase 1: Register all vertices
        for spec in _coerce_specs(specs, VertexSpec):
            if spec.id in self._vertices:
                raise ValueError(f"Duplicate vertex id: '{spec.id}'")
            self._specs[spec.id] = spec
            self._vertices[spec.id] = Vertex(spec.data)
            self._graph.add_node(spec.id, data=spec.data)

        # Phase 2: Validate references and wire neighbors
        for vertex_id, spec in self._specs.items():
            vertex = self._vertices[vertex_id]
            for neighbor_id in spec.neighbors:
                self._validate_reference(neighbor_id, vertex_id)
                vertex.neighbors.append(self._vertices[neighbor_id])
                self._graph.add_edge(vertex_id, neighbor_id)

        logger.debug(
            "Built vertex graph with %d vertices and %d edges",
            len(self._vertices), self._graph.number_of_edges(),
        )

    def _validate_reference(self, ref_id: str, context: str) -> None:
        if ref_id not in self._vertices:
            raise InvalidReferenceError(
                f"Invalid neighbor in vertex '{context}': '{ref_id}' does not exist"
            )

    @property
    def vertices(self) -> dict[str, Vertex[Any]]:
        """All vertices keyed by id."""
        return self._vertices

    def vertex(self, vertex_id: str) -> Vertex[Any]:
        """Get a vertex by id.

        Raises:
            KeyError: If the id is unknown.
        """
        try:
            return self._vertices[vertex_id]
        except KeyError:
            raise KeyError(f"Vertex not found: {vertex_id}") from None

    __getitem__ = vertex

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._vertices

    def __len__(self) -> int:
        return len(self._vertices)

    def ids(self) -> list[str]:
        """All vertex ids in declaration order."""
        return list(self._vertices)

    @property
    def nx_graph(self) -> nx.DiGraph:
        """Access underlying NetworkX graph (nodes are ids)."""
        return self._graph


class FlightNetwork:
    """Arena of airports indexed by airport code."""

    def __init__(self, specs: Iterable[AirportSpec | Mapping[str, Any]]) -> None:
        """Build airports from specs.

        Raises:
            pydantic.ValidationError: If a spec is malformed.
            ValueError: If a code is declared twice.
            InvalidReferenceError: If an outbound code does not exist.
        """
        self._airports: dict[str, Airport] = {}
        self._graph = nx.DiGraph()

        parsed = _coerce_specs(specs, AirportSpec)
        for spec in parsed:
            if spec.code in self._airports:
                raise ValueError(f"Duplicate airport code: '{spec.code}'")
            self._airports[spec.code] = Airport(spec.code)
            self._graph.add_node(spec.code)

        for spec in parsed:
            airport = self._airports[spec.code]
            for code in spec.outbound:
                if code not in self._airports:
                    raise InvalidReferenceError(
                        f"Invalid flight in airport '{spec.code}': '{code}' does not exist"
                    )
                airport.add_flight(self._airports[code])
                self._graph.add_edge(spec.code, code)

        logger.debug("Built flight network with %d airports", len(self._airports))

    @property
    def airports(self) -> dict[str, Airport]:
        """All airports keyed by code."""
        return self._airports

    def airport(self, code: str) -> Airport:
        """Get an airport by code.

        Raises:
            KeyError: If the code is unknown.
        """
        try:
            return self._airports[code]
        except KeyError:
            raise KeyError(f"Airport not found: {code}") from None

    __getitem__ = airport

    def __contains__(self, code: object) -> bool:
        return code in self._airports

    def __len__(self) -> int:
        return len(self._airports)

    @property
    def nx_graph(self) -> nx.DiGraph:
        """Access underlying NetworkX graph (nodes are airport codes)."""
        return self._graph
