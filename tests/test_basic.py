"""Basic smoke tests for graphquery."""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

import graphquery
from graphquery import (
    Airport,
    AirportSpec,
    FlightNetwork,
    InvalidReferenceError,
    Vertex,
    VertexGraph,
    VertexSpec,
    build,
    build_network,
)


SPECS = [
    {"id": "A", "data": "apple", "neighbors": ["B", "C"]},
    {"id": "B", "data": "bee", "neighbors": ["B"]},
    {"id": "C", "data": "cherry", "neighbors": ["A", "D"]},
    {"id": "D", "data": "date"},
]


class TestBuild:
    """Test building vertex graphs from specs."""

    def test_build_from_dicts(self):
        graph = build(SPECS)
        assert len(graph) == 4
        assert graph.ids() == ["A", "B", "C", "D"]

    def test_neighbors_are_wired_in_order(self):
        graph = build(SPECS)
        assert graph["A"].neighbors == [graph["B"], graph["C"]]
        assert graph["D"].neighbors == []

    def test_self_loop_wired_to_same_object(self):
        graph = build(SPECS)
        assert graph["B"].neighbors[0] is graph["B"]

    def test_build_from_specs(self):
        graph = VertexGraph([
            VertexSpec(id="x", data=1, neighbors=["y"]),
            VertexSpec(id="y", data=2),
        ])
        assert graph.vertex("x").neighbors[0].data == 2

    def test_nx_graph_mirrors_arena(self):
        graph = build(SPECS)
        g = graph.nx_graph
        assert set(g.nodes) == {"A", "B", "C", "D"}
        assert g.has_edge("B", "B")
        assert g.nodes["C"]["data"] == "cherry"

    def test_contains(self):
        graph = build(SPECS)
        assert "A" in graph
        assert "Z" not in graph


class TestVertex:
    """Test the Vertex node type."""

    def test_identity_equality(self):
        assert Vertex("a") != Vertex("a")
        v = Vertex("a")
        assert v == v
        assert len({v, v, Vertex("a")}) == 2

    def test_data_is_read_only(self):
        v = Vertex("a")
        with pytest.raises(AttributeError):
            v.data = "b"

    def test_add_neighbor_chains(self):
        v = Vertex("a")
        w = Vertex("b")
        assert v.add_neighbor(w, w) is v
        assert v.neighbors == [w, w]

    def test_neighbors_default_not_shared(self):
        assert Vertex("a").neighbors is not Vertex("b").neighbors


class TestFlightNetwork:
    """Test building flight networks."""

    def test_build_network(self):
        network = build_network({"SEA": ["SFO"], "SFO": []})
        assert network.airport("SEA").get_outbound_flights() == [network["SFO"]]
        assert isinstance(network["SFO"], Airport)
        assert len(network) == 2

    def test_from_specs(self):
        network = FlightNetwork([AirportSpec(code="LAX", outbound=["LAX"])])
        lax = network["LAX"]
        assert lax.get_outbound_flights() == [lax]
        assert lax.code == "LAX"

    def test_unknown_destination_raises(self):
        with pytest.raises(InvalidReferenceError, match="'JFK' does not exist"):
            build_network({"SEA": ["JFK"]})

    def test_duplicate_code_raises(self):
        with pytest.raises(ValueError, match="Duplicate airport code"):
            FlightNetwork([{"code": "SEA"}, {"code": "SEA"}])

    def test_unknown_airport_lookup(self):
        network = build_network({"SEA": []})
        with pytest.raises(KeyError):
            network.airport("PDX")


class TestErrorHandling:
    """Test arena validation errors."""

    def test_dangling_neighbor_raises(self):
        with pytest.raises(InvalidReferenceError) as exc_info:
            build([{"id": "A", "data": "a", "neighbors": ["Z"]}])
        assert str(exc_info.value) == "Invalid neighbor in vertex 'A': 'Z' does not exist"

    def test_invalid_reference_is_value_error(self):
        assert issubclass(InvalidReferenceError, ValueError)

    def test_duplicate_id_raises(self):
        with pytest.raises(ValueError, match="Duplicate vertex id"):
            build([{"id": "A", "data": 1}, {"id": "A", "data": 2}])

    def test_missing_id_raises(self):
        with pytest.raises(ValidationError):
            build([{"data": "orphan"}])

    def test_empty_id_raises(self):
        with pytest.raises(ValidationError):
            VertexSpec(id="", data="x")

    def test_unknown_vertex_lookup(self):
        graph = build(SPECS)
        with pytest.raises(KeyError, match="Vertex not found"):
            graph.vertex("Z")


class TestPackage:
    """Test the top-level package surface."""

    def test_version(self):
        assert graphquery.__version__ == "0.1.0"

    def test_public_queries_exported(self):
        for name in (
            "print_short_words",
            "longest_word",
            "print_self_loopers",
            "can_reach",
            "unreachable",
        ):
            assert callable(getattr(graphquery, name))

    def test_readme_is_package_description(self):
        root = Path(__file__).parent.parent
        pyproject = (root / "pyproject.toml").read_text()
        assert 'readme = "README.md"' in pyproject
        assert (root / "README.md").exists()

    def test_public_accessors_documented(self):
        for attr in (
            Airport.add_flight,
            Airport.get_outbound_flights,
            FlightNetwork.airports,
            FlightNetwork.airport,
            FlightNetwork.nx_graph,
            VertexGraph.vertices,
            VertexGraph.nx_graph,
        ):
            assert attr.__doc__, f"{attr} has no docstring"

    def test_queries_log_at_debug(self, caplog):
        graph = build(SPECS)
        with caplog.at_level(logging.DEBUG, logger="graphquery"):
            graphquery.longest_word(graph["A"])
        assert any(r.levelno == logging.DEBUG for r in caplog.records)
        assert all(r.levelno <= logging.DEBUG for r in caplog.records)
