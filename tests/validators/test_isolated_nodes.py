"""Tests for isolated node detection."""

from graphview.schema.loader import parse_document_from_string
from graphview.validators.isolated_nodes import build_topology, check_isolated_nodes


class TestBuildTopology:
    def test_topology_matches_document(self, chain_document):
        topology = build_topology(chain_document)

        assert set(topology.nodes) == {"x", "y", "z"}
        assert topology.number_of_edges() == 2

    def test_skips_unresolvable_edges(self):
        document = parse_document_from_string(
            """
nodes:
  - id: a
  - label: anonymous
edges:
  - [a, ghost]
"""
        )

        topology = build_topology(document)

        assert list(topology.nodes) == ["a"]
        assert topology.number_of_edges() == 0


class TestIsolatedNodes:
    def test_connected_graph(self, chain_document):
        assert check_isolated_nodes(chain_document).issues == []

    def test_isolated_node_warning(self, examples_dir):
        document = parse_document_from_string(
            (examples_dir / "invalid" / "isolated_node.yaml").read_text()
        )

        result = check_isolated_nodes(document)

        assert result.is_valid
        assert [w.location.node_id for w in result.warnings] == ["lonely"]
        assert result.warnings[0].code == "ISOLATED_NODE"

    def test_self_loop_is_not_isolated(self):
        document = parse_document_from_string(
            """
nodes:
  - id: a
edges:
  - [a, a]
"""
        )

        assert check_isolated_nodes(document).issues == []
