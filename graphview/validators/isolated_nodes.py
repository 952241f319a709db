"""Isolated node detection validator."""

import networkx as nx

from ..schema.models import GraphDocument
from .base import ValidationResult


def build_topology(document: GraphDocument) -> nx.MultiGraph:
    """Build the undirected topology declared by a document.

    Nodes without an identifier cannot be referenced by edges and are left
    out. Edges with an undeclared endpoint are skipped.
    """
    topology = nx.MultiGraph()
    topology.add_nodes_from(document.get_node_ids())

    for edge in document.edges:
        if topology.has_node(edge.source) and topology.has_node(edge.target):
            topology.add_edge(edge.source, edge.target)

    return topology


def check_isolated_nodes(document: GraphDocument) -> ValidationResult:
    """Check for identified nodes that no edge touches.

    Args:
        document: The parsed graph document.

    Returns:
        ValidationResult with warnings for isolated nodes.
    """
    result = ValidationResult()

    topology = build_topology(document)
    for node_id in nx.isolates(topology):
        result.at_node(
            node_id,
            "ISOLATED_NODE",
            f"Node '{node_id}' is not connected to any edge",
        )

    return result
