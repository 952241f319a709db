"""Reference integrity validators."""

from collections import Counter

from ..schema.models import GraphDocument
from .base import ValidationResult


def check_node_references(document: GraphDocument) -> ValidationResult:
    """Check that every edge endpoint names a declared node.

    Adding such an edge to a Graph raises UnresolvedNodeReference, so each
    missing endpoint is reported as an error.

    Args:
        document: The parsed graph document.

    Returns:
        ValidationResult with errors for unresolved endpoints.
    """
    result = ValidationResult()

    declared = set(document.get_node_ids())

    for index, edge in enumerate(document.edges):
        for slot, endpoint in enumerate((edge.source, edge.target)):
            if endpoint not in declared:
                result.at_edge(
                    index,
                    "UNRESOLVED_NODE_REF",
                    f"Edge endpoint references undeclared node '{endpoint}'",
                    referenced_node=endpoint,
                    slot=slot,
                )

    return result


def check_duplicate_node_ids(document: GraphDocument) -> ValidationResult:
    """Check for nodes that share an identifier.

    The graph keeps every such node but only the last one can be looked up
    by id, so edges silently attach to it.

    Args:
        document: The parsed graph document.

    Returns:
        ValidationResult with warnings for duplicated identifiers.
    """
    result = ValidationResult()

    counts = Counter(document.get_node_ids())
    for node_id, count in counts.items():
        if count > 1:
            result.at_node(
                node_id,
                "DUPLICATE_NODE_ID",
                f"Identifier '{node_id}' is declared by {count} nodes; the last one wins",
                count=count,
            )

    return result
