"""Builder for converting a GraphDocument to a Graph."""

from ..config.logging import get_logger
from ..schema.models import GraphDocument
from .entities import Edge, Node
from .graph import Graph

logger = get_logger(__name__)


def build_graph(document: GraphDocument) -> Graph:
    """Build a Graph from a GraphDocument.

    Args:
        document: The parsed graph document.

    Returns:
        A Graph holding the document's nodes and resolved edges.

    Raises:
        UnresolvedNodeReference: If an edge names an undeclared node.
    """
    graph = Graph(document.options)

    # Add all nodes first so edges can refer to any of them
    for spec in document.nodes:
        graph.add_node(
            Node(
                spec.id,
                label=spec.label,
                position=spec.position,
                **spec.attributes,
            )
        )

    for spec in document.edges:
        graph.add_edge(Edge(spec.source, spec.target, **spec.attributes))

    logger.debug(
        "graph_built",
        node_count=len(document.nodes),
        edge_count=len(document.edges),
    )
    return graph
