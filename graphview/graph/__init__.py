"""Graph layer: nodes, edges and the graph store."""

from .entities import Edge, EdgeLike, Node, NodeLike, is_identifier
from .errors import GraphError, UnresolvedNodeReference
from .graph import Graph, SequenceView
from .builder import build_graph

__all__ = [
    "Edge",
    "EdgeLike",
    "Node",
    "NodeLike",
    "is_identifier",
    "GraphError",
    "UnresolvedNodeReference",
    "Graph",
    "SequenceView",
    "build_graph",
]
