"""graphview: in-memory node-edge graph model for 3D visualization."""

import logging

from .graph import Edge, Graph, Node, UnresolvedNodeReference
from .schema import GraphOptions

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Edge",
    "Graph",
    "Node",
    "UnresolvedNodeReference",
    "GraphOptions",
]
