"""Graph-related exceptions."""


class GraphError(Exception):
    """Base exception for graph model errors."""

    pass


class UnresolvedNodeReference(GraphError):
    """Raised when an edge endpoint names an identifier with no registered node."""

    def __init__(self, node_id: str | int | float, slot: int):
        self.node_id = node_id
        self.slot = slot
        super().__init__(f"Could not resolve id={node_id!r} (edge slot {slot})")
