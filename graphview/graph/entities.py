"""Node and edge value objects for the graph model."""

import numbers
from typing import Any, MutableSequence, Protocol


def is_identifier(value: Any) -> bool:
    """Check whether an endpoint value is an external identifier.

    Strings and numbers of any numeric type (``Decimal``, ``Fraction``,
    numpy scalars) are identifiers. Anything else, including ``bool``, is
    treated as a node reference.
    """
    if isinstance(value, bool):
        return False
    return isinstance(value, (str, numbers.Number))


class NodeLike(Protocol):
    """Anything the graph can store as a node."""

    id: str | int | float | None


class EdgeLike(Protocol):
    """Anything the graph can store as an edge."""

    nodes: MutableSequence[Any]


class Node:
    """A graph vertex with an optional identifier and rendering attributes."""

    def __init__(
        self,
        id: str | int | float | None = None,
        label: str | None = None,
        position: tuple[float, float, float] = (0.0, 0.0, 0.0),
        **attributes: Any,
    ):
        self.id = id
        self.label = label if label is not None else ("" if id is None else str(id))
        self.position = tuple(position)
        self.attributes = attributes

    def __repr__(self) -> str:
        return f"Node(id={self.id!r}, label={self.label!r})"


class Edge:
    """A connection between two nodes.

    Endpoints live in the two-slot list ``nodes``. Each slot holds either an
    external identifier or a node reference; the graph rewrites identifiers
    to references when the edge is added.
    """

    def __init__(self, source: Any, target: Any, **attributes: Any):
        self.nodes: list[Any] = [source, target]
        self.attributes = attributes

    @property
    def source(self) -> Any:
        """The endpoint in slot 0."""
        return self.nodes[0]

    @property
    def target(self) -> Any:
        """The endpoint in slot 1."""
        return self.nodes[1]

    @property
    def is_resolved(self) -> bool:
        """Check if both slots hold node references."""
        return not any(is_identifier(slot) for slot in self.nodes)

    def __repr__(self) -> str:
        return f"Edge({self.source!r}, {self.target!r})"
