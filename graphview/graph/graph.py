"""Graph store: nodes, edges and identifier resolution."""

from typing import TYPE_CHECKING, Any, Iterator, Mapping, Sequence, TypeVar

from ..config.logging import get_logger
from ..schema.models import GraphOptions
from .entities import EdgeLike, NodeLike, is_identifier
from .errors import UnresolvedNodeReference

if TYPE_CHECKING:
    from ..render.frame import Frame

logger = get_logger(__name__)

T = TypeVar("T")


class SequenceView(Sequence[T]):
    """Read-only, live view over a list owned by the graph.

    Items added to the graph after the view was obtained are visible
    through it, but the view itself has no mutating methods.
    """

    __slots__ = ("_items",)

    def __init__(self, items: list[T]):
        self._items = items

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SequenceView):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"SequenceView({self._items!r})"


class Graph:
    """An in-memory node/edge graph with rendering options.

    Nodes are indexed by their identifier so that edges can name their
    endpoints by id. Identifiers are rewritten to node references when an
    edge is added, so every stored edge points directly at nodes.
    """

    def __init__(self, options: GraphOptions | Mapping[str, Any] | None = None):
        """Initialize an empty graph.

        Args:
            options: Rendering options, as a GraphOptions or a mapping with
                camelCase or snake_case keys. Missing options are defaulted.
        """
        self._node_ids: dict[Any, NodeLike] = {}
        self._nodes: list[NodeLike] = []
        self._edges: list[EdgeLike] = []

        if options is None:
            options = GraphOptions()
        elif not isinstance(options, GraphOptions):
            options = GraphOptions.model_validate(dict(options))
        self._options = options

    @property
    def options(self) -> GraphOptions:
        """Get the rendering options."""
        return self._options

    @property
    def config(self) -> dict[str, Any]:
        """Get the rendering options keyed by camelCase name."""
        return self._options.to_config()

    # -------------------------------------------------------------------------
    # Nodes
    # -------------------------------------------------------------------------

    def add_node(self, node: NodeLike) -> "Graph":
        """Add a node to the graph.

        The node is always appended. If its id is a string or number, it
        is also registered under that id, replacing any earlier node with
        the same one. Other ids (None, booleans) are not indexed.

        Returns:
            The graph, for chaining.
        """
        node_id = getattr(node, "id", None)

        if is_identifier(node_id):
            self._node_ids[node_id] = node

        self._nodes.append(node)

        return self

    def get_node(self, node_id: Any) -> NodeLike | None:
        """Get the node registered under an identifier, or None."""
        if not is_identifier(node_id):
            return None
        return self._node_ids.get(node_id)

    def get_nodes(self) -> SequenceView[NodeLike]:
        """Get all nodes in insertion order."""
        return SequenceView(self._nodes)

    # -------------------------------------------------------------------------
    # Edges
    # -------------------------------------------------------------------------

    def get_edges(self) -> SequenceView[EdgeLike]:
        """Get all edges in insertion order."""
        return SequenceView(self._edges)

    def add_edge(self, edge: EdgeLike) -> "Graph":
        """Add an edge to the graph.

        Endpoints given as identifiers are looked up and replaced with the
        matching node references before the edge is stored.

        Returns:
            The graph, for chaining.

        Raises:
            UnresolvedNodeReference: If an endpoint identifier has no node.
                The edge is not added and is left unmodified.
        """
        self._resolve_edge_ids(edge)
        self._edges.append(edge)

        return self

    def _resolve_edge_ids(self, edge: EdgeLike) -> None:
        """Replace identifier endpoints of an edge with node references.

        Slots that already hold a node are left alone, so resolving an
        edge twice is a no-op. Both slots are looked up before either is
        written.
        """
        slots = edge.nodes
        resolved: dict[int, NodeLike] = {}

        for index in (0, 1):
            value = slots[index]
            if not is_identifier(value):
                continue

            node = self.get_node(value)
            if node is None:
                logger.warning("edge_unresolved", node_id=value, slot=index)
                raise UnresolvedNodeReference(value, index)
            resolved[index] = node

        for index, node in resolved.items():
            slots[index] = node

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render_in(self, target: Any) -> "Frame":
        """Bind a rendering frame to a display target and this graph."""
        from ..render.frame import Frame

        return Frame(target, self)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, edges={len(self._edges)})"
