"""Rendering frame bound to a display target and a graph."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..config.logging import get_logger

if TYPE_CHECKING:
    from ..graph.graph import Graph
    from ..schema.models import GraphOptions

logger = get_logger(__name__)


@dataclass(frozen=True)
class FrameSnapshot:
    """The nodes, edges and options of a graph at one point in time."""

    target: Any
    nodes: tuple[Any, ...] = ()
    edges: tuple[Any, ...] = ()
    config: dict[str, Any] = field(default_factory=dict)


class Frame:
    """A rendering session for one graph on one display target.

    The frame holds the graph by reference: nodes and edges added after
    binding are visible to it. Call ``snapshot()`` to freeze the current
    contents for drawing.
    """

    def __init__(self, target: Any, graph: "Graph"):
        self._target = target
        self._graph = graph
        logger.debug("frame_bound", target=repr(target))

    @property
    def target(self) -> Any:
        """Get the display target handle."""
        return self._target

    @property
    def graph(self) -> "Graph":
        """Get the bound graph."""
        return self._graph

    @property
    def options(self) -> "GraphOptions":
        """Get the rendering options of the bound graph."""
        return self._graph.options

    def snapshot(self) -> FrameSnapshot:
        """Capture the graph's current nodes, edges and options."""
        return FrameSnapshot(
            target=self._target,
            nodes=tuple(self._graph.get_nodes()),
            edges=tuple(self._graph.get_edges()),
            config=self._graph.config,
        )
