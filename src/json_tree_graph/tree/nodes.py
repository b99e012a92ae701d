"""Graph data types produced by TreeBuilder.

A build yields a ``TreeGraph``: a pre-ordered list of ``GraphNode`` objects
and a list of ``GraphEdge`` objects connecting each container to its
children.  Everything except ``GraphNode.highlight`` is fixed once built.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from enum import StrEnum, auto
from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    from json_tree_graph.config import LayoutConfig

__all__ = ["GraphEdge", "GraphNode", "NodeKind", "Position", "TreeGraph"]

# Half of the nominal rendered node box; re-centering targets the box middle.
_CENTER_OFFSET = (50.0, 20.0)


class NodeKind(StrEnum):
    """The three structural kinds of graph node.

    - OBJECT    -> "object"    : JSON object {}
    - ARRAY     -> "array"     : JSON array []
    - PRIMITIVE -> "primitive" : string, number, bool or null
    """

    OBJECT = auto()
    ARRAY = auto()
    PRIMITIVE = auto()


@dataclass(frozen=True, slots=True)
class Position:
    """Top-left coordinate of a node on the rendering surface."""

    x: float
    y: float


@dataclass(slots=True)
class GraphNode:
    """A node in the positioned tree graph.

    Attributes:
        id:        Identifier unique within one build ("n_1", "n_2", ...).
        path:      Canonical path, e.g. "$.user.items[0]".  Unique per build.
        kind:      Which kind of JSON value this node represents.
        value:     The JSON value itself (containers keep their full value).
        position:  Layout coordinate.
        height:    Subtree height in vertical slots (always >= 1).
        depth:     Recursion depth; the root is 0.
        label:     Display text for a rendering surface.
        highlight: Set by SearchMatcher on the matched node only.
    """

    id: str
    path: str
    kind: NodeKind
    value: Any
    position: Position
    height: int = 1
    depth: int = 0
    label: str = ""
    highlight: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "path": self.path,
            "kind": str(self.kind),
            "value": self.value,
            "label": self.label,
            "position": {"x": self.position.x, "y": self.position.y},
            "height": self.height,
            "highlight": self.highlight,
        }


@dataclass(frozen=True, slots=True)
class GraphEdge:
    """A parent -> child connection between two nodes of the same build."""

    id: str
    source: str
    target: str

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "source": self.source, "target": self.target}


@dataclass(slots=True)
class TreeGraph:
    """The node and edge collections produced by one TreeBuilder.build() call.

    Nodes are stored in emission order (depth-first pre-order, each container
    before its children).  The first node is always the root ("$").

    Attributes:
        nodes:  All nodes in traversal order.
        edges:  One edge per non-root node.
        layout: The LayoutConfig the graph was positioned with.
    """

    nodes: list[GraphNode]
    edges: list[GraphEdge]
    layout: LayoutConfig
    _by_id: dict[str, GraphNode] = field(init=False, repr=False, compare=False)
    _by_path: dict[str, GraphNode] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._by_id = {node.id: node for node in self.nodes}
        # Keys containing "." or "[" can alias another path; the first node wins.
        self._by_path = {}
        for node in self.nodes:
            self._by_path.setdefault(node.path, node)

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[GraphNode]:
        return iter(self.nodes)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    @property
    def root(self) -> GraphNode:
        """The node with path "$"."""
        return self.nodes[0]

    def node_by_id(self, node_id: str) -> GraphNode | None:
        return self._by_id.get(node_id)

    def node_by_path(self, path: str) -> GraphNode | None:
        return self._by_path.get(path)

    def children_of(self, node_id: str) -> list[GraphNode]:
        """Return the direct children of ``node_id`` in edge order."""
        return [self._by_id[e.target] for e in self.edges if e.source == node_id]

    # ------------------------------------------------------------------
    # Highlight state
    # ------------------------------------------------------------------

    @property
    def highlighted(self) -> GraphNode | None:
        return next((node for node in self.nodes if node.highlight), None)

    def clear_highlight(self) -> None:
        for node in self.nodes:
            node.highlight = False

    # ------------------------------------------------------------------
    # Geometry helpers for rendering surfaces
    # ------------------------------------------------------------------

    def bounds(self) -> tuple[float, float, float, float]:
        """Return ``(min_x, min_y, max_x, max_y)`` over all node positions.

        A rendering surface uses this to fit all content in view.  An empty
        graph yields ``(0.0, 0.0, 0.0, 0.0)``.
        """
        if not self.nodes:
            return (0.0, 0.0, 0.0, 0.0)
        coords = np.array(
            [(n.position.x, n.position.y) for n in self.nodes], dtype=np.float64
        )
        min_x, min_y = coords.min(axis=0)
        max_x, max_y = coords.max(axis=0)
        return (float(min_x), float(min_y), float(max_x), float(max_y))

    def center_of(self, node: GraphNode) -> Position:
        """Return the point a rendering surface should re-center on for ``node``."""
        dx, dy = _CENTER_OFFSET
        return Position(node.position.x + dx, node.position.y + dy)

    # ------------------------------------------------------------------
    # Copy / export
    # ------------------------------------------------------------------

    def copy(self) -> TreeGraph:
        """Return an identical graph with fresh node objects and no highlight."""
        nodes = [replace(node, highlight=False) for node in self.nodes]
        return TreeGraph(nodes=nodes, edges=list(self.edges), layout=self.layout)

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        """Return plain nodes/edges data for a rendering surface."""
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
        }
