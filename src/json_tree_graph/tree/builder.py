"""TreeBuilder: converts any valid JSON value into a positioned TreeGraph.

Uses recursive dispatch to turn JSON dicts, lists, and scalar values into
typed graph nodes and parent -> child edges.  Every node receives its
canonical path (see ``json_tree_graph.tree.paths``) and a layout position.

Vertical packing follows subtree height:
- a primitive occupies one slot;
- a container occupies the sum of its children's slots, minimum one.

The first child of a node shares the parent's vertical index; each later
sibling starts after the cumulative height of the siblings before it, so two
subtrees never overlap.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

from json_tree_graph.config import LayoutConfig
from json_tree_graph.tree.nodes import (
    GraphEdge,
    GraphNode,
    NodeKind,
    Position,
    TreeGraph,
)
from json_tree_graph.tree.paths import ROOT_PATH, child_path

__all__ = ["JsonValue", "TreeBuilder"]

_LOGGER = logging.getLogger(__name__)

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


@dataclass(slots=True)
class _BuildContext:
    """Per-build identifier source.  A fresh one is created for every build."""

    counter: int = 0

    def next_id(self) -> str:
        self.counter += 1
        return f"n_{self.counter}"


@dataclass(slots=True)
class _Subtree:
    """Nodes and edges owned by one subtree, root first."""

    root_id: str
    height: int
    nodes: list[GraphNode] = field(default_factory=list)
    edges: list[GraphEdge] = field(default_factory=list)


def _format_primitive(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value)


def _label(path: str, kind: NodeKind, value: Any) -> str:
    segment = path.rsplit(".", 1)[-1]
    if kind is NodeKind.PRIMITIVE:
        return f"{segment}: {_format_primitive(value)}"
    name = segment or "root"
    if kind is NodeKind.ARRAY:
        return f"{name} [array]"
    return f"{name} {{object}}"


class TreeBuilder:
    """Converts any valid JSON value into a positioned ``TreeGraph``.

    The dispatch order is critical: bool MUST be checked before int because
    bool is a subclass of int in Python (isinstance(True, int) is True).

    Builds are reentrant.  Node ids come from a context created per call and
    threaded through the recursion, so two builds of the same value produce
    identical ids, paths, heights and positions.

    Example::

        builder = TreeBuilder()
        graph = builder.build({"a": 1, "b": [2, 3]})
        [n.path for n in graph.nodes]
        # ['$', '$.a', '$.b', '$.b[0]', '$.b[1]']
    """

    def __init__(self, config: LayoutConfig | None = None) -> None:
        self._config: LayoutConfig = config if config is not None else LayoutConfig()

    @property
    def config(self) -> LayoutConfig:
        return self._config

    def build(self, value: JsonValue) -> TreeGraph:
        """Convert a JSON value to a TreeGraph.

        Args:
            value: Any valid JSON value (dict, list, str, int, float, bool, None).

        Returns:
            A TreeGraph whose first node is the document root ("$").

        Raises:
            TypeError: If value (or anything nested in it) is not a JSON type.
            RecursionError: If the document nests deeper than the interpreter
                recursion limit allows.
        """
        subtree = self._build_value(value, ROOT_PATH, 0, 0, _BuildContext())
        _LOGGER.debug(
            "tree_builder.build",
            extra={"nodes": len(subtree.nodes), "edges": len(subtree.edges)},
        )
        return TreeGraph(nodes=subtree.nodes, edges=subtree.edges, layout=self._config)

    # ------------------------------------------------------------------
    # Recursion
    # ------------------------------------------------------------------

    def _position(self, depth: int, vertical_index: int) -> Position:
        cfg = self._config
        return Position(
            x=depth * cfg.horizontal_spacing + cfg.x_offset,
            y=cfg.y_base + vertical_index * cfg.row_height,
        )

    def _build_value(
        self,
        value: Any,
        path: str,
        depth: int,
        vertical_index: int,
        ctx: _BuildContext,
    ) -> _Subtree:
        # CRITICAL: bool MUST be checked before int — bool subclasses int in Python
        if isinstance(value, bool) or value is None:
            return self._build_primitive(value, path, depth, vertical_index, ctx)

        if isinstance(value, dict):
            items = [(child_path(path, str(k)), v) for k, v in value.items()]
            return self._build_container(
                NodeKind.OBJECT, value, items, path, depth, vertical_index, ctx
            )

        if isinstance(value, (list, tuple)):
            items = [(child_path(path, i), v) for i, v in enumerate(value)]
            return self._build_container(
                NodeKind.ARRAY, value, items, path, depth, vertical_index, ctx
            )

        if isinstance(value, (str, int, float)):
            return self._build_primitive(value, path, depth, vertical_index, ctx)

        msg = f"Unsupported JSON value type: {type(value)!r}"
        raise TypeError(msg)

    def _build_primitive(
        self,
        value: Any,
        path: str,
        depth: int,
        vertical_index: int,
        ctx: _BuildContext,
    ) -> _Subtree:
        node = GraphNode(
            id=ctx.next_id(),
            path=path,
            kind=NodeKind.PRIMITIVE,
            value=value,
            position=self._position(depth, vertical_index),
            height=1,
            depth=depth,
            label=_label(path, NodeKind.PRIMITIVE, value),
        )
        return _Subtree(root_id=node.id, height=1, nodes=[node])

    def _build_container(
        self,
        kind: NodeKind,
        value: Any,
        items: list[tuple[str, Any]],
        path: str,
        depth: int,
        vertical_index: int,
        ctx: _BuildContext,
    ) -> _Subtree:
        """Build a container node and merge the subtrees of its children.

        The container's id is taken before recursing so ids follow pre-order.
        """
        node_id = ctx.next_id()
        child_nodes: list[GraphNode] = []
        edges: list[GraphEdge] = []
        total_height = 0

        for item_path, item in items:
            child = self._build_value(
                item, item_path, depth + 1, vertical_index + total_height, ctx
            )
            child_nodes.extend(child.nodes)
            edges.extend(child.edges)
            edges.append(
                GraphEdge(
                    id=f"e_{node_id}_{child.root_id}",
                    source=node_id,
                    target=child.root_id,
                )
            )
            total_height += child.height

        height = max(1, total_height)
        node = GraphNode(
            id=node_id,
            path=path,
            kind=kind,
            value=value,
            position=self._position(depth, vertical_index),
            height=height,
            depth=depth,
            label=_label(path, kind, value),
        )
        return _Subtree(
            root_id=node_id, height=height, nodes=[node, *child_nodes], edges=edges
        )
