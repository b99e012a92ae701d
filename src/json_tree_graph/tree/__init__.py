"""Tree subpackage for JSON-to-graph conversion primitives.

Re-exports the public API for the tree module:
- GraphNode / GraphEdge / TreeGraph: the positioned graph produced by a build
- NodeKind: StrEnum of the three node kinds (OBJECT, ARRAY, PRIMITIVE)
- Position: node coordinate
- TreeBuilder: converts any valid JSON value into a TreeGraph
- ROOT_PATH / child_path: canonical path addressing
"""

from json_tree_graph.tree.builder import JsonValue, TreeBuilder
from json_tree_graph.tree.nodes import (
    GraphEdge,
    GraphNode,
    NodeKind,
    Position,
    TreeGraph,
)
from json_tree_graph.tree.paths import ROOT_PATH, child_path

__all__ = [
    "ROOT_PATH",
    "GraphEdge",
    "GraphNode",
    "JsonValue",
    "NodeKind",
    "Position",
    "TreeBuilder",
    "TreeGraph",
    "child_path",
]
