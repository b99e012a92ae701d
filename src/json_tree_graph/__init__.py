"""JSON tree graph - positioned tree layout and path search for JSON documents."""

from __future__ import annotations

from json_tree_graph.api import build_graph, parse_json, search_graph, visualize
from json_tree_graph.config import LayoutConfig, SearchConfig
from json_tree_graph.result import BuildResult, MatchStrategy, SearchResult, SearchStatus
from json_tree_graph.search.matcher import SearchMatcher
from json_tree_graph.session import TreeGraphSession
from json_tree_graph.tree.builder import TreeBuilder
from json_tree_graph.tree.nodes import GraphEdge, GraphNode, NodeKind, TreeGraph

__version__: str = "0.1.0"
__all__: list[str] = [
    "BuildResult",
    "GraphEdge",
    "GraphNode",
    "LayoutConfig",
    "MatchStrategy",
    "NodeKind",
    "SearchConfig",
    "SearchMatcher",
    "SearchResult",
    "SearchStatus",
    "TreeBuilder",
    "TreeGraph",
    "TreeGraphSession",
    "build_graph",
    "parse_json",
    "search_graph",
    "visualize",
]
