"""Public API functions for json-tree-graph.

This module provides the user-facing functions: parse_json, build_graph,
search_graph and visualize.  Each call creates a fresh TreeBuilder (or
SearchMatcher) to guarantee zero global state mutation between calls.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any

from json_tree_graph.config import LayoutConfig, SearchConfig
from json_tree_graph.result import BuildResult, SearchResult
from json_tree_graph.search.matcher import SearchMatcher
from json_tree_graph.tree.builder import JsonValue, TreeBuilder
from json_tree_graph.tree.nodes import GraphNode, TreeGraph

__all__ = ["build_graph", "parse_json", "search_graph", "visualize"]

_LOGGER = logging.getLogger(__name__)


def parse_json(text: str) -> Any:
    """Parse JSON text with the standard library parser.

    Object key order is preserved.  ``NaN``/``Infinity`` literals are
    accepted the way ``json.loads`` accepts them.

    Raises:
        json.JSONDecodeError: If ``text`` is not valid JSON.
        ValueError: If an integer literal exceeds the interpreter digit limit.
    """
    return json.loads(text)


def build_graph(value: JsonValue, config: LayoutConfig | None = None) -> TreeGraph:
    """Build the positioned tree graph of an already-parsed JSON value.

    Args:
        value:  Any JSON value (dict, list, str, int, float, bool, None).
        config: Layout constants.  Defaults to ``LayoutConfig()`` when None.

    Returns:
        A fresh ``TreeGraph``; nothing is shared with earlier builds.
    """
    return TreeBuilder(config=config).build(value)


def search_graph(
    graph: TreeGraph | list[GraphNode],
    query: str,
    config: SearchConfig | None = None,
) -> SearchResult:
    """Find, highlight and return the node addressed by ``query``.

    Args:
        graph:  A TreeGraph, or its nodes in traversal order.
        query:  Free-text path, e.g. "$.user.name", ".user.name", "user.name".
        config: Matching options.  Defaults to ``SearchConfig()`` when None.
    """
    return SearchMatcher(config=config).search(graph, query)


def visualize(text: str, config: LayoutConfig | None = None) -> BuildResult:
    """Parse ``text`` and build its graph, reporting failure instead of raising.

    A parse failure (including an integer literal too long to convert) or a
    document nested too deeply to process yields a ``BuildResult`` with
    ``graph=None`` and the parser's message in ``error``.

    Args:
        text:   JSON text.
        config: Layout constants.  Defaults to ``LayoutConfig()`` when None.
    """
    t0 = time.perf_counter()
    try:
        graph = build_graph(parse_json(text), config=config)
    # JSONDecodeError subclasses ValueError; integer literals past the
    # int-conversion digit limit raise a plain ValueError.
    except ValueError as exc:
        _LOGGER.debug("api.visualize.parse_error", exc_info=exc)
        return BuildResult(
            graph=None, error=str(exc), computation_time_ms=_elapsed_ms(t0)
        )
    except RecursionError as exc:
        _LOGGER.warning("api.visualize.too_deep", exc_info=exc)
        return BuildResult(
            graph=None,
            error="Document is nested too deeply to visualize",
            computation_time_ms=_elapsed_ms(t0),
        )
    return BuildResult(graph=graph, error=None, computation_time_ms=_elapsed_ms(t0))


def _elapsed_ms(t0: float) -> float:
    return (time.perf_counter() - t0) * 1000.0
