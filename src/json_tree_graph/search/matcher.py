"""SearchMatcher: resolves a free-text path query to at most one graph node.

Three rules are tried in order of precedence, each over all nodes in
traversal order before the next rule is considered:

1. EXACT  - node.path == normalize_query(query)
2. RAW    - node.path == query (trimmed, un-normalized)
3. SUFFIX - node.path ends with the normalized query minus its "$." prefix

Rule precedence means a node's own path always finds that node, even when a
shallower or earlier node shares the same trailing segments.  The SUFFIX rule
can be disabled through ``SearchConfig(allow_suffix=False)``.  When several
nodes satisfy SUFFIX, the first in traversal order wins.

Example::

    graph = TreeBuilder().build({"a": 1, "b": [2, 3]})
    result = SearchMatcher().search(graph, ".b[0]")
    result.node.path          # "$.b[0]"
    result.node.highlight     # True
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from json_tree_graph.config import SearchConfig
from json_tree_graph.result import MatchStrategy, SearchResult, SearchStatus
from json_tree_graph.search.normalizer import normalize_query, suffix_of

if TYPE_CHECKING:
    from json_tree_graph.tree.nodes import GraphNode

__all__ = ["SearchMatcher"]

_LOGGER = logging.getLogger(__name__)


class SearchMatcher:
    """Finds and highlights the node addressed by a path query.

    ``search`` accepts either a ``TreeGraph`` or any iterable of
    ``GraphNode`` in traversal order.  It never changes structure; it only
    rewrites the ``highlight`` flag, so callers must not run two searches on
    the same nodes concurrently.
    """

    def __init__(self, config: SearchConfig | None = None) -> None:
        self._config: SearchConfig = config if config is not None else SearchConfig()

    def search(self, nodes: Iterable[GraphNode], query: str) -> SearchResult:
        """Resolve ``query`` against ``nodes`` and update highlight flags.

        Args:
            nodes: The nodes of one build, in traversal order.
            query: Free-text path such as "$.user.name", ".user.name" or
                "user.items[0].name".

        Returns:
            A SearchResult.  On FOUND the matched node is highlighted and all
            others are cleared; on NOT_FOUND all highlights are cleared; on
            EMPTY_QUERY nothing is touched.
        """
        node_list = list(nodes)
        raw = query.strip()
        if not raw:
            return SearchResult(
                status=SearchStatus.EMPTY_QUERY, query=raw, canonical_query=""
            )

        canonical = normalize_query(raw)
        match, strategy = self._find(node_list, raw, canonical)

        for node in node_list:
            node.highlight = node is match

        if match is None:
            _LOGGER.debug("search_matcher.no_match", extra={"query": canonical})
            return SearchResult(
                status=SearchStatus.NOT_FOUND, query=raw, canonical_query=canonical
            )

        _LOGGER.debug(
            "search_matcher.match",
            extra={"query": canonical, "path": match.path, "strategy": str(strategy)},
        )
        return SearchResult(
            status=SearchStatus.FOUND,
            query=raw,
            canonical_query=canonical,
            node=match,
            strategy=strategy,
        )

    def _find(
        self, nodes: list[GraphNode], raw: str, canonical: str
    ) -> tuple[GraphNode | None, MatchStrategy | None]:
        rules: list[tuple[MatchStrategy, Callable[[str], bool]]] = [
            (MatchStrategy.EXACT, lambda path: path == canonical),
            (MatchStrategy.RAW, lambda path: path == raw),
        ]
        remainder = suffix_of(canonical)
        # An empty remainder ("$.") would make every path a suffix match.
        if self._config.allow_suffix and remainder:
            rules.append((MatchStrategy.SUFFIX, lambda path: path.endswith(remainder)))

        for strategy, matches in rules:
            for node in nodes:
                if matches(node.path):
                    return node, strategy
        return None, None
