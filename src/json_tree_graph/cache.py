"""GraphCache: LRU cache of built graphs keyed by document text and layout.

Re-visualizing the same text with the same layout constants skips both the
parse and the build.  Cached graphs are never handed out directly: every hit
returns ``graph.copy()``, so highlight flags set on one result never leak
into another.  LRU eviction occurs silently when ``max_size`` is exceeded.

Each ``GraphCache`` instance maintains its own ``LRUCache`` — there is no
class-level shared state.

Example::

    from json_tree_graph.cache import GraphCache

    cache = GraphCache(max_size=16)
    graph = cache.get(text, layout)
    if graph is None:
        graph = TreeBuilder(layout).build(json.loads(text))
        cache.put(text, layout, graph)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cachetools import LRUCache

if TYPE_CHECKING:
    from json_tree_graph.config import LayoutConfig
    from json_tree_graph.tree.nodes import TreeGraph

__all__ = ["GraphCache"]


class GraphCache:
    """LRU-backed store of built graphs.

    Args:
        max_size: Maximum number of graphs held in memory.  Defaults to 64.
            Must be >= 1.
    """

    def __init__(self, max_size: int = 64) -> None:
        if max_size < 1:
            msg = f"max_size must be >= 1, got {max_size}"
            raise ValueError(msg)
        self._cache: LRUCache[tuple[str, LayoutConfig], TreeGraph] = LRUCache(
            maxsize=max_size
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of graphs this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of graphs stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def get(self, text: str, layout: LayoutConfig) -> TreeGraph | None:
        """Return a fresh copy of the cached graph, or None on a miss."""
        graph = self._cache.get((text, layout))
        if graph is None:
            return None
        return graph.copy()

    def put(self, text: str, layout: LayoutConfig, graph: TreeGraph) -> None:
        """Store a private copy of ``graph`` under ``(text, layout)``."""
        self._cache[(text, layout)] = graph.copy()

    def clear(self) -> None:
        self._cache.clear()
