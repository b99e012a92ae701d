"""Unit tests for GraphCache.

Tests cover:
- Miss / hit behaviour keyed by (text, layout)
- Hits return independent copies (highlight never leaks between results)
- LRU eviction (silent eviction at max_size)
- Instance isolation (separate GraphCache instances do not share state)
- Properties (max_size and curr_size) and argument validation
"""

from __future__ import annotations

import pytest

from json_tree_graph.cache import GraphCache
from json_tree_graph.config import LayoutConfig
from json_tree_graph.tree.builder import TreeBuilder
from json_tree_graph.tree.nodes import TreeGraph

TEXT = '{"a": 1, "b": [2, 3]}'


@pytest.fixture
def graph() -> TreeGraph:
    return TreeBuilder().build({"a": 1, "b": [2, 3]})


class TestHitsAndMisses:
    def test_miss_returns_none(self) -> None:
        assert GraphCache().get(TEXT, LayoutConfig()) is None

    def test_hit_after_put(self, graph: TreeGraph) -> None:
        cache = GraphCache()
        cache.put(TEXT, LayoutConfig(), graph)
        hit = cache.get(TEXT, LayoutConfig())
        assert hit is not None
        assert [n.path for n in hit.nodes] == [n.path for n in graph.nodes]

    def test_layout_is_part_of_key(self, graph: TreeGraph) -> None:
        cache = GraphCache()
        cache.put(TEXT, LayoutConfig(), graph)
        assert cache.get(TEXT, LayoutConfig(row_height=10)) is None


class TestCopies:
    def test_hits_are_distinct_objects(self, graph: TreeGraph) -> None:
        cache = GraphCache()
        cache.put(TEXT, LayoutConfig(), graph)
        first = cache.get(TEXT, LayoutConfig())
        second = cache.get(TEXT, LayoutConfig())
        assert first is not None and second is not None
        assert first is not second
        assert first.nodes[0] is not second.nodes[0]

    def test_highlight_does_not_leak(self, graph: TreeGraph) -> None:
        cache = GraphCache()
        cache.put(TEXT, LayoutConfig(), graph)
        first = cache.get(TEXT, LayoutConfig())
        assert first is not None
        first.nodes[1].highlight = True
        graph.nodes[2].highlight = True
        second = cache.get(TEXT, LayoutConfig())
        assert second is not None
        assert second.highlighted is None


class TestEviction:
    def test_lru_eviction(self, graph: TreeGraph) -> None:
        cache = GraphCache(max_size=2)
        cache.put("1", LayoutConfig(), graph)
        cache.put("2", LayoutConfig(), graph)
        cache.get("1", LayoutConfig())  # "2" becomes least recently used
        cache.put("3", LayoutConfig(), graph)
        assert cache.curr_size == 2
        assert cache.get("2", LayoutConfig()) is None
        assert cache.get("1", LayoutConfig()) is not None
        assert cache.get("3", LayoutConfig()) is not None

    def test_clear(self, graph: TreeGraph) -> None:
        cache = GraphCache()
        cache.put(TEXT, LayoutConfig(), graph)
        cache.clear()
        assert cache.curr_size == 0


class TestIsolationAndProperties:
    def test_instances_do_not_share_state(self, graph: TreeGraph) -> None:
        a = GraphCache()
        b = GraphCache()
        a.put(TEXT, LayoutConfig(), graph)
        assert b.get(TEXT, LayoutConfig()) is None

    def test_max_size(self) -> None:
        assert GraphCache().max_size == 64
        assert GraphCache(max_size=3).max_size == 3

    @pytest.mark.parametrize("size", [0, -1])
    def test_invalid_max_size(self, size: int) -> None:
        with pytest.raises(ValueError, match="max_size"):
            GraphCache(max_size=size)
