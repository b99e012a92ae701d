"""search subpackage — path query normalization and node matching.

Example::

    from json_tree_graph.search import SearchMatcher, normalize_query

    normalize_query("user.name")   # "$.user.name"
    result = SearchMatcher().search(graph, "user.name")
"""

from __future__ import annotations

from json_tree_graph.search.matcher import SearchMatcher
from json_tree_graph.search.normalizer import normalize_query, suffix_of

__all__ = ["SearchMatcher", "normalize_query", "suffix_of"]
