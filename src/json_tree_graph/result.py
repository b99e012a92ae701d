"""Result dataclasses for build and search operations.

Neither a failed parse nor an unmatched query is an exception at the session
boundary; both are reported through these result types with a user-facing
``message``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from json_tree_graph.tree.nodes import GraphNode, TreeGraph

__all__ = ["BuildResult", "MatchStrategy", "SearchResult", "SearchStatus"]


class MatchStrategy(StrEnum):
    """How a query matched a node, in order of precedence.

    - EXACT:  node path equals the normalized query
    - RAW:    node path equals the query as typed (trimmed)
    - SUFFIX: node path ends with the query minus its "$." prefix
    """

    EXACT = auto()
    RAW = auto()
    SUFFIX = auto()


class SearchStatus(StrEnum):
    FOUND = auto()
    NOT_FOUND = auto()
    EMPTY_QUERY = auto()


_SEARCH_MESSAGES = {
    SearchStatus.FOUND: "Match found",
    SearchStatus.NOT_FOUND: "No match found",
    SearchStatus.EMPTY_QUERY: "Enter a path to search",
}


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Outcome of a SearchMatcher.search() call.

    Attributes:
        status: FOUND, NOT_FOUND or EMPTY_QUERY.
        query: The query as typed, whitespace trimmed.
        canonical_query: The normalized query ("" for an empty query).
        node: The matched node, or None.
        strategy: Which rule produced the match, or None.
    """

    status: SearchStatus
    query: str
    canonical_query: str
    node: GraphNode | None = None
    strategy: MatchStrategy | None = None

    @property
    def found(self) -> bool:
        return self.status is SearchStatus.FOUND

    @property
    def message(self) -> str:
        return _SEARCH_MESSAGES[self.status]


@dataclass(frozen=True, slots=True)
class BuildResult:
    """Outcome of parsing and building a document at the session boundary.

    Attributes:
        graph: The newly built graph, or None when parsing or building failed.
        error: The parser's (or builder's) message on failure, else None.
        computation_time_ms: Wall-clock duration of parse + build.
    """

    graph: TreeGraph | None
    error: str | None
    computation_time_ms: float

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        if self.error is not None:
            return f"Error: {self.error}"
        return ""
