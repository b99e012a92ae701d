"""Tests for SearchResult, BuildResult and their enums."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from json_tree_graph.result import (
    BuildResult,
    MatchStrategy,
    SearchResult,
    SearchStatus,
)


class TestEnums:
    def test_match_strategy_values(self) -> None:
        assert [str(s) for s in MatchStrategy] == ["exact", "raw", "suffix"]

    def test_search_status_values(self) -> None:
        assert {str(s) for s in SearchStatus} == {"found", "not_found", "empty_query"}


class TestSearchResult:
    def test_messages(self) -> None:
        for status, message in [
            (SearchStatus.FOUND, "Match found"),
            (SearchStatus.NOT_FOUND, "No match found"),
            (SearchStatus.EMPTY_QUERY, "Enter a path to search"),
        ]:
            result = SearchResult(status=status, query="q", canonical_query="$.q")
            assert result.message == message
            assert result.found is (status is SearchStatus.FOUND)

    def test_frozen(self) -> None:
        result = SearchResult(
            status=SearchStatus.NOT_FOUND, query="q", canonical_query="$.q"
        )
        with pytest.raises(FrozenInstanceError):
            result.query = "other"  # type: ignore[misc]


class TestBuildResult:
    def test_ok(self) -> None:
        result = BuildResult(graph=None, error=None, computation_time_ms=1.0)
        assert result.ok
        assert result.message == ""

    def test_error_message(self) -> None:
        result = BuildResult(graph=None, error="Expecting value", computation_time_ms=0.1)
        assert not result.ok
        assert result.message == "Error: Expecting value"
