"""TreeGraphSession: the currently displayed graph and its status line.

A session is what a rendering application holds on to.  It owns the last
successfully built graph and recovers every user-facing failure into status
text:

- a parse error keeps the previous graph visible;
- an empty or unmatched search changes no view state;
- an export or clipboard failure leaves the graph untouched.

Nothing is retried.  Any exporter failure is reported; clipboard writers
are recovered for the expected error types only.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from json_tree_graph.api import visualize
from json_tree_graph.cache import GraphCache
from json_tree_graph.config import LayoutConfig, SearchConfig
from json_tree_graph.result import BuildResult, SearchResult
from json_tree_graph.search.matcher import SearchMatcher

if TYPE_CHECKING:
    from json_tree_graph.protocols import ClipboardWriter, ImageExporter
    from json_tree_graph.tree.nodes import Position, TreeGraph

__all__ = ["SAMPLE_JSON", "TreeGraphSession"]

_LOGGER = logging.getLogger(__name__)

_EXPECTED_COLLABORATOR_ERRORS = (
    OSError,
    RuntimeError,
    ValueError,
    TypeError,
)

SAMPLE_JSON = """{
  "user": {
    "id": 1,
    "name": "John Doe",
    "address": {
      "city": "New York",
      "country": "USA"
    },
    "items": [
      { "name": "item1" },
      { "name": "item2" }
    ]
  }
}"""


class TreeGraphSession:
    """Holds the displayed graph and turns failures into status text.

    A successful ``load`` replaces the graph in a single assignment, so a
    reader never sees a mix of old and new nodes.

    Example::

        session = TreeGraphSession()
        session.load('{"a": 1, "b": [2, 3]}')
        result = session.search("b[1]")
        session.status        # "Match found"
        session.focus         # Position(x=750, y=210)
    """

    def __init__(
        self,
        layout: LayoutConfig | None = None,
        search: SearchConfig | None = None,
        cache: GraphCache | None = None,
    ) -> None:
        self._layout: LayoutConfig = layout if layout is not None else LayoutConfig()
        self._matcher = SearchMatcher(config=search)
        self._cache: GraphCache = cache if cache is not None else GraphCache()
        self._text = ""
        self._graph: TreeGraph | None = None
        self._status = ""
        self._focus: Position | None = None

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def text(self) -> str:
        """The text most recently passed to ``load``."""
        return self._text

    @property
    def graph(self) -> TreeGraph | None:
        """The last successfully built graph, or None."""
        return self._graph

    @property
    def status(self) -> str:
        """User-facing status line ("" when there is nothing to report)."""
        return self._status

    @property
    def focus(self) -> Position | None:
        """Point the view should center on after a successful search."""
        return self._focus

    # ------------------------------------------------------------------
    # Build
    # ------------------------------------------------------------------

    def load(self, text: str) -> BuildResult:
        """Parse and build ``text``; keep the previous graph on failure."""
        self._text = text
        cached = self._cache.get(text, self._layout)
        if cached is not None:
            result = BuildResult(graph=cached, error=None, computation_time_ms=0.0)
        else:
            result = visualize(text, config=self._layout)
            if result.graph is not None:
                self._cache.put(text, self._layout, result.graph)

        if result.graph is None:
            self._status = result.message
            return result

        self._graph = result.graph
        self._focus = None
        self._status = ""
        _LOGGER.debug(
            "session.load",
            extra={"nodes": len(result.graph), "elapsed_ms": result.computation_time_ms},
        )
        return result

    def load_sample(self) -> BuildResult:
        return self.load(SAMPLE_JSON)

    def clear(self) -> None:
        """Drop text, graph, status and focus."""
        self._text = ""
        self._graph = None
        self._status = ""
        self._focus = None

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def search(self, query: str) -> SearchResult:
        """Highlight the node addressed by ``query`` and set the focus point."""
        nodes = self._graph.nodes if self._graph is not None else []
        result = self._matcher.search(nodes, query)
        self._status = result.message
        if result.node is not None and self._graph is not None:
            self._focus = self._graph.center_of(result.node)
        return result

    # ------------------------------------------------------------------
    # Collaborators
    # ------------------------------------------------------------------

    def copy_path(self, node_id: str, clipboard: ClipboardWriter) -> str | None:
        """Write the path of ``node_id`` to ``clipboard``.

        Returns:
            The copied path, or None when the node does not exist or the
            clipboard writer failed.
        """
        node = self._graph.node_by_id(node_id) if self._graph is not None else None
        if node is None:
            self._status = f"Unknown node: {node_id}"
            return None
        try:
            clipboard.write(node.path)
        except _EXPECTED_COLLABORATOR_ERRORS as exc:
            _LOGGER.warning(
                "session.copy_path_failed", extra={"node_id": node_id}, exc_info=exc
            )
            self._status = "Could not copy path"
            return None
        self._status = f"Copied path: {node.path}"
        return node.path

    def export_image(self, exporter: ImageExporter, surface: Any) -> bytes | None:
        """Rasterize ``surface`` through ``exporter``; report failure as status."""
        try:
            image = exporter.export(surface)
        except Exception as exc:
            _LOGGER.error("session.export_failed", exc_info=exc)
            self._status = "Could not export image"
            return None
        return image
