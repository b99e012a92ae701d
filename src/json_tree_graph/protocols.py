"""Structural protocols for the collaborators a session hands work to.

A rendering application plugs in its own image exporter and clipboard writer
without inheriting from any base class — any object with a conformant method
passes ``isinstance`` checks.

Example::

    from json_tree_graph.protocols import ClipboardWriter

    class PyperclipWriter:
        def write(self, text: str) -> None:
            pyperclip.copy(text)

    assert isinstance(PyperclipWriter(), ClipboardWriter)  # True
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

__all__ = ["ClipboardWriter", "ImageExporter"]


@runtime_checkable
class ImageExporter(Protocol):
    """Rasterizes a rendering surface.

    ``export`` returns the encoded image (e.g. PNG bytes).  Any exception it
    raises is treated as an export failure; exports are never retried.
    """

    def export(self, surface: Any) -> bytes: ...


@runtime_checkable
class ClipboardWriter(Protocol):
    """Places text on the system clipboard.

    Implementations may silently do nothing where no clipboard is available.
    """

    def write(self, text: str) -> None: ...
