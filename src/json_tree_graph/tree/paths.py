"""Canonical path addressing for nodes of a JSON tree graph.

The document root is ``"$"``.  Object fields append ``".key"`` and array
elements append ``"[index]"``:

    $                 the document
    $.user            field "user" of the root object
    $.user.items[0]   first element of the "items" array

Keys are used verbatim; no quoting or escaping is applied.
"""

from __future__ import annotations

__all__ = ["ROOT_PATH", "child_path"]

ROOT_PATH = "$"


def child_path(parent: str, key: str | int) -> str:
    """Return the canonical path of a child under ``parent``.

    Args:
        parent: Canonical path of the containing object or array.
        key:    Object key (``str``) or array index (``int``).

    Returns:
        ``parent + "." + key`` for object keys, ``parent + "[" + key + "]"``
        for array indices.

    Raises:
        TypeError: If ``key`` is neither ``str`` nor ``int`` (``bool`` is
            rejected even though it subclasses ``int``).
        ValueError: If ``key`` is a negative index.
    """
    # bool subclasses int; True is never a valid array index
    if isinstance(key, bool):
        msg = f"Path key must be str or int, got {type(key)!r}"
        raise TypeError(msg)
    if isinstance(key, str):
        return f"{parent}.{key}"
    if isinstance(key, int):
        if key < 0:
            msg = f"Array index must be >= 0, got {key}"
            raise ValueError(msg)
        return f"{parent}[{key}]"
    msg = f"Path key must be str or int, got {type(key)!r}"
    raise TypeError(msg)
