"""Query normalization: free-text path queries to canonical-path form.

All of the following normalize to ``"$.user.name"``::

    "$.user.name"
    ".user.name"
    "user.name"
    "  user.name  "
"""

from __future__ import annotations

from json_tree_graph.tree.paths import ROOT_PATH

__all__ = ["normalize_query", "suffix_of"]

_ROOT_FIELD_PREFIX = ROOT_PATH + "."


def normalize_query(query: str) -> str:
    """Return the canonical form of a path query.

    Leading and trailing whitespace is trimmed first.  A query starting with
    "$" is kept as is, one starting with "." gets a "$" prefix, anything else
    gets a "$." prefix.
    """
    q = query.strip()
    if q.startswith(ROOT_PATH):
        return q
    if q.startswith("."):
        return ROOT_PATH + q
    return _ROOT_FIELD_PREFIX + q


def suffix_of(canonical: str) -> str:
    """Strip a leading "$." from a canonical query for trailing-path comparison."""
    if canonical.startswith(_ROOT_FIELD_PREFIX):
        return canonical[len(_ROOT_FIELD_PREFIX) :]
    return canonical
