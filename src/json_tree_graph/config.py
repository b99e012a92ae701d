"""LayoutConfig and SearchConfig for tree layout and path search.

LayoutConfig is a frozen (immutable) dataclass holding the four layout
constants: horizontal spacing between depth levels, row height between
vertical slots, and the x/y offset of the root.  SearchConfig selects which
matching strategies the SearchMatcher may use.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = ["LayoutConfig", "SearchConfig"]


@dataclass(frozen=True, slots=True)
class LayoutConfig:
    """Immutable layout constants for TreeBuilder.

    A node at recursion depth ``d`` with vertical index ``v`` is placed at::

        x = d * horizontal_spacing + x_offset
        y = y_base + v * row_height

    Attributes:
        horizontal_spacing: Distance between two depth levels (> 0).
        row_height: Distance between two vertical slots (> 0).
        x_offset: x coordinate of the root node.
        y_base: y coordinate of the root node.
    """

    horizontal_spacing: float = 300
    row_height: float = 80
    x_offset: float = 100
    y_base: float = 30

    def __post_init__(self) -> None:
        for name in ("horizontal_spacing", "row_height", "x_offset", "y_base"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                msg = f"{name} must be a number, got {value!r}"
                raise TypeError(msg)
            if not math.isfinite(value):
                msg = f"{name} must be finite, got {value}"
                raise ValueError(msg)
        if self.horizontal_spacing <= 0:
            msg = f"horizontal_spacing must be > 0, got {self.horizontal_spacing}"
            raise ValueError(msg)
        if self.row_height <= 0:
            msg = f"row_height must be > 0, got {self.row_height}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Immutable configuration for SearchMatcher.

    Attributes:
        allow_suffix: When True (the default), a query that matches no path
            exactly may still match the first node whose path ends with the
            query.  Set to False to require an exact canonical or raw match.
    """

    allow_suffix: bool = True
