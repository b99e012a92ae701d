"""Tests for LayoutConfig and SearchConfig frozen dataclasses.

Covers:
- Default values (300 / 80 / 100 / 30, allow_suffix=True)
- Immutability (FrozenInstanceError on assignment)
- Validation: spacing and row height must be > 0
- Validation: every constant must be a finite number
- Hashability (configs are used as cache keys)
"""

from __future__ import annotations

import math
from dataclasses import FrozenInstanceError

import pytest

from json_tree_graph.config import LayoutConfig, SearchConfig

# ---------------------------------------------------------------------------
# LayoutConfig — defaults
# ---------------------------------------------------------------------------


class TestLayoutConfigDefaults:
    def test_default_horizontal_spacing(self) -> None:
        assert LayoutConfig().horizontal_spacing == 300

    def test_default_row_height(self) -> None:
        assert LayoutConfig().row_height == 80

    def test_default_x_offset(self) -> None:
        assert LayoutConfig().x_offset == 100

    def test_default_y_base(self) -> None:
        assert LayoutConfig().y_base == 30


# ---------------------------------------------------------------------------
# LayoutConfig — immutability / hashing
# ---------------------------------------------------------------------------


class TestLayoutConfigImmutability:
    def test_assignment_raises(self) -> None:
        config = LayoutConfig()
        with pytest.raises(FrozenInstanceError):
            config.row_height = 10  # type: ignore[misc]

    def test_equal_configs_hash_equal(self) -> None:
        assert hash(LayoutConfig(row_height=40)) == hash(LayoutConfig(row_height=40))
        assert LayoutConfig(row_height=40) != LayoutConfig()

    def test_negative_offsets_allowed(self) -> None:
        config = LayoutConfig(x_offset=-50, y_base=-10.5)
        assert config.x_offset == -50


# ---------------------------------------------------------------------------
# LayoutConfig — validation
# ---------------------------------------------------------------------------


class TestLayoutConfigValidation:
    @pytest.mark.parametrize("value", [0, -1, -0.5])
    def test_non_positive_spacing(self, value: float) -> None:
        with pytest.raises(ValueError, match="horizontal_spacing"):
            LayoutConfig(horizontal_spacing=value)

    @pytest.mark.parametrize("value", [0, -80])
    def test_non_positive_row_height(self, value: float) -> None:
        with pytest.raises(ValueError, match="row_height"):
            LayoutConfig(row_height=value)

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_non_finite(self, value: float) -> None:
        with pytest.raises(ValueError, match="finite"):
            LayoutConfig(y_base=value)

    @pytest.mark.parametrize("value", ["10", None, True])
    def test_non_number(self, value: object) -> None:
        with pytest.raises(TypeError, match="must be a number"):
            LayoutConfig(x_offset=value)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# SearchConfig
# ---------------------------------------------------------------------------


class TestSearchConfig:
    def test_default_allows_suffix(self) -> None:
        assert SearchConfig().allow_suffix is True

    def test_frozen(self) -> None:
        with pytest.raises(FrozenInstanceError):
            SearchConfig().allow_suffix = False  # type: ignore[misc]
