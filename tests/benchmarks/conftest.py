"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers: 100-value flat, 1 000-value nested, 10 000-value wide-and-deep.
"""

from __future__ import annotations

from typing import Any

import pytest


def generate_flat_object(num_keys: int, prefix: str = "key") -> dict[str, Any]:
    """Generate a flat dict with deterministic string values."""
    return {f"{prefix}_{i}": f"value_{i}" for i in range(num_keys)}


def generate_nested_object(sections: int, per_section: int) -> dict[str, Any]:
    """Generate ``sections`` sub-objects, each holding an array of records."""
    return {
        f"section_{s}": {
            "id": s,
            "records": [
                {"index": i, "name": f"record_{s}_{i}", "active": i % 2 == 0}
                for i in range(per_section)
            ],
        }
        for s in range(sections)
    }


@pytest.fixture
def doc_flat_100() -> dict[str, Any]:
    return generate_flat_object(100)


@pytest.fixture
def doc_nested_1k() -> dict[str, Any]:
    # 10 sections x (1 + 1 + 1 + 24 records x 4 values) ~ 1 000 values
    return generate_nested_object(10, 24)


@pytest.fixture
def doc_nested_10k() -> dict[str, Any]:
    return generate_nested_object(50, 50)
