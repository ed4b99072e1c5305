"""
HEMI - Composite Index

HEMI = sum(score_role * weight_role) over the five roles.
No renormalization: every role must be present.
"""

from __future__ import annotations

from typing import Mapping

from hemi.config import IndicatorWeights
from hemi.types import IndicatorResult, Role


def compute_composite_index(
    results: Mapping[Role, IndicatorResult],
    weights: IndicatorWeights | None = None,
) -> float:
    """
    Weighted sum of indicator scores.

    Args:
        results: role -> IndicatorResult, all five roles required.
        weights: Composite weights.

    Returns:
        Composite index in [0, 100].

    Raises:
        ValueError: one or more roles missing.
    """
    weight_map = (weights or IndicatorWeights()).as_mapping()

    missing = [role.value for role in weight_map if role not in results]
    if missing:
        raise ValueError(f"Composite index needs all indicators, missing: {missing}")

    return sum(results[role].score * weight for role, weight in weight_map.items())
