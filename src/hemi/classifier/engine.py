"""
HEMI - Status & Trend Classifier

Status bands (evaluated in order, first match wins):
1. < 25  -> High Recession Risk
2. < 45  -> Economic Slowdown
3. < 65  -> Moderate Expansion
4. else  -> Strong Expansion

Trend agreement compares each indicator's own direction with the
composite regime (expansionary when composite >= 45).
"""

from __future__ import annotations

from typing import Iterable, Mapping

from hemi.config import StatusThresholds
from hemi.types import IndicatorResult, Role, Severity, StatusBand, TrendAgreement

HIGH_RECESSION_RISK = StatusBand("High Recession Risk", Severity.CRITICAL)
ECONOMIC_SLOWDOWN = StatusBand("Economic Slowdown", Severity.WARNING)
MODERATE_EXPANSION = StatusBand("Moderate Expansion", Severity.INFORMATIONAL)
STRONG_EXPANSION = StatusBand("Strong Expansion", Severity.POSITIVE)

DEFAULT_INVERTED_ROLES = frozenset({Role.JOBLESS_CLAIMS, Role.VOLATILITY_INDEX})


def classify_status(
    composite_index: float, thresholds: StatusThresholds | None = None
) -> StatusBand:
    """
    Map the composite index onto its status band.

    Args:
        composite_index: HEMI score in [0, 100].
        thresholds: Band boundaries.

    Returns:
        StatusBand with label and severity.
    """
    thresholds = thresholds or StatusThresholds()

    if composite_index < thresholds.recession_below:
        return HIGH_RECESSION_RISK
    if composite_index < thresholds.slowdown_below:
        return ECONOMIC_SLOWDOWN
    if composite_index < thresholds.moderate_below:
        return MODERATE_EXPANSION
    return STRONG_EXPANSION


def is_positive_signal(
    role: Role,
    result: IndicatorResult,
    inverted_roles: Iterable[Role] = DEFAULT_INVERTED_ROLES,
    neutral_score: float = 50.0,
) -> bool:
    """An indicator reads positive when its score is on the favorable side of 50."""
    if role in set(inverted_roles):
        return result.score < neutral_score
    return result.score > neutral_score


def classify_trend_agreement(
    composite_index: float,
    results: Mapping[Role, IndicatorResult],
    thresholds: StatusThresholds | None = None,
    inverted_roles: Iterable[Role] = DEFAULT_INVERTED_ROLES,
) -> TrendAgreement:
    """
    Split indicators into those confirming and contradicting the regime.

    A score of exactly 50 is never positive, so it confirms a
    contractionary regime and contradicts an expansionary one.

    Args:
        composite_index: HEMI score.
        results: role -> IndicatorResult.
        thresholds: Regime pivot and per-indicator neutral score.
        inverted_roles: roles where a lower raw value is favorable.

    Returns:
        TrendAgreement with disjoint confirming / contradicting sets.
    """
    thresholds = thresholds or StatusThresholds()
    inverted = frozenset(inverted_roles)
    expansion = composite_index >= thresholds.expansion_regime_from

    confirming = set()
    contradicting = set()
    for role, result in results.items():
        positive = is_positive_signal(role, result, inverted, thresholds.neutral_score)
        if positive == expansion:
            confirming.add(role)
        else:
            contradicting.add(role)

    return TrendAgreement(
        confirming=frozenset(confirming), contradicting=frozenset(contradicting)
    )
