"""Tests for status bands and trend agreement."""

import pytest

from conftest import make_results
from hemi.classifier.engine import (
    classify_status,
    classify_trend_agreement,
    is_positive_signal,
)
from hemi.config import StatusThresholds
from hemi.types import IndicatorResult, Role, Severity


class TestClassifyStatus:
    """Test the band boundaries."""

    @pytest.mark.parametrize(
        "score,label,severity",
        [
            (0.0, "High Recession Risk", Severity.CRITICAL),
            (24.999, "High Recession Risk", Severity.CRITICAL),
            (25.0, "Economic Slowdown", Severity.WARNING),
            (44.999, "Economic Slowdown", Severity.WARNING),
            (45.0, "Moderate Expansion", Severity.INFORMATIONAL),
            (64.999, "Moderate Expansion", Severity.INFORMATIONAL),
            (65.0, "Strong Expansion", Severity.POSITIVE),
            (100.0, "Strong Expansion", Severity.POSITIVE),
        ],
    )
    def test_bands(self, score, label, severity):
        band = classify_status(score)
        assert band.label == label
        assert band.severity == severity

    def test_custom_thresholds(self):
        thresholds = StatusThresholds(recession_below=10.0)
        assert classify_status(15.0, thresholds).label == "Economic Slowdown"


class TestIsPositiveSignal:
    def test_non_inverted(self):
        assert is_positive_signal(Role.YIELD_CURVE, IndicatorResult(score=60.0))
        assert not is_positive_signal(Role.YIELD_CURVE, IndicatorResult(score=40.0))

    def test_inverted(self):
        assert is_positive_signal(Role.JOBLESS_CLAIMS, IndicatorResult(score=40.0))
        assert not is_positive_signal(Role.VOLATILITY_INDEX, IndicatorResult(score=60.0))

    def test_exactly_fifty_never_positive(self):
        for role in Role:
            assert not is_positive_signal(role, IndicatorResult(score=50.0))


class TestClassifyTrendAgreement:
    def test_expansion_regime(self):
        results = make_results(
            yield_curve=80.0,  # positive
            jobless_claims=20.0,  # inverted, positive
            volatility_index=70.0,  # inverted, negative
            equity_index=30.0,  # negative
            oil_price=55.0,  # positive
        )
        agreement = classify_trend_agreement(60.0, results)
        assert agreement.confirming == {Role.YIELD_CURVE, Role.JOBLESS_CLAIMS, Role.OIL_PRICE}
        assert agreement.contradicting == {Role.VOLATILITY_INDEX, Role.EQUITY_INDEX}

    def test_contraction_regime(self):
        results = make_results(
            yield_curve=80.0,
            jobless_claims=20.0,
            volatility_index=70.0,
            equity_index=30.0,
            oil_price=55.0,
        )
        agreement = classify_trend_agreement(30.0, results)
        assert agreement.confirming == {Role.VOLATILITY_INDEX, Role.EQUITY_INDEX}
        assert agreement.contradicting == {Role.YIELD_CURVE, Role.JOBLESS_CLAIMS, Role.OIL_PRICE}

    def test_regime_pivot_is_inclusive(self):
        results = make_results(yield_curve=90.0)
        assert Role.YIELD_CURVE in classify_trend_agreement(45.0, results).confirming
        assert Role.YIELD_CURVE in classify_trend_agreement(44.999, results).contradicting

    def test_score_fifty_reads_negative(self):
        results = make_results()  # every score exactly 50
        expansion = classify_trend_agreement(70.0, results)
        assert expansion.confirming == frozenset()
        assert expansion.contradicting == set(Role)

        contraction = classify_trend_agreement(20.0, results)
        assert contraction.confirming == set(Role)
        assert contraction.contradicting == frozenset()

    def test_buckets_are_disjoint_and_complete(self):
        results = make_results(yield_curve=10.0, jobless_claims=90.0, oil_price=70.0)
        agreement = classify_trend_agreement(50.0, results)
        assert not agreement.confirming & agreement.contradicting
        assert agreement.confirming | agreement.contradicting == set(Role)
