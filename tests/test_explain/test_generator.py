"""Tests for the explanation generator."""

import pytest

from conftest import make_results
from hemi.classifier.engine import classify_trend_agreement
from hemi.explain.generator import (
    INDICATOR_DISPLAY,
    format_value,
    generate_summary,
    trend_direction,
)
from hemi.types import Role, TrendAgreement


class TestFormatValue:
    @pytest.mark.parametrize(
        "value,fmt,expected",
        [
            (0.45, "percent", "0.45%"),
            (-0.1, "percent", "-0.10%"),
            (242000.0, "number", "242,000"),
            (19.8, "number", "19.8"),
            (1.5, "number", "1.5"),
            (5510.4, "currency", "$5,510.40"),
            (-15.2, "currency", "-$15.20"),
            (None, "currency", "N/A"),
            ("85.5", "number", "N/A"),
        ],
    )
    def test_formats(self, value, fmt, expected):
        assert format_value(value, fmt) == expected


class TestTrendDirection:
    def test_directions(self):
        assert trend_direction(0.02) == "up"
        assert trend_direction(-15.2) == "down"
        assert trend_direction(0.0) == "flat"


class TestGenerateSummary:
    def test_headline(self):
        summary = generate_summary(52.34, make_results(), TrendAgreement())
        assert summary.headline == "Analysis based on the current HEMI score of 52.3."

    def test_lines_follow_agreement(self):
        results = make_results(yield_curve=62.1, jobless_claims=70.0, equity_index=80.0)
        agreement = classify_trend_agreement(60.0, results)
        summary = generate_summary(60.0, results, agreement)
        assert summary.confirming == ["Yield Curve (Score: 62.1)", "S&P 500 (Score: 80.0)"]
        assert summary.contradicting == [
            "Jobless Claims (Score: 70.0)",
            "VIX (Score: 50.0)",
            "WTI Oil (Score: 50.0)",
        ]

    def test_every_role_has_display(self):
        assert set(INDICATOR_DISPLAY) == set(Role)
        for display in INDICATOR_DISPLAY.values():
            assert display.value_format in ("percent", "number", "currency")
