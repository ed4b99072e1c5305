"""Tests for dashboard figure builders (no Streamlit session needed)."""

from conftest import make_observation
from hemi.classifier.engine import ECONOMIC_SLOWDOWN, STRONG_EXPANSION
from hemi.dashboard.components.hemi_gauge import SEVERITY_COLORS, build_gauge_figure
from hemi.dashboard.components.indicator_cards import build_sparkline
from hemi.scoring.normalizer import normalize_observation_series
from hemi.types import IndicatorResult, Role


class TestGaugeFigure:
    def test_value_and_color(self):
        fig = build_gauge_figure(52.34, STRONG_EXPANSION)
        indicator = fig.data[0]
        assert indicator.value == 52.3
        assert indicator.gauge.bar.color == SEVERITY_COLORS[STRONG_EXPANSION.severity]

    def test_color_follows_severity(self):
        fig = build_gauge_figure(30.0, ECONOMIC_SLOWDOWN)
        assert fig.data[0].gauge.bar.color == "#FBBF24"


class TestSparkline:
    def test_plots_full_history(self):
        result = normalize_observation_series(
            make_observation(Role.YIELD_CURVE, [0.4, None, 0.43, 0.45])
        )
        fig = build_sparkline(result, "#34D399")
        assert list(fig.data[0].y) == [0.4, 0.43, 0.45]
        assert len(fig.data[0].x) == 3

    def test_empty_history(self):
        fig = build_sparkline(IndicatorResult(), "#9ca3af")
        assert len(fig.data[0].y) == 0
