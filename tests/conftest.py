"""Shared fixtures for HEMI tests."""

import sys
from datetime import date
from pathlib import Path

import numpy as np
import pytest

# Ensure hemi is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hemi.config import HemiConfig
from hemi.ingest.sample import generate_sample_series
from hemi.types import (
    HistoricalPoint,
    HistoricalSeries,
    IndicatorResult,
    ObservationPoint,
    ObservationSeries,
    Role,
)

AS_OF = date(2026, 1, 15)


def make_observation(role, values, start_day=1):
    """Observation series from a list of floats/None, one day apart, oldest first."""
    return ObservationSeries(
        role=role,
        points=tuple(
            ObservationPoint(date=f"2026-01-{start_day + i:02d}", value=v)
            for i, v in enumerate(values)
        ),
    )


def make_historical(role, closes_oldest_first):
    """Historical series given oldest-first closes; stored newest first like FMP."""
    points = tuple(
        HistoricalPoint(date=f"2026-01-{i + 1:02d}", close=c)
        for i, c in enumerate(closes_oldest_first)
    )
    return HistoricalSeries(role=role, points=points[::-1])


def make_results(**scores):
    """role -> IndicatorResult with the given scores (default 50)."""
    return {
        role: IndicatorResult(current_value=1.0, score=scores.get(role.value, 50.0))
        for role in Role
    }


@pytest.fixture
def config() -> HemiConfig:
    return HemiConfig()


@pytest.fixture
def sample_series():
    """Sample series with a seeded generator so failures are reproducible."""
    return generate_sample_series(today=AS_OF, rng=np.random.default_rng(7))


@pytest.fixture
def fred_payload():
    return {
        "observations": [
            {"date": "2026-01-12", "value": "0.40"},
            {"date": "2026-01-13", "value": "."},
            {"date": "2026-01-14", "value": "0.43"},
            {"date": "2026-01-15", "value": "0.45"},
        ]
    }


@pytest.fixture
def fmp_payload():
    return {
        "symbol": "^GSPC",
        "historical": [
            {"date": "2026-01-15", "close": 5510.40},
            {"date": "2026-01-14", "close": 5525.60},
            {"date": "2026-01-13", "close": 5480.00},
        ],
    }
