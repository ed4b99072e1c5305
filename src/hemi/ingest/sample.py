"""
HEMI - Synthetic Sample Series

Generates 90 days of plausible data for every role so the dashboard
works without API keys. No I/O. Values vary run to run except for the
two fixed most recent days.
"""

from __future__ import annotations

import math
from datetime import date
from typing import Callable, Optional

import numpy as np
import pandas as pd

from hemi.config import SampleConfig
from hemi.types import (
    HistoricalPoint,
    HistoricalSeries,
    ObservationPoint,
    ObservationSeries,
    RawSeries,
    Role,
)

# role -> (smooth function of day index, noise span, decimals)
_CURVES: dict[Role, tuple[Callable[[int], float], float, int]] = {
    Role.YIELD_CURVE: (lambda i: 0.3 + math.sin(i / 20) * 0.15, 0.05, 2),
    Role.JOBLESS_CLAIMS: (lambda i: 230000 + math.cos(i / 15) * 10000, 5000, 0),
    Role.VOLATILITY_INDEX: (lambda i: 18 - math.sin(i / 25) * 3, 2, 2),
    Role.EQUITY_INDEX: (lambda i: 5400 + math.sin(i / 10) * 80 + i * 1.5, 50, 2),
    Role.OIL_PRICE: (lambda i: 82 + math.cos(i / 30) * 5, 3, 2),
}

_HISTORICAL_ROLES = {Role.EQUITY_INDEX, Role.OIL_PRICE}


def sample_dates(days: int, today: Optional[date] = None) -> list[str]:
    """ISO dates for `days` consecutive calendar days ending today, oldest first."""
    end = pd.Timestamp(today or date.today())
    return [d.date().isoformat() for d in pd.date_range(end=end, periods=days, freq="D")]


def _sample_values(
    role: Role,
    days: int,
    rng: np.random.Generator,
    tail: tuple[float, float],
) -> list[float]:
    curve, span, decimals = _CURVES[role]
    noise = (rng.random(days) - 0.5) * span
    values = [round(curve(i) + float(noise[i]), decimals) for i in range(days)]
    values[-2], values[-1] = tail
    return values


def generate_sample_series(
    today: Optional[date] = None,
    rng: Optional[np.random.Generator] = None,
    config: Optional[SampleConfig] = None,
) -> dict[Role, RawSeries]:
    """
    Build one raw series per role.

    Observation-shape roles come out chronological; historical-shape roles
    come out newest first, the way the live price provider returns them.

    Args:
        today: Last day of the window (default: today).
        rng: Noise source (default: unseeded numpy Generator).
        config: Sample parameters.

    Returns:
        Mapping of role -> raw series.
    """
    config = config or SampleConfig()
    rng = rng or np.random.default_rng()
    dates = sample_dates(config.days, today)

    series: dict[Role, RawSeries] = {}
    for role in Role:
        values = _sample_values(role, config.days, rng, config.fixed_tail[role])
        if role in _HISTORICAL_ROLES:
            points = tuple(
                HistoricalPoint(date=d, close=v) for d, v in zip(dates, values)
            )
            series[role] = HistoricalSeries(role=role, points=points[::-1])
        else:
            series[role] = ObservationSeries(
                role=role,
                points=tuple(ObservationPoint(date=d, value=v) for d, v in zip(dates, values)),
            )
    return series
