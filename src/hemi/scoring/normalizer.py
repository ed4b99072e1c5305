"""
HEMI - Series Normalization

Converts raw series into IndicatorResult records: latest value,
latest delta, 0-100 percentile score and the chronological history.
No async. No side effects.
"""

from __future__ import annotations

import math
from typing import Iterable, Mapping, Optional

from hemi.errors import MalformedSeriesError
from hemi.types import (
    HistoricalSeries,
    IndicatorResult,
    NormalizedPoint,
    ObservationSeries,
    RawSeries,
    Role,
)


def _score_history(history: tuple[NormalizedPoint, ...], inverted: bool) -> IndicatorResult:
    """Score a chronological history of at least two points."""
    latest = history[-1]
    previous = history[-2]
    values = [p.value for p in history]
    low = min(values)
    high = max(values)

    # Flat series sits in the middle
    percentile = 0.5 if high == low else (latest.value - low) / (high - low)
    score = (1 - percentile) * 100 if inverted else percentile * 100

    return IndicatorResult(
        current_value=latest.value,
        recent_change=latest.value - previous.value,
        score=score,
        history=history,
    )


def normalize_observation_series(
    series: Optional[ObservationSeries], inverted: bool = False
) -> IndicatorResult:
    """
    Normalize an observation-shape series.

    Missing and non-finite points are dropped. With fewer than two valid
    points the result is all zeros rather than an error. Previous means the point
    before latest after filtering, not the previous calendar day.

    Raises:
        MalformedSeriesError: series or its points container is absent.
    """
    if series is None or series.points is None:
        role = series.role if series is not None else None
        raise MalformedSeriesError(role, "missing observations")

    history = tuple(
        NormalizedPoint(date=p.date, value=p.value)
        for p in series.points
        if p.value is not None and math.isfinite(p.value)
    )
    if len(history) < 2:
        return IndicatorResult(history=history)

    return _score_history(history, inverted)


def normalize_historical_series(
    series: Optional[HistoricalSeries], inverted: bool = False
) -> IndicatorResult:
    """
    Normalize a historical-shape series (newest first, closing prices).

    Unlike the observation path there is no zero fallback: fewer than
    two points is an error.

    Raises:
        MalformedSeriesError: series absent, shorter than two points, or
            holding a non-finite close.
    """
    if series is None or series.points is None:
        role = series.role if series is not None else None
        raise MalformedSeriesError(role, "missing historical prices")
    if len(series.points) < 2:
        raise MalformedSeriesError(
            series.role, f"need at least 2 closing prices, got {len(series.points)}"
        )
    if not all(math.isfinite(p.close) for p in series.points):
        raise MalformedSeriesError(series.role, "non-finite closing price")

    history = tuple(
        NormalizedPoint(date=p.date, value=p.close) for p in reversed(series.points)
    )
    return _score_history(history, inverted)


def normalize_series(series: RawSeries, inverted: bool = False) -> IndicatorResult:
    """Dispatch on the raw series shape."""
    if isinstance(series, ObservationSeries):
        return normalize_observation_series(series, inverted)
    if isinstance(series, HistoricalSeries):
        return normalize_historical_series(series, inverted)
    raise MalformedSeriesError(None, f"unsupported series type {type(series).__name__}")


def normalize_all(
    raw_series: Mapping[Role, RawSeries],
    inverted_roles: Iterable[Role],
) -> dict[Role, IndicatorResult]:
    """
    Normalize every role.

    Args:
        raw_series: role -> raw series, all five roles expected.
        inverted_roles: roles where a lower raw value scores higher.

    Returns:
        role -> IndicatorResult in Role order.

    Raises:
        MalformedSeriesError: a role is missing or its series is invalid.
    """
    inverted = set(inverted_roles)
    results: dict[Role, IndicatorResult] = {}
    for role in Role:
        if role not in raw_series:
            raise MalformedSeriesError(role, "series not provided")
        results[role] = normalize_series(raw_series[role], role in inverted)
    return results
