"""
HEMI - Core Type Definitions

All dataclasses and enums used across the system.
No logic beyond serialization helpers.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

import pandas as pd


class Role(Enum):
    """Semantic role of each of the five indicators."""

    YIELD_CURVE = "yield_curve"
    JOBLESS_CLAIMS = "jobless_claims"
    VOLATILITY_INDEX = "volatility_index"
    EQUITY_INDEX = "equity_index"
    OIL_PRICE = "oil_price"


class DataSource(Enum):
    """Where a cycle gets its raw series from."""

    SAMPLE = "sample"
    LIVE = "live"


class Severity(Enum):
    """Visual severity tag of a status band."""

    CRITICAL = "critical"
    WARNING = "warning"
    INFORMATIONAL = "informational"
    POSITIVE = "positive"


@dataclass(frozen=True)
class ObservationPoint:
    """One observation. value is None where the provider reported missing data."""

    date: str
    value: Optional[float]


@dataclass(frozen=True)
class ObservationSeries:
    """Observation-shape raw series, chronological."""

    role: Role
    points: tuple[ObservationPoint, ...]


@dataclass(frozen=True)
class HistoricalPoint:
    date: str
    close: float


@dataclass(frozen=True)
class HistoricalSeries:
    """Historical-shape raw series, newest first as received."""

    role: Role
    points: tuple[HistoricalPoint, ...]


RawSeries = Union[ObservationSeries, HistoricalSeries]


@dataclass(frozen=True)
class NormalizedPoint:
    date: str
    value: float


@dataclass(frozen=True)
class IndicatorResult:
    """Normalized indicator. All derived fields are 0 when history is too short."""

    current_value: float = 0.0
    recent_change: float = 0.0
    score: float = 0.0
    history: tuple[NormalizedPoint, ...] = ()

    def history_frame(self) -> pd.DataFrame:
        """History as a DataFrame with datetime `date` and float `value` columns."""
        df = pd.DataFrame(
            [{"date": p.date, "value": p.value} for p in self.history],
            columns=["date", "value"],
        )
        df["date"] = pd.to_datetime(df["date"])
        return df

    def to_dict(self) -> dict:
        return {
            "current_value": self.current_value,
            "recent_change": self.recent_change,
            "score": self.score,
            "points": len(self.history),
        }


@dataclass(frozen=True)
class StatusBand:
    label: str
    severity: Severity


@dataclass(frozen=True)
class TrendAgreement:
    """Indicators that agree / disagree with the composite regime."""

    confirming: frozenset[Role] = frozenset()
    contradicting: frozenset[Role] = frozenset()


@dataclass(frozen=True)
class CycleOutcome:
    """Final output of one ingest -> normalize -> aggregate cycle."""

    cycle_id: int
    source: DataSource
    results: dict[Role, IndicatorResult] = field(default_factory=dict)
    composite_index: Optional[float] = None
    status: Optional[StatusBand] = None
    agreement: Optional[TrendAgreement] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        """Serialize to output JSON format."""
        if not self.ok:
            return {
                "cycle_id": self.cycle_id,
                "source": self.source.value,
                "error": self.error,
            }
        return {
            "cycle_id": self.cycle_id,
            "source": self.source.value,
            "composite_index": self.composite_index,
            "status": self.status.label,
            "severity": self.status.severity.value,
            "indicators": {
                role.value: result.to_dict() for role, result in self.results.items()
            },
            "confirming": sorted(r.value for r in self.agreement.confirming),
            "contradicting": sorted(r.value for r in self.agreement.contradicting),
        }

    def to_json(self) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=2)
