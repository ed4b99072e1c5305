"""
HEMI - Configuration & Constants

Single source of truth for weights, thresholds and data sources.
All values are named, documented, and centralized.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from hemi.types import Role

load_dotenv()


@dataclass(frozen=True)
class IndicatorWeights:
    """Composite weights. Must sum to 1.0."""

    yield_curve: float = 0.30
    jobless_claims: float = 0.25
    equity_index: float = 0.20
    volatility_index: float = 0.15
    oil_price: float = 0.10

    def as_mapping(self) -> dict[Role, float]:
        return {role: getattr(self, role.value) for role in Role}


@dataclass(frozen=True)
class StatusThresholds:
    """Upper bounds (exclusive) of the composite status bands."""

    recession_below: float = 25.0
    slowdown_below: float = 45.0
    moderate_below: float = 65.0
    expansion_regime_from: float = 45.0  # composite >= 45 is expansionary
    neutral_score: float = 50.0  # per-indicator direction pivot


@dataclass(frozen=True)
class SampleConfig:
    """Synthetic sample series parameters."""

    days: int = 90
    # (previous, latest) literals written over the last two days
    fixed_tail: dict[Role, tuple[float, float]] = field(
        default_factory=lambda: {
            Role.YIELD_CURVE: (0.43, 0.45),
            Role.JOBLESS_CLAIMS: (233000.0, 242000.0),
            Role.VOLATILITY_INDEX: (18.3, 19.8),
            Role.EQUITY_INDEX: (5525.60, 5510.40),
            Role.OIL_PRICE: (84.75, 85.50),
        }
    )


@dataclass(frozen=True)
class LiveSourceConfig:
    """Upstream providers for live mode. Keys come from the environment."""

    fred_base_url: str = "https://api.stlouisfed.org/fred/series/observations"
    fmp_base_url: str = "https://financialmodelingprep.com/api/v3/historical-price-full"
    fred_series: dict[Role, str] = field(
        default_factory=lambda: {
            Role.YIELD_CURVE: "T10Y2Y",
            Role.JOBLESS_CLAIMS: "ICSA",
            Role.VOLATILITY_INDEX: "VIXCLS",
        }
    )
    fmp_symbols: dict[Role, str] = field(
        default_factory=lambda: {
            Role.EQUITY_INDEX: "^GSPC",
            Role.OIL_PRICE: "CLUSD",
        }
    )
    lookback_years: int = 5
    timeout_seconds: float = 30.0
    # Optional CORS bypass prefix, e.g. "https://api.allorigins.win/raw?url="
    proxy_url: str = field(default_factory=lambda: os.getenv("HEMI_PROXY_URL", ""))
    fred_api_key: str = field(default_factory=lambda: os.getenv("FRED_API_KEY", ""))
    fmp_api_key: str = field(default_factory=lambda: os.getenv("FMP_API_KEY", ""))


@dataclass(frozen=True)
class HemiConfig:
    """Master configuration for HEMI."""

    weights: IndicatorWeights = field(default_factory=IndicatorWeights)
    status: StatusThresholds = field(default_factory=StatusThresholds)
    sample: SampleConfig = field(default_factory=SampleConfig)
    live: LiveSourceConfig = field(default_factory=LiveSourceConfig)
    # Lower raw value is economically favorable for these
    inverted_roles: frozenset[Role] = frozenset(
        {Role.JOBLESS_CLAIMS, Role.VOLATILITY_INDEX}
    )
