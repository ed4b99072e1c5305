"""
HEMI - Explanation Generator

Produces the narrative summary and display formatting consumed by
the dashboard. Factual statements about scores only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from hemi.types import IndicatorResult, Role, TrendAgreement


@dataclass(frozen=True)
class IndicatorDisplay:
    title: str
    short_title: str
    value_format: str  # "percent" | "number" | "currency"
    description: str


INDICATOR_DISPLAY: dict[Role, IndicatorDisplay] = {
    Role.YIELD_CURVE: IndicatorDisplay(
        "Yield Curve (10Y-2Y)",
        "Yield Curve",
        "percent",
        "Difference between 10-year and 2-year Treasury yields. A positive curve "
        "signals expansion; an inverted curve is a recession predictor.",
    ),
    Role.JOBLESS_CLAIMS: IndicatorDisplay(
        "Initial Jobless Claims",
        "Jobless Claims",
        "number",
        "New unemployment filings. Rising claims suggest a weakening labor market. "
        "Lower is better.",
    ),
    Role.VOLATILITY_INDEX: IndicatorDisplay(
        "VIX (Volatility Index)",
        "VIX",
        "number",
        "The market's 'fear gauge.' High VIX indicates investor fear. Lower is better.",
    ),
    Role.EQUITY_INDEX: IndicatorDisplay(
        "S&P 500 Index",
        "S&P 500",
        "currency",
        "Tracks 500 large U.S. companies. A rising market reflects investor "
        "confidence. Higher is better.",
    ),
    Role.OIL_PRICE: IndicatorDisplay(
        "WTI Crude Oil Price",
        "WTI Oil",
        "currency",
        "Price of West Texas Intermediate crude oil. Signals demand but also "
        "inflation risk.",
    ),
}


@dataclass(frozen=True)
class Summary:
    headline: str
    confirming: list[str]
    contradicting: list[str]


def format_value(value: object, fmt: str) -> str:
    """Render a value the way indicator cards show it."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return "N/A"
    if fmt == "currency":
        sign = "-" if value < 0 else ""
        return f"{sign}${abs(value):,.2f}"
    if fmt == "percent":
        return f"{value:.2f}%"
    if fmt == "number":
        if float(value).is_integer():
            return f"{int(value):,}"
        return f"{value:,.2f}".rstrip("0").rstrip(".")
    return str(value)


def trend_direction(recent_change: float) -> str:
    """'up', 'down' or 'flat' for the latest delta."""
    if recent_change > 0:
        return "up"
    if recent_change < 0:
        return "down"
    return "flat"


def generate_summary(
    composite_index: float,
    results: Mapping[Role, IndicatorResult],
    agreement: TrendAgreement,
) -> Summary:
    """
    Generate the dynamic economic summary.

    Args:
        composite_index: HEMI score.
        results: role -> IndicatorResult.
        agreement: Confirming / contradicting role sets.

    Returns:
        Summary with headline and one line per indicator, in role order.
    """
    confirming: list[str] = []
    contradicting: list[str] = []

    for role in Role:
        if role not in results:
            continue
        line = f"{INDICATOR_DISPLAY[role].short_title} (Score: {results[role].score:.1f})"
        if role in agreement.confirming:
            confirming.append(line)
        elif role in agreement.contradicting:
            contradicting.append(line)

    return Summary(
        headline=f"Analysis based on the current HEMI score of {composite_index:.1f}.",
        confirming=confirming,
        contradicting=contradicting,
    )
