"""
HEMI - Static Info Panels

Expert opinion cards and the methodology section.
"""

import streamlit as st

from hemi.config import IndicatorWeights

EXPERT_OPINIONS = [
    (
        "Dr. Anya Sharma",
        "Chief Market Strategist, Global Macro Insights",
        "Cautiously Optimistic",
        "blue",
        "The HEMI score accurately captures the current 'crosstalk' in the data. "
        "While the labor market's softening warrants close attention, it's more of a "
        "normalization than a collapse. The positive yield curve is the most important "
        "long-term signal, pointing toward continued, albeit slower, growth.",
    ),
    (
        "James Chen",
        "Portfolio Manager, Penrose Capital",
        "Bearish / Defensive",
        "orange",
        "I see the dashboard as a flashing yellow light. The VIX is telling you that "
        "smart money is hedging, and the jobless claims are the 'canary in the coal "
        "mine.' The divergence between the S&P 500 and the real economy is "
        "unsustainable. We are positioned for a market correction.",
    ),
    (
        "Dr. Kenji Tanaka",
        "Economist, Center for Economic Policy",
        "Neutral / Data-Dependent",
        "gray",
        "The HEMI score is in an ambiguous zone. The key variable is WTI Crude Oil. "
        "If energy prices continue to rise, it could reignite inflation and force "
        "central banks to maintain a restrictive policy, tipping the scales towards "
        "a slowdown. The next few weeks of data will be critical.",
    ),
]


def render_expert_opinions() -> None:
    st.markdown("### Expert Opinions & Forecasts")
    cols = st.columns(len(EXPERT_OPINIONS))
    for col, (name, title, opinion, color, forecast) in zip(cols, EXPERT_OPINIONS):
        with col:
            st.markdown(f"**{name}**")
            st.caption(title)
            st.markdown(f":{color}[{opinion}]")
            st.write(forecast)


def render_methodology(weights: IndicatorWeights) -> None:
    with st.expander("HEMI Methodology & Data Sources"):
        st.markdown(
            """
            **Calculation Methodology**

            The HEMI score is a weighted average of its five core components.
            For each indicator, the latest data point is normalized into a score
            from 0 to 100 by calculating its percentile rank within its own
            history. For indicators where a lower value is better (Jobless
            Claims, VIX), the percentile rank is inverted (100 - percentile).
            """
        )
        st.code(
            f"HEMI = (YieldCurve_Score * {weights.yield_curve:.2f}) "
            f"+ (JoblessClaims_Score * {weights.jobless_claims:.2f}) "
            f"+ (SP500_Score * {weights.equity_index:.2f}) "
            f"+ (VIX_Score * {weights.volatility_index:.2f}) "
            f"+ (Oil_Score * {weights.oil_price:.2f})",
            language=None,
        )
        st.markdown(
            """
            **Data Sources**
            - Yield Curve, Jobless Claims, VIX:
              [St. Louis Federal Reserve (FRED)](https://fred.stlouisfed.org/)
            - S&P 500, WTI Crude Oil:
              [Financial Modeling Prep (FMP)](https://site.financialmodelingprep.com/)
            """
        )
