"""
HEMI Streamlit Dashboard.

Run with: streamlit run src/hemi/dashboard/app.py
"""

import sys
from pathlib import Path

# Ensure hemi is importable when run via `streamlit run`
_SRC_DIR = str(Path(__file__).resolve().parents[2])
if _SRC_DIR not in sys.path:
    sys.path.insert(0, _SRC_DIR)

import asyncio
import logging

import streamlit as st

from hemi.dashboard.components.hemi_gauge import render_hemi_gauge
from hemi.dashboard.components.indicator_cards import render_indicator_cards
from hemi.dashboard.components.info_panels import render_expert_opinions, render_methodology
from hemi.dashboard.components.summary_panel import render_summary_panel
from hemi.explain.generator import generate_summary
from hemi.pipeline.cycle import DashboardPipeline, OutcomeStore, run_cycle
from hemi.types import DataSource


def _state() -> tuple[DashboardPipeline, OutcomeStore]:
    if "hemi_store" not in st.session_state:
        st.session_state.hemi_store = OutcomeStore()
        st.session_state.hemi_pipeline = DashboardPipeline()
        st.session_state.hemi_source = None
    return st.session_state.hemi_pipeline, st.session_state.hemi_store


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    st.set_page_config(
        page_title="HEMI",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    st.title("High-Frequency Economic Momentum Index (HEMI)")

    pipeline, store = _state()

    # Sidebar
    with st.sidebar:
        st.header("Data Source")
        use_live = st.toggle("Live data", value=False)
        source = DataSource.LIVE if use_live else DataSource.SAMPLE
        st.markdown("**Live Data**" if use_live else "**Sample Data**")
        refresh = st.button("Reload")

        st.divider()
        st.markdown(
            """
            **Live sources:**
            - FRED: T10Y2Y, ICSA, VIXCLS
            - FMP: ^GSPC, CLUSD

            Set `FRED_API_KEY` and `FMP_API_KEY` in the environment or `.env`.
            """
        )

    # A toggle or reload starts a fresh cycle and supersedes the previous one
    if refresh or store.current is None or st.session_state.hemi_source != source:
        st.session_state.hemi_source = source
        with st.spinner("Loading data..."):
            asyncio.run(run_cycle(pipeline, store, source))

    outcome = store.current

    if not outcome.ok:
        st.error(f"**Data Fetching Error**\n\n{outcome.error}")
        return

    # Row 1: Gauge + Summary
    col1, col2 = st.columns([1, 2])
    with col1:
        render_hemi_gauge(outcome.composite_index, outcome.status)
    with col2:
        render_summary_panel(
            generate_summary(outcome.composite_index, outcome.results, outcome.agreement)
        )

    # Row 2: Indicator cards
    st.markdown("### Core Economic Indicators")
    render_indicator_cards(outcome.results)

    # Row 3: Static panels
    render_expert_opinions()
    render_methodology(pipeline.config.weights)

    with st.expander("Raw Output"):
        st.json(outcome.to_dict())


if __name__ == "__main__":
    main()
