"""
HEMI - Summary Panel Component

Displays the dynamic economic summary: confirming and contradicting indicators.
"""

import streamlit as st

from hemi.explain.generator import Summary


def render_summary_panel(summary: Summary) -> None:
    """Render headline plus the two indicator lists side by side."""
    st.markdown("### Dynamic Economic Summary")
    st.caption(summary.headline)

    col1, col2 = st.columns(2)
    with col1:
        st.markdown("**Confirming Data (Supporting Trend)**")
        for line in summary.confirming:
            st.markdown(f"- :green[{line}]")
    with col2:
        st.markdown("**Contradicting Data (Counter-Signals)**")
        for line in summary.contradicting:
            st.markdown(f"- :orange[{line}]")
