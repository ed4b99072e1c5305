"""
HEMI - Gauge Component

Semicircular gauge showing the composite score and its status band.
"""

import plotly.graph_objects as go
import streamlit as st

from hemi.types import Severity, StatusBand

SEVERITY_COLORS = {
    Severity.CRITICAL: "#F87171",
    Severity.WARNING: "#FBBF24",
    Severity.INFORMATIONAL: "#22D3EE",
    Severity.POSITIVE: "#4ADE80",
}


def build_gauge_figure(score: float, status: StatusBand) -> go.Figure:
    """Plotly gauge for the composite score."""
    color = SEVERITY_COLORS.get(status.severity, "#6b7280")

    fig = go.Figure(
        go.Indicator(
            mode="gauge+number",
            value=round(score, 1),
            number={"suffix": " / 100", "font": {"size": 36}},
            gauge={
                "axis": {"range": [0, 100], "visible": False},
                "bar": {"color": color, "thickness": 0.6},
                "bgcolor": "#374151",
                "steps": [
                    {"range": [0, 25], "color": "#7f1d1d"},
                    {"range": [25, 45], "color": "#78350f"},
                    {"range": [45, 65], "color": "#164e63"},
                    {"range": [65, 100], "color": "#14532d"},
                ],
            },
        )
    )

    fig.update_layout(
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        height=250,
        margin=dict(l=20, r=20, t=30, b=10),
    )
    return fig


def render_hemi_gauge(score: float, status: StatusBand) -> None:
    """Render the gauge and the status label under it."""
    st.markdown("#### Current HEMI Score")
    st.plotly_chart(build_gauge_figure(score, status), use_container_width=True)

    color = SEVERITY_COLORS.get(status.severity, "#6b7280")
    st.markdown(
        f"<h2 style='text-align:center; color:{color};'>{status.label}</h2>",
        unsafe_allow_html=True,
    )
