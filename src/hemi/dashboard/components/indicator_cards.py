"""
HEMI - Indicator Cards Component

Displays 5 indicator cards in a row: value, latest change, sparkline.
"""

import plotly.graph_objects as go
import streamlit as st

from hemi.explain.generator import INDICATOR_DISPLAY, format_value, trend_direction
from hemi.types import IndicatorResult, Role

TREND_COLORS = {"up": "#34D399", "down": "#F87171", "flat": "#9ca3af"}
TREND_ARROWS = {"up": "▲", "down": "▼", "flat": "■"}


def build_sparkline(result: IndicatorResult, color: str) -> go.Figure:
    """Filled area sparkline of the full history."""
    history = result.history_frame()

    fig = go.Figure(
        go.Scatter(
            x=history["date"],
            y=history["value"],
            mode="lines",
            line=dict(color=color, width=2),
            fill="tozeroy",
            hovertemplate="%{x|%Y-%m-%d}: %{y}<extra></extra>",
        )
    )
    fig.update_layout(
        height=80,
        margin=dict(l=0, r=0, t=0, b=0),
        xaxis=dict(visible=False),
        yaxis=dict(visible=False, range=[history["value"].min(), history["value"].max()])
        if not history.empty
        else dict(visible=False),
        showlegend=False,
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def render_indicator_cards(results: dict[Role, IndicatorResult]) -> None:
    """Render one card per indicator."""
    cols = st.columns(len(Role))

    for col, role in zip(cols, Role):
        result = results[role]
        display = INDICATOR_DISPLAY[role]
        direction = trend_direction(result.recent_change)
        color = TREND_COLORS[direction]

        with col:
            st.markdown(
                f"""
                <div style="border-left: 4px solid {color}; padding: 0.5rem 1rem;">
                    <div style="font-size:0.85rem; color:#9ca3af;"
                         title="{display.description}">{display.title}</div>
                    <div style="font-size:1.4rem; font-weight:bold;">
                        {format_value(result.current_value, display.value_format)}
                    </div>
                    <div style="font-size:0.75rem; color:{color};">
                        {TREND_ARROWS[direction]}
                        {format_value(result.recent_change, display.value_format)}
                    </div>
                    <div style="font-size:0.75rem; color:#6b7280;">
                        Score: {result.score:.1f}
                    </div>
                </div>
                """,
                unsafe_allow_html=True,
            )
            st.plotly_chart(build_sparkline(result, color), use_container_width=True)
