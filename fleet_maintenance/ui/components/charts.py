"""
Plotly chart factory functions with consistent styling for the dashboard.
"""

from __future__ import annotations

from typing import Dict, List, Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

DEFAULT_TEMPLATE = "plotly_white"
PRIMARY_COLOR = "#1976d2"
STATUS_COLORS = {
    "Open": "#1976d2",
    "In Progress": "#0288d1",
    "Completed": "#2e7d32",
    "Cancelled": "#9e9e9e",
}


def _configure_layout(
    fig: go.Figure,
    title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
    height: int = 360,
) -> go.Figure:
    fig.update_layout(
        template=DEFAULT_TEMPLATE,
        title=title,
        height=height,
        showlegend=False,
        margin=dict(l=40, r=20, t=60, b=40),
    )
    if yaxis_title:
        fig.update_yaxes(title=yaxis_title)
    fig.update_xaxes(showgrid=False)
    fig.update_yaxes(showgrid=True, zeroline=True, rangemode="tozero", dtick=1)
    return fig


def render_plotly(fig: go.Figure) -> None:
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})


def bar_chart(
    df: pd.DataFrame,
    x: str,
    y: str,
    title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
    color_map: Optional[Dict[str, str]] = None,
    category_orders: Optional[Dict[str, List[str]]] = None,
) -> go.Figure:
    fig = px.bar(
        df,
        x=x,
        y=y,
        color=x if color_map else None,
        color_discrete_map=color_map or {},
        category_orders=category_orders,
        text_auto=True,
    )
    if not color_map:
        fig.update_traces(marker_color=PRIMARY_COLOR)
    return _configure_layout(fig, title, yaxis_title)


def jobs_by_status_chart(histogram: pd.DataFrame) -> go.Figure:
    # Bars follow first-seen status order; unknown statuses fall back to the primary color
    colors = {status: STATUS_COLORS.get(status, PRIMARY_COLOR) for status in histogram["status"]}
    return bar_chart(
        histogram,
        x="status",
        y="count",
        title="Jobs by Status",
        yaxis_title="Jobs",
        color_map=colors,
        category_orders={"status": list(histogram["status"])},
    )
