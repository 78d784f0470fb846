"""Plotly figures for the three charts on the page.

Each builder takes the output of the matching function in
:mod:`tracker.aggregations` and returns a ``plotly.graph_objects.Figure``
that Streamlit renders with ``st.plotly_chart``.
"""

from __future__ import annotations

from typing import Mapping, Sequence

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from tracker.domain import BudgetRow

BAR_COLOR = "#8884d8"
SPENT_COLOR = "#82ca9d"
PIE_COLORS = ["#0088FE", "#00C49F", "#FFBB28", "#FF8042", "#FF6666"]


def _empty_figure(height: int) -> go.Figure:
    fig = go.Figure()
    fig.update_layout(title="No data to display", height=height)
    return fig


def monthly_bar_chart(monthly: Mapping[str, float], height: int = 250) -> go.Figure:
    if not monthly:
        return _empty_figure(height)
    df = pd.DataFrame({"month": list(monthly.keys()), "total": list(monthly.values())})
    fig = px.bar(df, x="month", y="total")
    fig.update_traces(marker_color=BAR_COLOR)
    fig.update_layout(height=height, margin=dict(t=30, b=10, l=10, r=10))
    return fig


def category_pie_chart(categories: Mapping[str, float], height: int = 250) -> go.Figure:
    """Pie of spend per category; slice colours cycle through ``PIE_COLORS``."""
    if not categories:
        return _empty_figure(height)
    names = list(categories.keys())
    colors = [PIE_COLORS[i % len(PIE_COLORS)] for i in range(len(names))]
    fig = go.Figure(
        go.Pie(
            labels=names,
            values=list(categories.values()),
            marker=dict(colors=colors),
            textinfo="value",
            sort=False,
        )
    )
    fig.update_layout(height=height, showlegend=True, margin=dict(t=30, b=10, l=10, r=10))
    return fig


def budget_bar_chart(rows: Sequence[BudgetRow], height: int = 250) -> go.Figure:
    if not rows:
        return _empty_figure(height)
    df = pd.DataFrame([row.as_record() for row in rows])
    fig = go.Figure()
    fig.add_trace(go.Bar(x=df["category"], y=df["Budgeted"], name="Budgeted", marker_color=BAR_COLOR))
    fig.add_trace(go.Bar(x=df["category"], y=df["Spent"], name="Spent", marker_color=SPENT_COLOR))
    fig.update_layout(barmode="group", height=height, margin=dict(t=30, b=10, l=10, r=10))
    return fig
