"""
Plotly figure builders for the dashboard charts.

Pure functions: the same series and title always give an equal figure.
Where a figure ends up is decided by the caller.
"""

import plotly.graph_objects as go

from .config import (
    BAR_COLOR,
    BAR_LINE_COLOR,
    PIE_COLORS,
    PIE_HOLE,
    TITLE_FONT,
    TRANSPARENT,
)
from .formatting import format_currency


def build_bar_chart(series: dict, title: str) -> go.Figure:
    """Vertical bar chart, each bar labelled with its currency value."""
    values = series["values"]

    fig = go.Figure(go.Bar(
        x=series["labels"],
        y=values,
        marker=dict(color=BAR_COLOR, line=dict(color=BAR_LINE_COLOR, width=1)),
        text=[format_currency(v) for v in values],
        textposition="auto",
    ))
    fig.update_layout(
        title=dict(text=title, font=TITLE_FONT),
        xaxis=dict(title="", tickangle=-45, automargin=True),
        yaxis=dict(title="Valor (R$)", tickformat=",.0f"),
        plot_bgcolor=TRANSPARENT,
        paper_bgcolor=TRANSPARENT,
        margin=dict(l=60, r=30, t=50, b=100),
    )
    return fig


def build_pie_chart(series: dict, title: str, hole: float = PIE_HOLE) -> go.Figure:
    """Donut chart: slice labels show name and percentage, hover shows the value."""
    values = series["values"]
    colors = [PIE_COLORS[i % len(PIE_COLORS)] for i in range(len(values))]

    fig = go.Figure(go.Pie(
        labels=series["labels"],
        values=values,
        hole=hole,
        marker=dict(colors=colors),
        text=[format_currency(v) for v in values],
        textinfo="label+percent",
        textposition="outside",
        hovertemplate="<b>%{label}</b><br>Valor: %{text}<extra></extra>",
    ))
    fig.update_layout(
        title=dict(text=title, font=TITLE_FONT),
        plot_bgcolor=TRANSPARENT,
        paper_bgcolor=TRANSPARENT,
        margin=dict(l=30, r=30, t=50, b=30),
    )
    return fig


CHART_BUILDERS = {
    "bar": build_bar_chart,
    "pie": build_pie_chart,
}
