"""Plotly rendering of chart display models for the Floor Allocation Dashboard."""

import plotly.graph_objects as go
from typing import List, Optional

from config.defaults import CHART_DOUGHNUT, CHART_HEIGHT, DOUGHNUT_HOLE
from models.chart import ChartDisplayModel


def hover_texts(model: ChartDisplayModel, dataset_index: int) -> List[str]:
    """One hover string per data point, resolved through the model's tooltip lookup."""
    return [
        "<br>".join(model.tooltip(dataset_index, i))
        for i in range(len(model.labels))
    ]


def doughnut_figure(model: ChartDisplayModel) -> go.Figure:
    dataset = model.datasets[0]
    fig = go.Figure(data=[go.Pie(
        labels=list(model.labels),
        values=list(dataset.data),
        hole=DOUGHNUT_HOLE,
        sort=False,
        marker=dict(colors=list(dataset.background_colors),
                    line=dict(color=list(dataset.border_colors), width=1)),
        textinfo="percent+label",
        hovertext=hover_texts(model, 0),
        hovertemplate="%{hovertext}<extra></extra>",
    )])
    fig.update_layout(title=model.title, height=CHART_HEIGHT, showlegend=True)
    return fig


def bar_figure(model: ChartDisplayModel) -> go.Figure:
    fig = go.Figure()
    for i, dataset in enumerate(model.datasets):
        fig.add_trace(go.Bar(
            name=dataset.label,
            x=list(model.labels),
            y=list(dataset.data),
            marker_color=list(dataset.background_colors),
            marker_line_color=list(dataset.border_colors),
            marker_line_width=1,
            hovertext=hover_texts(model, i),
            hovertemplate="%{hovertext}<extra></extra>",
        ))

    fig.update_layout(
        barmode="stack" if model.stacked else "group",
        title=model.title,
        xaxis_title=model.x_axis_title,
        yaxis_title="Occupancy (%)" if model.stacked else None,
        xaxis_type="category",
        yaxis=dict(range=[0, 100], ticksuffix="%"),
        height=CHART_HEIGHT,
        legend_title_text="",
    )
    return fig


def chart_figure(model: ChartDisplayModel) -> go.Figure:
    if model.mode == CHART_DOUGHNUT:
        return doughnut_figure(model)
    return bar_figure(model)


def selected_point_index(event) -> Optional[int]:
    """Index of the first clicked point in a plotly selection event, if any."""
    if not event:
        return None
    points = (event.get("selection") or {}).get("points") or []
    if not points:
        return None
    index = points[0].get("point_index", points[0].get("point_number"))
    return int(index) if index is not None else None
