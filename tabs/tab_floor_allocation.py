"""Tab 1: Floor Allocation — occupancy chart, area tiles and the company panel."""

import streamlit as st

from data.session_store import get_aggregate, get_registry, request_drill_down
from engine import chart_builder, directory
from components.charts import chart_figure, selected_point_index
from components.directory_panel import render_directory
from components.metrics_cards import render_metric_row, summary_tiles, tiles_caption


def render(selection):
    """Render the Floor Allocation tab for a selection snapshot."""
    registry = get_registry()
    agg = get_aggregate(selection.scope)

    col1, col2 = st.columns([7, 3])

    with col1:
        model = chart_builder.build(agg, selection, registry.names)
        fig = chart_figure(model)
        if model.drill_down:
            event = st.plotly_chart(
                fig,
                use_container_width=True,
                on_select="rerun",
                selection_mode="points",
                key=f"chart_{selection.chart_mode}_{selection.scope}",
            )
            index = selected_point_index(event)
            if index is not None:
                if chart_builder.chart_click(selection, model, index):
                    request_drill_down(selection.scope)
        else:
            st.plotly_chart(fig, use_container_width=True)

        st.caption(tiles_caption(agg.building_stats))
        render_metric_row(summary_tiles(agg.building_stats))

    with col2:
        render_directory(directory.view(agg, selection, registry), registry)
