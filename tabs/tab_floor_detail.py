"""Tab 2: Floor Detail — per-floor totals and the company index as tables."""

import streamlit as st

from data.session_store import get_aggregate, get_registry
from engine.aggregator import floor_stats_frame, company_index_frame
from components.tables import render_floor_table, render_styled_table
from config.defaults import ALL_FLOORS


def render(selection):
    """Render the Floor Detail tab."""
    st.header("Floor Detail")

    agg = get_aggregate(ALL_FLOORS)
    if not agg.floor_stats:
        st.info("No occupancy data loaded.")
        return

    render_floor_table(floor_stats_frame(agg, get_registry().names))

    st.divider()

    companies = company_index_frame(agg)
    if selection.selected_floor:
        companies = companies[companies["Floor"] == selection.selected_floor]
    render_styled_table(companies, title="Company Index")
