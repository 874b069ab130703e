"""Global sidebar controls for floor scope and chart mode."""

import streamlit as st
from typing import Optional

from config.defaults import ALL_FLOORS, ALL_FLOORS_LABEL, CHART_MODES, RESERVED_LABEL
from data.session_store import get_registry, get_selection, apply_pending_selection
from models.occupancy import OccupancyAggregate
from models.selection import SelectionState

FLOOR_PICKER_KEY = "sidebar_floor"
MODE_PICKER_KEY = "sidebar_chart_mode"


def floor_option_label(option: Optional[str], agg: OccupancyAggregate) -> str:
    if option is ALL_FLOORS:
        return ALL_FLOORS_LABEL
    if agg.is_blocked(option):
        return f"{option} ({RESERVED_LABEL})"
    return option


def render_sidebar(agg: OccupancyAggregate) -> SelectionState:
    """Render the floor and chart mode pickers and return a snapshot of the selection."""
    selection = get_selection()
    apply_pending_selection(FLOOR_PICKER_KEY)

    with st.sidebar:
        st.title("Floor Allocation")
        st.divider()

        options = [ALL_FLOORS] + get_registry().names
        floor = st.selectbox(
            "Floor",
            options=options,
            format_func=lambda x: floor_option_label(x, agg),
            key=FLOOR_PICKER_KEY,
        )
        selection.select(floor)

        mode = st.selectbox(
            "Chart Type",
            options=CHART_MODES,
            format_func=lambda x: x.capitalize(),
            key=MODE_PICKER_KEY,
        )
        selection.set_mode(mode)

        st.divider()
        blocked = [name for name in get_registry().names if agg.is_blocked(name)]
        if blocked:
            st.caption(f"Reserved floors: {', '.join(blocked)}")

    return selection.snapshot()
