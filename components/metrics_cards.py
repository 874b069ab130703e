"""Summary area tiles and load warnings."""

import streamlit as st

from config.defaults import AREA_UNIT
from models.occupancy import ScopedStats


def format_area(value) -> str:
    return f"{value:,} {AREA_UNIT}"


def tiles_caption(scoped: ScopedStats) -> str:
    if scoped.is_floor:
        return f"Area totals for {scoped.floor_name}"
    return "Area totals for the whole building"


def summary_tiles(scoped: ScopedStats) -> list[dict]:
    """The three area tiles for the whole building or the selected floor."""
    stats = scoped.stats
    return [
        {"label": "Total Rentable Area", "value": format_area(stats.total_area)},
        {"label": "Total Occupied Area", "value": format_area(stats.occupied_area)},
        {"label": "Remaining Area", "value": format_area(stats.remaining_area)},
    ]


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards. Each metric dict has a label and a value."""
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            st.metric(label=m["label"], value=m["value"])


def render_load_warnings(errors: list[str]):
    """One warning per source record that failed to load; the dashboard shows what it has."""
    for error in errors:
        st.warning(f"Data not loaded: {error}", icon="⚠️")
