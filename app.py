"""Floor Allocation Dashboard — Streamlit entry point."""

import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from components.metrics_cards import render_load_warnings
from components.sidebar import render_sidebar
from config.defaults import ALL_FLOORS
from config.logging_config import configure_logging
from data.session_store import initialize_session_state, get_aggregate, get_load_errors
from tabs import tab_floor_allocation, tab_floor_detail


def main():
    configure_logging()
    st.set_page_config(
        page_title="Floor Allocation Dashboard",
        page_icon="🏢",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    initialize_session_state()
    selection = render_sidebar(get_aggregate(ALL_FLOORS))

    st.title("Floor Allocation Dashboard")
    render_load_warnings(get_load_errors())

    tab1, tab2 = st.tabs([
        "📊 Floor Allocation",
        "📋 Floor Detail",
    ])

    with tab1:
        tab_floor_allocation.render(selection)
    with tab2:
        tab_floor_detail.render(selection)


if __name__ == "__main__":
    main()
