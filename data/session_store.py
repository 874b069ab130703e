"""Typed wrapper around st.session_state for dashboard data and selection."""

import logging
from typing import List, Optional

import streamlit as st

from config.defaults import ALL_FLOORS
from data.loader import load_floor_roster, load_building_record
from engine.aggregator import OccupancyAggregator
from engine.errors import LoadError
from engine.floor_registry import FloorRegistry
from models.occupancy import OccupancyAggregate
from models.selection import SelectionState

logger = logging.getLogger(__name__)


def initialize_session_state():
    """Initialize all session state keys with defaults and load the source records once."""
    defaults = {
        "registry": FloorRegistry(),
        "aggregator": OccupancyAggregator(),
        "selection": SelectionState(),
        "building_record": None,
        "load_errors": [],
        "pending_scope": None,
        "data_loaded": False,
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default

    if not st.session_state["data_loaded"]:
        load_sources()


def load_sources():
    """Read both records; a failed record is logged and leaves its previous state."""
    errors = []
    try:
        get_registry().load(load_floor_roster())
    except LoadError as e:
        logger.error("Floor roster not loaded: %s", e)
        errors.append(str(e))

    try:
        st.session_state["building_record"] = load_building_record()
    except LoadError as e:
        logger.error("Building record not loaded: %s", e)
        errors.append(str(e))

    st.session_state["load_errors"] = errors
    st.session_state["data_loaded"] = True


# --- Getters ---

def get_registry() -> FloorRegistry:
    return st.session_state["registry"]


def get_selection() -> SelectionState:
    return st.session_state["selection"]


def get_load_errors() -> List[str]:
    errors = list(st.session_state.get("load_errors", []))
    agg_error = st.session_state["aggregator"].last_error
    if agg_error and agg_error not in errors:
        errors.append(agg_error)
    return errors


def get_aggregate(scope: Optional[str] = ALL_FLOORS) -> OccupancyAggregate:
    """Re-run aggregation for ``scope`` over the stored building record."""
    aggregator: OccupancyAggregator = st.session_state["aggregator"]
    record = st.session_state.get("building_record")
    if record is None:
        return aggregator.current
    return aggregator.refresh(record, scope)


# --- Drill-down ---

def request_drill_down(floor_name: Optional[str]):
    """Queue a scope change from a chart click; applied before widgets render on the next run."""
    st.session_state["pending_scope"] = floor_name
    st.rerun()


def apply_pending_selection(picker_key: str):
    pending = st.session_state.get("pending_scope")
    if pending is None:
        return
    st.session_state["pending_scope"] = None
    get_selection().select(pending)
    st.session_state[picker_key] = pending
