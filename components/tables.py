"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd
from typing import Optional


def render_styled_table(
    df: pd.DataFrame,
    title: Optional[str] = None,
    height: Optional[int] = None,
    use_container_width: bool = True,
):
    """Render a styled, non-editable dataframe."""
    if title:
        st.subheader(title)
    st.dataframe(df, height=height, use_container_width=use_container_width, hide_index=True)


def status_style(val) -> str:
    if val == "Reserved":
        return "background-color: #e0e0e0; color: #555555; font-weight: bold"
    elif val == "Available":
        return "background-color: #d4edda; color: #155724; font-weight: bold"
    return ""


def render_floor_table(df: pd.DataFrame, status_column: str = "Status"):
    """Render the floor stats table with reserved floors greyed out."""
    if status_column in df.columns:
        styled = df.style.map(status_style, subset=[status_column])
        st.dataframe(styled, use_container_width=True, hide_index=True)
    else:
        st.dataframe(df, use_container_width=True, hide_index=True)
