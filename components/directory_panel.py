"""Company directory side panel."""

import streamlit as st

from config.defaults import RESERVED_LABEL, RESERVED_TITLE
from engine.directory import group_notice
from engine.floor_registry import FloorRegistry
from models.directory import DIRECTORY_GROUPED, DIRECTORY_RESERVED, CompanyLine, DirectoryModel


def render_company(company: CompanyLine):
    name_col, pct_col = st.columns([3, 1])
    name_col.markdown(f"**{company.name}**")
    pct_col.markdown(f"`{company.percentage_text}`")
    st.caption(company.area_text)


def render_directory(model: DirectoryModel, registry: FloorRegistry):
    st.subheader(model.title)

    if model.kind == DIRECTORY_RESERVED:
        st.info(f"**{RESERVED_TITLE}**\n\n{model.notice}")
        return

    if model.kind != DIRECTORY_GROUPED:
        if model.notice:
            st.caption(f"_{model.notice}_")
        for company in model.companies:
            render_company(company)
        return

    for group in model.groups:
        arrow = "▾" if group.is_expanded else "▸"
        label = f"{arrow} {group.floor_name}"
        if group.is_blocked:
            label += f"  ·  {RESERVED_LABEL}"
        st.button(
            label,
            key=f"directory_toggle_{group.floor_name}",
            on_click=registry.toggle,
            args=(group.floor_name,),
            use_container_width=True,
        )
        if not group.is_expanded:
            continue
        notice = group_notice(group)
        if notice:
            st.caption(f"_{notice}_")
        for company in group.visible_companies:
            render_company(company)
