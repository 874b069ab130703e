"""Company directory panel model: reserved notice, one floor, or grouped by floor."""

from config.defaults import (
    RESERVED_NOTICE, RESERVED_TOOLTIP_DETAIL, NO_COMPANIES_TEXT,
    ALL_COMPANIES_TITLE, FLOOR_COMPANIES_TEMPLATE,
)
from engine.floor_registry import FloorRegistry
from models.directory import (
    DIRECTORY_FLOOR, DIRECTORY_GROUPED, DIRECTORY_RESERVED,
    CompanyLine, DirectoryModel, FloorGroup,
)
from models.occupancy import OccupancyAggregate
from models.selection import SelectionState


def _company_lines(agg: OccupancyAggregate, floor_name: str):
    return tuple(
        CompanyLine(c.name, c.occupied_pct, c.occupied_area)
        for c in agg.companies_on(floor_name)
    )


def view(agg: OccupancyAggregate, selection: SelectionState, registry: FloorRegistry) -> DirectoryModel:
    floor_name = selection.selected_floor

    if floor_name is not None:
        title = FLOOR_COMPANIES_TEMPLATE.format(floor=floor_name)
        if agg.is_blocked(floor_name):
            return DirectoryModel(
                kind=DIRECTORY_RESERVED, title=title, floor_name=floor_name, notice=RESERVED_NOTICE,
            )
        companies = _company_lines(agg, floor_name)
        return DirectoryModel(
            kind=DIRECTORY_FLOOR,
            title=title,
            floor_name=floor_name,
            notice=None if companies else NO_COMPANIES_TEXT,
            companies=companies,
        )

    groups = []
    for name in registry.names:
        groups.append(FloorGroup(
            floor_name=name,
            is_blocked=agg.is_blocked(name),
            is_expanded=registry.is_expanded(name),
            companies=_company_lines(agg, name),
        ))
    return DirectoryModel(kind=DIRECTORY_GROUPED, title=ALL_COMPANIES_TITLE, groups=tuple(groups))


def group_notice(group: FloorGroup):
    """Text shown in place of companies for an expanded group, if any."""
    if group.is_blocked:
        return RESERVED_TOOLTIP_DETAIL
    if group.is_empty:
        return NO_COMPANIES_TEXT
    return None
