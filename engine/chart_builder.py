"""Chart display models for the distributed, bar and doughnut views."""

from typing import List, Optional

from config.defaults import (
    CHART_BAR, CHART_DOUGHNUT,
    BUILDING_TITLE, FLOOR_TITLE_TEMPLATE, RESERVED_TITLE,
    OCCUPIED_LABEL, REMAINING_LABEL, RESERVED_LABEL, RESERVED_SERIES_LABEL,
    OCCUPIED_SERIES_LABEL, REMAINING_SERIES_LABEL, BAR_SERIES_LABEL,
    FLOORS_AXIS_TITLE, BUILDING_TARGET_NAME,
    COLOR_OCCUPIED, COLOR_REMAINING, COLOR_RESERVED,
    COLOR_RESERVED_SOLID, COLOR_RESERVED_BORDER,
)
from models.chart import TARGET_BUILDING, ChartDisplayModel, Dataset, DisplayRow
from models.occupancy import FloorRecord, OccupancyAggregate
from models.selection import SelectionState


def resolve_display_row(floor: Optional[FloorRecord], name: str) -> DisplayRow:
    """Percentages to draw for a floor. Blocked floors are always 100% reserved.

    A floor missing from the occupancy record draws as fully remaining.
    """
    if floor is not None and floor.is_blocked:
        return DisplayRow(name, occupied_pct=0, reserved_pct=100, remaining_pct=0, is_blocked=True)
    occupied = floor.occupied_pct if floor is not None else 0
    return DisplayRow(name, occupied_pct=occupied, reserved_pct=0, remaining_pct=100 - occupied)


def _display_rows(agg: OccupancyAggregate, selection: SelectionState, roster: List[str]) -> List[DisplayRow]:
    if selection.is_all_floors:
        names = roster
    else:
        names = [selection.scope]
    return [resolve_display_row(agg.find_floor(name), name) for name in names]


def _scoped_row(agg: OccupancyAggregate, selection: SelectionState) -> DisplayRow:
    """Row for the whole building or the selected floor, using the scoped stats."""
    floor_name = selection.selected_floor
    if floor_name is None:
        stats = agg.building_totals
        return DisplayRow(BUILDING_TARGET_NAME, stats.occupied_pct, 0, stats.remaining_pct,
                          kind=TARGET_BUILDING)

    floor = agg.find_floor(floor_name)
    if floor is not None and floor.is_blocked:
        return resolve_display_row(floor, floor_name)
    # Unknown floors fall back to the building totals
    stats = floor.stats() if floor is not None else agg.building_totals
    return DisplayRow(floor_name, stats.occupied_pct, 0, stats.remaining_pct)


def chart_title(agg: OccupancyAggregate, selection: SelectionState) -> str:
    floor = selection.selected_floor
    if floor is None:
        return BUILDING_TITLE
    if agg.is_blocked(floor):
        return RESERVED_TITLE
    return FLOOR_TITLE_TEMPLATE.format(floor=floor)


def _reserved_only(selection: SelectionState, row: DisplayRow, title: str) -> ChartDisplayModel:
    return ChartDisplayModel(
        mode=selection.chart_mode,
        title=title,
        labels=(RESERVED_LABEL,),
        datasets=(Dataset(
            label=BAR_SERIES_LABEL,
            data=(row.reserved_pct,),
            background_colors=(COLOR_RESERVED_SOLID,),
            border_colors=(COLOR_RESERVED_BORDER,),
        ),),
        targets=(row,),
    )


def build_distributed(agg: OccupancyAggregate, selection: SelectionState, roster: List[str]) -> ChartDisplayModel:
    rows = _display_rows(agg, selection, roster)
    n = len(rows)

    def series(label, values, color):
        return Dataset(label, tuple(values), (color,) * n, (color,) * n)

    return ChartDisplayModel(
        mode=selection.chart_mode,
        title=chart_title(agg, selection),
        labels=tuple(r.name for r in rows),
        datasets=(
            series(OCCUPIED_SERIES_LABEL, [r.occupied_pct for r in rows], COLOR_OCCUPIED),
            series(RESERVED_SERIES_LABEL, [r.reserved_pct for r in rows], COLOR_RESERVED),
            series(REMAINING_SERIES_LABEL, [r.remaining_pct for r in rows], COLOR_REMAINING),
        ),
        targets=tuple(rows),
        stacked=True,
        drill_down=True,
        x_axis_title=FLOORS_AXIS_TITLE if selection.is_all_floors else None,
    )


def build_bar(agg: OccupancyAggregate, selection: SelectionState, roster: List[str]) -> ChartDisplayModel:
    title = chart_title(agg, selection)

    if selection.is_all_floors:
        rows = _display_rows(agg, selection, roster)
        colors = tuple(COLOR_RESERVED if r.is_blocked else COLOR_OCCUPIED for r in rows)
        return ChartDisplayModel(
            mode=selection.chart_mode,
            title=title,
            labels=tuple(r.name for r in rows),
            datasets=(Dataset(
                label=BAR_SERIES_LABEL,
                data=tuple(r.reserved_pct if r.is_blocked else r.occupied_pct for r in rows),
                background_colors=colors,
                border_colors=colors,
            ),),
            targets=tuple(rows),
            drill_down=True,
        )

    row = _scoped_row(agg, selection)
    if row.is_blocked:
        return _reserved_only(selection, row, title)
    colors = (COLOR_OCCUPIED, COLOR_REMAINING)
    return ChartDisplayModel(
        mode=selection.chart_mode,
        title=title,
        labels=(OCCUPIED_LABEL, REMAINING_LABEL),
        datasets=(Dataset(
            label=BAR_SERIES_LABEL,
            data=(row.occupied_pct, row.remaining_pct),
            background_colors=colors,
            border_colors=colors,
        ),),
        targets=(row, row),
    )


def build_doughnut(agg: OccupancyAggregate, selection: SelectionState) -> ChartDisplayModel:
    title = chart_title(agg, selection)
    row = _scoped_row(agg, selection)
    if row.is_blocked:
        return _reserved_only(selection, row, title)
    colors = (COLOR_OCCUPIED, COLOR_REMAINING)
    return ChartDisplayModel(
        mode=selection.chart_mode,
        title=title,
        labels=(OCCUPIED_LABEL, REMAINING_LABEL),
        datasets=(Dataset(
            label=BAR_SERIES_LABEL,
            data=(row.occupied_pct, row.remaining_pct),
            background_colors=colors,
            border_colors=colors,
        ),),
        targets=(row, row),
    )


def build(agg: OccupancyAggregate, selection: SelectionState, roster: List[str]) -> ChartDisplayModel:
    """Build the chart model for the current selection. ``roster`` gives floor order."""
    if selection.chart_mode == CHART_BAR:
        return build_bar(agg, selection, roster)
    if selection.chart_mode == CHART_DOUGHNUT:
        return build_doughnut(agg, selection)
    return build_distributed(agg, selection, roster)


def chart_click(selection: SelectionState, model: ChartDisplayModel, index: int) -> bool:
    """Apply a click on element ``index``. Returns True when the scope changed."""
    floor_name = model.drill_down_floor(index)
    if floor_name is None:
        return False
    return selection.select(floor_name)
