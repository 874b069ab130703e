"""Building occupancy aggregation: stats, blocked floors and the company index."""

import logging
from typing import List, Optional

import pandas as pd

from config.defaults import ALL_FLOORS, BLOCKED_REMARK, SUCCESS_STATUS
from engine.errors import LoadError
from models.occupancy import (
    SCOPE_BUILDING, SCOPE_FLOOR,
    BuildingStats, CompanyEntry, CompanyRecord, FloorRecord,
    OccupancyAggregate, ScopedStats,
)

logger = logging.getLogger(__name__)


def _optional_number(value) -> Optional[float]:
    """Parse a raw field as a number; None when missing or non-numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return None if pd.isna(value) else value
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return None if pd.isna(number) else number


def to_number(value):
    """Coerce a raw field to a number; missing or non-numeric values become 0."""
    number = _optional_number(value)
    return 0 if number is None else number


def parse_company(raw: dict) -> CompanyRecord:
    return CompanyRecord(
        name=str(raw.get("name", "")),
        occupied_pct=to_number(raw.get("occupied_percentage")),
        occupied_area=_optional_number(raw.get("occupied_area")),
    )


def parse_floor(raw: dict) -> FloorRecord:
    return FloorRecord(
        name=str(raw.get("name", "")),
        total_area=to_number(raw.get("total_area")),
        occupied_area=to_number(raw.get("occupied_area")),
        remaining_area=to_number(raw.get("remaining_area")),
        occupied_pct=to_number(raw.get("occupied_percentage")),
        remaining_pct=to_number(raw.get("remaining_percentage")),
        remark=str(raw.get("remark") or "normal"),
        companies=tuple(parse_company(c) for c in raw.get("companies") or []),
    )


def parse_building_totals(data: dict) -> BuildingStats:
    return BuildingStats(
        total_area=to_number(data.get("building_total_area")),
        occupied_area=to_number(data.get("building_occupied_area")),
        remaining_area=to_number(data.get("building_remaining_area")),
        occupied_pct=to_number(data.get("building_occupied_percentage")),
        remaining_pct=to_number(data.get("building_remaining_percentage")),
    )


def aggregate(raw_building_record: dict, scope: Optional[str] = ALL_FLOORS) -> OccupancyAggregate:
    """Build an OccupancyAggregate from a building occupancy record.

    Raises LoadError when the record's status is not "success". When ``scope``
    names a floor present in ``floors_data`` the returned building stats are
    that floor's own totals; an unknown floor keeps the whole-building totals.
    """
    status = raw_building_record.get("status") if isinstance(raw_building_record, dict) else None
    if status != SUCCESS_STATUS:
        raise LoadError(f"Building record status is {status!r}, expected {SUCCESS_STATUS!r}")

    data = raw_building_record.get("data") or {}
    floors = [parse_floor(f) for f in data.get("floors_data") or []]

    blocked = []
    companies: List[CompanyEntry] = []
    for floor in floors:
        if floor.remark == BLOCKED_REMARK:
            blocked.append(floor.name)
        for company in floor.companies:
            companies.append(CompanyEntry(
                name=company.name,
                occupied_pct=company.occupied_pct,
                occupied_area=company.occupied_area,
                floor_name=floor.name,
                is_blocked=floor.is_blocked,
            ))

    totals = parse_building_totals(data)
    scoped = ScopedStats(SCOPE_BUILDING, totals)
    if scope:
        selected = next((f for f in floors if f.name == scope), None)
        if selected is not None:
            scoped = ScopedStats(SCOPE_FLOOR, selected.stats(), floor_name=selected.name)
        else:
            logger.debug("Floor %r not in occupancy record; keeping building totals", scope)

    return OccupancyAggregate(
        building_stats=scoped,
        building_totals=totals,
        floor_stats=floors,
        blocked_floors=frozenset(blocked),
        companies=companies,
    )


class OccupancyAggregator:
    """Keeps the last good aggregate; a failed pass never replaces it."""

    def __init__(self):
        self.current: OccupancyAggregate = OccupancyAggregate.empty()
        self.last_error: Optional[str] = None

    def refresh(self, raw_building_record: dict, scope: Optional[str] = ALL_FLOORS) -> OccupancyAggregate:
        try:
            result = aggregate(raw_building_record, scope)
        except LoadError as e:
            logger.error("Building occupancy record rejected: %s", e)
            self.last_error = str(e)
            return self.current
        self.current = result
        self.last_error = None
        return result


def floor_stats_frame(agg: OccupancyAggregate, floor_order: List[str] = None) -> pd.DataFrame:
    """Per-floor totals as a table, in roster order when one is given."""
    floors = agg.floor_stats
    if floor_order:
        rank = {name: i for i, name in enumerate(floor_order)}
        floors = sorted(floors, key=lambda f: rank.get(f.name, len(rank)))

    rows = []
    for f in floors:
        rows.append({
            "Floor": f.name,
            "Total Area": f.total_area,
            "Occupied Area": 0 if f.is_blocked else f.occupied_area,
            "Remaining Area": 0 if f.is_blocked else f.remaining_area,
            "Occupied %": 0 if f.is_blocked else f.occupied_pct,
            "Remaining %": 0 if f.is_blocked else f.remaining_pct,
            "Companies": 0 if f.is_blocked else len(f.companies),
            "Status": "Reserved" if f.is_blocked else "Available",
        })
    return pd.DataFrame(rows, columns=[
        "Floor", "Total Area", "Occupied Area", "Remaining Area",
        "Occupied %", "Remaining %", "Companies", "Status",
    ])


def company_index_frame(agg: OccupancyAggregate) -> pd.DataFrame:
    """The flattened company index as a table. Reserved floors list no companies."""
    rows = [{
        "Company": c.name,
        "Floor": c.floor_name,
        "Occupied %": c.occupied_pct,
        "Occupied Area": c.occupied_area,
    } for c in agg.companies if not c.is_blocked]
    return pd.DataFrame(rows, columns=["Company", "Floor", "Occupied %", "Occupied Area"])
