"""Tests for the occupancy aggregator."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from data.sample_data import generate_building_record
from engine.aggregator import (
    OccupancyAggregator, aggregate, to_number, floor_stats_frame, company_index_frame,
)
from engine.errors import LoadError
from models.occupancy import SCOPE_BUILDING, SCOPE_FLOOR, BuildingStats


def make_floor(name="G", occupied_pct=40, remark="normal", companies=None, total=1000):
    occupied = total * occupied_pct / 100
    return {
        "name": name,
        "total_area": total,
        "occupied_area": occupied,
        "remaining_area": total - occupied,
        "occupied_percentage": occupied_pct,
        "remaining_percentage": 100 - occupied_pct,
        "remark": remark,
        "companies": companies or [],
    }


def make_record(floors=None, status="success", total=1000, occupied=600, remaining=400):
    return {
        "status": status,
        "data": {
            "building_total_area": total,
            "building_occupied_area": occupied,
            "building_remaining_area": remaining,
            "building_occupied_percentage": occupied * 100 / total if total else 0,
            "building_remaining_percentage": remaining * 100 / total if total else 0,
            "floors_data": floors if floors is not None else [
                make_floor("G", 40, companies=[{"name": "Acme", "occupied_percentage": 40, "occupied_area": 400}]),
                make_floor("1", 55, remark="blocked", companies=[{"name": "Ghost", "occupied_percentage": 10}]),
                make_floor("2", 20, companies=[{"name": "Beta", "occupied_percentage": 20}]),
            ],
        },
    }


class TestToNumber:
    def test_numbers_pass_through(self):
        assert to_number(12) == 12
        assert to_number(3.5) == 3.5

    def test_missing_and_junk_become_zero(self):
        assert to_number(None) == 0
        assert to_number("n/a") == 0
        assert to_number(float("nan")) == 0
        assert to_number(True) == 0

    def test_numeric_strings_parsed(self):
        assert to_number("42.5") == 42.5


class TestAggregate:
    def test_blocked_floors_collected(self):
        agg = aggregate(make_record())
        assert agg.blocked_floors == frozenset({"1"})

    def test_companies_flattened_with_floor_tags(self):
        agg = aggregate(make_record())
        tags = [(c.name, c.floor_name, c.is_blocked) for c in agg.companies]
        assert tags == [("Acme", "G", False), ("Ghost", "1", True), ("Beta", "2", False)]

    def test_missing_company_area_is_none(self):
        agg = aggregate(make_record())
        beta = next(c for c in agg.companies if c.name == "Beta")
        assert beta.occupied_area is None

    def test_zero_company_area_kept(self):
        companies = [{"name": "Vacant Co", "occupied_percentage": 0, "occupied_area": 0}]
        agg = aggregate(make_record(floors=[make_floor("G", 0, companies=companies)]))
        assert agg.companies[0].occupied_area == 0
        assert company_index_frame(agg).iloc[0]["Occupied Area"] == 0

    def test_non_numeric_company_area_is_none(self):
        companies = [{"name": "Odd Co", "occupied_percentage": 5, "occupied_area": "unknown"}]
        agg = aggregate(make_record(floors=[make_floor("G", 5, companies=companies)]))
        assert agg.companies[0].occupied_area is None

    def test_floor_named_all_is_a_floor(self):
        agg = aggregate(make_record(floors=[make_floor("all", 30)]), "all")
        assert agg.building_stats.kind == SCOPE_FLOOR
        assert agg.building_stats.floor_name == "all"

    def test_all_scope_uses_building_totals(self):
        agg = aggregate(make_record(), None)
        assert agg.building_stats.kind == SCOPE_BUILDING
        assert agg.building_stats.stats == BuildingStats(1000, 600, 400, 60, 40)

    def test_floor_scope_uses_floor_totals(self):
        agg = aggregate(make_record(), "G")
        assert agg.building_stats.kind == SCOPE_FLOOR
        assert agg.building_stats.floor_name == "G"
        assert agg.building_stats.stats == BuildingStats(1000, 400, 600, 40, 60)
        # Whole-building totals stay available
        assert agg.building_totals.total_area == 1000
        assert agg.building_totals.occupied_area == 600

    def test_unknown_floor_falls_back_to_building(self):
        agg = aggregate(make_record(), "99")
        assert agg.building_stats.kind == SCOPE_BUILDING
        assert agg.building_stats.stats == agg.building_totals

    def test_floor_round_trip_reproduces_stored_totals(self):
        record = generate_building_record()
        everything = aggregate(record)
        for floor in everything.floor_stats:
            scoped = aggregate(record, floor.name).building_stats.stats
            raw = next(f for f in record["data"]["floors_data"] if f["name"] == floor.name)
            assert scoped.total_area == raw["total_area"]
            assert scoped.occupied_area == raw["occupied_area"]
            assert scoped.remaining_area == raw["remaining_area"]
            assert scoped.occupied_pct == raw["occupied_percentage"]
            assert scoped.remaining_pct == raw["remaining_percentage"]

    def test_missing_numeric_fields_default_to_zero(self):
        record = {"status": "success", "data": {"floors_data": [{"name": "G"}]}}
        agg = aggregate(record)
        assert agg.building_totals == BuildingStats(0, 0, 0, 0, 0)
        floor = agg.find_floor("G")
        assert floor.occupied_pct == 0
        assert floor.companies == ()

    def test_empty_data_gives_empty_aggregate(self):
        agg = aggregate({"status": "success"})
        assert agg.floor_stats == []
        assert agg.companies == []

    def test_bad_status_raises(self):
        with pytest.raises(LoadError):
            aggregate(make_record(status="failed"))


class TestOccupancyAggregator:
    def test_failure_keeps_previous_aggregate(self):
        aggregator = OccupancyAggregator()
        good = aggregator.refresh(make_record())
        kept = aggregator.refresh(make_record(status="failed"))

        assert kept is good
        assert aggregator.last_error is not None

    def test_failure_before_any_success_is_zeroed(self):
        aggregator = OccupancyAggregator()
        result = aggregator.refresh({"status": "error"})
        assert result.building_stats.stats == BuildingStats()
        assert result.floor_stats == []

    def test_success_clears_error(self):
        aggregator = OccupancyAggregator()
        aggregator.refresh(None)
        aggregator.refresh(make_record())
        assert aggregator.last_error is None


class TestFrames:
    def test_floor_stats_frame_follows_roster_order(self):
        agg = aggregate(make_record())
        df = floor_stats_frame(agg, ["2", "G", "1"])
        assert list(df["Floor"]) == ["2", "G", "1"]

    def test_blocked_floor_reported_reserved(self):
        agg = aggregate(make_record())
        df = floor_stats_frame(agg)
        row = df[df["Floor"] == "1"].iloc[0]
        assert row["Status"] == "Reserved"
        assert row["Occupied %"] == 0
        assert row["Remaining %"] == 0

    def test_blocked_floor_hides_raw_areas_and_companies(self):
        df = floor_stats_frame(aggregate(make_record()))
        row = df[df["Floor"] == "1"].iloc[0]
        assert row["Occupied Area"] == 0
        assert row["Remaining Area"] == 0
        assert row["Companies"] == 0
        # Unblocked floors keep their stored figures
        g = df[df["Floor"] == "G"].iloc[0]
        assert g["Occupied Area"] == 400
        assert g["Companies"] == 1

    def test_company_index_skips_reserved_floors(self):
        df = company_index_frame(aggregate(make_record()))
        assert "1" not in set(df["Floor"])
        assert "Ghost" not in set(df["Company"])

    def test_company_index_frame(self):
        df = company_index_frame(aggregate(make_record()))
        assert len(df) == 2
        assert list(df.columns) == ["Company", "Floor", "Occupied %", "Occupied Area"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
