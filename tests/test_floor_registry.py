"""Tests for the floor registry."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from engine.errors import LoadError
from engine.floor_registry import FloorRegistry
from models.floor import FloorDescriptor


def make_roster(names=("G", "1", "2"), status="success"):
    return {"status": status, "data": [{"id": i, "floor": n} for i, n in enumerate(names)]}


class TestLoad:
    def test_preserves_roster_order(self):
        registry = FloorRegistry()
        floors = registry.load(make_roster())

        assert [f.floor_name for f in floors] == ["G", "1", "2"]
        assert floors[0] == FloorDescriptor(id=0, floor_name="G")
        assert registry.names == ["G", "1", "2"]

    def test_all_floors_start_collapsed(self):
        registry = FloorRegistry()
        registry.load(make_roster())
        assert registry.expanded == {"G": False, "1": False, "2": False}

    def test_bad_status_raises_load_error(self):
        registry = FloorRegistry()
        with pytest.raises(LoadError):
            registry.load(make_roster(status="error"))
        assert registry.floors == []

    def test_non_dict_input_raises_load_error(self):
        with pytest.raises(LoadError):
            FloorRegistry().load(None)

    def test_entries_without_floor_name_skipped(self):
        registry = FloorRegistry()
        raw = {"status": "success", "data": [{"id": 1, "floor": "G"}, {"id": 2}]}
        registry.load(raw)
        assert registry.names == ["G"]


class TestToggle:
    def test_toggle_flips_only_that_floor(self):
        registry = FloorRegistry()
        registry.load(make_roster())

        assert registry.toggle("1") is True
        assert registry.is_expanded("1")
        assert not registry.is_expanded("G")
        assert not registry.is_expanded("2")

    def test_multiple_floors_can_be_expanded(self):
        registry = FloorRegistry()
        registry.load(make_roster())
        registry.toggle("G")
        registry.toggle("2")
        assert registry.is_expanded("G") and registry.is_expanded("2")

    def test_toggle_twice_collapses(self):
        registry = FloorRegistry()
        registry.load(make_roster())
        registry.toggle("G")
        assert registry.toggle("G") is False

    def test_reload_resets_expansion(self):
        registry = FloorRegistry()
        registry.load(make_roster())
        registry.toggle("G")
        registry.load(make_roster())
        assert not registry.is_expanded("G")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
