"""Ordered floor roster and per-floor expansion flags for the company panel."""

import logging
from typing import Dict, List

from config.defaults import SUCCESS_STATUS
from engine.errors import LoadError
from models.floor import FloorDescriptor

logger = logging.getLogger(__name__)


class FloorRegistry:
    def __init__(self):
        self.floors: List[FloorDescriptor] = []
        self.expanded: Dict[str, bool] = {}

    @property
    def names(self) -> List[str]:
        return [f.floor_name for f in self.floors]

    def load(self, raw_floor_list: dict) -> List[FloorDescriptor]:
        """Replace the roster from a floor roster record. Every floor starts collapsed."""
        status = raw_floor_list.get("status") if isinstance(raw_floor_list, dict) else None
        if status != SUCCESS_STATUS:
            raise LoadError(f"Floor roster status is {status!r}, expected {SUCCESS_STATUS!r}")

        floors = []
        for entry in raw_floor_list.get("data") or []:
            name = entry.get("floor")
            if not name:
                logger.warning("Skipping roster entry without a floor name: %r", entry)
                continue
            floors.append(FloorDescriptor(id=entry.get("id"), floor_name=str(name)))

        self.floors = floors
        self.expanded = {f.floor_name: False for f in floors}
        logger.info("Loaded %d floors into the roster", len(floors))
        return floors

    def toggle(self, floor_name: str) -> bool:
        """Flip one floor's expansion flag and return the new value."""
        self.expanded[floor_name] = not self.expanded.get(floor_name, False)
        return self.expanded[floor_name]

    def is_expanded(self, floor_name: str) -> bool:
        return self.expanded.get(floor_name, False)
