"""Current scope and chart mode of the dashboard."""

import copy
from dataclasses import dataclass
from typing import Optional

from config.defaults import ALL_FLOORS, CHART_MODES, DEFAULT_CHART_MODE


@dataclass
class SelectionState:
    scope: Optional[str] = ALL_FLOORS    # None for all floors, else a floor name
    chart_mode: str = DEFAULT_CHART_MODE

    @property
    def is_all_floors(self) -> bool:
        return self.scope is ALL_FLOORS

    @property
    def selected_floor(self) -> Optional[str]:
        return None if self.is_all_floors else self.scope

    def select(self, floor_name: Optional[str]) -> bool:
        """Switch scope to a floor, or back to all floors for None or "".

        Returns True when the scope changed.
        """
        new_scope = floor_name if floor_name else ALL_FLOORS
        changed = new_scope != self.scope
        self.scope = new_scope
        return changed

    def set_mode(self, mode: str) -> bool:
        mode = str(mode).lower()
        if mode not in CHART_MODES:
            raise ValueError(f"Unsupported chart mode: {mode}. Use one of {CHART_MODES}.")
        changed = mode != self.chart_mode
        self.chart_mode = mode
        return changed

    def snapshot(self) -> "SelectionState":
        return copy.copy(self)
