from dataclasses import dataclass
from typing import List, Optional, Tuple

from config.defaults import RESERVED_TOOLTIP, RESERVED_TOOLTIP_DETAIL

TARGET_FLOOR = "floor"
TARGET_BUILDING = "building"


@dataclass(frozen=True)
class DisplayRow:
    """Percentages actually drawn for one floor (or the building aggregate)."""
    name: str
    occupied_pct: float
    reserved_pct: float
    remaining_pct: float
    is_blocked: bool = False
    kind: str = TARGET_FLOOR

    @property
    def total_pct(self) -> float:
        return self.occupied_pct + self.reserved_pct + self.remaining_pct


@dataclass(frozen=True)
class Dataset:
    label: str
    data: Tuple[float, ...]
    background_colors: Tuple[str, ...]
    border_colors: Tuple[str, ...]


@dataclass(frozen=True)
class ChartDisplayModel:
    """Everything the charting surface needs to draw one chart.

    ``labels``, every ``dataset.data`` and ``targets`` are index aligned:
    position ``i`` in each refers to the same floor or aggregate.
    """
    mode: str
    title: str
    labels: Tuple[str, ...]
    datasets: Tuple[Dataset, ...]
    targets: Tuple[DisplayRow, ...]
    stacked: bool = False
    drill_down: bool = False
    x_axis_title: Optional[str] = None

    def resolve(self, index: int) -> Optional[DisplayRow]:
        """Map a rendered element's index back to the row it represents."""
        if 0 <= index < len(self.targets):
            return self.targets[index]
        return None

    def tooltip(self, dataset_index: int, index: int) -> List[str]:
        row = self.resolve(index)
        if row is None or not 0 <= dataset_index < len(self.datasets):
            return []
        if row.is_blocked:
            return [RESERVED_TOOLTIP, RESERVED_TOOLTIP_DETAIL]
        dataset = self.datasets[dataset_index]
        return [f"{dataset.label}: {dataset.data[index]}%"]

    def drill_down_floor(self, index: int) -> Optional[str]:
        """Floor a click on element ``index`` navigates to, if any."""
        if not self.drill_down:
            return None
        row = self.resolve(index)
        if row is None or row.kind != TARGET_FLOOR:
            return None
        return row.name
