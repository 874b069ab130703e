from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Tuple

from config.defaults import BLOCKED_REMARK

SCOPE_BUILDING = "building"
SCOPE_FLOOR = "floor"


@dataclass(frozen=True)
class BuildingStats:
    total_area: float = 0
    occupied_area: float = 0
    remaining_area: float = 0
    occupied_pct: float = 0      # 0-100
    remaining_pct: float = 0     # 0-100


@dataclass(frozen=True)
class ScopedStats:
    """Stats tagged with what they describe: the whole building or one floor."""
    kind: str                    # "building" or "floor"
    stats: BuildingStats
    floor_name: Optional[str] = None

    @property
    def is_floor(self) -> bool:
        return self.kind == SCOPE_FLOOR


@dataclass(frozen=True)
class CompanyRecord:
    name: str
    occupied_pct: float
    occupied_area: Optional[float] = None   # None when the source omits it


@dataclass(frozen=True)
class CompanyEntry:
    """A company tagged with its owning floor, for flat filtering."""
    name: str
    occupied_pct: float
    occupied_area: Optional[float]
    floor_name: str
    is_blocked: bool


@dataclass(frozen=True)
class FloorRecord:
    name: str
    total_area: float = 0
    occupied_area: float = 0
    remaining_area: float = 0
    occupied_pct: float = 0
    remaining_pct: float = 0
    remark: str = "normal"
    companies: Tuple[CompanyRecord, ...] = ()

    @property
    def is_blocked(self) -> bool:
        return self.remark == BLOCKED_REMARK

    def stats(self) -> BuildingStats:
        return BuildingStats(
            total_area=self.total_area,
            occupied_area=self.occupied_area,
            remaining_area=self.remaining_area,
            occupied_pct=self.occupied_pct,
            remaining_pct=self.remaining_pct,
        )


@dataclass(frozen=True)
class OccupancyAggregate:
    """Result of one aggregation pass over a building occupancy record."""
    building_stats: ScopedStats
    building_totals: BuildingStats
    floor_stats: List[FloorRecord] = field(default_factory=list)
    blocked_floors: FrozenSet[str] = frozenset()
    companies: List[CompanyEntry] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "OccupancyAggregate":
        zero = BuildingStats()
        return cls(building_stats=ScopedStats(SCOPE_BUILDING, zero), building_totals=zero)

    def find_floor(self, floor_name: str) -> Optional[FloorRecord]:
        for floor in self.floor_stats:
            if floor.name == floor_name:
                return floor
        return None

    def is_blocked(self, floor_name: str) -> bool:
        return floor_name in self.blocked_floors

    def companies_on(self, floor_name: str) -> List[CompanyEntry]:
        return [c for c in self.companies if c.floor_name == floor_name]
