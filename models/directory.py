from dataclasses import dataclass
from typing import Optional, Tuple

from config.defaults import AREA_UNIT

DIRECTORY_RESERVED = "reserved"
DIRECTORY_FLOOR = "floor"
DIRECTORY_GROUPED = "grouped"


@dataclass(frozen=True)
class CompanyLine:
    name: str
    occupied_pct: float
    occupied_area: Optional[float] = None

    @property
    def percentage_text(self) -> str:
        return f"{self.occupied_pct}%"

    @property
    def area_text(self) -> str:
        # Zero and missing areas both read as unknown
        if not self.occupied_area:
            return f"Area: N/A {AREA_UNIT}"
        return f"Area: {self.occupied_area:,} {AREA_UNIT}"


@dataclass(frozen=True)
class FloorGroup:
    floor_name: str
    is_blocked: bool
    is_expanded: bool
    companies: Tuple[CompanyLine, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.companies

    @property
    def visible_companies(self) -> Tuple[CompanyLine, ...]:
        if not self.is_expanded or self.is_blocked:
            return ()
        return self.companies


@dataclass(frozen=True)
class DirectoryModel:
    kind: str                                   # reserved, floor or grouped
    title: str
    floor_name: Optional[str] = None
    notice: Optional[str] = None                # reserved notice or empty-floor placeholder
    companies: Tuple[CompanyLine, ...] = ()
    groups: Tuple[FloorGroup, ...] = ()
