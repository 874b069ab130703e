from models.floor import FloorDescriptor
from models.occupancy import (
    BuildingStats, ScopedStats, CompanyRecord, CompanyEntry, FloorRecord, OccupancyAggregate,
)
from models.selection import SelectionState
from models.chart import DisplayRow, Dataset, ChartDisplayModel
from models.directory import CompanyLine, FloorGroup, DirectoryModel
