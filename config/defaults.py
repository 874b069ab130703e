"""Default configuration constants for the Floor Allocation Dashboard."""

import os

# Source datasets
DATA_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "data", "assets")
FLOOR_DATA_PATH = os.environ.get("FLOOR_DATA_PATH", os.path.join(DATA_DIR, "floor.json"))
BUILDING_DATA_PATH = os.environ.get("BUILDING_DATA_PATH", os.path.join(DATA_DIR, "data.json"))

# Record discriminators
SUCCESS_STATUS = "success"
BLOCKED_REMARK = "blocked"

# Selection scope
ALL_FLOORS = None                # never a floor name
ALL_FLOORS_LABEL = "All Floors"

# Chart modes
CHART_DISTRIBUTED = "distributed"
CHART_BAR = "bar"
CHART_DOUGHNUT = "doughnut"
CHART_MODES = [CHART_DISTRIBUTED, CHART_BAR, CHART_DOUGHNUT]
DEFAULT_CHART_MODE = CHART_DISTRIBUTED

# Reserved floors
RESERVED_FOR = "IIT-Bombay"
RESERVED_LABEL = "Reserved"
RESERVED_SERIES_LABEL = f"Reserved for {RESERVED_FOR}"
RESERVED_TOOLTIP = f"Reserved for {RESERVED_FOR}: 100%"
RESERVED_TOOLTIP_DETAIL = f"This floor is reserved for {RESERVED_FOR} use"
RESERVED_NOTICE = (
    f"This floor is reserved for {RESERVED_FOR} use and is not available for company allocation."
)

# Chart labels and titles
BUILDING_TITLE = "Building Area Distribution"
FLOOR_TITLE_TEMPLATE = "{floor} Area Distribution"
RESERVED_TITLE = "Reserved Floor"
OCCUPIED_LABEL = "Occupied"
REMAINING_LABEL = "Remaining"
OCCUPIED_SERIES_LABEL = "Occupied Percentage"
REMAINING_SERIES_LABEL = "Remaining Percentage"
BAR_SERIES_LABEL = "Area Allocation"
FLOORS_AXIS_TITLE = "Floors"
BUILDING_TARGET_NAME = "Building"

# Directory panel
NO_COMPANIES_TEXT = "No companies on this floor"
ALL_COMPANIES_TITLE = "All Companies"
FLOOR_COMPANIES_TEMPLATE = "{floor} Companies"
AREA_UNIT = "sq ft"

# Colours
COLOR_OCCUPIED = "#007200"
COLOR_REMAINING = "#FF6600"
COLOR_RESERVED = "rgba(169, 169, 169, 0.7)"
COLOR_RESERVED_SOLID = "#999999"
COLOR_RESERVED_BORDER = "#777777"

# Layout
CHART_HEIGHT = 520
DOUGHNUT_HOLE = 0.5

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
