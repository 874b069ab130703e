"""Reading the floor roster and building occupancy records from JSON files."""

import json
import logging

from config.defaults import FLOOR_DATA_PATH, BUILDING_DATA_PATH
from engine.errors import LoadError

logger = logging.getLogger(__name__)


def load_json_record(path: str) -> dict:
    """Load one JSON record from a local path."""
    try:
        with open(path, encoding="utf-8") as fh:
            record = json.load(fh)
    except FileNotFoundError as e:
        raise LoadError(f"Data file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise LoadError(f"Data file {path} is not valid JSON: {e}") from e

    if not isinstance(record, dict):
        raise LoadError(f"Data file {path} must contain a JSON object, got {type(record).__name__}")
    logger.info("Loaded %s", path)
    return record


def load_floor_roster(path: str = FLOOR_DATA_PATH) -> dict:
    return load_json_record(path)


def load_building_record(path: str = BUILDING_DATA_PATH) -> dict:
    return load_json_record(path)
