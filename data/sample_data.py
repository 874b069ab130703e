"""Demo floor roster and building occupancy records for the Floor Allocation Dashboard."""

import json
import os


def generate_floor_roster() -> dict:
    """Floor roster: six floors, ground floor first."""
    names = ["Ground Floor", "1st Floor", "2nd Floor", "3rd Floor", "4th Floor", "5th Floor"]
    return {
        "status": "success",
        "data": [{"id": i + 1, "floor": name} for i, name in enumerate(names)],
    }


def generate_building_record() -> dict:
    """Building occupancy record. The 5th floor is reserved and excluded from the rentable total."""
    floors = [
        {
            "name": "Ground Floor", "total_area": 10000, "occupied_area": 4000, "remaining_area": 6000,
            "occupied_percentage": 40, "remaining_percentage": 60, "remark": "normal",
            "companies": [
                {"name": "Acme Labs", "occupied_percentage": 25, "occupied_area": 2500},
                {"name": "Northwind Traders", "occupied_percentage": 15, "occupied_area": 1500},
            ],
        },
        {
            "name": "1st Floor", "total_area": 10000, "occupied_area": 7500, "remaining_area": 2500,
            "occupied_percentage": 75, "remaining_percentage": 25, "remark": "normal",
            "companies": [
                {"name": "Globex", "occupied_percentage": 60, "occupied_area": 6000},
                {"name": "Initech", "occupied_percentage": 15, "occupied_area": 1500},
            ],
        },
        {
            "name": "2nd Floor", "total_area": 10000, "occupied_area": 5000, "remaining_area": 5000,
            "occupied_percentage": 50, "remaining_percentage": 50, "remark": "normal",
            "companies": [
                {"name": "Umbrella Analytics", "occupied_percentage": 30, "occupied_area": 3000},
                {"name": "Stark Robotics", "occupied_percentage": 20},
            ],
        },
        {
            "name": "3rd Floor", "total_area": 10000, "occupied_area": 0, "remaining_area": 10000,
            "occupied_percentage": 0, "remaining_percentage": 100, "remark": "normal",
            "companies": [],
        },
        {
            "name": "4th Floor", "total_area": 10000, "occupied_area": 9000, "remaining_area": 1000,
            "occupied_percentage": 90, "remaining_percentage": 10, "remark": "normal",
            "companies": [
                {"name": "Wayne Biotech", "occupied_percentage": 90, "occupied_area": 9000},
            ],
        },
        {
            "name": "5th Floor", "total_area": 10000, "occupied_area": 0, "remaining_area": 0,
            "occupied_percentage": 0, "remaining_percentage": 0, "remark": "blocked",
            "companies": [],
        },
    ]
    return {
        "status": "success",
        "data": {
            "building_total_area": 50000,
            "building_occupied_area": 25500,
            "building_remaining_area": 24500,
            "building_occupied_percentage": 51,
            "building_remaining_percentage": 49,
            "floors_data": floors,
        },
    }


def write_sample_json(output_dir: str):
    """Write floor.json and data.json to the given directory."""
    os.makedirs(output_dir, exist_ok=True)
    with open(os.path.join(output_dir, "floor.json"), "w", encoding="utf-8") as fh:
        json.dump(generate_floor_roster(), fh, indent=2)
    with open(os.path.join(output_dir, "data.json"), "w", encoding="utf-8") as fh:
        json.dump(generate_building_record(), fh, indent=2)


if __name__ == "__main__":
    out = os.path.join(os.path.dirname(__file__), "assets")
    write_sample_json(out)
    print("Sample floor.json and data.json generated in data/assets/")
