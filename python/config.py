"""Configuration settings for the Divvy quarterly trip analysis."""

import os

# Local paths (relative to project root)
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DATA_DIR = os.path.join(PROJECT_ROOT, "data", "raw")
OUTPUT_DIR = os.path.join(PROJECT_ROOT, "data", "output")

# Input quarters: legacy schema first, current schema second
LEGACY_TRIPS_CSV = os.path.join(DATA_DIR, "Divvy_Trips_2019_Q1.csv")
CURRENT_TRIPS_CSV = os.path.join(DATA_DIR, "Divvy_Trips_2020_Q1.csv")
SUMMARY_CSV = os.path.join(OUTPUT_DIR, "avg_ride_length.csv")

# Legacy (2019 and earlier) column name -> current column name
LEGACY_COLUMN_MAP = {
    "trip_id": "ride_id",
    "bikeid": "rideable_type",
    "start_time": "started_at",
    "end_time": "ended_at",
    "from_station_name": "start_station_name",
    "from_station_id": "start_station_id",
    "to_station_name": "end_station_name",
    "to_station_id": "end_station_id",
    "usertype": "member_casual",
}

# Columns kept after merging both quarters
TRIP_COLUMNS = [
    "ride_id",
    "rideable_type",
    "started_at",
    "ended_at",
    "start_station_name",
    "start_station_id",
    "end_station_name",
    "end_station_id",
    "member_casual",
]

TIMESTAMP_COLUMNS = ["started_at", "ended_at"]
DURATION_COLUMNS = ["tripduration", "ride_length"]
STRING_COLUMNS = [
    "ride_id",
    "rideable_type",
    "start_station_id",
    "end_station_id",
    "member_casual",
]

# Rider categories
RIDER_TYPES = ("member", "casual")
LEGACY_RIDER_TYPES = {
    "Subscriber": "member",
    "Customer": "casual",
}

# Divvy took bikes out of docks at HQ for quality checks
EXCLUDED_START_STATIONS = {"HQ QR"}

WEEKDAY_ORDER = [
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
]

# Output file column names
SUMMARY_COLUMNS = {
    "member_casual": "Member_Casual",
    "day_of_week": "Day_of_Week",
    "average_ride_length": "Average_Ride_Length_Seconds",
}
