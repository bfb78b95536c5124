"""Shared fixtures: small raw quarters shaped like the Divvy 2019 Q1 and 2020 Q1 files."""

import pandas as pd
import pytest


@pytest.fixture
def legacy_trips():
    """Raw 2019-style rows, all text as load_trips_csv reads them."""
    return pd.DataFrame({
        "trip_id": ["1", "2", "3"],
        "start_time": ["2019-01-01 08:00:00", "2019-01-06 12:00:00", "2019-01-01 09:00:00"],
        "end_time": ["2019-01-01 08:10:00", "2019-01-06 12:30:00", "2019-01-01 08:59:10"],
        "bikeid": ["2167", "4386", "1524"],
        "tripduration": ["600.0", "1,800.0", "-50.0"],
        "from_station_id": ["199", "44", "15"],
        "from_station_name": ["A", "C", "E"],
        "to_station_id": ["84", "624", "16"],
        "to_station_name": ["B", "D", "F"],
        "usertype": ["Subscriber", "Customer", "Subscriber"],
        "gender": ["Male", None, "Female"],
        "birthyear": ["1989", None, "1994"],
    })


@pytest.fixture
def current_trips():
    """Raw 2020-style rows: one valid, one from HQ QR, one with a bad start time."""
    return pd.DataFrame({
        "ride_id": ["EACB19130B0CDA4A", "8FED874C809DC021", "789F3C21E472CA96"],
        "rideable_type": ["docked_bike", "docked_bike", "docked_bike"],
        "started_at": ["2020-01-21 20:06:59", "2020-01-22 10:00:00", "not a date"],
        "ended_at": ["2020-01-21 20:14:30", "2020-01-22 10:05:00", "2020-01-23 10:00:00"],
        "start_station_name": ["Western Ave & Leland Ave", "HQ QR", "Clark St & Leland Ave"],
        "start_station_id": ["239", "675", "326"],
        "end_station_name": ["Clark St & Leland Ave", "HQ QR", "Western Ave & Leland Ave"],
        "end_station_id": ["326", "675", "239"],
        "start_lat": ["41.9665", "41.8899", "41.9671"],
        "start_lng": ["-87.6884", "-87.6803", "-87.6674"],
        "end_lat": ["41.9671", "41.8899", "41.9665"],
        "end_lng": ["-87.6674", "-87.6803", "-87.6884"],
        "member_casual": ["member", "casual", "member"],
    })


@pytest.fixture
def quarter_csvs(tmp_path, legacy_trips, current_trips):
    """Write both fixture quarters to disk and return their paths."""
    legacy_path = tmp_path / "Divvy_Trips_2019_Q1.csv"
    current_path = tmp_path / "Divvy_Trips_2020_Q1.csv"
    legacy_trips.to_csv(legacy_path, index=False)
    current_trips.to_csv(current_path, index=False)
    return legacy_path, current_path
