"""
Clean and combine the two quarters of Divvy trip data.

Each step takes a DataFrame and returns a new one, so the steps can be
chained in run_pipeline.clean_and_merge or exercised on their own:

    reconcile_schema -> normalize_types -> merge_quarters
        -> derive_features -> normalize_rider_types -> filter_trips
"""

import math
import numbers
import re
from datetime import timedelta

import pandas as pd

from config import (
    DURATION_COLUMNS,
    EXCLUDED_START_STATIONS,
    LEGACY_COLUMN_MAP,
    LEGACY_RIDER_TYPES,
    RIDER_TYPES,
    STRING_COLUMNS,
    TIMESTAMP_COLUMNS,
    TRIP_COLUMNS,
)
from load_trips import validate_schema


KNOWN_RIDER_TYPES = set(RIDER_TYPES) | set(LEGACY_RIDER_TYPES)

# e.g. "1,783.0" as exported in the 2019 tripduration column
THOUSANDS_PATTERN = re.compile(r"^-?\d{1,3}(,\d{3})+(\.\d+)?$")


def reconcile_schema(df: pd.DataFrame) -> pd.DataFrame:
    """
    Rename legacy (2019) columns to the current (2020) naming scheme.

    Args:
        df: Legacy quarter with trip_id, start_time, usertype, ... columns

    Returns:
        New DataFrame using ride_id, started_at, member_casual, ... names

    Raises:
        ValueError: If any column in LEGACY_COLUMN_MAP is missing
    """
    is_valid, message = validate_schema(df, LEGACY_COLUMN_MAP.keys())
    if not is_valid:
        raise ValueError(f"Legacy trip data has unexpected header: {message}")

    return df.rename(columns=LEGACY_COLUMN_MAP)


def parse_duration(value) -> float:
    """
    Parse a trip duration into seconds.

    Accepts plain numbers (already seconds), numeric text with or without
    thousands separators ("1,783.0"), and clock or timedelta text
    ("00:10:00", "1 days 02:00:00"). Anything missing, non-finite or
    malformed returns NaN instead of raising.
    """
    if value is None or isinstance(value, bool):
        return math.nan

    if isinstance(value, timedelta):
        seconds = value.total_seconds()
    elif isinstance(value, numbers.Real):
        seconds = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return math.nan
        if THOUSANDS_PATTERN.match(text):
            text = text.replace(",", "")
        try:
            seconds = float(text)
        except ValueError:
            try:
                seconds = pd.to_timedelta(text).total_seconds()
            except (ValueError, OverflowError):
                return math.nan
    else:
        return math.nan

    return seconds if math.isfinite(seconds) else math.nan


def normalize_types(df: pd.DataFrame) -> pd.DataFrame:
    """Coerce durations, timestamps and identifiers to consistent types."""
    if not isinstance(df, pd.DataFrame):
        raise TypeError(f"Expected a DataFrame of trips, got {type(df).__name__}")

    df = df.copy()

    # Durations to float seconds, bad values become NaN
    for col in DURATION_COLUMNS:
        if col in df.columns:
            df[col] = df[col].map(parse_duration).astype(float)

    for col in TIMESTAMP_COLUMNS:
        if col in df.columns:
            df[col] = pd.to_datetime(df[col], format="ISO8601", errors="coerce")

    # bikeid is numeric in 2019 while rideable_type is text in 2020
    for col in STRING_COLUMNS:
        if col in df.columns:
            df[col] = df[col].where(df[col].isna(), df[col].astype(str))

    return df


def merge_quarters(legacy: pd.DataFrame, current: pd.DataFrame) -> pd.DataFrame:
    """
    Stack both quarters into one table of TRIP_COLUMNS.

    Coordinates, demographics and the source duration column are dropped.
    Legacy rows come first, then current rows; nothing is sorted or
    deduplicated.
    """
    for name, df in (("legacy", legacy), ("current", current)):
        is_valid, message = validate_schema(df, TRIP_COLUMNS)
        if not is_valid:
            raise ValueError(f"Cannot merge {name} quarter: {message}")

    merged = pd.concat(
        [legacy[TRIP_COLUMNS], current[TRIP_COLUMNS]],
        ignore_index=True,
    )

    print(f"Merged {len(legacy):,} legacy + {len(current):,} current = {len(merged):,} trips")
    return merged


def derive_features(df: pd.DataFrame) -> pd.DataFrame:
    """
    Add calendar fields and ride_length to every trip.

    month, day and year are zero-padded strings so they sort lexically.
    ride_length is ended_at - started_at in whole seconds and may be
    negative; it is NaN when either timestamp is missing. Expects
    started_at and ended_at already parsed by normalize_types.
    """
    df = df.copy()

    started = df["started_at"]
    ended = df["ended_at"]

    df["date"] = started.dt.date
    df["month"] = started.dt.strftime("%m")
    df["day"] = started.dt.strftime("%d")
    df["year"] = started.dt.strftime("%Y")
    df["day_of_week"] = started.dt.day_name()
    df["ride_length"] = (ended - started) // pd.Timedelta(seconds=1)

    return df


def normalize_rider_type(value):
    """
    Map a rider label onto the member/casual domain.

    Subscriber -> member, Customer -> casual. Every other value (canonical
    labels, unrecognized labels, missing values) is returned unchanged, so
    applying this twice is the same as applying it once.
    """
    if isinstance(value, str) and value in LEGACY_RIDER_TYPES:
        return LEGACY_RIDER_TYPES[value]
    return value


def normalize_rider_types(df: pd.DataFrame) -> pd.DataFrame:
    """Apply normalize_rider_type to member_casual, reporting unknown labels."""
    df = df.copy()
    labels = df["member_casual"]

    unknown = labels[labels.notna() & ~labels.isin(KNOWN_RIDER_TYPES)]
    if len(unknown):
        print(f"Warning: {len(unknown):,} trips have unrecognized rider labels (kept as-is):")
        for label, count in unknown.value_counts().items():
            print(f"  - {label}: {count:,}")

    df["member_casual"] = labels.map(normalize_rider_type)
    return df


def filter_trips(df: pd.DataFrame, excluded_stations=EXCLUDED_START_STATIONS) -> pd.DataFrame:
    """
    Drop trips with a negative or missing ride_length, or that started at
    an excluded station (bikes pulled for quality checks at HQ).
    """
    keep = (df["ride_length"] >= 0) & ~df["start_station_name"].isin(excluded_stations)
    filtered = df.loc[keep].reset_index(drop=True)

    removed = len(df) - len(filtered)
    print(f"Removed {removed:,} invalid trips, {len(filtered):,} remaining")

    return filtered
