"""Load quarterly Divvy trip files from disk."""

import os

import pandas as pd
from tqdm import tqdm


def validate_schema(df, expected_columns):
    """Validate that DataFrame has expected columns. Extra columns are allowed."""
    actual_columns = set(df.columns)
    expected_set = set(expected_columns)

    missing = expected_set - actual_columns

    if missing:
        return False, f"Missing columns: {sorted(missing)}"

    return True, "Schema valid"


def load_trips_csv(path, nrows=None):
    """
    Load one quarter of trip data.

    Every column is read as text so identifiers keep their exact spelling.
    Types are fixed later by clean_trips.normalize_types.

    Args:
        path: Path to the quarter's CSV file
        nrows: If set, only read the first N rows (for testing)

    Returns:
        DataFrame with the file's raw columns

    Raises:
        FileNotFoundError: If the file does not exist
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Trip file not found: {path}")

    return pd.read_csv(path, dtype=str, nrows=nrows)


def load_quarters(legacy_path, current_path, nrows=None):
    """
    Load the legacy-schema and current-schema quarters.

    Args:
        legacy_path: CSV using the 2019 column names (trip_id, usertype, ...)
        current_path: CSV using the 2020 column names (ride_id, member_casual, ...)
        nrows: If set, only read the first N rows of each file

    Returns:
        Tuple of (legacy DataFrame, current DataFrame)
    """
    paths = [legacy_path, current_path]

    if nrows:
        print(f"  [TEST MODE] Loading only first {nrows} rows of each file...")

    frames = []
    for path in tqdm(paths, desc="Loading files"):
        frames.append(load_trips_csv(path, nrows=nrows))

    legacy, current = frames

    print(f"Legacy quarter:  {len(legacy):,} rows from {os.path.basename(legacy_path)}")
    print(f"Current quarter: {len(current):,} rows from {os.path.basename(current_path)}")

    return legacy, current
