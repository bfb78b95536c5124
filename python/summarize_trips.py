"""Descriptive statistics and the member vs casual weekday summary."""

import os

import pandas as pd

from config import SUMMARY_COLUMNS, WEEKDAY_ORDER


STATISTICS = ["mean", "median", "max", "min"]


def describe_ride_length(df):
    """Return mean, median, max and min ride_length (seconds) over all trips."""
    ride_length = df["ride_length"]
    return {stat: ride_length.agg(stat) for stat in STATISTICS}


def compare_rider_types(df):
    """Return mean, median, max and min ride_length for each rider type."""
    return df.groupby("member_casual")["ride_length"].agg(STATISTICS)


def aggregate_by_rider_and_weekday(df: pd.DataFrame) -> pd.DataFrame:
    """
    Count trips and average ride_length per rider type and weekday.

    day_of_week is made an ordered categorical (Sunday..Saturday) so rows
    come out in calendar order within each rider type rather than
    alphabetically. Only observed combinations produce a row.

    Args:
        df: Filtered trips with member_casual, day_of_week and ride_length

    Returns:
        DataFrame with member_casual, day_of_week, number_of_rides and
        average_ride_length columns
    """
    weekdays = pd.Categorical(df["day_of_week"], categories=WEEKDAY_ORDER, ordered=True)

    summary = (
        df.assign(day_of_week=weekdays)
        .groupby(["member_casual", "day_of_week"], observed=True, sort=True, dropna=False)["ride_length"]
        .agg(number_of_rides="size", average_ride_length="mean")
        .reset_index()
    )

    return summary


def export_summary(summary: pd.DataFrame, output_path) -> str:
    """
    Write the weekday summary as Member_Casual, Day_of_Week,
    Average_Ride_Length_Seconds.

    The CSV is written next to output_path first and moved into place once
    complete, so a failed run never leaves a partial file behind.

    Returns:
        The path written
    """
    output_dir = os.path.dirname(os.path.abspath(output_path))
    os.makedirs(output_dir, exist_ok=True)

    export = summary[list(SUMMARY_COLUMNS)].rename(columns=SUMMARY_COLUMNS)

    tmp_path = f"{output_path}.tmp"
    try:
        with open(tmp_path, "w", newline="") as f:
            export.to_csv(f, index=False)
        os.replace(tmp_path, output_path)
    except Exception:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise

    print(f"Saved {len(export):,} rows to {output_path}")
    return output_path
