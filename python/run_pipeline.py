"""
Run the full Divvy trip analysis:
1. Load the legacy and current quarters
2. Reconcile schemas, merge, derive ride_length and filter invalid trips
3. Describe ride lengths for members vs casual riders
4. Average ride length per rider type and weekday
5. Export the weekday summary
"""

import argparse
import sys

from clean_trips import (
    derive_features,
    filter_trips,
    merge_quarters,
    normalize_rider_types,
    normalize_types,
    reconcile_schema,
)
from config import CURRENT_TRIPS_CSV, LEGACY_TRIPS_CSV, SUMMARY_CSV
from load_trips import load_quarters
from summarize_trips import (
    aggregate_by_rider_and_weekday,
    compare_rider_types,
    describe_ride_length,
    export_summary,
)


def clean_and_merge(legacy, current):
    """
    Turn the two raw quarters into one table of valid trips.

    Args:
        legacy: Raw 2019-style quarter (trip_id, usertype, ...)
        current: Raw 2020-style quarter (ride_id, member_casual, ...)

    Returns:
        DataFrame of trips with derived fields, canonical rider types,
        ride_length >= 0 and no HQ QR starts
    """
    legacy = normalize_types(reconcile_schema(legacy))
    current = normalize_types(current)

    trips = merge_quarters(legacy, current)
    trips = derive_features(trips)
    trips = normalize_rider_types(trips)
    return filter_trips(trips)


def run_pipeline(legacy_csv=LEGACY_TRIPS_CSV, current_csv=CURRENT_TRIPS_CSV,
                 output_csv=SUMMARY_CSV, sample_size=None):
    """
    Run the full analysis and write the weekday summary.

    Args:
        legacy_csv: Path to the legacy-schema quarter
        current_csv: Path to the current-schema quarter
        output_csv: Where to write the summary CSV
        sample_size: If set, only read the first N rows of each file

    Returns:
        The aggregated summary DataFrame
    """
    print("="*60)
    print("Divvy Trip Analysis")
    print("="*60)
    print()

    print("Step 1/5: Loading trip data")
    print("-"*40)
    legacy, current = load_quarters(legacy_csv, current_csv, nrows=sample_size)

    print("\nStep 2/5: Cleaning and merging quarters")
    print("-"*40)
    trips = clean_and_merge(legacy, current)
    if len(trips):
        print(f"Date range: {trips['started_at'].min()} to {trips['started_at'].max()}")

    print("\nStep 3/5: Describing ride lengths")
    print("-"*40)
    stats = describe_ride_length(trips)
    for stat, value in stats.items():
        print(f"  {stat:>6} ride_length: {value:,.1f} seconds")
    print()
    print(compare_rider_types(trips).to_string())

    print("\nStep 4/5: Aggregating by rider type and weekday")
    print("-"*40)
    summary = aggregate_by_rider_and_weekday(trips)
    print(summary.to_string(index=False))

    print("\nStep 5/5: Exporting summary")
    print("-"*40)
    export_summary(summary, output_csv)

    print("\n" + "="*60)
    print("Pipeline Complete!")
    print("="*60)

    return summary


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Compare member and casual Divvy riders across two quarters"
    )
    parser.add_argument(
        "--legacy",
        default=LEGACY_TRIPS_CSV,
        help="CSV using the legacy column names (default: %(default)s)"
    )
    parser.add_argument(
        "--current",
        default=CURRENT_TRIPS_CSV,
        help="CSV using the current column names (default: %(default)s)"
    )
    parser.add_argument(
        "--output",
        "-o",
        default=SUMMARY_CSV,
        help="Where to write the summary CSV (default: %(default)s)"
    )
    parser.add_argument(
        "--sample",
        type=int,
        default=None,
        help="Process only the first N rows of each file (for testing)"
    )

    args = parser.parse_args(argv)

    if args.sample is not None and args.sample < 1:
        print("Error: --sample must be a positive number of rows")
        sys.exit(1)

    try:
        run_pipeline(
            legacy_csv=args.legacy,
            current_csv=args.current,
            output_csv=args.output,
            sample_size=args.sample,
        )
    except (OSError, ValueError, TypeError) as e:
        print(f"\nError: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
