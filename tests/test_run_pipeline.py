"""End-to-end runs of the pipeline over small quarter files."""

import pandas as pd
import pytest

from run_pipeline import main, run_pipeline


def test_run_pipeline_writes_summary(tmp_path, quarter_csvs):
    output_path = tmp_path / "output" / "avg_ride_length.csv"

    summary = run_pipeline(*quarter_csvs, output_csv=output_path)

    written = pd.read_csv(output_path)
    assert written.columns.tolist() == ["Member_Casual", "Day_of_Week", "Average_Ride_Length_Seconds"]
    assert written.values.tolist() == [
        ["casual", "Sunday", 1800.0],
        ["member", "Tuesday", 525.5],
    ]
    assert summary["number_of_rides"].tolist() == [1, 2]


def test_run_pipeline_bad_header_writes_nothing(tmp_path, legacy_trips, current_trips):
    legacy_path = tmp_path / "legacy.csv"
    current_path = tmp_path / "current.csv"
    output_path = tmp_path / "avg_ride_length.csv"
    legacy_trips.drop(columns=["usertype"]).to_csv(legacy_path, index=False)
    current_trips.to_csv(current_path, index=False)

    with pytest.raises(ValueError):
        run_pipeline(legacy_path, current_path, output_csv=output_path)

    assert not output_path.exists()


def test_main_exits_on_missing_input(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([
            "--legacy", str(tmp_path / "missing.csv"),
            "--current", str(tmp_path / "missing_too.csv"),
            "--output", str(tmp_path / "out.csv"),
        ])

    assert excinfo.value.code == 1
    assert "not found" in capsys.readouterr().out
    assert not (tmp_path / "out.csv").exists()


def test_main_with_sample(tmp_path, quarter_csvs):
    legacy_path, current_path = quarter_csvs
    output_path = tmp_path / "sample.csv"

    main([
        "--legacy", str(legacy_path),
        "--current", str(current_path),
        "--output", str(output_path),
        "--sample", "1",
    ])

    written = pd.read_csv(output_path)
    assert written.values.tolist() == [["member", "Tuesday", 525.5]]


def test_main_exits_on_unreadable_input(tmp_path, quarter_csvs, monkeypatch, capsys):
    def denied(*args, **kwargs):
        raise PermissionError("Permission denied: Divvy_Trips_2019_Q1.csv")

    monkeypatch.setattr("run_pipeline.load_quarters", denied)
    legacy_path, current_path = quarter_csvs

    with pytest.raises(SystemExit) as excinfo:
        main([
            "--legacy", str(legacy_path),
            "--current", str(current_path),
            "--output", str(tmp_path / "out.csv"),
        ])

    assert excinfo.value.code == 1
    assert "Permission denied" in capsys.readouterr().out
    assert not (tmp_path / "out.csv").exists()
