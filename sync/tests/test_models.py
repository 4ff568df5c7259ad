"""Test Peloton record parsing and outcome rendering."""

from datetime import datetime, timezone

from models import (
    GarminActivity, SyncOutcome, SyncStatus, WorkoutDetail, WorkoutSummary, parse_start_time,
)


def test_parse_start_time_epoch_seconds():
    assert parse_start_time(1773050400) == datetime(2026, 3, 9, 10, 0, tzinfo=timezone.utc)


def test_parse_start_time_naive_iso_is_utc():
    assert parse_start_time("2026-03-09T10:00:00") == datetime(2026, 3, 9, 10, 0, tzinfo=timezone.utc)


def test_parse_start_time_missing():
    assert parse_start_time(None) is None
    assert parse_start_time("") is None


def test_summary_title_fallbacks():
    assert WorkoutSummary.from_api({"id": 1, "title": "Climb"}).title == "Climb"
    assert WorkoutSummary.from_api({"id": 1, "name": "Cycling Workout"}).title == "Cycling Workout"
    summary = WorkoutSummary.from_api({"id": 1})
    assert summary.title == "Workout"
    assert summary.id == "1"
    assert summary.start_time is None


def test_detail_missing_numbers_are_zero():
    detail = WorkoutDetail.from_api({"title": "Run"})
    assert detail.duration == 0
    assert detail.total_calories == 0
    assert detail.start_time is None


def test_outcome_text():
    summary = WorkoutSummary(id="w1", start_time=None, title="Morning Run")
    failed = SyncOutcome(summary, SyncStatus.FAILED, "Failed to fetch workout details: 404")
    assert str(failed) == "Morning Run - Failed: Failed to fetch workout details: 404"

    activity = GarminActivity("general", 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, "Peloton General - Workout")
    synced = SyncOutcome(activity, SyncStatus.SYNCED)
    assert synced.label == "Peloton General - Workout"
    assert synced.status_text == "Synced successfully"
