"""Test the command-line driver."""

from unittest.mock import patch

import pytest

import sync_cli
from errors import AuthError
from models import WorkoutDetail, WorkoutSummary
from peloton_sync import SyncRun, SyncState
from translator import to_garmin_activity


def _run(state=SyncState.COMPLETED):
    run = SyncRun()
    run.state = state
    return run


@patch("sync_cli.start_sync")
@patch.multiple("config", PELOTON_SESSION_ID="p-session", GARMIN_SESSION_ID="g-session")
def test_main_uses_configured_sessions(mock_start):
    mock_start.return_value = _run()
    assert sync_cli.main(["--days", "3", "--pacing", "0"]) == 0
    args, kwargs = mock_start.call_args
    assert args == ("p-session", "g-session", 3)
    assert kwargs["pacing_s"] == 0


@patch("sync_cli.start_sync")
@patch.multiple("config", PELOTON_SESSION_ID="p-session", GARMIN_SESSION_ID="g-session")
def test_main_returns_1_when_aborted(mock_start):
    mock_start.return_value = _run(SyncState.ABORTED)
    assert sync_cli.main([]) == 1


@patch("sync_cli.start_sync")
@patch("sync_cli.authenticate_garmin", return_value="g-login")
@patch("sync_cli.authenticate_peloton", return_value="p-login")
@patch.multiple(
    "config",
    PELOTON_SESSION_ID="", GARMIN_SESSION_ID="",
    PELOTON_EMAIL="p@example.com", PELOTON_PASSWORD="pw",
    GARMIN_EMAIL="g@example.com", GARMIN_PASSWORD="pw",
)
def test_main_logs_in_without_sessions(mock_peloton, mock_garmin, mock_start):
    mock_start.return_value = _run()
    assert sync_cli.main([]) == 0
    mock_peloton.assert_called_once_with("p@example.com", "pw")
    mock_garmin.assert_called_once_with("g@example.com", "pw")
    assert mock_start.call_args[0][:2] == ("p-login", "g-login")


@patch("sync_cli.start_sync")
@patch("sync_cli.authenticate_garmin", side_effect=AuthError("Garmin authentication failed: 401"))
@patch.multiple(
    "config",
    PELOTON_SESSION_ID="p-session", GARMIN_SESSION_ID="",
    GARMIN_EMAIL="g@example.com", GARMIN_PASSWORD="pw",
)
def test_main_refuses_without_both_sessions(mock_garmin, mock_start, capsys):
    assert sync_cli.main([]) == 1
    mock_start.assert_not_called()
    out = capsys.readouterr().out
    assert "Garmin authentication failed: 401" in out
    assert "Authenticate with both Peloton and Garmin" in out


def test_negative_days_rejected():
    with pytest.raises(SystemExit):
        sync_cli.main(["--days", "-1"])


def test_console_reporter_prints_workout(capsys):
    activity = to_garmin_activity(WorkoutDetail(fitness_discipline="cycling", title="Climb"))
    sync_cli.ConsoleReporter().add_workout(activity, "Synced successfully")
    assert "Peloton Cycling - Climb - Synced successfully" in capsys.readouterr().out


def test_console_reporter_prints_failed_summary(capsys):
    summary = WorkoutSummary(id="w1", start_time=None, title="Morning Run")
    sync_cli.ConsoleReporter().add_workout(summary, "Failed: Failed to fetch workout details: 404")
    assert "Morning Run - Failed: Failed to fetch workout details: 404" in capsys.readouterr().out
