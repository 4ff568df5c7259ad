"""Peloton -> Garmin sync run: list, fetch detail, translate, upload, one workout at a time."""

from __future__ import annotations

import logging
import time
from enum import Enum

from config import SYNC_PACING_S
from errors import FetchError, UploadError
from garmin_client import GarminClient
from models import Severity, SyncOutcome, SyncStatus
from peloton_client import PelotonClient, validate_days_back
from translator import to_garmin_activity

logger = logging.getLogger(__name__)


class SyncState(str, Enum):
    IDLE = "idle"
    FETCHING_LIST = "fetching_list"
    FETCHING_DETAIL = "fetching_detail"
    TRANSLATING = "translating"
    UPLOADING = "uploading"
    RECORDING = "recording"
    COMPLETED = "completed"
    ABORTED = "aborted"


class SyncReporter:
    """Receives progress from a sync run. The defaults do nothing."""

    def on_state(self, state: SyncState) -> None:
        pass

    def show_status(self, message: str, severity: Severity = Severity.INFO) -> None:
        pass

    def add_workout(self, record, status_text: str) -> None:
        pass


class SyncRun:
    """State and outcome log of a single sync run.

    outcomes only grows; entries are never changed once recorded.
    """

    def __init__(self, reporter: SyncReporter = None):
        self.reporter = reporter or SyncReporter()
        self.state = SyncState.IDLE
        self.outcomes: list[SyncOutcome] = []
        self.error: str | None = None

    def transition(self, state: SyncState) -> None:
        logger.debug("Sync state %s -> %s", self.state.value, state.value)
        self.state = state
        self.reporter.on_state(state)

    def record(self, outcome: SyncOutcome) -> None:
        self.transition(SyncState.RECORDING)
        self.outcomes.append(outcome)
        self.reporter.add_workout(outcome.record, outcome.status_text)

    @property
    def completed(self) -> bool:
        return self.state is SyncState.COMPLETED

    @property
    def synced_count(self) -> int:
        return sum(1 for o in self.outcomes if o.status is SyncStatus.SYNCED)

    @property
    def failed_count(self) -> int:
        return sum(1 for o in self.outcomes if o.status is SyncStatus.FAILED)


def _sync_workout(run: SyncRun, peloton, garmin, summary) -> None:
    """Fetch, translate and upload one workout, recording the outcome."""
    run.transition(SyncState.FETCHING_DETAIL)
    try:
        detail = peloton.get_workout_detail(summary.id)
    except FetchError as e:
        logger.warning("Workout %s (%s): %s", summary.id, summary.title, e)
        run.record(SyncOutcome(summary, SyncStatus.FAILED, str(e)))
        return

    run.transition(SyncState.TRANSLATING)
    activity = to_garmin_activity(detail)

    run.transition(SyncState.UPLOADING)
    try:
        garmin.upload_activity(activity)
    except UploadError as e:
        logger.warning("Workout %s (%s): %s", summary.id, activity.name, e)
        run.record(SyncOutcome(activity, SyncStatus.FAILED, str(e)))
        return

    run.record(SyncOutcome(activity, SyncStatus.SYNCED))


def _abort(run: SyncRun, error: Exception) -> SyncRun:
    run.error = str(error)
    run.transition(SyncState.ABORTED)
    run.reporter.show_status(f"Sync failed: {error}", Severity.ERROR)
    logger.error("Sync aborted: %s", error)
    return run


def sync_recent_workouts(
    peloton: PelotonClient,
    garmin: GarminClient,
    days_back: int,
    reporter: SyncReporter = None,
    pacing_s: float = None,
    sleep=time.sleep,
) -> SyncRun:
    """Copy Peloton workouts from the last days_back days to Garmin Connect.

    Workouts are handled strictly one after another with a fixed pause
    between them. A failed detail fetch or upload is recorded and the run
    moves on; only a bad days_back or a failed workout list aborts the run.

    Returns the SyncRun with its final state and outcome log.
    """
    pacing_s = SYNC_PACING_S if pacing_s is None else pacing_s
    run = SyncRun(reporter)

    try:
        validate_days_back(days_back)
    except ValueError as e:
        return _abort(run, e)

    run.transition(SyncState.FETCHING_LIST)
    try:
        workouts = peloton.get_recent_workouts(days_back)
    except FetchError as e:
        return _abort(run, e)

    run.reporter.show_status(f"Found {len(workouts)} workouts to sync", Severity.INFO)
    logger.info("Found %d Peloton workouts from the last %d days", len(workouts), days_back)

    for i, summary in enumerate(workouts):
        if i > 0:
            sleep(pacing_s)
        _sync_workout(run, peloton, garmin, summary)

    run.transition(SyncState.COMPLETED)
    run.reporter.show_status("Sync completed", Severity.SUCCESS)
    logger.info("Sync completed: %d synced, %d failed", run.synced_count, run.failed_count)
    return run


def start_sync(
    peloton_session: str,
    garmin_session: str,
    days_back: int,
    reporter: SyncReporter = None,
    pacing_s: float = None,
) -> SyncRun:
    """Run a sync with the given session credentials."""
    return sync_recent_workouts(
        PelotonClient(peloton_session),
        GarminClient(garmin_session),
        days_back,
        reporter=reporter,
        pacing_s=pacing_s,
    )
