"""Peloton API client: recent workouts and per-workout details."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from config import PELOTON_BASE_URL, REQUEST_TIMEOUT_S
from errors import FetchError
from models import WorkoutDetail, WorkoutSummary

logger = logging.getLogger(__name__)

# Peloton caps the workout list at 100 items per request
PAGE_SIZE = 100


def validate_days_back(days_back) -> int:
    """Raise ValueError unless days_back is a non-negative int."""
    if isinstance(days_back, bool) or not isinstance(days_back, int) or days_back < 0:
        raise ValueError(f"days_back must be a non-negative integer, got {days_back!r}")
    return days_back


class PelotonClient:
    """HTTP client for the Peloton API, authenticated by a session id."""

    def __init__(self, session_id: str, base_url: str = None, timeout: float = None):
        self.base_url = (base_url or PELOTON_BASE_URL).rstrip("/")
        self.timeout = timeout or REQUEST_TIMEOUT_S
        self.session = requests.Session()
        self.session.headers.update({
            "Session-Id": session_id,
            "Accept": "application/json",
        })
        # One attempt per request, failures surface to the caller
        retry = Retry(total=0, raise_on_status=False)
        self.session.mount("https://", HTTPAdapter(max_retries=retry))

    def _get(self, path: str, params: dict = None):
        url = f"{self.base_url}{path}"
        resp = self.session.get(url, params=params, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()

    def get_recent_workouts(self, days_back: int, now: datetime = None) -> list[WorkoutSummary]:
        """Get workouts that started strictly after now - days_back days.

        Only the most recent PAGE_SIZE workouts are requested, and the
        order Peloton returns them in is kept.
        """
        validate_days_back(days_back)
        cutoff = (now or datetime.now(timezone.utc)) - timedelta(days=days_back)
        try:
            data = self._get("/api/me/workouts", {"limit": PAGE_SIZE})
            workouts = [WorkoutSummary.from_api(w) for w in data["data"]]
        except (requests.RequestException, KeyError, TypeError, ValueError) as e:
            raise FetchError(f"Failed to fetch workouts: {e}") from e

        recent = [w for w in workouts if w.start_time is not None and w.start_time > cutoff]
        logger.info("Peloton returned %d workouts, %d after %s", len(workouts), len(recent), cutoff.isoformat())
        return recent

    def get_workout_detail(self, workout_id: str) -> WorkoutDetail:
        """Get the full record for one workout."""
        try:
            return WorkoutDetail.from_api(self._get(f"/api/workout/{workout_id}"))
        except (requests.RequestException, AttributeError, TypeError, ValueError) as e:
            raise FetchError(f"Failed to fetch workout details: {e}") from e
