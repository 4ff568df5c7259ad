"""Garmin Connect client for creating activities."""

from __future__ import annotations

import logging

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from config import GARMIN_BASE_URL, REQUEST_TIMEOUT_S
from errors import UploadError
from models import GarminActivity

logger = logging.getLogger(__name__)

ACTIVITY_PATH = "/proxy/activity-service/activity"


class GarminClient:
    """HTTP client for the Garmin Connect activity service."""

    def __init__(self, session_id: str, base_url: str = None, timeout: float = None):
        self.base_url = (base_url or GARMIN_BASE_URL).rstrip("/")
        self.timeout = timeout or REQUEST_TIMEOUT_S
        self.session = requests.Session()
        self.session.headers.update({
            "Session-Id": session_id,
            "Accept": "application/json",
        })
        # No retries: a repeated POST would create a duplicate activity
        retry = Retry(total=0, raise_on_status=False)
        self.session.mount("https://", HTTPAdapter(max_retries=retry))

    def upload_activity(self, activity: GarminActivity) -> dict:
        """Create one activity. Returns whatever Garmin acknowledges with."""
        url = f"{self.base_url}{ACTIVITY_PATH}"
        try:
            resp = self.session.post(url, json=activity.to_payload(), timeout=self.timeout)
            resp.raise_for_status()
            receipt = resp.json() if resp.content else {}
        except (requests.RequestException, ValueError) as e:
            raise UploadError(f"Failed to upload to Garmin: {e}") from e
        logger.info("Uploaded %r to Garmin", activity.name)
        return receipt
