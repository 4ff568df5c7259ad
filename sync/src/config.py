"""Configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parents[2] / ".env")

PELOTON_BASE_URL = os.environ.get("PELOTON_BASE_URL", "https://api.onepeloton.com")
PELOTON_SESSION_ID = os.environ.get("PELOTON_SESSION_ID", "")
PELOTON_EMAIL = os.environ.get("PELOTON_EMAIL", "")
PELOTON_PASSWORD = os.environ.get("PELOTON_PASSWORD", "")

GARMIN_BASE_URL = os.environ.get("GARMIN_BASE_URL", "https://connect.garmin.com/modern")
GARMIN_SSO_URL = os.environ.get("GARMIN_SSO_URL", "https://sso.garmin.com/sso/signin")
GARMIN_SESSION_ID = os.environ.get("GARMIN_SESSION_ID", "")
GARMIN_EMAIL = os.environ.get("GARMIN_EMAIL", "")
GARMIN_PASSWORD = os.environ.get("GARMIN_PASSWORD", "")

# Default look-back window for the CLI (days)
SYNC_DAYS_BACK = int(os.environ.get("SYNC_DAYS_BACK", "7"))
# Pause between workouts (seconds)
SYNC_PACING_S = float(os.environ.get("SYNC_PACING_S", "1.0"))
REQUEST_TIMEOUT_S = float(os.environ.get("REQUEST_TIMEOUT_S", "30"))


def get_peloton_credentials() -> tuple[str, str]:
    """Get Peloton email and password from env."""
    return PELOTON_EMAIL, PELOTON_PASSWORD


def get_garmin_credentials() -> tuple[str, str]:
    """Get Garmin email and password from env."""
    return GARMIN_EMAIL, GARMIN_PASSWORD
