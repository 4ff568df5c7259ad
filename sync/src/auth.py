"""Session logins for Peloton and Garmin Connect.

The Garmin login is a direct credential post, not the real Garmin SSO
handshake. Both functions return the opaque session id the platform clients
send in their Session-Id header.
"""

from __future__ import annotations

import logging

import requests

from config import GARMIN_SSO_URL, PELOTON_BASE_URL, REQUEST_TIMEOUT_S
from errors import AuthError

logger = logging.getLogger(__name__)


def _post_for_session(url: str, payload: dict, platform: str) -> str:
    try:
        resp = requests.post(url, json=payload, timeout=REQUEST_TIMEOUT_S)
        resp.raise_for_status()
        session_id = resp.json().get("session_id")
    except (requests.RequestException, ValueError, AttributeError) as e:
        raise AuthError(f"{platform} authentication failed: {e}") from e
    if not session_id:
        raise AuthError(f"{platform} authentication failed: no session_id in response")
    logger.info("%s authentication successful", platform)
    return session_id


def authenticate_peloton(email: str, password: str, base_url: str = None) -> str:
    """Log in to Peloton and return the session id."""
    url = f"{(base_url or PELOTON_BASE_URL).rstrip('/')}/auth/login"
    return _post_for_session(url, {"username_or_email": email, "password": password}, "Peloton")


def authenticate_garmin(email: str, password: str, sso_url: str = None) -> str:
    """Log in to Garmin Connect and return the session id."""
    return _post_for_session(sso_url or GARMIN_SSO_URL, {"username": email, "password": password}, "Garmin")


def can_sync(peloton_session, garmin_session) -> bool:
    """A sync needs both platforms authenticated."""
    return bool(peloton_session and garmin_session)
