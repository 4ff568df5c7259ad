"""Sync recent Peloton workouts to Garmin Connect.

Usage:
    peloton-garmin-sync [--days N] [--pacing SECONDS] [--verbose]

Session ids come from PELOTON_SESSION_ID / GARMIN_SESSION_ID. When one is
missing, the matching email/password env vars are used to log in.
"""

from __future__ import annotations

import argparse
import logging
import sys

import config
from auth import authenticate_garmin, authenticate_peloton, can_sync
from errors import AuthError
from models import Severity, record_label
from peloton_sync import SyncReporter, start_sync

_ICONS = {Severity.INFO: "ℹ️ ", Severity.SUCCESS: "✅", Severity.ERROR: "❌"}


class ConsoleReporter(SyncReporter):
    """Prints status lines and the workout log to stdout."""

    def show_status(self, message, severity=Severity.INFO):
        print(f"{_ICONS[severity]} {message}")

    def add_workout(self, record, status_text):
        print(f"  {record_label(record)} - {status_text}")


def _non_negative_int(value: str) -> int:
    days = int(value)
    if days < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {days}")
    return days


def _resolve_sessions(reporter: ConsoleReporter) -> tuple[str, str]:
    """Return (peloton_session, garmin_session), logging in where needed.

    A failed login is reported and leaves that session empty.
    """
    peloton_session = config.PELOTON_SESSION_ID
    if not peloton_session:
        email, password = config.get_peloton_credentials()
        if email and password:
            try:
                peloton_session = authenticate_peloton(email, password)
                reporter.show_status("Peloton authentication successful", Severity.SUCCESS)
            except AuthError as e:
                reporter.show_status(str(e), Severity.ERROR)

    garmin_session = config.GARMIN_SESSION_ID
    if not garmin_session:
        email, password = config.get_garmin_credentials()
        if email and password:
            try:
                garmin_session = authenticate_garmin(email, password)
                reporter.show_status("Garmin authentication successful", Severity.SUCCESS)
            except AuthError as e:
                reporter.show_status(str(e), Severity.ERROR)

    return peloton_session, garmin_session


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Sync recent Peloton workouts to Garmin Connect")
    parser.add_argument("--days", type=_non_negative_int, default=config.SYNC_DAYS_BACK,
                        help=f"Days to look back (default: {config.SYNC_DAYS_BACK})")
    parser.add_argument("--pacing", type=float, default=config.SYNC_PACING_S,
                        help=f"Seconds to wait between workouts (default: {config.SYNC_PACING_S})")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    reporter = ConsoleReporter()
    peloton_session, garmin_session = _resolve_sessions(reporter)
    if not can_sync(peloton_session, garmin_session):
        reporter.show_status("Authenticate with both Peloton and Garmin before syncing", Severity.ERROR)
        return 1

    run = start_sync(peloton_session, garmin_session, args.days, reporter=reporter, pacing_s=args.pacing)
    if run.completed:
        print(f"{run.synced_count} synced, {run.failed_count} failed")
        return 0
    return 1


if __name__ == "__main__":
    sys.exit(main())
