"""Exceptions raised while syncing Peloton workouts to Garmin Connect."""


class SyncError(Exception):
    """Base exception for all sync errors."""


class AuthError(SyncError):
    """A platform login was rejected or could not be reached."""


class FetchError(SyncError):
    """The workout list or a workout's details could not be fetched from Peloton."""


class UploadError(SyncError):
    """Garmin Connect rejected an activity or could not receive it."""
