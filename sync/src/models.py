"""Records passed between the Peloton client, the translator and the Garmin client."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class Severity(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


class SyncStatus(str, Enum):
    SYNCED = "synced"
    FAILED = "failed"


# Epoch values larger than this are milliseconds (1e11 s is past year 5000)
_MS_THRESHOLD = 1e11


def parse_start_time(value) -> datetime | None:
    """Parse a Peloton timestamp into an aware UTC datetime.

    Peloton returns epoch seconds; numbers above _MS_THRESHOLD are read as
    epoch milliseconds. ISO 8601 strings (with or without a trailing Z) are
    accepted too, and naive strings are taken as UTC. Returns None for a
    missing or unparseable value.
    """
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float)):
            seconds = value / 1000 if abs(value) > _MS_THRESHOLD else value
            return datetime.fromtimestamp(seconds, tz=timezone.utc)
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except (ValueError, OverflowError, OSError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass(frozen=True)
class WorkoutSummary:
    """One entry of the Peloton workout list."""
    id: str
    start_time: datetime | None
    title: str
    fitness_discipline: str | None = None

    @classmethod
    def from_api(cls, data: dict) -> WorkoutSummary:
        return cls(
            id=str(data["id"]),
            start_time=parse_start_time(data.get("start_time")),
            title=data.get("title") or data.get("name") or "Workout",
            fitness_discipline=data.get("fitness_discipline"),
        )


@dataclass(frozen=True)
class WorkoutDetail:
    """Full Peloton workout record. Missing numbers are stored as 0."""
    id: str | None = None
    start_time: datetime | None = None
    duration: float = 0
    average_heartrate: float = 0
    max_heartrate: float = 0
    average_watts: float = 0
    max_watts: float = 0
    distance: float = 0  # kilometers
    average_speed: float = 0  # m/s
    max_speed: float = 0  # m/s
    total_calories: float = 0
    fitness_discipline: str | None = None
    title: str | None = None

    @classmethod
    def from_api(cls, data: dict) -> WorkoutDetail:
        def num(key):
            try:
                return float(data.get(key) or 0)
            except (TypeError, ValueError):
                return 0

        workout_id = data.get("id")
        return cls(
            id=str(workout_id) if workout_id is not None else None,
            start_time=parse_start_time(data.get("start_time")),
            duration=num("duration"),
            average_heartrate=num("average_heartrate"),
            max_heartrate=num("max_heartrate"),
            average_watts=num("average_watts"),
            max_watts=num("max_watts"),
            distance=num("distance"),
            average_speed=num("average_speed"),
            max_speed=num("max_speed"),
            total_calories=num("total_calories"),
            fitness_discipline=data.get("fitness_discipline"),
            title=data.get("title"),
        )


@dataclass(frozen=True)
class GarminActivity:
    """Activity body accepted by the Garmin Connect activity service."""
    activity_type: str
    start_time_in_seconds: int
    duration_in_seconds: float
    average_heart_rate: float
    maximum_heart_rate: float
    average_power: float
    maximum_power: float
    total_distance_in_meters: float
    average_speed: float
    maximum_speed: float
    total_calories: float
    name: str

    def to_payload(self) -> dict:
        return {
            "activityType": self.activity_type,
            "startTimeInSeconds": self.start_time_in_seconds,
            "durationInSeconds": self.duration_in_seconds,
            "averageHeartRateInBeatsPerMinute": self.average_heart_rate,
            "maximumHeartRateInBeatsPerMinute": self.maximum_heart_rate,
            "averagePowerInWatts": self.average_power,
            "maximumPowerInWatts": self.maximum_power,
            "totalDistanceInMeters": self.total_distance_in_meters,
            "averageSpeedInMetersPerSecond": self.average_speed,
            "maximumSpeedInMetersPerSecond": self.maximum_speed,
            "totalCalories": self.total_calories,
            "name": self.name,
        }


def record_label(record) -> str:
    """Display label of a GarminActivity or WorkoutSummary."""
    if isinstance(record, GarminActivity):
        return record.name
    return record.title


@dataclass(frozen=True)
class SyncOutcome:
    """Result for one workout of a sync run.

    record is the translated GarminActivity when one was produced, otherwise
    the WorkoutSummary the failure belongs to.
    """
    record: WorkoutSummary | GarminActivity
    status: SyncStatus
    reason: str | None = field(default=None)

    @property
    def label(self) -> str:
        return record_label(self.record)

    @property
    def status_text(self) -> str:
        if self.status is SyncStatus.SYNCED:
            return "Synced successfully"
        return f"Failed: {self.reason}"

    def __str__(self) -> str:
        return f"{self.label} - {self.status_text}"
