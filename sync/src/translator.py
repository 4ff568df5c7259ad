"""Translate Peloton workout details into Garmin Connect activities."""

import math

from models import GarminActivity, WorkoutDetail

SOURCE_PLATFORM = "Peloton"
DEFAULT_TITLE = "Workout"


def activity_type_for(fitness_discipline) -> str:
    """Cycling stays cycling, every other discipline is 'general'."""
    return "cycling" if fitness_discipline == "cycling" else "general"


def to_garmin_activity(detail: WorkoutDetail) -> GarminActivity:
    """Map a Peloton workout detail onto a Garmin activity. Never fails."""
    activity_type = activity_type_for(detail.fitness_discipline)
    start = math.floor(detail.start_time.timestamp()) if detail.start_time else 0
    title = detail.title or DEFAULT_TITLE

    return GarminActivity(
        activity_type=activity_type,
        start_time_in_seconds=start,
        duration_in_seconds=detail.duration or 0,
        average_heart_rate=detail.average_heartrate or 0,
        maximum_heart_rate=detail.max_heartrate or 0,
        average_power=detail.average_watts or 0,
        maximum_power=detail.max_watts or 0,
        # km -> m
        total_distance_in_meters=(detail.distance or 0) * 1000,
        average_speed=detail.average_speed or 0,
        maximum_speed=detail.max_speed or 0,
        total_calories=detail.total_calories or 0,
        name=f"{SOURCE_PLATFORM} {activity_type.capitalize()} - {title}",
    )
