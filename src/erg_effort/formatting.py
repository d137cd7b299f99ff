"""Display formatting for times, splits, distances and share messages."""

import math

from .constants import TimeConstants
from .metrics import split_seconds
from .models import EffortResult, WorkoutRecord

SHARE_TRAILER = "Tracked with erg-effort"


def format_time(seconds: float) -> str:
    """Format seconds as m:ss.s (e.g. 7:23.4 or 42:15.6)."""
    minutes = math.floor(seconds / TimeConstants.SECONDS_PER_MINUTE)
    secs = seconds - minutes * TimeConstants.SECONDS_PER_MINUTE
    return f"{minutes}:{secs:04.1f}"


def format_split(seconds: float) -> str:
    """Format a pace in seconds per 500m."""
    return f"{format_time(seconds)} /500m"


def format_distance(metres: float) -> str:
    """Format a distance with thousands separators (e.g. 2,000m)."""
    return f"{metres:,.0f}m"


def build_share_text(workout: WorkoutRecord, effort: EffortResult) -> str:
    """
    Build the share message of a workout.

    Args:
        workout: Workout telemetry
        effort: Effort score of the workout

    Returns:
        Multi-line share message
    """
    workout_name = (
        workout.workout_type.display_name if workout.workout_type else "Workout"
    )
    header = workout_name
    if workout.workout_date is not None:
        header = f"{workout_name} - {workout.workout_date:%b %d, %Y}"

    split = workout.average_split_seconds or split_seconds(
        workout.total_distance_metres, workout.total_time_seconds
    )

    lines = [
        header,
        "",
        f"{effort.effort_points:.1f} EP ({effort.zone_label})",
        f"Time: {format_time(workout.total_time_seconds)}",
        f"Distance: {format_distance(workout.total_distance_metres)}",
        f"Split: {format_split(split)}",
    ]
    if workout.avg_heart_rate is not None:
        lines.append(f"HR: {workout.avg_heart_rate:.0f} bpm avg")
    lines.extend(["", SHARE_TRAILER])

    return "\n".join(lines)
