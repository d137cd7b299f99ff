"""
Work output component (0-35).

Average power relative to a size-adjusted expectation, credited with
diminishing returns for longer sessions.
"""

from ..constants import BodySizeConstants, WorkOutputConstants
from ..models import AthleteProfile, WorkoutRecord
from .base import BaseComponentCalculator, log_duration


def body_weight_factor(weight_kg: float) -> float:
    """Sub-linear scaling of power expectations with body mass."""
    return (
        weight_kg / BodySizeConstants.REFERENCE_WEIGHT_KG
    ) ** BodySizeConstants.WEIGHT_EXPONENT


class WorkOutputCalculator(BaseComponentCalculator):
    """Calculates size-adjusted power x duration."""

    max_score = WorkOutputConstants.MAX_SCORE

    def _raw_score(
        self, profile: AthleteProfile, workout: WorkoutRecord, watts: float
    ) -> float:
        expected_watts = WorkOutputConstants.EXPECTED_WATTS * body_weight_factor(
            profile.weight_kg
        )
        relative_power = watts / expected_watts if expected_watts > 0 else 0.0
        duration_factor = log_duration(workout.total_minutes)

        return relative_power * duration_factor * WorkOutputConstants.SCALE
