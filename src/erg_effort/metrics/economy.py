"""
Economy component (0-10).

Bands watts-per-stroke. Lower watts per stroke (grinding at a high rate)
scores higher, reflecting the extra cardiovascular demand of rate.
"""

from ..constants import EconomyConstants
from ..models import AthleteProfile, WorkoutRecord
from .base import BaseComponentCalculator


def economy_band(watts_per_stroke: float) -> float:
    """Score for a watts-per-stroke value."""
    if watts_per_stroke > EconomyConstants.HIGH_WATTS_PER_STROKE:
        return EconomyConstants.HIGH_BAND_SCORE
    if watts_per_stroke > EconomyConstants.MID_WATTS_PER_STROKE:
        return EconomyConstants.MID_BAND_SCORE
    return EconomyConstants.LOW_BAND_SCORE


class EconomyCalculator(BaseComponentCalculator):
    """Calculates stroke economy from power and stroke rate."""

    max_score = EconomyConstants.MAX_SCORE

    def _raw_score(
        self, profile: AthleteProfile, workout: WorkoutRecord, watts: float
    ) -> float:
        if workout.avg_stroke_rate is None or watts <= 0:
            return EconomyConstants.DEFAULT_SCORE
        return economy_band(watts / workout.avg_stroke_rate)
