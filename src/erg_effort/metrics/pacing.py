"""
Pacing component (0-15).

Rewards even splits (low coefficient of variation of 500m pace) and adds a
flat bonus for a negative split.
"""

import numpy as np

from ..constants import MinimumSamples, PacingConstants
from ..models import AthleteProfile, WorkoutRecord
from .base import BaseComponentCalculator


def is_negative_split(paces: list[float]) -> bool:
    """
    Whether the second half was rowed faster than the first.

    The halves are split at len // 2, so an odd middle interval counts
    towards the second half.

    Args:
        paces: Pace in seconds per 500m of each interval, in order

    Returns:
        True if the second half's mean pace is lower
    """
    if len(paces) < MinimumSamples.PACING:
        return False
    half = len(paces) // 2
    return float(np.mean(paces[half:])) < float(np.mean(paces[:half]))


class PacingCalculator(BaseComponentCalculator):
    """Calculates split consistency with a negative-split bonus."""

    max_score = PacingConstants.MAX_SCORE

    def _raw_score(
        self, profile: AthleteProfile, workout: WorkoutRecord, watts: float
    ) -> float:
        intervals = workout.intervals or ()
        if len(intervals) < MinimumSamples.PACING:
            return PacingConstants.SINGLE_PIECE_SCORE

        paces = [interval.pace_seconds for interval in intervals]
        mean_pace = float(np.mean(paces))
        # Population standard deviation
        cv = float(np.std(paces)) / mean_pace if mean_pace > 0 else 0.0

        consistency = max(0.0, 1 - cv * PacingConstants.CV_PENALTY)
        score = consistency * PacingConstants.CONSISTENCY_SCALE

        if is_negative_split(paces):
            score += PacingConstants.NEGATIVE_SPLIT_BONUS

        return score
