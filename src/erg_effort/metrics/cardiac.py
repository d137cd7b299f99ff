"""
Cardiac load component (0-40).

Two mutually exclusive estimates of cardiovascular strain:
- Heart rate reserve intensity (Karvonen), when average HR was recorded
- A conservative power-based estimate otherwise, capped near 28/40

Both are scaled by an age factor so older athletes get credit for the same
relative strain.
"""

import logging

from ..constants import CardiacLoadConstants
from ..models import AthleteProfile, WorkoutRecord
from .base import BaseComponentCalculator, log_duration
from .work_output import body_weight_factor

logger = logging.getLogger(__name__)


def age_factor(age: float) -> float:
    """+0.5% per year over 30, capped at +30%."""
    factor = 1 + (age - CardiacLoadConstants.REFERENCE_AGE) * (
        CardiacLoadConstants.AGE_FACTOR_PER_YEAR
    )
    return min(factor, CardiacLoadConstants.MAX_AGE_FACTOR)


class CardiacLoadCalculator(BaseComponentCalculator):
    """Calculates cardiac strain from heart rate, or from power as a fallback."""

    max_score = CardiacLoadConstants.MAX_SCORE

    def _raw_score(
        self, profile: AthleteProfile, workout: WorkoutRecord, watts: float
    ) -> float:
        if workout.avg_heart_rate is not None:
            score = self._hr_score(profile, workout.avg_heart_rate)
        elif watts > 0:
            logger.debug("No heart rate recorded, estimating cardiac load from power")
            score = self._power_score(profile, workout, watts)
        else:
            return 0.0

        return score * age_factor(profile.age)

    def _hr_score(self, profile: AthleteProfile, avg_hr: float) -> float:
        """Non-linear in %HRR: 90% HRR is disproportionately harder than 70%."""
        hr_reserve = profile.hr_reserve
        intensity = (
            (avg_hr - profile.resting_hr) / hr_reserve if hr_reserve > 0 else 0.0
        )
        return (
            max(0.0, intensity) ** CardiacLoadConstants.HR_INTENSITY_EXPONENT
            * CardiacLoadConstants.MAX_SCORE
        )

    def _power_score(
        self, profile: AthleteProfile, workout: WorkoutRecord, watts: float
    ) -> float:
        """Power relative to an expected threshold, scaled by duration."""
        threshold_watts = CardiacLoadConstants.THRESHOLD_WATTS * body_weight_factor(
            profile.weight_kg
        )
        if threshold_watts <= 0:
            return 0.0

        power_intensity = min(
            watts / threshold_watts, CardiacLoadConstants.MAX_POWER_INTENSITY
        )
        duration_factor = min(
            log_duration(workout.total_minutes) * CardiacLoadConstants.DURATION_WEIGHT,
            CardiacLoadConstants.MAX_DURATION_FACTOR,
        )
        return (
            power_intensity**CardiacLoadConstants.POWER_INTENSITY_EXPONENT
            * duration_factor
            * CardiacLoadConstants.POWER_FALLBACK_SCALE
        )
