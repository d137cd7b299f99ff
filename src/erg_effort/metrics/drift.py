"""
Cardiac drift metric.

Cardiac drift is heart rate rising at the same power output over a session,
a sign of fatigue, heat or dehydration. A power drop combined with a large
drift points to a pacing issue (went out too hard) rather than fitness.
"""

import logging

import numpy as np

from ..constants import DriftThresholds, MinimumSamples
from ..models import DriftRating, HRADrift, Interval
from .base import round_half_up
from .power import calculate_watts

logger = logging.getLogger(__name__)


def rate_drift(drift_percent: float, is_pacing_issue: bool) -> DriftRating:
    """Rating for a drift percentage."""
    if drift_percent < DriftThresholds.EXCELLENT_MAX:
        return DriftRating.EXCELLENT
    if drift_percent < DriftThresholds.GOOD_MAX:
        return DriftRating.GOOD
    if drift_percent < DriftThresholds.MODERATE_MAX:
        return DriftRating.MODERATE
    if is_pacing_issue:
        return DriftRating.PACING_ISSUE
    return DriftRating.HIGH


class DriftCalculator:
    """Calculates first-half vs second-half cardiac drift."""

    def calculate(self, intervals: tuple[Interval, ...]) -> HRADrift | None:
        """
        Calculate drift across heart-rate tagged intervals.

        Intervals are split at len // 2. For each half the mean of
        heart rate / watts is compared; drift is the relative rise.

        Args:
            intervals: Workout intervals in chronological order

        Returns:
            Drift report, or None with fewer than four HR-tagged intervals
            or when power is zero somewhere and the ratio is undefined
        """
        hr_intervals = [i for i in intervals if i.avg_heart_rate is not None]
        if len(hr_intervals) < MinimumSamples.DRIFT:
            return None

        heart_rates = np.array([i.avg_heart_rate for i in hr_intervals], dtype=float)
        watts = np.array(
            [calculate_watts(i.distance_metres, i.time_seconds) for i in hr_intervals],
            dtype=float,
        )
        if np.any(watts <= 0):
            logger.debug("Interval without power, drift unavailable")
            return None

        mid = len(hr_intervals) // 2
        ratios = heart_rates / watts
        first_ratio = float(np.mean(ratios[:mid]))
        second_ratio = float(np.mean(ratios[mid:]))
        first_watts = float(np.mean(watts[:mid]))
        second_watts = float(np.mean(watts[mid:]))

        if first_ratio <= 0 or first_watts <= 0:
            return None

        drift_percent = (second_ratio - first_ratio) / first_ratio * 100
        power_drop_percent = (first_watts - second_watts) / first_watts * 100
        if not (np.isfinite(drift_percent) and np.isfinite(power_drop_percent)):
            return None

        is_pacing_issue = (
            power_drop_percent > DriftThresholds.PACING_ISSUE_POWER_DROP
            and drift_percent > DriftThresholds.PACING_ISSUE_DRIFT
        )
        rating = rate_drift(drift_percent, is_pacing_issue)

        return HRADrift(
            percent=round_half_up(drift_percent, 1),
            power_drop_percent=round_half_up(power_drop_percent, 1),
            rating=rating,
            insight=self._insight(rating, power_drop_percent),
        )

    def _insight(self, rating: DriftRating, power_drop_percent: float) -> str:
        if rating is DriftRating.EXCELLENT:
            return "Minimal drift - excellent aerobic fitness"
        if rating is DriftRating.GOOD:
            return "Normal drift - well paced"
        if rating is DriftRating.MODERATE:
            return "Some fatigue accumulation"
        if rating is DriftRating.PACING_ISSUE:
            return (
                f"Went out too hard - power dropped {power_drop_percent:.0f}% "
                "while HR climbed"
            )
        return "High drift - review pacing, hydration, or fatigue"
