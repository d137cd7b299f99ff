"""
Cardiovascular efficiency metric.

Watts produced per heartbeat above resting. Higher means a more efficient
aerobic system. Approximate benchmarks:

- Elite:      >= 3.0
- Excellent:  2.5 - 3.0
- Good:       2.0 - 2.5
- Developing: 1.5 - 2.0
- Building:   < 1.5
"""

from ..constants import EfficiencyThresholds
from ..models import EfficiencyRating, HRAEfficiency
from .base import round_half_up

_INSIGHTS: dict[EfficiencyRating, str] = {
    EfficiencyRating.ELITE: "Exceptional aerobic efficiency",
    EfficiencyRating.EXCELLENT: "Strong aerobic system",
    EfficiencyRating.GOOD: "Solid fitness foundation",
    EfficiencyRating.DEVELOPING: "Aerobic base improving",
    EfficiencyRating.BUILDING: "Keep building your base",
}


def rate_efficiency(watts_per_beat: float) -> EfficiencyRating:
    """Rating for a watts-per-beat value (lower bounds inclusive)."""
    if watts_per_beat >= EfficiencyThresholds.ELITE:
        return EfficiencyRating.ELITE
    if watts_per_beat >= EfficiencyThresholds.EXCELLENT:
        return EfficiencyRating.EXCELLENT
    if watts_per_beat >= EfficiencyThresholds.GOOD:
        return EfficiencyRating.GOOD
    if watts_per_beat >= EfficiencyThresholds.DEVELOPING:
        return EfficiencyRating.DEVELOPING
    return EfficiencyRating.BUILDING


class EfficiencyCalculator:
    """Calculates watts per beat above resting heart rate."""

    def calculate(
        self, avg_watts: float, avg_hr: float, resting_hr: float
    ) -> HRAEfficiency:
        """
        Calculate cardiovascular efficiency.

        Args:
            avg_watts: Average power in watts
            avg_hr: Average heart rate in bpm
            resting_hr: Resting heart rate in bpm

        Returns:
            Efficiency with watts per beat rounded to two decimals
        """
        if avg_hr <= resting_hr:
            return HRAEfficiency(watts_per_beat=0.0, rating=EfficiencyRating.BUILDING)

        watts_per_beat = avg_watts / (avg_hr - resting_hr)
        rating = rate_efficiency(watts_per_beat)

        return HRAEfficiency(
            watts_per_beat=round_half_up(watts_per_beat, 2),
            rating=rating,
            insight=_INSIGHTS[rating],
        )
