"""Heart rate trend across a session's intervals."""

from ..constants import MinimumSamples, TrendThresholds
from ..models import HRATrend, TrendPattern

_INSIGHTS: dict[TrendPattern, str] = {
    TrendPattern.STABLE: "HR stayed flat - possible low intensity or excellent fitness",
    TrendPattern.ACCELERATING: "HR still climbing at end - longer warmup may help",
    TrendPattern.PLATEAUED: "HR stabilised - good pacing",
    TrendPattern.STEADY_CLIMB: "Gradual HR rise through session",
}


def classify_trend(
    early_rise: float, late_rise: float, total_rise: float
) -> TrendPattern:
    """Classify a heart rate trajectory from its first, last and total rise."""
    if total_rise <= 0:
        return TrendPattern.STABLE
    if (
        late_rise > early_rise * TrendThresholds.ACCELERATION_RATIO
        and late_rise > TrendThresholds.MIN_ACCELERATING_RISE
    ):
        return TrendPattern.ACCELERATING
    if (
        abs(late_rise) < TrendThresholds.PLATEAU_LATE_RISE
        and early_rise > TrendThresholds.MIN_PLATEAU_EARLY_RISE
    ):
        return TrendPattern.PLATEAUED
    return TrendPattern.STEADY_CLIMB


class TrendCalculator:
    """Calculates the shape of the heart rate trajectory."""

    def calculate(self, heart_rates: list[float]) -> HRATrend | None:
        """
        Classify how heart rate evolved from interval to interval.

        Args:
            heart_rates: Average HR of each HR-tagged interval, in order

        Returns:
            Trend report, or None with fewer than three values
        """
        if len(heart_rates) < MinimumSamples.TREND:
            return None

        early_rise = heart_rates[1] - heart_rates[0]
        late_rise = heart_rates[-1] - heart_rates[-2]
        total_rise = heart_rates[-1] - heart_rates[0]
        pattern = classify_trend(early_rise, late_rise, total_rise)

        return HRATrend(
            pattern=pattern,
            start_hr=heart_rates[0],
            end_hr=heart_rates[-1],
            rise=total_rise,
            insight=_INSIGHTS[pattern],
        )
