"""
Heart rate analysis (HRA) report assembly.

The report is gated linearly:
1. No average heart rate -> unavailable, nothing else computed
2. Intensity, zone and efficiency are always computed from the averages
3. With at least two HR-tagged intervals, drift, trend and zone distribution
   are added, each subject to its own minimum number of intervals
"""

import logging

from ..constants import MinimumSamples
from ..metrics import (
    DriftCalculator,
    EfficiencyCalculator,
    HeartRateZoneCalculator,
    TrendCalculator,
    ZoneDistributionCalculator,
    calculate_watts,
    round_half_up,
)
from ..models import (
    AthleteProfile,
    HRAIntensity,
    HRAResult,
    HRAZoneInfo,
    WorkoutRecord,
)

logger = logging.getLogger(__name__)

NO_HEART_RATE_REASON = "No heart rate data recorded"


class HeartRateAnalyzer:
    """Builds the heart rate analysis report of a workout."""

    def __init__(self):
        """Initialize the profile-independent calculators."""
        self.efficiency_calculator = EfficiencyCalculator()
        self.drift_calculator = DriftCalculator()
        self.trend_calculator = TrendCalculator()

    def analyze(self, profile: AthleteProfile, workout: WorkoutRecord) -> HRAResult:
        """
        Analyze heart rate data of a single workout.

        Args:
            profile: Resolved athlete profile
            workout: Workout telemetry

        Returns:
            HRAResult, with available=False when no average HR was recorded
        """
        avg_hr = workout.avg_heart_rate
        if avg_hr is None:
            return HRAResult(available=False, reason=NO_HEART_RATE_REASON)

        zone_calculator = HeartRateZoneCalculator(profile.max_hr, profile.resting_hr)
        avg_watts = calculate_watts(
            workout.total_distance_metres, workout.total_time_seconds
        )

        zone = zone_calculator.zone_for(avg_hr)
        efficiency = self.efficiency_calculator.calculate(
            avg_watts, avg_hr, profile.resting_hr
        )

        intervals = workout.intervals or ()
        hr_intervals = workout.hr_intervals
        has_detailed_data = (
            len(intervals) >= MinimumSamples.DETAILED_DATA
            and len(hr_intervals) >= MinimumSamples.DETAILED_DATA
        )

        drift = trend = zone_distribution = None
        if has_detailed_data:
            drift = self.drift_calculator.calculate(intervals)
            trend = self.trend_calculator.calculate(
                [i.avg_heart_rate for i in hr_intervals]
            )
            zone_distribution = ZoneDistributionCalculator(zone_calculator).calculate(
                intervals
            )
            if drift is None:
                logger.debug("Drift not available for this workout")

        return HRAResult(
            available=True,
            has_detailed_data=has_detailed_data,
            intensity=self._intensity(profile, avg_hr),
            zone=HRAZoneInfo(
                zone=zone.zone, name=zone.name, training_effect=zone.training_effect
            ),
            efficiency=efficiency,
            drift=drift,
            trend=trend,
            zone_distribution=zone_distribution,
        )

    def _intensity(self, profile: AthleteProfile, avg_hr: float) -> HRAIntensity:
        hr_reserve = profile.hr_reserve
        percent_max = avg_hr / profile.max_hr * 100
        percent_hrr = (
            (avg_hr - profile.resting_hr) / hr_reserve * 100 if hr_reserve > 0 else 0.0
        )
        return HRAIntensity(
            percent_max=round_half_up(percent_max, 1),
            percent_hrr=round_half_up(percent_hrr, 1),
            bpm=avg_hr,
            max_hr=profile.max_hr,
        )
