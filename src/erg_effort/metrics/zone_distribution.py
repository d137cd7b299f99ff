"""
Time-in-zone distribution across heart-rate tagged intervals.

Each interval is assigned wholly to the zone of its average heart rate.
Percentages are shares of the HR-tagged interval time, not of the whole
workout.
"""

from ..constants import MinimumSamples
from ..models import Interval, ZoneTime
from .base import round_half_up
from .hr_zones import HeartRateZoneCalculator


class ZoneDistributionCalculator:
    """Accumulates interval time per Karvonen zone."""

    def __init__(self, zone_calculator: HeartRateZoneCalculator):
        """
        Initialize with the athlete's zones.

        Args:
            zone_calculator: Zone lookup for the athlete
        """
        self.zone_calculator = zone_calculator

    def calculate(self, intervals: tuple[Interval, ...]) -> dict[int, ZoneTime] | None:
        """
        Calculate time spent in each zone.

        Args:
            intervals: Workout intervals in chronological order

        Returns:
            Mapping of zone number to time in zone, only for zones with time.
            None with fewer than two HR-tagged intervals or no time at all.
        """
        hr_intervals = [i for i in intervals if i.avg_heart_rate is not None]
        if len(hr_intervals) < MinimumSamples.ZONE_DISTRIBUTION:
            return None

        zone_seconds = {zone.zone: 0.0 for zone in self.zone_calculator.zones()}
        for interval in hr_intervals:
            zone = self.zone_calculator.zone_for(interval.avg_heart_rate)
            zone_seconds[zone.zone] += interval.time_seconds

        total_seconds = sum(i.time_seconds for i in hr_intervals)

        distribution = {
            zone.zone: ZoneTime(
                name=zone.name,
                seconds=round_half_up(zone_seconds[zone.zone], 1),
                percent=(
                    round_half_up(zone_seconds[zone.zone] / total_seconds * 100, 1)
                    if total_seconds > 0
                    else 0.0
                ),
            )
            for zone in self.zone_calculator.zones()
            if zone_seconds[zone.zone] > 0
        }
        return distribution or None
