"""
Karvonen heart rate zones.

Zones are fractions of heart rate reserve (max HR - resting HR) added to
resting HR, which personalises the boundaries better than plain %max HR:

- Zone 1 Recovery:  50-60% HRR
- Zone 2 Aerobic:   60-70% HRR
- Zone 3 Tempo:     70-80% HRR
- Zone 4 Threshold: 80-90% HRR
- Zone 5 Max:       90-100% HRR
"""

from ..constants import KarvonenZoneFractions
from ..models import HeartRateZone
from .base import round_half_up

# (zone, name, lower fraction, upper fraction, training effect)
ZONE_DEFINITIONS: tuple[tuple[int, str, float, float, str], ...] = (
    (
        1,
        "Recovery",
        KarvonenZoneFractions.ZONE_1_MIN,
        KarvonenZoneFractions.ZONE_2_MIN,
        "Active recovery, minimal stress",
    ),
    (
        2,
        "Aerobic",
        KarvonenZoneFractions.ZONE_2_MIN,
        KarvonenZoneFractions.ZONE_3_MIN,
        "Aerobic base, fat metabolism",
    ),
    (
        3,
        "Tempo",
        KarvonenZoneFractions.ZONE_3_MIN,
        KarvonenZoneFractions.ZONE_4_MIN,
        "Lactate threshold, sustainable pace",
    ),
    (
        4,
        "Threshold",
        KarvonenZoneFractions.ZONE_4_MIN,
        KarvonenZoneFractions.ZONE_5_MIN,
        "VO2 max, race fitness",
    ),
    (
        5,
        "Max",
        KarvonenZoneFractions.ZONE_5_MIN,
        KarvonenZoneFractions.ZONE_5_MAX,
        "Anaerobic power, speed",
    ),
)


class HeartRateZoneCalculator:
    """Calculates personalised heart rate zones and looks up a zone for a HR."""

    def __init__(self, max_hr: float, resting_hr: float):
        """
        Initialize calculator with the athlete's heart rate anchors.

        Args:
            max_hr: Maximum heart rate in bpm
            resting_hr: Resting heart rate in bpm
        """
        self.max_hr = max_hr
        self.resting_hr = resting_hr
        self._zones = self._build_zones()

    @property
    def hr_reserve(self) -> float:
        """Heart rate reserve in bpm."""
        return self.max_hr - self.resting_hr

    def zones(self) -> tuple[HeartRateZone, ...]:
        """All five zones in ascending order."""
        return self._zones

    def zone_for(self, hr: float) -> HeartRateZone:
        """
        Find the zone containing a heart rate.

        Boundaries are inclusive on both ends, so a shared edge resolves to
        the lower zone. Heart rates above zone 5 map to zone 5; anything below
        zone 1 (or otherwise unmatched) maps to zone 1.

        Args:
            hr: Heart rate in bpm

        Returns:
            The matching zone, never None
        """
        for zone in self._zones:
            if zone.contains(hr):
                return zone

        top = self._zones[-1]
        if hr > top.max_hr:
            return top
        return self._zones[0]

    def _build_zones(self) -> tuple[HeartRateZone, ...]:
        return tuple(
            HeartRateZone(
                zone=number,
                name=name,
                min_pct=lower,
                max_pct=upper,
                min_hr=self._bpm_at(lower),
                max_hr=self._bpm_at(upper),
                training_effect=effect,
            )
            for number, name, lower, upper, effect in ZONE_DEFINITIONS
        )

    def _bpm_at(self, fraction: float) -> int:
        return int(round_half_up(self.resting_hr + self.hr_reserve * fraction, 0))
