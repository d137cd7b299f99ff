"""
Effort score aggregation.

Combines the four component calculators into the 0-100 Effort Points score:

1. Cardiac Load (0-40) - HR-based strain using the Karvonen method
2. Work Output (0-35) - Power x duration, size-adjusted
3. Pacing (0-15) - Split consistency with a negative-split bonus
4. Economy (0-10) - Watts per stroke
"""

from typing import Protocol

from ..constants import EffortZoneThresholds
from ..metrics import (
    CardiacLoadCalculator,
    EconomyCalculator,
    PacingCalculator,
    WorkOutputCalculator,
    clamp,
    round_half_up,
)
from ..models import (
    AthleteProfile,
    EffortBreakdown,
    EffortResult,
    EffortZone,
    WorkoutRecord,
)


class EffortScorerProtocol(Protocol):
    """Protocol for effort scorers."""

    def score(self, profile: AthleteProfile, workout: WorkoutRecord) -> EffortResult:
        """Score a workout."""
        ...


def classify_effort_zone(effort_points: float) -> EffortZone:
    """
    Zone of an effort score.

    Upper bounds are inclusive: 25.0 is recovery, 25.01 is building.
    Classify the unrounded score. A published 25.0 may come from 25.04 and
    be building, so callers must not re-derive the zone from a rounded
    `effort_points`.
    """
    if effort_points <= EffortZoneThresholds.RECOVERY_MAX:
        return EffortZone.RECOVERY
    if effort_points <= EffortZoneThresholds.BUILDING_MAX:
        return EffortZone.BUILDING
    if effort_points <= EffortZoneThresholds.TRAINING_MAX:
        return EffortZone.TRAINING
    return EffortZone.PEAK


class EffortScorer:
    """
    Computes the composite effort score of a workout.

    Stateless: the same scorer can be shared across threads and workouts.
    """

    def __init__(self):
        """Initialize the component calculators."""
        self.cardiac_calculator = CardiacLoadCalculator()
        self.work_calculator = WorkOutputCalculator()
        self.pacing_calculator = PacingCalculator()
        self.economy_calculator = EconomyCalculator()

    def score(self, profile: AthleteProfile, workout: WorkoutRecord) -> EffortResult:
        """
        Score a single workout.

        Args:
            profile: Resolved athlete profile
            workout: Workout telemetry

        Returns:
            EffortResult with total, zone and component breakdown
        """
        cardiac = self.cardiac_calculator.calculate(profile, workout)
        work = self.work_calculator.calculate(profile, workout)
        pacing = self.pacing_calculator.calculate(profile, workout)
        economy = self.economy_calculator.calculate(profile, workout)

        total = clamp(
            cardiac + work + pacing + economy,
            0.0,
            EffortZoneThresholds.MAX_EFFORT_POINTS,
        )
        # Zone uses the unrounded total
        zone = classify_effort_zone(total)

        return EffortResult(
            effort_points=round_half_up(total, 1),
            zone=zone,
            zone_label=zone.label,
            description=zone.description,
            breakdown=EffortBreakdown(
                cardiac_load=round_half_up(cardiac, 1),
                work_output=round_half_up(work, 1),
                pacing=round_half_up(pacing, 1),
                economy=round_half_up(economy, 1),
            ),
        )
