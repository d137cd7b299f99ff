"""
Analysis and computation layer.

This package assembles the metric calculators into the effort score and the
heart rate analysis report, and exposes pure entry points for both.
"""

from ..models import (
    AthleteProfile,
    EffortResult,
    HRAResult,
    WorkoutAnalysis,
    WorkoutRecord,
)
from .effort import EffortScorer, classify_effort_zone
from .heart_rate import HeartRateAnalyzer

_effort_scorer = EffortScorer()
_heart_rate_analyzer = HeartRateAnalyzer()


def calculate_effort(profile: AthleteProfile, workout: WorkoutRecord) -> EffortResult:
    """Effort score of a workout."""
    return _effort_scorer.score(profile, workout)


def analyze_heart_rate(profile: AthleteProfile, workout: WorkoutRecord) -> HRAResult:
    """Heart rate analysis report of a workout."""
    return _heart_rate_analyzer.analyze(profile, workout)


def analyze_workout(profile: AthleteProfile, workout: WorkoutRecord) -> WorkoutAnalysis:
    """Effort score and heart rate analysis of a workout."""
    return WorkoutAnalysis(
        effort=calculate_effort(profile, workout),
        heart_rate=analyze_heart_rate(profile, workout),
    )


__all__ = [
    "EffortScorer",
    "HeartRateAnalyzer",
    "analyze_heart_rate",
    "analyze_workout",
    "calculate_effort",
    "classify_effort_zone",
]
