"""
Base classes and protocols for effort component calculators.

Defines the interface that all effort score components follow, plus the
numeric helpers shared across the engine.
"""

import math
from abc import ABC, abstractmethod
from typing import ClassVar, Protocol

from ..models import AthleteProfile, WorkoutRecord
from .power import calculate_watts


class ComponentCalculatorProtocol(Protocol):
    """Protocol defining the interface for effort component calculators."""

    def calculate(self, profile: AthleteProfile, workout: WorkoutRecord) -> float:
        """
        Calculate one component of the effort score.

        Args:
            profile: Resolved athlete profile
            workout: Workout telemetry

        Returns:
            Component score within the component's range
        """
        ...


def clamp(value: float, lower: float, upper: float) -> float:
    """Limit a value to the closed range [lower, upper]."""
    return min(upper, max(lower, value))


def log_duration(minutes: float) -> float:
    """Diminishing-returns duration credit, log10(minutes + 1)."""
    return math.log10(max(minutes, 0.0) + 1)


def round_half_up(value: float, digits: int = 1) -> float:
    """
    Round to a number of decimals with halves rounded up.

    Python's round() rounds halves to even; scores are published with the
    usual half-up convention instead.
    """
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


class BaseComponentCalculator(ABC):
    """
    Abstract base class for effort component calculators.

    Each component produces a raw score and clamps it to [0, max_score].
    """

    max_score: ClassVar[float]

    def calculate(self, profile: AthleteProfile, workout: WorkoutRecord) -> float:
        """
        Calculate the clamped component score.

        Args:
            profile: Resolved athlete profile
            workout: Workout telemetry

        Returns:
            Score within [0, max_score]
        """
        watts = calculate_watts(
            workout.total_distance_metres, workout.total_time_seconds
        )
        return clamp(self._raw_score(profile, workout, watts), 0.0, self.max_score)

    @abstractmethod
    def _raw_score(
        self, profile: AthleteProfile, workout: WorkoutRecord, watts: float
    ) -> float:
        """
        Compute the unclamped component score.

        Args:
            profile: Resolved athlete profile
            workout: Workout telemetry
            watts: Average power of the workout

        Returns:
            Raw score, may fall outside the component range
        """
        raise NotImplementedError("Subclasses must implement _raw_score()")
