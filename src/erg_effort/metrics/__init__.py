"""
Metrics calculation modules.

This package contains the individual estimators of the engine:
- power: Concept2 power law (watts from distance and time)
- cardiac: Cardiac load component (HR-based or power fallback)
- work_output: Size-adjusted work output component
- pacing: Split consistency and negative-split component
- economy: Watts-per-stroke economy component
- hr_zones: Karvonen heart rate zones
- efficiency: Watts per beat above resting
- drift: First-half vs second-half cardiac drift
- trend: Heart rate trajectory classification
- zone_distribution: Time in zone across intervals
"""

from .base import BaseComponentCalculator, clamp, round_half_up
from .cardiac import CardiacLoadCalculator, age_factor
from .drift import DriftCalculator, rate_drift
from .economy import EconomyCalculator
from .efficiency import EfficiencyCalculator, rate_efficiency
from .hr_zones import HeartRateZoneCalculator
from .pacing import PacingCalculator, is_negative_split
from .power import calculate_watts, split_seconds
from .trend import TrendCalculator, classify_trend
from .work_output import WorkOutputCalculator, body_weight_factor
from .zone_distribution import ZoneDistributionCalculator

__all__ = [
    "BaseComponentCalculator",
    "CardiacLoadCalculator",
    "WorkOutputCalculator",
    "PacingCalculator",
    "EconomyCalculator",
    "HeartRateZoneCalculator",
    "EfficiencyCalculator",
    "DriftCalculator",
    "TrendCalculator",
    "ZoneDistributionCalculator",
    "age_factor",
    "body_weight_factor",
    "calculate_watts",
    "clamp",
    "classify_trend",
    "is_negative_split",
    "rate_drift",
    "rate_efficiency",
    "round_half_up",
    "split_seconds",
]
