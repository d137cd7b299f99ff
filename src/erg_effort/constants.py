"""
Constants used throughout the erg-effort package.

This module centralizes all magic numbers of the effort and heart-rate
models so each formula reads in terms of named coefficients.
"""

from typing import Final


# === Time Constants ===
class TimeConstants:
    """Time-related constants in seconds."""

    SECONDS_PER_MINUTE: Final[int] = 60
    SPLIT_DISTANCE_METRES: Final[int] = 500  # Rowing splits are per 500m


# === Concept2 Power Law ===
class PowerConstants:
    """Concept2 ergometer power model: watts = 2.80 * (m/s)^3."""

    WATTS_COEFFICIENT: Final[float] = 2.80
    VELOCITY_EXPONENT: Final[int] = 3


# === Body Size Scaling ===
class BodySizeConstants:
    """Sub-linear body mass scaling shared by cardiac and work estimators."""

    REFERENCE_WEIGHT_KG: Final[float] = 75.0
    WEIGHT_EXPONENT: Final[float] = 0.222


# === Cardiac Load (0-40) ===
class CardiacLoadConstants:
    """Coefficients for the cardiac load component."""

    MAX_SCORE: Final[float] = 40.0
    HR_INTENSITY_EXPONENT: Final[float] = 1.5

    # Power fallback when no heart rate was recorded
    THRESHOLD_WATTS: Final[float] = 220.0
    MAX_POWER_INTENSITY: Final[float] = 1.3
    POWER_INTENSITY_EXPONENT: Final[float] = 1.2
    DURATION_WEIGHT: Final[float] = 0.6
    MAX_DURATION_FACTOR: Final[float] = 0.85
    POWER_FALLBACK_SCALE: Final[float] = 28.0  # ~28/40, weaker proxy than HR

    # Age adjustment: +0.5% per year over 30, capped at +30%
    REFERENCE_AGE: Final[float] = 30.0
    AGE_FACTOR_PER_YEAR: Final[float] = 0.005
    MAX_AGE_FACTOR: Final[float] = 1.3


# === Work Output (0-35) ===
class WorkOutputConstants:
    """Coefficients for the work output component."""

    MAX_SCORE: Final[float] = 35.0
    EXPECTED_WATTS: Final[float] = 150.0
    SCALE: Final[float] = 15.0


# === Pacing (0-15) ===
class PacingConstants:
    """Coefficients for the pacing component."""

    MAX_SCORE: Final[float] = 15.0
    SINGLE_PIECE_SCORE: Final[float] = 10.0
    CV_PENALTY: Final[float] = 10.0
    CONSISTENCY_SCALE: Final[float] = 12.0
    NEGATIVE_SPLIT_BONUS: Final[float] = 3.0


# === Economy (0-10) ===
class EconomyConstants:
    """Watts-per-stroke banding for the economy component."""

    MAX_SCORE: Final[float] = 10.0
    DEFAULT_SCORE: Final[float] = 5.0

    HIGH_WATTS_PER_STROKE: Final[float] = 8.0
    MID_WATTS_PER_STROKE: Final[float] = 6.0

    HIGH_BAND_SCORE: Final[float] = 6.0
    MID_BAND_SCORE: Final[float] = 8.0
    LOW_BAND_SCORE: Final[float] = 10.0


# === Effort Zones (0-100 EP) ===
class EffortZoneThresholds:
    """Upper bounds (inclusive) of each effort zone."""

    MAX_EFFORT_POINTS: Final[float] = 100.0
    RECOVERY_MAX: Final[float] = 25.0
    BUILDING_MAX: Final[float] = 50.0
    TRAINING_MAX: Final[float] = 75.0
    # Peak is everything above 75


# === Karvonen Heart Rate Zones ===
class KarvonenZoneFractions:
    """Heart rate zone boundaries as fractions of heart rate reserve."""

    ZONE_1_MIN: Final[float] = 0.50  # Recovery
    ZONE_2_MIN: Final[float] = 0.60  # Aerobic
    ZONE_3_MIN: Final[float] = 0.70  # Tempo
    ZONE_4_MIN: Final[float] = 0.80  # Threshold
    ZONE_5_MIN: Final[float] = 0.90  # Max
    ZONE_5_MAX: Final[float] = 1.00


# === Cardiovascular Efficiency ===
class EfficiencyThresholds:
    """Watts-per-beat lower bounds (inclusive) for each rating."""

    ELITE: Final[float] = 3.0
    EXCELLENT: Final[float] = 2.5
    GOOD: Final[float] = 2.0
    DEVELOPING: Final[float] = 1.5


# === Cardiac Drift ===
class DriftThresholds:
    """Drift percentage upper bounds (exclusive) and pacing-issue limits."""

    EXCELLENT_MAX: Final[float] = 3.0
    GOOD_MAX: Final[float] = 6.0
    MODERATE_MAX: Final[float] = 10.0

    PACING_ISSUE_POWER_DROP: Final[float] = 10.0
    PACING_ISSUE_DRIFT: Final[float] = 10.0


# === Heart Rate Trend ===
class TrendThresholds:
    """Rise thresholds (bpm) for heart rate trend classification."""

    ACCELERATION_RATIO: Final[float] = 1.5
    MIN_ACCELERATING_RISE: Final[float] = 5.0
    PLATEAU_LATE_RISE: Final[float] = 3.0
    MIN_PLATEAU_EARLY_RISE: Final[float] = 5.0


# === Minimum Samples ===
class MinimumSamples:
    """Minimum number of heart-rate tagged intervals per analysis."""

    DETAILED_DATA: Final[int] = 2
    DRIFT: Final[int] = 4
    TREND: Final[int] = 3
    ZONE_DISTRIBUTION: Final[int] = 2
    PACING: Final[int] = 2


# === Profile Defaults ===
class ProfileDefaults:
    """Fallbacks applied when an athlete's profile is incomplete."""

    AGE: Final[int] = 30
    WEIGHT_KG: Final[float] = 75.0
    HEIGHT_CM: Final[float] = 175.0
    MAX_HR: Final[int] = 190
    RESTING_HR: Final[int] = 50
    MAX_HR_AGE_BASE: Final[int] = 220  # 220 - age estimate


# === CSV Parsing ===
class CSVConstants:
    """Constants for CSV file parsing."""

    DEFAULT_SEPARATOR: Final[str] = ";"  # Semicolon-separated format
    DEFAULT_ENCODING: Final[str] = "utf-8"


# === File Extensions ===
class FileExtensions:
    """Common file extensions."""

    JSON: Final[str] = ".json"
