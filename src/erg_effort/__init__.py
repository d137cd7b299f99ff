"""erg-effort - effort scoring and heart rate analysis for rowing workouts."""

__version__ = "1.0.0"

from . import analysis, constants, data, exceptions, metrics, models, services
from .analysis import (
    EffortScorer,
    HeartRateAnalyzer,
    analyze_heart_rate,
    analyze_workout,
    calculate_effort,
)
from .data import WorkoutDataLoader
from .metrics import (
    CardiacLoadCalculator,
    DriftCalculator,
    EconomyCalculator,
    EfficiencyCalculator,
    HeartRateZoneCalculator,
    PacingCalculator,
    TrendCalculator,
    WorkOutputCalculator,
    ZoneDistributionCalculator,
)
from .models import (
    AthleteProfile,
    EffortResult,
    EffortZone,
    HRAResult,
    Interval,
    WorkoutAnalysis,
    WorkoutRecord,
    WorkoutType,
)
from .profile import resolve_profile
from .services import AnalysisService
from .settings import Settings, load_settings


def get_version() -> str:
    """Get the current version of erg_effort."""
    return __version__


def get_package_info() -> dict[str, str]:
    """Get package information including name and version."""
    return {
        "name": "erg-effort",
        "version": __version__,
        "description": "Effort scoring and heart rate analysis for rowing workouts",
    }


__all__ = [
    # Version & Info
    "get_version",
    "get_package_info",
    # Entry Points
    "analyze_heart_rate",
    "analyze_workout",
    "calculate_effort",
    "resolve_profile",
    # Models
    "AthleteProfile",
    "EffortResult",
    "EffortZone",
    "HRAResult",
    "Interval",
    "WorkoutAnalysis",
    "WorkoutRecord",
    "WorkoutType",
    # Calculators
    "CardiacLoadCalculator",
    "DriftCalculator",
    "EconomyCalculator",
    "EfficiencyCalculator",
    "HeartRateZoneCalculator",
    "PacingCalculator",
    "TrendCalculator",
    "WorkOutputCalculator",
    "ZoneDistributionCalculator",
    # Analysis Layer
    "EffortScorer",
    "HeartRateAnalyzer",
    # Data Layer
    "WorkoutDataLoader",
    # Services
    "AnalysisService",
    # Settings
    "Settings",
    "load_settings",
    # Modules
    "analysis",
    "constants",
    "data",
    "exceptions",
    "metrics",
    "models",
    "services",
]
