"""
Data models for the erg-effort package.

This module defines the inputs (athlete profile, workout telemetry) and the
outputs (effort score, heart rate analysis) of the scoring engine as frozen
Pydantic models. Every model is built fresh per call and never mutated.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .constants import TimeConstants


class ActivityModel(BaseModel):
    """Base for input models: immutable, finite numbers, camelCase aliases."""

    model_config = ConfigDict(
        frozen=True,
        allow_inf_nan=False,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ResultModel(BaseModel):
    """Base for engine outputs."""

    model_config = ConfigDict(frozen=True)


def _positive_or_none(v: float | None) -> float | None:
    # Performance monitors report 0 when no strap or rate sensor is paired
    if v is not None and v <= 0:
        return None
    return v


# ============================================================================
# Enumerations
# ============================================================================


class WorkoutType(str, Enum):
    """Catalogue of rowing pieces."""

    FIVE_HUNDRED = "five_hundred"
    ONE_THOUSAND = "one_thousand"
    TWO_THOUSAND = "two_thousand"
    FIVE_THOUSAND = "five_thousand"
    SIX_THOUSAND = "six_thousand"
    TEN_THOUSAND = "ten_thousand"
    HALF_MARATHON = "half_marathon"
    MARATHON = "marathon"
    ONE_MINUTE = "one_minute"
    STEADY_STATE = "steady_state"
    INTERVALS = "intervals"
    CUSTOM = "custom"
    DISTANCE = "distance"
    TIME = "time"

    @property
    def display_name(self) -> str:
        """Human-readable name of the piece."""
        return _WORKOUT_TYPE_NAMES[self]


_WORKOUT_TYPE_NAMES: dict[WorkoutType, str] = {
    WorkoutType.FIVE_HUNDRED: "500m",
    WorkoutType.ONE_THOUSAND: "1K",
    WorkoutType.TWO_THOUSAND: "2K Test",
    WorkoutType.FIVE_THOUSAND: "5K",
    WorkoutType.SIX_THOUSAND: "6K",
    WorkoutType.TEN_THOUSAND: "10K",
    WorkoutType.HALF_MARATHON: "Half Marathon",
    WorkoutType.MARATHON: "Marathon",
    WorkoutType.ONE_MINUTE: "1 Minute",
    WorkoutType.STEADY_STATE: "Steady State",
    WorkoutType.INTERVALS: "Intervals",
    WorkoutType.CUSTOM: "Workout",
    WorkoutType.DISTANCE: "Distance",
    WorkoutType.TIME: "Time",
}


class EffortZone(str, Enum):
    """Effort zones on the 0-100 EP scale."""

    RECOVERY = "recovery"
    BUILDING = "building"
    TRAINING = "training"
    PEAK = "peak"

    @property
    def label(self) -> str:
        """Display label of the zone."""
        return self.value.title()

    @property
    def description(self) -> str:
        """One-line description of the zone."""
        return _EFFORT_ZONE_DESCRIPTIONS[self]


_EFFORT_ZONE_DESCRIPTIONS: dict[EffortZone, str] = {
    EffortZone.RECOVERY: "Active recovery zone",
    EffortZone.BUILDING: "Aerobic base building",
    EffortZone.TRAINING: "Fitness gains zone",
    EffortZone.PEAK: "Maximum effort",
}


class EfficiencyRating(str, Enum):
    """Cardiovascular efficiency ratings (watts per beat above resting)."""

    ELITE = "elite"
    EXCELLENT = "excellent"
    GOOD = "good"
    DEVELOPING = "developing"
    BUILDING = "building"


class DriftRating(str, Enum):
    """Cardiac drift ratings."""

    EXCELLENT = "excellent"
    GOOD = "good"
    MODERATE = "moderate"
    HIGH = "high"
    PACING_ISSUE = "pacing_issue"


class TrendPattern(str, Enum):
    """Shape of the heart rate trajectory through a session."""

    STABLE = "stable"
    ACCELERATING = "accelerating"
    PLATEAUED = "plateaued"
    STEADY_CLIMB = "steady_climb"


# ============================================================================
# Inputs
# ============================================================================


class AthleteProfile(ActivityModel):
    """Fully resolved physiological profile of an athlete."""

    age: float = Field(..., description="Age in years")
    weight_kg: float = Field(..., gt=0, description="Body mass in kilograms")
    height_cm: float = Field(..., gt=0, description="Height in centimetres")
    max_hr: float = Field(..., gt=0, description="Maximum heart rate in bpm")
    resting_hr: float = Field(..., ge=0, description="Resting heart rate in bpm")

    @property
    def hr_reserve(self) -> float:
        """Heart rate reserve (Karvonen baseline)."""
        return self.max_hr - self.resting_hr


class Interval(ActivityModel):
    """A single split or work interval of a workout."""

    distance_metres: float = Field(..., description="Interval distance in metres")
    time_seconds: float = Field(..., description="Interval time in seconds")
    pace_seconds: float = Field(..., description="Pace in seconds per 500m")
    avg_heart_rate: float | None = Field(
        None, description="Average heart rate of the interval in bpm"
    )

    normalize_hr = field_validator("avg_heart_rate")(_positive_or_none)


class WorkoutRecord(ActivityModel):
    """Raw telemetry of one completed workout."""

    total_distance_metres: float = Field(..., description="Total distance in metres")
    total_time_seconds: float = Field(..., description="Total time in seconds")
    avg_heart_rate: float | None = Field(None, description="Average heart rate in bpm")
    avg_stroke_rate: float | None = Field(
        None, description="Average stroke rate in strokes per minute"
    )
    intervals: tuple[Interval, ...] | None = Field(
        None, description="Chronologically ordered splits or intervals"
    )

    workout_type: WorkoutType | None = Field(None, description="Kind of piece rowed")
    workout_date: datetime | None = Field(None, description="When the piece was rowed")
    average_split_seconds: float | None = Field(
        None, description="Average split in seconds per 500m"
    )

    normalize_rates = field_validator("avg_heart_rate", "avg_stroke_rate")(
        _positive_or_none
    )

    @field_validator("intervals")
    @classmethod
    def empty_intervals_to_none(
        cls, v: tuple[Interval, ...] | None
    ) -> tuple[Interval, ...] | None:
        """Treat an empty interval list as no interval data."""
        if v is not None and len(v) == 0:
            return None
        return v

    @property
    def total_minutes(self) -> float:
        """Total workout time in minutes."""
        return self.total_time_seconds / TimeConstants.SECONDS_PER_MINUTE

    @property
    def hr_intervals(self) -> tuple[Interval, ...]:
        """Intervals carrying their own heart rate, in order."""
        if not self.intervals:
            return ()
        return tuple(i for i in self.intervals if i.avg_heart_rate is not None)


# ============================================================================
# Effort Score
# ============================================================================


class EffortBreakdown(ResultModel):
    """Per-component contribution to the effort score."""

    cardiac_load: float = Field(..., ge=0, le=40, description="Cardiac load (0-40)")
    work_output: float = Field(..., ge=0, le=35, description="Work output (0-35)")
    pacing: float = Field(..., ge=0, le=15, description="Pacing (0-15)")
    economy: float = Field(..., ge=0, le=10, description="Economy (0-10)")

    @property
    def total(self) -> float:
        """Sum of the (rounded) components."""
        return self.cardiac_load + self.work_output + self.pacing + self.economy


class EffortResult(ResultModel):
    """Composite 0-100 effort score of a workout."""

    effort_points: float = Field(..., ge=0, le=100, description="Effort points")
    zone: EffortZone = Field(..., description="Effort zone")
    zone_label: str = Field(..., description="Display label of the zone")
    description: str = Field(..., description="Description of the zone")
    breakdown: EffortBreakdown = Field(..., description="Component breakdown")


# ============================================================================
# Heart Rate Analysis
# ============================================================================


class HeartRateZone(ResultModel):
    """A Karvonen heart rate zone with absolute bpm boundaries."""

    zone: int = Field(..., ge=1, le=5, description="Zone number")
    name: str = Field(..., description="Zone name")
    min_pct: float = Field(..., description="Lower bound as fraction of HRR")
    max_pct: float = Field(..., description="Upper bound as fraction of HRR")
    min_hr: int = Field(..., description="Lower bound in bpm")
    max_hr: int = Field(..., description="Upper bound in bpm")
    training_effect: str = Field(..., description="Training effect of the zone")

    def contains(self, hr: float) -> bool:
        """Whether a heart rate falls within the inclusive bpm range."""
        return self.min_hr <= hr <= self.max_hr


class HRAIntensity(ResultModel):
    """Session intensity from average heart rate."""

    percent_max: float = Field(..., description="Average HR as % of max HR")
    percent_hrr: float = Field(..., description="Average HR as % of HR reserve")
    bpm: float = Field(..., description="Average heart rate in bpm")
    max_hr: float = Field(..., description="Athlete max heart rate in bpm")


class HRAZoneInfo(ResultModel):
    """Zone of the session's average heart rate."""

    zone: int = Field(..., ge=1, le=5, description="Zone number")
    name: str = Field(..., description="Zone name")
    training_effect: str = Field(..., description="Training effect of the zone")


class HRAEfficiency(ResultModel):
    """Watts produced per heartbeat above resting."""

    watts_per_beat: float = Field(..., description="Watts per beat above resting")
    rating: EfficiencyRating = Field(..., description="Efficiency rating")
    insight: str = Field("", description="Short interpretation")


class HRADrift(ResultModel):
    """Cardiac drift between first and second half of a session."""

    percent: float = Field(..., description="Rise in HR-per-watt (%)")
    power_drop_percent: float = Field(..., description="Fall in power (%)")
    rating: DriftRating = Field(..., description="Drift rating")
    insight: str = Field(..., description="Short interpretation")


class HRATrend(ResultModel):
    """Heart rate trajectory across intervals."""

    pattern: TrendPattern = Field(..., description="Trend pattern")
    start_hr: float = Field(..., description="Heart rate of the first interval")
    end_hr: float = Field(..., description="Heart rate of the last interval")
    rise: float = Field(..., description="End minus start heart rate")
    insight: str = Field(..., description="Short interpretation")


class ZoneTime(ResultModel):
    """Time accumulated in one heart rate zone."""

    name: str = Field(..., description="Zone name")
    seconds: float = Field(..., description="Seconds spent in zone")
    percent: float = Field(..., description="Share of HR-tagged interval time (%)")


class HRAResult(ResultModel):
    """Heart rate analysis report."""

    available: bool = Field(..., description="Whether HR data was recorded")
    reason: str | None = Field(None, description="Why the report is unavailable")
    has_detailed_data: bool = Field(
        False, description="At least two intervals carry their own HR"
    )
    intensity: HRAIntensity | None = None
    zone: HRAZoneInfo | None = None
    efficiency: HRAEfficiency | None = None
    drift: HRADrift | None = None
    trend: HRATrend | None = None
    zone_distribution: dict[int, ZoneTime] | None = None


class WorkoutAnalysis(ResultModel):
    """Effort score and heart rate analysis of one workout."""

    effort: EffortResult
    heart_rate: HRAResult
