"""
High-level service for scoring workouts.

This service is the single entry point used by every consumer of the engine:
the workout detail view (full analysis), the workout list (effort points
only), the calendar (daily averages) and the share formatter. All of them go
through the same computation, so no view keeps its own copy of the formula.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import pandas as pd

from ..analysis import EffortScorer, HeartRateAnalyzer, classify_effort_zone
from ..data import WorkoutDataLoader
from ..exceptions import InvalidDataError, ProcessingError
from ..formatting import build_share_text
from ..models import AthleteProfile, WorkoutAnalysis, WorkoutRecord
from ..settings import Settings

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """
    Result of scoring a workout log.

    Attributes:
        enriched_df: One row per scored workout
        daily_df: Calendar aggregation of the enriched rows
        skipped: Number of rows that could not be scored
    """

    enriched_df: pd.DataFrame
    daily_df: pd.DataFrame
    skipped: int = 0


class AnalysisServiceProtocol(Protocol):
    """Protocol for analysis services."""

    def analyze(
        self, profile: AthleteProfile, workout: WorkoutRecord
    ) -> WorkoutAnalysis:
        """Analyze a single workout."""
        ...


class AnalysisService:
    """
    Service coordinating workout scoring for all consumers.

    Holds no per-workout state; every call works on its own snapshot.
    """

    def __init__(self, settings: Settings):
        """
        Initialize the analysis service.

        Args:
            settings: Application settings
        """
        self.settings = settings
        self.logger = logging.getLogger(__name__)

        self.loader = WorkoutDataLoader(settings)
        self.effort_scorer = EffortScorer()
        self.heart_rate_analyzer = HeartRateAnalyzer()

    def analyze(
        self, profile: AthleteProfile, workout: WorkoutRecord
    ) -> WorkoutAnalysis:
        """
        Full analysis of one workout (detail view).

        Args:
            profile: Resolved athlete profile
            workout: Workout telemetry

        Returns:
            Effort score and heart rate analysis
        """
        return WorkoutAnalysis(
            effort=self.effort_scorer.score(profile, workout),
            heart_rate=self.heart_rate_analyzer.analyze(profile, workout),
        )

    def effort_points(self, profile: AthleteProfile, workout: WorkoutRecord) -> float:
        """Effort points only (list and feed views)."""
        return self.effort_scorer.score(profile, workout).effort_points

    def share_text(self, profile: AthleteProfile, workout: WorkoutRecord) -> str:
        """Share message of a workout."""
        return build_share_text(workout, self.effort_scorer.score(profile, workout))

    def analyze_frame(
        self, profile: AthleteProfile, workouts_df: pd.DataFrame
    ) -> tuple[pd.DataFrame, int]:
        """
        Score every workout of a workout log.

        Rows that fail validation are skipped with a warning.

        Args:
            profile: Resolved athlete profile
            workouts_df: DataFrame as returned by WorkoutDataLoader.load_workouts

        Returns:
            Tuple of (enriched DataFrame, number of skipped rows)
        """
        rows = []
        skipped = 0

        for index, row in workouts_df.iterrows():
            try:
                workout = self.loader.record_from_row(row, source=f"row {index}")
            except InvalidDataError as e:
                self.logger.warning(f"Skipping workout: {e}")
                skipped += 1
                continue

            rows.append(self._summarize(profile, workout))

        self.logger.info(f"Scored {len(rows)} workouts, skipped {skipped}")
        return pd.DataFrame(rows, columns=ENRICHED_COLUMNS), skipped

    def daily_summary(self, enriched_df: pd.DataFrame) -> pd.DataFrame:
        """
        Average effort points per calendar day.

        Args:
            enriched_df: DataFrame as returned by analyze_frame

        Returns:
            DataFrame with date, workouts, effort_points and zone columns,
            sorted by date. Rows without a date are ignored.
        """
        dated = enriched_df.dropna(subset=["workout_date"])
        if dated.empty:
            return pd.DataFrame(columns=DAILY_COLUMNS)

        dates = pd.to_datetime(dated["workout_date"]).dt.date
        daily = (
            dated.groupby(dates)["effort_points"]
            .agg(workouts="count", effort_points="mean")
            .reset_index()
            .rename(columns={"workout_date": "date"})
        )
        daily["zone"] = [
            classify_effort_zone(points).value for points in daily["effort_points"]
        ]
        daily["effort_points"] = daily["effort_points"].round(1)
        return daily[DAILY_COLUMNS]

    def process_file(self, profile: AthleteProfile, workouts_file: Path) -> BatchResult:
        """
        Score a workout log file and write the enriched and daily CSVs.

        Args:
            profile: Resolved athlete profile
            workouts_file: Path to the workout log CSV

        Returns:
            BatchResult with both DataFrames

        Raises:
            DataLoadError: If the workout log cannot be loaded
            ProcessingError: If scoring or saving fails
        """
        workouts_df = self.loader.load_workouts(workouts_file)

        try:
            enriched_df, skipped = self.analyze_frame(profile, workouts_df)
            daily_df = self.daily_summary(enriched_df)
            result = BatchResult(
                enriched_df=enriched_df, daily_df=daily_df, skipped=skipped
            )
            self.save_results(result)
        except Exception as e:
            self.logger.error(f"Batch processing failed: {e}")
            raise ProcessingError(f"Error processing {workouts_file}: {e}") from e

        return result

    def save_results(self, result: BatchResult) -> None:
        """Write enriched and daily DataFrames to the configured files."""
        self.settings.output_dir.mkdir(parents=True, exist_ok=True)

        result.enriched_df.to_csv(
            self.settings.enriched_file, index=False, sep=self.settings.csv_separator
        )
        self.logger.info(f"Saved enriched workouts to {self.settings.enriched_file}")

        result.daily_df.to_csv(
            self.settings.daily_summary_file,
            index=False,
            sep=self.settings.csv_separator,
        )
        self.logger.info(f"Saved daily summary to {self.settings.daily_summary_file}")

    def _summarize(
        self, profile: AthleteProfile, workout: WorkoutRecord
    ) -> dict[str, object]:
        analysis = self.analyze(profile, workout)
        effort = analysis.effort
        hra = analysis.heart_rate

        return {
            "workout_date": workout.workout_date,
            "workout_type": (
                workout.workout_type.value if workout.workout_type else None
            ),
            "total_distance_metres": workout.total_distance_metres,
            "total_time_seconds": workout.total_time_seconds,
            "effort_points": effort.effort_points,
            "effort_zone": effort.zone.value,
            "cardiac_load": effort.breakdown.cardiac_load,
            "work_output": effort.breakdown.work_output,
            "pacing": effort.breakdown.pacing,
            "economy": effort.breakdown.economy,
            "hr_zone": hra.zone.zone if hra.zone else None,
            "efficiency_rating": (
                hra.efficiency.rating.value if hra.efficiency else None
            ),
            "drift_rating": hra.drift.rating.value if hra.drift else None,
            "trend_pattern": hra.trend.pattern.value if hra.trend else None,
        }


ENRICHED_COLUMNS = [
    "workout_date",
    "workout_type",
    "total_distance_metres",
    "total_time_seconds",
    "effort_points",
    "effort_zone",
    "cardiac_load",
    "work_output",
    "pacing",
    "economy",
    "hr_zone",
    "efficiency_rating",
    "drift_rating",
    "trend_pattern",
]

DAILY_COLUMNS = ["date", "workouts", "effort_points", "zone"]
