"""Unit tests for the analysis service."""

from datetime import datetime
from pathlib import Path

import pandas as pd
import pytest

from erg_effort.exceptions import DataLoadError
from erg_effort.models import AthleteProfile, EffortZone, WorkoutRecord
from erg_effort.services import AnalysisService
from erg_effort.settings import Settings


@pytest.fixture
def service(settings: Settings) -> AnalysisService:
    """Service with settings writing into a temporary directory."""
    return AnalysisService(settings)


class TestSingleWorkout:
    """Test the per-workout entry points."""

    def test_list_and_detail_views_agree(
        self,
        service: AnalysisService,
        default_profile: AthleteProfile,
        interval_2k: WorkoutRecord,
    ):
        """Test that effort points equal the full analysis score."""
        analysis = service.analyze(default_profile, interval_2k)

        assert service.effort_points(default_profile, interval_2k) == (
            analysis.effort.effort_points
        )
        assert analysis.heart_rate.has_detailed_data is True

    def test_share_text(
        self,
        service: AnalysisService,
        default_profile: AthleteProfile,
        steady_2k: WorkoutRecord,
    ):
        """Test that the share message carries the score."""
        text = service.share_text(default_profile, steady_2k)

        assert "63.1 EP (Training)" in text


class TestBatch:
    """Test scoring a workout log."""

    def test_analyze_frame(
        self,
        service: AnalysisService,
        default_profile: AthleteProfile,
        workouts_csv: Path,
    ):
        """Test one enriched row per workout."""
        df = service.loader.load_workouts(workouts_csv)

        enriched, skipped = service.analyze_frame(default_profile, df)

        assert skipped == 0
        assert len(enriched) == 3
        assert enriched.loc[0, "effort_points"] == 63.1
        assert enriched.loc[0, "effort_zone"] == EffortZone.TRAINING.value
        assert pd.isna(enriched.loc[0, "hr_zone"])
        assert enriched.loc[2, "drift_rating"] == "moderate"
        assert enriched.loc[2, "trend_pattern"] == "steady_climb"

    def test_invalid_rows_skipped(
        self,
        service: AnalysisService,
        default_profile: AthleteProfile,
        caplog,
    ):
        """Test that rows failing validation are skipped with a warning."""
        df = pd.DataFrame(
            {
                "total_distance_metres": [2000, 2000],
                "total_time_seconds": [420, None],
            }
        )

        enriched, skipped = service.analyze_frame(default_profile, df)

        assert skipped == 1
        assert len(enriched) == 1
        assert "Skipping workout" in caplog.text

    def test_daily_summary(
        self,
        service: AnalysisService,
        default_profile: AthleteProfile,
        workouts_csv: Path,
    ):
        """Test averaging effort points per calendar day."""
        df = service.loader.load_workouts(workouts_csv)
        enriched, _ = service.analyze_frame(default_profile, df)

        daily = service.daily_summary(enriched)

        assert list(daily.columns) == ["date", "workouts", "effort_points", "zone"]
        assert list(daily["workouts"]) == [2, 1]
        expected = enriched.loc[[0, 1], "effort_points"].mean()
        assert daily.loc[0, "effort_points"] == pytest.approx(expected, abs=0.05)
        assert daily.loc[1, "effort_points"] == enriched.loc[2, "effort_points"]

    def test_daily_zone_from_unrounded_mean(self, service: AnalysisService):
        """Test that the day zone is classified before the mean is rounded."""
        enriched = pd.DataFrame(
            {
                "workout_date": [datetime(2024, 3, 5), datetime(2024, 3, 5)],
                "effort_points": [25.0, 25.08],
            }
        )

        daily = service.daily_summary(enriched)

        assert daily.loc[0, "effort_points"] == 25.0
        assert daily.loc[0, "zone"] == EffortZone.BUILDING.value

    def test_daily_summary_without_dates(self, service: AnalysisService):
        """Test that undated workouts produce an empty summary."""
        enriched = pd.DataFrame({"workout_date": [None], "effort_points": [50.0]})

        daily = service.daily_summary(enriched)

        assert daily.empty
        assert list(daily.columns) == ["date", "workouts", "effort_points", "zone"]

    def test_process_file_writes_outputs(
        self,
        service: AnalysisService,
        settings: Settings,
        default_profile: AthleteProfile,
        workouts_csv: Path,
    ):
        """Test that both CSV files are written."""
        result = service.process_file(default_profile, workouts_csv)

        assert len(result.enriched_df) == 3
        assert settings.enriched_file.exists()
        assert settings.daily_summary_file.exists()

        saved = pd.read_csv(settings.daily_summary_file, sep=";")
        assert len(saved) == 2

    def test_process_missing_file(
        self,
        service: AnalysisService,
        default_profile: AthleteProfile,
        tmp_path: Path,
    ):
        """Test that a missing log surfaces as a load error."""
        with pytest.raises(DataLoadError):
            service.process_file(default_profile, tmp_path / "missing.csv")
