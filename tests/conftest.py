"""
Shared pytest fixtures for erg-effort tests.

This module provides reusable fixtures for:
- Settings configurations
- Athlete profiles
- Workouts (steady pieces, interval sessions, heart rate data)
- Temporary files (workout documents, workout logs)
"""

import json
from datetime import datetime
from pathlib import Path

import pandas as pd
import pytest

from erg_effort.models import AthleteProfile, Interval, WorkoutRecord
from erg_effort.settings import Settings

# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def temp_config_file(tmp_path: Path) -> Path:
    """Create a temporary YAML config file path for testing."""
    return tmp_path / "config.yaml"


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Provide default settings writing into a temporary directory."""
    return Settings(output_dir=tmp_path / "processed_data")


# ============================================================================
# Athlete Fixtures
# ============================================================================


@pytest.fixture
def default_profile() -> AthleteProfile:
    """Provide the default athlete: 30 years, 75kg, max HR 190, rest 50."""
    return AthleteProfile(
        age=30, weight_kg=75.0, height_cm=175.0, max_hr=190, resting_hr=50
    )


# ============================================================================
# Workout Fixtures
# ============================================================================


def make_intervals(
    times: list[float],
    heart_rates: list[float | None] | None = None,
    distance: float = 500.0,
) -> tuple[Interval, ...]:
    """Build equal-distance intervals from their times (and heart rates)."""
    heart_rates = heart_rates or [None] * len(times)
    return tuple(
        Interval(
            distance_metres=distance,
            time_seconds=time,
            pace_seconds=time / distance * 500 if distance else 0.0,
            avg_heart_rate=hr,
        )
        for time, hr in zip(times, heart_rates)
    )


@pytest.fixture
def intervals_from_times():
    """Provide the interval builder to tests."""
    return make_intervals


@pytest.fixture
def steady_2k() -> WorkoutRecord:
    """
    Provide a 2000m piece in 7:00 without HR, stroke rate or splits.

    Average power is about 302.3W (1:45.0 /500m).
    """
    return WorkoutRecord(total_distance_metres=2000, total_time_seconds=420)


@pytest.fixture
def hr_2k() -> WorkoutRecord:
    """Provide the same 2000m piece with an average HR of 150 bpm."""
    return WorkoutRecord(
        total_distance_metres=2000, total_time_seconds=420, avg_heart_rate=150
    )


@pytest.fixture
def interval_2k() -> WorkoutRecord:
    """
    Provide a 4 x 500m session at an even 1:45 split with rising HR.

    Interval heart rates: 140, 142, 150, 152.
    """
    return WorkoutRecord(
        total_distance_metres=2000,
        total_time_seconds=420,
        avg_heart_rate=146,
        avg_stroke_rate=30,
        intervals=make_intervals([105, 105, 105, 105], [140, 142, 150, 152]),
        workout_type="two_thousand",
        workout_date=datetime(2024, 3, 5, 7, 30),
    )


# ============================================================================
# File Fixtures
# ============================================================================


@pytest.fixture
def workout_json_file(tmp_path: Path) -> Path:
    """Write a camelCase workout document as JSON."""
    path = tmp_path / "workout.json"
    document = {
        "totalDistanceMetres": 2000,
        "totalTimeSeconds": 420,
        "workoutType": "two_thousand",
        "workoutDate": "2024-03-05T07:30:00",
    }
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


@pytest.fixture
def profile_yaml_file(tmp_path: Path) -> Path:
    """Write a partial athlete profile as YAML."""
    path = tmp_path / "athlete.yaml"
    path.write_text("age: 40\nweight_kg: 82.5\nmax_hr: 185\n", encoding="utf-8")
    return path


@pytest.fixture
def workouts_csv(tmp_path: Path) -> Path:
    """
    Write a semicolon-separated workout log with three workouts.

    The first two share a date; the third has interval data.
    """
    intervals = json.dumps(
        [
            {
                "distance_metres": 500,
                "time_seconds": 105,
                "pace_seconds": 105,
                "avg_heart_rate": hr,
            }
            for hr in (140, 142, 150, 152)
        ]
    )
    df = pd.DataFrame(
        {
            "workout_date": ["2024-03-05", "2024-03-05", "2024-03-06"],
            "workout_type": ["two_thousand", "steady_state", "intervals"],
            "total_distance_metres": [2000, 6000, 2000],
            "total_time_seconds": [420, 1560, 420],
            "avg_heart_rate": [None, 140, 146],
            "avg_stroke_rate": [None, 20, 30],
            "intervals": [None, None, intervals],
        }
    )
    path = tmp_path / "workouts.csv"
    df.to_csv(path, sep=";", index=False)
    return path
