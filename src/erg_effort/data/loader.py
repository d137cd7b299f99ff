"""
Data loading functionality.

This module provides a clean interface for loading athlete profiles and
workouts from JSON, YAML and CSV files.
"""

import json
from datetime import date, datetime
import logging
from pathlib import Path
from typing import Any, Protocol

import numpy as np
import pandas as pd
import pydantic
import yaml

from ..constants import CSVConstants, FileExtensions
from ..exceptions import DataLoadError, InvalidDataError
from ..models import AthleteProfile, WorkoutRecord
from ..profile import resolve_profile
from ..settings import Settings

logger = logging.getLogger(__name__)

# Columns of a workout log CSV
REQUIRED_COLUMNS = ["total_distance_metres", "total_time_seconds"]
OPTIONAL_COLUMNS = [
    "workout_date",
    "workout_type",
    "avg_heart_rate",
    "avg_stroke_rate",
    "average_split_seconds",
    "intervals",
]

# Profile document keys accepted by resolve_profile
PROFILE_KEYS = ("birth_date", "age", "weight_kg", "height_cm", "max_hr", "resting_hr")


class DataLoaderProtocol(Protocol):
    """Protocol for data loaders."""

    def load_workout(self, path: Path) -> WorkoutRecord:
        """Load a single workout."""
        ...

    def load_workouts(self, path: Path) -> pd.DataFrame:
        """Load a workout log."""
        ...


class WorkoutDataLoader:
    """
    Handles loading of athlete profiles and workout data from files.

    This class encapsulates all file I/O of the package, so the engine only
    ever sees validated models.
    """

    def __init__(self, settings: Settings):
        """
        Initialize the data loader.

        Args:
            settings: Application settings containing defaults and CSV format
        """
        self.settings = settings
        self.logger = logging.getLogger(__name__)

    def load_workout(self, path: Path) -> WorkoutRecord:
        """
        Load one workout from a JSON or YAML document.

        Keys may be snake_case or camelCase.

        Args:
            path: Path to the document

        Returns:
            Validated WorkoutRecord

        Raises:
            DataLoadError: If the file cannot be read or parsed
            InvalidDataError: If the document is not a valid workout
        """
        document = self._read_document(path)
        self.logger.debug(f"Loaded workout document from {path}")
        return self._validate_workout(document, source=str(path))

    def load_profile(self, path: Path | None = None) -> AthleteProfile:
        """
        Load and resolve an athlete profile.

        Missing fields fall back to the settings defaults; without a path the
        default profile is returned.

        Args:
            path: Path to a JSON or YAML profile document

        Returns:
            Resolved AthleteProfile

        Raises:
            DataLoadError: If the file cannot be read or parsed
            InvalidDataError: If the resolved profile is invalid
        """
        document: dict[str, Any] = {}
        if path is not None:
            document = self._read_document(path)
            unknown = set(document) - set(PROFILE_KEYS)
            if unknown:
                self.logger.warning(
                    f"Ignoring unknown profile fields: {', '.join(sorted(unknown))}"
                )

        fields = {key: document.get(key) for key in PROFILE_KEYS}
        if fields["birth_date"] is not None:
            fields["birth_date"] = self._parse_birth_date(fields["birth_date"], path)

        try:
            return resolve_profile(self.settings, **fields)
        except pydantic.ValidationError as e:
            raise InvalidDataError(f"Invalid athlete profile in {path}: {e}") from e

    def load_workouts(self, path: Path) -> pd.DataFrame:
        """
        Load a workout log from CSV.

        Args:
            path: Path to the CSV file

        Returns:
            DataFrame with one row per workout

        Raises:
            DataLoadError: If loading fails or required columns are missing
        """
        if not path.exists():
            raise DataLoadError(f"Workouts file not found: {path}")

        try:
            self.logger.info(f"Loading workouts from {path}")
            df = pd.read_csv(
                path,
                sep=self.settings.csv_separator,
                encoding=CSVConstants.DEFAULT_ENCODING,
            )
        except Exception as e:
            raise DataLoadError(f"Failed to load workouts: {e}") from e

        missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
        if missing:
            raise DataLoadError(
                f"Workouts file {path} is missing columns: {', '.join(missing)}"
            )

        if "workout_date" in df.columns:
            df["workout_date"] = pd.to_datetime(df["workout_date"])

        self.logger.info(f"Loaded {len(df)} workouts")
        return df

    def records_from_frame(self, df: pd.DataFrame) -> list[WorkoutRecord]:
        """
        Convert a workout log into validated records.

        Args:
            df: DataFrame as returned by load_workouts

        Returns:
            One WorkoutRecord per row, in row order

        Raises:
            InvalidDataError: If a row is not a valid workout
        """
        return [
            self.record_from_row(row, source=f"row {index}")
            for index, row in df.iterrows()
        ]

    def record_from_row(self, row: pd.Series, source: str = "row") -> WorkoutRecord:
        """Convert one workout log row into a WorkoutRecord."""
        document: dict[str, Any] = {}
        for column in REQUIRED_COLUMNS + OPTIONAL_COLUMNS:
            if column not in row.index:
                continue
            value = row[column]
            if not isinstance(value, (str, list, tuple)) and pd.isna(value):
                continue
            if isinstance(value, np.generic):
                value = value.item()
            if column == "intervals":
                value = self._parse_intervals(value, source)
            elif column == "workout_date":
                value = pd.Timestamp(value).to_pydatetime()
            document[column] = value

        return self._validate_workout(document, source=source)

    def _parse_birth_date(self, value: Any, path: Path | None) -> date:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if not isinstance(value, str):
            raise InvalidDataError(f"Invalid birth_date in {path}: {value!r}")

        try:
            parsed = pd.Timestamp(value)
        except (ValueError, TypeError) as e:
            raise InvalidDataError(f"Invalid birth_date in {path}: {e}") from e
        if pd.isna(parsed):
            raise InvalidDataError(f"Invalid birth_date in {path}: {value!r}")
        return parsed.date()

    def _parse_intervals(self, value: Any, source: str) -> list[dict[str, Any]]:
        if not isinstance(value, str):
            return value
        if not value.strip():
            return []
        try:
            return json.loads(value)
        except json.JSONDecodeError as e:
            raise InvalidDataError(f"Invalid intervals JSON in {source}: {e}") from e

    def _validate_workout(self, document: dict[str, Any], source: str) -> WorkoutRecord:
        try:
            return WorkoutRecord.model_validate(document)
        except pydantic.ValidationError as e:
            raise InvalidDataError(f"Invalid workout in {source}: {e}") from e

    def _read_document(self, path: Path) -> dict[str, Any]:
        if not path.exists():
            raise DataLoadError(f"File not found: {path}")

        try:
            with open(path, encoding=CSVConstants.DEFAULT_ENCODING) as f:
                if path.suffix.lower() == FileExtensions.JSON:
                    document = json.load(f)
                else:
                    document = yaml.safe_load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise DataLoadError(f"Failed to read {path}: {e}") from e

        if not isinstance(document, dict):
            raise DataLoadError(f"Expected a mapping in {path}")
        return document
