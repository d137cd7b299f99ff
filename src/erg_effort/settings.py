"""Application settings and configuration management."""

from pathlib import Path

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import CSVConstants, ProfileDefaults
from .exceptions import ConfigurationError


class Settings(BaseSettings):
    """
    Application settings for erg-effort.

    Settings are loaded in the following order of precedence (highest to lowest):
    1. YAML config file (when passed to load_settings)
    2. Environment variables (e.g., ERG_EFFORT_DEFAULT_MAX_HR)
    3. .env file (if found)
    4. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="ERG_EFFORT_", env_file=".env", extra="ignore"
    )

    # --- Profile Fallbacks ---
    # Applied once when resolving an athlete profile, never inside the formulas
    default_age: int = ProfileDefaults.AGE
    default_weight_kg: float = ProfileDefaults.WEIGHT_KG
    default_height_cm: float = ProfileDefaults.HEIGHT_CM
    default_max_hr: int = ProfileDefaults.MAX_HR
    default_resting_hr: int = ProfileDefaults.RESTING_HR

    # Use 220 - age instead of default_max_hr when no max HR is known
    estimate_max_hr_from_age: bool = False

    # --- File Paths ---
    output_dir: Path = Path("processed_data")
    enriched_file: Path | None = None  # Will be set based on output_dir
    daily_summary_file: Path | None = None  # Will be set based on output_dir

    csv_separator: str = CSVConstants.DEFAULT_SEPARATOR

    def __init__(self, **data):
        """Initialize the Settings object."""
        super().__init__(**data)
        # Set output file paths based on output_dir
        if self.enriched_file is None:
            self.enriched_file = self.output_dir / "workouts_enriched.csv"
        if self.daily_summary_file is None:
            self.daily_summary_file = self.output_dir / "daily_effort.csv"


def load_settings(config_file: Path | None = None) -> Settings:
    """Load settings from a YAML file, environment variables, and defaults."""
    if config_file:
        try:
            with open(config_file, encoding="utf-8") as f:
                yaml_settings = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot read config {config_file}: {e}") from e

        if not isinstance(yaml_settings, dict):
            raise ConfigurationError(f"Config {config_file} must be a mapping")

        # Join relative paths with the config file's directory
        for key in ("output_dir", "enriched_file", "daily_summary_file"):
            if key in yaml_settings and yaml_settings[key] is not None:
                path = Path(yaml_settings[key]).expanduser()
                if not path.is_absolute():
                    path = config_file.parent / path
                yaml_settings[key] = str(path)

        return Settings(**yaml_settings)

    return Settings()
