"""
Custom exceptions for the erg-effort package.

The scoring engine itself never raises for numeric input; these exceptions
cover the layers around it (configuration, loading, batch processing).
"""


class ErgEffortError(Exception):
    """Base exception for all erg-effort errors."""


class ConfigurationError(ErgEffortError):
    """Raised when there is an issue with configuration settings."""


class ValidationError(ErgEffortError):
    """Raised when data validation fails."""


class InvalidDataError(ValidationError):
    """Raised when input data is invalid or missing required fields."""


class DataLoadError(ErgEffortError):
    """Raised when there is an error loading data files."""


class ProcessingError(ErgEffortError):
    """Raised when there is an error processing a batch of workouts."""
