"""
Data access layer.

This package contains the loaders turning files into validated models.
"""

from .loader import WorkoutDataLoader

__all__ = [
    "WorkoutDataLoader",
]
