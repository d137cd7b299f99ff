"""
Service layer for coordinating business logic.

This package contains high-level services that coordinate multiple components
to accomplish business goals.
"""

from .analysis_service import AnalysisService, BatchResult

__all__ = [
    "AnalysisService",
    "BatchResult",
]
