"""
Custom exceptions for Waypath.

All Waypath exceptions inherit from WaypathError for easy catching.
"""

from typing import Any


class WaypathError(Exception):
    """Base exception for all Waypath errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(WaypathError):
    """Raised when configuration is invalid or missing."""

    pass


class TrajectoryGenerationError(WaypathError):
    """Raised when trajectory generation fails."""

    pass


class DegenerateSplineError(TrajectoryGenerationError):
    """Raised when waypoints cannot be fitted with a well-defined spline."""

    def __init__(
        self,
        message: str,
        segment: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.segment = segment


class InfeasibleConstraintsError(TrajectoryGenerationError):
    """Raised when the timing constraints admit no velocity profile."""

    def __init__(
        self,
        message: str,
        sample_index: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.sample_index = sample_index


class TrajectoryError(WaypathError):
    """Raised when a trajectory is constructed or queried incorrectly."""

    pass
