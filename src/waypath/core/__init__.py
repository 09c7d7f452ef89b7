"""
Core module - Shared utilities, configuration, and exceptions.
"""

from waypath.core.exceptions import (
    ConfigurationError,
    DegenerateSplineError,
    InfeasibleConstraintsError,
    TrajectoryError,
    TrajectoryGenerationError,
    WaypathError,
)
from waypath.core.logging import configure_logging, get_logger
from waypath.core.config import (
    ConfigManager,
    GeneratorConfig,
    LimitsConfig,
    PathConfig,
    RegionConfig,
    SamplingConfig,
    WaypointConfig,
)

__all__ = [
    # Exceptions
    "WaypathError",
    "ConfigurationError",
    "TrajectoryGenerationError",
    "DegenerateSplineError",
    "InfeasibleConstraintsError",
    "TrajectoryError",
    # Logging
    "configure_logging",
    "get_logger",
    # Config
    "ConfigManager",
    "GeneratorConfig",
    "LimitsConfig",
    "PathConfig",
    "RegionConfig",
    "SamplingConfig",
    "WaypointConfig",
]
