"""
Waypath - Spline trajectory generation for planar robots.

Fits smooth curves through waypoint poses, samples them with bounded
discretization error and time-parameterizes the result under pluggable
velocity and acceleration constraints.
"""

__version__ = "0.1.0"
__author__ = "Waypath Contributors"

from waypath.core.exceptions import (
    DegenerateSplineError,
    InfeasibleConstraintsError,
    WaypathError,
)
from waypath.generator import TrajectoryGenerator
from waypath.geometry.pose import CurvedPose, Pose2d, Twist2d
from waypath.trajectory.trajectory import Trajectory

__all__ = [
    "__version__",
    "CurvedPose",
    "DegenerateSplineError",
    "InfeasibleConstraintsError",
    "Pose2d",
    "Trajectory",
    "TrajectoryGenerator",
    "Twist2d",
    "WaypathError",
]
