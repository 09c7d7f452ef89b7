"""
Trajectory module - Immutable time-indexed trajectories and cursors.
"""

from waypath.trajectory.iterator import TrajectoryIterator
from waypath.trajectory.trajectory import Trajectory

__all__ = ["Trajectory", "TrajectoryIterator"]
