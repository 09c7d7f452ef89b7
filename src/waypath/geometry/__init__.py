"""
Geometry module - Planar pose algebra.
"""

from waypath.geometry.pose import (
    FLIP,
    CurvedPose,
    Pose2d,
    Twist2d,
    normalize_angle,
    shortest_arc,
)

__all__ = [
    "FLIP",
    "CurvedPose",
    "Pose2d",
    "Twist2d",
    "normalize_angle",
    "shortest_arc",
]
