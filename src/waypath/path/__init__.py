"""
Path module - Spline fitting, adaptive sampling and arc-length indexing.
"""

from waypath.path.distance_view import DistanceView
from waypath.path.sampler import (
    DEFAULT_MAX_DTHETA,
    DEFAULT_MAX_DX,
    DEFAULT_MAX_DY,
    fit,
    sample_spline,
)
from waypath.path.spline import QuinticHermiteSpline

__all__ = [
    "DEFAULT_MAX_DTHETA",
    "DEFAULT_MAX_DX",
    "DEFAULT_MAX_DY",
    "DistanceView",
    "QuinticHermiteSpline",
    "fit",
    "sample_spline",
]
