"""
Timing module - Constraints and velocity-profile integration.
"""

from waypath.timing.constraints import (
    AccelerationLimitConstraint,
    CentripetalAccelerationConstraint,
    MaxVelocityConstraint,
    MinMaxAcceleration,
    TimingConstraint,
    VelocityLimitRegionConstraint,
)
from waypath.timing.parameterizer import parameterize
from waypath.timing.state import TimedState

__all__ = [
    "AccelerationLimitConstraint",
    "CentripetalAccelerationConstraint",
    "MaxVelocityConstraint",
    "MinMaxAcceleration",
    "TimedState",
    "TimingConstraint",
    "VelocityLimitRegionConstraint",
    "parameterize",
]
