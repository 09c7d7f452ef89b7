"""
End-to-end trajectory generation.

Chains: waypoints -> spline fit + adaptive sampling -> distance view ->
time parameterization -> trajectory.

Generation is a pure function of its inputs. It runs synchronously, shares
no mutable state between calls and either returns a complete trajectory or
raises; a partial trajectory is never returned.

Usage::

    generator = TrajectoryGenerator()
    trajectory = generator.generate(
        waypoints=[Pose2d(0, 0, 0), Pose2d(10, 5, 0)],
        constraints=[CentripetalAccelerationConstraint(4.0)],
        start_velocity=0.0,
        end_velocity=0.0,
        max_velocity=10.0,
        max_acceleration=4.0,
    )
"""

import time
from typing import Sequence

from waypath.core.config import GeneratorConfig
from waypath.core.logging import get_logger
from waypath.geometry.pose import FLIP, Pose2d
from waypath.path.distance_view import DistanceView
from waypath.path.sampler import DEFAULT_MAX_DTHETA, DEFAULT_MAX_DX, DEFAULT_MAX_DY, fit
from waypath.timing.constraints import (
    AccelerationLimitConstraint,
    CentripetalAccelerationConstraint,
    TimingConstraint,
    VelocityLimitRegionConstraint,
)
from waypath.timing.parameterizer import parameterize
from waypath.trajectory.trajectory import Trajectory

logger = get_logger(__name__)


def constraints_from_config(config: GeneratorConfig) -> list[TimingConstraint]:
    """Build the constraint list described by ``config.limits``."""
    limits = config.limits
    constraints: list[TimingConstraint] = []
    if limits.max_centripetal_acceleration is not None:
        constraints.append(
            CentripetalAccelerationConstraint(limits.max_centripetal_acceleration)
        )
    if limits.max_deceleration is not None:
        constraints.append(
            AccelerationLimitConstraint(limits.max_acceleration, limits.max_deceleration)
        )
    for region in limits.regions:
        constraints.append(
            VelocityLimitRegionConstraint(
                region.min_corner, region.max_corner, region.velocity_limit
            )
        )
    return constraints


class TrajectoryGenerator:
    """
    Generates time-parameterized trajectories through waypoints.

    Args:
        max_dx: Maximum forward step between path samples
        max_dy: Maximum lateral step between path samples
        max_dtheta: Maximum heading step between path samples (radians)
    """

    def __init__(
        self,
        max_dx: float = DEFAULT_MAX_DX,
        max_dy: float = DEFAULT_MAX_DY,
        max_dtheta: float = DEFAULT_MAX_DTHETA,
    ):
        self.max_dx = max_dx
        self.max_dy = max_dy
        self.max_dtheta = max_dtheta

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> "TrajectoryGenerator":
        sampling = config.sampling
        return cls(sampling.max_dx, sampling.max_dy, sampling.max_dtheta)

    def generate(
        self,
        waypoints: Sequence[Pose2d],
        constraints: Sequence[TimingConstraint],
        start_velocity: float,
        end_velocity: float,
        max_velocity: float,
        max_acceleration: float,
        reversed: bool = False,
    ) -> Trajectory:
        """
        Generate a trajectory through ``waypoints``.

        Args:
            waypoints: Robot poses to pass through, in field coordinates
            constraints: Timing constraints applied along the path
            start_velocity: Speed at the first waypoint (magnitude)
            end_velocity: Speed at the last waypoint (magnitude)
            max_velocity: Global speed ceiling
            max_acceleration: Global acceleration/deceleration bound
            reversed: Drive the path backwards. Waypoint headings are the
                robot's facing; the spline is fitted along the direction of
                travel and the result is expressed back in the robot's facing

        Returns:
            Trajectory with ``t = 0`` and ``s = 0`` at the first waypoint

        Raises:
            DegenerateSplineError: If the waypoints cannot be fitted
            InfeasibleConstraintsError: If the constraints admit no profile
        """
        started = time.perf_counter()

        if reversed:
            waypoints = [waypoint.transform_by(FLIP) for waypoint in waypoints]

        samples = fit(waypoints, self.max_dx, self.max_dy, self.max_dtheta)

        if reversed:
            samples = [sample.transform_by(FLIP) for sample in samples]

        trajectory = parameterize(
            DistanceView(samples),
            constraints,
            start_velocity,
            end_velocity,
            max_velocity,
            max_acceleration,
            reversed=reversed,
        )

        logger.info(
            "trajectory_generated",
            waypoints=len(waypoints),
            samples=len(trajectory),
            length=round(trajectory.length, 4),
            duration_s=round(trajectory.duration, 4),
            reversed=reversed,
            elapsed_ms=round((time.perf_counter() - started) * 1000.0, 2),
        )
        return trajectory

    def generate_from_config(
        self, waypoints: Sequence[Pose2d], config: GeneratorConfig
    ) -> Trajectory:
        """Generate using the limits, constraints and direction in ``config``."""
        limits = config.limits
        # The asymmetric bound is enforced by AccelerationLimitConstraint.
        global_acceleration = max(limits.max_acceleration, limits.max_deceleration or 0.0)
        return self.generate(
            waypoints,
            constraints_from_config(config),
            start_velocity=limits.start_velocity,
            end_velocity=limits.end_velocity,
            max_velocity=limits.max_velocity,
            max_acceleration=global_acceleration,
            reversed=config.reversed,
        )
