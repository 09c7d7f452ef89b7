"""
Time parameterization of a distance-indexed path.

Computes the fastest velocity profile that respects every timing constraint
with a forward pass (how fast the robot can be while accelerating from the
start) and a backward pass (how fast it may be while still able to decelerate
to the end velocity), merged by taking the minimum at each sample. Times and
accelerations follow from the merged profile under a constant-acceleration
model between samples.

Both passes are plain loops over the samples, so the floating-point operation
order, and therefore the result, is identical on every run.
"""

import math
from typing import Sequence

from waypath.core.exceptions import InfeasibleConstraintsError
from waypath.core.logging import get_logger
from waypath.geometry.pose import CurvedPose
from waypath.path.distance_view import DistanceView
from waypath.timing.constraints import (
    MinMaxAcceleration,
    TimingConstraint,
    combined_acceleration,
    combined_max_velocity,
)
from waypath.timing.state import TimedState
from waypath.trajectory.trajectory import Trajectory

logger = get_logger(__name__)

# Below this velocity sum a step is treated as a dwell (zero time delta).
VELOCITY_EPSILON = 1e-9


def _check_limits(
    start_velocity: float,
    end_velocity: float,
    max_velocity: float,
    max_acceleration: float,
) -> None:
    values = {
        "start_velocity": start_velocity,
        "end_velocity": end_velocity,
        "max_velocity": max_velocity,
        "max_acceleration": max_acceleration,
    }
    for name, value in values.items():
        if math.isnan(value) or value < 0.0:
            raise InfeasibleConstraintsError(
                f"{name} must be a non-negative number", details=values
            )
    for name in ("start_velocity", "end_velocity", "max_acceleration"):
        if math.isinf(values[name]):
            raise InfeasibleConstraintsError(f"{name} must be finite", details=values)


def _acceleration_range(
    constraints: Sequence[TimingConstraint],
    state: CurvedPose,
    velocity: float,
    limits: MinMaxAcceleration,
    index: int,
) -> MinMaxAcceleration:
    accel = combined_acceleration(constraints, state, velocity, limits)
    if not accel.valid:
        raise InfeasibleConstraintsError(
            "Acceleration constraints have an empty intersection",
            sample_index=index,
            details={
                "min_acceleration": accel.min_acceleration,
                "max_acceleration": accel.max_acceleration,
                "velocity": velocity,
            },
        )
    return accel


def _reachable(velocity: float, acceleration: float, ds: float, index: int) -> float:
    """Velocity after covering ``ds`` from ``velocity`` at ``acceleration``."""
    radicand = velocity * velocity + 2.0 * acceleration * ds
    if radicand < 0.0:
        raise InfeasibleConstraintsError(
            "Constraints demand a velocity change that cannot be reached",
            sample_index=index,
            details={"velocity": velocity, "acceleration": acceleration, "ds": ds},
        )
    return math.sqrt(radicand)


def velocity_ceilings(
    view: DistanceView,
    constraints: Sequence[TimingConstraint],
    max_velocity: float,
) -> list[float]:
    """Per-sample minimum of ``max_velocity`` and every constraint ceiling."""
    ceilings = []
    for index, state in enumerate(view.states):
        ceiling = combined_max_velocity(constraints, state, max_velocity)
        if math.isnan(ceiling) or ceiling < 0.0:
            raise InfeasibleConstraintsError(
                "Constraint produced an invalid velocity ceiling",
                sample_index=index,
                details={"ceiling": ceiling},
            )
        ceilings.append(ceiling)
    return ceilings


def forward_pass(
    view: DistanceView,
    constraints: Sequence[TimingConstraint],
    ceilings: Sequence[float],
    start_velocity: float,
    limits: MinMaxAcceleration,
) -> list[float]:
    """Velocities reachable accelerating from ``start_velocity``."""
    states = view.states
    velocities = [min(start_velocity, ceilings[0])]
    for i in range(len(states) - 1):
        ds = view.distance_at(i + 1) - view.distance_at(i)
        accel = _acceleration_range(constraints, states[i], velocities[i], limits, i)
        velocities.append(
            min(ceilings[i + 1], _reachable(velocities[i], accel.max_acceleration, ds, i))
        )
    return velocities


def backward_pass(
    view: DistanceView,
    constraints: Sequence[TimingConstraint],
    ceilings: Sequence[float],
    end_velocity: float,
    limits: MinMaxAcceleration,
) -> list[float]:
    """Velocities from which ``end_velocity`` can still be reached by decelerating."""
    states = view.states
    n = len(states)
    velocities = [0.0] * n
    velocities[-1] = min(end_velocity, ceilings[-1])
    for i in range(n - 1, 0, -1):
        ds = view.distance_at(i) - view.distance_at(i - 1)
        accel = _acceleration_range(constraints, states[i], velocities[i], limits, i)
        velocities[i - 1] = min(
            ceilings[i - 1], _reachable(velocities[i], -accel.min_acceleration, ds, i)
        )
    return velocities


def parameterize(
    view: DistanceView,
    constraints: Sequence[TimingConstraint],
    start_velocity: float,
    end_velocity: float,
    max_velocity: float,
    max_acceleration: float,
    reversed: bool = False,
) -> Trajectory:
    """
    Time-parameterize a distance-indexed path.

    Args:
        view: Dense samples indexed by arc length
        constraints: Timing constraints evaluated at every sample
        start_velocity: Requested speed at the first sample (magnitude)
        end_velocity: Requested speed at the last sample (magnitude)
        max_velocity: Global speed ceiling
        max_acceleration: Global bound on acceleration and deceleration
        reversed: The path is driven backwards; curvature and its derivative
            are negated and velocities and accelerations come out negative

    Returns:
        Trajectory starting at ``t = 0``

    Raises:
        InfeasibleConstraintsError: If no profile satisfies every constraint
    """
    _check_limits(start_velocity, end_velocity, max_velocity, max_acceleration)

    constraints = list(constraints)
    limits = MinMaxAcceleration(-max_acceleration, max_acceleration)
    ceilings = velocity_ceilings(view, constraints, max_velocity)

    forward = forward_pass(view, constraints, ceilings, start_velocity, limits)
    backward = backward_pass(view, constraints, ceilings, end_velocity, limits)
    velocities = [min(f, b) for f, b in zip(forward, backward)]

    if velocities[0] < forward[0]:
        logger.warning(
            "start_velocity_unreachable",
            requested=forward[0],
            achievable=velocities[0],
        )

    n = len(velocities)
    times = [0.0] * n
    accelerations = [0.0] * n
    for i in range(n - 1):
        ds = view.distance_at(i + 1) - view.distance_at(i)
        v_sum = velocities[i] + velocities[i + 1]
        if v_sum > VELOCITY_EPSILON:
            times[i + 1] = times[i] + 2.0 * ds / v_sum
        else:
            times[i + 1] = times[i]
            if ds > 0.0:
                logger.debug("zero_velocity_dwell", sample_index=i, ds=ds)
        if ds > 0.0:
            accelerations[i] = (velocities[i + 1] ** 2 - velocities[i] ** 2) / (2.0 * ds)
    if n > 1:
        accelerations[-1] = accelerations[-2]

    sign = -1.0 if reversed else 1.0
    timed_states = []
    for i, state in enumerate(view.states):
        timed_states.append(
            TimedState(
                state=state.flipped_curvature() if reversed else state,
                distance=view.distance_at(i),
                t=times[i],
                velocity=sign * velocities[i],
                acceleration=sign * accelerations[i],
            )
        )

    trajectory = Trajectory(timed_states)
    logger.debug(
        "trajectory_parameterized",
        samples=n,
        duration_s=trajectory.duration,
        length=trajectory.length,
        reversed=reversed,
    )
    return trajectory
