"""
Timing constraints for velocity-profile generation.

A constraint is a stateless policy that bounds the velocity and the
acceleration allowed at a path sample. Constraints are evaluated
independently; the integrator combines them by taking the minimum velocity
ceiling and intersecting the acceleration ranges, so adding a new constraint
type never requires changes to the integrator.

Example:
    >>> constraints = [
    ...     MaxVelocityConstraint(3.0),
    ...     CentripetalAccelerationConstraint(2.0),
    ... ]
    >>> combined_max_velocity(constraints, state, global_max=4.0)
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Iterable

from waypath.geometry.pose import CurvedPose


@dataclass(frozen=True)
class MinMaxAcceleration:
    """Closed acceleration interval ``[min_acceleration, max_acceleration]``."""

    min_acceleration: float = -math.inf
    max_acceleration: float = math.inf

    NO_LIMITS: ClassVar["MinMaxAcceleration"]

    @property
    def valid(self) -> bool:
        return self.min_acceleration <= self.max_acceleration

    def intersect(self, other: "MinMaxAcceleration") -> "MinMaxAcceleration":
        return MinMaxAcceleration(
            max(self.min_acceleration, other.min_acceleration),
            min(self.max_acceleration, other.max_acceleration),
        )

    def contains(self, acceleration: float, tolerance: float = 1e-9) -> bool:
        return (
            self.min_acceleration - tolerance
            <= acceleration
            <= self.max_acceleration + tolerance
        )


MinMaxAcceleration.NO_LIMITS = MinMaxAcceleration()


class TimingConstraint(ABC):
    """
    Abstract base class for timing constraints.

    Subclasses must not mutate the states they are given. Velocities passed
    in are magnitudes; the sign of travel is applied after integration.
    """

    @abstractmethod
    def max_velocity(self, state: CurvedPose) -> float:
        """
        Velocity ceiling at ``state``.

        Args:
            state: Path sample

        Returns:
            Non-negative velocity bound, or ``math.inf`` when unbounded
        """
        pass

    def min_max_acceleration(self, state: CurvedPose, velocity: float) -> MinMaxAcceleration:
        """
        Acceleration range allowed at ``state`` when moving at ``velocity``.

        The default places no bound on acceleration.
        """
        return MinMaxAcceleration.NO_LIMITS

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"{type(self).__name__}({fields})"


class MaxVelocityConstraint(TimingConstraint):
    """Constant velocity ceiling, independent of the path state."""

    def __init__(self, max_velocity: float):
        if max_velocity < 0.0:
            raise ValueError(f"max_velocity must be non-negative, got {max_velocity}")
        self.limit = max_velocity

    def max_velocity(self, state: CurvedPose) -> float:
        return self.limit


class CentripetalAccelerationConstraint(TimingConstraint):
    """
    Bounds lateral acceleration ``v**2 * |curvature|`` on curved sections.

    The ceiling is ``sqrt(max_centripetal_acceleration / |curvature|)`` and
    unbounded on straight sections.
    """

    def __init__(self, max_centripetal_acceleration: float):
        if max_centripetal_acceleration < 0.0:
            raise ValueError(
                "max_centripetal_acceleration must be non-negative, "
                f"got {max_centripetal_acceleration}"
            )
        self.max_centripetal_acceleration = max_centripetal_acceleration

    def max_velocity(self, state: CurvedPose) -> float:
        if state.curvature == 0.0:
            return math.inf
        return math.sqrt(self.max_centripetal_acceleration / abs(state.curvature))


class VelocityLimitRegionConstraint(TimingConstraint):
    """
    Velocity ceiling applied inside an axis-aligned rectangle of the field.

    Args:
        min_corner: ``(x, y)`` of the lower-left corner
        max_corner: ``(x, y)`` of the upper-right corner
        velocity_limit: Ceiling applied while the sample lies inside
    """

    def __init__(
        self,
        min_corner: tuple[float, float],
        max_corner: tuple[float, float],
        velocity_limit: float,
    ):
        if velocity_limit < 0.0:
            raise ValueError(f"velocity_limit must be non-negative, got {velocity_limit}")
        self.min_corner = (min(min_corner[0], max_corner[0]), min(min_corner[1], max_corner[1]))
        self.max_corner = (max(min_corner[0], max_corner[0]), max(min_corner[1], max_corner[1]))
        self.velocity_limit = velocity_limit

    def contains(self, state: CurvedPose) -> bool:
        return (
            self.min_corner[0] <= state.x <= self.max_corner[0]
            and self.min_corner[1] <= state.y <= self.max_corner[1]
        )

    def max_velocity(self, state: CurvedPose) -> float:
        return self.velocity_limit if self.contains(state) else math.inf


class AccelerationLimitConstraint(TimingConstraint):
    """
    Acceleration and deceleration bounds that do not depend on the state.

    Args:
        max_acceleration: Largest allowed speed-up rate
        max_deceleration: Largest allowed slow-down rate (magnitude);
            defaults to ``max_acceleration``
    """

    def __init__(self, max_acceleration: float, max_deceleration: float | None = None):
        if max_deceleration is None:
            max_deceleration = max_acceleration
        if max_acceleration < 0.0 or max_deceleration < 0.0:
            raise ValueError("Acceleration limits must be non-negative")
        self.max_acceleration = max_acceleration
        self.max_deceleration = max_deceleration

    def max_velocity(self, state: CurvedPose) -> float:
        return math.inf

    def min_max_acceleration(self, state: CurvedPose, velocity: float) -> MinMaxAcceleration:
        return MinMaxAcceleration(-self.max_deceleration, self.max_acceleration)


def combined_max_velocity(
    constraints: Iterable[TimingConstraint], state: CurvedPose, global_max: float = math.inf
) -> float:
    """Minimum of ``global_max`` and every constraint's ceiling at ``state``."""
    ceiling = global_max
    for constraint in constraints:
        ceiling = min(ceiling, constraint.max_velocity(state))
    return ceiling


def combined_acceleration(
    constraints: Iterable[TimingConstraint],
    state: CurvedPose,
    velocity: float,
    limits: MinMaxAcceleration = MinMaxAcceleration.NO_LIMITS,
) -> MinMaxAcceleration:
    """Intersection of ``limits`` with every constraint's range at ``(state, velocity)``."""
    result = limits
    for constraint in constraints:
        result = result.intersect(constraint.min_max_acceleration(state, velocity))
    return result
